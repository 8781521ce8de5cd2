from dependency_injector import containers, providers

# concrete classes
from wle_framework.core.config_management.config_manager import ConfigManager
from wle_framework.core.app_logging.app_logger import AppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.core.app_file_handling.app_file_handler import LocalAppFileHandler
from wle_framework.framework.data_access.csv_data_access import CSVDataAccess

class CommonDIContainer(containers.DeclarativeContainer):
    """Container for common application dependencies."""

    # None selects the directory named in config_path.yaml
    config_dir = providers.Object(None)
    
    # Core file handling
    app_file_handler: providers.Provider[LocalAppFileHandler] = providers.Singleton(
        LocalAppFileHandler
    )
    
    # Configuration management
    config: providers.Provider[ConfigManager] = providers.Singleton(
        ConfigManager,
        config_dir=config_dir,
        app_file_handler=app_file_handler
    )
    
    app_logger: providers.Provider[AppLogger] = providers.Singleton(
        AppLogger,
        config=config
    )
    
    error_handler_factory: providers.Provider[ErrorHandlerFactory] = providers.Singleton(
        ErrorHandlerFactory,
        app_logger=app_logger  
    )
    
    data_access: providers.Provider[CSVDataAccess] = providers.Singleton(
        CSVDataAccess,
        config=config,
        app_logger=app_logger,
        app_file_handler=app_file_handler,
        error_handler=error_handler_factory
    )
