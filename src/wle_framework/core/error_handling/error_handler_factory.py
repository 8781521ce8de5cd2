from typing import Optional
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler import (
    ErrorHandler,
    ConfigurationError,
    DataLoadError,
    DataValidationError,
    DataCleaningError,
    ModelTrainingError,
    ModelEvaluationError,
    ModelSelectionError,
    ChartCreationError,
    ReportGenerationError,
    DataStorageError
)

class ErrorHandlerFactory:
    """Factory for creating error handler instances with proper logging configuration."""
    
    def __init__(self, app_logger: BaseAppLogger):
        """
        Initialize the error handler factory.
        
        Args:
            app_logger (BaseAppLogger): Logger instance to be injected into error handlers
        """
        self.app_logger = app_logger
        self._error_classes = {
            # Core errors
            'configuration': ConfigurationError,
            
            # Data related errors
            'data_load': DataLoadError,
            'data_validation': DataValidationError,
            'data_cleaning': DataCleaningError,
            'data_storage': DataStorageError,
            
            # Modelling errors
            'model_training': ModelTrainingError,
            'model_evaluation': ModelEvaluationError,
            'model_selection': ModelSelectionError,
            
            # Output errors
            'chart_creation': ChartCreationError,
            'report_generation': ReportGenerationError,
        }
    
    def create_error_handler(
        self,
        error_type: str,
        message: str,
        log_level: Optional[int] = None,
        **kwargs
    ) -> ErrorHandler:
        """
        Create an error handler instance of the specified type.
        """
        if error_type not in self._error_classes:
            valid_types = ", ".join(sorted(self._error_classes.keys()))
            raise ValueError(
                f"Unknown error type: {error_type}. "
                f"Valid types are: {valid_types}"
            )
        
        error_class = self._error_classes[error_type]
        
        if log_level is not None:
            return error_class(
                message=message,
                app_logger=self.app_logger,
                log_level=log_level,
                **kwargs
            )
        else:
            return error_class(
                message=message,
                app_logger=self.app_logger,
                **kwargs
            )
