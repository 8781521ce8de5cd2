from abc import ABC, abstractmethod
import logging
import matplotlib.pyplot as plt
from types import SimpleNamespace
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.core.config_management.base_config_manager import BaseConfigManager

class BaseChart(ABC):
    chart_key = ''

    def __init__(self,
                 config: BaseConfigManager,
                 app_logger: BaseAppLogger,
                 error_handler: ErrorHandlerFactory):
        """
        Initialize chart with required dependencies.
        
        Args:
            config: Configuration manager
            app_logger: Application logger for structured logging
            error_handler: Error handler for standardized error management
        """
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler

        chart_options = getattr(getattr(config, 'core', None), 'chart_options', None)
        self.chart_config = getattr(chart_options, self.chart_key, None) or SimpleNamespace()
        
        self.app_logger.structured_log(
            logging.INFO,
            f"{self.__class__.__name__} initialized"
        )

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    @abstractmethod
    def create_figure(self, **kwargs) -> plt.Figure:
        """
        Create and return a figure.
        
        Args:
            **kwargs: Chart-specific parameters
            
        Returns:
            A matplotlib Figure object
        """
        pass
