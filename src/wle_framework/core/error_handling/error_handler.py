from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from .base_error_handler import BaseErrorHandler
import logging

class ErrorHandler(BaseErrorHandler):
    """Error raised by a pipeline stage. Unclassified failures exit with code 1."""

    def __init__(self, message: str, app_logger: BaseAppLogger, log_level=logging.ERROR, **kwargs):
        super().__init__(message=message, app_logger=app_logger, log_level=log_level, **kwargs)

    def log(self) -> None:
        """Implementation of abstract log method"""
        self.app_logger.structured_log(
            self.log_level, 
            self.message,
            **self.context()
        )

class ConfigurationError(ErrorHandler):
    """Raised when there's an error in the configuration."""
    exit_code = 2

class DataLoadError(ErrorHandler):
    """Raised when a dataset cannot be fetched or parsed."""
    exit_code = 3

class DataValidationError(ErrorHandler):
    """Raised when data validation fails."""
    exit_code = 4

class DataCleaningError(ErrorHandler):
    """Raised when splitting or cleaning the data fails."""
    exit_code = 5

class ModelTrainingError(ErrorHandler):
    """Raised when a model cannot be fitted."""
    exit_code = 6

class ModelEvaluationError(ErrorHandler):
    """Raised when a fitted model cannot be scored."""
    exit_code = 7

class ModelSelectionError(ErrorHandler):
    """Raised when no model can be selected."""
    exit_code = 8

class ChartCreationError(ErrorHandler):
    """Raised when there's an error in the chart creation process."""
    exit_code = 9

class ReportGenerationError(ErrorHandler):
    """Raised when the report cannot be rendered or written."""
    exit_code = 10

class DataStorageError(ErrorHandler):
    """Raised when there's an error storing or retrieving data."""
    exit_code = 11
