from abc import ABC, abstractmethod
import logging
from typing import Any, Dict
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger

class BaseErrorHandler(ABC, Exception):
    """
    Base for pipeline stage errors.

    An error logs itself as soon as it is constructed, so the stage that raises it
    only has to supply a message and context. Each concrete error names the
    process exit code the command line entry point should use.
    """
    exit_code: int = 1

    def __init__(self, message: str, app_logger: BaseAppLogger, log_level: int = logging.ERROR, **kwargs):
        self.app_logger = app_logger
        self.message = message
        self.log_level = log_level
        self.additional_info = kwargs
        self.log()
        Exception.__init__(self, message)

    def context(self) -> Dict[str, Any]:
        """Context recorded with the error: the caller's keyword arguments plus the error class name."""
        return {**self.additional_info, 'error_type': self.__class__.__name__}

    @abstractmethod
    def log(self) -> None:
        """Write the error to the application log."""
        pass
