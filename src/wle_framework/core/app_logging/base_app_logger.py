from abc import ABC, abstractmethod
from typing import Callable, Optional
import logging
import contextlib

from wle_framework.core.config_management.base_config_manager import BaseConfigManager

class BaseAppLogger(ABC):
    """
    Logging interface shared by every pipeline component.

    Components never call the logging module directly. They log through
    structured_log with keyword context, wrap stage methods in log_performance,
    and scope per-run context with log_context. Nothing can be logged until
    setup has attached handlers.
    """

    logger: Optional[logging.Logger] = None

    @abstractmethod
    def __init__(self, config: BaseConfigManager):
        pass

    @property
    def is_ready(self) -> bool:
        """True once setup has attached handlers."""
        return self.logger is not None

    @abstractmethod
    def setup(self, log_file: str) -> logging.Logger:
        """Attach the file and console handlers, replacing any from an earlier run."""
        pass

    @abstractmethod
    def structured_log(self, level: int, message: str, **kwargs) -> None:
        """Log a message with keyword context. Raises RuntimeError before setup."""
        pass

    @abstractmethod
    def log_performance(self, func: Callable) -> Callable:
        """Wrap func so its duration and outcome are logged."""
        pass

    @abstractmethod
    def log_context(self, **kwargs) -> contextlib.AbstractContextManager:
        """Add context to every log record written inside the block."""
        pass
