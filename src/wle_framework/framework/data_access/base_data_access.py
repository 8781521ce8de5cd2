"""
base_data_access.py

This file contains abstract base classes for data access operations.
These classes define the interface for data access operations, which can be implemented
by concrete classes for different data sources (e.g., CSV files, databases, APIs).
"""

from abc import ABC, abstractmethod
from typing import Optional, Union
from pathlib import Path
import pandas as pd

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.app_file_handling.base_app_file_handler import BaseAppFileHandler
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory


class BaseDataAccess(ABC):

    @abstractmethod
    def __init__(self, config: BaseConfigManager, app_logger: BaseAppLogger, 
                 app_file_handler: BaseAppFileHandler, error_handler: ErrorHandlerFactory):
        pass

    @abstractmethod
    def load_dataframe(self, source: str, cache_file_name: Optional[str] = None) -> pd.DataFrame:
        """
        Load a table from a URL or local path.

        Args:
            source: URL or path of the table.
            cache_file_name: Name of the local copy in the raw data directory, if caching.

        Returns:
            pd.DataFrame: The loaded table.
        """
        pass

    @abstractmethod
    def load_training_data(self) -> pd.DataFrame:
        """Load the labelled training table from its configured location."""
        pass

    @abstractmethod
    def load_quiz_data(self) -> pd.DataFrame:
        """Load the unlabelled quiz table from its configured location."""
        pass

    @abstractmethod
    def save_dataframe(self, df: pd.DataFrame, path: Union[str, Path]) -> None:
        """Save a dataframe to CSV."""
        pass
