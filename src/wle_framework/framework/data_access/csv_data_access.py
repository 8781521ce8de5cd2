"""
csv_data_access.py

Concrete implementation of the BaseDataAccess class for loading the exercise tables from CSV,
either from their remote locations or from a local copy kept in the raw data directory.
"""

import logging
from pathlib import Path
from typing import Optional, Union, List
import pandas as pd

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.framework.data_access.base_data_access import BaseDataAccess
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.app_file_handling.base_app_file_handler import BaseAppFileHandler
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory

DEFAULT_NA_VALUES = ["NA", "#DIV/0!", ""]


class CSVDataAccess(BaseDataAccess):
    def __init__(self, config: BaseConfigManager, app_logger: BaseAppLogger, 
                 app_file_handler: BaseAppFileHandler, error_handler: ErrorHandlerFactory):
        """
        Initialize the DataAccess object with the given configuration and logger.

        Args:
            config (BaseConfigManager): The configuration object.
            app_logger (BaseAppLogger): The logger object.
            app_file_handler (BaseAppFileHandler): The file handler object.
            error_handler (ErrorHandlerFactory): Factory for stage errors.

        Raises:
            ConfigurationError: If the data access configuration is missing.
        """
        self.config = config
        self.app_logger = app_logger
        self.app_file_handler = app_file_handler
        self.error_handler = error_handler
        try:
            self._data_cfg = config.core.data_access_config
        except AttributeError as e:
            raise self.error_handler.create_error_handler(
                'configuration',
                f"Missing required configuration: {str(e)}"
            )

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    def _na_values(self) -> List[str]:
        return list(getattr(self._data_cfg, 'na_values', DEFAULT_NA_VALUES))

    def _cache_path(self, cache_file_name: Optional[str]) -> Optional[Path]:
        if not cache_file_name or not getattr(self._data_cfg, 'use_cached_data', False):
            return None
        return Path(self._data_cfg.raw_data_directory) / cache_file_name

    @log_performance
    def load_dataframe(self, source: str, cache_file_name: Optional[str] = None) -> pd.DataFrame:
        """
        Load a table from a URL or local path, using the cached copy when one exists.

        Args:
            source (str): URL or path of the CSV file.
            cache_file_name (str, optional): Name of the cached copy in the raw data directory.

        Returns:
            pd.DataFrame: The loaded table with the configured missing-value sentinels as NaN.

        Raises:
            DataLoadError: If the table cannot be fetched or parsed.
        """
        cache_path = self._cache_path(cache_file_name)
        try:
            if cache_path is not None and cache_path.exists():
                self.app_logger.structured_log(logging.INFO, "Loading cached data",
                                               cache_path=str(cache_path))
                df = self.app_file_handler.read_csv(cache_path, na_values=self._na_values())
            else:
                self.app_logger.structured_log(logging.INFO, "Fetching data", source=source)
                df = pd.read_csv(source, na_values=self._na_values())
                if cache_path is not None:
                    self.app_file_handler.ensure_directory(cache_path.parent)
                    self.app_file_handler.write_csv(df, cache_path)

            self.app_logger.structured_log(logging.INFO, "Data loaded successfully",
                                           source=source, shape=df.shape)
            return df

        except Exception as e:
            raise self.error_handler.create_error_handler(
                'data_load',
                f"Error loading data from {source}",
                error_message=str(e),
                cache_path=str(cache_path) if cache_path else None
            )

    def load_training_data(self) -> pd.DataFrame:
        return self.load_dataframe(self._data_cfg.training_data_source,
                                   getattr(self._data_cfg, 'training_data_file', None))

    def load_quiz_data(self) -> pd.DataFrame:
        return self.load_dataframe(self._data_cfg.quiz_data_source,
                                   getattr(self._data_cfg, 'quiz_data_file', None))

    @log_performance
    def save_dataframe(self, df: pd.DataFrame, path: Union[str, Path]) -> None:
        try:
            path = Path(path)
            self.app_file_handler.ensure_directory(path.parent)
            self.app_file_handler.write_csv(df, path)
            self.app_logger.structured_log(logging.INFO, "Dataframe saved successfully",
                                           path=str(path), shape=df.shape)
        except Exception as e:
            raise self.error_handler.create_error_handler(
                'data_storage',
                f"Error saving dataframe: {str(e)}",
                path=str(path)
            )
