"""
Train/validation partitioning of the labelled table.

The split is stratified on the label so every class keeps its share in both
subsets, and seeded so a run can be reproduced.
"""

import logging
from typing import Tuple
import pandas as pd
from sklearn.model_selection import train_test_split

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory


class DataSplitter:
    def __init__(self, config: BaseConfigManager, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory):
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler
        self._model_cfg = config.core.model_testing_config

        self.training_fraction = float(getattr(self._model_cfg, 'training_fraction', 0.75))
        self.random_state = getattr(config, 'random_state', 42)
        self.label_column = config.target_column

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    @log_performance
    def split(self, df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """
        Split df into (train, validation) subsets.

        Args:
            df: Labelled table

        Returns:
            Tuple of training and validation DataFrames

        Raises:
            DataCleaningError: If the fraction is invalid, the label column is
                missing, or the library cannot stratify the table.
        """
        if not 0.0 < self.training_fraction < 1.0:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                "Training fraction must lie strictly between 0 and 1",
                training_fraction=self.training_fraction
            )
        if self.label_column not in df.columns:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                f"Label column '{self.label_column}' not found",
                available_columns=len(df.columns)
            )

        try:
            train_df, validation_df = train_test_split(
                df,
                train_size=self.training_fraction,
                stratify=df[self.label_column],
                random_state=self.random_state
            )
        except ValueError as e:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                "Error splitting data into training and validation subsets",
                error_message=str(e),
                dataframe_shape=df.shape
            )

        self.app_logger.structured_log(
            logging.INFO,
            "Data split into training and validation subsets",
            training_fraction=self.training_fraction,
            training_shape=train_df.shape,
            validation_shape=validation_df.shape,
            training_class_counts=train_df[self.label_column].value_counts().sort_index().to_dict()
        )

        return train_df, validation_df
