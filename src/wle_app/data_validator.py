import logging
from typing import List
import pandas as pd

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory


class DataValidator:
    def __init__(self, config: BaseConfigManager, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory):
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler

        self.label_column = config.target_column
        self.class_labels: List[str] = [str(c) for c in getattr(config, 'class_labels', [])]
        self.quiz_id_column = getattr(config, 'quiz_id_column', 'problem_id')

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    def _fail(self, message: str, **kwargs):
        raise self.error_handler.create_error_handler('data_validation', message, **kwargs)

    @log_performance
    def validate_training_data(self, df: pd.DataFrame) -> bool:
        """
        Check the labelled table: non-empty, label present and complete,
        labels drawn from the configured classes.

        Raises:
            DataValidationError: On the first failed check.
        """
        if df.empty:
            self._fail("Training data is empty")
        if self.label_column not in df.columns:
            self._fail(f"Training data has no '{self.label_column}' column", n_columns=len(df.columns))

        n_missing = int(df[self.label_column].isna().sum())
        if n_missing:
            self._fail("Training labels contain missing values", missing_labels=n_missing)

        if self.class_labels:
            unexpected = sorted(set(df[self.label_column].astype(str)) - set(self.class_labels))
            if unexpected:
                self._fail("Training labels outside the configured classes",
                           unexpected_labels=unexpected, expected_labels=self.class_labels)

        self.app_logger.structured_log(
            logging.INFO,
            "Training data validated",
            shape=df.shape,
            class_counts=df[self.label_column].value_counts().sort_index().to_dict()
        )
        return True

    @log_performance
    def validate_quiz_data(self, df: pd.DataFrame) -> bool:
        """
        Check the unlabelled quiz table: non-empty, carrying its id column and no label column.

        Raises:
            DataValidationError: On the first failed check.
        """
        if df.empty:
            self._fail("Quiz data is empty")
        if self.quiz_id_column not in df.columns:
            self._fail(f"Quiz data has no '{self.quiz_id_column}' column", n_columns=len(df.columns))
        if self.label_column in df.columns:
            self._fail(f"Quiz data must not carry the '{self.label_column}' column")

        self.app_logger.structured_log(logging.INFO, "Quiz data validated", shape=df.shape)
        return True
