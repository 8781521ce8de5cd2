"""
Column cleaning for the exercise measurement tables.

The cleaner learns which columns to keep from the training subset only:
    - identifier columns (the first N positions: row index, subject, timestamps)
    - near-zero-variance columns
    - columns containing any missing value
are dropped, and the resulting column set is applied verbatim to the
validation subset and the quiz set so no statistic of those tables leaks
into the selection.
"""

import logging
from typing import List, Optional, Tuple
import pandas as pd

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.framework.data_classes import CleaningResults, CleaningStep

from .base_preprocessor import BasePreprocessor
from .variance_metrics import (
    DEFAULT_FREQ_CUT,
    DEFAULT_UNIQUE_CUT,
    compute_near_zero_variance_metrics
)


class DataCleaner(BasePreprocessor):
    def __init__(self, config: BaseConfigManager, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory):
        """
        Initialize DataCleaner with dependencies.

        Args:
            config: Configuration manager
            app_logger: Application logger for structured logging
            error_handler: Error handler factory for standardized error management
        """
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler

        self.label_column = config.target_column
        cleaning_cfg = config.core.preprocessing_config
        self.identifier_column_count = int(getattr(cleaning_cfg, 'identifier_column_count', 0))
        nzv_cfg = getattr(cleaning_cfg, 'near_zero_variance', None)
        self.freq_cut = float(getattr(nzv_cfg, 'freq_cut', DEFAULT_FREQ_CUT))
        self.unique_cut = float(getattr(nzv_cfg, 'unique_cut', DEFAULT_UNIQUE_CUT))
        self.drop_missing = bool(getattr(cleaning_cfg, 'drop_columns_with_missing_values', True))

        self.results: Optional[CleaningResults] = None

        self.app_logger.structured_log(
            logging.INFO,
            "DataCleaner initialized",
            identifier_column_count=self.identifier_column_count,
            freq_cut=self.freq_cut,
            unique_cut=self.unique_cut
        )

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    @log_performance
    def fit_transform(self, df: pd.DataFrame) -> Tuple[pd.DataFrame, CleaningResults]:
        """
        Compute the column selection from the training subset and apply it.

        Args:
            df: Training subset including the label column

        Returns:
            Tuple of the cleaned training subset and the cleaning results

        Raises:
            DataCleaningError: If the label column is absent or would be dropped.
        """
        self.app_logger.structured_log(logging.INFO, "Starting column cleaning", input_shape=df.shape)

        if self.label_column not in df.columns:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                f"Label column '{self.label_column}' not found",
                dataframe_shape=df.shape
            )

        try:
            results = CleaningResults(
                original_columns=df.columns.tolist(),
                label_column=self.label_column
            )
            remaining = df.columns.tolist()

            identifiers = remaining[:self.identifier_column_count]
            results.add_step(CleaningStep(
                name='identifier',
                dropped_columns=identifiers,
                parameters={'identifier_column_count': self.identifier_column_count}
            ))
            remaining = [c for c in remaining if c not in identifiers]

            variance_metrics = compute_near_zero_variance_metrics(
                df[remaining], freq_cut=self.freq_cut, unique_cut=self.unique_cut
            )
            results.variance_metrics = variance_metrics
            near_zero = variance_metrics.index[variance_metrics['nzv']].tolist()
            results.add_step(CleaningStep(
                name='near_zero_variance',
                dropped_columns=near_zero,
                parameters={'freq_cut': self.freq_cut, 'unique_cut': self.unique_cut}
            ))
            remaining = [c for c in remaining if c not in near_zero]

            with_missing = []
            if self.drop_missing:
                missing_counts = df[remaining].isna().sum()
                with_missing = missing_counts.index[missing_counts > 0].tolist()
            results.add_step(CleaningStep(
                name='missing_values',
                dropped_columns=with_missing,
                parameters={'enabled': self.drop_missing}
            ))
            remaining = [c for c in remaining if c not in with_missing]

        except Exception as e:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                "Error computing column selection",
                error_message=str(e),
                dataframe_shape=df.shape
            )

        for step in results.steps:
            if self.label_column in step.dropped_columns:
                raise self.error_handler.create_error_handler(
                    'data_cleaning',
                    f"Label column '{self.label_column}' would be dropped by the {step.name} rule",
                    step=step.name
                )

        results.retained_columns = remaining
        cleaned = df[remaining].copy()
        results.final_shape = cleaned.shape
        self.results = results

        self.app_logger.structured_log(
            logging.INFO,
            "Column cleaning completed",
            **results.summarize()
        )

        return cleaned, results

    @log_performance
    def transform(self, df: pd.DataFrame, require_label: bool = True,
                  passthrough_columns: Optional[List[str]] = None) -> pd.DataFrame:
        """
        Reduce another table to the column set learned by fit_transform.

        Args:
            df: Validation subset or quiz set
            require_label: Whether the label column must be present and kept
            passthrough_columns: Extra columns carried through unchecked (e.g. quiz ids)

        Returns:
            The reduced table

        Raises:
            DataCleaningError: If the cleaner is not fitted, a retained column is
                absent, or a retained column contains missing values.
        """
        if self.results is None:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                "DataCleaner must be fitted before transform"
            )

        columns = self.results.retained_columns if require_label else self.results.feature_columns
        absent = [c for c in columns if c not in df.columns]
        if absent:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                "Table is missing retained columns",
                missing_columns=absent
            )

        missing_counts = df[columns].isna().sum()
        with_missing = missing_counts.index[missing_counts > 0].tolist()
        if with_missing:
            raise self.error_handler.create_error_handler(
                'data_cleaning',
                "Retained columns contain missing values",
                columns_with_missing=with_missing
            )

        extra = [c for c in (passthrough_columns or []) if c in df.columns and c not in columns]
        cleaned = df[columns + extra].copy()

        self.app_logger.structured_log(
            logging.INFO,
            "Applied column selection",
            input_shape=df.shape,
            output_shape=cleaned.shape
        )
        return cleaned
