"""Correlation analysis of the cleaned feature set."""

import logging
import numpy as np
import pandas as pd

from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory


class CorrelationExplorer:
    def __init__(self, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory):
        self.app_logger = app_logger
        self.error_handler = error_handler

    def correlation_matrix(self, X: pd.DataFrame, method: str = 'pearson') -> pd.DataFrame:
        numeric = X.select_dtypes(include='number')
        corr = numeric.corr(method=method)
        self.app_logger.structured_log(
            logging.INFO,
            "Correlation matrix computed",
            method=method,
            n_features=corr.shape[0]
        )
        return corr

    def high_correlation_pairs(self, corr: pd.DataFrame, threshold: float = 0.8) -> pd.DataFrame:
        """
        Feature pairs whose absolute correlation exceeds threshold.

        Each pair appears once. Sorted by absolute correlation, strongest first.
        """
        values = corr.to_numpy()
        upper_i, upper_j = np.triu_indices_from(values, k=1)
        pairs = pd.DataFrame({
            'feature_1': corr.index[upper_i],
            'feature_2': corr.columns[upper_j],
            'correlation': values[upper_i, upper_j]
        })
        pairs = pairs[pairs['correlation'].abs() > threshold]
        pairs = pairs.reindex(pairs['correlation'].abs().sort_values(ascending=False).index)
        return pairs.reset_index(drop=True)

    @staticmethod
    def order_by_first_principal_component(corr: pd.DataFrame) -> pd.DataFrame:
        """Reorder rows and columns by the loadings of the first principal component."""
        filled = corr.fillna(0.0)
        eigenvalues, eigenvectors = np.linalg.eigh(filled.to_numpy())
        first_component = eigenvectors[:, np.argmax(eigenvalues)]
        order = np.argsort(first_component)
        columns = corr.columns[order]
        return corr.loc[columns, columns]
