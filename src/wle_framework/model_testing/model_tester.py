"""
Model testing: fits each configured classifier on the cleaned training subset
and scores it against the cleaned validation subset.
"""

import logging
from typing import Any, Dict, Optional, Tuple
from types import SimpleNamespace
import numpy as np
import pandas as pd

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.framework.data_classes import ModelTrainingResults
from wle_framework.framework.data_classes.metrics import calculate_classification_evaluation_metrics

from .base_model_testing import BaseModelTester
from .trainers.base_trainer import BaseTrainer


def namespace_to_dict(value: Any) -> Any:
    """Recursively turn config namespaces back into plain dictionaries."""
    if isinstance(value, SimpleNamespace):
        return {k: namespace_to_dict(v) for k, v in vars(value).items()}
    if isinstance(value, list):
        return [namespace_to_dict(v) for v in value]
    return value


class ModelTester(BaseModelTester):
    def __init__(self, 
                 config: BaseConfigManager,
                 trainers: Dict[str, BaseTrainer],
                 app_logger: BaseAppLogger,
                 error_handler: ErrorHandlerFactory):
        """
        Initialize the ModelTester with injected dependencies.

        Args:
            config: Configuration manager
            trainers: Dictionary mapping model names to their trainers
            app_logger: Application logger
            error_handler: Error handling utility
        """
        self.config = config
        self._model_cfg = config.core.model_testing_config
        self.trainers = trainers
        self.app_logger = app_logger
        self.error_handler = error_handler
        self.label_column = config.target_column

        self.app_logger.structured_log(logging.INFO, "ModelTester initialized",
                                     config_type=type(config).__name__,
                                     available_trainers=list(trainers.keys()))

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    def get_model_config(self, model_name: str) -> Optional[SimpleNamespace]:
        """Get model-specific configuration."""
        return getattr(self.config.core.models, model_name, None)

    def prepare_features(self, df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.Series]:
        """
        Split a cleaned table into numeric features and labels.

        Raises:
            ModelTrainingError: If the label is absent or a feature is not numeric.
        """
        if self.label_column not in df.columns:
            raise self.error_handler.create_error_handler(
                'model_training',
                f"Label column '{self.label_column}' not found",
                dataframe_shape=df.shape
            )

        y = df[self.label_column]
        X = df.drop(columns=[self.label_column])

        non_numeric = X.select_dtypes(exclude='number').columns.tolist()
        if non_numeric:
            raise self.error_handler.create_error_handler(
                'model_training',
                "Features must be numeric",
                non_numeric_columns=non_numeric
            )
        return X, y

    @log_performance
    def train_model(self, model_name: str, X: pd.DataFrame, y: pd.Series) -> ModelTrainingResults:
        """Fit one configured model, with k-fold cross-validation when the model enables it."""
        if model_name not in self.trainers:
            raise self.error_handler.create_error_handler(
                'model_training',
                f"No trainer configured for model {model_name}",
                available_trainers=list(self.trainers.keys())
            )

        model_cfg = self.get_model_config(model_name)
        model_params = namespace_to_dict(getattr(model_cfg, 'params', None)) or {}
        param_grid = None
        if getattr(model_cfg, 'cross_validation', False):
            param_grid = namespace_to_dict(getattr(model_cfg, 'param_grid', None)) or {}

        results = ModelTrainingResults(
            model_name=model_name,
            display_name=getattr(model_cfg, 'display_name', model_name)
        )

        with self.app_logger.log_context(model_name=model_name):
            results = self.trainers[model_name].train(X, y, model_params, results, param_grid=param_grid)

        return results

    @log_performance
    def train_all(self, X: pd.DataFrame, y: pd.Series) -> Dict[str, ModelTrainingResults]:
        """Fit every configured model independently; the first failure aborts the run."""
        results_by_model = {}
        for model_name in self.trainers:
            results_by_model[model_name] = self.train_model(model_name, X, y)
        return results_by_model

    def predict(self, results: ModelTrainingResults, X: pd.DataFrame) -> np.ndarray:
        return self.trainers[results.model_name].predict(results, X)

    @log_performance
    def evaluate(self, results: ModelTrainingResults, X_val: pd.DataFrame, y_val: pd.Series) -> ModelTrainingResults:
        """
        Score a fitted model on the validation subset.

        The confusion matrix covers the union of the training classes and the
        validation labels, so its totals always equal the validation size.
        """
        try:
            predictions = self.predict(results, X_val)
            labels = sorted(set(results.classes) | set(pd.unique(y_val)))

            results.predictions = predictions
            results.metrics = calculate_classification_evaluation_metrics(
                y_val.to_numpy(), predictions, labels=labels
            )

            self.app_logger.structured_log(
                logging.INFO,
                "Model evaluated on validation subset",
                **results.summary()
            )
            return results

        except Exception as e:
            raise self.error_handler.create_error_handler(
                'model_evaluation',
                "Error evaluating model",
                error_message=str(e),
                model_name=results.model_name,
                dataframe_shape=X_val.shape
            )

    def evaluate_all(self, results_by_model: Dict[str, ModelTrainingResults],
                     X_val: pd.DataFrame, y_val: pd.Series) -> Dict[str, ModelTrainingResults]:
        return {name: self.evaluate(results, X_val, y_val) for name, results in results_by_model.items()}
