import logging
import time
import numpy as np
import pandas as pd
import xgboost as xgb
from typing import Dict, Optional, Any
from sklearn.preprocessing import LabelEncoder

from .base_trainer import BaseTrainer
from .trainer_utils import TrainerUtils
from wle_framework.framework.data_classes import ModelTrainingResults
from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory


class XGBoostTrainer(BaseTrainer):
    """Gradient-boosted trees through the xgboost scikit-learn interface.

    xgboost needs integer class ids, so labels are encoded before fitting and
    decoded again in predict.
    """

    def __init__(self, config: BaseConfigManager, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory):
        """Initialize XGBoost trainer with configuration."""
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler
        self._model_cfg = config.core.model_testing_config
        self.random_state = getattr(config, 'random_state', 42)
        self.utils = TrainerUtils(
            app_logger,
            error_handler,
            n_splits=getattr(self._model_cfg, 'n_splits', 5),
            random_state=self.random_state,
            n_jobs=getattr(self._model_cfg, 'n_jobs', None),
            scoring=getattr(self._model_cfg, 'scoring', 'accuracy')
        )

        self.app_logger.structured_log(logging.INFO, "XGBoostTrainer initialized successfully",
                                     trainer_type=type(self).__name__)
        
    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    @log_performance
    def train(self, X_train: pd.DataFrame, y_train: pd.Series, model_params: Dict[str, Any],
              results: ModelTrainingResults, param_grid: Optional[Dict[str, Any]] = None) -> ModelTrainingResults:
        """Fit an XGBoost classifier, optionally selecting parameters by cross-validation."""
        try:
            self.app_logger.structured_log(
                logging.INFO, 
                "Starting XGBoost training", 
                input_shape=X_train.shape,
                model_name=results.model_name,
                cross_validation=param_grid is not None
            )

            start_time = time.time()
            label_encoder = LabelEncoder()
            y_encoded = label_encoder.fit_transform(y_train)

            model_params = dict(model_params)
            model_params.setdefault('random_state', self.random_state)
            model_params.setdefault('eval_metric', 'mlogloss')
            model = xgb.XGBClassifier(**model_params)

            results.algorithm = type(model).__name__
            results.model_params = model_params
            results.feature_names = X_train.columns.tolist()
            results.label_encoder = label_encoder

            if param_grid is not None:
                model = self.utils.fit_with_cross_validation(model, X_train, y_encoded, param_grid, results)
            else:
                model.fit(X_train, y_encoded)

            results.training_seconds = time.time() - start_time
            results.model = model
            results.classes = list(label_encoder.classes_)
            self.utils.calculate_feature_importance(model, X_train.shape[1], results)

            self.app_logger.structured_log(
                logging.INFO,
                "XGBoost training completed",
                model_name=results.model_name,
                training_seconds=results.training_seconds,
                cv_accuracy=results.cv_accuracy
            )
            return results

        except Exception as e:
            raise self.error_handler.create_error_handler(
                'model_training',
                "Error in XGBoost model training",
                error_message=str(e),
                model_name=results.model_name,
                dataframe_shape=X_train.shape
            )

    def predict(self, results: ModelTrainingResults, X: pd.DataFrame) -> np.ndarray:
        encoded = np.asarray(results.model.predict(X[results.feature_names])).astype(int)
        return results.label_encoder.inverse_transform(encoded)
