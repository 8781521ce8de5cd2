import logging
import time
import numpy as np
import pandas as pd
from typing import Dict, Optional, Any
from sklearn.base import BaseEstimator
from sklearn.ensemble import RandomForestClassifier
from sklearn.tree import DecisionTreeClassifier

from .base_trainer import BaseTrainer
from .trainer_utils import TrainerUtils
from wle_framework.framework.data_classes import ModelTrainingResults
from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory

class SKLearnTrainer(BaseTrainer):
    model_registry = {
        'randomforest': RandomForestClassifier,
        'decisiontree': DecisionTreeClassifier,
    }

    def __init__(self, 
                config: BaseConfigManager, 
                app_logger: BaseAppLogger, 
                error_handler: ErrorHandlerFactory,
                model_type: Optional[str] = None):
        """
        Initialize SKLearn trainer with configuration and dependencies.
        
        Args:
            config: Configuration manager
            app_logger: Application logger
            error_handler: Error handler
            model_type: Type of sklearn model ('randomforest' or 'decisiontree')
        """
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler
        self.model_type = model_type
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
        
        self.app_logger.structured_log(
            logging.INFO, 
            "SKLearnTrainer initialized successfully",
            trainer_type=type(self).__name__,
            model_type=model_type
        )

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper                                                                  

    def _initialize_model(self, model_params: Dict) -> BaseEstimator:
        """Initialize a scikit-learn model with proper error handling."""
        try:
            if self.model_type not in self.model_registry:
                raise ValueError(f"Unknown model: {self.model_type}")

            model_params = dict(model_params)
            model_params.setdefault('random_state', self.random_state)
            return self.model_registry[self.model_type](**model_params)

        except Exception as e:
            raise self.error_handler.create_error_handler(
                'model_training',
                "Error initializing SKLearn model",
                error_message=str(e),
                model_type=self.model_type
            )

    @log_performance
    def train(self, X_train: pd.DataFrame, y_train: pd.Series, model_params: Dict[str, Any],
              results: ModelTrainingResults, param_grid: Optional[Dict[str, Any]] = None) -> ModelTrainingResults:
        """Fit a scikit-learn classifier, optionally selecting parameters by cross-validation."""
        self.app_logger.structured_log(
            logging.INFO, 
            "Starting SKLearn model training", 
            input_shape=X_train.shape,
            model_name=results.model_name,
            cross_validation=param_grid is not None
        )

        model = self._initialize_model(model_params)
        
        try:
            start_time = time.time()
            results.algorithm = type(model).__name__
            results.model_params = dict(model_params)
            results.feature_names = X_train.columns.tolist()

            if param_grid is not None:
                model = self.utils.fit_with_cross_validation(model, X_train, y_train, param_grid, results)
            else:
                model.fit(X_train, y_train)

            results.training_seconds = time.time() - start_time
            results.model = model
            results.classes = list(model.classes_)
            self.utils.calculate_feature_importance(model, X_train.shape[1], results)

            self.app_logger.structured_log(
                logging.INFO,
                "SKLearn model training completed",
                model_name=results.model_name,
                training_seconds=results.training_seconds,
                cv_accuracy=results.cv_accuracy
            )
            return results

        except Exception as e:
            raise self.error_handler.create_error_handler(
                'model_training',
                "Error in SKLearn model training",
                error_message=str(e),
                model_name=results.model_name,
                dataframe_shape=X_train.shape
            )

    def predict(self, results: ModelTrainingResults, X: pd.DataFrame) -> np.ndarray:
        return np.asarray(results.model.predict(X[results.feature_names]))
