from typing import Any, Dict, Optional, Tuple
import logging
import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator
from sklearn.model_selection import GridSearchCV, StratifiedKFold, cross_val_score

from wle_framework.framework.data_classes import ModelTrainingResults
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory

class TrainerUtils:
    """Utility class providing common functionality for trainers."""
    
    def __init__(self, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory,
                 n_splits: int = 5, random_state: int = 42, n_jobs: Optional[int] = None,
                 scoring: str = 'accuracy'):
        self.app_logger = app_logger
        self.error_handler = error_handler
        self.n_splits = n_splits
        self.random_state = random_state
        self.n_jobs = n_jobs
        self.scoring = scoring

    def fit_with_cross_validation(self,
                                  estimator: BaseEstimator,
                                  X: pd.DataFrame,
                                  y,
                                  param_grid: Dict[str, Any],
                                  results: ModelTrainingResults) -> BaseEstimator:
        """
        Select hyperparameters by stratified k-fold cross-validation and refit on all of X.

        The worker pool (n_jobs) parallelises the folds inside the library call.
        """
        cv = StratifiedKFold(n_splits=self.n_splits, shuffle=True, random_state=self.random_state)

        if param_grid:
            search = GridSearchCV(
                estimator,
                param_grid=param_grid,
                cv=cv,
                scoring=self.scoring,
                n_jobs=self.n_jobs,
                refit=True
            )
            search.fit(X, y)
            best_index = search.best_index_
            results.best_params = dict(search.best_params_)
            results.cv_accuracy = float(search.cv_results_['mean_test_score'][best_index])
            results.cv_accuracy_std = float(search.cv_results_['std_test_score'][best_index])
            results.cv_results = self._summarize_cv_results(search.cv_results_)
            fitted = search.best_estimator_
        else:
            scores = cross_val_score(estimator, X, y, cv=cv, scoring=self.scoring, n_jobs=self.n_jobs)
            results.best_params = {}
            results.cv_accuracy = float(np.mean(scores))
            results.cv_accuracy_std = float(np.std(scores))
            fitted = estimator.fit(X, y)

        results.n_folds = self.n_splits

        self.app_logger.structured_log(
            logging.INFO,
            "Cross-validation completed",
            model_name=results.model_name,
            n_folds=self.n_splits,
            cv_accuracy=results.cv_accuracy,
            best_params=results.best_params
        )
        return fitted

    @staticmethod
    def _summarize_cv_results(cv_results: Dict[str, Any]) -> pd.DataFrame:
        summary = pd.DataFrame({
            'params': [str(p) for p in cv_results['params']],
            'mean_accuracy': cv_results['mean_test_score'],
            'std_accuracy': cv_results['std_test_score'],
            'rank': cv_results['rank_test_score']
        })
        return summary.sort_values('rank').reset_index(drop=True)

    def calculate_feature_importance(self, model: Any, n_features: int, results: ModelTrainingResults) -> None:
        """Store tree-based feature importances normalised to [0, 1]."""
        if hasattr(model, 'feature_importances_'):
            importance_scores = np.asarray(model.feature_importances_, dtype=float)
        else:
            self.app_logger.structured_log(
                logging.WARNING,
                "Model does not provide feature importance scores",
                model_type=type(model).__name__
            )
            importance_scores = np.zeros(n_features)

        if len(importance_scores) > 0 and importance_scores.max() > 0:
            importance_scores = importance_scores / importance_scores.max()

        results.feature_importance_scores = importance_scores
