"""
Ranking of evaluated models by validation accuracy.

Ties on accuracy go to the model that was cheaper to train, then to the
alphabetically first model name, so the ranking is deterministic.
"""

import logging
from typing import Dict, List
import pandas as pd

from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.framework.data_classes import ModelTrainingResults


class ModelSelector:
    def __init__(self, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory):
        self.app_logger = app_logger
        self.error_handler = error_handler

    def rank(self, results_by_model: Dict[str, ModelTrainingResults]) -> List[ModelTrainingResults]:
        """Order evaluated models best first."""
        if not results_by_model:
            raise self.error_handler.create_error_handler(
                'model_selection',
                "No models to rank"
            )

        unevaluated = [name for name, r in results_by_model.items() if r.metrics is None]
        if unevaluated:
            raise self.error_handler.create_error_handler(
                'model_selection',
                "Models must be evaluated before ranking",
                unevaluated_models=unevaluated
            )

        return sorted(
            results_by_model.values(),
            key=lambda r: (-r.metrics.accuracy, r.training_seconds, r.model_name)
        )

    def select_best(self, results_by_model: Dict[str, ModelTrainingResults]) -> ModelTrainingResults:
        best = self.rank(results_by_model)[0]
        self.app_logger.structured_log(
            logging.INFO,
            "Best model selected",
            model_name=best.model_name,
            accuracy=best.metrics.accuracy
        )
        return best

    def ranking_table(self, results_by_model: Dict[str, ModelTrainingResults]) -> pd.DataFrame:
        """Ranked accuracy table, one row per model."""
        rows = []
        for position, results in enumerate(self.rank(results_by_model), 1):
            rows.append({
                'rank': position,
                'model': results.display_name or results.model_name,
                'algorithm': results.algorithm,
                'accuracy': results.metrics.accuracy,
                'out_of_sample_error': results.metrics.out_of_sample_error,
                'kappa': results.metrics.kappa,
                'cv_accuracy': results.cv_accuracy,
                'training_seconds': results.training_seconds
            })
        return pd.DataFrame(rows)
