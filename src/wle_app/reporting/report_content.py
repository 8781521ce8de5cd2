from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple
import pandas as pd

from wle_framework.framework.data_classes import CleaningResults, ModelTrainingResults


@dataclass
class ReportContent:
    """Everything one pipeline run hands to the report."""
    project_name: str
    training_shape: Tuple[int, int]
    quiz_shape: Tuple[int, int]
    train_shape: Tuple[int, int]
    validation_shape: Tuple[int, int]
    class_distribution: pd.Series
    cleaning_results: CleaningResults
    high_correlation_pairs: pd.DataFrame
    results_by_model: Dict[str, ModelTrainingResults]
    ranking: pd.DataFrame
    best_model: ModelTrainingResults
    quiz_predictions: Optional[pd.DataFrame] = None
    chart_paths: Dict[str, Path] = field(default_factory=dict)
    report_path: Optional[Path] = None
    quiz_predictions_path: Optional[Path] = None

    def data_summary(self) -> pd.DataFrame:
        rows = [
            ('training table', *self.training_shape),
            ('quiz table', *self.quiz_shape),
            ('training subset', *self.train_shape),
            ('validation subset', *self.validation_shape),
        ]
        return pd.DataFrame(rows, columns=['table', 'rows', 'columns'])

    def cleaning_summary(self) -> pd.DataFrame:
        dropped = self.cleaning_results.dropped_by_step()
        return pd.DataFrame({
            'step': list(dropped.keys()),
            'dropped_columns': [len(cols) for cols in dropped.values()],
        })

    def cross_validation_summary(self) -> pd.DataFrame:
        rows = []
        for name, results in self.results_by_model.items():
            rows.append({
                'model': results.display_name or name,
                'n_folds': results.n_folds,
                'cv_accuracy': results.cv_accuracy,
                'cv_accuracy_std': results.cv_accuracy_std,
                'best_params': results.best_params,
                'training_seconds': results.training_seconds,
            })
        return pd.DataFrame(rows)
