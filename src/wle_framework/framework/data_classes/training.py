"""Data class for model training results."""

from dataclasses import dataclass, field
from typing import Optional, Any, Dict, List
import numpy as np
import pandas as pd

from .metrics import ClassificationMetrics

@dataclass
class ModelTrainingResults:
    """Fitted model plus the metadata recorded while training and scoring it"""
    model_name: str = ""
    display_name: str = ""
    algorithm: str = ""
    model: Optional[Any] = None
    label_encoder: Optional[Any] = None
    feature_names: List[str] = field(default_factory=list)
    classes: List[Any] = field(default_factory=list)
    model_params: Dict[str, Any] = field(default_factory=dict)
    best_params: Dict[str, Any] = field(default_factory=dict)
    cv_accuracy: Optional[float] = None
    cv_accuracy_std: Optional[float] = None
    n_folds: int = 0
    cv_results: Optional[pd.DataFrame] = None
    training_seconds: float = 0.0
    feature_importance_scores: Optional[np.ndarray] = None

    # Filled in by evaluation
    predictions: Optional[np.ndarray] = None
    metrics: Optional[ClassificationMetrics] = None

    @property
    def accuracy(self) -> Optional[float]:
        return self.metrics.accuracy if self.metrics is not None else None

    def summary(self) -> Dict[str, Any]:
        """Flat summary logged once the model is evaluated"""
        summary = {
            'model_name': self.model_name,
            'display_name': self.display_name or self.model_name,
            'algorithm': self.algorithm,
            'cv_accuracy': self.cv_accuracy,
            'n_folds': self.n_folds,
            'training_seconds': self.training_seconds,
            'best_params': self.best_params,
        }
        if self.metrics is not None:
            summary.update(self.metrics.to_dict())
        return summary
