"""Data classes for multi-class evaluation metrics."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import numpy as np
import pandas as pd
from sklearn.metrics import (
    accuracy_score,
    cohen_kappa_score,
    confusion_matrix,
    precision_recall_fscore_support
)

@dataclass
class ClassificationMetrics:
    """Container for classification metrics."""
    accuracy: float = 0.0
    kappa: float = 0.0
    labels: List[Any] = field(default_factory=list)
    confusion_matrix: Optional[pd.DataFrame] = None
    per_class: Optional[pd.DataFrame] = None
    correct_samples: int = 0
    total_samples: int = 0

    @property
    def out_of_sample_error(self) -> float:
        return 1.0 - self.accuracy

    def to_dict(self) -> Dict[str, Any]:
        return {
            'accuracy': self.accuracy,
            'out_of_sample_error': self.out_of_sample_error,
            'kappa': self.kappa,
            'correct_samples': self.correct_samples,
            'total_samples': self.total_samples
        }

def calculate_classification_evaluation_metrics(y_true, y_pred, labels: Optional[List[Any]] = None) -> ClassificationMetrics:
    """
    Calculate multi-class evaluation metrics from true and predicted labels.

    Args:
        y_true: True labels
        y_pred: Predicted labels
        labels: Label order for the confusion matrix. Defaults to the sorted
            union of the true and predicted labels.

    Returns:
        ClassificationMetrics object containing calculated metrics
    """
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    if len(y_true) != len(y_pred):
        raise ValueError(f"Length mismatch: {len(y_true)} true labels, {len(y_pred)} predictions")
    if len(y_true) == 0:
        raise ValueError("Cannot evaluate an empty validation set")

    if labels is None:
        labels = sorted(set(y_true.tolist()) | set(y_pred.tolist()))

    cm = confusion_matrix(y_true, y_pred, labels=labels)
    precision, recall, _, support = precision_recall_fscore_support(
        y_true, y_pred, labels=labels, zero_division=0
    )

    metrics = ClassificationMetrics()
    metrics.labels = list(labels)
    metrics.accuracy = float(accuracy_score(y_true, y_pred))
    metrics.kappa = float(cohen_kappa_score(y_true, y_pred, labels=labels))
    metrics.confusion_matrix = pd.DataFrame(
        cm,
        index=pd.Index(labels, name='true'),
        columns=pd.Index(labels, name='predicted')
    )
    metrics.per_class = pd.DataFrame(
        {'precision': precision, 'recall': recall, 'support': support},
        index=pd.Index(labels, name='class')
    )
    metrics.correct_samples = int(np.trace(cm))
    metrics.total_samples = int(len(y_true))

    return metrics
