"""Data classes for cleaning, training and evaluation results."""

from .metrics import ClassificationMetrics
from .preprocessing import (
    CleaningStep,
    CleaningResults
)
from .training import ModelTrainingResults

__all__ = [
    'ClassificationMetrics',
    'CleaningStep',
    'CleaningResults',
    'ModelTrainingResults'
]
