"""Data classes for column-cleaning tracking."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import pandas as pd

@dataclass
class CleaningStep:
    """Records the columns removed by a single cleaning rule"""
    name: str
    dropped_columns: List[str]
    parameters: Dict[str, Any] = field(default_factory=dict)

@dataclass
class CleaningResults:
    """
    Column selection computed from the training subset.

    retained_columns is the full column set (features plus label) that every
    other subset is reduced to.
    """
    original_columns: List[str] = field(default_factory=list)
    retained_columns: List[str] = field(default_factory=list)
    label_column: str = ""
    steps: List[CleaningStep] = field(default_factory=list)
    variance_metrics: Optional[pd.DataFrame] = None
    final_shape: Optional[Tuple[int, int]] = None

    def add_step(self, step: CleaningStep) -> None:
        self.steps.append(step)

    @property
    def dropped_columns(self) -> List[str]:
        dropped = []
        for step in self.steps:
            dropped.extend(c for c in step.dropped_columns if c not in dropped)
        return dropped

    @property
    def feature_columns(self) -> List[str]:
        return [c for c in self.retained_columns if c != self.label_column]

    def dropped_by_step(self) -> Dict[str, List[str]]:
        return {step.name: list(step.dropped_columns) for step in self.steps}

    def summarize(self) -> Dict[str, Any]:
        """Generate a summary of cleaning results"""
        return {
            'n_original_columns': len(self.original_columns),
            'n_retained_columns': len(self.retained_columns),
            'n_dropped_columns': len(self.dropped_columns),
            'n_features': len(self.feature_columns),
            'dropped_by_step': {name: len(cols) for name, cols in self.dropped_by_step().items()},
            'final_shape': self.final_shape
        }

