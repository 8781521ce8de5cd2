from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import pandas as pd

from wle_framework.framework.data_classes import CleaningResults


class BasePreprocessor(ABC):
    """Interface for cleaners that learn a column selection on one subset and apply it to others."""

    @abstractmethod
    def fit_transform(self, df: pd.DataFrame) -> Tuple[pd.DataFrame, CleaningResults]:
        """Compute the column selection from df and return the reduced table."""
        pass

    @abstractmethod
    def transform(self, df: pd.DataFrame, require_label: bool = True,
                  passthrough_columns: Optional[List[str]] = None) -> pd.DataFrame:
        """Apply the previously computed column selection to another table."""
        pass
