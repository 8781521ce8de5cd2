from abc import ABC, abstractmethod
from typing import Dict, Tuple
import numpy as np
import pandas as pd

from wle_framework.framework.data_classes import ModelTrainingResults


class BaseModelTester(ABC):
    @abstractmethod
    def prepare_features(self, df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.Series]:
        """Split a cleaned table into features and labels."""
        pass

    @abstractmethod
    def train_model(self, model_name: str, X: pd.DataFrame, y: pd.Series) -> ModelTrainingResults:
        """Fit one configured model."""
        pass

    @abstractmethod
    def train_all(self, X: pd.DataFrame, y: pd.Series) -> Dict[str, ModelTrainingResults]:
        """Fit every configured model."""
        pass

    @abstractmethod
    def evaluate(self, results: ModelTrainingResults, X_val: pd.DataFrame, y_val: pd.Series) -> ModelTrainingResults:
        """Score a fitted model on held-out data."""
        pass

    @abstractmethod
    def predict(self, results: ModelTrainingResults, X: pd.DataFrame) -> np.ndarray:
        """Predict class labels with a fitted model."""
        pass
