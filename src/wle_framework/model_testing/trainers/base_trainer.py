from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import numpy as np
import pandas as pd

from wle_framework.framework.data_classes import ModelTrainingResults
from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory

class BaseTrainer(ABC):
    """Abstract base class for model trainers."""
    
    @abstractmethod
    def __init__(self, 
                 config: BaseConfigManager, 
                 app_logger: BaseAppLogger, 
                 error_handler: ErrorHandlerFactory):
        """
        Initialize trainer with configuration and dependencies.
        
        Args:
            config: Configuration manager
            app_logger: Application logger for structured logging
            error_handler: Error handler for standardized error management
        """
        pass

    @abstractmethod
    def train(self, 
             X_train: pd.DataFrame, 
             y_train: pd.Series,
             model_params: Dict[str, Any],
             results: ModelTrainingResults,
             param_grid: Optional[Dict[str, Any]] = None) -> ModelTrainingResults:
        """
        Fit a model and return results.
        
        Args:
            X_train: Training features
            y_train: Training labels
            model_params: Fixed estimator parameters
            results: ModelTrainingResults object to store results
            param_grid: Candidate parameters searched with k-fold cross-validation.
                None disables cross-validation and fits once.
            
        Returns:
            Updated ModelTrainingResults object
        """
        pass

    @abstractmethod
    def predict(self, results: ModelTrainingResults, X: pd.DataFrame) -> np.ndarray:
        """
        Predict class labels with the fitted model held in results.
        
        Args:
            results: ModelTrainingResults holding the fitted model
            X: Features to predict
            
        Returns:
            Array of predicted class labels
        """
        pass
