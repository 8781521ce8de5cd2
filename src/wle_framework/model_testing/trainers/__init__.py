from .base_trainer import BaseTrainer
from .sklearn_trainer import SKLearnTrainer
from .xgboost_trainer import XGBoostTrainer
from .trainer_factory import TrainerFactory, TrainerType

__all__ = [
    'BaseTrainer',
    'SKLearnTrainer',
    'XGBoostTrainer',
    'TrainerFactory',
    'TrainerType'
]
