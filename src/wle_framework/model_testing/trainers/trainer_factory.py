from enum import Enum
from typing import Dict, Type

from .base_trainer import BaseTrainer
from .sklearn_trainer import SKLearnTrainer
from .xgboost_trainer import XGBoostTrainer
from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory


class TrainerType(Enum):
    SKLEARN = "sklearn"
    XGBOOST = "xgboost"

class TrainerFactory:
    _trainer_map: Dict[TrainerType, Type[BaseTrainer]] = {
        TrainerType.SKLEARN: SKLearnTrainer,
        TrainerType.XGBOOST: XGBoostTrainer,
    }

    @classmethod
    def create_trainers(cls, config: BaseConfigManager, app_logger: BaseAppLogger,
                        error_handler: ErrorHandlerFactory) -> Dict[str, BaseTrainer]:
        """Creates one trainer per enabled model in config.core.models, in config order."""
        trainers = {}

        for model_name, model_cfg in vars(config.core.models).items():
            if not getattr(model_cfg, 'enabled', True):
                continue

            try:
                trainer_type = TrainerType(str(model_cfg.trainer).lower())
            except (AttributeError, ValueError):
                raise error_handler.create_error_handler(
                    'configuration',
                    f"Unsupported trainer for model {model_name}",
                    trainer=getattr(model_cfg, 'trainer', None)
                )

            trainer_class = cls._trainer_map[trainer_type]
            if trainer_type == TrainerType.SKLEARN:
                trainers[model_name] = trainer_class(
                    config,
                    app_logger,
                    error_handler,
                    model_type=str(model_cfg.estimator).lower()
                )
            else:
                trainers[model_name] = trainer_class(config, app_logger, error_handler)

        return trainers
