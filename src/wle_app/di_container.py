"""
Dependency Injection container for the exercise quality report pipeline.
"""

from pathlib import Path
from typing import Optional

from dependency_injector import containers, providers
from wle_framework.core.common_di_container import CommonDIContainer
from wle_framework.preprocessing.data_splitter import DataSplitter
from wle_framework.preprocessing.data_cleaner import DataCleaner
from wle_framework.model_testing.model_tester import ModelTester
from wle_framework.model_testing.model_selector import ModelSelector
from wle_framework.model_testing.trainers.trainer_factory import TrainerFactory
from wle_framework.visualization.exploratory.correlation_explorer import CorrelationExplorer
from wle_framework.visualization.orchestration.chart_orchestrator import ChartOrchestrator

from .data_validator import DataValidator
from .quiz_predictor import QuizPredictor
from .reporting.report_builder import ReportBuilder


class PipelineDIContainer(containers.DeclarativeContainer):
    # Import common container
    common = providers.Container(CommonDIContainer)

    # Use common container's components
    config = common.config
    app_logger = common.app_logger
    app_file_handler = common.app_file_handler
    error_handler = common.error_handler_factory
    data_access = common.data_access

    data_validator = providers.Singleton(
        DataValidator,
        config=config,
        app_logger=app_logger,
        error_handler=error_handler
    )

    data_splitter = providers.Singleton(
        DataSplitter,
        config=config,
        app_logger=app_logger,
        error_handler=error_handler
    )

    # Holds the fitted column selection, shared by the validation and quiz stages
    data_cleaner = providers.Singleton(
        DataCleaner,
        config=config,
        app_logger=app_logger,
        error_handler=error_handler
    )

    correlation_explorer = providers.Singleton(
        CorrelationExplorer,
        app_logger=app_logger,
        error_handler=error_handler
    )

    # Trainers factory with proper dependency injection
    trainers = providers.Factory(
        TrainerFactory.create_trainers,
        config=config,
        app_logger=app_logger,
        error_handler=error_handler
    )

    model_tester = providers.Singleton(
        ModelTester,
        config=config,
        trainers=trainers,
        app_logger=app_logger,
        error_handler=error_handler
    )

    model_selector = providers.Singleton(
        ModelSelector,
        app_logger=app_logger,
        error_handler=error_handler
    )

    chart_orchestrator = providers.Singleton(
        ChartOrchestrator,
        config=config,
        app_logger=app_logger,
        error_handler=error_handler,
        app_file_handler=app_file_handler
    )

    quiz_predictor = providers.Singleton(
        QuizPredictor,
        config=config,
        model_tester=model_tester,
        data_cleaner=data_cleaner,
        data_access=data_access,
        app_logger=app_logger,
        error_handler=error_handler
    )

    report_builder = providers.Singleton(
        ReportBuilder,
        config=config,
        app_logger=app_logger,
        error_handler=error_handler,
        app_file_handler=app_file_handler
    )


def create_container(config_dir: Optional[Path] = None) -> PipelineDIContainer:
    """Build the pipeline container, optionally reading configs from config_dir."""
    container = PipelineDIContainer()
    if config_dir is not None:
        container.common.config_dir.override(providers.Object(Path(config_dir)))
    return container
