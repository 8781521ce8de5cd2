"""
End-to-end tests for the report pipeline and its command line entry point.
"""
import logging

import pandas as pd
import pytest
import yaml

from wle_app.data_validator import DataValidator
from wle_app.main import main, run_pipeline
from wle_app.quiz_predictor import QuizPredictor
from wle_app.reporting import ReportBuilder
from wle_framework.core.app_file_handling.app_file_handler import LocalAppFileHandler
from wle_framework.core.app_logging.app_logger import AppLogger
from wle_framework.framework.data_access.csv_data_access import CSVDataAccess
from wle_framework.model_testing.model_selector import ModelSelector
from wle_framework.model_testing.model_tester import ModelTester
from wle_framework.model_testing.trainers import TrainerFactory
from wle_framework.preprocessing.data_cleaner import DataCleaner
from wle_framework.preprocessing.data_splitter import DataSplitter
from wle_framework.visualization.exploratory.correlation_explorer import CorrelationExplorer
from wle_framework.visualization.orchestration.chart_orchestrator import ChartOrchestrator

from conftest import make_quiz_frame, make_wle_frame


@pytest.fixture
def source_files(tmp_path):
    make_wle_frame().to_csv(tmp_path / 'pml-training.csv', index=False)
    make_quiz_frame().to_csv(tmp_path / 'pml-testing.csv', index=False)
    return tmp_path


@pytest.fixture
def pipeline_components(config, mock_app_logger, mock_error_handler):
    file_handler = LocalAppFileHandler()
    data_access = CSVDataAccess(config, mock_app_logger, file_handler, mock_error_handler)
    cleaner = DataCleaner(config, mock_app_logger, mock_error_handler)
    trainers = TrainerFactory.create_trainers(config, mock_app_logger, mock_error_handler)
    tester = ModelTester(config, trainers, mock_app_logger, mock_error_handler)
    return dict(
        config=config,
        data_access=data_access,
        data_validator=DataValidator(config, mock_app_logger, mock_error_handler),
        data_splitter=DataSplitter(config, mock_app_logger, mock_error_handler),
        data_cleaner=cleaner,
        correlation_explorer=CorrelationExplorer(mock_app_logger, mock_error_handler),
        model_tester=tester,
        model_selector=ModelSelector(mock_app_logger, mock_error_handler),
        chart_orchestrator=ChartOrchestrator(config, mock_app_logger, mock_error_handler, file_handler),
        quiz_predictor=QuizPredictor(config, tester, cleaner, data_access, mock_app_logger, mock_error_handler),
        report_builder=ReportBuilder(config, mock_app_logger, mock_error_handler, file_handler),
        app_logger=mock_app_logger
    )


def test_run_pipeline_end_to_end(source_files, pipeline_components, tmp_path):
    content = run_pipeline(**pipeline_components)

    output_dir = tmp_path / 'output'
    assert content.report_path == output_dir / 'report.html'
    assert content.report_path.exists()
    assert content.quiz_predictions_path == output_dir / 'quiz_predictions.csv'
    assert pd.read_csv(content.quiz_predictions_path).shape == (20, 2)

    assert content.train_shape[0] == 150
    assert content.validation_shape[0] == 50
    assert set(content.results_by_model) == {'random_forest', 'decision_tree', 'gradient_boosting'}
    for results in content.results_by_model.values():
        assert results.metrics.confusion_matrix.to_numpy().sum() == 50
        assert 0.0 <= results.accuracy <= 1.0
        assert results.accuracy <= content.best_model.accuracy

    assert content.ranking.iloc[0]['model'] == content.best_model.display_name
    assert len(content.chart_paths) == 6
    assert all(path.exists() for path in content.chart_paths.values())
    assert 'roll_belt' in set(content.high_correlation_pairs['feature_1']) | \
        set(content.high_correlation_pairs['feature_2'])


def write_yaml(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data))


@pytest.fixture
def config_dir(tmp_path, source_files):
    root = tmp_path / 'configs'
    write_yaml(root / 'app_config.yaml', {
        'project_name': 'wle_cli_test',
        'random_state': 42,
        'target_column': 'classe',
        'quiz_id_column': 'problem_id',
        'class_labels': ['A', 'B', 'C', 'D', 'E'],
        'output_directory': str(tmp_path / 'output'),
    })
    core = root / 'core'
    write_yaml(core / 'app_logging_config.yaml', {
        'log_file': str(tmp_path / 'logs' / 'cli.log'), 'log_level': 'INFO'
    })
    write_yaml(core / 'data_access_config.yaml', {
        'training_data_source': str(source_files / 'pml-training.csv'),
        'quiz_data_source': str(source_files / 'pml-testing.csv'),
        'use_cached_data': False,
        'na_values': ['NA', '#DIV/0!', ''],
    })
    write_yaml(core / 'preprocessing_config.yaml', {
        'identifier_column_count': 5,
        'near_zero_variance': {'freq_cut': 19.0, 'unique_cut': 10.0},
        'drop_columns_with_missing_values': True,
    })
    write_yaml(core / 'model_testing_config.yaml', {
        'training_fraction': 0.75, 'n_splits': 5, 'scoring': 'accuracy', 'n_jobs': 1,
    })
    write_yaml(core / 'chart_options.yaml', {
        'correlation': {'enabled': True, 'figure_size': [6, 5]},
        'decision_tree': {'enabled': True, 'model_name': 'decision_tree', 'figure_size': [8, 5]},
        'confusion_matrix': {'enabled': True, 'figure_size': [4, 4]},
        'accuracy_comparison': {'enabled': True},
    })
    write_yaml(core / 'models' / 'decision_tree.yaml', {
        'trainer': 'sklearn', 'estimator': 'decisiontree', 'cross_validation': True,
        'param_grid': {'max_depth': [2, 4]},
    })
    write_yaml(core / 'models' / 'gradient_boosting.yaml', {
        'trainer': 'xgboost', 'cross_validation': True,
        'params': {'n_estimators': 10}, 'param_grid': {'max_depth': [1, 2]},
    })
    write_yaml(core / 'models' / 'random_forest.yaml', {
        'trainer': 'sklearn', 'estimator': 'randomforest', 'cross_validation': False,
        'params': {'n_estimators': 10},
    })
    return root


@pytest.fixture(autouse=True)
def release_log_handlers():
    yield
    logger = logging.getLogger(AppLogger.__module__)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_main_writes_report(config_dir, tmp_path):
    main(['--config-dir', str(config_dir)])

    assert (tmp_path / 'output' / 'report.html').exists()
    assert (tmp_path / 'output' / 'quiz_predictions.csv').exists()
    assert (tmp_path / 'output' / 'charts' / 'decision_tree.png').exists()
    assert 'Pipeline completed successfully' in (tmp_path / 'logs' / 'cli.log').read_text()


def test_main_exits_with_stage_exit_code(config_dir, tmp_path):
    (tmp_path / 'pml-training.csv').unlink()

    with pytest.raises(SystemExit) as exc_info:
        main(['--config-dir', str(config_dir)])

    assert exc_info.value.code == 3
    assert 'DataLoadError' in (tmp_path / 'logs' / 'cli.log').read_text()


def test_main_exits_on_missing_configuration(tmp_path):
    (tmp_path / 'empty').mkdir()

    with pytest.raises(SystemExit) as exc_info:
        main(['--config-dir', str(tmp_path / 'empty')])

    assert exc_info.value.code == 2


def test_main_exits_with_configuration_code_when_log_file_is_unusable(config_dir, tmp_path):
    (tmp_path / 'blocked').write_text('not a directory')
    write_yaml(config_dir / 'core' / 'app_logging_config.yaml', {
        'log_file': str(tmp_path / 'blocked' / 'cli.log'), 'log_level': 'INFO'
    })

    with pytest.raises(SystemExit) as exc_info:
        main(['--config-dir', str(config_dir)])

    assert exc_info.value.code == 2
