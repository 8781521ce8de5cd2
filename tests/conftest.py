"""
Common test fixtures for the exercise quality report tests.
"""
from types import SimpleNamespace
from unittest.mock import Mock

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.core.error_handling.error_handler import (
    ConfigurationError,
    DataLoadError,
    DataValidationError,
    DataCleaningError,
    ModelTrainingError,
    ModelEvaluationError,
    ModelSelectionError,
    ChartCreationError,
    ReportGenerationError,
    DataStorageError
)


CLASS_LABELS = ['A', 'B', 'C', 'D', 'E']
USER_NAMES = ['adelmo', 'carlitos', 'charles', 'eurico', 'jeremy', 'pedro']


class MockContextManager:
    """Mock context manager for logging context."""
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False


@pytest.fixture
def mock_app_logger():
    """Create a mock app logger for testing."""
    logger = Mock(spec=BaseAppLogger)
    logger.structured_log = Mock()
    logger.log_performance = lambda func: func
    logger.log_context = lambda **kwargs: MockContextManager()
    return logger


@pytest.fixture
def mock_error_handler(mock_app_logger):
    """Create a mock error handler factory that builds the real error classes."""
    handler = Mock(spec=ErrorHandlerFactory)

    def create_error(error_type, message, **kwargs):
        error_map = {
            'configuration': ConfigurationError,
            'data_load': DataLoadError,
            'data_validation': DataValidationError,
            'data_cleaning': DataCleaningError,
            'model_training': ModelTrainingError,
            'model_evaluation': ModelEvaluationError,
            'model_selection': ModelSelectionError,
            'chart_creation': ChartCreationError,
            'report_generation': ReportGenerationError,
            'data_storage': DataStorageError
        }
        error_class = error_map.get(error_type, Exception)
        if error_class in error_map.values():
            return error_class(message, mock_app_logger)
        return error_class(message)

    handler.create_error_handler = Mock(side_effect=create_error)
    return handler


def make_wle_frame(n_rows: int = 200, seed: int = 0) -> pd.DataFrame:
    """
    Small table shaped like pml-training.csv: five identifier columns, a
    near-constant window flag, a sparse summary column and a few sensor
    readings that separate the five classes.
    """
    rng = np.random.default_rng(seed)
    classe = np.array(CLASS_LABELS)[np.arange(n_rows) % len(CLASS_LABELS)]
    rng.shuffle(classe)
    class_idx = pd.Series(classe).map({c: i for i, c in enumerate(CLASS_LABELS)}).to_numpy()
    window_start = np.arange(n_rows) % 50 == 0

    return pd.DataFrame({
        'Unnamed: 0': np.arange(1, n_rows + 1),
        'user_name': rng.choice(USER_NAMES, n_rows),
        'raw_timestamp_part_1': 1322489000 + np.arange(n_rows),
        'raw_timestamp_part_2': rng.integers(0, 999999, n_rows),
        'cvtd_timestamp': '05/12/2011 11:23',
        'new_window': np.where(window_start, 'yes', 'no'),
        'num_window': rng.integers(1, 864, n_rows),
        'roll_belt': class_idx * 3.0 + rng.normal(0, 0.5, n_rows),
        'pitch_belt': -class_idx * 2.0 + rng.normal(0, 0.5, n_rows),
        'yaw_belt': rng.normal(0, 1, n_rows),
        'total_accel_belt': rng.normal(20, 3, n_rows),
        'kurtosis_roll_belt': np.where(window_start, rng.normal(0, 1, n_rows), np.nan),
        'classe': classe
    })


def make_quiz_frame(n_rows: int = 20, seed: int = 1) -> pd.DataFrame:
    """Unlabelled table shaped like pml-testing.csv."""
    quiz = make_wle_frame(n_rows, seed=seed).drop(columns=['classe'])
    quiz['new_window'] = 'no'
    quiz['kurtosis_roll_belt'] = np.nan
    quiz['problem_id'] = np.arange(1, n_rows + 1)
    return quiz


@pytest.fixture
def wle_frame():
    return make_wle_frame()


@pytest.fixture
def quiz_frame():
    return make_quiz_frame()


@pytest.fixture
def model_configs():
    """Fast model settings: small grids, few trees."""
    return SimpleNamespace(
        decision_tree=SimpleNamespace(
            enabled=True,
            display_name='Decision tree',
            trainer='sklearn',
            estimator='decisiontree',
            cross_validation=True,
            params=SimpleNamespace(criterion='gini'),
            param_grid=SimpleNamespace(max_depth=[2, 4])
        ),
        gradient_boosting=SimpleNamespace(
            enabled=True,
            display_name='Gradient boosted trees',
            trainer='xgboost',
            cross_validation=True,
            params=SimpleNamespace(n_estimators=10),
            param_grid=SimpleNamespace(max_depth=[1, 2])
        ),
        random_forest=SimpleNamespace(
            enabled=True,
            display_name='Random forest',
            trainer='sklearn',
            estimator='randomforest',
            cross_validation=True,
            params=SimpleNamespace(n_estimators=10),
            param_grid=SimpleNamespace(max_features=['sqrt', 1.0])
        )
    )


@pytest.fixture
def config(tmp_path, model_configs):
    """Configuration namespace mirroring configs/ with test-sized settings."""
    return SimpleNamespace(
        project_name='wle_test',
        random_state=42,
        target_column='classe',
        quiz_id_column='problem_id',
        class_labels=list(CLASS_LABELS),
        output_directory=str(tmp_path / 'output'),
        core=SimpleNamespace(
            app_logging_config=SimpleNamespace(
                log_file=str(tmp_path / 'logs' / 'test.log'),
                log_level='INFO'
            ),
            data_access_config=SimpleNamespace(
                training_data_source=str(tmp_path / 'pml-training.csv'),
                quiz_data_source=str(tmp_path / 'pml-testing.csv'),
                use_cached_data=False,
                raw_data_directory=str(tmp_path / 'raw'),
                training_data_file='pml-training.csv',
                quiz_data_file='pml-testing.csv',
                na_values=['NA', '#DIV/0!', '']
            ),
            preprocessing_config=SimpleNamespace(
                identifier_column_count=5,
                near_zero_variance=SimpleNamespace(freq_cut=19.0, unique_cut=10.0),
                drop_columns_with_missing_values=True
            ),
            model_testing_config=SimpleNamespace(
                training_fraction=0.75,
                n_splits=5,
                scoring='accuracy',
                n_jobs=1,
                quiz_predictions_file='quiz_predictions.csv'
            ),
            chart_options=SimpleNamespace(
                correlation=SimpleNamespace(enabled=True, method='pearson', order='fpc',
                                            threshold=0.8, figure_size=[6, 5]),
                decision_tree=SimpleNamespace(enabled=True, model_name='decision_tree',
                                              max_depth=2, figure_size=[8, 5]),
                confusion_matrix=SimpleNamespace(enabled=True, cmap='Blues', figure_size=[4, 4]),
                accuracy_comparison=SimpleNamespace(enabled=True, figure_size=[5, 4])
            ),
            report_config=SimpleNamespace(
                title='Test report',
                report_file='report.html',
                charts_directory='charts',
                float_precision=4,
                max_correlation_pairs=10
            ),
            models=model_configs
        )
    )


@pytest.fixture
def prepared_data(config, mock_app_logger, mock_error_handler, wle_frame):
    """Split and clean the synthetic table; returns X_train, y_train, X_val, y_val."""
    from wle_framework.preprocessing.data_cleaner import DataCleaner
    from wle_framework.preprocessing.data_splitter import DataSplitter

    train, validation = DataSplitter(config, mock_app_logger, mock_error_handler).split(wle_frame)
    cleaner = DataCleaner(config, mock_app_logger, mock_error_handler)
    clean_train, _ = cleaner.fit_transform(train)
    clean_validation = cleaner.transform(validation)

    return (
        clean_train.drop(columns=['classe']), clean_train['classe'],
        clean_validation.drop(columns=['classe']), clean_validation['classe']
    )
