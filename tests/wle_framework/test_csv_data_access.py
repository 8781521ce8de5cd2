"""
Tests for the CSV data access layer.
"""
from types import SimpleNamespace
from unittest.mock import patch

import numpy as np
import pandas as pd
import pytest

from wle_framework.core.app_file_handling.app_file_handler import LocalAppFileHandler
from wle_framework.core.error_handling.error_handler import (
    ConfigurationError,
    DataLoadError,
    DataStorageError
)
from wle_framework.framework.data_access.csv_data_access import CSVDataAccess


RAW_CSV = (
    '"",user_name,kurtosis_roll_belt,roll_belt,classe\n'
    '1,carlitos,NA,1.41,A\n'
    '2,carlitos,#DIV/0!,1.42,A\n'
    '3,pedro,,1.48,B\n'
    '4,pedro,0.5,1.5,B\n'
)


@pytest.fixture
def data_access(config, mock_app_logger, mock_error_handler):
    return CSVDataAccess(config, mock_app_logger, LocalAppFileHandler(), mock_error_handler)


def test_missing_data_access_config_raises(mock_app_logger, mock_error_handler):
    config = SimpleNamespace(core=SimpleNamespace())
    with pytest.raises(ConfigurationError):
        CSVDataAccess(config, mock_app_logger, LocalAppFileHandler(), mock_error_handler)


def test_sentinels_are_read_as_missing(data_access, tmp_path):
    source = tmp_path / 'pml-training.csv'
    source.write_text(RAW_CSV)

    df = data_access.load_dataframe(str(source))

    assert df.shape == (4, 5)
    assert df.columns[0] == 'Unnamed: 0'
    assert df['kurtosis_roll_belt'].isna().tolist() == [True, True, True, False]
    assert df['kurtosis_roll_belt'].dtype == np.float64


def test_load_training_and_quiz_data_use_configured_sources(data_access, config, tmp_path):
    (tmp_path / 'pml-training.csv').write_text(RAW_CSV)
    (tmp_path / 'pml-testing.csv').write_text('"",roll_belt,problem_id\n1,1.4,1\n')

    training = data_access.load_training_data()
    quiz = data_access.load_quiz_data()

    assert 'classe' in training.columns
    assert quiz['problem_id'].tolist() == [1]


def test_unreachable_source_raises_data_load_error(data_access, tmp_path):
    with pytest.raises(DataLoadError):
        data_access.load_dataframe(str(tmp_path / 'does-not-exist.csv'))


def test_remote_read_is_cached_and_reused(data_access, config, tmp_path):
    config.core.data_access_config.use_cached_data = True
    remote = pd.DataFrame({'roll_belt': [1.0, 2.0], 'classe': ['A', 'B']})
    url = 'https://example.org/pml-training.csv'

    with patch('wle_framework.framework.data_access.csv_data_access.pd.read_csv',
               return_value=remote) as read_csv:
        first = data_access.load_dataframe(url, cache_file_name='pml-training.csv')

    # Second load comes from the raw data directory, not the url
    second = data_access.load_dataframe(url, cache_file_name='pml-training.csv')

    read_csv.assert_called_once()
    assert read_csv.call_args.kwargs['na_values'] == ['NA', '#DIV/0!', '']
    assert (tmp_path / 'raw' / 'pml-training.csv').exists()
    pd.testing.assert_frame_equal(first, second)


def test_cache_disabled_always_fetches(data_access):
    remote = pd.DataFrame({'roll_belt': [1.0]})
    with patch('wle_framework.framework.data_access.csv_data_access.pd.read_csv',
               return_value=remote) as read_csv:
        data_access.load_dataframe('https://example.org/a.csv', cache_file_name='a.csv')
        data_access.load_dataframe('https://example.org/a.csv', cache_file_name='a.csv')

    assert read_csv.call_count == 2


def test_save_dataframe_creates_parent_directory(data_access, tmp_path):
    path = tmp_path / 'output' / 'nested' / 'quiz_predictions.csv'
    data_access.save_dataframe(pd.DataFrame({'problem_id': [1], 'prediction': ['A']}), path)

    assert pd.read_csv(path).to_dict('records') == [{'problem_id': 1, 'prediction': 'A'}]


def test_save_dataframe_failure_raises_data_storage_error(data_access, tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')

    with pytest.raises(DataStorageError):
        data_access.save_dataframe(pd.DataFrame({'a': [1]}), blocker / 'out.csv')
