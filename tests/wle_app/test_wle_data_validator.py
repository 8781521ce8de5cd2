"""
Tests for the training and quiz table validator.
"""
import numpy as np
import pandas as pd
import pytest

from wle_app.data_validator import DataValidator
from wle_framework.core.error_handling.error_handler import DataValidationError


@pytest.fixture
def validator(config, mock_app_logger, mock_error_handler):
    return DataValidator(config, mock_app_logger, mock_error_handler)


def test_initialization(validator, config):
    assert validator.label_column == 'classe'
    assert validator.class_labels == ['A', 'B', 'C', 'D', 'E']
    assert validator.quiz_id_column == 'problem_id'


def test_valid_training_data(validator, wle_frame):
    assert validator.validate_training_data(wle_frame) is True


def test_empty_training_data_raises(validator):
    with pytest.raises(DataValidationError):
        validator.validate_training_data(pd.DataFrame())


def test_training_data_without_label_raises(validator, wle_frame):
    with pytest.raises(DataValidationError):
        validator.validate_training_data(wle_frame.drop(columns=['classe']))


def test_missing_label_values_raise(validator, wle_frame):
    wle_frame['classe'] = wle_frame['classe'].astype(object)
    wle_frame.loc[3, 'classe'] = np.nan

    with pytest.raises(DataValidationError):
        validator.validate_training_data(wle_frame)


def test_unexpected_label_raises(validator, wle_frame):
    wle_frame.loc[0, 'classe'] = 'F'

    with pytest.raises(DataValidationError):
        validator.validate_training_data(wle_frame)


def test_valid_quiz_data(validator, quiz_frame):
    assert validator.validate_quiz_data(quiz_frame) is True


def test_quiz_without_id_raises(validator, quiz_frame):
    with pytest.raises(DataValidationError):
        validator.validate_quiz_data(quiz_frame.drop(columns=['problem_id']))


def test_empty_quiz_raises(validator):
    with pytest.raises(DataValidationError):
        validator.validate_quiz_data(pd.DataFrame(columns=['problem_id']))


def test_quiz_with_label_column_raises(validator, quiz_frame):
    labelled = quiz_frame.assign(classe='A')

    with pytest.raises(DataValidationError, match="classe"):
        validator.validate_quiz_data(labelled)
