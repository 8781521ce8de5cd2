"""
Tests for the AppLogger.
"""
import logging
from types import SimpleNamespace

import pytest

from wle_framework.core.app_logging.app_logger import AppLogger


@pytest.fixture
def app_logger(tmp_path):
    config = SimpleNamespace(core=SimpleNamespace(
        app_logging_config=SimpleNamespace(log_level='DEBUG')
    ))
    logger = AppLogger(config)
    logger.setup(str(tmp_path / 'logs' / 'app.log'))
    yield logger
    for handler in list(logger.logger.handlers):
        logger.logger.removeHandler(handler)
        handler.close()


def read_log(tmp_path):
    return (tmp_path / 'logs' / 'app.log').read_text()


def test_structured_log_before_setup_raises():
    logger = AppLogger(SimpleNamespace())
    with pytest.raises(RuntimeError):
        logger.structured_log(logging.INFO, "too early")


def test_setup_uses_configured_level(app_logger):
    assert app_logger.logger.level == logging.DEBUG


def test_setup_is_idempotent(app_logger, tmp_path):
    app_logger.setup(str(tmp_path / 'logs' / 'app.log'))
    assert len(app_logger.logger.handlers) == 2


def test_structured_log_appends_context(app_logger, tmp_path):
    app_logger.structured_log(logging.INFO, "Split done", train_rows=150)

    contents = read_log(tmp_path)
    assert "Split done | Context:" in contents
    assert "'train_rows': 150" in contents


def test_log_context_is_added_and_removed(app_logger, tmp_path):
    with app_logger.log_context(model_name='random_forest'):
        app_logger.structured_log(logging.INFO, "inside")
    app_logger.structured_log(logging.INFO, "outside")

    lines = read_log(tmp_path).splitlines()
    inside = next(line for line in lines if 'inside' in line)
    outside = next(line for line in lines if 'outside' in line)
    assert "'model_name': 'random_forest'" in inside
    assert 'model_name' not in outside


def test_log_performance_logs_success_and_failure(app_logger, tmp_path):
    @app_logger.log_performance
    def works():
        return 3

    @app_logger.log_performance
    def breaks():
        raise KeyError('boom')

    assert works() == 3
    with pytest.raises(KeyError):
        breaks()

    contents = read_log(tmp_path)
    assert "Function works completed" in contents
    assert "Function breaks failed" in contents
    assert "'error_type': 'KeyError'" in contents


def test_is_ready_only_after_setup(tmp_path):
    logger = AppLogger(SimpleNamespace())
    assert not logger.is_ready

    logger.setup(str(tmp_path / 'logs' / 'app.log'))
    try:
        assert logger.is_ready
    finally:
        for handler in list(logger.logger.handlers):
            logger.logger.removeHandler(handler)
            handler.close()
