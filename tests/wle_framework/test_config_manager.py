"""
Tests for the ConfigManager.
"""
import pytest
import yaml

from wle_framework.core.app_file_handling.app_file_handler import LocalAppFileHandler, PROJECT_ROOT
from wle_framework.core.config_management.config_manager import ConfigManager


def write_yaml(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data))


@pytest.fixture
def config_dir(tmp_path):
    root = tmp_path / 'configs'
    write_yaml(root / 'app_config.yaml', {
        'project_name': 'wle',
        'target_column': 'classe',
        'output_directory': '${PROJECT_ROOT}/output'
    })
    write_yaml(root / 'core' / 'model_testing_config.yaml', {'training_fraction': 0.75, 'n_splits': 5})
    write_yaml(root / 'core' / 'models' / 'random_forest.yaml', {
        'trainer': 'sklearn',
        'param_grid': {'max_features': ['sqrt', 0.5]}
    })
    return root


def test_root_files_become_top_level_attributes(config_dir):
    config = ConfigManager(config_dir, LocalAppFileHandler())

    assert config.project_name == 'wle'
    assert config.target_column == 'classe'


def test_nested_directories_become_nested_namespaces(config_dir):
    config = ConfigManager(config_dir, LocalAppFileHandler())

    assert config.core.model_testing_config.training_fraction == 0.75
    assert config.core.model_testing_config.n_splits == 5
    assert config.core.models.random_forest.trainer == 'sklearn'
    assert config.core.models.random_forest.param_grid.max_features == ['sqrt', 0.5]


def test_project_root_placeholder_is_resolved(config_dir):
    config = ConfigManager(config_dir, LocalAppFileHandler())

    assert config.output_directory == f"{PROJECT_ROOT}/output"


def test_missing_app_config_raises(tmp_path):
    (tmp_path / 'empty').mkdir()
    with pytest.raises(FileNotFoundError):
        ConfigManager(tmp_path / 'empty', LocalAppFileHandler())


def test_get_config_returns_manager(config_dir):
    config = ConfigManager(config_dir, LocalAppFileHandler())
    assert config.get_config() is config


def test_repository_configs_load():
    """The shipped configs load and name the three models."""
    config = ConfigManager(PROJECT_ROOT / 'configs', LocalAppFileHandler())

    assert set(vars(config.core.models)) == {'random_forest', 'decision_tree', 'gradient_boosting'}
    assert config.core.preprocessing_config.identifier_column_count == 5
    assert config.core.data_access_config.na_values == ['NA', '#DIV/0!', '']
    assert config.class_labels == ['A', 'B', 'C', 'D', 'E']
