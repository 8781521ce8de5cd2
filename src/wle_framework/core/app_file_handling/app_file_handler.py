from pathlib import Path
from typing import Dict, Any, Union, List
import yaml
import pandas as pd
import matplotlib.pyplot as plt

from wle_framework.core.app_file_handling.base_app_file_handler import BaseAppFileHandler

PROJECT_ROOT = Path(__file__).parents[4]


class LocalAppFileHandler(BaseAppFileHandler):
    def read_yaml(self, path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"YAML file not found: {path}")
        with open(path, 'r') as f:
            return yaml.safe_load(f)

    def read_csv(self, path: Union[str, Path], **kwargs) -> pd.DataFrame:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"CSV file not found: {path}")
        return pd.read_csv(path, **kwargs)

    def write_csv(self, df: pd.DataFrame, path: Union[str, Path]) -> None:
        path = Path(path)
        df.to_csv(path, index=False)

    def write_text(self, text: str, path: Union[str, Path]) -> None:
        path = Path(path)
        path.write_text(text, encoding='utf-8')

    def ensure_directory(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)

    def resolve_project_root_path(self, path: str) -> str:
        """Resolves paths that contain ${PROJECT_ROOT} to absolute paths"""
        if "${PROJECT_ROOT}" in path:
            return path.replace("${PROJECT_ROOT}", str(PROJECT_ROOT))
        return path

    def load_yaml_files_in_directory(self, directory: Path, required_files: List[str] = None) -> Dict[str, Any]:
        """
        Load and merge all YAML files in a directory
        Args:
            directory: Directory containing YAML files
            required_files: List of filenames that must exist
        Raises:
            FileNotFoundError: If any required files are missing
        """
        config_dict = {}

        if required_files:
            missing_files = [f for f in required_files if not (directory / f).exists()]
            if missing_files:
                raise FileNotFoundError(f"Required config files not found: {', '.join(missing_files)}")

        for config_file in sorted(directory.glob('*.yaml')):
            config_dict.update(self.read_yaml(config_file) or {})
        return config_dict

    def save_figure(self, fig: plt.Figure, path: Union[str, Path]) -> None:
        """
        Save a matplotlib figure to the specified path.
        
        Args:
            fig: Matplotlib figure to save
            path: Path where the figure should be saved
        """
        path = Path(path)
        fig.savefig(path, bbox_inches='tight', dpi=150)
