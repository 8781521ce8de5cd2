from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Any, Union, List
import pandas as pd
import matplotlib.pyplot as plt


class BaseAppFileHandler(ABC):
    @abstractmethod
    def read_yaml(self, path: Union[str, Path]) -> Dict[str, Any]:
        pass

    @abstractmethod
    def read_csv(self, path: Union[str, Path], **kwargs) -> pd.DataFrame:
        pass

    @abstractmethod
    def write_csv(self, df: pd.DataFrame, path: Union[str, Path]) -> None:
        pass

    @abstractmethod
    def write_text(self, text: str, path: Union[str, Path]) -> None:
        pass

    @abstractmethod
    def ensure_directory(self, path: Union[str, Path]) -> None:
        pass

    @abstractmethod
    def resolve_project_root_path(self, path: str) -> str:
        """Resolves paths that contain ${PROJECT_ROOT} to absolute paths"""
        pass

    @abstractmethod
    def load_yaml_files_in_directory(self, directory: Path, required_files: List[str] = None) -> Dict[str, Any]:
        pass

    @abstractmethod
    def save_figure(self, fig: plt.Figure, path: Union[str, Path]) -> None:
        pass
