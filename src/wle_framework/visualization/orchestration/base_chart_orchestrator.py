from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional
import matplotlib.pyplot as plt
import pandas as pd

from wle_framework.framework.data_classes import ModelTrainingResults


class BaseChartOrchestrator(ABC):
    @abstractmethod
    def create_report_charts(self,
                             corr: Optional[pd.DataFrame],
                             results_by_model: Dict[str, ModelTrainingResults],
                             ranking: Optional[pd.DataFrame] = None) -> Dict[str, plt.Figure]:
        """Create all enabled report charts, keyed by chart name."""
        pass

    @abstractmethod
    def save_charts(self, charts: Dict[str, plt.Figure], output_dir: Path) -> Dict[str, Path]:
        """Save figures as PNG files and return their paths."""
        pass
