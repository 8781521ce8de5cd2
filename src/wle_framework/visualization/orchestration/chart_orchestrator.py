import logging
from pathlib import Path
from typing import Dict, Optional
import matplotlib.pyplot as plt
import pandas as pd

from ..charts.chart_factory import ChartFactory
from ..charts.chart_types import ChartType
from ..charts.base_chart import BaseChart
from wle_framework.core.app_file_handling.base_app_file_handler import BaseAppFileHandler
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.framework.data_classes import ModelTrainingResults
from .base_chart_orchestrator import BaseChartOrchestrator


class ChartOrchestrator(BaseChartOrchestrator):
    """Creates and saves the charts embedded in the report."""

    _option_keys = {
        ChartType.CORRELATION: 'correlation',
        ChartType.DECISION_TREE: 'decision_tree',
        ChartType.CONFUSION_MATRIX: 'confusion_matrix',
        ChartType.ACCURACY_COMPARISON: 'accuracy_comparison',
    }
    
    def __init__(self,
                 config: BaseConfigManager,
                 app_logger: BaseAppLogger,
                 error_handler: ErrorHandlerFactory,
                 app_file_handler: BaseAppFileHandler):
        """
        Initialize the ChartOrchestrator with dependencies.
        
        Args:
            config: Configuration manager
            app_logger: Application logger
            error_handler: Error handler
            app_file_handler: Application file handler
        """
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler
        self.app_file_handler = app_file_handler
        self.chart_options = getattr(config.core, 'chart_options', None)
        
        self.charts: Dict[ChartType, BaseChart] = {}
        self._initialize_charts()
        
        self.app_logger.structured_log(
            logging.INFO,
            "ChartOrchestrator initialized",
            active_charts=[chart_type.name for chart_type in self.charts]
        )

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    def _initialize_charts(self) -> None:
        """Initialize enabled chart types based on configuration."""
        for chart_type, option_key in self._option_keys.items():
            options = getattr(self.chart_options, option_key, None)
            if getattr(options, 'enabled', False):
                self.charts[chart_type] = ChartFactory.create_chart(
                    chart_type, self.config, self.app_logger, self.error_handler
                )

    @log_performance
    def create_report_charts(self,
                             corr: Optional[pd.DataFrame],
                             results_by_model: Dict[str, ModelTrainingResults],
                             ranking: Optional[pd.DataFrame] = None) -> Dict[str, plt.Figure]:
        """
        Create all enabled charts for the report.
        
        Returns:
            Dictionary mapping chart names to figure objects
        """
        charts_dict = {}

        if ChartType.CORRELATION in self.charts and corr is not None:
            charts_dict['correlation'] = self.charts[ChartType.CORRELATION].create_figure(corr=corr)

        if ChartType.DECISION_TREE in self.charts:
            tree_model_name = getattr(self.chart_options.decision_tree, 'model_name', 'decision_tree')
            tree_results = results_by_model.get(tree_model_name)
            if tree_results is not None:
                charts_dict['decision_tree'] = self.charts[ChartType.DECISION_TREE].create_figure(
                    results=tree_results
                )
            else:
                self.app_logger.structured_log(
                    logging.WARNING,
                    "Decision tree chart skipped, model not trained",
                    model_name=tree_model_name
                )

        if ChartType.CONFUSION_MATRIX in self.charts:
            for model_name, results in results_by_model.items():
                charts_dict[f'confusion_matrix_{model_name}'] = \
                    self.charts[ChartType.CONFUSION_MATRIX].create_figure(results=results)

        if ChartType.ACCURACY_COMPARISON in self.charts and ranking is not None and len(ranking) > 0:
            charts_dict['accuracy_comparison'] = \
                self.charts[ChartType.ACCURACY_COMPARISON].create_figure(ranking=ranking)

        self.app_logger.structured_log(
            logging.INFO,
            "Report charts created",
            charts=list(charts_dict.keys())
        )
        return charts_dict

    @log_performance
    def save_charts(self, charts: Dict[str, plt.Figure], output_dir: Path) -> Dict[str, Path]:
        output_dir = Path(output_dir)
        saved = {}
        try:
            self.app_file_handler.ensure_directory(output_dir)
            for chart_name, fig in charts.items():
                path = output_dir / f"{chart_name}.png"
                self.app_file_handler.save_figure(fig, path)
                saved[chart_name] = path
            return saved
        except Exception as e:
            raise self.error_handler.create_error_handler(
                'chart_creation',
                "Error saving charts",
                original_error=str(e),
                output_dir=str(output_dir)
            )
        finally:
            # Clean up memory, saved or not
            for fig in charts.values():
                plt.close(fig)
