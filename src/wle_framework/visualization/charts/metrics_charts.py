import logging
import matplotlib.pyplot as plt
import pandas as pd

from .base_chart import BaseChart
from .chart_utils import ChartUtils


class AccuracyComparisonCharts(BaseChart):
    chart_key = 'accuracy_comparison'

    def __init__(self, config, app_logger, error_handler):
        super().__init__(config, app_logger, error_handler)
        self.chart_utils = ChartUtils(app_logger, error_handler)

    @BaseChart.log_performance
    def create_figure(self, ranking: pd.DataFrame, **kwargs) -> plt.Figure:
        """Bar chart of validation accuracy (and CV accuracy where available) per model."""
        try:
            figure_size = getattr(self.chart_config, 'figure_size', [8, 5])
            fig, ax = self.chart_utils.create_figure(figsize=figure_size)

            plot_df = ranking.set_index('model')[['accuracy', 'cv_accuracy']].astype(float)
            plot_df.columns = ['Validation accuracy', 'Cross-validation accuracy']
            plot_df.plot(kind='bar', ax=ax, rot=0)
            ax.set_ylim(0, 1.05)
            ax.set_ylabel('Accuracy')
            ax.set_xlabel('')
            ax.grid(True, axis='y', linestyle='--', alpha=0.7)
            for container in ax.containers:
                ax.bar_label(container, fmt='%.3f', fontsize=8)

            self.app_logger.structured_log(
                logging.INFO,
                "Accuracy comparison chart created",
                n_models=len(ranking)
            )
            return self.chart_utils.finalize_plot(fig, ax, 'Model Accuracy Comparison')

        except Exception as e:
            self.chart_utils.handle_chart_error(e, "accuracy comparison chart", n_models=len(ranking))
