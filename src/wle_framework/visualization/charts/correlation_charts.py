import logging
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from .base_chart import BaseChart
from .chart_utils import ChartUtils
from wle_framework.visualization.exploratory.correlation_explorer import CorrelationExplorer


class CorrelationCharts(BaseChart):
    chart_key = 'correlation'

    def __init__(self, config, app_logger, error_handler):
        super().__init__(config, app_logger, error_handler)
        self.chart_utils = ChartUtils(app_logger, error_handler)

    @BaseChart.log_performance
    def create_figure(self, corr: pd.DataFrame, **kwargs) -> plt.Figure:
        """
        Heatmap of a feature correlation matrix.

        Args:
            corr: Square correlation matrix
            **kwargs: order ('fpc' or 'original') overrides the configured order
        """
        try:
            order = kwargs.get('order', getattr(self.chart_config, 'order', 'fpc'))
            figure_size = getattr(self.chart_config, 'figure_size', [14, 12])

            if order == 'fpc':
                corr = CorrelationExplorer.order_by_first_principal_component(corr)

            fig, ax = self.chart_utils.create_figure(figsize=figure_size)
            sns.heatmap(
                corr,
                ax=ax,
                cmap='RdBu_r',
                vmin=-1,
                vmax=1,
                center=0,
                square=True,
                xticklabels=True,
                yticklabels=True,
                cbar_kws={'shrink': 0.7}
            )
            ax.tick_params(axis='both', labelsize=6)

            self.app_logger.structured_log(
                logging.INFO,
                "Correlation chart created",
                n_features=corr.shape[0],
                order=order
            )
            return self.chart_utils.finalize_plot(fig, ax, 'Feature Correlation Matrix')

        except Exception as e:
            self.chart_utils.handle_chart_error(e, "correlation chart", matrix_shape=corr.shape)
