import logging
import matplotlib.pyplot as plt
import seaborn as sns

from .base_chart import BaseChart
from .chart_utils import ChartUtils
from wle_framework.framework.data_classes import ModelTrainingResults


class ConfusionMatrixCharts(BaseChart):
    chart_key = 'confusion_matrix'

    def __init__(self, config, app_logger, error_handler):
        super().__init__(config, app_logger, error_handler)
        self.chart_utils = ChartUtils(app_logger, error_handler)

    @BaseChart.log_performance
    def create_figure(self, results: ModelTrainingResults, **kwargs) -> plt.Figure:
        """Heatmap of a model's validation confusion matrix."""
        try:
            if results.metrics is None or results.metrics.confusion_matrix is None:
                raise ValueError("Model has not been evaluated")

            cmap = getattr(self.chart_config, 'cmap', 'Blues')
            figure_size = getattr(self.chart_config, 'figure_size', [7, 6])
            cm = results.metrics.confusion_matrix

            fig, ax = self.chart_utils.create_figure(figsize=figure_size)
            sns.heatmap(cm, annot=True, fmt='d', cmap=cmap, cbar=False, ax=ax)
            ax.set_xlabel('Predicted label')
            ax.set_ylabel('True label')

            self.app_logger.structured_log(
                logging.INFO,
                "Confusion matrix chart created",
                model_name=results.model_name,
                n_classes=cm.shape[0]
            )
            title = (f'{results.display_name or results.model_name}: '
                     f'accuracy {results.metrics.accuracy:.4f}')
            return self.chart_utils.finalize_plot(fig, ax, title)

        except Exception as e:
            self.chart_utils.handle_chart_error(e, "confusion matrix chart", model_name=results.model_name)
