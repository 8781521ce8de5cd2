import logging
import matplotlib.pyplot as plt
from sklearn.tree import plot_tree

from .base_chart import BaseChart
from .chart_utils import ChartUtils
from wle_framework.framework.data_classes import ModelTrainingResults


class DecisionTreeCharts(BaseChart):
    chart_key = 'decision_tree'

    def __init__(self, config, app_logger, error_handler):
        super().__init__(config, app_logger, error_handler)
        self.chart_utils = ChartUtils(app_logger, error_handler)

    @BaseChart.log_performance
    def create_figure(self, results: ModelTrainingResults, **kwargs) -> plt.Figure:
        """Diagram of the top levels of a fitted decision tree."""
        try:
            max_depth = kwargs.get('max_depth', getattr(self.chart_config, 'max_depth', 3))
            figure_size = getattr(self.chart_config, 'figure_size', [24, 12])

            fig, ax = self.chart_utils.create_figure(figsize=figure_size)
            plot_tree(
                results.model,
                max_depth=max_depth,
                feature_names=results.feature_names,
                class_names=[str(c) for c in results.classes],
                filled=True,
                rounded=True,
                impurity=False,
                proportion=True,
                fontsize=8,
                ax=ax
            )

            self.app_logger.structured_log(
                logging.INFO,
                "Decision tree chart created",
                model_name=results.model_name,
                tree_depth=results.model.get_depth(),
                plotted_depth=max_depth
            )
            return self.chart_utils.finalize_plot(
                fig, ax, f'{results.display_name or results.model_name} (top {max_depth} levels)'
            )

        except Exception as e:
            self.chart_utils.handle_chart_error(e, "decision tree chart", model_name=results.model_name)
