from typing import Dict, Type
from .chart_types import ChartType
from .base_chart import BaseChart
from .correlation_charts import CorrelationCharts
from .tree_charts import DecisionTreeCharts
from .confusion_matrix_charts import ConfusionMatrixCharts
from .metrics_charts import AccuracyComparisonCharts
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.core.config_management.base_config_manager import BaseConfigManager

class ChartFactory:
    """Factory for creating chart instances with proper dependency injection."""
    
    _chart_map: Dict[ChartType, Type[BaseChart]] = {
        ChartType.CORRELATION: CorrelationCharts,
        ChartType.DECISION_TREE: DecisionTreeCharts,
        ChartType.CONFUSION_MATRIX: ConfusionMatrixCharts,
        ChartType.ACCURACY_COMPARISON: AccuracyComparisonCharts,
    }

    @classmethod
    def create_chart(cls, 
                    chart_type: ChartType,
                    config: BaseConfigManager,
                    app_logger: BaseAppLogger,
                    error_handler: ErrorHandlerFactory) -> BaseChart:
        """
        Create a chart instance with dependencies.
            
        Raises:
            ChartCreationError: If chart_type is unknown
        """
        chart_class = cls._chart_map.get(chart_type)
        if chart_class is None:
            raise error_handler.create_error_handler(
                'chart_creation',
                f"Unknown chart type: {chart_type}"
            )
        return chart_class(
            config=config,
            app_logger=app_logger,
            error_handler=error_handler
        )
