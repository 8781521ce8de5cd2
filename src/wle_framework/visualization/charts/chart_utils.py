import logging
import matplotlib.pyplot as plt
from typing import Tuple
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory

class ChartUtils:
    """Utility class providing common chart methods."""
    
    def __init__(self, app_logger: BaseAppLogger, error_handler: ErrorHandlerFactory):
        self.app_logger = app_logger
        self.error_handler = error_handler

    def create_figure(self, figsize: Tuple[float, float] = (12, 8)) -> Tuple[plt.Figure, plt.Axes]:
        fig, ax = plt.subplots(figsize=tuple(figsize))
        return fig, ax

    def finalize_plot(self, fig: plt.Figure, ax: plt.Axes, title: str) -> plt.Figure:
        ax.set_title(title)
        fig.tight_layout()
        return fig

    def handle_chart_error(self, e: Exception, chart_type: str, **kwargs) -> None:
        """
        Handle chart creation errors consistently.
        
        Args:
            e: The exception that occurred
            chart_type: Type of chart being created
            **kwargs: Additional context to log
        """
        self.app_logger.structured_log(
            logging.ERROR,
            f"Error creating {chart_type}",
            error_message=str(e),
            exception_type=type(e).__name__,
            **kwargs
        )
        raise self.error_handler.create_error_handler(
            'chart_creation',
            f"Error creating {chart_type}",
            original_error=str(e),
            **kwargs
        )
