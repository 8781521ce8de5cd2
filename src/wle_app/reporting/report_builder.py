"""
HTML rendering of a pipeline run.

The report is a single self-contained page: tables come from
DataFrame.to_html and charts are linked as PNG files relative to the
report location.
"""

import html
import logging
import os
from pathlib import Path
from typing import Dict, Optional
import pandas as pd

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.core.app_file_handling.base_app_file_handler import BaseAppFileHandler

from .report_content import ReportContent


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; margin: 2em auto; max-width: 1100px; color: #222; }}
table {{ border-collapse: collapse; margin: 1em 0; }}
th, td {{ border: 1px solid #ccc; padding: 4px 8px; text-align: right; }}
th {{ background: #f0f0f0; }}
img {{ max-width: 100%; margin: 1em 0; }}
.best {{ background: #eef7ee; border-left: 4px solid #4a4; padding: 0.5em 1em; }}
</style>
</head>
<body>
<h1>{title}</h1>
{sections}
</body>
</html>
"""


class ReportBuilder:
    def __init__(self,
                 config: BaseConfigManager,
                 app_logger: BaseAppLogger,
                 error_handler: ErrorHandlerFactory,
                 app_file_handler: BaseAppFileHandler):
        self.config = config
        self.app_logger = app_logger
        self.error_handler = error_handler
        self.app_file_handler = app_file_handler

        report_cfg = getattr(config.core, 'report_config', None)
        self.title = getattr(report_cfg, 'title', 'Exercise Quality Classification Report')
        self.report_file = getattr(report_cfg, 'report_file', 'report.html')
        self.float_precision = getattr(report_cfg, 'float_precision', 4)
        self.max_correlation_pairs = getattr(report_cfg, 'max_correlation_pairs', 25)

    @staticmethod
    def log_performance(func):
        """Decorator factory for performance logging"""
        def wrapper(*args, **kwargs):
            instance = args[0]
            return instance.app_logger.log_performance(func)(*args, **kwargs)
        return wrapper

    def _table(self, df: Optional[pd.DataFrame], index: bool = False) -> str:
        if df is None or df.empty:
            return "<p><em>None.</em></p>"
        precision = self.float_precision
        return df.to_html(index=index, border=0, float_format=lambda v: f"{v:.{precision}f}")

    @staticmethod
    def _image(path: Optional[Path], report_dir: Path, alt: str) -> str:
        if path is None:
            return ""
        src = Path(os.path.relpath(Path(path), report_dir)).as_posix()
        return f'<img src="{html.escape(src)}" alt="{html.escape(alt)}">'

    def render(self, content: ReportContent, report_dir: Path) -> str:
        """Render the report page as an HTML string."""
        charts: Dict[str, Path] = content.chart_paths
        best = content.best_model
        sections = []

        sections.append("<h2>Data</h2>")
        sections.append(self._table(content.data_summary()))
        class_counts = content.class_distribution.rename('rows').rename_axis('label').reset_index()
        sections.append("<h3>Training label distribution</h3>")
        sections.append(self._table(class_counts))

        sections.append("<h2>Cleaning</h2>")
        sections.append(
            f"<p>{len(content.cleaning_results.original_columns)} columns in, "
            f"{len(content.cleaning_results.feature_columns)} features retained.</p>"
        )
        sections.append(self._table(content.cleaning_summary()))

        sections.append("<h2>Exploration</h2>")
        sections.append(self._image(charts.get('correlation'), report_dir, 'Feature correlation'))
        sections.append("<h3>Highly correlated feature pairs</h3>")
        sections.append(self._table(content.high_correlation_pairs.head(self.max_correlation_pairs)))

        sections.append("<h2>Models</h2>")
        sections.append("<h3>Cross-validation</h3>")
        sections.append(self._table(content.cross_validation_summary()))
        for name, results in content.results_by_model.items():
            if results.cv_results is not None and len(results.cv_results) > 1:
                label = results.display_name or name
                sections.append(f"<h3>{html.escape(label)}: parameter grid</h3>")
                sections.append(self._table(results.cv_results))
        sections.append(self._image(charts.get('decision_tree'), report_dir, 'Decision tree'))

        for name, results in content.results_by_model.items():
            label = results.display_name or name
            sections.append(f"<h3>{html.escape(label)}: validation confusion matrix</h3>")
            image = self._image(charts.get(f'confusion_matrix_{name}'), report_dir, f'{label} confusion matrix')
            if image:
                sections.append(image)
            elif results.metrics is not None:
                sections.append(self._table(results.metrics.confusion_matrix, index=True))

        sections.append("<h2>Model comparison</h2>")
        sections.append(self._image(charts.get('accuracy_comparison'), report_dir, 'Accuracy comparison'))
        sections.append(self._table(content.ranking))
        sections.append(
            f'<p class="best">Best model: <strong>{html.escape(best.display_name or best.model_name)}</strong>, '
            f'validation accuracy {best.metrics.accuracy:.{self.float_precision}f}, '
            f'estimated out-of-sample error {best.metrics.out_of_sample_error:.{self.float_precision}f}.</p>'
        )

        if content.quiz_predictions is not None:
            sections.append("<h2>Quiz predictions</h2>")
            sections.append(self._table(content.quiz_predictions))

        return PAGE_TEMPLATE.format(
            title=html.escape(self.title),
            sections="\n".join(s for s in sections if s)
        )

    @log_performance
    def build_report(self, content: ReportContent, output_dir: Path) -> Path:
        """
        Write the HTML report into output_dir.

        Returns:
            Path of the written report

        Raises:
            ReportGenerationError: If rendering or writing fails.
        """
        output_dir = Path(output_dir)
        report_path = output_dir / self.report_file
        try:
            self.app_file_handler.ensure_directory(output_dir)
            page = self.render(content, output_dir)
            self.app_file_handler.write_text(page, report_path)
        except Exception as e:
            raise self.error_handler.create_error_handler(
                'report_generation',
                "Error generating report",
                error_message=str(e),
                report_path=str(report_path)
            )

        self.app_logger.structured_log(
            logging.INFO,
            "Report written",
            report_path=str(report_path),
            n_charts=len(content.chart_paths),
            best_model=content.best_model.model_name
        )
        return report_path
