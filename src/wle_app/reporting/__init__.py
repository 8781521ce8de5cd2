from .report_content import ReportContent
from .report_builder import ReportBuilder

__all__ = ['ReportContent', 'ReportBuilder']
