"""
Log formatters module

Provides the formatters that control console output.
"""

from process_logger.formatters.line_formatter import LineFormatter
from process_logger.formatters.report_formatter import ReportFormatter, uptime_hours

__all__ = [
    "LineFormatter",
    "ReportFormatter",
    "uptime_hours",
]
