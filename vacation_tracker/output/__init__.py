"""
Output formatting and export functionality.
"""

from vacation_tracker.output.formatter import ConsoleFormatter
from vacation_tracker.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
