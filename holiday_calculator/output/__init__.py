"""
Date formatting, console output and export functionality.
"""

from holiday_calculator.output.dates import format_date, format_optional, parse_date
from holiday_calculator.output.exporter import ResultExporter
from holiday_calculator.output.formatter import ConsoleFormatter

__all__ = [
    "ConsoleFormatter",
    "ResultExporter",
    "format_date",
    "format_optional",
    "parse_date",
]
