"""
Data models and reference data for the holiday calculator.
"""

from holiday_calculator.data.schemas import (
    Bundesland,
    Config,
    Holiday,
    HolidayKey,
    OutputFormat,
)
from holiday_calculator.data.bundesland_data import BUNDESLAND_NAMES, HOLIDAY_NAMES

__all__ = [
    "BUNDESLAND_NAMES",
    "Bundesland",
    "Config",
    "HOLIDAY_NAMES",
    "Holiday",
    "HolidayKey",
    "OutputFormat",
]
