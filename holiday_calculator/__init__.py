"""
German public holiday calculator and string helpers.
"""

__version__ = "0.1.0"

from holiday_calculator.core.calculator import HolidayCalculator
from holiday_calculator.core.easter import compute_easter_sunday
from holiday_calculator.data.schemas import Bundesland, HolidayKey, OutputFormat
from holiday_calculator.text.helper import TextHelper

__all__ = [
    "Bundesland",
    "HolidayCalculator",
    "HolidayKey",
    "OutputFormat",
    "TextHelper",
    "compute_easter_sunday",
]
