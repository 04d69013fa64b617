"""
Core business logic for holiday calculation.
"""

from holiday_calculator.core.calculator import HolidayCalculator
from holiday_calculator.core.easter import compute_easter_sunday

__all__ = [
    "HolidayCalculator",
    "compute_easter_sunday",
]
