"""
String manipulation helpers.
"""

from holiday_calculator.text.helper import TextHelper

__all__ = ["TextHelper"]
