"""
Easter Sunday calculation using Spencer's Easter formula.

See https://de.wikipedia.org/wiki/Spencers_Osterformel
"""

import logging
from datetime import date

logger = logging.getLogger(__name__)


def compute_easter_sunday(year: int) -> date:
    """
    Calculate the date of Easter Sunday for a Gregorian calendar year.

    Args:
        year: Calendar year.

    Returns:
        Date of Easter Sunday.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1

    easter_sunday = date(year, month, day)
    logger.debug("Easter Sunday %d: %s", year, easter_sunday.isoformat())
    return easter_sunday
