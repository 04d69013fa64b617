"""
German public holidays for one calendar year.
"""

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Union

from holiday_calculator.core.easter import compute_easter_sunday
from holiday_calculator.data.bundesland_data import (
    EASTER_OFFSETS,
    FIXED_HOLIDAYS,
    HOLIDAY_NAMES,
    REGIONAL_HOLIDAYS,
    REPENTANCE_DAY_OFFSET,
)
from holiday_calculator.data.schemas import Bundesland, Holiday, HolidayKey, OutputFormat
from holiday_calculator.output.dates import FormattedDate, format_optional

logger = logging.getLogger(__name__)

MIN_YEAR = 1583
MAX_YEAR = 9999

StateInput = Union[Bundesland, str]
FormatInput = Union[OutputFormat, str]


class HolidayCalculator:
    """
    Calculates the German public holidays of a single year.

    Easter Sunday is computed once on construction; every movable holiday
    is a day offset from it. Regional holidays are only returned for the
    federal states observing them, otherwise the accessor returns None.

    Example:
        calculator = HolidayCalculator(2024)
        calculator.corpus_christi("BW")          # '30.05.2024'
        calculator.epiphany("HB")                # None
        calculator.all_holidays("SN", "iso")     # {'new-year': '2024-01-01', ...}
    """

    def __init__(self, year: int):
        """
        Initialize the calculator.

        Args:
            year: Calendar year (1583-9999).

        Raises:
            TypeError: If year is not an integer.
            ValueError: If year is outside the supported range.
        """
        if isinstance(year, bool) or not isinstance(year, int):
            raise TypeError(f"year must be an integer, got {type(year).__name__}")
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")

        self._year = year
        self._easter_sunday = compute_easter_sunday(year)

    @property
    def year(self) -> int:
        return self._year

    @property
    def easter_sunday_date(self) -> date:
        return self._easter_sunday

    def __repr__(self) -> str:
        return f"HolidayCalculator(year={self._year})"

    def first_advent_sunday(self) -> date:
        """
        First Sunday of Advent: the first Sunday strictly after November 26.

        A November 26 that is itself a Sunday advances a full week, which
        keeps the result between November 27 and December 3.
        """
        nov26 = date(self._year, 11, 26)
        weekday = (nov26.weekday() + 1) % 7  # Sunday = 0
        return nov26 + timedelta(days=7 - weekday)

    def holiday_date(
        self, key: Union[HolidayKey, str], federal_state: StateInput = Bundesland.BW
    ) -> Optional[date]:
        """
        Get the date of a holiday for a federal state.

        Args:
            key: Holiday key, e.g. HolidayKey.EPIPHANY or "epiphany".
            federal_state: Federal state code.

        Returns:
            The date, or None if the holiday is not observed in the state.

        Raises:
            ValueError: If the key or the federal state is unknown.
        """
        key = HolidayKey(key)
        federal_state = Bundesland.parse(federal_state)

        states = REGIONAL_HOLIDAYS.get(key)
        if states is not None and federal_state not in states:
            return None

        if key in FIXED_HOLIDAYS:
            month, day = FIXED_HOLIDAYS[key]
            return date(self._year, month, day)
        if key in EASTER_OFFSETS:
            return self._easter_sunday + timedelta(days=EASTER_OFFSETS[key])
        return self.first_advent_sunday() - timedelta(days=REPENTANCE_DAY_OFFSET)

    def all_holidays(
        self,
        federal_state: StateInput = Bundesland.BW,
        output_format: FormatInput = OutputFormat.GERMAN,
    ) -> Dict[str, Optional[FormattedDate]]:
        """
        Get every holiday of the year, keyed by holiday key.

        Args:
            federal_state: Federal state code.
            output_format: Representation of the dates.

        Returns:
            Mapping of all holiday keys to the formatted date, or None for
            holidays not observed in the federal state.
        """
        federal_state = Bundesland.parse(federal_state)
        output_format = OutputFormat.parse(output_format)
        return {
            key.value: format_optional(self.holiday_date(key, federal_state), output_format)
            for key in HolidayKey
        }

    def holidays(self, federal_state: StateInput = Bundesland.BW) -> List[Holiday]:
        """
        Get the holidays observed in a federal state, sorted by date.

        Args:
            federal_state: Federal state code.

        Returns:
            List of Holiday objects.
        """
        federal_state = Bundesland.parse(federal_state)
        result = []
        for key in HolidayKey:
            holiday_date = self.holiday_date(key, federal_state)
            if holiday_date is None:
                continue
            name, name_english = HOLIDAY_NAMES[key]
            result.append(
                Holiday(
                    key=key,
                    holiday_date=holiday_date,
                    name=name,
                    name_english=name_english,
                    is_national=key not in REGIONAL_HOLIDAYS,
                )
            )
        return sorted(result, key=lambda h: h.holiday_date)

    def is_holiday(self, check_date: date, federal_state: StateInput = Bundesland.BW) -> bool:
        """Check if a date is a holiday in the federal state."""
        return self.get_holiday_name(check_date, federal_state) is not None

    def get_holiday_name(
        self,
        check_date: date,
        federal_state: StateInput = Bundesland.BW,
        language: str = "de",
    ) -> Optional[str]:
        """
        Returns the holiday name for a date, or None.

        Raises:
            ValueError: If the date belongs to another year.
        """
        if check_date.year != self._year:
            raise ValueError(
                f"Date {check_date.isoformat()} is not in calculator year {self._year}"
            )
        for holiday in self.holidays(federal_state):
            if holiday.holiday_date == check_date:
                return holiday.name_english if language == "en" else holiday.name
        return None

    def _nationwide(self, key: HolidayKey, output_format: FormatInput) -> Optional[FormattedDate]:
        return format_optional(self.holiday_date(key), OutputFormat.parse(output_format))

    def _regional(
        self, key: HolidayKey, federal_state: StateInput, output_format: FormatInput
    ) -> Optional[FormattedDate]:
        return format_optional(
            self.holiday_date(key, federal_state), OutputFormat.parse(output_format)
        )

    # Nationwide holidays

    def new_year(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.NEW_YEAR, output_format)

    def good_friday(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.GOOD_FRIDAY, output_format)

    def easter_sunday(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.EASTER_SUNDAY, output_format)

    def easter_monday(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.EASTER_MONDAY, output_format)

    def may_day(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.MAY_DAY, output_format)

    def ascension_day(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.ASCENSION_DAY, output_format)

    def whit_sunday(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.WHIT_SUNDAY, output_format)

    def whit_monday(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.WHIT_MONDAY, output_format)

    def german_unity_day(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.GERMAN_UNITY_DAY, output_format)

    def christmas_day(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.CHRISTMAS_DAY, output_format)

    def boxing_day(self, output_format: FormatInput = OutputFormat.GERMAN) -> FormattedDate:
        return self._nationwide(HolidayKey.BOXING_DAY, output_format)

    # Regional holidays, None when not observed in the federal state

    def epiphany(
        self,
        federal_state: StateInput = Bundesland.BW,
        output_format: FormatInput = OutputFormat.GERMAN,
    ) -> Optional[FormattedDate]:
        return self._regional(HolidayKey.EPIPHANY, federal_state, output_format)

    def corpus_christi(
        self,
        federal_state: StateInput = Bundesland.BW,
        output_format: FormatInput = OutputFormat.GERMAN,
    ) -> Optional[FormattedDate]:
        return self._regional(HolidayKey.CORPUS_CHRISTI, federal_state, output_format)

    def assumption_of_mary(
        self,
        federal_state: StateInput = Bundesland.BW,
        output_format: FormatInput = OutputFormat.GERMAN,
    ) -> Optional[FormattedDate]:
        return self._regional(HolidayKey.ASSUMPTION_OF_MARY, federal_state, output_format)

    def reformation_day(
        self,
        federal_state: StateInput = Bundesland.BW,
        output_format: FormatInput = OutputFormat.GERMAN,
    ) -> Optional[FormattedDate]:
        return self._regional(HolidayKey.REFORMATION_DAY, federal_state, output_format)

    def all_hallows_day(
        self,
        federal_state: StateInput = Bundesland.BW,
        output_format: FormatInput = OutputFormat.GERMAN,
    ) -> Optional[FormattedDate]:
        return self._regional(HolidayKey.ALL_HALLOWS_DAY, federal_state, output_format)

    def repentance_day(
        self,
        federal_state: StateInput = Bundesland.BW,
        output_format: FormatInput = OutputFormat.GERMAN,
    ) -> Optional[FormattedDate]:
        return self._regional(HolidayKey.REPENTANCE_DAY, federal_state, output_format)
