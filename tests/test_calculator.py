"""
Tests for the holiday calculator.
"""

from datetime import date, timedelta

import pytest

from holiday_calculator.core.calculator import HolidayCalculator
from holiday_calculator.data.schemas import Bundesland, HolidayKey, OutputFormat


@pytest.fixture
def calculator_2024():
    """Create a HolidayCalculator for 2024 (Easter Sunday: 31.03.)."""
    return HolidayCalculator(2024)


@pytest.fixture
def calculator_2023():
    """Create a HolidayCalculator for 2023 (26.11. is a Sunday)."""
    return HolidayCalculator(2023)


class TestConstruction:
    """Tests for year validation."""

    def test_year_property(self, calculator_2024):
        assert calculator_2024.year == 2024
        assert calculator_2024.easter_sunday_date == date(2024, 3, 31)

    @pytest.mark.parametrize("year", [1582, 0, -5, 10000])
    def test_year_out_of_range(self, year):
        with pytest.raises(ValueError, match="Year must be between"):
            HolidayCalculator(year)

    @pytest.mark.parametrize("year", ["2024", 2024.0, True, None])
    def test_year_not_an_integer(self, year):
        with pytest.raises(TypeError):
            HolidayCalculator(year)

    def test_range_limits_accepted(self):
        assert HolidayCalculator(1583).year == 1583
        assert HolidayCalculator(9999).year == 9999


class TestFixedHolidays:
    """Tests for nationwide holidays with a fixed date."""

    def test_fixed_dates(self, calculator_2024):
        assert calculator_2024.new_year() == "01.01.2024"
        assert calculator_2024.may_day() == "01.05.2024"
        assert calculator_2024.german_unity_day() == "03.10.2024"
        assert calculator_2024.christmas_day() == "25.12.2024"
        assert calculator_2024.boxing_day() == "26.12.2024"

    def test_output_formats(self, calculator_2024):
        assert calculator_2024.german_unity_day(OutputFormat.ISO) == "2024-10-03"
        assert calculator_2024.german_unity_day(OutputFormat.US) == "10/03/2024"
        assert calculator_2024.german_unity_day(OutputFormat.PARTS) == ["03", "10", "2024"]

    def test_format_given_as_string(self, calculator_2024):
        assert calculator_2024.new_year("iso") == "2024-01-01"
        assert calculator_2024.new_year("ISO") == "2024-01-01"

    def test_unknown_format_rejected(self, calculator_2024):
        with pytest.raises(ValueError, match="Invalid output format"):
            calculator_2024.new_year("julian")


class TestMovableHolidays:
    """Tests for holidays depending on Easter Sunday."""

    def test_movable_dates_2024(self, calculator_2024):
        assert calculator_2024.good_friday() == "29.03.2024"
        assert calculator_2024.easter_sunday() == "31.03.2024"
        assert calculator_2024.easter_monday() == "01.04.2024"
        assert calculator_2024.ascension_day() == "09.05.2024"
        assert calculator_2024.whit_sunday() == "19.05.2024"
        assert calculator_2024.whit_monday() == "20.05.2024"
        assert calculator_2024.corpus_christi(Bundesland.BW) == "30.05.2024"

    def test_movable_dates_2025(self):
        calculator = HolidayCalculator(2025)

        # Ostern 2025: 20. April
        assert calculator.good_friday(OutputFormat.ISO) == "2025-04-18"
        assert calculator.easter_monday(OutputFormat.ISO) == "2025-04-21"
        assert calculator.ascension_day(OutputFormat.ISO) == "2025-05-29"
        assert calculator.whit_monday(OutputFormat.ISO) == "2025-06-09"
        assert calculator.corpus_christi("BY", OutputFormat.ISO) == "2025-06-19"

    def test_good_friday_in_previous_month(self):
        # Ostern 2018: 1. April
        calculator = HolidayCalculator(2018)

        assert calculator.good_friday(OutputFormat.ISO) == "2018-03-30"

    @pytest.mark.parametrize("year", range(1990, 2061))
    def test_offsets_from_easter_sunday(self, year):
        calculator = HolidayCalculator(year)
        easter = calculator.easter_sunday_date

        assert calculator.holiday_date(HolidayKey.GOOD_FRIDAY) == easter - timedelta(days=2)
        assert calculator.holiday_date(HolidayKey.EASTER_MONDAY) == easter + timedelta(days=1)
        assert calculator.holiday_date(HolidayKey.ASCENSION_DAY) == easter + timedelta(days=39)
        assert calculator.holiday_date(HolidayKey.WHIT_SUNDAY) == easter + timedelta(days=49)
        assert calculator.holiday_date(HolidayKey.WHIT_MONDAY) == easter + timedelta(days=50)
        assert calculator.holiday_date(HolidayKey.CORPUS_CHRISTI, "BY") == easter + timedelta(days=60)

    @pytest.mark.parametrize("year", [1583, 2024, 9999])
    def test_weekdays(self, year):
        calculator = HolidayCalculator(year)

        assert calculator.holiday_date(HolidayKey.GOOD_FRIDAY).weekday() == 4
        assert calculator.holiday_date(HolidayKey.EASTER_MONDAY).weekday() == 0
        assert calculator.holiday_date(HolidayKey.ASCENSION_DAY).weekday() == 3
        assert calculator.holiday_date(HolidayKey.WHIT_MONDAY).weekday() == 0
        assert calculator.holiday_date(HolidayKey.CORPUS_CHRISTI, "BW").weekday() == 3


class TestRegionalHolidays:
    """Tests for holidays observed only in some federal states."""

    def test_epiphany_not_observed_in_bremen(self, calculator_2024):
        assert calculator_2024.epiphany(Bundesland.HB) is None

    def test_epiphany_observed_in_bayern(self, calculator_2024):
        assert calculator_2024.epiphany(Bundesland.BY) == "06.01.2024"
        assert calculator_2024.epiphany(Bundesland.BY, OutputFormat.ISO) == "2024-01-06"

    def test_state_code_case_insensitive(self, calculator_2024):
        assert calculator_2024.epiphany("by") == "06.01.2024"

    def test_unknown_state_rejected(self, calculator_2024):
        with pytest.raises(ValueError, match="Invalid bundesland code"):
            calculator_2024.epiphany("XX")

    def test_corpus_christi_states(self, calculator_2024):
        observed = {b for b in Bundesland if calculator_2024.corpus_christi(b) is not None}

        assert observed == {
            Bundesland.BW, Bundesland.BY, Bundesland.HE, Bundesland.NW,
            Bundesland.RP, Bundesland.SL, Bundesland.SN, Bundesland.TH,
        }

    def test_assumption_of_mary(self, calculator_2024):
        assert calculator_2024.assumption_of_mary(Bundesland.SL) == "15.08.2024"
        assert calculator_2024.assumption_of_mary(Bundesland.BW) is None

    def test_reformation_day(self, calculator_2024):
        assert calculator_2024.reformation_day(Bundesland.TH) == "31.10.2024"
        assert calculator_2024.reformation_day(Bundesland.BW) is None

    def test_all_hallows_day(self, calculator_2024):
        assert calculator_2024.all_hallows_day(Bundesland.NW) == "01.11.2024"
        assert calculator_2024.all_hallows_day(Bundesland.HH) is None

    def test_not_observed_in_every_format(self, calculator_2024):
        for output_format in OutputFormat:
            assert calculator_2024.reformation_day(Bundesland.BY, output_format) is None


class TestRepentanceDay:
    """Tests for Buss- und Bettag and the first Sunday of Advent."""

    def test_november_26_is_sunday(self, calculator_2023):
        # 26.11.2023 is a Sunday: the first Sunday of Advent is a week later
        assert date(2023, 11, 26).weekday() == 6
        assert calculator_2023.first_advent_sunday() == date(2023, 12, 3)
        assert calculator_2023.repentance_day(Bundesland.SN, OutputFormat.ISO) == "2023-11-22"

    def test_november_26_is_saturday(self):
        calculator = HolidayCalculator(2022)

        assert calculator.first_advent_sunday() == date(2022, 11, 27)
        assert calculator.repentance_day("SN", OutputFormat.ISO) == "2022-11-16"

    def test_regular_year(self, calculator_2024):
        assert calculator_2024.first_advent_sunday() == date(2024, 12, 1)
        assert calculator_2024.repentance_day("SN") == "20.11.2024"

    def test_only_observed_in_sachsen(self, calculator_2024):
        for bundesland in Bundesland:
            if bundesland is not Bundesland.SN:
                assert calculator_2024.repentance_day(bundesland) is None

    @pytest.mark.parametrize("year", range(1583, 2600, 7))
    def test_always_wednesday_between_16_and_22(self, year):
        calculator = HolidayCalculator(year)
        advent = calculator.first_advent_sunday()
        repentance = calculator.holiday_date(HolidayKey.REPENTANCE_DAY, Bundesland.SN)

        assert advent.weekday() == 6
        assert date(year, 11, 27) <= advent <= date(year, 12, 3)
        assert repentance.weekday() == 2
        assert date(year, 11, 16) <= repentance <= date(year, 11, 22)


class TestAllHolidays:
    """Tests for the complete holiday mapping."""

    def test_keys_in_calendar_order(self, calculator_2024):
        holidays = calculator_2024.all_holidays()

        assert list(holidays) == [key.value for key in HolidayKey]
        assert len(holidays) == 17

    def test_baden_wuerttemberg_2024(self, calculator_2024):
        holidays = calculator_2024.all_holidays(Bundesland.BW, OutputFormat.ISO)

        assert holidays["corpus-christi"] == "2024-05-30"
        assert holidays["epiphany"] == "2024-01-06"
        assert holidays["all-hallows-day"] == "2024-11-01"
        assert holidays["reformation-day"] is None
        assert holidays["repentance-day"] is None
        assert holidays["assumption-of-mary"] is None

    def test_defaults_are_bw_and_german(self, calculator_2024):
        assert calculator_2024.all_holidays() == calculator_2024.all_holidays("BW", "german")

    def test_matches_accessors(self, calculator_2024):
        holidays = calculator_2024.all_holidays(Bundesland.SN, OutputFormat.PARTS)

        assert holidays["easter-monday"] == calculator_2024.easter_monday(OutputFormat.PARTS)
        assert holidays["repentance-day"] == calculator_2024.repentance_day("SN", "parts")
        assert holidays["epiphany"] is None

    def test_hamburg_has_only_national_holidays(self, calculator_2024):
        holidays = calculator_2024.all_holidays(Bundesland.HH)
        observed = [key for key, value in holidays.items() if value is not None]

        assert len(observed) == 11


class TestHolidayList:
    """Tests for the observed holiday list and lookups."""

    def test_sorted_by_date(self, calculator_2024):
        holidays = calculator_2024.holidays(Bundesland.BY)
        dates = [h.holiday_date for h in holidays]

        assert dates == sorted(dates)

    def test_bayern_has_more_holidays_than_hamburg(self, calculator_2024):
        assert len(calculator_2024.holidays("BY")) > len(calculator_2024.holidays("HH"))

    def test_names_and_national_flag(self, calculator_2024):
        by_key = {h.key: h for h in calculator_2024.holidays(Bundesland.BY)}

        assert by_key[HolidayKey.NEW_YEAR].name == "Neujahr"
        assert by_key[HolidayKey.NEW_YEAR].is_national is True
        assert by_key[HolidayKey.CORPUS_CHRISTI].name_english == "Corpus Christi"
        assert by_key[HolidayKey.CORPUS_CHRISTI].is_national is False

    def test_is_holiday(self, calculator_2024):
        assert calculator_2024.is_holiday(date(2024, 1, 6), Bundesland.BY) is True
        assert calculator_2024.is_holiday(date(2024, 1, 6), Bundesland.HB) is False
        assert calculator_2024.is_holiday(date(2024, 7, 9), Bundesland.BY) is False

    def test_get_holiday_name(self, calculator_2024):
        assert calculator_2024.get_holiday_name(date(2024, 12, 25)) == "1. Weihnachtstag"
        assert calculator_2024.get_holiday_name(date(2024, 12, 25), language="en") == "Christmas Day"
        assert calculator_2024.get_holiday_name(date(2024, 3, 15)) is None

    def test_date_from_other_year_rejected(self, calculator_2024):
        with pytest.raises(ValueError, match="not in calculator year"):
            calculator_2024.is_holiday(date(2025, 1, 1))

    def test_unknown_key_rejected(self, calculator_2024):
        with pytest.raises(ValueError):
            calculator_2024.holiday_date("halloween")
