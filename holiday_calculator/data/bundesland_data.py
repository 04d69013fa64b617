"""
Static reference data: federal state names, holiday names and regional rules.
"""

from typing import Dict, FrozenSet, Tuple

from holiday_calculator.data.schemas import Bundesland, HolidayKey

BUNDESLAND_NAMES: Dict[Bundesland, str] = {
    Bundesland.BB: "Brandenburg",
    Bundesland.BE: "Berlin",
    Bundesland.BW: "Baden-Württemberg",
    Bundesland.BY: "Bayern",
    Bundesland.HB: "Bremen",
    Bundesland.HE: "Hessen",
    Bundesland.HH: "Hamburg",
    Bundesland.MV: "Mecklenburg-Vorpommern",
    Bundesland.NI: "Niedersachsen",
    Bundesland.NW: "Nordrhein-Westfalen",
    Bundesland.RP: "Rheinland-Pfalz",
    Bundesland.SH: "Schleswig-Holstein",
    Bundesland.SL: "Saarland",
    Bundesland.SN: "Sachsen",
    Bundesland.ST: "Sachsen-Anhalt",
    Bundesland.TH: "Thüringen",
}

# (German, English)
HOLIDAY_NAMES: Dict[HolidayKey, Tuple[str, str]] = {
    HolidayKey.NEW_YEAR: ("Neujahr", "New Year's Day"),
    HolidayKey.EPIPHANY: ("Heilige Drei Könige", "Epiphany"),
    HolidayKey.GOOD_FRIDAY: ("Karfreitag", "Good Friday"),
    HolidayKey.EASTER_SUNDAY: ("Ostersonntag", "Easter Sunday"),
    HolidayKey.EASTER_MONDAY: ("Ostermontag", "Easter Monday"),
    HolidayKey.MAY_DAY: ("Tag der Arbeit", "May Day"),
    HolidayKey.ASCENSION_DAY: ("Christi Himmelfahrt", "Ascension Day"),
    HolidayKey.WHIT_SUNDAY: ("Pfingstsonntag", "Whit Sunday"),
    HolidayKey.WHIT_MONDAY: ("Pfingstmontag", "Whit Monday"),
    HolidayKey.CORPUS_CHRISTI: ("Fronleichnam", "Corpus Christi"),
    HolidayKey.ASSUMPTION_OF_MARY: ("Mariä Himmelfahrt", "Assumption of Mary"),
    HolidayKey.GERMAN_UNITY_DAY: ("Tag der Deutschen Einheit", "German Unity Day"),
    HolidayKey.REFORMATION_DAY: ("Reformationstag", "Reformation Day"),
    HolidayKey.ALL_HALLOWS_DAY: ("Allerheiligen", "All Hallows' Day"),
    HolidayKey.REPENTANCE_DAY: ("Buß- und Bettag", "Day of Repentance and Prayer"),
    HolidayKey.CHRISTMAS_DAY: ("1. Weihnachtstag", "Christmas Day"),
    HolidayKey.BOXING_DAY: ("2. Weihnachtstag", "Boxing Day"),
}

# Holidays observed only in the listed states. Everything else is nationwide.
REGIONAL_HOLIDAYS: Dict[HolidayKey, FrozenSet[Bundesland]] = {
    HolidayKey.EPIPHANY: frozenset({Bundesland.BW, Bundesland.BY, Bundesland.ST}),
    HolidayKey.CORPUS_CHRISTI: frozenset({
        Bundesland.BW,
        Bundesland.BY,
        Bundesland.HE,
        Bundesland.NW,
        Bundesland.RP,
        Bundesland.SL,
        Bundesland.SN,
        Bundesland.TH,
    }),
    HolidayKey.ASSUMPTION_OF_MARY: frozenset({Bundesland.BY, Bundesland.SL}),
    HolidayKey.REFORMATION_DAY: frozenset({
        Bundesland.BB,
        Bundesland.MV,
        Bundesland.SN,
        Bundesland.ST,
        Bundesland.TH,
    }),
    HolidayKey.ALL_HALLOWS_DAY: frozenset({
        Bundesland.BW,
        Bundesland.BY,
        Bundesland.NW,
        Bundesland.RP,
        Bundesland.SL,
    }),
    HolidayKey.REPENTANCE_DAY: frozenset({Bundesland.SN}),
}

# Fixed (month, day) holidays.
FIXED_HOLIDAYS: Dict[HolidayKey, Tuple[int, int]] = {
    HolidayKey.NEW_YEAR: (1, 1),
    HolidayKey.EPIPHANY: (1, 6),
    HolidayKey.MAY_DAY: (5, 1),
    HolidayKey.ASSUMPTION_OF_MARY: (8, 15),
    HolidayKey.GERMAN_UNITY_DAY: (10, 3),
    HolidayKey.REFORMATION_DAY: (10, 31),
    HolidayKey.ALL_HALLOWS_DAY: (11, 1),
    HolidayKey.CHRISTMAS_DAY: (12, 25),
    HolidayKey.BOXING_DAY: (12, 26),
}

# Offsets in days from Easter Sunday.
EASTER_OFFSETS: Dict[HolidayKey, int] = {
    HolidayKey.GOOD_FRIDAY: -2,
    HolidayKey.EASTER_SUNDAY: 0,
    HolidayKey.EASTER_MONDAY: 1,
    HolidayKey.ASCENSION_DAY: 39,
    HolidayKey.WHIT_SUNDAY: 49,
    HolidayKey.WHIT_MONDAY: 50,
    HolidayKey.CORPUS_CHRISTI: 60,
}

# Repentance Day is this many days before the first Sunday of Advent.
REPENTANCE_DAY_OFFSET = 11
