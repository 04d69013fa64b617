"""
Data models for the holiday calculator using Pydantic.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Bundesland(str, Enum):
    """German federal states (Bundeslaender)."""

    BB = "BB"  # Brandenburg
    BE = "BE"  # Berlin
    BW = "BW"  # Baden-Wuerttemberg
    BY = "BY"  # Bayern
    HB = "HB"  # Bremen
    HE = "HE"  # Hessen
    HH = "HH"  # Hamburg
    MV = "MV"  # Mecklenburg-Vorpommern
    NI = "NI"  # Niedersachsen
    NW = "NW"  # Nordrhein-Westfalen
    RP = "RP"  # Rheinland-Pfalz
    SH = "SH"  # Schleswig-Holstein
    SL = "SL"  # Saarland
    SN = "SN"  # Sachsen
    ST = "ST"  # Sachsen-Anhalt
    TH = "TH"  # Thueringen

    @classmethod
    def parse(cls, value: "Bundesland | str") -> "Bundesland":
        """
        Coerce a Bundesland or a case-insensitive code string.

        Raises:
            ValueError: If the code is not one of the 16 federal states.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            valid_codes = ", ".join(b.value for b in cls)
            raise ValueError(
                f"Invalid bundesland code: {value}. Valid codes: {valid_codes}"
            ) from None


class OutputFormat(str, Enum):
    """Representation of a holiday date."""

    GERMAN = "german"  # DD.MM.YYYY
    ISO = "iso"  # YYYY-MM-DD
    US = "us"  # MM/DD/YYYY
    PARTS = "parts"  # ["DD", "MM", "YYYY"]

    @classmethod
    def parse(cls, value: "OutputFormat | str") -> "OutputFormat":
        """Coerce an OutputFormat or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid_formats = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Invalid output format: {value}. Valid formats: {valid_formats}"
            ) from None


class HolidayKey(str, Enum):
    """Keys of all holidays known to the calculator, in calendar order."""

    NEW_YEAR = "new-year"
    EPIPHANY = "epiphany"
    GOOD_FRIDAY = "good-friday"
    EASTER_SUNDAY = "easter-sunday"
    EASTER_MONDAY = "easter-monday"
    MAY_DAY = "may-day"
    ASCENSION_DAY = "ascension-day"
    WHIT_SUNDAY = "whit-sunday"
    WHIT_MONDAY = "whit-monday"
    CORPUS_CHRISTI = "corpus-christi"
    ASSUMPTION_OF_MARY = "assumption-of-mary"
    GERMAN_UNITY_DAY = "german-unity-day"
    REFORMATION_DAY = "reformation-day"
    ALL_HALLOWS_DAY = "all-hallows-day"
    REPENTANCE_DAY = "repentance-day"
    CHRISTMAS_DAY = "christmas-day"
    BOXING_DAY = "boxing-day"


class Holiday(BaseModel):
    """Represents an observed public holiday."""

    key: HolidayKey = Field(..., description="Stable holiday key")
    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday in German")
    name_english: str = Field(..., description="Name in English")
    is_national: bool = Field(default=True, description="Whether it's a national holiday")


class Config(BaseModel):
    """Configuration for the holiday calculator."""

    default_bundesland: Bundesland = Field(
        default=Bundesland.BW, description="Bundesland used if none is specified"
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.GERMAN, description="Default date representation"
    )
    holiday_language: str = Field(default="de", description="Language for holiday names")
    output_directory: str = Field(default="results", description="Directory for output files")

    @field_validator("holiday_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Only German and English holiday names exist."""
        v = v.lower()
        if v not in ("de", "en"):
            raise ValueError("holiday_language must be 'de' or 'en'")
        return v
