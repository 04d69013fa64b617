"""
Date formatting and parsing for the supported output formats.
"""

from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from holiday_calculator.data.schemas import OutputFormat

FormattedDate = Union[str, List[str]]

_PARSE_PATTERNS = {
    OutputFormat.GERMAN: "%d.%m.%Y",
    OutputFormat.ISO: "%Y-%m-%d",
    OutputFormat.US: "%m/%d/%Y",
}


def format_date(d: date, output_format: OutputFormat = OutputFormat.GERMAN) -> FormattedDate:
    """
    Format a date in one of the supported representations.

    Args:
        d: Date to format.
        output_format: Target representation.

    Returns:
        A string, or for OutputFormat.PARTS a list of zero-padded
        [day, month, year] strings.
    """
    output_format = OutputFormat.parse(output_format)

    if output_format is OutputFormat.PARTS:
        return [f"{d.day:02d}", f"{d.month:02d}", f"{d.year:04d}"]

    # Years are always zero-padded to four digits
    if output_format is OutputFormat.GERMAN:
        return f"{d.day:02d}.{d.month:02d}.{d.year:04d}"
    if output_format is OutputFormat.ISO:
        return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
    return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"


def format_optional(
    d: Optional[date], output_format: OutputFormat = OutputFormat.GERMAN
) -> Optional[FormattedDate]:
    """Format a date, passing None ("not observed") through unchanged."""
    if d is None:
        return None
    return format_date(d, output_format)


def parse_date(
    value: Union[str, Sequence[str]], output_format: Optional[OutputFormat] = None
) -> date:
    """
    Parse a formatted date back into a date.

    Args:
        value: Formatted date string, or a [day, month, year] sequence.
        output_format: Expected format. If None, German, ISO and US are tried in turn.

    Returns:
        The parsed date.

    Raises:
        ValueError: If the value does not match the format or is not a valid date.
    """
    if output_format is not None:
        output_format = OutputFormat.parse(output_format)

    if not isinstance(value, str):
        if output_format not in (None, OutputFormat.PARTS):
            raise ValueError(f"Expected a string for format {output_format.value}")
        parts = list(value)
        if len(parts) != 3:
            raise ValueError(f"Expected [day, month, year], got: {parts}")
        day, month, year = (int(p) for p in parts)
        return date(year, month, day)

    if output_format is OutputFormat.PARTS:
        raise ValueError("The parts format expects a [day, month, year] sequence")

    candidates = [output_format] if output_format else list(_PARSE_PATTERNS)
    for fmt in candidates:
        try:
            return datetime.strptime(value.strip(), _PARSE_PATTERNS[fmt]).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {value}. Use DD.MM.YYYY, YYYY-MM-DD, or MM/DD/YYYY"
    )
