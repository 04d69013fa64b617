"""
CLI interface for the holiday calculator.
"""

import logging
import sys
from datetime import date
from typing import Optional

import click

from holiday_calculator import __version__
from holiday_calculator.config.manager import ConfigManager
from holiday_calculator.core.calculator import HolidayCalculator
from holiday_calculator.data.schemas import Bundesland, Config, OutputFormat
from holiday_calculator.output.dates import parse_date
from holiday_calculator.output.exporter import ResultExporter
from holiday_calculator.output.formatter import ConsoleFormatter
from holiday_calculator.text.helper import TextHelper

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

BUNDESLAND_CHOICE = click.Choice([b.value for b in Bundesland], case_sensitive=False)
FORMAT_CHOICE = click.Choice([f.value for f in OutputFormat], case_sensitive=False)


def get_config(config_path: Optional[str]) -> Config:
    """Load configuration from file and environment."""
    return ConfigManager(config_path).load_config()


def fail(formatter: ConsoleFormatter, message: str, verbose: bool = False) -> None:
    """Print an error and exit with status 1."""
    formatter.print_error(message)
    if verbose:
        logger.exception("Detailed error:")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="holiday-calc")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose):
    """Holiday Calculator - German public holidays per year and Bundesland."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--bundesland", "-b",
    type=BUNDESLAND_CHOICE,
    default=None,
    help="Bundesland code (default: from config)",
)
@click.option(
    "--format", "-f",
    type=FORMAT_CHOICE,
    default=None,
    help="Date format (default: from config)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Export observed holidays to a .csv or .json file (optional)",
)
@click.option(
    "--observed",
    is_flag=True,
    default=False,
    help="Only list the holidays observed in the Bundesland, with weekdays",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def holidays(year, bundesland, format, output, observed, config):
    """List all holidays for a year and Bundesland."""
    formatter = ConsoleFormatter()
    verbose = logging.getLogger().isEnabledFor(logging.DEBUG)

    try:
        cfg = get_config(config)
        formatter.language = cfg.holiday_language

        if year is None:
            year = date.today().year
        bundesland_enum = Bundesland.parse(bundesland) if bundesland else cfg.default_bundesland
        output_format = OutputFormat.parse(format) if format else cfg.output_format

        calculator = HolidayCalculator(year)
        if observed:
            formatter.print_holidays_for_year(
                year, bundesland_enum, calculator.holidays(bundesland_enum)
            )
        else:
            formatter.print_all_holidays(
                year, bundesland_enum, calculator.all_holidays(bundesland_enum, output_format)
            )

        if output:
            exporter = ResultExporter(
                output_directory=cfg.output_directory,
                output_format=output_format,
            )
            path = exporter.export_holidays(calculator.holidays(bundesland_enum), output)
            formatter.print_success(f"Holidays saved to {path}")

    except ValueError as e:
        fail(formatter, str(e), verbose)
    except Exception as e:
        fail(formatter, f"Unexpected error: {e}", verbose)


@main.command()
@click.argument("years", nargs=-1, type=int, required=True)
def easter(years):
    """Show Easter Sunday for one or more years."""
    formatter = ConsoleFormatter()
    verbose = logging.getLogger().isEnabledFor(logging.DEBUG)

    try:
        dates = [HolidayCalculator(year).easter_sunday_date for year in years]
        formatter.print_easter_dates(dates)

    except (TypeError, ValueError) as e:
        fail(formatter, str(e), verbose)
    except Exception as e:
        fail(formatter, f"Unexpected error: {e}", verbose)


@main.command()
@click.argument("day")
@click.option(
    "--bundesland", "-b",
    type=BUNDESLAND_CHOICE,
    default=None,
    help="Bundesland code (default: from config)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def check(day, bundesland, config):
    """Check whether DAY (DD.MM.YYYY, YYYY-MM-DD or MM/DD/YYYY) is a holiday."""
    formatter = ConsoleFormatter()
    verbose = logging.getLogger().isEnabledFor(logging.DEBUG)

    try:
        cfg = get_config(config)
        check_date = parse_date(day)
        bundesland_enum = Bundesland.parse(bundesland) if bundesland else cfg.default_bundesland

        calculator = HolidayCalculator(check_date.year)
        name = calculator.get_holiday_name(check_date, bundesland_enum, cfg.holiday_language)
        formatter.print_check_result(check_date, bundesland_enum, name)

    except ValueError as e:
        fail(formatter, str(e), verbose)
    except Exception as e:
        fail(formatter, f"Unexpected error: {e}", verbose)


@main.command()
def bundeslaender():
    """List all German federal states (Bundeslaender) with their codes."""
    formatter = ConsoleFormatter()
    formatter.print_bundeslaender()


@main.group()
def text():
    """String helpers."""


@text.command()
@click.argument("value")
@click.option("--lower", is_flag=True, default=False, help="Produce lowerCamelCase")
def camel(value, lower):
    """Convert snake_case VALUE to UpperCamelCase."""
    helper = TextHelper.create(value).extended_trim()
    helper = helper.snake_to_lower_camel() if lower else helper.snake_to_upper_camel()
    click.echo(helper.to_string())


@text.command()
@click.argument("value")
@click.option("--length", "-n", type=click.IntRange(min=0), required=True, help="Maximum characters")
@click.option("--words", is_flag=True, default=False, help="Cut at the last word boundary")
def shorten(value, length, words):
    """Shorten VALUE to a maximum number of characters."""
    click.echo(TextHelper.create(value).shorten(length, obey_word_boundaries=words).to_string())


@text.command()
@click.argument("value")
def trim(value):
    """Trim whitespace including non-breaking spaces from VALUE."""
    click.echo(TextHelper.create(value).extended_trim().to_string())


if __name__ == "__main__":
    main()
