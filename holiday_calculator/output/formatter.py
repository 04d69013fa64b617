"""
Console output formatting using Rich.
"""

from datetime import date
from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from holiday_calculator.data.bundesland_data import BUNDESLAND_NAMES, HOLIDAY_NAMES
from holiday_calculator.data.schemas import Bundesland, Holiday, HolidayKey
from holiday_calculator.output.dates import FormattedDate

WEEKDAY_NAMES = {
    "de": ["Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None, language: str = "de"):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to. A new one is created if omitted.
            language: Language for holiday and weekday names ('de' or 'en').
        """
        self.console = console or Console()
        self.language = language

    def _holiday_name(self, key: HolidayKey) -> str:
        name, name_english = HOLIDAY_NAMES[key]
        return name_english if self.language == "en" else name

    def print_all_holidays(
        self,
        year: int,
        bundesland: Bundesland,
        holidays: Dict[str, Optional[FormattedDate]],
    ) -> None:
        """
        Print every holiday key with its formatted date or "not observed".

        Args:
            year: Year.
            bundesland: Federal state.
            holidays: Mapping as returned by HolidayCalculator.all_holidays().
        """
        self.console.print()
        self.console.rule(
            f"[bold blue]Holidays {year} - {BUNDESLAND_NAMES[bundesland]}[/bold blue]"
        )
        self.console.print()

        table = Table()
        table.add_column("Key", style="dim")
        table.add_column("Name", style="white")
        table.add_column("Date", style="cyan")

        for key, value in holidays.items():
            name = self._holiday_name(HolidayKey(key))
            if value is None:
                table.add_row(key, f"[dim]{name}[/dim]", "[dim]not observed[/dim]")
            elif isinstance(value, str):
                table.add_row(key, name, value)
            else:
                table.add_row(key, name, " ".join(value))

        self.console.print(table)
        self.console.print()

    def print_holidays(self, holidays: List[Holiday]) -> None:
        """
        Print a table of observed holidays.

        Args:
            holidays: List of holidays to display.
        """
        holiday_table = Table(title="[bold]Holidays[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)
        holiday_table.add_column("Name", style="white")
        holiday_table.add_column("National", style="dim")

        weekday_names = WEEKDAY_NAMES.get(self.language, WEEKDAY_NAMES["de"])

        for holiday in holidays:
            holiday_table.add_row(
                holiday.holiday_date.strftime("%d.%m.%Y"),
                weekday_names[holiday.holiday_date.weekday()],
                holiday.name_english if self.language == "en" else holiday.name,
                "yes" if holiday.is_national else "no",
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(
        self, year: int, bundesland: Bundesland, holidays: List[Holiday]
    ) -> None:
        """
        Print the observed holidays of a year and Bundesland.

        Args:
            year: Year.
            bundesland: Federal state.
            holidays: List of observed holidays.
        """
        self.console.print()
        self.console.rule(
            f"[bold blue]Holidays {year} - {BUNDESLAND_NAMES[bundesland]}[/bold blue]"
        )
        self.console.print()

        if holidays:
            self.print_holidays(holidays)
        else:
            self.console.print("[dim]No holidays found for this year.[/dim]")

        self.console.print()

    def print_easter_dates(self, dates: Sequence[date]) -> None:
        """Print Easter Sunday for several years."""
        table = Table(title="[bold]Easter Sunday[/bold]")
        table.add_column("Year", style="cyan", justify="right")
        table.add_column("Date", style="white")

        for easter_sunday in dates:
            table.add_row(str(easter_sunday.year), easter_sunday.strftime("%d.%m.%Y"))

        self.console.print(table)

    def print_check_result(
        self, check_date: date, bundesland: Bundesland, name: Optional[str]
    ) -> None:
        """Print whether a date is a holiday."""
        day = check_date.strftime("%d.%m.%Y")
        state = BUNDESLAND_NAMES[bundesland]
        if name:
            self.console.print(f"[bold green]{day}[/bold green] is a holiday in {state}: {name}")
        else:
            self.console.print(f"[yellow]{day}[/yellow] is not a holiday in {state}")

    def print_bundeslaender(self) -> None:
        """Print a table of all German federal states."""
        self.console.print()
        self.console.rule("[bold blue]German Federal States (Bundeslaender)[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Code", style="cyan", width=6)
        table.add_column("Name", style="white")

        for bundesland in Bundesland:
            table.add_row(bundesland.value, BUNDESLAND_NAMES[bundesland])

        self.console.print(table)
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
