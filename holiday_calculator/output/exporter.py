"""
Export functionality for holiday lists.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from holiday_calculator.data.schemas import Holiday, OutputFormat
from holiday_calculator.output.dates import format_date

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports holiday lists to JSON and CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
        output_format: OutputFormat = OutputFormat.ISO,
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
            output_format: Representation of dates in CSV files.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format
        self.output_format = OutputFormat.parse(output_format)

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, output_path: Optional[str], extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename("holidays", extension)

    def _date_text(self, holiday: Holiday) -> str:
        value = format_date(holiday.holiday_date, self.output_format)
        return value if isinstance(value, str) else ".".join(value)

    def export_holidays_csv(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """
        Export holidays list to CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Key", "Date", "Name", "Name (English)", "Is National"])
            for holiday in holidays:
                writer.writerow([
                    holiday.key.value,
                    self._date_text(holiday),
                    holiday.name,
                    holiday.name_english,
                    holiday.is_national,
                ])

        logger.debug("Exported %d holidays to %s", len(holidays), file_path)
        return str(file_path)

    def export_holidays_json(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """
        Export holidays list to JSON file.

        Dates are always written as ISO 8601 strings.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "json")

        data = [
            {
                "key": h.key.value,
                "date": h.holiday_date.isoformat(),
                "name": h.name,
                "name_english": h.name_english,
                "is_national": h.is_national,
            }
            for h in holidays
        ]

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.debug("Exported %d holidays to %s", len(holidays), file_path)
        return str(file_path)

    def export_holidays(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """Export to JSON or CSV depending on the file extension (CSV by default)."""
        if output_path and Path(output_path).suffix.lower() == ".json":
            return self.export_holidays_json(holidays, output_path)
        return self.export_holidays_csv(holidays, output_path)
