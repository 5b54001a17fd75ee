"""
Export functionality for vacation requests and holidays.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from vacation_tracker.core.balance import sorted_requests, summarize
from vacation_tracker.data.schemas import Holiday, VacationRequest

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports the request list and holiday set to JSON or CSV files."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, output_path: Optional[str], prefix: str, extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_json(
        self,
        available_days: int,
        requests: List[VacationRequest],
        holidays: List[Holiday],
        output_path: Optional[str] = None,
    ) -> str:
        """
        Export balances, requests and holidays to one JSON file.

        Args:
            available_days: Annual allotment.
            requests: Vacation requests.
            holidays: Configured holidays.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "vacations", "json")
        balance = summarize(available_days, requests)

        data = {
            "balance": balance.model_dump(),
            "requests": [
                {"id": r.id, **r.to_document()} for r in sorted_requests(requests)
            ],
            "holidays": [h.to_document() for h in holidays],
            "metadata": {"exported_at": datetime.now().isoformat()},
        }

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.info(f"Exported {len(requests)} requests to: {file_path}")
        return str(file_path)

    def export_requests_csv(
        self, requests: List[VacationRequest], output_path: Optional[str] = None
    ) -> str:
        """
        Export requests to a CSV file, most recent first.

        Args:
            requests: Vacation requests.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "requests", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)

            # Write header
            writer.writerow(["ID", "Start Date", "End Date", "Days", "Status", "Requested On"])

            # Write data
            for request in sorted_requests(requests):
                writer.writerow([
                    request.id or "",
                    request.start_date.isoformat(),
                    request.end_date.isoformat(),
                    request.days,
                    request.status.value,
                    request.requested_on.isoformat(),
                ])

        logger.info(f"Exported {len(requests)} requests to: {file_path}")
        return str(file_path)

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
        file_path = self._resolve_path(output_path, "holidays", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Name", "Weekday"])
            for holiday in holidays:
                writer.writerow([
                    holiday.key,
                    holiday.name,
                    holiday.holiday_date.strftime("%A"),
                ])

        logger.info(f"Exported {len(holidays)} holidays to: {file_path}")
        return str(file_path)
