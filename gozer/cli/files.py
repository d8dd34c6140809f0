"""Report output for the CLI."""

from __future__ import annotations

import sys
from csv import DictWriter as CSVWriter
from dataclasses import dataclass
from json import dump as json_dump
from typing import TYPE_CHECKING, Literal, TextIO

from openpyxl.workbook import Workbook as OpenPyXLWorkbook

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from gozer.types import JSON_TYPE

ROW_FIELDS = (
    "network_id",
    "network_name",
    "node_id",
    "name",
    "description",
    "ip_assignments",
    "authorized",
    "bridged",
    "hidden",
    "online",
)


@dataclass(slots=True)
class FileWriter:
    """Write report data to a file, or stdout, in various formats.

    Plain output expects a list of lines, JSON any JSON data, and CSV/XLSX a
    list of member rows keyed by `ROW_FIELDS`.
    """

    path: Path | None
    type: Literal["csv", "json", "plain", "xlsx"]
    data: JSON_TYPE

    def __post_init__(self) -> None:
        """Write the data as soon as the writer is created.

        Raises:
            ValueError: If the file type is invalid.
        """
        match self.type:
            case "csv":
                self._write_text(self._write_csv)
            case "json":
                self._write_text(self._write_json)
            case "plain":
                self._write_text(self._write_plain)
            case "xlsx":
                self._write_xlsx()
            case _:
                msg = f"Invalid file type: {self.type}"
                raise ValueError(msg)

    def _write_text(self, writer: Callable[[TextIO], None]) -> None:
        """Run a text writer against the output file, or stdout if there's no path."""
        if self.path is None:
            writer(sys.stdout)
            return
        with self.path.open("w", newline="", encoding="utf-8") as file:
            writer(file)

    def _write_csv(self, file: TextIO) -> None:
        """Write member rows as CSV with a header."""
        writer = CSVWriter(file, fieldnames=ROW_FIELDS)
        writer.writeheader()
        for row in self.data:
            writer.writerow(row)

    def _write_json(self, file: TextIO) -> None:
        """Write data as indented JSON."""
        json_dump(self.data, file, indent=2)
        file.write("\n")

    def _write_plain(self, file: TextIO) -> None:
        """Write lines of plain text."""
        file.writelines(f"{line}\n" for line in self.data)

    def _write_xlsx(self) -> None:
        """Write member rows to an Excel XLSX file.

        Raises:
            ValueError: If there's no output path.
        """
        if self.path is None:
            msg = "XLSX output requires a file path"
            raise ValueError(msg)
        # Create a new workbook and select the active worksheet
        workbook = OpenPyXLWorkbook()
        worksheet = workbook.active
        worksheet.title = "members"
        # Add headers, then one row per member using the same column order
        worksheet.append(list(ROW_FIELDS))
        for row in self.data:
            worksheet.append([row.get(key) for key in ROW_FIELDS])
        # Save the workbook
        workbook.save(self.path)
