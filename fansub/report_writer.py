#!/usr/bin/env python3
"""
Report writer for parse results in an Excel workbook.

One row per file name with the recovered group, series, episode and
extension. Rows that are not fully parsed get a yellow fill so they stand out
when reviewing a batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

from .release import ParsedRelease

REPORT_HEADERS = ["file_name", "group", "series", "episode", "extension", "status"]


@dataclass(frozen=True)
class ReportRow:
    """
    Single row of the report.

    Attributes:
        status: 'parsed' when every field was recovered, 'partial' when the
            group, series or episode is missing, 'unparseable' when the
            parser returned nothing
    """

    file_name: str
    group: str
    series: str
    episode: Optional[int]
    extension: str
    status: str

    @classmethod
    def from_release(cls, file_name: str, release: Optional[ParsedRelease]) -> "ReportRow":
        if release is None:
            return cls(file_name, "", "", None, "", "unparseable")

        complete = release.group and release.series and release.has_episode
        return cls(
            file_name=file_name,
            group=release.group,
            series=release.series,
            episode=release.episode if release.has_episode else None,
            extension=release.extension,
            status="parsed" if complete else "partial",
        )

    def to_excel_row(self) -> List[Any]:
        return [
            self.file_name,
            self.group,
            self.series,
            self.episode if self.episode is not None else "",
            self.extension,
            self.status,
        ]


def write_report(
    output_path: Union[Path, str],
    rows: Sequence[ReportRow],
    sheet_name: str = "Parsed Releases",
) -> Path:
    """
    Write the report workbook.

    Args:
        output_path: Destination path for the workbook
        rows: Report rows in output order
        sheet_name: Sheet/tab name

    Returns:
        Path to the written workbook
    """
    if not sheet_name:
        raise ValueError("A sheet name must be provided to write a report.")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    header_font = Font(bold=True)
    for col_idx, header in enumerate(REPORT_HEADERS, 1):
        ws.cell(row=1, column=col_idx, value=header).font = header_font

    yellow_fill = PatternFill(start_color="FFFF00", end_color="FFFF00", fill_type="solid")
    for row_idx, row in enumerate(rows, 2):
        for col_idx, value in enumerate(row.to_excel_row(), 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            if row.status != "parsed":
                cell.fill = yellow_fill

    for col_idx, header in enumerate(REPORT_HEADERS, 1):
        col_letter = get_column_letter(col_idx)
        max_length = len(header)
        for cell in ws[col_letter]:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))
        ws.column_dimensions[col_letter].width = min(max_length + 2, 50)

    if rows:
        last_col = get_column_letter(len(REPORT_HEADERS))
        table = Table(
            displayName="".join(c for c in sheet_name if c.isalnum()) + "Table",
            ref=f"A1:{last_col}{len(rows) + 1}",
        )
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9",
            showFirstColumn=False,
            showLastColumn=False,
            showRowStripes=True,
            showColumnStripes=False,
        )
        ws.add_table(table)

    wb.save(output_path)
    return output_path
