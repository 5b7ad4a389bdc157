#!/usr/bin/env python3
"""
Tests for the Excel report of parse results.
"""

from __future__ import annotations

import pytest
from openpyxl import load_workbook

from fansub import UNKNOWN_EPISODE, ParsedRelease, ReportRow, write_report
from fansub.report_writer import REPORT_HEADERS


def test_row_status():
    full = ReportRow.from_release("a.mkv", ParsedRelease("WhyNot", "Mayo Chiki", 10, ".mkv"))
    no_group = ReportRow.from_release("b.mkv", ParsedRelease("", "Mayo Chiki", 10, ".mkv"))
    no_episode = ReportRow.from_release("c.mkv", ParsedRelease("FFF", "Highschool DxD", UNKNOWN_EPISODE, ".mkv"))
    missing = ReportRow.from_release("   ", None)

    assert full.status == "parsed"
    assert no_group.status == "partial"
    assert no_episode.status == "partial"
    assert no_episode.episode is None
    assert missing.status == "unparseable"


def test_write_report(tmp_path):
    rows = [
        ReportRow.from_release("a.mkv", ParsedRelease("WhyNot", "Mayo Chiki", 10, ".mkv")),
        ReportRow.from_release("b.mkv", ParsedRelease("FFF", "Highschool DxD - SP01", UNKNOWN_EPISODE, ".mkv")),
    ]

    output_path = write_report(tmp_path / "reports" / "out.xlsx", rows, sheet_name="Results")

    wb = load_workbook(output_path)
    try:
        ws = wb["Results"]
        assert [cell.value for cell in ws[1]] == REPORT_HEADERS
        assert ws.cell(row=1, column=1).font.bold is True
        assert [cell.value for cell in ws[2]] == ["a.mkv", "WhyNot", "Mayo Chiki", 10, ".mkv", "parsed"]
        assert ws.cell(row=3, column=3).value == "Highschool DxD - SP01"
        assert ws.cell(row=3, column=6).value == "partial"

        # Only rows that need review are highlighted.
        assert ws.cell(row=2, column=1).fill.fill_type is None
        assert ws.cell(row=3, column=1).fill.fill_type == "solid"

        assert "ResultsTable" in ws.tables
    finally:
        wb.close()


def test_write_report_without_rows(tmp_path):
    output_path = write_report(tmp_path / "empty.xlsx", [])

    wb = load_workbook(output_path)
    try:
        ws = wb["Parsed Releases"]
        assert ws.max_row == 1
    finally:
        wb.close()


def test_empty_sheet_name_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        write_report(tmp_path / "out.xlsx", [], sheet_name="")
