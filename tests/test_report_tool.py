#!/usr/bin/env python3
"""
Tests for the report script's input handling.
"""

from __future__ import annotations

from tools.report import default_output_path, read_file_names


def test_read_file_names_from_text_file(tmp_path):
    input_path = tmp_path / "names.txt"
    input_path.write_text("[WhyNot] Mayo Chiki - 10.mkv\n\n  Hello (1).mkv  \n", encoding="utf-8")

    assert read_file_names(input_path, [".mkv"]) == ["[WhyNot] Mayo Chiki - 10.mkv", "Hello (1).mkv"]
    assert read_file_names(input_path, [".mkv"], limit=1) == ["[WhyNot] Mayo Chiki - 10.mkv"]


def test_read_file_names_from_directory(tmp_path):
    (tmp_path / "b.MKV").write_text("")
    (tmp_path / "a.avi").write_text("")
    (tmp_path / "notes.txt").write_text("")

    assert read_file_names(tmp_path, [".mkv", ".avi"]) == ["a.avi", "b.MKV"]


def test_default_output_path(tmp_path):
    assert default_output_path(tmp_path / "names.txt") == tmp_path / "names-results.xlsx"
    assert default_output_path(tmp_path) == tmp_path / f"{tmp_path.name}-results.xlsx"
