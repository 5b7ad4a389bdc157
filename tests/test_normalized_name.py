#!/usr/bin/env python3
"""
Tests for the canonical "Series (Episode).ext" fast path and extension rules.
"""

from __future__ import annotations

import pytest

from fansub import NormalizedNameParser, ParsedRelease, extract_extension, strip_extension


@pytest.fixture
def parser():
    return NormalizedNameParser()


def test_canonical_name(parser):
    assert parser.parse("Hello (1).mkv") == ParsedRelease("", "Hello", 1, ".mkv")


def test_canonical_name_with_dash_in_series(parser):
    assert parser.parse("Hello-kitty (1).mkv") == ParsedRelease("", "Hello-kitty", 1, ".mkv")


def test_canonical_name_trims_series(parser):
    release = parser.parse("  Sakurasou no Pet na Kanojo   (18).mp4")
    assert release.series == "Sakurasou no Pet na Kanojo"
    assert release.episode == 18
    assert release.extension == ".mp4"


@pytest.mark.parametrize("series,episode,extension", [
    ("Mayo Chiki", 10, ".mkv"),
    ("Sasami-san@Ganbaranai", 5, ".avi"),
    ("Sankarea", 0, ".mp4"),
])
def test_formatted_names_parse_back(parser, series, episode, extension):
    release = parser.parse(f"{series} ({episode}){extension}")
    assert release == ParsedRelease("", series, episode, extension)


@pytest.mark.parametrize("file_name", [
    "[FFF] Highschool DxD - SP01 [A87D1C2B].mkv",
    "Hello (1).mkv.part",
    "Hello (x).mkv",
    "Hello (1)",
    "Hello (1) extra.mkv",
    "(1).mkv",
    "Hello (99999999999).mkv",
])
def test_non_canonical_names_are_rejected(parser, file_name):
    assert parser.parse(file_name) is None


class TestExtension:

    @pytest.mark.parametrize("file_name,expected", [
        ("[Group] Series - 01 [720p].mkv", ".mkv"),
        ("Bleach - 05.AVI", ".AVI"),
        ("archive.tar.gz", ".gz"),
        ("dir/file.mp4", ".mp4"),
        ("Mr. Robot - 01", ""),
        ("trailing dot.", ""),
        ("no extension", ""),
        ("", ""),
    ])
    def test_extract_extension(self, file_name, expected):
        assert extract_extension(file_name) == expected

    def test_strip_extension(self):
        assert strip_extension("[G] A - 01 [x].mkv") == "[G] A - 01 [x]"

    def test_strip_extension_keeps_dotted_titles(self):
        assert strip_extension("Mr. Robot - 01") == "Mr. Robot - 01"
