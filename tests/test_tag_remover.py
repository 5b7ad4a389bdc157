#!/usr/bin/env python3
"""
Tests for group tag and trailing annotation tag removal.
"""

from __future__ import annotations

import pytest

from fansub import TagRemover


@pytest.fixture
def remover():
    return TagRemover()


def test_process_removes_extension_group_and_trailing_tags(remover):
    result = remover.process("[Aho-Taku] Sakurasou no Pet na Kanojo - 18 [720p-Hi10P][1D8F695D].mkv")

    assert result.cleaned == "Sakurasou no Pet na Kanojo - 18"
    assert result.original == "[Aho-Taku] Sakurasou no Pet na Kanojo - 18 [720p-Hi10P][1D8F695D].mkv"
    assert [tag.value for tag in result.removed_tags] == ["[Aho-Taku]", "[720p-Hi10P]", "[1D8F695D]"]
    assert [tag.category for tag in result.removed_tags] == ["group", "annotation", "annotation"]


def test_mixed_bracket_and_parenthesis_tags(remover):
    result = remover.process("[RaX]Strawberry Panic - 01 [No Dub] (x264 ogg) [F4EAA441].mkv")
    assert result.cleaned == "Strawberry Panic - 01"
    assert len(result.removed_tags) == 4


def test_parenthesis_group_tag(remover):
    result = remover.process("(B-A)Devilman Lady - 01 (2E088B82).avi")
    assert result.cleaned == "Devilman Lady - 01"
    assert result.removed_tags[0].value == "(B-A)"
    assert result.removed_tags[0].position == 0


def test_name_without_tags_is_only_trimmed(remover):
    result = remover.remove("  Plain Name - 01 ")
    assert result.cleaned == "Plain Name - 01"
    assert result.removed_tags == []


def test_tag_only_name_becomes_empty(remover):
    assert remover.process("[Group].mkv").cleaned == ""


def test_repeated_trailing_tags_are_each_removed(remover):
    assert remover.remove("Show - 01 [AB][AB]").cleaned == "Show - 01"


def test_trailing_scan_stops_at_first_non_tag_text(remover):
    result = remover.remove("Foo - 01 [a] x [b]")
    assert result.cleaned == "Foo - 01  x [b]"
    assert [tag.value for tag in result.removed_tags] == ["[a]"]


def test_unclosed_tag_is_kept(remover):
    assert remover.remove("[Group Show - 01").cleaned == "[Group Show - 01"


@pytest.mark.parametrize("file_name", [
    "[Aho-Taku] Sakurasou no Pet na Kanojo - 18 [720p-Hi10P][1D8F695D].mkv",
    "[Eveyuu] Sankarea 00 [DVD Hi10P 480p H264] [4219AF02].mkv",
    "[Lunar] Bleach - 05 v2 [F2C9454F].avi",
    "Plain Name - 01.mkv",
])
def test_removal_is_idempotent(remover, file_name):
    cleaned = remover.process(file_name).cleaned
    assert remover.remove(cleaned).cleaned == cleaned
