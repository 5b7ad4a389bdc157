#!/usr/bin/env python3
"""
Tests for the ParsedRelease record.
"""

from __future__ import annotations

import dataclasses
import json

import pytest

from fansub import UNKNOWN_EPISODE, ParsedRelease


def test_equality_and_hash_cover_all_fields():
    a = ParsedRelease("Mazui", "Boku Ha Tomodachi Ga Sukunai NEXT", 5, ".mkv")
    b = ParsedRelease("Mazui", "Boku Ha Tomodachi Ga Sukunai NEXT", 5, ".mkv")

    assert a == b
    assert hash(a) == hash(b)
    assert a != dataclasses.replace(b, episode=6)
    assert a != dataclasses.replace(b, extension=".mp4")


def test_series_is_trimmed():
    assert ParsedRelease("", "  Bleach ", 5, ".avi").series == "Bleach"


def test_none_fields_become_empty():
    release = ParsedRelease(None, None, UNKNOWN_EPISODE, None)
    assert release.group == ""
    assert release.series == ""
    assert release.extension == ""
    assert release.series_name is None


def test_release_is_immutable():
    release = ParsedRelease("gg", "Sasami-san@Ganbaranai", 5, ".mkv")
    with pytest.raises(dataclasses.FrozenInstanceError):
        release.episode = 6


def test_negative_episode_is_rejected():
    with pytest.raises(ValueError):
        ParsedRelease("", "Show", -1, ".mkv")


def test_unknown_episode():
    release = ParsedRelease("FFF", "Highschool DxD - SP01", UNKNOWN_EPISODE, ".mkv")
    assert not release.has_episode
    assert release.to_dict()["episode"] is None


def test_to_json():
    release = ParsedRelease("WhyNot", "Mayo Chiki", 10, ".mkv")
    assert json.loads(release.to_json()) == {
        "group": "WhyNot",
        "series": "Mayo Chiki",
        "episode": 10,
        "extension": ".mkv",
    }
