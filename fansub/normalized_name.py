#!/usr/bin/env python3
"""
Normalized name module for file names already in canonical form.

Canonical form is "<series> (<episode>).<ext>", e.g. "Hello (1).mkv". Such
names carry no group tag and bypass the heuristic pipeline entirely.

Also provides the file extension rules shared by the other extractors.
"""

from typing import Optional

from .grammar import (
    CLOSED_PARENTHESIS,
    END_OF_INPUT,
    LETTER_OR_DIGIT,
    NUMBER,
    OPEN_PARENTHESIS,
    char,
    char_except,
    parse_all,
    parse_integer,
    sequence,
)
from .release import ParsedRelease

FILE_EXTENSION = sequence(char("."), LETTER_OR_DIGIT.at_least_once().text()).map(
    lambda parts: parts[0] + parts[1]
)

NORMALIZED_FILE_NAME = sequence(
    char_except("(").at_least_once().text().token(),
    OPEN_PARENTHESIS,
    NUMBER,
    CLOSED_PARENTHESIS,
    FILE_EXTENSION,
    END_OF_INPUT,
)


def _final_component(file_name: str) -> str:
    """Drop any directory part, accepting both separator styles."""
    last_sep = max(file_name.rfind("/"), file_name.rfind("\\"))
    return file_name[last_sep + 1:]


def _extension_start(file_name: str) -> int:
    """Index of the extension's dot in `file_name`, or -1 when it has none."""
    base = _final_component(file_name)
    dot = base.rfind(".")
    if dot == -1 or not parse_all(FILE_EXTENSION, base[dot:]):
        return -1
    return len(file_name) - len(base) + dot


def extract_extension(file_name: str) -> str:
    """
    Return the trailing "." + alphanumeric run of a file name.

    Example:
        >>> extract_extension("[Group] Series - 01 [720p].mkv")
        '.mkv'
        >>> extract_extension("Mr. Robot - 01")
        ''
    """
    start = _extension_start(file_name)
    return file_name[start:] if start != -1 else ""


def strip_extension(file_name: str) -> str:
    """Remove the extension found by extract_extension, if any."""
    start = _extension_start(file_name)
    return file_name[:start] if start != -1 else file_name


class NormalizedNameParser:
    """Strict parser for canonical "<series> (<episode>).<ext>" names."""

    def parse(self, file_name: str) -> Optional[ParsedRelease]:
        """
        Parse a canonical file name.

        Args:
            file_name: File name without directories

        Returns:
            ParsedRelease with an empty group, or None when the whole name
            does not follow the canonical form
        """
        result = NORMALIZED_FILE_NAME(file_name)
        if not result:
            return None

        series, _open, number, _close, extension, _end = result.value
        episode = parse_integer(number)
        if episode is None:
            return None

        return ParsedRelease(group="", series=series.strip(), episode=episode, extension=extension)
