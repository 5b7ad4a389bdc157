#!/usr/bin/env python3
"""
Version stripper module for re-release suffixes such as "v2".

The version marker may follow the episode number with or without a space
("06v2", "05 v2"). Reversing the text turns the trailing "v<digits>" into a
"<digits>v" prefix, which a forward grammar matches without backtracking.
"""

from typing import Optional

from .grammar import LINE, NUMBER, ignore_case, sequence
from .normalized_name import strip_extension

VERSION_FROM_REVERSED = sequence(NUMBER, ignore_case("v"), LINE.optional()).map(
    lambda parts: parts[1] + parts[0][::-1]
)


class VersionStripper:
    """Finds and removes a trailing version marker."""

    def find_version(self, text: str) -> Optional[str]:
        """
        Find the version marker at the end of `text`, ignoring any extension.

        Example:
            >>> VersionStripper().find_version("GJ-bu - 06v2")
            'v2'
        """
        reversed_text = strip_extension(text)[::-1]
        result = VERSION_FROM_REVERSED(reversed_text)
        return result.value if result else None

    def strip(self, text: str) -> str:
        """
        Delete the version marker from `text`.

        Args:
            text: Tag-free file name

        Returns:
            Text with the marker removed, or `text` unchanged when it has none
        """
        version = self.find_version(text)
        if not version:
            return text

        # The marker sits at the tail, so delete its last occurrence.
        position = text.rfind(version)
        return text[:position] + text[position + len(version):]
