#!/usr/bin/env python3
"""
Episode extractor module for recovering the episode ordinal.

Strategies, first success wins:
- Dash: split on dash runs, the last segment must be an integer
  ("Mayo Chiki - 10" -> 10)
- Space: split on single spaces, the last word must be an integer
  ("Sankarea 00" -> 0)
- Otherwise the episode is UNKNOWN_EPISODE
"""

from typing import Optional

from .grammar import LINES_SEPARATED_BY_DASH, parse_integer, tokenize
from .release import UNKNOWN_EPISODE


class EpisodeExtractor:
    """Extractor for the episode number of a tag-free file name."""

    def from_dash_tokens(self, text: str) -> Optional[int]:
        """Episode from the last dash-separated segment, or None."""
        tokens = tokenize(LINES_SEPARATED_BY_DASH, text)
        if tokens is None:
            return None
        return parse_integer(tokens[-1])

    def from_space_tokens(self, text: str) -> Optional[int]:
        """Episode from the last space-separated word, or None."""
        words = text.strip().split(" ")
        return parse_integer(words[-1])

    def extract(self, text: str) -> int:
        """
        Extract the episode number.

        Args:
            text: File name with tags, extension and version marker removed

        Returns:
            Episode number, or UNKNOWN_EPISODE when no strategy applies
        """
        episode = self.from_dash_tokens(text)
        if episode is not None:
            return episode

        episode = self.from_space_tokens(text)
        if episode is not None:
            return episode

        return UNKNOWN_EPISODE
