#!/usr/bin/env python3
"""
Series extractor module for recovering the series title.

Mirrors the episode strategies: whatever precedes the episode number is the
title. Dash segmentation is tried before space segmentation because
"Group - Series - 05" is the dominant convention. A title that itself ends
in a number or contains a dash can be mis-segmented; that bias is accepted.
"""

from typing import Optional

from .grammar import LINES_SEPARATED_BY_DASH, parse_integer, tokenize


class SeriesExtractor:
    """Extractor for the series title of a tag-free file name."""

    def from_dash_tokens(self, text: str) -> Optional[str]:
        """
        Title from dash segmentation.

        Segments keep their own surrounding spaces, so rejoining with a bare
        dash restores "Ore no ... - My Girlfriend ..." and "GJ-bu" alike.

        Returns:
            Every segment but the last, joined with "-", or None when the
            last segment is not an integer
        """
        tokens = tokenize(LINES_SEPARATED_BY_DASH, text)
        if tokens is None or parse_integer(tokens[-1]) is None:
            return None
        return "-".join(tokens[:-1]).strip()

    def from_space_tokens(self, text: str) -> Optional[str]:
        """Every word but the last, or None when the last word is not an integer."""
        words = text.strip().split(" ")
        if parse_integer(words[-1]) is None:
            return None
        return " ".join(words[:-1]).strip()

    def extract(self, text: str) -> str:
        """
        Extract the series title.

        Args:
            text: File name with tags, extension and version marker removed

        Returns:
            The title; when no episode number delimits it, the whole text
        """
        series = self.from_dash_tokens(text)
        if series is not None:
            return series

        series = self.from_space_tokens(text)
        if series is not None:
            return series

        return text.strip()
