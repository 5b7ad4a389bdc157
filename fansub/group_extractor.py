#!/usr/bin/env python3
"""
Group extractor module for the release-group tag at the front of a name.

"[Aho-Taku] Sakurasou no Pet na Kanojo - 18.mkv" -> "Aho-Taku"
"(B-A)Devilman Lady - 01.mkv"                   -> "B-A"
"""

from .grammar import PARENTHESIS_ENCLOSED_TEXT, SQUARE_BRACKET_ENCLOSED_TEXT

# Square brackets are the dominant convention, parentheses the fallback.
GROUP_TAG = SQUARE_BRACKET_ENCLOSED_TEXT.or_else(PARENTHESIS_ENCLOSED_TEXT)


class GroupExtractor:
    """Extractor for the leading release-group tag."""

    def extract(self, file_name: str) -> str:
        """
        Return the text of a leading bracket- or parenthesis-enclosed span.

        Args:
            file_name: File name, with underscores already replaced by spaces

        Returns:
            The group name, or "" when the name does not start with a tag
        """
        result = GROUP_TAG(file_name)
        return result.value if result else ""
