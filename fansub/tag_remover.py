#!/usr/bin/env python3
"""
Tag remover module for stripping bracketed tags before segmentation.

Two passes run over the extension-less name:
1. The leading group tag, e.g. "[Aho-Taku]", is deleted with its delimiters.
2. The contiguous run of annotation tags after the main content, e.g.
   "[720p-Hi10P][1D8F695D]" or "(x264 ogg) [F4EAA441]", is deleted tag by tag.

Deletion is by literal text, first occurrence only, in the order the tags
were found. The trailing scan stops at the first non-tag text after the run.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .grammar import (
    PARENTHESIS_ENCLOSED_TEXT_WITH_PARENTHESES,
    SQUARE_BRACKET_ENCLOSED_TEXT,
    SQUARE_BRACKET_ENCLOSED_TEXT_WITH_BRACKETS,
    char_except,
    sequence,
)
from .normalized_name import strip_extension

TAG_WITH_DELIMITERS = SQUARE_BRACKET_ENCLOSED_TEXT_WITH_BRACKETS.or_else(
    PARENTHESIS_ENCLOSED_TEXT_WITH_PARENTHESES
)

TRAILING_TAGS = sequence(
    SQUARE_BRACKET_ENCLOSED_TEXT.optional(),
    char_except("[", "(").many().text(),
    TAG_WITH_DELIMITERS.many(),
).map(lambda parts: parts[2])


@dataclass
class RemovedTag:
    """A tag deleted from the file name."""
    value: str
    category: str  # 'group' or 'annotation'
    position: int  # Position in the text it was removed from


@dataclass
class TagRemovalResult:
    """Result of tag removal on a file name."""
    original: str
    cleaned: str
    removed_tags: List[RemovedTag] = field(default_factory=list)


def _delete_first(text: str, value: str) -> Tuple[str, int]:
    position = text.find(value)
    if position == -1:
        return text, -1
    return text[:position] + text[position + len(value):], position


class TagRemover:
    """Removes the group tag and trailing annotation tags from file names."""

    def remove_group_tag(self, text: str) -> Tuple[str, Optional[RemovedTag]]:
        """
        Delete the leading bracket/parenthesis span including its delimiters.

        Returns:
            Tuple of (remaining text, removed tag or None)
        """
        result = TAG_WITH_DELIMITERS(text)
        if not result:
            return text, None

        remaining, position = _delete_first(text, result.value)
        return remaining, RemovedTag(value=result.value, category="group", position=position)

    def remove_trailing_tags(self, text: str) -> Tuple[str, List[RemovedTag]]:
        """
        Delete every tag in the run that follows the main content.

        Returns:
            Tuple of (remaining text, removed tags in the order found)
        """
        result = TRAILING_TAGS(text)
        if not result:
            return text, []

        remaining = text
        removed = []
        for tag in result.value:
            remaining, position = _delete_first(remaining, tag)
            if position != -1:
                removed.append(RemovedTag(value=tag, category="annotation", position=position))

        return remaining, removed

    def remove(self, text: str) -> TagRemovalResult:
        """
        Remove the group tag, then the trailing tags, and trim the result.

        Args:
            text: Extension-less file name

        Returns:
            TagRemovalResult with the cleaned text and removed tags
        """
        result = TagRemovalResult(original=text, cleaned=text)

        cleaned, group_tag = self.remove_group_tag(text)
        if group_tag:
            result.removed_tags.append(group_tag)

        cleaned, annotation_tags = self.remove_trailing_tags(cleaned)
        result.removed_tags.extend(annotation_tags)

        result.cleaned = cleaned.strip()
        return result

    def process(self, file_name: str) -> TagRemovalResult:
        """Strip the extension from a file name, then remove its tags."""
        result = self.remove(strip_extension(file_name))
        result.original = file_name
        return result
