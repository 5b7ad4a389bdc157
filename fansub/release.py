#!/usr/bin/env python3
"""
Release module defining the structured record recovered from a file name.
"""

import json
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

# Episode value meaning "no episode number could be recovered".
UNKNOWN_EPISODE = -sys.maxsize - 1


@dataclass(frozen=True)
class ParsedRelease:
    """
    Metadata recovered from a single fansub media file name.

    Attributes:
        group: Release group tag, "" when the name carries none
        series: Series title, always stripped of surrounding whitespace
        episode: Episode ordinal, or UNKNOWN_EPISODE
        extension: File extension including the leading dot, "" when absent
    """
    group: str
    series: str
    episode: int
    extension: str

    def __post_init__(self):
        object.__setattr__(self, "group", self.group or "")
        object.__setattr__(self, "series", (self.series or "").strip())
        object.__setattr__(self, "extension", self.extension or "")
        if self.episode < 0 and self.episode != UNKNOWN_EPISODE:
            raise ValueError(f"Episode must be non-negative or UNKNOWN_EPISODE, got {self.episode}")

    @property
    def has_episode(self) -> bool:
        return self.episode != UNKNOWN_EPISODE

    @property
    def series_name(self) -> Optional[str]:
        """Series title, or None when no series could be determined."""
        return self.series or None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": self.group,
            "series": self.series,
            "episode": self.episode if self.has_episode else None,
            "extension": self.extension,
        }

    def to_json(self) -> str:
        """Convert result to JSON format."""
        return json.dumps(self.to_dict())
