"""
Fansub file name parser modules package.

This package contains the core processing modules:
- grammar: Composable text-matching rules and tokenizers
- release: ParsedRelease record and the unknown-episode sentinel
- normalized_name: Canonical "Series (Episode).ext" fast path and extension rules
- group_extractor: Release-group tag extraction
- tag_remover: Group tag and trailing annotation tag removal
- version_stripper: Version suffix ("v2") removal
- episode_extractor: Episode number extraction
- series_extractor: Series title extraction
- config_loader: Configuration loading and merging
- organizer: Moving media files into per-series folders
- report_writer: Excel report of parse results
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .release import ParsedRelease, UNKNOWN_EPISODE
from .normalized_name import NormalizedNameParser, extract_extension, strip_extension
from .group_extractor import GroupExtractor
from .tag_remover import TagRemover, TagRemovalResult, RemovedTag
from .version_stripper import VersionStripper
from .episode_extractor import EpisodeExtractor
from .series_extractor import SeriesExtractor
from .config_loader import ConfigLoader, DEFAULT_CONFIG
from .organizer import MediaOrganizer, OrganizeResult, PlannedMove, DEFAULT_MEDIA_EXTENSIONS
from .report_writer import ReportRow, write_report

__all__ = [
    'ParsedRelease',
    'UNKNOWN_EPISODE',
    'NormalizedNameParser',
    'extract_extension',
    'strip_extension',
    'GroupExtractor',
    'TagRemover',
    'TagRemovalResult',
    'RemovedTag',
    'VersionStripper',
    'EpisodeExtractor',
    'SeriesExtractor',
    'ConfigLoader',
    'DEFAULT_CONFIG',
    'MediaOrganizer',
    'OrganizeResult',
    'PlannedMove',
    'DEFAULT_MEDIA_EXTENSIONS',
    'ReportRow',
    'write_report',
]
