#!/usr/bin/env python3
"""
fansort - fansub file name parser and media organizer.

This module serves dual purposes:
1. Library: FansubFileParser for recovering group, series, episode and
   extension from fansub release file names
2. Command line tool: sorts the media files of a directory into one
   subdirectory per series

Usage as library:
    from fansort import FansubFileParser
    parser = FansubFileParser()
    release = parser.parse("[Aho-Taku] Sakurasou no Pet na Kanojo - 18 [720p-Hi10P][1D8F695D].mkv")

Usage as command line tool:
    fansort [directory] [--dry-run] [--workers N] [--config PATH] [--json] [-v]
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union

from fansub import (
    ConfigLoader,
    EpisodeExtractor,
    GroupExtractor,
    MediaOrganizer,
    NormalizedNameParser,
    ParsedRelease,
    SeriesExtractor,
    TagRemovalResult,
    TagRemover,
    VersionStripper,
    extract_extension,
)

PROGRAM_HEADER = "Fansub Organizational Tool (fansort) v2.0"

logger = logging.getLogger(__name__)


# ============================================================================
# CORE PARSING - FansubFileParser Class
# ============================================================================

class FansubFileParser:
    """Parser for fansub release file names."""

    def __init__(self):
        self.normalized_name_parser = NormalizedNameParser()
        self.group_extractor = GroupExtractor()
        self.tag_remover = TagRemover()
        self.version_stripper = VersionStripper()
        self.episode_extractor = EpisodeExtractor()
        self.series_extractor = SeriesExtractor()

    def parse_normalized(self, file_name: str) -> Optional[ParsedRelease]:
        """Parse a name already in canonical "Series (Episode).ext" form."""
        return self.normalized_name_parser.parse(file_name)

    def normalize(self, file_name: str) -> str:
        """Treat underscores as word separators."""
        return file_name.replace("_", " ")

    def extract_group(self, file_name: str) -> str:
        """Extract the leading release-group tag."""
        return self.group_extractor.extract(file_name)

    def remove_tags(self, file_name: str) -> TagRemovalResult:
        """Strip the extension, group tag and trailing annotation tags."""
        return self.tag_remover.process(file_name)

    def remove_version(self, text: str) -> str:
        """Delete a trailing version marker such as "v2"."""
        return self.version_stripper.strip(text)

    def extract_episode(self, text: str) -> int:
        """Extract the episode number from tag-free text."""
        return self.episode_extractor.extract(text)

    def extract_series(self, text: str) -> str:
        """Extract the series title from tag-free text."""
        return self.series_extractor.extract(text)

    def extract_extension(self, file_name: str) -> str:
        return extract_extension(file_name)

    def parse(self, file_name: Union[str, os.PathLike, None]) -> Optional[ParsedRelease]:
        """
        Full parsing pipeline.

        Pipeline order:
        1. Canonical form fast path - returns immediately on a match
        2. Replace underscores with spaces
        3. Extract group from the leading tag
        4. Remove extension, group tag and trailing tags
        5. Remove version marker
        6. Extract series and episode (dash segmentation before space)
        7. Extract extension from the original name

        Args:
            file_name: File name without directories

        Returns:
            ParsedRelease, or None when the name is empty or whitespace
        """
        if file_name is None:
            return None
        file_name = os.fspath(file_name)
        if not file_name.strip():
            logger.debug("Nothing to parse in %r", file_name)
            return None

        # Step 1: Canonical form
        release = self.parse_normalized(file_name)
        if release is not None:
            logger.debug("Parsed %r via canonical form", file_name)
            return release

        # Step 2: Underscores are word separators from here on
        normalized = self.normalize(file_name)

        # Step 3: Group tag
        group = self.extract_group(normalized)

        # Step 4: Tags and extension
        tag_result = self.remove_tags(normalized)

        # Step 5: Version marker
        stripped = self.remove_version(tag_result.cleaned)

        # Step 6: Series and episode
        series = self.extract_series(stripped)
        episode = self.extract_episode(stripped)

        # Step 7: Extension
        extension = self.extract_extension(file_name)

        logger.debug(
            "Parsed %r: removed tags %s, segmented %r",
            file_name,
            [tag.value for tag in tag_result.removed_tags],
            stripped,
        )

        return ParsedRelease(group=group, series=series, episode=episode, extension=extension)


_default_parser = FansubFileParser()


def parse(file_name: Union[str, os.PathLike, None]) -> Optional[ParsedRelease]:
    """Parse a single file name with a shared FansubFileParser."""
    return _default_parser.parse(file_name)


# ============================================================================
# COMMAND LINE - Organizer Entry Point
# ============================================================================

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fansort",
        description="Move fansub media files into one folder per series"
    )
    parser.add_argument(
        'directory',
        nargs='?',
        help='Directory with media files (default: current directory)'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Report planned moves without touching any file'
    )
    parser.add_argument(
        '--workers',
        type=int,
        help='Number of threads used to parse file names'
    )
    parser.add_argument(
        '--config',
        help='JSON config file (default: config/fansort.json)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print parse results as JSON lines instead of moving files'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="[fansort] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Organize a directory of fansub media files.

    Returns:
        Exit status: 0 on success, 1 when some moves failed, 2 on usage errors
    """
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    overrides = {"organizer": {}, "logging": {}}
    if args.workers is not None:
        overrides["organizer"]["max_workers"] = args.workers
    if args.dry_run:
        overrides["organizer"]["dry_run"] = True
    if args.verbose:
        overrides["logging"]["level"] = "DEBUG"

    try:
        config = ConfigLoader.load(args.config, overrides)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    configure_logging(config["logging"]["level"])

    directory = Path(args.directory) if args.directory else Path.cwd()
    if not directory.is_dir():
        print(PROGRAM_HEADER)
        arg_parser.print_usage()
        return 2

    organizer_config = config["organizer"]
    organizer = MediaOrganizer(
        FansubFileParser(),
        media_extensions=organizer_config["media_extensions"],
        max_workers=organizer_config["max_workers"],
    )

    if args.json:
        for move in organizer.plan(directory):
            release = move.release.to_dict() if move.release else None
            print(json.dumps({"file": move.source.name, "release": release}))
        return 0

    result = organizer.organize(directory, dry_run=organizer_config["dry_run"])

    print(f"Total files:   {result.total_files}")
    print(f"Moved:         {result.moved}")
    print(f"Skipped:       {result.skipped}")
    print(f"Failed:        {result.failed}")
    for error in result.errors:
        print(f"  {error['type']}: {error['file']} ({error['error']})")

    return 1 if result.failed else 0


if __name__ == '__main__':
    sys.exit(main())
