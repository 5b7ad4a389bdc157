#!/usr/bin/env python3
"""
Media organizer for sorting fansub releases into per-series folders.

Media files directly inside a directory are parsed concurrently, then moved
one at a time into a subdirectory named after their series. Files whose
names cannot be parsed, or that yield no series usable as a folder name, are skipped and reported.
One failed move never stops the rest of the batch.
"""

from __future__ import annotations

import logging
import os
import shutil
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .release import ParsedRelease

DEFAULT_MEDIA_EXTENSIONS = (".mkv", ".mp4", ".avi", ".wmv")


def is_valid_folder_name(name: str) -> bool:
    """True when `name` names a single subdirectory, not "." or ".." or a nested path."""
    if not name or name in (".", ".."):
        return False
    separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
    return not any(sep in name for sep in separators)


@dataclass
class PlannedMove:
    source: Path
    release: Optional[ParsedRelease]
    destination: Optional[Path] = None

    @property
    def skip_reason(self) -> Optional[str]:
        if self.release is None:
            return "could not parse file name"
        if self.destination is None:
            if self.release.series_name and not is_valid_folder_name(self.release.series_name):
                return "series name is not a valid folder name"
            return "no series name found"
        return None


@dataclass
class OrganizeResult:
    total_files: int
    moved: int
    skipped: int
    failed: int
    errors: List[Dict[str, Any]] = field(default_factory=list)
    processing_time: float = 0.0


class MediaOrganizer:
    def __init__(
        self,
        parser: Any,
        media_extensions: Iterable[str] = DEFAULT_MEDIA_EXTENSIONS,
        max_workers: int = 4,
    ) -> None:
        """
        Args:
            parser: Object with a parse(file_name) -> Optional[ParsedRelease] method
            media_extensions: Extension allow-list, matched case-insensitively
            max_workers: Threads used to parse file names
        """
        self.parser = parser
        self.media_extensions = {ext.lower() for ext in media_extensions}
        self.max_workers = max(1, int(max_workers))

        self.logger = logging.getLogger(__name__)

    def find_media_files(self, directory: Union[str, Path]) -> List[Path]:
        directory = Path(directory)
        files = [
            path for path in directory.iterdir()
            if path.is_file() and path.suffix.lower() in self.media_extensions
        ]
        return sorted(files, key=lambda path: path.name)

    def plan(self, directory: Union[str, Path]) -> List[PlannedMove]:
        """Parse every media file in `directory` and work out where it goes."""
        directory = Path(directory)
        files = self.find_media_files(directory)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            releases = list(executor.map(lambda path: self.parser.parse(path.name), files))

        moves = []
        for source, release in zip(files, releases):
            destination = None
            if release is not None and release.series_name and is_valid_folder_name(release.series_name):
                destination = directory / release.series_name / source.name
            moves.append(PlannedMove(source=source, release=release, destination=destination))
        return moves

    def organize(
        self,
        directory: Union[str, Path],
        dry_run: bool = False,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> OrganizeResult:
        start_time = time.time()
        moves = self.plan(directory)
        total_files = len(moves)

        moved = 0
        skipped = 0
        failed = 0
        errors: List[Dict[str, Any]] = []

        self.logger.info("Organizing %s media files in %s", total_files, directory)

        for index, move in enumerate(moves, 1):
            reason = move.skip_reason
            if reason:
                skipped += 1
                self.logger.warning("Could not move %s: %s", move.source.name, reason)
                errors.append({"file": str(move.source), "error": reason, "type": "parse"})
            else:
                try:
                    self._move(move, dry_run=dry_run)
                    moved += 1
                except OSError as exc:
                    failed += 1
                    self.logger.error("Could not move file %s: %s", move.source, exc)
                    errors.append({"file": str(move.source), "error": str(exc), "type": "move"})

            if progress_callback:
                progress_callback(index, total_files)

        return OrganizeResult(
            total_files=total_files,
            moved=moved,
            skipped=skipped,
            failed=failed,
            errors=errors,
            processing_time=time.time() - start_time,
        )

    def _move(self, move: PlannedMove, *, dry_run: bool) -> None:
        destination = move.destination
        if dry_run:
            self.logger.info("Would move %s -> %s", move.source.name, destination)
            return

        destination.parent.mkdir(exist_ok=True)
        if destination.exists():
            raise FileExistsError(f"Destination already exists: {destination}")

        shutil.move(str(move.source), str(destination))
        self.logger.info("Moved %s -> %s", move.source.name, destination.parent.name)
