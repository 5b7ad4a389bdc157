#!/usr/bin/env python3
"""
Config loader utility for centralized configuration loading and caching.

Configuration is merged from multiple sources with precedence:
1. Built-in defaults (lowest priority)
2. JSON config file (config/fansort.json, or an explicit path)
3. Explicit overrides, e.g. command line flags (highest priority)
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

DEFAULT_CONFIG: Dict[str, Any] = {
    "organizer": {
        "media_extensions": [".mkv", ".mp4", ".avi", ".wmv"],
        "max_workers": 4,
        "dry_run": False,
    },
    "report": {
        "sheet_name": "Parsed Releases",
    },
    "logging": {
        "level": "INFO",
    },
}


class ConfigLoader:
    """Centralized config loader with caching support."""

    # Cache for loaded config files to avoid redundant file reads
    _cache: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def get_config_path(config_name: str = "fansort.json") -> Path:
        """
        Get the absolute path to a config file shipped with the project.

        Args:
            config_name: Name of the config file

        Returns:
            Absolute path to the config file
        """
        return Path(__file__).resolve().parent.parent / "config" / config_name

    @classmethod
    def load_file(cls, path: Union[str, Path], use_cache: bool = True) -> Optional[Dict[str, Any]]:
        """
        Load a JSON config file.

        Args:
            path: Path of the config file
            use_cache: Whether to use cached version if available

        Returns:
            Parsed config, or None if the file is missing or unreadable
        """
        key = str(Path(path).resolve())
        if use_cache and key in cls._cache:
            return cls._cache[key]

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, IOError):
            return None

        if not isinstance(config, dict):
            return None

        if use_cache:
            cls._cache[key] = config
        return config

    @staticmethod
    def merge(base: Dict[str, Any], *sources: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Merge config sources onto `base` in order.

        Sections that are dicts on both sides merge key by key; any other
        value replaces the existing one. Neither input is modified.

        Raises:
            ValueError: If a section that is an object in `base` is given a
                non-object value
        """
        merged = copy.deepcopy(base)
        for source in sources:
            for section, values in (source or {}).items():
                if isinstance(merged.get(section), dict):
                    if not isinstance(values, dict):
                        raise ValueError(f"Config section '{section}' must be an object, got {values!r}")
                    merged[section] = {**merged[section], **copy.deepcopy(values)}
                else:
                    merged[section] = copy.deepcopy(values)
        return merged

    @classmethod
    def load(
        cls,
        path: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
        use_cache: bool = True
    ) -> Dict[str, Any]:
        """
        Load the effective configuration.

        Args:
            path: Explicit config file. Unlike the default file, it must exist
                and contain a JSON object.
            overrides: Highest-priority values, same shape as the config
            use_cache: Whether to use cached file contents

        Returns:
            Merged configuration dict

        Raises:
            FileNotFoundError: If an explicit path does not exist
            ValueError: If an explicit path is not a valid JSON object, or a
                section that must be an object is not one
        """
        if path is not None:
            if not Path(path).is_file():
                raise FileNotFoundError(f"Config file not found: {path}")
            file_config = cls.load_file(path, use_cache)
            if file_config is None:
                raise ValueError(f"Config file is not a valid JSON object: {path}")
        else:
            file_config = cls.load_file(cls.get_config_path(), use_cache)

        return cls.merge(DEFAULT_CONFIG, file_config, overrides)

    @classmethod
    def clear_cache(cls, path: Optional[Union[str, Path]] = None) -> None:
        """
        Clear the config cache.

        Args:
            path: Specific config file to clear, or None to clear all
        """
        if path:
            cls._cache.pop(str(Path(path).resolve()), None)
        else:
            cls._cache.clear()
