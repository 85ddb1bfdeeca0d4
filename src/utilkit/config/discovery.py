"""Locate the utilkit.toml that applies to a directory.

Lookup order: the file named by ``UTILKIT_CONFIG`` (an unreadable path
means "no config", not "keep searching"), then the nearest
``utilkit.toml`` in the start directory or one of its ancestors.
Reading and validating the file is :mod:`utilkit.config.settings`' job.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "utilkit.toml"
CONFIG_ENV_VAR = "UTILKIT_CONFIG"


def config_candidates(start: Path | None = None) -> Iterator[Path]:
    """Yield every ``utilkit.toml`` path checked, nearest first."""
    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        pinned = Path(override)
        return pinned if pinned.is_file() else None
    return next((path for path in config_candidates(start) if path.is_file()), None)
