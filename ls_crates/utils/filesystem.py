"""
Filesystem utilities for cargo-ls-crates.

Helpers for locating cargo manifests relative to the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Union

from ls_crates.constants import MANIFEST_NAME
from ls_crates.utils.logger import get_logger

logger = get_logger("filesystem")

PathLike = Union[str, Path]


def iter_parents(start: PathLike) -> Iterator[Path]:
    """Yield ``start`` (resolved) followed by each of its ancestors."""
    current = Path(start).resolve()
    yield current
    yield from current.parents


def find_manifest(start: PathLike, *, name: str = MANIFEST_NAME) -> Optional[Path]:
    """Find the nearest cargo manifest at or above ``start``.

    Mirrors how cargo locates the project a command runs in.

    Args:
        start: Directory to begin the search from.
        name: Manifest file name.

    Returns:
        Path to the manifest, or ``None`` if no ancestor contains one.
    """
    for directory in iter_parents(start):
        candidate = directory / name
        if candidate.is_file():
            logger.debug("Found manifest: %s", candidate)
            return candidate

    logger.debug("No %s found at or above %s", name, start)
    return None
