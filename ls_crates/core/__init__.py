"""
Core functionality exports for cargo-ls-crates.

Importing from here keeps user-facing imports clean and stable:

    from ls_crates.core import CrateLister, parse_flags
"""

from __future__ import annotations

from ls_crates.core.help import help_lines, render_help
from ls_crates.core.lister import CrateLister, sort_crates
from ls_crates.core.flags import classify_token, parse_flags
from ls_crates.core.metadata import CargoMetadata, MetadataSource, find_cargo

__all__ = [
    "CargoMetadata",
    "CrateLister",
    "MetadataSource",
    "classify_token",
    "find_cargo",
    "help_lines",
    "parse_flags",
    "render_help",
    "sort_crates",
]
