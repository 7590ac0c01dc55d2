"""
Display configuration model for cargo-ls-crates.

A :class:`DisplayConfig` is built once per invocation from the command-line
arguments and passed explicitly to the lister.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayConfig:
    """
    Which columns to print, and whether to print help instead.

    ``show_help`` short-circuits everything else. The column flags are
    independent of each other; with all of them off only names are printed.

    Attributes:
        show_version: Append the version column.
        show_description: Append the description column.
        show_help: Print usage and skip listing.
        show_path: Append the crate source directory column.
    """

    show_version: bool = False
    show_description: bool = False
    show_help: bool = False
    show_path: bool = False
