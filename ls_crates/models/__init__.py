"""
Data models for cargo-ls-crates.

This package exposes the core value objects used throughout the tool.
"""

from __future__ import annotations

from ls_crates.models.crate import CrateInfo
from ls_crates.models.display import DisplayConfig

__all__ = [
    "CrateInfo",
    "DisplayConfig",
]
