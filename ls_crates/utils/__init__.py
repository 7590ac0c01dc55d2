"""
Utility helpers for cargo-ls-crates.

This package provides reusable utilities used across the tool, including:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Manifest discovery
- Version ordering helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------

from ls_crates.utils.filesystem import find_manifest, iter_parents

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from ls_crates.utils.logger import (
    disable_logging,
    get_logger,
    resolve_log_level,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from ls_crates.utils.console import (
    print_error,
    print_lines,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from ls_crates.utils.version_utils import parse_version, version_sort_key

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "print_error",
    "print_lines",
    "print_warning",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "resolve_log_level",
    # Filesystem
    "find_manifest",
    "iter_parents",
    # Version utilities
    "parse_version",
    "version_sort_key",
]
