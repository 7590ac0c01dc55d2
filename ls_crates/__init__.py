"""
cargo-ls-crates — list the crates a Rust project depends on.

A cargo extension subcommand (``cargo ls-crates``) that asks cargo for the
current project's resolved dependencies and prints one line per crate:
its name and, on request, its version (``-v``), description (``-d``) and
source directory (``-p``).
"""

from __future__ import annotations

from ls_crates.__version__ import __version__

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "cargo-ls-crates Contributors"
__license__ = "Apache-2.0"
__description__ = "List the crates a cargo project depends on."

__all__ = [
    "__version__",
]
