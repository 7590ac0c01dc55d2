"""
Centralized constants for cargo-ls-crates.

This module defines immutable values used across the tool, including the
cargo invocation, configuration file locations, environment variables,
and logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Subcommand
# ---------------------------------------------------------------------------

#: Name under which cargo dispatches to this tool (``cargo ls-crates``).
SUBCOMMAND_NAME: Final[str] = "ls-crates"

#: Text shown in place of a missing description or path.
DEFAULT_PLACEHOLDER: Final[str] = "n/a"

# ---------------------------------------------------------------------------
# Cargo
# ---------------------------------------------------------------------------

#: Default cargo executable looked up on ``PATH``.
CARGO_EXECUTABLE: Final[str] = "cargo"

#: Environment variable cargo sets to its own path for subcommands.
CARGO_ENV_VAR: Final[str] = "CARGO"

#: Manifest file name marking a cargo project.
MANIFEST_NAME: Final[str] = "Cargo.toml"

#: Output format version requested from ``cargo metadata``.
METADATA_FORMAT_VERSION: Final[int] = 1

#: Base arguments of the metadata query.
METADATA_ARGS: Final[Sequence[str]] = (
    "metadata",
    "--format-version",
    str(METADATA_FORMAT_VERSION),
)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Standalone configuration file looked up in the current directory.
CONFIG_FILE_NAME: Final[str] = "ls-crates.toml"

#: Table holding settings, both standalone and under ``*.metadata``.
CONFIG_SECTION: Final[str] = "ls-crates"

#: Environment variable with an explicit configuration file path.
CONFIG_ENV_VAR: Final[str] = "CARGO_LS_CRATES_CONFIG"

#: Default for sorting crates by name and version.
DEFAULT_SORT: Final[bool] = False

#: Default for listing the project's own workspace members.
DEFAULT_INCLUDE_WORKSPACE_MEMBERS: Final[bool] = False

#: Default for running cargo without network access.
DEFAULT_OFFLINE: Final[bool] = False

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Environment variable selecting the log level (``debug``, ``info`` ...).
LOG_LEVEL_ENV_VAR: Final[str] = "CARGO_LS_CRATES_LOG"

#: Timestamp format for the debug log format.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format.
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Log format used at DEBUG level, with timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
