"""
Custom exception hierarchy for cargo-ls-crates.

All exceptions inherit from :class:`LsCratesError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging. Unrecognized command-line arguments are never errors and have
no exception type.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Sequence


class LsCratesError(Exception):
    """Base exception for all cargo-ls-crates errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class MetadataError(LsCratesError):
    """Raised when the package manager cannot report the project's crates.

    Covers a missing cargo executable, running outside a cargo project,
    an unresolvable dependency graph and unreadable metadata output.

    Args:
        message: Error description.
        project_dir: Directory the query ran in.
        command: Command line that was executed.
        exit_code: Exit status of the cargo process, if it ran.
    """

    __slots__ = ("project_dir", "command", "exit_code")

    def __init__(
        self,
        message: str,
        *,
        project_dir: Optional[str] = None,
        command: Optional[Sequence[str]] = None,
        exit_code: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "exit_code", exit_code)

        super().__init__(message, details)

        self.project_dir = project_dir
        self.command = list(command) if command is not None else None
        self.exit_code = exit_code


class ConfigError(LsCratesError):
    """Raised when a configuration file cannot be loaded or is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: Offending option name, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
