"""Configuration file loader for cargo-ls-crates.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two locations:

- ``ls-crates.toml`` — settings under the ``[ls-crates]`` table
- ``Cargo.toml`` — settings under ``[workspace.metadata.ls-crates]`` or
  ``[package.metadata.ls-crates]``

Discovery order:

1. Explicit path from ``CARGO_LS_CRATES_CONFIG``
2. ``ls-crates.toml`` in current directory
3. Nearest ``Cargo.toml`` at or above the current directory with an
   ``ls-crates`` metadata table

A missing configuration is not an error; every option has a default.

Example (``Cargo.toml``)::

    [workspace.metadata.ls-crates]
    placeholder = "-"
    sort = true
"""

from __future__ import annotations

import os
import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, field

from ls_crates.exceptions import ConfigError
from ls_crates.utils.logger import get_logger
from ls_crates.utils.filesystem import find_manifest
from ls_crates.constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    CONFIG_SECTION,
    DEFAULT_INCLUDE_WORKSPACE_MEMBERS,
    DEFAULT_OFFLINE,
    DEFAULT_PLACEHOLDER,
    DEFAULT_SORT,
    MANIFEST_NAME,
)

logger = get_logger("config")


@dataclass
class LsCratesConfig:
    """Parsed and validated cargo-ls-crates configuration.

    Attributes:
        placeholder: Text printed for a missing description or path.
        sort: Sort crates by name and version instead of cargo's order.
        include_workspace_members: List the project's own crates too.
        offline: Run ``cargo metadata --offline``.
        cargo: Explicit cargo executable, overriding ``$CARGO`` and ``PATH``.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    placeholder: str = DEFAULT_PLACEHOLDER
    sort: bool = DEFAULT_SORT
    include_workspace_members: bool = DEFAULT_INCLUDE_WORKSPACE_MEMBERS
    offline: bool = DEFAULT_OFFLINE
    cargo: Optional[str] = None

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging.

        Excludes ``source_path`` metadata.
        """
        return {
            "placeholder": self.placeholder,
            "sort": self.sort,
            "include_workspace_members": self.include_workspace_members,
            "offline": self.offline,
            "cargo": self.cargo,
        }


#: Known options mapped to (expected type, type name for messages).
_OPTIONS: Dict[str, Tuple[type, str]] = {
    "placeholder": (str, "a string"),
    "sort": (bool, "a boolean"),
    "include_workspace_members": (bool, "a boolean"),
    "offline": (bool, "a boolean"),
    "cargo": (str, "a string"),
}


def discover_config_file(
    explicit_path: Optional[Path] = None,
    start: Optional[Path] = None,
) -> Optional[Path]:
    """Find the configuration file to load.

    Search order:

    1. ``explicit_path`` (defaults to ``$CARGO_LS_CRATES_CONFIG``)
    2. ``ls-crates.toml`` in ``start``
    3. Nearest ``Cargo.toml`` at or above ``start`` with an ``ls-crates``
       metadata table

    Args:
        explicit_path: Explicit config path. If provided, must exist.
        start: Directory to search from; defaults to the current directory.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is None:
        from_env = os.environ.get(CONFIG_ENV_VAR)
        if from_env:
            explicit_path = Path(from_env)

    # 1. Explicit path takes priority
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = start or Path.cwd()

    # 2. ls-crates.toml in current directory
    standalone = cwd / CONFIG_FILE_NAME
    if standalone.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, standalone)
        return standalone

    # 3. Cargo.toml with an ls-crates metadata table
    manifest = find_manifest(cwd)
    if manifest is not None and _manifest_has_section(manifest):
        logger.debug("Found [*.metadata.%s] in %s", CONFIG_SECTION, manifest)
        return manifest

    logger.debug("No configuration file found")
    return None


def _manifest_section(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Return the ``ls-crates`` metadata table of a parsed manifest.

    The workspace table wins over the package table when both exist.
    Cargo accepts any value under ``metadata``; non-table values are skipped.
    """
    for table in ("workspace", "package"):
        owner = raw.get(table)
        if not isinstance(owner, dict):
            continue
        metadata = owner.get("metadata")
        if not isinstance(metadata, dict):
            continue
        section = metadata.get(CONFIG_SECTION)
        if section is not None:
            return section
    return {}


def _manifest_has_section(path: Path) -> bool:
    """Check whether a Cargo.toml carries ls-crates settings.

    Parse errors are ignored here; ``cargo metadata`` reports them.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable manifest %s: %s", path, exc)
        return False
    return bool(_manifest_section(raw))


def load_config(
    config_path: Optional[Path] = None,
    start: Optional[Path] = None,
) -> LsCratesConfig:
    """Load and validate cargo-ls-crates configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).
        start: Directory discovery starts from.

    Returns:
        Validated :class:`LsCratesConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path, start)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return LsCratesConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == MANIFEST_NAME:
        section = _manifest_section(raw)
    else:
        section = raw.get(CONFIG_SECTION, {})

    if not isinstance(section, dict):
        raise ConfigError(
            f"[{CONFIG_SECTION}] must be a table",
            config_path=str(resolved),
        )

    if not section:
        logger.debug("Config file found but no %s section; using defaults", CONFIG_SECTION)
        return LsCratesConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _check_type(name: str, value: Any, *, config_path: str) -> Any:
    expected, label = _OPTIONS[name]
    if not isinstance(value, expected):
        raise ConfigError(
            f"{name} must be {label}, got {type(value).__name__}",
            config_path=config_path,
            option=name,
        )
    return value


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> LsCratesConfig:
    """Parse and validate an ``ls-crates`` configuration table.

    Rejects unknown keys and type mismatches.

    Raises:
        ConfigError: Unknown keys or incorrect types (e.g., string for boolean).
    """
    unknown = set(section.keys()) - set(_OPTIONS)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    values = {
        name: _check_type(name, value, config_path=config_path)
        for name, value in section.items()
    }

    if "cargo" in values and not values["cargo"].strip():
        raise ConfigError(
            "cargo must not be empty",
            config_path=config_path,
            option="cargo",
        )

    return LsCratesConfig(**values)
