"""
Crate data model for cargo-ls-crates.

A :class:`CrateInfo` is a read-only snapshot of one package entry reported
by ``cargo metadata``. Nothing in this tool creates, mutates or destroys
the underlying packages.
"""

from __future__ import annotations

from pathlib import PurePath
from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _normalize_description(description: Optional[str]) -> Optional[str]:
    """
    Collapse all whitespace in a description to single spaces.

    Manifests often wrap long descriptions over several lines; the listing
    is line-oriented, so every crate must stay on one line.

    Args:
        description: Raw description, possibly ``None``.

    Returns:
        Normalized description, or ``None`` when empty.
    """
    if description is None:
        return None
    collapsed = " ".join(description.split())
    return collapsed or None


@dataclass(frozen=True)
class CrateInfo:
    """
    Represents one resolved dependency of the current project.

    Attributes:
        name: Package identifier as declared in its manifest.
        version: Version string, format owned by cargo and not validated.
        description: One-line description, or ``None`` if none is declared.
        manifest_path: Absolute path of the crate's ``Cargo.toml``.
    """

    name: str
    version: str
    description: Optional[str] = None
    manifest_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the name and normalize the description."""
        if not self.name:
            raise ValueError("Crate name must be a non-empty string")
        # Frozen dataclass: bypass __setattr__ for normalization
        object.__setattr__(
            self, "description", _normalize_description(self.description)
        )

    @property
    def location(self) -> Optional[str]:
        """Directory holding the crate's manifest, if known."""
        if not self.manifest_path:
            return None
        return str(PurePath(self.manifest_path).parent)

    @classmethod
    def from_metadata(cls, entry: Mapping[str, Any]) -> "CrateInfo":
        """
        Build a CrateInfo from one ``packages`` entry of ``cargo metadata``.

        Args:
            entry: Raw package mapping as decoded from JSON.

        Returns:
            CrateInfo instance.

        Raises:
            ValueError: The entry has no usable name.
        """
        return cls(
            name=str(entry.get("name") or ""),
            version=str(entry.get("version") or ""),
            description=entry.get("description"),
            manifest_path=entry.get("manifest_path"),
        )
