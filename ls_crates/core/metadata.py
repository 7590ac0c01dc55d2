"""Dependency metadata source backed by ``cargo metadata``.

The lister only depends on the :class:`MetadataSource` capability: one
method that returns the project's crates or raises
:class:`~ls_crates.exceptions.MetadataError`. :class:`CargoMetadata` is the
production implementation; tests substitute in-memory fakes.

Typical usage::

    source = CargoMetadata(offline=True)
    crates = source.resolve_dependencies(Path.cwd())
"""

from __future__ import annotations

import os
import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from ls_crates.models import CrateInfo
from ls_crates.exceptions import MetadataError
from ls_crates.utils.logger import get_logger
from ls_crates.constants import CARGO_ENV_VAR, CARGO_EXECUTABLE, METADATA_ARGS

logger = get_logger("metadata")


class MetadataSource(Protocol):
    """Anything able to report the resolved dependencies of a project."""

    def resolve_dependencies(self, project_dir: Path) -> List[CrateInfo]:
        """Return every dependency of the project rooted at ``project_dir``.

        Raises:
            MetadataError: The project cannot be found or resolved.
        """
        ...


def find_cargo(explicit: Optional[str] = None) -> str:
    """Locate the cargo executable.

    Resolution order: ``explicit`` (from configuration), the ``CARGO``
    environment variable that cargo exports to its subcommands, then
    ``cargo`` on ``PATH``.

    Args:
        explicit: Configured cargo path, if any.

    Returns:
        Path or name of the executable to run.

    Raises:
        MetadataError: No cargo executable can be found.
    """
    if explicit:
        return explicit

    from_env = os.environ.get(CARGO_ENV_VAR)
    if from_env:
        return from_env

    found = shutil.which(CARGO_EXECUTABLE)
    if found is None:
        raise MetadataError(
            f"Cannot find '{CARGO_EXECUTABLE}' executable; is Rust installed?"
        )
    return found


def _first_error_line(stderr: str) -> str:
    """Pick the line of cargo's stderr that best summarizes the failure."""
    lines = [line.strip() for line in stderr.splitlines() if line.strip()]
    for line in lines:
        if line.lower().startswith("error"):
            return line
    return lines[0] if lines else "cargo metadata failed"


class CargoMetadata:
    """Resolve a project's crates by running ``cargo metadata``.

    Args:
        cargo: Explicit cargo executable; see :func:`find_cargo`.
        offline: Pass ``--offline`` so cargo never touches the network.
        include_workspace_members: Also report the project's own crates.
    """

    def __init__(
        self,
        cargo: Optional[str] = None,
        *,
        offline: bool = False,
        include_workspace_members: bool = False,
    ) -> None:
        self.cargo = cargo
        self.offline = offline
        self.include_workspace_members = include_workspace_members

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def command(self) -> List[str]:
        """Return the full argument vector of the metadata query."""
        args = [find_cargo(self.cargo), *METADATA_ARGS]
        if self.offline:
            args.append("--offline")
        return args

    def resolve_dependencies(self, project_dir: Path) -> List[CrateInfo]:
        """Return the crates of the project at ``project_dir``.

        Raises:
            MetadataError: cargo is missing, fails, or emits unusable output.
        """
        payload = self._run(project_dir)
        crates = self.parse(
            payload, include_workspace_members=self.include_workspace_members
        )
        logger.debug("Resolved %d crates in %s", len(crates), project_dir)
        return crates

    @staticmethod
    def parse(
        payload: Dict[str, Any],
        *,
        include_workspace_members: bool = False,
    ) -> List[CrateInfo]:
        """Project a decoded ``cargo metadata`` document onto CrateInfo.

        Packages keep the order cargo reports them in.

        Args:
            payload: Decoded JSON document.
            include_workspace_members: Keep the workspace's own packages.

        Raises:
            MetadataError: The document has no ``packages`` list or a
                package without a name.
        """
        packages = payload.get("packages")
        if not isinstance(packages, list):
            raise MetadataError("cargo metadata output has no package list")

        members = set(payload.get("workspace_members") or ())

        crates: List[CrateInfo] = []
        for entry in packages:
            if not include_workspace_members and entry.get("id") in members:
                continue
            try:
                crates.append(CrateInfo.from_metadata(entry))
            except ValueError as exc:
                raise MetadataError(
                    f"Invalid package entry in cargo metadata output: {exc}"
                ) from exc
        return crates

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _run(self, project_dir: Path) -> Dict[str, Any]:
        """Execute cargo and decode its JSON output."""
        command = self.command()
        logger.debug("Running %s in %s", " ".join(command), project_dir)

        try:
            process = subprocess.run(
                command,
                cwd=str(project_dir),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise MetadataError(
                f"Cannot run {command[0]}: {exc}",
                project_dir=str(project_dir),
                command=command,
            ) from exc

        if process.returncode != 0:
            logger.debug("cargo stderr:\n%s", process.stderr)
            raise MetadataError(
                _first_error_line(process.stderr or ""),
                project_dir=str(project_dir),
                command=command,
                exit_code=process.returncode,
            )

        try:
            payload = json.loads(process.stdout)
        except json.JSONDecodeError as exc:
            raise MetadataError(
                f"Cannot decode cargo metadata output: {exc}",
                project_dir=str(project_dir),
                command=command,
            ) from exc

        if not isinstance(payload, dict):
            raise MetadataError(
                "cargo metadata output is not a JSON object",
                project_dir=str(project_dir),
                command=command,
            )
        return payload
