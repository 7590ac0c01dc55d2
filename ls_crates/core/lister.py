"""Crate listing for cargo-ls-crates.

Turns the dependency set reported by a
:class:`~ls_crates.core.metadata.MetadataSource` into output lines. Each
line holds, separated by single spaces and always in this order:

1. the crate name;
2. the version, with ``-v``;
3. the description, with ``-d``;
4. the source directory, with ``-p``.

A requested column that has no value is rendered as the placeholder
(``n/a`` by default) so that every line carries the same fields.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from rich.text import Text

from ls_crates.models import CrateInfo, DisplayConfig
from ls_crates.constants import DEFAULT_PLACEHOLDER
from ls_crates.core.metadata import MetadataSource
from ls_crates.utils.logger import get_logger
from ls_crates.utils.version_utils import version_sort_key

logger = get_logger("lister")

Column = Tuple[str, str]


def sort_crates(crates: List[CrateInfo]) -> List[CrateInfo]:
    """Order crates by name (case-insensitive), then by ascending version."""
    return sorted(
        crates,
        key=lambda crate: (crate.name.lower(), version_sort_key(crate.version)),
    )


class CrateLister:
    """Format the current project's crates according to a DisplayConfig.

    The lister holds no state between calls; listing the same unchanged
    project twice yields identical output.

    Args:
        source: Metadata source queried once per :meth:`collect` call.
        display: Columns to include.
        placeholder: Text for a requested column without a value.
        sort: Sort by name and version instead of keeping source order.
    """

    def __init__(
        self,
        source: MetadataSource,
        display: DisplayConfig,
        *,
        placeholder: str = DEFAULT_PLACEHOLDER,
        sort: bool = False,
    ) -> None:
        self.source = source
        self.display = display
        self.placeholder = placeholder
        self.sort = sort

    def collect(self, project_dir: Path) -> List[CrateInfo]:
        """Query the metadata source for the project's crates.

        Raises:
            MetadataError: Propagated unchanged from the source.
        """
        crates = list(self.source.resolve_dependencies(project_dir))
        if self.sort:
            crates = sort_crates(crates)
        logger.debug("Listing %d crates", len(crates))
        return crates

    def fields(self, crate: CrateInfo) -> List[Column]:
        """Return the ``(text, style)`` columns for ``crate`` in output order."""
        columns: List[Column] = [(crate.name, "crate.name")]
        if self.display.show_version:
            columns.append((crate.version, "crate.version"))
        if self.display.show_description:
            columns.append((crate.description or self.placeholder, "crate.description"))
        if self.display.show_path:
            columns.append((crate.location or self.placeholder, "crate.path"))
        return columns

    def format_line(self, crate: CrateInfo) -> Text:
        """Return one styled output line for ``crate``."""
        line = Text()
        for index, (text, style) in enumerate(self.fields(crate)):
            if index:
                line.append(" ")
            line.append(text, style=style)
        return line

    def render(self, project_dir: Path) -> List[Text]:
        """Return every output line for the project at ``project_dir``.

        The whole list is built before anything is printed, so a failing
        query leaves standard output untouched.
        """
        return [self.format_line(crate) for crate in self.collect(project_dir)]
