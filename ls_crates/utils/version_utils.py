"""
Version ordering utilities for cargo-ls-crates.

Crate versions follow Semantic Versioning, whose pre-release rules differ
from PEP 440: ``1.0.0-alpha.beta`` is a valid pre-release of ``1.0.0`` but
``packaging`` rejects it. Strings matching ``MAJOR.MINOR.PATCH[-PRE][+BUILD]``
are therefore ordered by SemVer precedence (build metadata ignored). Other
strings fall back to ``packaging``; anything it rejects is still ordered,
after every parseable version.
"""

from __future__ import annotations

import re
from typing import Any, Tuple

from packaging.version import InvalidVersion, Version, parse

_ZERO = Version("0")

_SEMVER_RE = re.compile(
    r"^(?P<release>\d+\.\d+\.\d+)"
    r"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)

# Sorts after any pre-release tuple, which starts with 0
_RELEASE: Tuple[int] = (1,)

PreReleaseKey = Tuple[Any, ...]
VersionKey = Tuple[int, Version, PreReleaseKey, str]


def parse_version(value: str) -> Version:
    """Parse a version string into a PEP 440 Version object.

    Raises:
        InvalidVersion: ``value`` cannot be interpreted as a version.
    """
    parsed = parse(value)
    if not isinstance(parsed, Version):
        raise InvalidVersion(value)
    return parsed


def _prerelease_key(pre: str) -> PreReleaseKey:
    """Order pre-release identifiers: numeric below alphanumeric, then by value."""
    identifiers = tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part)
        for part in pre.split(".")
    )
    return (0, identifiers)


def version_sort_key(value: str) -> VersionKey:
    """Return a key that orders version strings ascending.

    SemVer strings come first, then other PEP 440 versions, then the rest
    in string order.

    Examples:
        >>> sorted(["2.0.0", "weird", "1.0.0", "1.0.0-alpha.beta"], key=version_sort_key)
        ['1.0.0-alpha.beta', '1.0.0', '2.0.0', 'weird']
    """
    match = _SEMVER_RE.match(value)
    if match:
        pre = match.group("pre")
        return (
            0,
            Version(match.group("release")),
            _prerelease_key(pre) if pre else _RELEASE,
            "",
        )
    try:
        return (1, parse_version(value), (), "")
    except InvalidVersion:
        return (2, _ZERO, (), value)
