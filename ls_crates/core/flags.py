"""Command-line flag classification for cargo-ls-crates.

Arguments are interpreted leniently: every token is classified on its own
and anything that is not a known flag maps to the empty set, so malformed or
unknown arguments never cause an error or a warning.

Recognized shapes:

- ``-h`` / ``--help`` — print usage instead of listing.
- a short-flag cluster (``-`` followed by letters, e.g. ``-v``, ``-vd``,
  ``-dv``) — each known letter switches on one column; unknown letters are
  ignored and order does not matter.

Typical usage::

    display = parse_flags(["ls-crates", "-dv"])
    assert display.show_version and display.show_description
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Mapping

from ls_crates.models import DisplayConfig
from ls_crates.utils.logger import get_logger

logger = get_logger("flags")

#: Tokens that request the usage message.
HELP_TOKENS: FrozenSet[str] = frozenset({"-h", "--help"})

#: Letters of a short-flag cluster mapped to the DisplayConfig field they set.
SHORT_FLAGS: Mapping[str, str] = {
    "v": "show_version",
    "d": "show_description",
    "p": "show_path",
}

_NO_FLAGS: FrozenSet[str] = frozenset()


def is_short_cluster(token: str) -> bool:
    """Return True for ``-xyz`` style tokens (but not ``-`` or ``--long``)."""
    return len(token) > 1 and token.startswith("-") and not token.startswith("--")


def classify_token(token: str) -> FrozenSet[str]:
    """Return the DisplayConfig fields ``token`` switches on.

    Args:
        token: A single command-line argument.

    Returns:
        Field names to set; empty for unrecognized tokens.
    """
    if token in HELP_TOKENS:
        return frozenset({"show_help"})

    if is_short_cluster(token):
        return frozenset(SHORT_FLAGS[ch] for ch in token[1:] if ch in SHORT_FLAGS)

    return _NO_FLAGS


def parse_flags(tokens: Iterable[str]) -> DisplayConfig:
    """Build a :class:`DisplayConfig` from command-line tokens.

    Flags accumulate across tokens, so ``-v -d`` equals ``-vd``. This
    function cannot fail; with no recognized flag it returns the default
    (names only).

    Args:
        tokens: Arguments following the program name.

    Returns:
        Fully populated, immutable display configuration.
    """
    selected = set()
    for token in tokens:
        flags = classify_token(token)
        if not flags:
            logger.debug("Ignoring argument: %r", token)
        selected.update(flags)

    return DisplayConfig(**{field: True for field in selected})
