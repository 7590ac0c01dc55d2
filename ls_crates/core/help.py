"""Usage message for cargo-ls-crates."""

from __future__ import annotations

from typing import List, Tuple

from rich.text import Text

from ls_crates.__version__ import VERSION_STRING
from ls_crates.constants import CARGO_EXECUTABLE, SUBCOMMAND_NAME
from ls_crates.utils.console import print_lines

#: Indent of each option line.
OPTION_INDENT = "    "

#: (flag, description) pairs in display order.
OPTIONS: List[Tuple[str, str]] = [
    ("-h --help", "print help"),
    ("-v", "print versions"),
    ("-d", "print descriptions"),
    ("-p", "print crate source directories"),
]

#: (arguments, description) pairs shown as example invocations.
EXAMPLES: List[Tuple[str, str]] = [
    ("", "print package names"),
    ("-v", "print package names and versions"),
    ("-d", "print package names and descriptions"),
    ("-vd", "print package names, versions and descriptions"),
    ("-dv", "print package names, versions and descriptions"),
    ("-vp", "print package names, versions and source directories"),
]


def _invocation() -> Text:
    return Text.assemble(
        (CARGO_EXECUTABLE, "help.manager"), " ", (SUBCOMMAND_NAME, "help.command")
    )


def help_lines() -> List[Text]:
    """Return the usage message, one :class:`~rich.text.Text` per line."""
    options = ("OPTIONS", "help.options")
    lines = [
        Text(VERSION_STRING),
        Text("List the crates the current cargo project depends on."),
        Text(""),
        Text("Usage:"),
        Text.assemble(_invocation(), " [", options, "]"),
        Text.assemble(options, ":"),
    ]
    lines.extend(
        Text(f"{OPTION_INDENT}{flag} {description}") for flag, description in OPTIONS
    )

    lines.append(Text.assemble(("Examples", "help.heading"), ":"))
    for args, description in EXAMPLES:
        call = _invocation()
        if args:
            call.append(f" {args}")
        lines.append(Text.assemble(call, f" - {description}"))

    lines.append(Text("Note:"))
    lines.append(Text("Invalid arguments will be ignored."))
    return lines


def render_help() -> None:
    """Print the usage message on standard output."""
    print_lines(help_lines())
