"""
Command-line interface for cargo-ls-crates.

Cargo runs ``cargo-ls-crates ls-crates [OPTIONS]`` for ``cargo ls-crates``.
Arguments are handed to :func:`~ls_crates.core.flags.parse_flags` untouched:
Click only provides the entry point, so its own option parsing, help and
usage errors are disabled.

Outcomes:

- help printed, exit 0 (cargo is never run);
- crate list printed, exit 0;
- metadata or configuration failure, one line on stderr, exit 1.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Tuple

import click

from ls_crates.config import LsCratesConfig, load_config
from ls_crates.__version__ import __version__
from ls_crates.constants import LOG_LEVEL_ENV_VAR
from ls_crates.exceptions import LsCratesError
from ls_crates.core import CargoMetadata, CrateLister, parse_flags, render_help
from ls_crates.utils.logger import get_logger, resolve_log_level, setup_logging
from ls_crates.utils.console import print_error, print_lines, print_warning

logger = get_logger("cli")


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(args: Tuple[str, ...]) -> None:
    """List the crates the current cargo project depends on."""
    _configure_logging()
    logger.debug("cargo-ls-crates v%s", __version__)

    display = parse_flags(args)
    logger.debug("Display configuration: %s", display)

    if display.show_help:
        render_help()
        return

    try:
        config = load_config()
        lister = CrateLister(
            _build_source(config),
            display,
            placeholder=config.placeholder,
            sort=config.sort,
        )
        lines = lister.render(Path.cwd())

    except LsCratesError as exc:
        print_error(str(exc))
        logger.debug("Error details: %s", exc.details or "<none>", exc_info=True)
        sys.exit(1)

    print_lines(lines)


def _build_source(config: LsCratesConfig) -> CargoMetadata:
    """Create the cargo metadata source described by ``config``."""
    return CargoMetadata(
        config.cargo,
        offline=config.offline,
        include_workspace_members=config.include_workspace_members,
    )


def _configure_logging() -> None:
    """Configure logging from the ``CARGO_LS_CRATES_LOG`` variable."""
    level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))
    setup_logging(level=level, verbose=level <= logging.DEBUG)


def main() -> int:
    """Main entry point for the cargo-ls-crates CLI.

    Returns:
        Exit code:
            0   Success (listing or help)
            1   Metadata, configuration or unexpected error
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except (KeyboardInterrupt, click.Abort):
        print_warning("Operation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
