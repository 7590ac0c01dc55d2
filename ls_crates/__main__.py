"""
Executable module for cargo-ls-crates.

Running:
    python -m ls_crates -vd

is equivalent to:
    cargo ls-crates -vd

This module simply forwards execution to the CLI entrypoint defined in
`ls_crates.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a broken installation on stderr."""
    sys.stderr.write("cargo-ls-crates could not be started.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from ls_crates.__version__ import __version__

        sys.stderr.write(f"cargo-ls-crates version: {__version__}\n")
    except ImportError:
        sys.stderr.write("cargo-ls-crates version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m ls_crates`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from ls_crates.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
