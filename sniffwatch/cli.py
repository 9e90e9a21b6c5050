"""Command-line entry point: handles --help and --version."""

from __future__ import annotations

import sys
from collections.abc import Sequence

APP_VERSION = "1.2.2"
PROGRAM_NAME = "sniffwatch"

HELP_TEXT = (
    "Application to comfortably monitor your Internet traffic\n"
    f"Usage: {PROGRAM_NAME} [OPTIONS]\n"
    "Options:\n"
    "\t-h, --help      Print help\n"
    "\t-v, --version   Print version info\n"
    "(Run without options to start the app)"
)


def _version_text() -> str:
    return f"{PROGRAM_NAME} {APP_VERSION}"


def _unknown_argument_text(arg: str) -> str:
    return (
        f"{PROGRAM_NAME}: unknown option '{arg}'\n"
        f"For more information, try '{PROGRAM_NAME} --help'"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Handle command-line options and return the exit status.

    Only the first argument is examined: help and version print their text
    and return 0; anything else is reported on stderr and returns 1.
    With no arguments nothing is printed and 0 is returned.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    arg = args[0]
    if arg in ("--help", "-h"):
        print(HELP_TEXT)
        return 0
    if arg in ("--version", "-v"):
        print(_version_text())
        return 0
    print(_unknown_argument_text(arg), file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())