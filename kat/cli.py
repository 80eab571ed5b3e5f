"""Command line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from kat.highlight import Kat

USAGE = (
    "Usage:\n"
    "  kat [options] file\n"
    "    --help, -h      This help.\n"
    "    --version, -v   Check version.\n"
)
VERSION = "kat VERSION 0.1\n"


def handle_option(arg: str, out: TextIO, err: TextIO) -> Optional[int]:
    """Handle an argument starting with '-'; return an exit status, or None for a file."""
    if not arg.startswith("-"):
        return None
    if arg in ("--help", "-h"):
        out.write(USAGE)
        return 0
    if arg in ("--version", "-v"):
        out.write(VERSION)
        return 0
    err.write("Invalid parameter.\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the file named by the first argument and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("Usage: kat [file]\n")
        return 1

    filename = args[0]
    status = handle_option(filename, sys.stdout, sys.stderr)
    if status is not None:
        return status

    kat = Kat(filename, pager=not sys.stdout.isatty())
    try:
        kat.print_code(sys.stdout)
    except BrokenPipeError:
        raise
    except OSError:
        sys.stderr.write(f"Failed to open file: {filename}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())