"""Output helpers for the nsdebug CLI.

Consistent message formatting across subcommands. Informational lines
go to stdout and are silenced by --quiet; errors always go to stderr.
"""

import sys


_quiet = False


def set_quiet(quiet):
    """Silence (or restore) the informational print_*() helpers."""
    global _quiet
    _quiet = bool(quiet)


def print_line(msg):
    """Print a plain result line."""
    if not _quiet:
        print(msg)


def print_status(name, enabled):
    """Print a namespace and whether it is enabled."""
    print_line(f"  {'enabled ' if enabled else 'disabled'}  {name}")


def print_warn(msg):
    """Print a warning message."""
    print_line(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message to stderr (never silenced)."""
    print(f"  ERROR: {msg}", file=sys.stderr)
