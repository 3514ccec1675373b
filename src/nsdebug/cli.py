"""Main CLI entry point for nsdebug.

Implements a two-pass argument parser:
  1. First pass: extract global flags (--debug, --quiet, --no-color)
  2. Second pass: dispatch to the subcommand

Global flags can appear before OR after the subcommand:
  nsdebug --debug 'app:*' check app:db      # works
  nsdebug check app:db --debug 'app:*'      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import os
import sys

from nsdebug._version import __version__
from nsdebug.output import set_quiet


# ---------------------------------------------------------------------------
# Global flags (can precede or follow the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--debug": {"aliases": ["-d"], "metavar": "PATTERNS", "default": None,
                "help": "Enable-string to use instead of $DEBUG"},
    "--quiet": {"aliases": ["-q"], "action": "store_true", "default": False,
                "help": "Print nothing; report through the exit code only"},
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules."""
    from nsdebug.commands import check, color, emit, normalize
    return [check, normalize, color, emit]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="nsdebug",
        description="nsdebug — namespace-scoped debug output",
        epilog=(
            "Run 'nsdebug <command> --help' for details on a specific command.\n"
            "\n"
            "Patterns are read from $DEBUG unless --debug is given, e.g.\n"
            "  DEBUG='app:*,-app:noisy' nsdebug check app:db"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"nsdebug {__version__}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


def build_registry(global_args, environ=None):
    """Create the DebugRegistry a CLI invocation works against.

    The CLI never writes DEBUG back to the environment.
    """
    from nsdebug.registry import DebugRegistry

    environ = dict(os.environ) if environ is None else environ
    use_colors = False if global_args.no_color else None
    return DebugRegistry(
        global_args.debug,
        environ=environ,
        use_colors=use_colors,
        persist=False,
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the nsdebug CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)
    set_quiet(global_args.quiet)

    # Pass 2: parse subcommand args
    parser = _build_parser(_discover_commands())

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)
    args.registry = build_registry(global_args)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
