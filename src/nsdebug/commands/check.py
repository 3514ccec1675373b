"""nsdebug check — test namespaces against the active patterns.

    $ DEBUG='api:*,-api:internal' nsdebug check api:public api:internal
      enabled   api:public
      disabled  api:internal

Exit code is 0 when every namespace is enabled, 1 otherwise (2 for an
empty namespace), so the command doubles as a shell predicate (``nsdebug -q check app:db && ...``).
"""

import argparse

from nsdebug.output import print_error, print_status


def register(subparsers, parents):
    """Register the 'check' subcommand."""
    p = subparsers.add_parser(
        "check",
        parents=parents,
        help="Report whether namespaces are enabled",
        description=(
            "Evaluate each NAMESPACE against the active enable-string\n"
            "(--debug, or the DEBUG environment variable)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("names", nargs="+", metavar="NAMESPACE",
                   help="Namespace to check")
    p.set_defaults(func=run)


def run(args):
    """Execute the check command."""
    registry = args.registry
    if not all(args.names):
        print_error("Namespace must not be empty.")
        return 2

    all_enabled = True
    for name in args.names:
        enabled = registry.is_enabled(name)
        all_enabled = all_enabled and enabled
        print_status(name, enabled)
    return 0 if all_enabled else 1
