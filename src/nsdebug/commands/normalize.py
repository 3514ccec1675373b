"""nsdebug normalize — print the canonical form of the enable-string.

Positive patterns come first, negations follow, all comma separated:

    $ nsdebug --debug 'app:*  -db:*, web' normalize
    app:*,web,-db:*
"""

from nsdebug.output import print_line, print_warn


def register(subparsers, parents):
    """Register the 'normalize' subcommand."""
    p = subparsers.add_parser(
        "normalize",
        parents=parents,
        help="Print the canonical enable-string",
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the normalize command."""
    canonical = args.registry.disable()
    if not canonical:
        print_warn("No namespaces enabled.")
        return 0
    print_line(canonical)
    return 0
