"""nsdebug emit — write a message through a debug channel.

Lets shell scripts share the DEBUG switches of the Python code they
drive:

    $ DEBUG=deploy:* nsdebug emit deploy:sync 'copied %d files' 12
    2026-10-18T09:12:44.031Z deploy:sync copied 12 files

Arguments are passed as strings; numeric directives (%d, %i, %f)
convert them.
"""

from nsdebug.output import print_error


def register(subparsers, parents):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        parents=parents,
        help="Emit a message on a namespace (if enabled)",
    )
    p.add_argument("namespace", metavar="NAMESPACE",
                   help="Channel namespace")
    p.add_argument("template", metavar="TEMPLATE",
                   help="Message template with %%-directives")
    p.add_argument("values", nargs="*", metavar="ARG",
                   help="Values for the template directives")
    p.set_defaults(func=run)


def run(args):
    """Execute the emit command."""
    registry = args.registry
    if not args.namespace:
        print_error("Namespace must not be empty.")
        return 2

    channel = registry.create_channel(args.namespace)
    channel(args.template, *args.values)
    return 0
