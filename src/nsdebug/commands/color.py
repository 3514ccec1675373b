"""nsdebug color — show the color assigned to namespaces."""

from nsdebug.colors import EXTENDED_COLORS, ansi_color_code, select_color
from nsdebug.output import print_line


def register(subparsers, parents):
    """Register the 'color' subcommand."""
    p = subparsers.add_parser(
        "color",
        parents=parents,
        help="Show the palette color picked for each namespace",
    )
    p.add_argument("names", nargs="+", metavar="NAMESPACE",
                   help="Namespace to color")
    p.add_argument("--extended", action="store_true", default=False,
                   help="Use the 256-color palette")
    p.set_defaults(func=run)


def run(args):
    """Execute the color command."""
    registry = args.registry
    for name in args.names:
        if args.extended:
            color = select_color(name, EXTENDED_COLORS)
        else:
            color = registry.select_color(name)
        if registry.use_colors:
            swatch = f"{ansi_color_code(color)};1m{name}\x1b[0m"
        else:
            swatch = name
        print_line(f"  {color:>3}  {swatch}")
    return 0
