"""
Argument decoration and the default output sink.

After directive expansion, arguments are decorated for the terminal:

  colors on:   "  <ESC>[36;1mapp:db <ESC>[0mconnected <ESC>[36m+4ms<ESC>[0m"
  colors off:  "2026-01-02T03:04:05.678Z app:db connected"

The decorated arguments are then handed to a sink. StreamSink is the
default; any callable accepting ``*args`` can replace it (per registry,
or per channel through ``channel.log``).
"""

import sys
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, TextIO

from .colors import ansi_color_code
from .formatters import Inspector
from .humanize import humanize_ms


_RESET = '\x1b[0m'


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision, e.g. 2026-01-02T03:04:05.678Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.') + \
        f'{now.microsecond // 1000:03d}Z'


def format_args(channel: Any, args: List[Any]) -> List[Any]:
    """Decorate expanded arguments for ``channel`` in place.

    Returns the same list for convenience.
    """
    name = channel.namespace
    message = str(args[0])

    if channel.use_colors:
        code = ansi_color_code(channel.color)
        prefix = f'  {code};1m{name} {_RESET}'
        args[0] = prefix + message.replace('\n', '\n' + prefix)
        args.append(f'{code}m+{humanize_ms(channel.diff)}{_RESET}')
    else:
        date = '' if channel.inspect_opts.get('hide_date') else iso_timestamp() + ' '
        args[0] = f'{date}{name} {message}'
    return args


def format_message(args: Sequence[Any], inspector: Optional[Inspector] = None) -> str:
    """Join sink arguments into one line; non-strings are inspected."""
    inspector = inspector or Inspector()
    parts = []
    for arg in args:
        parts.append(arg if isinstance(arg, str) else inspector.inspect(arg, compact=True))
    return ' '.join(parts)


class StreamSink:
    """Write each message as one line to a text stream.

    The default stream is resolved at write time, so redirecting
    ``sys.stderr`` (e.g. pytest's capsys) is honoured.
    """

    def __init__(self, file: TextIO = None, inspector: Optional[Inspector] = None):
        self.file = file
        self.inspector = inspector or Inspector()

    @property
    def stream(self) -> TextIO:
        return self.file if self.file is not None else sys.stderr

    def __call__(self, *args: Any) -> None:
        print(format_message(args, self.inspector), file=self.stream)
