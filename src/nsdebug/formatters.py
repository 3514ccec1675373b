"""
``%``-directive expansion and value inspection.

A message template is scanned for ``%`` followed by one letter. Each
directive with a registered formatter consumes the next argument and is
replaced, in place, by the formatter's result:

    expand("GET %s took %dms", ["/users", 12], formatters)
    -> ["GET /users took 12ms"]

``%%`` is a literal percent sign. Directives without a formatter are
left as they are, and their argument stays in the list as a trailing
value for the sink to render.

Formatters are plain callables ``(value, channel) -> display value``.
The default table renders objects through an Inspector, which callers
extend per type instead of relying on whatever ``repr()`` a type has.
"""

import json
import pprint
import re
import sys
import traceback
from typing import (
    Any, Callable, Dict, List, Optional, Protocol, Sequence, runtime_checkable,
)


Formatter = Callable[[Any, Any], Any]

_DIRECTIVE_RE = re.compile(r'%([a-zA-Z%])')


# =============================================================================
# Inspection
# =============================================================================

@runtime_checkable
class Inspectable(Protocol):
    """Values that know how to render themselves for debug output."""

    def debug_repr(self) -> str:
        ...


class Inspector:
    """Structural printer used by the ``%o`` / ``%O`` directives.

    Lookup order for a value:
      1. A printer registered for its type (or the nearest base class)
      2. ``debug_repr()`` if the value is Inspectable
      3. The default pprint-based structural rendering

    Plain objects (no custom ``__repr__``) are rendered as
    ``ClassName({...attributes...})``. Underscore-prefixed attributes
    are hidden unless ``show_hidden`` is set.
    """

    def __init__(self, depth: Optional[int] = None, show_hidden: bool = False,
                 width: int = 80):
        self.depth = depth
        self.show_hidden = show_hidden
        self.width = width
        self._printers: Dict[type, Callable[[Any], Any]] = {}

    @classmethod
    def from_options(cls, opts: Dict[str, Any]) -> "Inspector":
        """Build an Inspector from DEBUG_* style options."""
        depth = opts.get('depth')
        if not isinstance(depth, int) or isinstance(depth, bool) or depth < 1:
            depth = None
        return cls(depth=depth, show_hidden=bool(opts.get('show_hidden', False)))

    def register(self, cls: type, printer: Callable[[Any], Any]) -> None:
        """Use ``printer`` for instances of ``cls`` and its subclasses."""
        self._printers[cls] = printer

    def unregister(self, cls: type) -> None:
        self._printers.pop(cls, None)

    def printer_for(self, value: Any) -> Optional[Callable[[Any], Any]]:
        for klass in type(value).__mro__:
            printer = self._printers.get(klass)
            if printer is not None:
                return printer
        return None

    def inspect(self, value: Any, compact: bool = False) -> str:
        """Render ``value``; ``compact`` keeps the result on one line."""
        printer = self.printer_for(value)
        if printer is not None:
            return str(printer(value))
        if isinstance(value, Inspectable) and not isinstance(value, type):
            return str(value.debug_repr())

        if _is_plain_object(value):
            attrs = {
                k: v for k, v in vars(value).items()
                if self.show_hidden or not k.startswith('_')
            }
            return f"{type(value).__name__}({self._pformat(attrs, compact)})"
        return self._pformat(value, compact)

    def _pformat(self, value: Any, compact: bool) -> str:
        width = sys.maxsize if compact else self.width
        return pprint.pformat(value, depth=self.depth, width=width,
                              sort_dicts=False)


def _is_plain_object(value: Any) -> bool:
    return (hasattr(value, '__dict__')
            and not isinstance(value, type)
            and type(value).__repr__ is object.__repr__)


# =============================================================================
# Default formatters
# =============================================================================

def _inspector_of(channel: Any, fallback: Inspector) -> Inspector:
    return getattr(channel, 'inspector', None) or fallback


def _number(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 'NaN'
    return int(result) if result.is_integer() else result


def _integer(value: Any) -> Any:
    number = _number(value)
    if number == 'NaN' or number != number:
        return 'NaN'
    try:
        return int(number)
    except OverflowError:
        return number


def _floating(value: Any) -> Any:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 'NaN'


def _json(value: Any) -> str:
    try:
        return json.dumps(value, default=str)
    except ValueError:
        return '[Circular]'


def default_formatters(inspector: Optional[Inspector] = None) -> Dict[str, Formatter]:
    """Build the standard formatter table.

    %o  single-line inspection
    %O  multi-line inspection
    %s  str()
    %d  number, %i integer, %f float ('NaN' when not numeric)
    %j  JSON
    """
    inspector = inspector or Inspector()
    return {
        'o': lambda value, channel: _inspector_of(channel, inspector).inspect(value, compact=True),
        'O': lambda value, channel: _inspector_of(channel, inspector).inspect(value),
        's': lambda value, channel: str(value),
        'd': lambda value, channel: _number(value),
        'i': lambda value, channel: _integer(value),
        'f': lambda value, channel: _floating(value),
        'j': lambda value, channel: _json(value),
    }


# =============================================================================
# Expansion
# =============================================================================

def describe_error(error: BaseException) -> str:
    """Traceback text for a raised exception, else its message."""
    if error.__traceback__ is not None:
        lines = traceback.format_exception(type(error), error, error.__traceback__)
        return ''.join(lines).rstrip('\n')
    return str(error)


def expand(template: Any, args: Sequence[Any] = (),
           formatters: Optional[Dict[str, Formatter]] = None,
           channel: Any = None) -> List[Any]:
    """Expand ``%`` directives in ``template`` against ``args``.

    Args:
        template: Message template. Exceptions are replaced by their
            traceback; any other non-string is rendered via ``%O``.
        args: Values for the directives.
        formatters: Directive table (character -> formatter).
        channel: Passed to every formatter as its context.

    Returns:
        ``[expanded_template, *unconsumed_args]``
    """
    items = [template, *args]
    if isinstance(items[0], BaseException):
        items[0] = describe_error(items[0])
    if not isinstance(items[0], str):
        items.insert(0, '%O')

    table = formatters if formatters is not None else {}
    index = 0

    def replace(match):
        nonlocal index
        if match.group(0) == '%%':
            return '%'
        index += 1
        formatter = table.get(match.group(1))
        if formatter is None or index >= len(items):
            return match.group(0)
        value = items.pop(index)
        index -= 1
        return str(formatter(value, channel))

    items[0] = _DIRECTIVE_RE.sub(replace, items[0])
    return items
