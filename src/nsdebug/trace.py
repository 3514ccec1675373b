"""
Function tracing decorator.

Routes call entry, return and exception lines through a debug channel,
so tracing is switched on and off with the same DEBUG patterns as any
other output:

    debug = create_debug('app:trace')

    @trace(debug)
    def load(path, retries=3):
        ...
"""

import functools
import inspect
from pathlib import Path
from typing import Any, Callable

from .channel import Channel


_MAX_STR = 50
_MAX_ITEMS = 3


def _short_repr(value: Any) -> str:
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > _MAX_STR:
        return f"'{value[:_MAX_STR - 3]}...'"
    if isinstance(value, (list, tuple)) and len(value) > _MAX_ITEMS:
        return f"[...{len(value)} items...]"
    return repr(value)


def format_call_args(func: Callable, args: tuple, kwargs: dict) -> str:
    """Render call arguments compactly; ``self``/``cls`` is abbreviated."""
    rendered = []
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures
        params = []
    remaining = args
    if args and params and params[0] in ('self', 'cls'):
        rendered.append(params[0])
        remaining = args[1:]

    rendered.extend(_short_repr(arg) for arg in remaining)
    rendered.extend(f"{key}={_short_repr(value)}" for key, value in kwargs.items())
    return ', '.join(rendered)


def trace(channel: Channel):
    """Decorator factory tracing calls through ``channel``.

    Nothing is formatted unless the channel is enabled at call time.
    Exceptions are reported and re-raised unchanged.
    """
    def decorator(func):
        module = inspect.getmodule(func)
        qualname = f"{module.__name__ if module else 'unknown'}.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not channel.enabled:
                return func(*args, **kwargs)

            channel(">> %s(%s)", qualname, format_call_args(func, args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                channel("!! %s raised: %s: %s", qualname, type(e).__name__, str(e))
                raise

            if result is not None:
                channel("<< %s returned: %s", qualname, _short_repr(result))
            return result

        return wrapper

    return decorator
