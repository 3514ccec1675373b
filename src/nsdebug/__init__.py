"""
nsdebug — namespace-scoped debug output.

Create named channels and switch them on with glob-like patterns:

    $ DEBUG="app:*,-app:noisy" python app.py

    from nsdebug import create_debug
    debug = create_debug('app:db')
    debug('connected to %s', host)

Public API:
    DebugRegistry      — composition root (patterns, formatters, sink)
    init_debug         — singleton initialization
    get_registry       — access singleton
    create_debug       — create a channel on the singleton
    enable / disable   — reconfigure the singleton
    is_enabled         — check a namespace against the singleton
    Channel, Override  — channel handle and its tri-state override
    PatternSet         — compiled enable-string
    compile_patterns   — compile an enable-string
    select_color       — namespace -> palette color
    expand             — %-directive expansion
    Inspector          — structural printer behind %o / %O
    Inspectable        — protocol for values with their own debug_repr()
    StreamSink         — default line-per-message sink
    trace              — function tracing decorator
"""

from nsdebug._version import __version__, __app_name__
from .channel import Channel, Override
from .colors import BASIC_COLORS, EXTENDED_COLORS, select_color
from .formatters import Inspectable, Inspector, default_formatters, expand
from .patterns import PatternSet, compile_patterns, is_namespace_enabled
from .registry import (
    DebugRegistry, init_debug, get_registry, create_debug,
    enable, disable, is_enabled,
)
from .sinks import StreamSink
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'DebugRegistry', 'init_debug', 'get_registry', 'create_debug',
    'enable', 'disable', 'is_enabled',
    'Channel', 'Override',
    'PatternSet', 'compile_patterns', 'is_namespace_enabled',
    'BASIC_COLORS', 'EXTENDED_COLORS', 'select_color',
    'Inspectable', 'Inspector', 'default_formatters', 'expand',
    'StreamSink',
    'trace',
]
