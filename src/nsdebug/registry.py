"""
DebugRegistry: the nsdebug composition root.

Holds everything channels read at emit time:
  - the compiled PatternSet (and the raw enable-string behind it)
  - the formatter table and inspector
  - the color palette and DEBUG_* options
  - the shared "previous timestamp" used for +diff output
  - the default sink

Reconfiguration swaps the PatternSet under a lock, so a channel
evaluating concurrently sees either the old set or the new one, never
a mix. Channels cache no matcher state, so every existing channel
follows the new configuration on its next call.

Registries are plain objects; tests build as many as they like. A
module-level singleton (init_debug / get_registry) backs the
convenience functions exported from the package.
"""

import sys
import threading
import time
from typing import Any, Callable, Dict, List, MutableMapping, Optional, Sequence, Tuple

from . import env
from .channel import Channel
from .colors import BASIC_COLORS, EXTENDED_COLORS, select_color
from .formatters import Formatter, Inspector, default_formatters
from .patterns import PatternSet, compile_patterns, is_namespace_enabled
from .sinks import StreamSink, format_args


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


class DebugRegistry:
    """Process-wide debug state, as an ordinary object.

    Usage::

        reg = DebugRegistry('app:*,-app:noisy', environ={})
        debug = reg.create_channel('app:db')
        debug('pool size %d', 4)
        reg.is_enabled('app:noisy')    # False
        saved = reg.disable()          # 'app:*,-app:noisy'
        reg.enable(saved)

    Args:
        namespaces: Initial enable-string. None reads DEBUG from
            ``environ``.
        environ: Mapping for DEBUG / DEBUG_* (default: os.environ).
        formatters: Extra or replacement directive formatters, merged
            over the defaults.
        sink: Callable receiving decorated arguments (default: a
            StreamSink on stderr).
        palette: Color palette. Defaults to EXTENDED_COLORS when
            DEBUG_EXTENDED_COLORS is truthy, else BASIC_COLORS.
        use_colors: Force colors on/off. None follows DEBUG_COLORS,
            then whether stderr is a terminal.
        clock: Zero-argument callable returning milliseconds.
        persist: Write the enable-string back to ``environ`` on enable().
    """

    def __init__(
        self,
        namespaces: Optional[str] = None,
        *,
        environ: MutableMapping[str, str] = None,
        formatters: Dict[str, Formatter] = None,
        sink: Callable[..., Any] = None,
        palette: Sequence[int] = None,
        use_colors: Optional[bool] = None,
        clock: Callable[[], int] = None,
        persist: bool = True,
    ):
        self.environ = environ
        self.persist = persist
        self.inspect_opts: Dict[str, Any] = env.load_inspect_opts(environ)
        self.inspector = Inspector.from_options(self.inspect_opts)

        self.formatters: Dict[str, Formatter] = default_formatters(self.inspector)
        self.formatters.update(formatters or {})

        if palette is None:
            palette = EXTENDED_COLORS if self.inspect_opts.get('extended_colors') else BASIC_COLORS
        self.palette = tuple(palette)

        if use_colors is None:
            use_colors = env.use_colors(self.inspect_opts, sys.stderr)
        self.use_colors = use_colors

        self.sink = sink if sink is not None else StreamSink(inspector=self.inspector)
        self.now_ms = clock or _wall_clock_ms

        self._lock = threading.Lock()
        self._patterns = PatternSet()
        self._namespaces = ''
        self.prev_time: Optional[int] = None

        if namespaces is None:
            namespaces = env.load_namespaces(environ)
        self.enable(namespaces or '')

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------
    @property
    def patterns(self) -> PatternSet:
        return self._patterns

    @property
    def namespaces(self) -> str:
        """The enable-string passed to the last enable()."""
        return self._namespaces

    def enable(self, namespaces: str) -> None:
        """Replace the active pattern set with ``namespaces``.

        The string is persisted to the environment mapping first (when
        ``persist`` is set), then compiled and swapped in atomically.
        """
        if self.persist:
            env.save_namespaces(namespaces, self.environ)
        compiled = compile_patterns(namespaces)
        with self._lock:
            self._namespaces = namespaces if isinstance(namespaces, str) else ''
            self._patterns = compiled

    def disable(self) -> str:
        """Disable all channels and return the previous configuration.

        The returned string is rebuilt from the compiled set, so feeding
        it back to enable() restores equivalent behaviour.
        """
        previous = self._patterns.to_string()
        self.enable('')
        return previous

    def is_enabled(self, name: str) -> bool:
        return is_namespace_enabled(self._patterns, name)

    # -------------------------------------------------------------------------
    # Channels
    # -------------------------------------------------------------------------
    def create_channel(self, namespace: str, *, shared_clock: bool = True) -> Channel:
        """Create a debug channel for ``namespace``."""
        return Channel(self, namespace, shared_clock=shared_clock)

    __call__ = create_channel

    def select_color(self, namespace: str) -> int:
        return select_color(namespace, self.palette)

    def format_args(self, channel: Channel, args: List[Any]) -> List[Any]:
        return format_args(channel, args)

    def tick(self) -> Tuple[Optional[int], int]:
        """Advance the shared clock; returns (previous, current) in ms."""
        curr = self.now_ms()
        with self._lock:
            prev = self.prev_time
            self.prev_time = curr
        return prev, curr


# =============================================================================
# Module-level singleton
# =============================================================================

_registry: Optional[DebugRegistry] = None


def init_debug(namespaces: Optional[str] = None, **kwargs: Any) -> DebugRegistry:
    """Initialize the module-level DebugRegistry singleton.

    Call once at startup if the defaults (DEBUG from os.environ, stderr
    sink) are not what you want. Keyword arguments are passed to
    DebugRegistry.

    Returns:
        The initialized DebugRegistry instance
    """
    global _registry
    _registry = DebugRegistry(namespaces, **kwargs)
    return _registry


def get_registry() -> DebugRegistry:
    """Get the module-level DebugRegistry, creating a default if needed."""
    global _registry
    if _registry is None:
        _registry = DebugRegistry()
    return _registry


def create_debug(namespace: str) -> Channel:
    """Create a channel on the module-level registry."""
    return get_registry().create_channel(namespace)


def enable(namespaces: str) -> None:
    get_registry().enable(namespaces)


def disable() -> str:
    return get_registry().disable()


def is_enabled(name: str) -> bool:
    return get_registry().is_enabled(name)
