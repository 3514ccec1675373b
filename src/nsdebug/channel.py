"""
Channel: the per-namespace debug handle.

    debug = registry.create_channel('app:db')
    debug('connected to %s in %dms', host, elapsed)

Enablement is resolved on every call (override first, then the
registry's current pattern set), so reconfiguring the registry affects
channels that already exist.
"""

import enum
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from .formatters import expand

if TYPE_CHECKING:
    from .registry import DebugRegistry


class Override(enum.Enum):
    """Per-channel enablement override."""
    UNSET = None
    ON = True
    OFF = False


class Channel:
    """A named debug handle bound to a registry.

    Attributes:
        namespace: Full channel name, e.g. 'app:db:pool'
        color: Palette color chosen from the namespace
        override: Override.UNSET, ON or OFF
        diff: Milliseconds since the previous emission (shared clock
            unless ``shared_clock`` is False)
        prev, curr: Timestamps (ms) of the previous and current emission
        use_colors: Whether argument decoration adds ANSI colors
        inspect_opts: Copy of the registry's DEBUG_* options
        log: Optional sink overriding the registry's sink
    """

    def __init__(self, registry: "DebugRegistry", namespace: str,
                 shared_clock: bool = True):
        self.registry = registry
        self.namespace = namespace
        self.color = registry.select_color(namespace)
        self.override = Override.UNSET
        self.shared_clock = shared_clock
        self.use_colors = registry.use_colors
        self.inspect_opts: Dict[str, Any] = dict(registry.inspect_opts)
        self.inspector = registry.inspector
        self.log: Optional[Callable[..., Any]] = None
        self.diff = 0
        self.prev: Optional[int] = None
        self.curr: Optional[int] = None

    def __repr__(self):
        return f"Channel({self.namespace!r}, enabled={self.enabled})"

    # -------------------------------------------------------------------------
    # Enablement
    # -------------------------------------------------------------------------
    @property
    def enabled(self) -> bool:
        if self.override is not Override.UNSET:
            return self.override.value
        return self.registry.is_enabled(self.namespace)

    @enabled.setter
    def enabled(self, value: Optional[bool]) -> None:
        """Force on (True), force off (False) or reset to the pattern set (None)."""
        if value is None:
            self.override = Override.UNSET
        else:
            self.override = Override.ON if value else Override.OFF

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------
    def _tick(self) -> None:
        if self.shared_clock:
            prev, curr = self.registry.tick()
        else:
            curr = self.registry.now_ms()
            prev = self.curr
        self.diff = curr - (prev if prev is not None else curr)
        self.prev = prev
        self.curr = curr

    def invoke(self, *args: Any) -> None:
        """Format and emit a message if the channel is enabled.

        The first argument is the template; remaining arguments feed its
        ``%`` directives or are passed through to the sink.
        """
        if not self.enabled:
            return

        self._tick()

        template = args[0] if args else ''
        final = expand(template, args[1:], self.registry.formatters, self)
        self.registry.format_args(self, final)

        sink = self.log or self.registry.sink
        sink(*final)

    __call__ = invoke

    # -------------------------------------------------------------------------
    # Hierarchy
    # -------------------------------------------------------------------------
    def extend(self, suffix: str, delimiter: Optional[str] = ':') -> "Channel":
        """Create a child channel ``namespace + delimiter + suffix``.

        The child shares this channel's sink override and clock mode.
        """
        if delimiter is None:
            delimiter = ':'
        child = self.registry.create_channel(
            f"{self.namespace}{delimiter}{suffix}",
            shared_clock=self.shared_clock,
        )
        child.log = self.log
        return child
