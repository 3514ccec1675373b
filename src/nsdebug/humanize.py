"""Short human-readable durations for the ``+<diff>`` suffix."""

import math


SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24


def _round(value: float) -> int:
    # Half-up, so 1.5s -> 2s and -1.5s -> -1s
    return math.floor(value + 0.5)


def humanize_ms(ms: float) -> str:
    """Format a millisecond count like ``12ms``, ``3s``, ``5m``, ``2h``, ``1d``."""
    magnitude = abs(ms)
    if magnitude >= DAY:
        return f'{_round(ms / DAY)}d'
    if magnitude >= HOUR:
        return f'{_round(ms / HOUR)}h'
    if magnitude >= MINUTE:
        return f'{_round(ms / MINUTE)}m'
    if magnitude >= SECOND:
        return f'{_round(ms / SECOND)}s'
    if isinstance(ms, float) and ms.is_integer():
        ms = int(ms)
    return f'{ms}ms'
