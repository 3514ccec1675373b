"""Environment-driven configuration for nsdebug.

Two kinds of settings come from the environment:
  1. DEBUG: the enable-string, read at startup and written back
     whenever the registry is reconfigured
  2. DEBUG_*: inspection and display options, e.g.

        DEBUG_COLORS=no DEBUG_DEPTH=10 DEBUG_HIDE_DATE=on python app.py

All functions take an optional ``environ`` mapping so tests (and
embedders) can use a plain dict instead of ``os.environ``.
"""

import os
import re
from typing import Any, Dict, MutableMapping, Optional


DEBUG_ENV = "DEBUG"

_OPTION_PREFIX = re.compile(r"^debug_", re.IGNORECASE)
_TRUTHY = re.compile(r"^(yes|on|true|enabled)$", re.IGNORECASE)
_FALSY = re.compile(r"^(no|off|false|disabled)$", re.IGNORECASE)


def _resolve(environ):
    return os.environ if environ is None else environ


# ---------------------------------------------------------------------------
# Enable-string persistence
# ---------------------------------------------------------------------------
def load_namespaces(environ: Optional[MutableMapping[str, str]] = None) -> Optional[str]:
    """Return the persisted enable-string, or None when unset."""
    return _resolve(environ).get(DEBUG_ENV)


def save_namespaces(namespaces: Optional[str],
                    environ: Optional[MutableMapping[str, str]] = None) -> None:
    """Persist the enable-string.

    An empty value removes the variable instead of storing "".
    """
    env = _resolve(environ)
    if namespaces:
        env[DEBUG_ENV] = namespaces
    else:
        env.pop(DEBUG_ENV, None)


# ---------------------------------------------------------------------------
# DEBUG_* options
# ---------------------------------------------------------------------------
def coerce_env_value(raw: str) -> Any:
    """Coerce an environment string into a Python value.

    yes/on/true/enabled -> True, no/off/false/disabled -> False,
    null -> None, numeric strings -> int or float. Anything else is
    returned unchanged.
    """
    if _TRUTHY.match(raw):
        return True
    if _FALSY.match(raw):
        return False
    if raw == "null":
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


def load_inspect_opts(environ: Optional[MutableMapping[str, str]] = None) -> Dict[str, Any]:
    """Collect DEBUG_* variables into an options dict.

    DEBUG_HIDE_DATE=on becomes {'hide_date': True}. The bare DEBUG
    variable is not an option and is skipped.
    """
    opts: Dict[str, Any] = {}
    for key, raw in _resolve(environ).items():
        if not _OPTION_PREFIX.match(key):
            continue
        prop = key[len("debug_"):].lower()
        if not prop:
            continue
        opts[prop] = coerce_env_value(raw)
    return opts


def use_colors(opts: Dict[str, Any], stream=None) -> bool:
    """Whether output should be colored.

    An explicit ``colors`` option wins; otherwise colors follow whether
    the stream is a terminal.
    """
    if "colors" in opts:
        return bool(opts["colors"])
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed stream
        return False
