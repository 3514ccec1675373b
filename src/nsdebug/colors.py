"""
Deterministic color selection for debug namespaces.

Every namespace hashes to a stable palette entry, so the same channel
gets the same color in every process. The hash is the classic
``hash * 31 + code`` over UTF-16 code units with signed 32-bit
wraparound after each step; other implementations using that scheme
pick the same colors.
"""

from typing import Sequence


# ANSI colors 1-6 in the order the basic palette hands them out
BASIC_COLORS = (6, 2, 3, 4, 5, 1)

# 256-color palette entries readable on both dark and light terminals
EXTENDED_COLORS = (
    20, 21, 26, 27, 32, 33, 38, 39, 40, 41, 42, 43, 44, 45, 56, 57, 62, 63,
    68, 69, 74, 75, 76, 77, 78, 79, 80, 81, 92, 93, 98, 99, 112, 113, 128,
    129, 134, 135, 148, 149, 160, 161, 162, 163, 164, 165, 166, 167, 168, 169,
    170, 171, 172, 173, 178, 179, 184, 185, 196, 197, 198, 199, 200, 201, 202,
    203, 204, 205, 206, 207, 208, 209, 214, 215, 220, 221,
)

_UINT32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _utf16_units(text: str):
    data = text.encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def namespace_hash(namespace: str) -> int:
    """Signed 32-bit hash of a namespace string."""
    value = 0
    for unit in _utf16_units(namespace):
        value = ((value << 5) - value + unit) & _UINT32
    if value & _SIGN_BIT:
        value -= _UINT32 + 1
    return value


def color_index(namespace: str, palette_size: int) -> int:
    """Palette index for a namespace: ``abs(hash) % palette_size``."""
    return abs(namespace_hash(namespace)) % palette_size


def select_color(namespace: str, palette: Sequence[int] = BASIC_COLORS) -> int:
    """Pick the palette color for a namespace."""
    return palette[color_index(namespace, len(palette))]


def ansi_color_code(color: int) -> str:
    """Escape sequence opening a foreground color (without the final 'm').

    Colors below 8 use the basic ``ESC[3Nm`` form, anything else uses
    the 256-color ``ESC[38;5;Nm`` form.
    """
    if color < 8:
        return f'\x1b[3{color}'
    return f'\x1b[38;5;{color}'
