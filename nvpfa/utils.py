"""Small helpers: console logging, colour conversion and byte-order utilities."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence

_RESET = "\033[m"


@dataclass
class Rgba:
    """A colour with integer channels in the range 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


def frgba_to_irgba(col: Sequence[float]) -> Rgba:
    """Convert a float colour (channels in 0..1) to integer channels.

    Each channel is scaled by 255 and truncated toward zero.
    """
    x, y, z, w = col
    return Rgba(int(x * 255.0), int(y * 255.0), int(z * 255.0), int(w * 255.0))


def u64be(text: str | bytes) -> int:
    """Pack the characters of ``text`` into an integer, first character lowest.

    The result equals the native little-endian read of the same bytes, so
    comparing a four-byte chunk read from a file against ``u64be("MThd")``
    tests for that tag. Packing stops at the first NUL character.
    """
    data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
    result = 0
    for shift, ch in enumerate(data):
        if ch == 0:
            break
        result |= ch << (shift * 8)
    return result & 0xFFFFFFFFFFFFFFFF


def rev_u16(x: int) -> int:
    """Reverse the byte order of a 16-bit value."""
    x &= 0xFFFF
    return ((x >> 8) | (x << 8)) & 0xFFFF


def rev_u32(x: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    x &= 0xFFFFFFFF
    return (
        (x >> 24)
        | ((x & 0xFF0000) >> 8)
        | ((x & 0xFF00) << 8)
        | (x << 24)
    ) & 0xFFFFFFFF


def _emit(prefix: str, colour: str, label: str, message: str) -> None:
    sys.stderr.write(f"\033[1m[{prefix}] \033[{colour}m{label}: {_RESET}{message}")
    sys.stderr.flush()


def error(prefix: str, message: str) -> None:
    """Write an error line to standard error."""
    _emit(prefix, "31", "ERROR", message)


def warn(prefix: str, message: str) -> None:
    """Write a warning line to standard error."""
    _emit(prefix, "33", "WARNING", message)


def info(prefix: str, message: str) -> None:
    """Write an informational line to standard error."""
    _emit(prefix, "32", "INFO", message)