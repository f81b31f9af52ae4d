"""List filtering and touch helpers behind the settings window."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from nvpfa.config import SoundfontItem

DOUBLE_TAP_TIME = 0.3
"""Longest gap, in seconds, between the two taps of a double tap."""

DOUBLE_TAP_DISTANCE = 10.0
"""Largest distance, in pixels, between the two taps of a double tap."""

_SEPARATORS = re.compile(r"[/\\]")


def filename_only(path: str) -> str:
    """Return the part of ``path`` after its last slash or backslash."""
    return _SEPARATORS.split(path)[-1]


def _matches(filename: str, query: str) -> bool:
    return not query or query in filename


def filter_midi_list(items: Sequence[str], query: str = "") -> list[tuple[int, str]]:
    """List the MIDI paths whose file names contain ``query``.

    Each entry is the item's index in ``items`` with its file name. The match
    is case-sensitive; an empty query keeps every item.
    """
    entries = ((i, filename_only(path)) for i, path in enumerate(items))
    return [(i, name) for i, name in entries if _matches(name, query)]


def filter_soundfont_list(
    items: Sequence[SoundfontItem], query: str = ""
) -> list[tuple[int, SoundfontItem]]:
    """List the soundfonts whose file names contain ``query``.

    Each entry is the item's index in ``items`` with the item itself, so the
    caller can toggle ``checked`` in place.
    """
    return [
        (i, item)
        for i, item in enumerate(items)
        if _matches(filename_only(item.label), query)
    ]


def checked_soundfonts(items: Iterable[SoundfontItem]) -> list[str]:
    """Return the paths of the enabled soundfonts, in list order."""
    return [item.label for item in items if item.checked]


@dataclass
class DoubleTapDetector:
    """Recognises two taps close together in time and space."""

    max_interval: float = DOUBLE_TAP_TIME
    max_distance: float = DOUBLE_TAP_DISTANCE
    last_time: float = 0.0
    last_x: float = 0.0
    last_y: float = 0.0

    def tap(self, time: float, x: float, y: float) -> bool:
        """Record a tap at ``time`` seconds and (x, y); return whether it completes a double tap."""
        double = False
        if time - self.last_time <= self.max_interval:
            dx = x - self.last_x
            dy = y - self.last_y
            double = dx * dx + dy * dy <= self.max_distance * self.max_distance
        self.last_time = time
        self.last_x = x
        self.last_y = y
        return double