"""Standard MIDI file reading: header, track chunks and per-track event decoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from nvpfa.utils import error, info, warn

_U32 = 0xFFFFFFFF
END_OF_TRACK = 0x2F
NO_CHANNEL = 0xFF


class MidiFormatError(ValueError):
    """Raised when MIDI data is malformed or of an unsupported kind."""


class EventType(IntEnum):
    """MIDI event kinds, keyed by the high nibble of the status byte."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    KEY_PRESSURE = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0
    SYSTEM = 0xF0
    META = 0xFF


@dataclass
class MidiEvent:
    """One decoded event; ``tick`` is the delta time from the previous event."""

    type: EventType
    tick: int
    chan: int = 0
    num: int = 0
    value: int = 0
    data: bytes = b""


def read_vlq(data: bytes, pos: int) -> tuple[int, int]:
    """Decode a variable-length quantity at ``pos``; return (value, next position)."""
    try:
        byte = data[pos]
        pos += 1
        value = byte & 0x7F
        while byte & 0x80:
            byte = data[pos]
            pos += 1
            value = ((value << 7) | (byte & 0x7F)) & _U32
    except IndexError:
        raise MidiFormatError("truncated variable-length quantity") from None
    return value, pos


@dataclass
class MidiFile:
    """A parsed MIDI file with a read position for each track."""

    format: int
    ppnq: int
    tracks: list[bytes]
    _pos: list[int] = field(init=False, repr=False, default_factory=list)
    _over: list[bool] = field(init=False, repr=False, default_factory=list)
    _status: list[int] = field(init=False, repr=False, default_factory=list)

    def __post_init__(self) -> None:
        self.rewind()

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def rewind(self) -> None:
        """Move every track back to its first event."""
        count = len(self.tracks)
        self._pos = [0] * count
        self._over = [False] * count
        self._status = [0x0F] * count

    def is_over(self, track: int) -> bool:
        """Return whether ``track`` has reached its end."""
        return self._over[track]

    def next_event(self, track: int) -> MidiEvent | None:
        """Decode the next event of ``track``, or return None when none is left."""
        if self._over[track]:
            return None
        data = self.tracks[track]
        pos = self._pos[track]
        try:
            tick, pos = read_vlq(data, pos)
            if data[pos] & 0x80:
                code = data[pos]
                self._status[track] = code
                pos += 1
            else:
                code = self._status[track]

            chan = code & 0x0F
            kind = code & 0xF0
            num = value = 0
            payload = b""

            if kind in (0x80, 0x90, 0xA0, 0xB0):
                num = data[pos]
                value = data[pos + 1]
                pos += 2
                etype = EventType(kind)
            elif kind in (0xC0, 0xD0):
                value = data[pos]
                pos += 1
                etype = EventType(kind)
            elif kind == 0xE0:
                value = data[pos] | (data[pos + 1] << 7)
                pos += 2
                etype = EventType.PITCH_BEND
            elif kind == 0xF0:
                if code == 0xFF:
                    num = data[pos]
                    pos += 1
                    etype = EventType.META
                else:
                    num = code & 0x0F
                    etype = EventType.SYSTEM
                size, pos = read_vlq(data, pos)
                payload = bytes(data[pos:pos + size])
                if len(payload) < size:
                    raise MidiFormatError("truncated event data")
                pos += size
                chan = NO_CHANNEL
                if etype is EventType.META and num == END_OF_TRACK:
                    self._over[track] = True
            else:
                self._pos[track] = pos
                warn("MIDI", f"Unknown event type on track{track} !\n")
                info("MIDI", f"@{pos:08x}\n")
                return None
        except (IndexError, MidiFormatError):
            self._over[track] = True
            warn("MIDI", f"Track{track} ends unexpectedly !\n")
            return None

        self._pos[track] = pos
        return MidiEvent(etype, tick, chan, num, value, payload)


def parse_midi(data: bytes) -> MidiFile:
    """Parse the bytes of a standard MIDI file."""
    if len(data) < 4:
        raise MidiFormatError("MIDI file is corrupt")
    if data[:4] != b"MThd":
        raise MidiFormatError("incompatible MIDI file type")
    if len(data) < 14:
        raise MidiFormatError("MIDI file is corrupt")

    size = int.from_bytes(data[4:8], "big")
    fmt, count, ppnq = struct.unpack(">HHH", data[8:14])
    pos = 8 + size

    tracks: list[bytes] = []
    for trk in range(count):
        if data[pos:pos + 4] != b"MTrk" or len(data) < pos + 8:
            raise MidiFormatError(f"track {trk} corrupted")
        length = int.from_bytes(data[pos + 4:pos + 8], "big")
        pos += 8
        tracks.append(bytes(data[pos:pos + length]))
        pos += length
    return MidiFile(fmt, ppnq, tracks)


def read_midi(path: str | Path) -> MidiFile:
    """Read and parse the MIDI file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        error("MIDI", f"'{path}' Failed to open midi file !\n")
        info("MIDI", "Please check midi file path.\n")
        raise
    return parse_midi(data)