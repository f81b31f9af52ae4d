"""Turning a MIDI event stream into timed notes for the falling-note display."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from nvpfa.midi import EventType, MidiFile, MidiFormatError, read_midi
from nvpfa.sequencer import SequencedEvent, Sequencer
from nvpfa.utils import error, info

KEY_COUNT = 128
NOTE_END = 114514191981.0
SET_TEMPO = 0x51


@dataclass
class Note:
    """A note on one key, with start and end times in seconds."""

    track: int
    start: float
    channel: int
    key: int
    velocity: int
    end: float = NOTE_END


class NoteList:
    """Notes per key, read from a MIDI file up to a moving time position."""

    def __init__(self, midi: MidiFile) -> None:
        if midi.format == 2:
            error("Nlist", "Invalid midi file format !\n")
            info("Nlist", "format 0 / format 1 are compatible.\n")
            raise MidiFormatError("format 2 MIDI files are not supported")
        if midi.ppnq == 0:
            raise MidiFormatError("MIDI file has zero ticks per quarter note")
        self.midi = midi
        self.notes: list[list[Note]] = [[] for _ in range(KEY_COUNT)]
        self._seq = Sequencer(midi)
        self._held: list[list[list[Note]]] = []
        self._restart_clock()
        self._clear()

    def _restart_clock(self) -> None:
        self._abstick = 0
        self.t_read = 0.0
        self._dt = 0.5 / self.midi.ppnq

    def _clear(self) -> None:
        for lst in self.notes:
            lst.clear()
        self._held = [[[] for _ in range(KEY_COUNT)] for _ in range(self.midi.track_count)]

    def _events_before(self, t: float) -> Iterator[SequencedEvent]:
        seq = self._seq
        while (event := seq.current()) is not None:
            self.t_read += self._dt * (event.abstick - self._abstick)
            self._abstick = event.abstick
            if self.t_read >= t:
                return
            if event.type == EventType.META and event.num == SET_TEMPO and len(event.data) >= 3:
                speed = int.from_bytes(event.data[:3], "big")
                self._dt = 0.000001 * speed / self.midi.ppnq
            yield event
            seq.advance()

    def seek(self, t: float) -> None:
        """Move to time ``t`` in seconds and empty the note lists."""
        if t < self.t_read:
            self._restart_clock()
            self._seq.reset()
        self._clear()
        for _ in self._events_before(t):
            pass

    def update_to(self, t: float) -> None:
        """Add the notes that start before ``t`` seconds."""
        for event in self._events_before(t):
            if event.type not in (EventType.NOTE_ON, EventType.NOTE_OFF):
                continue
            if event.num >= KEY_COUNT:
                continue
            held = self._held[event.track][event.num]
            if event.type == EventType.NOTE_ON and event.value > 0:
                note = Note(event.track, self.t_read, event.chan, event.num, event.value)
                self.notes[event.num].append(note)
                held.append(note)
            elif held:
                held.pop().end = self.t_read

    def remove_overlaps(self) -> None:
        """Cut each note short where the next note on its key begins."""
        for k, lst in enumerate(self.notes):
            t0 = NOTE_END
            t1 = NOTE_END
            kept: list[Note] = []
            for note in reversed(lst):
                if t0 < note.end < t1:
                    note.end = t0
                    t0 = note.start
                    if note.end - note.start < 1e-7:
                        continue
                else:
                    t0, t1 = note.start, note.end
                kept.append(note)
            kept.reverse()
            self.notes[k] = kept

    def remove_to(self, t: float) -> None:
        """Drop notes that start and end before ``t`` seconds."""
        for k, lst in enumerate(self.notes):
            split = next((i for i, n in enumerate(lst) if n.start >= t), len(lst))
            self.notes[k] = [n for n in lst[:split] if n.end >= t] + lst[split:]


def open_note_list(path: str | Path) -> NoteList:
    """Read the MIDI file at ``path`` into a fresh note list."""
    return NoteList(read_midi(path))