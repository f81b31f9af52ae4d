"""Merging the tracks of a MIDI file into one time-ordered event stream."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterator

from nvpfa.midi import MidiEvent, MidiFile
from nvpfa.utils import warn

_U32 = 0xFFFFFFFF


@dataclass(kw_only=True)
class SequencedEvent(MidiEvent):
    """An event tagged with its track and absolute tick."""

    track: int
    abstick: int


def _sequenced(event: MidiEvent, track: int, abstick: int) -> SequencedEvent:
    return SequencedEvent(
        type=event.type,
        tick=event.tick,
        chan=event.chan,
        num=event.num,
        value=event.value,
        data=event.data,
        track=track,
        abstick=abstick & _U32,
    )


class Sequencer:
    """Yields the events of all tracks by absolute tick.

    Events at the same tick come from the highest-numbered track first.
    """

    def __init__(self, midi: MidiFile) -> None:
        self.midi = midi
        self._heap: list[tuple[int, int, SequencedEvent]] = []
        self.reset()

    def _push(self, event: SequencedEvent) -> None:
        heapq.heappush(self._heap, (event.abstick, -event.track, event))

    def reset(self) -> None:
        """Rewind the file and load the first event of every track."""
        self.midi.rewind()
        self._heap = []
        for track in range(self.midi.track_count):
            event = self.midi.next_event(track)
            if event is None:
                warn("Sequ", f"Empty track: {track}\n")
                continue
            self._push(_sequenced(event, track, event.tick))

    def current(self) -> SequencedEvent | None:
        """The earliest pending event, or None when every track is done."""
        return self._heap[0][2] if self._heap else None

    def exhausted(self) -> bool:
        return not self._heap

    def advance(self) -> None:
        """Drop the current event and fetch the next one from its track."""
        if not self._heap:
            raise IndexError("sequencer is exhausted")
        _, _, event = heapq.heappop(self._heap)
        following = self.midi.next_event(event.track)
        if following is not None:
            self._push(_sequenced(following, event.track, event.abstick + following.tick))

    def __iter__(self) -> Iterator[SequencedEvent]:
        while self._heap:
            yield self._heap[0][2]
            self.advance()