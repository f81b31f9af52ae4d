# nvpfa

The core of a falling-notes MIDI visualiser in the style of *Piano From
Above*. It reads a Standard MIDI File (format 0 or 1), merges its tracks into
one time-ordered event stream and turns that stream into timed notes per key,
ready to be drawn as bars falling onto a 128-key piano keyboard. It also
reads and writes the player's settings and soundfont list, finds MIDI files
and soundfonts on disk, and holds the interface theme.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from nvpfa.notelist import open_note_list

notes = open_note_list("song.mid")
notes.update_to(5.0)          # load every note that starts in the first 5 seconds
notes.remove_overlaps()       # trim notes cut short by a later note on the same key
for note in notes.notes[60]:  # notes on middle C
    print(note.track, note.start, note.end)
notes.remove_to(2.0)          # drop notes that are over before 2 seconds
notes.seek(0.0)               # go back to the start with empty lists
```

Tempo changes (set-tempo meta events) are followed; until the first one the
tempo is 120 beats per minute.

## Modules

- `nvpfa.midi`: `read_midi(path)` and `parse_midi(data)` give a `MidiFile`.
  Its `next_event(track)` decodes one `MidiEvent` at a time (running status
  included) and returns `None` at the end of the track; `rewind()` starts all
  tracks again. Malformed data raises `MidiFormatError`. `read_vlq` decodes a
  variable-length quantity.
- `nvpfa.sequencer`: `Sequencer` merges all tracks into `SequencedEvent`s
  ordered by absolute tick (at equal ticks, the higher track comes first).
  Use `current()`, `advance()`, `exhausted()` and `reset()`, or iterate it.
- `nvpfa.notelist`: `NoteList` and `open_note_list` as in the example. Format 2
  files raise `MidiFormatError`.
- `nvpfa.config`: `read_config` / `write_config` store a `Configuration` as
  TOML (`config.toml` by default); `read_soundfont_list` /
  `write_soundfont_list` store `SoundfontItem`s (`soundfonts.toml`). A missing
  or wrongly typed setting raises `ConfigError`; a soundfont list with missing
  or mismatched arrays reads as an empty list. `Configuration()` holds the
  defaults: 500 voices, note speed 6000 and a dark grey (43, 43, 43, 255)
  background.
- `nvpfa.fileutils`: `files_by_extension(base_dir, ext)` searches a directory
  tree case-sensitively and skips symbolic links; `find_files` does this for
  several extensions in turn; `file_exists` checks that a file can be read.
- `nvpfa.gui`: `filename_only`, `filter_midi_list` and `filter_soundfont_list`
  for searching the lists, `checked_soundfonts` for the enabled soundfonts,
  and `DoubleTapDetector` for recognising a double tap.
- `nvpfa.theme`: `default_style(mobile)` builds the interface `Style`, with
  larger scrollbars and grabs on mobile; `default_colors()` gives the palette.
- `nvpfa.utils`: console `error` / `warn` / `info`, `frgba_to_irgba` colour
  conversion, and the byte helpers `u64be`, `rev_u16` and `rev_u32`.

## What it does not do

The package has no command and opens no window: it does not draw the
keyboard or the falling notes, and it does not play audio through
soundfonts. It provides the data those need: note timings, settings, file
lists and the theme.