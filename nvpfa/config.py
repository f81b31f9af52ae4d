"""Reading and writing the settings file and the soundfont list."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

import tomli_w

from nvpfa.utils import error, info

CONFIG_PATH = "config.toml"
MIDI_LIST = "midi_list.toml"
SF_LIST = "soundfonts.toml"
DEFAULT_SOUNDFONT = "piano_maganda.sf2"
DEFAULT_MIDI = "pfa_intro.mid"


class ConfigError(ValueError):
    """Raised when a settings file cannot be read or written."""


@dataclass
class SoundfontItem:
    """A soundfont path and whether it is enabled."""

    label: str
    checked: bool = False


@dataclass
class Configuration:
    """Player settings."""

    bass_voice_count: int = 500
    note_speed: int = 6000
    window_w: int = 0
    window_h: int = 0
    bg_R: int = 43
    bg_G: int = 43
    bg_B: int = 43
    bg_A: int = 255
    last_midi_path: str = ""
    current_soundfonts: list[str] = field(default_factory=list)


def write_config(cfg: Configuration, path: str | Path = CONFIG_PATH) -> None:
    """Save ``cfg`` as TOML at ``path``."""
    document = {
        "Audio": {
            "VoiceCount": cfg.bass_voice_count,
            "LastMIDIpath": cfg.last_midi_path,
        },
        "Visual": {
            "NoteSpeed": cfg.note_speed,
            "Window_w": cfg.window_w,
            "Window_h": cfg.window_h,
        },
        "BackgroundColor": {
            "R": cfg.bg_R,
            "G": cfg.bg_G,
            "B": cfg.bg_B,
            "A": cfg.bg_A,
        },
    }
    with open(path, "wb") as out:
        tomli_w.dump(document, out)
    info("Config_Utils", "Settings saved\n")


def _load(path: str | Path) -> dict[str, Any]:
    with open(path, "rb") as fh:
        try:
            return tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc


def _table(doc: dict[str, Any], name: str) -> dict[str, Any]:
    table = doc.get(name)
    if not isinstance(table, dict):
        raise ConfigError(f"missing table [{name}]")
    return table


def _int(table: dict[str, Any], key: str) -> int:
    value = table.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"missing or non-integer value '{key}'")
    return value


def _str(table: dict[str, Any], key: str) -> str:
    value = table.get(key)
    if not isinstance(value, str):
        raise ConfigError(f"missing or non-string value '{key}'")
    return value


def read_config(path: str | Path = CONFIG_PATH) -> Configuration:
    """Load settings from the TOML file at ``path``."""
    doc = _load(path)
    audio = _table(doc, "Audio")
    vis = _table(doc, "Visual")
    bg = _table(doc, "BackgroundColor")
    return Configuration(
        bass_voice_count=_int(audio, "VoiceCount"),
        last_midi_path=_str(audio, "LastMIDIpath"),
        window_w=_int(vis, "Window_w"),
        window_h=_int(vis, "Window_h"),
        note_speed=_int(vis, "NoteSpeed"),
        bg_R=_int(bg, "R"),
        bg_G=_int(bg, "G"),
        bg_B=_int(bg, "B"),
        bg_A=_int(bg, "A"),
    )


def write_soundfont_list(
    items: Iterable[SoundfontItem], path: str | Path = SF_LIST
) -> None:
    """Save the soundfont list as parallel path and enabled arrays."""
    items = list(items)
    document = {
        "paths": [item.label for item in items],
        "enabled_disabled": [bool(item.checked) for item in items],
    }
    try:
        with open(path, "wb") as out:
            tomli_w.dump(document, out)
    except OSError as exc:
        error("Config_Utils", f"Failed to write '{Path(path).name}'\n")
        raise ConfigError(f"cannot write {path}") from exc


def read_soundfont_list(path: str | Path = SF_LIST) -> list[SoundfontItem]:
    """Load the soundfont list; an invalid list yields an empty one."""
    doc = _load(path)
    paths = doc.get("paths")
    enabled = doc.get("enabled_disabled")
    valid = (
        isinstance(paths, list)
        and isinstance(enabled, list)
        and all(isinstance(p, str) for p in paths)
        and all(isinstance(e, bool) for e in enabled)
        and len(paths) == len(enabled)
    )
    if not valid:
        error(
            "Config_Utils",
            f"Invalid or mismatched arrays in '{Path(path).name}'\n",
        )
        return []
    return [SoundfontItem(label, checked) for label, checked in zip(paths, enabled)]