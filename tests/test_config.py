import tomllib

import pytest

from nvpfa.config import (
    ConfigError,
    Configuration,
    SoundfontItem,
    read_config,
    read_soundfont_list,
    write_config,
    write_soundfont_list,
)


def _sample():
    return Configuration(
        bass_voice_count=700,
        note_speed=4200,
        window_w=580,
        window_h=430,
        bg_R=56,
        bg_G=32,
        bg_B=48,
        bg_A=200,
        last_midi_path="/music/song.mid",
    )


def test_config_round_trip(tmp_path):
    path = tmp_path / "config.toml"
    cfg = _sample()
    write_config(cfg, path)
    assert read_config(path) == cfg


def test_config_file_layout(tmp_path):
    path = tmp_path / "config.toml"
    write_config(_sample(), path)
    with open(path, "rb") as fh:
        doc = tomllib.load(fh)
    assert doc["Audio"]["VoiceCount"] == 700
    assert doc["Audio"]["LastMIDIpath"] == "/music/song.mid"
    assert doc["Visual"]["NoteSpeed"] == 4200
    assert doc["BackgroundColor"]["A"] == 200


def test_write_config_logs(tmp_path, capsys):
    write_config(Configuration(), tmp_path / "c.toml")
    assert "Settings saved" in capsys.readouterr().err


def test_default_configuration():
    cfg = Configuration()
    assert cfg.bass_voice_count == 500
    assert (cfg.bg_R, cfg.bg_G, cfg.bg_B, cfg.bg_A) == (43, 43, 43, 255)


def test_read_config_missing_key(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[Audio]\nLastMIDIpath = "x"\n[Visual]\n[BackgroundColor]\n')
    with pytest.raises(ConfigError):
        read_config(path)


def test_read_config_missing_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[Audio]\nVoiceCount = 1\nLastMIDIpath = "x"\n')
    with pytest.raises(ConfigError):
        read_config(path)


def test_read_config_parse_error(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[Audio\n")
    with pytest.raises(ConfigError):
        read_config(path)


def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "absent.toml")


def test_soundfont_list_round_trip(tmp_path):
    path = tmp_path / "soundfonts.toml"
    items = [SoundfontItem("/sf/a.sf2", True), SoundfontItem("/sf/b.sfz", False)]
    write_soundfont_list(items, path)
    assert read_soundfont_list(path) == items


def test_soundfont_list_layout(tmp_path):
    path = tmp_path / "soundfonts.toml"
    write_soundfont_list([SoundfontItem("/sf/a.sf2", True)], path)
    with open(path, "rb") as fh:
        doc = tomllib.load(fh)
    assert doc["paths"] == ["/sf/a.sf2"]
    assert doc["enabled_disabled"] == [True]


def test_soundfont_list_mismatch(tmp_path, capsys):
    path = tmp_path / "soundfonts.toml"
    path.write_text('paths = ["a", "b"]\nenabled_disabled = [true]\n')
    assert read_soundfont_list(path) == []
    assert "Invalid or mismatched arrays" in capsys.readouterr().err


def test_soundfont_list_missing_array(tmp_path):
    path = tmp_path / "soundfonts.toml"
    path.write_text('paths = ["a"]\n')
    assert read_soundfont_list(path) == []


def test_soundfont_list_write_failure(tmp_path, capsys):
    path = tmp_path / "missing_dir" / "soundfonts.toml"
    with pytest.raises(ConfigError):
        write_soundfont_list([SoundfontItem("a")], path)
    assert "Failed to write 'soundfonts.toml'" in capsys.readouterr().err