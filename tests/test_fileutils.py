import os

import pytest

from nvpfa.fileutils import file_exists, files_by_extension, find_files


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.mid").write_bytes(b"x")
    (tmp_path / "b.midi").write_bytes(b"x")
    (tmp_path / "C.MID").write_bytes(b"x")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "d.mid").write_bytes(b"x")
    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "e.mid").write_bytes(b"x")
    (deeper / "notes.txt").write_bytes(b"x")
    return tmp_path


def test_recursive_search(tree):
    found = sorted(files_by_extension(tree, ".mid"))
    base = str(tree) + "/"
    assert found == sorted(
        [base + "a.mid", base + "sub/d.mid", base + "sub/deeper/e.mid"]
    )


def test_extension_is_case_sensitive(tree):
    found = files_by_extension(tree, ".MID")
    assert found == [str(tree) + "/C.MID"]


def test_trailing_slash_is_not_doubled(tree):
    found = files_by_extension(str(tree) + "/", ".midi")
    assert found == [str(tree) + "/b.midi"]


def test_symlinks_skipped(tree):
    os.symlink(tree / "a.mid", tree / "link.mid")
    os.symlink(tree / "sub", tree / "linkdir")
    found = files_by_extension(tree, ".mid")
    assert all("link" not in path for path in found)
    assert len(found) == 3


def test_missing_directory(tmp_path, capsys):
    assert files_by_extension(tmp_path / "nope", ".mid") == []
    assert "Failed to scan" in capsys.readouterr().err


def test_find_files_groups_by_extension(tree):
    found = find_files(tree, [".midi", ".mid"])
    assert found[0] == str(tree) + "/b.midi"
    assert sorted(found[1:]) == sorted(files_by_extension(tree, ".mid"))


def test_find_files_no_extensions(tree):
    assert find_files(tree, []) == []


def test_file_exists(tree):
    assert file_exists(tree / "a.mid") is True
    assert file_exists(str(tree / "a.mid")) is True
    assert file_exists(tree / "missing.mid") is False