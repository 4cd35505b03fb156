import os

import pytest

from protocore.files import FileStats, ScanEntry, file_stat, scan_directories, scan_files, scan_paths


@pytest.fixture
def tree(tmp_path):
    for name in ("a.png", "b.png", "c.txt", "x.png.png", ".png"):
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "sub").mkdir()
    (tmp_path / "d.png").mkdir()
    return str(tmp_path) + "/"


def test_scan_files_by_suffix(tree):
    entries = sorted(scan_files(tree, ".png"), key=lambda e: e.name)
    assert entries == [
        ScanEntry(tree + "a.png", "a", ".png"),
        ScanEntry(tree + "b.png", "b", ".png"),
    ]


def test_scan_files_skips_repeated_suffix_and_bare_suffix(tree):
    names = {e.pathfile for e in scan_files(tree, ".png")}
    assert tree + "x.png.png" not in names
    assert tree + ".png" not in names


def test_scan_files_other_suffix(tree):
    assert [e.name for e in scan_files(tree, ".txt")] == ["c"]


def test_scan_paths(tree):
    assert sorted(scan_paths(tree, ".png")) == [tree + "a.png", tree + "b.png"]


def test_scan_directories(tree):
    entries = sorted(scan_directories(tree), key=lambda e: e.name)
    assert [(e.pathfile, e.name) for e in entries] == [
        (tree + "d.png/", "d.png"),
        (tree + "sub/", "sub"),
    ]


def test_missing_directory_yields_nothing(tmp_path):
    missing = str(tmp_path / "nope") + "/"
    assert list(scan_files(missing, ".png")) == []
    assert list(scan_directories(missing)) == []


def test_file_stat_mtime(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"data")
    os.utime(path, (1_000_000_000, 1_000_000_000))
    assert file_stat(str(path)) == FileStats(1_000_000_000)


def test_file_stat_missing_raises(tmp_path):
    with pytest.raises(OSError):
        file_stat(str(tmp_path / "missing.bin"))