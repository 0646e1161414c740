import os

import pytest

from berrylang import fileio


def test_is_dir_and_is_file(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    f = tmp_path / "f.txt"
    f.write_text("abc")
    assert fileio.is_dir(sub) is True
    assert fileio.is_dir(f) is False
    assert fileio.is_file(f) is True
    assert fileio.is_file(sub) is False


def test_missing_path_is_nothing(tmp_path):
    missing = tmp_path / "missing"
    assert fileio.exists(missing) is False
    assert fileio.is_dir(missing) is False
    assert fileio.is_file(missing) is False


def test_exists(tmp_path):
    f = tmp_path / "x"
    f.write_bytes(b"")
    assert fileio.exists(f) is True
    assert fileio.exists(tmp_path) is True


def test_change_dir_and_get_cwd(tmp_path):
    original = fileio.get_cwd()
    try:
        fileio.change_dir(tmp_path)
        assert os.path.samefile(fileio.get_cwd(), tmp_path)
    finally:
        os.chdir(original)
    assert fileio.get_cwd() == original


def test_change_dir_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileio.change_dir(tmp_path / "nope")


def test_make_dir(tmp_path):
    target = tmp_path / "newdir"
    fileio.make_dir(target)
    assert fileio.is_dir(target) is True


def test_make_dir_twice_raises(tmp_path):
    target = tmp_path / "newdir"
    fileio.make_dir(target)
    with pytest.raises(FileExistsError):
        fileio.make_dir(target)


def test_remove_file(tmp_path):
    f = tmp_path / "gone.txt"
    f.write_text("data")
    fileio.remove_file(f)
    assert fileio.exists(f) is False


def test_remove_empty_directory(tmp_path):
    d = tmp_path / "empty"
    d.mkdir()
    fileio.remove_file(d)
    assert fileio.exists(d) is False


def test_remove_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileio.remove_file(tmp_path / "absent")


def test_list_dir(tmp_path):
    (tmp_path / "a").write_text("1")
    (tmp_path / "b").write_text("2")
    (tmp_path / "c").mkdir()
    assert sorted(fileio.list_dir(tmp_path)) == ["a", "b", "c"]


def test_list_dir_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileio.list_dir(tmp_path / "nothing")


def test_file_size_keeps_position(tmp_path):
    f = tmp_path / "data.bin"
    payload = b"0123456789"
    f.write_bytes(payload)
    with open(f, "rb") as handle:
        handle.seek(3)
        assert fileio.file_size(handle) == len(payload)
        assert handle.tell() == 3
        assert handle.read(2) == payload[3:5]


def test_file_size_empty(tmp_path):
    f = tmp_path / "empty.bin"
    f.write_bytes(b"")
    with open(f, "rb") as handle:
        assert fileio.file_size(handle) == 0