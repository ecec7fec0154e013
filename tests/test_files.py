import os

import pytest

from enginekit.files import (
    FileDatabase,
    FileHandle,
    FileSystemManager,
    file_is_up_to_date,
    find_file_in_path,
)
from enginekit.log import get_logger


def _slash(path):
    return str(path).replace("\\", "/")


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.cfg").write_text("b")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "deep").mkdir()
    (tmp_path / "sub" / "deep" / "Target.DAT").write_text("t")
    (tmp_path / "other").mkdir()
    return tmp_path


def test_handle_absolute_filename_uses_forward_slashes(tmp_path):
    db = FileDatabase("", str(tmp_path))
    handle = FileHandle("dir\\file.txt", db)
    assert handle.absolute_filename == _slash(tmp_path) + "/dir/file.txt"
    assert "\\" not in handle.absolute_filename
    assert str(handle) == handle.absolute_filename


def test_handle_validity():
    assert not FileHandle().is_valid()
    db = FileDatabase("data", "base")
    assert FileHandle("x.txt", db).is_valid()
    assert not FileHandle("", db).is_valid()


def test_handle_setters_recompute_path():
    db = FileDatabase("data", "base")
    handle = FileHandle("one.txt", db)
    handle.filename = "two.txt"
    assert handle.absolute_filename == db.absolute_path + "/two.txt"
    other = FileDatabase("more", "root")
    handle.database = other
    assert handle.absolute_filename == other.absolute_path + "/two.txt"


def test_exists_and_timestamp(tree):
    db = FileDatabase("", str(tree))
    present = db.make_file_handle("a.txt")
    missing = db.make_file_handle("nope.txt")
    assert present.exists()
    assert not missing.exists()
    assert present.timestamp() == int(os.stat(tree / "a.txt").st_mtime)
    with pytest.raises(FileNotFoundError):
        missing.timestamp()


def test_file_is_up_to_date(tree):
    db = FileDatabase("", str(tree))
    src = db.make_file_handle("a.txt")
    dest = db.make_file_handle("b.cfg")
    os.utime(tree / "a.txt", (1000, 1000))
    os.utime(tree / "b.cfg", (2000, 2000))
    assert file_is_up_to_date(src, dest)
    assert not file_is_up_to_date(dest, src)
    assert not file_is_up_to_date(src, db.make_file_handle("nope.txt"))


def test_database_absolute_path():
    db = FileDatabase("data", "base")
    assert db.path == "data"
    assert db.absolute_path == "base/data"
    assert FileDatabase("", "base").absolute_path == "base"


def test_list_files_all(tree):
    db = FileDatabase("", str(tree))
    names = [h.filename for h in db.list_files()]
    assert names == ["a.txt", "b.cfg"]
    assert all(h.database is db for h in db.list_files())


def test_list_files_wildcards(tree):
    db = FileDatabase("", str(tree))
    assert [h.filename for h in db.list_files("*.txt")] == ["a.txt"]
    both = [h.filename for h in db.list_files(["*.cfg", "*.txt"])]
    assert both == ["b.cfg", "a.txt"]


def test_list_files_failure_logs(tmp_path):
    messages = []
    get_logger().add_callback(messages.append)
    db = FileDatabase("missing", str(tmp_path))
    assert db.list_files() == []
    assert any("Failed to find files in path: " + db.absolute_path in m for m in messages)
    assert FileDatabase("", str(tmp_path)).list_files("*.xyz") == []


def test_list_paths(tree):
    db = FileDatabase("", str(tree))
    base = db.absolute_path
    assert db.list_paths(False) == [base + "/other", base + "/sub"]
    assert db.list_paths(True) == [base + "/other", base + "/sub", base + "/sub/deep"]
    assert FileDatabase("missing", str(tree)).list_paths(True) == []


def test_find_file_in_path_ignores_case(tree):
    base = _slash(tree) + "/"
    found = find_file_in_path(base, "target.dat")
    assert found == (base + "sub/deep/Target.DAT", "sub/deep/")
    assert find_file_in_path(base, "absent.bin") is None


def test_find_file_in_path_skips_dot_directories(tmp_path):
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "secret.txt").write_text("x")
    assert find_file_in_path(_slash(tmp_path) + "/", "secret.txt") is None


def test_find_file_handle(tree):
    db = FileDatabase("", str(tree))
    root = db.find_file_handle("a.txt")
    assert root.filename == "a.txt"
    nested = db.find_file_handle("target.dat")
    assert nested.filename == "sub/deep/target.dat"
    missing = db.find_file_handle("absent.bin")
    assert missing.filename == "absent.bin"
    assert not missing.exists()


def test_set_base_path_folds_parent_segments():
    fs = FileSystemManager()
    fs.set_base_path("a\\b/../c/", from_curr_dir=False)
    assert fs.base_path == "a/c"


def test_set_base_path_from_current_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    fs = FileSystemManager()
    fs.set_base_path("content")
    assert fs.base_path == _slash(os.getcwd()) + "/content"


def test_add_database_and_lookup():
    fs = FileSystemManager()
    fs.set_base_path("root", from_curr_dir=False)
    db = fs.add_database("Global", "config/")
    assert db.path == "config"
    assert db.absolute_path == "root/config"
    assert fs("GLOBAL") is db
    assert "global" in fs
    assert fs("world") is None


def test_add_database_duplicate_raises():
    fs = FileSystemManager()
    fs.add_database("Global", "config")
    with pytest.raises(ValueError):
        fs.add_database("GLOBAL", "elsewhere")