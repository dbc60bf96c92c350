import os
from pathlib import Path

import pytest

from latex_wizard.errors import FileSystemError, InvalidCommandLineArgument
from latex_wizard.locator import find_project_root_directory


def test_search_upwards_finds_ancestor(make_project, monkeypatch):
    root = make_project()
    deep = root / "a" / "b" / "c"
    deep.mkdir(parents=True)
    monkeypatch.chdir(deep)

    assert find_project_root_directory().resolve() == root.resolve()


def test_search_upwards_stops_at_nearest(make_project, monkeypatch):
    outer = make_project("outer")
    inner = outer / "inner"
    inner.mkdir()
    (inner / "main.tex").write_text("", encoding="utf-8")
    start = inner / "chapters"
    start.mkdir()
    monkeypatch.chdir(start)

    assert find_project_root_directory().resolve() == inner.resolve()


def test_search_upwards_in_root_itself(make_project, monkeypatch):
    root = make_project()
    monkeypatch.chdir(root)

    assert find_project_root_directory().resolve() == root.resolve()


def test_search_upwards_not_found(tmp_path, monkeypatch):
    start = tmp_path / "nothing" / "here"
    start.mkdir(parents=True)
    if any((p / "main.tex").is_file() for p in [start.resolve(), *start.resolve().parents]):
        pytest.skip("a main.tex exists above the temporary directory")
    monkeypatch.chdir(start)

    with pytest.raises(InvalidCommandLineArgument, match="neither in the current directory"):
        find_project_root_directory()


def test_search_ignores_directory_named_main_tex(tmp_path, monkeypatch):
    fake = tmp_path / "proj"
    (fake / "main.tex").mkdir(parents=True)
    if any((p / "main.tex").is_file() for p in [tmp_path.resolve(), *tmp_path.resolve().parents]):
        pytest.skip("a main.tex exists above the temporary directory")
    monkeypatch.chdir(fake)

    with pytest.raises(InvalidCommandLineArgument):
        find_project_root_directory()


def test_bare_main_tex_is_current_directory(make_project, monkeypatch):
    root = make_project()
    monkeypatch.chdir(root)

    result = find_project_root_directory("main.tex")
    assert result == Path(".")
    assert str(result) == "."


def test_main_tex_path(make_project):
    root = make_project()
    assert find_project_root_directory(str(root / "main.tex")) == root


def test_directory_path(make_project):
    root = make_project()
    assert find_project_root_directory(str(root)) == root


def test_relative_directory_path(make_project, tmp_path, monkeypatch):
    make_project("thesis")
    monkeypatch.chdir(tmp_path)
    assert find_project_root_directory("thesis") == Path("thesis")


def test_missing_path(tmp_path):
    with pytest.raises(InvalidCommandLineArgument, match="doesn't exist"):
        find_project_root_directory(str(tmp_path / "nope"))


def test_wrong_file_name(make_project):
    root = make_project()
    other = root / "chapter.tex"
    other.write_text("", encoding="utf-8")

    with pytest.raises(InvalidCommandLineArgument, match="Invalid file name"):
        find_project_root_directory(str(other))


def test_directory_without_main_tex(tmp_path):
    with pytest.raises(InvalidCommandLineArgument, match="Failed to find"):
        find_project_root_directory(str(tmp_path))


def test_main_tex_must_be_direct_child(tmp_path):
    nested = tmp_path / "proj" / "src"
    nested.mkdir(parents=True)
    (nested / "main.tex").write_text("", encoding="utf-8")

    with pytest.raises(InvalidCommandLineArgument, match="Failed to find"):
        find_project_root_directory(str(tmp_path / "proj"))


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
def test_special_file(tmp_path):
    fifo = tmp_path / "main.tex"
    os.mkfifo(fifo)

    with pytest.raises(InvalidCommandLineArgument, match="should be either"):
        find_project_root_directory(str(fifo))


def test_unreadable_reference(tmp_path, monkeypatch):
    def exists(self, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "exists", exists)

    with pytest.raises(FileSystemError, match="failed to inspect"):
        find_project_root_directory(str(tmp_path / "proj"))


def test_unreadable_parent_during_search(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    def is_file(self):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "is_file", is_file)

    with pytest.raises(FileSystemError, match="failed to inspect"):
        find_project_root_directory()
