import os
import stat

import pytest

from eglibpy.path import (
    build_path,
    find_program_in_path,
    get_prgname,
    path_get_basename,
    path_get_dirname,
    set_prgname,
)


def test_build_path_joins_elements():
    assert build_path("/", "a", "b").split("/") == ["a", "b"]


def test_build_path_single_element_unchanged():
    assert build_path("/", "alpha") == "alpha"


def test_build_path_no_elements_is_empty():
    assert build_path("/") == ""


def test_build_path_collapses_duplicate_separators():
    assert build_path("/", "a//", "//b") == build_path("/", "a", "b")


def test_build_path_keeps_leading_separator_of_first():
    result = build_path("/", "/usr", "lib")
    assert result.startswith("/")
    assert result.split("/") == ["", "usr", "lib"]


def test_build_path_keeps_trailing_separator_of_last():
    result = build_path("/", "a", "b/")
    assert result.endswith("/")
    assert result.rstrip("/") == build_path("/", "a", "b")


def test_build_path_skips_empty_elements():
    assert build_path("/", "a", "", "/", "b") == build_path("/", "a", "b")


def test_build_path_multi_char_separator():
    assert build_path("::", "x::", "::y") == build_path("::", "x", "y")
    assert build_path("::", "x", "y").split("::") == ["x", "y"]


def test_build_path_none_ends_elements():
    assert build_path("/", "a", None, "b") == build_path("/", "a")


def test_build_path_empty_separator_rejected():
    with pytest.raises(ValueError):
        build_path("", "a", "b")


def test_build_path_none_separator_rejected():
    with pytest.raises(TypeError):
        build_path(None, "a")


def test_dirname_without_separator():
    assert path_get_dirname("file") == "."


def test_dirname_of_root_entry():
    assert path_get_dirname(os.sep + "file") == "/"


def test_dirname_nested():
    path = os.sep.join(["a", "b", "c"])
    assert path_get_dirname(path) == os.sep.join(["a", "b"])


def test_dirname_none_rejected():
    with pytest.raises(TypeError):
        path_get_dirname(None)


def test_basename_empty():
    assert path_get_basename("") == "."


def test_basename_without_separator():
    assert path_get_basename("name") == "name"


def test_basename_nested():
    assert path_get_basename(os.sep.join(["a", "b", "c"])) == "c"


def test_basename_trailing_separator():
    assert path_get_basename(os.sep.join(["a", "b", ""])) == "b"


def test_basename_single_component_with_trailing_separator():
    assert path_get_basename("a" + os.sep) == "/"


def test_basename_root():
    assert path_get_basename(os.sep) == "/"


def _make_executable(directory, name):
    target = directory / name
    target.write_text("#!/bin/sh\n")
    target.chmod(target.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return target


def test_find_program_in_path_finds_executable(tmp_path, monkeypatch):
    _make_executable(tmp_path, "myprog")
    monkeypatch.setenv("PATH", os.pathsep.join(["", str(tmp_path)]))
    assert find_program_in_path("myprog") == build_path(os.sep, str(tmp_path), "myprog")


def test_find_program_in_path_first_directory_wins(tmp_path, monkeypatch):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_executable(first, "tool")
    _make_executable(second, "tool")
    monkeypatch.setenv("PATH", os.pathsep.join([str(first), str(second)]))
    assert find_program_in_path("tool") == build_path(os.sep, str(first), "tool")


def test_find_program_in_path_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert find_program_in_path("does-not-exist-here") is None


def test_find_program_in_path_empty_path_uses_cwd(tmp_path, monkeypatch):
    _make_executable(tmp_path, "localprog")
    monkeypatch.setenv("PATH", "")
    monkeypatch.chdir(tmp_path)
    found = find_program_in_path("localprog")
    assert found == build_path(os.sep, os.getcwd(), "localprog")


def test_find_program_in_path_none_rejected():
    with pytest.raises(TypeError):
        find_program_in_path(None)


def test_prgname_round_trip():
    set_prgname("tester")
    assert get_prgname() == "tester"
    set_prgname(None)
    assert get_prgname() is None