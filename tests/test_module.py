import os

from eglibpy.module import module_build_path


def test_unix_name_without_directory():
    assert module_build_path("", "foo", False) == "libfoo.so"


def test_unix_name_with_directory():
    assert module_build_path("/usr/lib", "foo", False) == "/usr/lib/libfoo.so"


def test_unix_name_already_prefixed():
    assert module_build_path(None, "libbar", False) == "libbar.so"


def test_windows_name_with_directory():
    result = module_build_path("C:/mods", "foo", True)
    assert result == "C:/mods/" + "foo" + ".dll"


def test_windows_name_keeps_lib_prefix():
    assert module_build_path("", "libfoo", True) == "libfoo" + ".dll"


def test_none_module_name():
    assert module_build_path("/usr/lib", None, False) is None


def test_directory_is_prefix_of_result():
    result = module_build_path("/opt/x", "thing", False)
    assert result.startswith("/opt/x/")
    assert result[len("/opt/x/"):] == module_build_path("", "thing", False)


def test_default_follows_platform():
    expected = module_build_path("", "foo", os.name == "nt")
    assert module_build_path("", "foo") == expected