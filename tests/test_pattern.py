import pytest

from eglibpy.pattern import PatternSpec, pattern_match_string

MATCHING = [
    ("abc", "abc"),
    ("a*", "abc"),
    ("a*", "a"),
    ("*c", "abc"),
    ("a?c", "abc"),
    ("*", "x"),
    ("a*c", "ac"),
    ("a*c", "abbbc"),
    ("*.txt", "notes.txt"),
    ("a**b", "ab"),
    ("?*", "a"),
    ("*?", "a"),
    ("*?", "ab"),
    ("a*b*c", "aXXbYYc"),
]

NOT_MATCHING = [
    ("abc", "abd"),
    ("abc", "ab"),
    ("abc", "abcd"),
    ("a?c", "ac"),
    ("*c", "abd"),
    ("a*c", "abcd"),
    ("?", ""),
    ("a", ""),
    ("*.txt", "notes.txt.bak"),
]


@pytest.mark.parametrize("pattern, string", NOT_MATCHING)
def test_does_not_match(pattern, string):
    assert not PatternSpec(pattern).match(string)


def test_trailing_star_needs_a_character():
    spec = PatternSpec("*")
    assert not spec.match("")
    assert spec.match("anything at all")


@pytest.mark.parametrize("string", ["", "a", "abc"])
def test_empty_pattern_matches_nothing(string):
    assert not PatternSpec("").match(string)


@pytest.mark.parametrize("pattern, string", MATCHING + NOT_MATCHING)
def test_function_agrees_with_method(pattern, string):
    spec = PatternSpec(pattern)
    assert pattern_match_string(spec, string) == spec.match(string)


def test_literal_pattern_matches_itself_only():
    spec = PatternSpec("hello")
    assert spec.match("hello")
    assert not spec.match("hello!")
    assert not spec.match("hell")


def test_invalid_arguments():
    with pytest.raises(TypeError):
        PatternSpec(None)
    with pytest.raises(TypeError):
        PatternSpec("a*").match(None)
    with pytest.raises(TypeError):
        pattern_match_string(None, "a")