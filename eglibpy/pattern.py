"""Glob-style matching with ``*`` (any run) and ``?`` (any single character)."""

from __future__ import annotations

import enum
from typing import List, NamedTuple, Sequence


class _Kind(enum.Enum):
    LITERAL = enum.auto()
    ANYCHAR = enum.auto()
    ANYTHING = enum.auto()
    ANYTHING_END = enum.auto()


class _Token(NamedTuple):
    kind: _Kind
    text: str = ""


def _compile(pattern: str) -> List[_Token]:
    tokens: List[_Token] = []
    literal: List[str] = []
    last = None
    for char in pattern:
        if char in "*?":
            if literal:
                tokens.append(_Token(_Kind.LITERAL, "".join(literal)))
                literal = []
            if last is _Kind.ANYTHING and char == "*":
                continue
            kind = _Kind.ANYTHING if char == "*" else _Kind.ANYCHAR
            tokens.append(_Token(kind))
            last = kind
        else:
            literal.append(char)
            last = _Kind.LITERAL

    if last is _Kind.ANYTHING and not literal:
        tokens[-1] = _Token(_Kind.ANYTHING_END)
    elif literal:
        tokens.append(_Token(_Kind.LITERAL, "".join(literal)))
    return tokens


def _match(tokens: Sequence[_Token], pos: int, string: str, idx: int) -> bool:
    end = len(string)
    while pos < len(tokens) and idx < end:
        token = tokens[pos]
        if token.kind is _Kind.ANYTHING_END:
            return True
        if token.kind is _Kind.LITERAL:
            if not string.startswith(token.text, idx):
                return False
            idx += len(token.text)
            pos += 1
            if pos < len(tokens) and tokens[pos].kind is _Kind.ANYTHING_END:
                return True
        elif token.kind is _Kind.ANYCHAR:
            idx += 1
            pos += 1
        else:
            return any(_match(tokens, pos + 1, string, start) for start in range(idx, end))
    return pos == len(tokens) and idx >= end


class PatternSpec:
    """A compiled pattern.

    A trailing ``*`` needs at least one character, and an empty pattern
    matches nothing, not even the empty string.
    """

    def __init__(self, pattern: str) -> None:
        if not isinstance(pattern, str):
            raise TypeError("pattern must be a string")
        self.pattern = pattern
        self._tokens = _compile(pattern)

    def __repr__(self) -> str:
        return f"PatternSpec({self.pattern!r})"

    def match(self, string: str) -> bool:
        """Report whether ``string`` matches the whole pattern."""
        if not isinstance(string, str):
            raise TypeError("string must be a string")
        if not self._tokens:
            return False
        return _match(self._tokens, 0, string, 0)


def pattern_match_string(spec: PatternSpec, string: str) -> bool:
    """Match ``string`` against a compiled ``spec``."""
    if spec is None:
        raise TypeError("spec must be a PatternSpec")
    return spec.match(string)