"""Split a command line into words and operator tokens.

Blanks (space and tab) separate words. The operators ``|``, ``<``, ``>``,
``<<`` and ``>>`` are tokens of their own wherever they appear outside
quotes. Single quotes keep their contents literally; double quotes keep
them too but still expand ``$NAME`` and ``$?``. Quote characters are
removed and expanded values are never split further.
"""

from __future__ import annotations

from collections.abc import Iterator

from .chars import isalnum
from .cstr import itoa
from .environment import Environment

__all__ = ["is_blank", "tokenize"]

_OPERATORS = (">>", "<<", "|", ">", "<")
_OPERATOR_CHARS = "|<>"


def is_blank(c: str) -> bool:
    """True for the characters that separate words: space and tab."""
    return c in (" ", "\t")


def _dollar(text: str, pos: int, env: Environment, status: int) -> tuple[str, int]:
    """Expand the '$' at ``pos``; return the expansion and the position after it."""
    following = text[pos + 1:pos + 2]
    if following == "?":
        return itoa(status), pos + 2
    if following and isalnum(following):
        end = pos + 1
        while end < len(text) and isalnum(text[end]):
            end += 1
        return env.getenv(text[pos + 1:end]) or "", end
    return "$", pos + 1


def _expand(text: str, env: Environment, status: int) -> str:
    """Expand every variable reference in ``text``."""
    out = []
    pos = 0
    while pos < len(text):
        if text[pos] == "$":
            value, pos = _dollar(text, pos, env, status)
            out.append(value)
        else:
            out.append(text[pos])
            pos += 1
    return "".join(out)


def _closing_quote(line: str, pos: int) -> int:
    end = line.find(line[pos], pos + 1)
    if end < 0:
        raise ValueError(f"unterminated quote at position {pos}")
    return end


def _read_word(line: str, pos: int, env: Environment, status: int) -> tuple[str, int]:
    out = []
    while pos < len(line) and not is_blank(line[pos]) and line[pos] not in _OPERATOR_CHARS:
        c = line[pos]
        if c == "'":
            end = _closing_quote(line, pos)
            out.append(line[pos + 1:end])
            pos = end + 1
        elif c == '"':
            end = _closing_quote(line, pos)
            out.append(_expand(line[pos + 1:end], env, status))
            pos = end + 1
        elif c == "$":
            value, pos = _dollar(line, pos, env, status)
            out.append(value)
        else:
            out.append(c)
            pos += 1
    return "".join(out), pos


def _tokens(line: str, env: Environment, status: int) -> Iterator[str]:
    pos = 0
    while pos < len(line):
        if is_blank(line[pos]):
            pos += 1
            continue
        if line[pos] in _OPERATOR_CHARS:
            operator = next(op for op in _OPERATORS if line.startswith(op, pos))
            yield operator
            pos += len(operator)
        else:
            word, pos = _read_word(line, pos, env, status)
            yield word


def tokenize(line: str, env: Environment, last_status: int = 0) -> list[str]:
    """Split ``line`` into tokens, expanding variables from ``env``.

    ``$?`` expands to ``last_status``. Raises ValueError on a quote that
    is never closed.
    """
    return list(_tokens(line, env, last_status))