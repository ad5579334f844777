"""Lexical scan for ``import`` keywords in Swift source.

Tokenizing is left to Pygments' Swift lexer, so an ``import`` inside a
comment, a string literal or an interpolation is never reported.
"""
from __future__ import annotations

from pygments.lexer import default
from pygments.lexers import SwiftLexer
from pygments.token import Keyword, Name, Whitespace

Span = tuple[int, int]


class _SwiftImportLexer(SwiftLexer):
    # The stock module state never leaves on a trailing comment or a
    # ``\r\n`` ending, which turns the next line's keyword into a name.
    tokens = {
        "module": [
            (r"\r?\n", Whitespace, "#pop"),
            (r"[ \t]+", Whitespace),
            (r"[a-zA-Z_]\w*", Name.Namespace),
            default("#pop"),
        ],
    }


_LEXER = _SwiftImportLexer()


def _is_space(value: str) -> bool:
    return bool(value) and value.isspace()


def find_import_ranges(text: str) -> list[Span]:
    """Return ``(start, end)`` spans of ``import <identifier>`` keyword uses."""
    tokens = [
        (index, token, value)
        for index, token, value in _LEXER.get_tokens_unprocessed(text)
        if value
    ]
    spans: list[Span] = []
    previous = ""
    for i, (index, token, value) in enumerate(tokens):
        if token in Keyword and value == "import" and previous not in (".", "`"):
            tail = tokens[i + 1 : i + 3]
            if (
                len(tail) == 2
                and _is_space(tail[0][2])
                and tail[1][1] is Name.Namespace
            ):
                spans.append((index, tail[1][0] + len(tail[1][2])))
        if not _is_space(value):
            previous = value
    return spans
