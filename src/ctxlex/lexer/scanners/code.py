"""Host code scanner mixin.

Covers the part of the token vocabulary that needs no context: names,
numbers, operators, brackets, string openers, comments and whitespace. It is
the last tokenizer the driver tries outside strings and always consumes at
least one character.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctxlex.charsets import (
    COMMENT_START,
    LINE_BREAKS,
    OPERATOR_STARTS,
    OPERATORS,
    QUOTES,
    SPACE_CHARS,
    STRING_PREFIXES,
    is_ident_char,
    is_ident_start,
)
from ctxlex.context import STRING_START_BY_FLAGS, ContextFlags
from ctxlex.tokens import TokenType

if TYPE_CHECKING:
    from ctxlex.input import InputStream

_BRACKETS: dict[str, TokenType] = {
    "(": TokenType.PAREN_L,
    ")": TokenType.PAREN_R,
    "[": TokenType.BRACKET_L,
    "]": TokenType.BRACKET_R,
    "{": TokenType.BRACE_L,
    "}": TokenType.BRACE_R,
}

# Longest prefix before a quote ("rb", "fr", ...)
_MAX_PREFIX = 2


def _continuation_width(input: InputStream) -> int:
    """Width of a backslash line continuation at the cursor, or 0."""
    if input.next != "\\":
        return 0
    if input.peek(1) == "\r" and input.peek(2) == "\n":
        return 3
    return 2 if input.peek(1) in LINE_BREAKS else 0


def _match_string_start(input: InputStream) -> TokenType | None:
    """Consume a string prefix and opening quote(s), returning the variant."""
    offset = 0
    while offset <= _MAX_PREFIX and is_ident_char(input.peek(offset)):
        offset += 1
    quote = input.peek(offset)
    if quote not in QUOTES:
        return None
    prefix = input.read(input.pos, input.pos + offset).lower()
    if prefix not in STRING_PREFIXES:
        return None

    flags = ContextFlags.STRING
    if quote == '"':
        flags |= ContextFlags.DOUBLE_QUOTE
    if "r" in prefix:
        flags |= ContextFlags.RAW
    if "f" in prefix:
        flags |= ContextFlags.FORMAT
    width = offset + 1
    if input.peek(offset + 1) == quote and input.peek(offset + 2) == quote:
        flags |= ContextFlags.LONG
        width += 2

    input.advance(width)
    return STRING_START_BY_FLAGS[flags]


def _skip_number(input: InputStream) -> None:
    start = input.pos
    hex_literal = input.read(start, start + 2).lower() == "0x"
    prev = ""
    while True:
        char = input.next
        if char.isalnum() or char in ("_", "."):
            pass
        elif char in ("+", "-") and prev in ("e", "E") and not hex_literal:
            pass
        else:
            return
        prev = char
        input.advance()


class CodeScannerMixin:
    """Mixin providing the context-free host tokens."""

    def _scan_code(self, input: InputStream) -> None:
        char = input.next
        if not char:
            return

        if char in SPACE_CHARS or _continuation_width(input):
            while True:
                if input.next in SPACE_CHARS:
                    input.advance()
                    continue
                width = _continuation_width(input)
                if not width:
                    break
                input.advance(width)
            input.accept_token(TokenType.SPACE)
            return

        if char == COMMENT_START:
            while input.next and input.next not in LINE_BREAKS:
                input.advance()
            input.accept_token(TokenType.COMMENT)
            return

        if is_ident_start(char) or char in QUOTES:
            string_start = _match_string_start(input)
            if string_start is not None:
                input.accept_token(string_start)
                return
            while is_ident_char(input.next):
                input.advance()
            input.accept_token(TokenType.NAME)
            return

        if char.isdigit() or (char == "." and input.peek(1).isdigit()):
            _skip_number(input)
            input.accept_token(TokenType.NUMBER)
            return

        bracket = _BRACKETS.get(char)
        if bracket is not None:
            input.accept_token(bracket, 1)
            return

        if char in OPERATOR_STARTS:
            pos = input.pos
            for op in OPERATORS:
                if input.read(pos, pos + len(op)) == op:
                    input.accept_token(TokenType.OPERATOR, len(op))
                    return

        input.accept_token(TokenType.ERROR, 1)
