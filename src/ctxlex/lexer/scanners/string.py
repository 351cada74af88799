"""String body scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctxlex.charsets import (
    HEX_DIGITS,
    HEX_ESCAPE_DIGITS,
    LINE_BREAKS,
    NAMED_ESCAPE_STOPS,
    OCTAL_DIGITS,
)
from ctxlex.tokens import TokenType

if TYPE_CHECKING:
    from ctxlex.context import Context
    from ctxlex.input import InputStream


def _skip_digits(input: InputStream, digits: frozenset[str], limit: int) -> None:
    for _ in range(limit):
        if input.next not in digits:
            return
        input.advance()


def _skip_escape(input: InputStream, escaped: str) -> None:
    """Consume the trailing part of an escape whose letter was just read.

    Only bounds the length; malformed escapes still end here and the
    ESCAPE token covers whatever prefix was valid.
    """
    if escaped in OCTAL_DIGITS:
        _skip_digits(input, OCTAL_DIGITS, 2)
    elif escaped in HEX_ESCAPE_DIGITS:
        _skip_digits(input, HEX_DIGITS, HEX_ESCAPE_DIGITS[escaped])
    elif escaped == "N" and input.next == "{":
        input.advance()
        while input.next and input.next not in NAMED_ESCAPE_STOPS:
            input.advance()
        if input.next == "}":
            input.advance()


class StringScannerMixin:
    """Mixin scanning the inside of a string literal.

    The quoting mode comes from the current context frame: quote character,
    triple quoting, whether backslash escapes apply (not raw) and whether
    braces open interpolation fields (format strings).

    Each call produces exactly one of STRING_CONTENT, ESCAPE,
    REPLACEMENT_START or STRING_END, or nothing at end of input.
    """

    context: Context

    def _scan_string_body(self, input: InputStream) -> None:
        """Scan one token of string body at the cursor.

        Content accumulates until one of these interrupts, checked in order:

        1. ``{`` in a format string. ``{{`` is literal content. A lone ``{``
           is REPLACEMENT_START if it comes first, else it ends the run.
        2. ``\\`` when escapes apply. First in the run, it becomes an ESCAPE
           token spanning the whole sequence; otherwise it ends the run.
        3. The closing quote (three of them for long strings). First in the
           run, it is STRING_END; otherwise it ends the run.
        4. A line break. Long strings keep it as content. In a single-line
           string it ends the string: a zero-width STRING_END if first,
           otherwise it ends the run.
        """
        context = self.context
        quote = context.quote
        long = context.is_long
        escapes = context.has_escapes
        interpolation = context.has_interpolation

        start = input.pos
        while True:
            char = input.next
            if not char:
                break
            if interpolation and char == "{":
                if input.peek(1) == "{":
                    input.advance(2)
                    continue
                if input.pos == start:
                    input.accept_token(TokenType.REPLACEMENT_START, 1)
                    return
                break
            if escapes and char == "\\":
                if input.pos == start:
                    escaped = input.advance()
                    if escaped:
                        input.advance()
                        _skip_escape(input, escaped)
                    input.accept_token(TokenType.ESCAPE)
                    return
                break
            if char == quote and (
                not long or (input.peek(1) == quote and input.peek(2) == quote)
            ):
                if input.pos == start:
                    input.accept_token(TokenType.STRING_END, 3 if long else 1)
                    return
                break
            if char in LINE_BREAKS and not long:
                if input.pos == start:
                    input.accept_token(TokenType.STRING_END)
                    return
                break
            input.advance()

        if input.pos > start:
            input.accept_token(TokenType.STRING_CONTENT)
