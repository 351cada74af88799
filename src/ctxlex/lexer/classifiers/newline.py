"""Line-break classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctxlex.charsets import BLANK_LINE_ENDS, INDENT_WHITESPACE, LINE_BREAKS
from ctxlex.tokens import TokenType

if TYPE_CHECKING:
    from ctxlex.context import Context
    from ctxlex.input import InputStream


def line_break_width(input: InputStream) -> int:
    """Width of the line break at the cursor; a "\\r\\n" pair counts as one."""
    return 2 if input.next == "\r" and input.peek(1) == "\n" else 1


class NewlineClassifierMixin:
    """Mixin deciding what a line boundary means to the grammar.

    A line break is either a statement separator, insignificant whitespace
    (inside brackets), or part of a blank/comment-only line that the grammar
    skips entirely.
    """

    context: Context

    def can_shift(self, token_type: TokenType) -> bool:
        """Check whether the grammar accepts a token. Implemented by Lexer."""
        raise NotImplementedError

    def _classify_newline(self, input: InputStream) -> None:
        """Classify the position at the cursor, in priority order.

        1. End of input: EOF, zero width.
        2. Inside brackets: a line break is NEWLINE_BRACKETED; anything else
           is declined.
        3. At the start of a line, when the grammar can take a blank line
           here: skip spaces/tabs, and if the line holds nothing but a line
           break or a comment, emit BLANK_LINE_START at the line start. The
           skipped whitespace is reclaimed for the tokens that follow.
        4. A line break is a statement NEWLINE.
        """
        next_char = input.next
        if not next_char:
            input.accept_token(TokenType.EOF)
            return

        if self.context.is_bracketed:
            if next_char in LINE_BREAKS:
                input.accept_token(TokenType.NEWLINE_BRACKETED, line_break_width(input))
            return

        prev = input.peek(-1)
        if (not prev or prev in LINE_BREAKS) and self.can_shift(TokenType.BLANK_LINE_START):
            spaces = 0
            while input.next in INDENT_WHITESPACE:
                input.advance()
                spaces += 1
            if input.next in BLANK_LINE_ENDS:
                input.accept_token(TokenType.BLANK_LINE_START, reclaim=spaces)
            return

        if next_char in LINE_BREAKS:
            input.accept_token(TokenType.NEWLINE, line_break_width(input))
