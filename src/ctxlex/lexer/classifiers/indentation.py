"""Indentation classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctxlex.charsets import BLANK_LINE_ENDS, LINE_BREAKS
from ctxlex.context import TAB_SIZE
from ctxlex.tokens import TokenType

if TYPE_CHECKING:
    from ctxlex.context import Context
    from ctxlex.input import InputStream


class IndentationClassifierMixin:
    """Mixin emitting INDENT/DEDENT at the start of a line.

    Only runs in a plain indentation frame (no flags): inside brackets or a
    string, leading whitespace has no block meaning.
    """

    context: Context

    def _classify_indentation(self, input: InputStream) -> None:
        """Compare the new line's indentation with the current frame.

        Width uses tab stops every 8 columns. Blank and comment-only lines
        are left to the newline classifier.

        DEDENT is zero width and reclaims the whitespace it measured, so the
        driver can ask again at the same position and emit one DEDENT per
        closed level. INDENT covers the whitespace; the context tracker reads
        that span back to record the new level's width.
        """
        context = self.context
        if context.flags:
            return
        if input.peek(-1) not in LINE_BREAKS:
            return

        depth = 0
        chars = 0
        while True:
            char = input.next
            if char == " ":
                depth += 1
            elif char == "\t":
                depth += TAB_SIZE - (depth % TAB_SIZE)
            else:
                break
            input.advance()
            chars += 1

        if depth == context.indent or input.next in BLANK_LINE_ENDS:
            return
        if depth < context.indent:
            input.accept_token(TokenType.DEDENT, reclaim=chars)
        else:
            input.accept_token(TokenType.INDENT)
