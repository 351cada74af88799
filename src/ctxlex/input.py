"""Input cursor shared by the contextual tokenizers.

A tokenizer is called at a decision point (``token_start``). It may look
ahead with ``peek`` and move the cursor with ``advance``; nothing it does is
final until it calls ``accept_token``. If it returns without accepting, the
driver rewinds the cursor to the decision point and asks the next tokenizer.

End of input is reported as the empty string, so lookahead comparisons
against character sets need no special casing.

Thread Safety:
InputStream instances are owned by one Lexer and are not shared.

"""

from __future__ import annotations

from typing import NamedTuple

from ctxlex.tokens import TokenType


class AcceptedToken(NamedTuple):
    """Raw tokenizer result, before the driver turns it into a Token."""

    type: TokenType
    end: int
    reclaimed: int


class InputStream:
    """Character cursor over a source string."""

    __slots__ = ("_source", "_source_len", "token_start", "pos", "accepted")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self.token_start = 0
        self.pos = 0
        self.accepted: AcceptedToken | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def next(self) -> str:
        """Character at the cursor, or "" at end of input."""
        if self.pos >= self._source_len:
            return ""
        return self._source[self.pos]

    def peek(self, offset: int = 0) -> str:
        """Character at ``pos + offset``, or "" outside the source.

        Negative offsets look behind the cursor: ``peek(-1)`` is the
        previous character, "" at the start of input.
        """
        idx = self.pos + offset
        if 0 <= idx < self._source_len:
            return self._source[idx]
        return ""

    def advance(self, count: int = 1) -> str:
        """Move the cursor forward and return the new current character."""
        self.pos = min(self.pos + count, self._source_len)
        return self.next

    def read(self, start: int, end: int) -> str:
        """Return the source text between two absolute offsets."""
        return self._source[start:end]

    def reset(self, pos: int) -> None:
        """Start a new decision point at ``pos``, discarding any result."""
        self.token_start = pos
        self.pos = pos
        self.accepted = None

    def accept_token(
        self,
        token_type: TokenType,
        length: int | None = None,
        *,
        reclaim: int = 0,
    ) -> None:
        """Propose a token starting at the decision point.

        Args:
            token_type: Kind of token to emit.
            length: Forward width measured from the decision point. When
                omitted the token covers everything advanced so far.
            reclaim: When ``length`` is omitted, hand back this many of the
                advanced characters; they stay for the next token.
        """
        if length is not None:
            end = min(self.token_start + length, self._source_len)
        else:
            end = self.pos - reclaim
        self.accepted = AcceptedToken(token_type, end, reclaim)
