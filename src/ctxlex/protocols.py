"""Protocols for ctxlex.

Defines the contract between the contextual tokenizers and the parser that
drives them. The reference Lexer implements it; an LR parser embedding the
tokenizers would implement it over its own parse stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ctxlex.context import Context
    from ctxlex.tokens import TokenType


class ParseStack(Protocol):
    """What a tokenizer may ask of the parser at a decision point.

    Thread Safety:
        Tokenizers only read through this protocol; they never change the
        stack. Context updates happen in the ContextTracker callbacks.

    """

    @property
    def context(self) -> Context:
        """The current (top) context frame."""
        ...

    def can_shift(self, token_type: TokenType) -> bool:
        """Check whether the grammar accepts ``token_type`` in this state."""
        ...
