"""Legacy print keyword classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctxlex.charsets import INDENT_WHITESPACE, PRINT_CALL_FOLLOWERS, is_ident_char
from ctxlex.tokens import TokenType

if TYPE_CHECKING:
    from ctxlex.input import InputStream

_PRINT = "print"


class KeywordClassifierMixin:
    """Mixin reclassifying ``print`` as the legacy print-statement keyword."""

    def _classify_legacy_print(self, input: InputStream) -> None:
        """Emit PRINT_KEYWORD for ``print x`` but not ``print(x)``.

        The word must stand alone (``printer`` is a name). After it, spaces
        and tabs are skipped; a following ``(``, ``.``, line break or comment
        means a call, an attribute access or a bare name, so nothing is
        emitted. Anything else, end of input included, makes it the keyword.
        """
        for expected in _PRINT:
            if input.next != expected:
                return
            input.advance()
        if is_ident_char(input.next):
            return

        offset = 0
        while input.peek(offset) in INDENT_WHITESPACE:
            offset += 1
        if input.peek(offset) not in PRINT_CALL_FOLLOWERS:
            input.accept_token(TokenType.PRINT_KEYWORD, len(_PRINT))
