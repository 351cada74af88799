"""Token and TokenType definitions for the ctxlex lexer.

The contextual tokenizers and the host driver produce Token objects.
Each Token has a type, the source text it covers, absolute offsets and a
source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Zero-width tokens:
Some layout tokens (DEDENT, BLANK_LINE_START, EOF, an implicit STRING_END)
cover no characters. Tokens that scanned leading whitespace to reach their
decision but leave it for the next token record that count in ``reclaimed``
instead of overloading a signed length.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ctxlex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Layout (EOF, newlines, blank lines, indentation)
    - String literal pieces (16 start variants, body tokens)
    - Legacy keyword
    - Host code tokens produced by the reference driver

    """

    # Layout
    EOF = auto()
    NEWLINE = auto()  # Statement-separating line break
    NEWLINE_BRACKETED = auto()  # Line break inside brackets (insignificant)
    BLANK_LINE_START = auto()  # Start of a blank or comment-only line
    INDENT = auto()
    DEDENT = auto()

    # String starts: quote style x long x raw x format
    STRING_START = auto()  # '
    STRING_START_D = auto()  # "
    STRING_START_L = auto()  # '''
    STRING_START_LD = auto()  # """
    STRING_START_R = auto()  # r'
    STRING_START_RD = auto()  # r"
    STRING_START_RL = auto()  # r'''
    STRING_START_RLD = auto()  # r"""
    STRING_START_F = auto()  # f'
    STRING_START_FD = auto()  # f"
    STRING_START_FL = auto()  # f'''
    STRING_START_FLD = auto()  # f"""
    STRING_START_FR = auto()  # fr'
    STRING_START_FRD = auto()  # fr"
    STRING_START_FRL = auto()  # fr'''
    STRING_START_FRLD = auto()  # fr"""

    # String body
    STRING_CONTENT = auto()
    ESCAPE = auto()  # \n \x41 \N{...}
    REPLACEMENT_START = auto()  # { opening an interpolation field
    STRING_END = auto()

    # Legacy keyword
    PRINT_KEYWORD = auto()  # print as a statement keyword

    # Host code tokens
    NAME = auto()
    NUMBER = auto()
    OPERATOR = auto()
    PAREN_L = auto()  # (
    PAREN_R = auto()  # )
    BRACKET_L = auto()  # [
    BRACKET_R = auto()  # ]
    BRACE_L = auto()  # {
    BRACE_R = auto()  # }

    # Trivia and recovery
    SPACE = auto()  # Horizontal whitespace and line continuations
    COMMENT = auto()  # # to end of line
    ERROR = auto()  # Unrecognized character (non-strict mode)


STRING_START_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.STRING_START,
        TokenType.STRING_START_D,
        TokenType.STRING_START_L,
        TokenType.STRING_START_LD,
        TokenType.STRING_START_R,
        TokenType.STRING_START_RD,
        TokenType.STRING_START_RL,
        TokenType.STRING_START_RLD,
        TokenType.STRING_START_F,
        TokenType.STRING_START_FD,
        TokenType.STRING_START_FL,
        TokenType.STRING_START_FLD,
        TokenType.STRING_START_FR,
        TokenType.STRING_START_FRD,
        TokenType.STRING_START_FRL,
        TokenType.STRING_START_FRLD,
    }
)

OPENING_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.PAREN_L,
        TokenType.BRACKET_L,
        TokenType.BRACE_L,
        TokenType.REPLACEMENT_START,
    }
)

TRIVIA_TYPES: frozenset[TokenType] = frozenset({TokenType.SPACE, TokenType.COMMENT})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Source text covered by the token (empty for zero-width tokens)
        start: Absolute start offset in source
        end: Absolute end offset in source
        lineno: Start line number (1-indexed)
        col: Start column (1-indexed)
        reclaimed: Characters scanned past ``end`` and handed back to the
            next token (blank-line-start and dedent measure whitespace they
            do not own)
        source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy location cache uses an idempotent write.

    """

    type: TokenType
    value: str
    start: int
    end: int
    lineno: int = 1
    col: int = 1
    reclaimed: int = 0
    source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def width(self) -> int:
        """Number of characters the token consumes."""
        return self.end - self.start

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from ctxlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.start,
            end_offset=self.end,
            source_file=self.source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"
