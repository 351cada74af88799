"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

The input cursor reports end of input as the empty string, so sets that a
lookahead compares against never contain "" unless stated.

Usage:
    from ctxlex.charsets import LINE_BREAKS

    if input.next in LINE_BREAKS:  # O(1) lookup
        ...
"""

# Line terminators. A "\r\n" pair is two members of this set in a row.
LINE_BREAKS: frozenset[str] = frozenset("\n\r")

# Horizontal whitespace that counts toward indentation
INDENT_WHITESPACE: frozenset[str] = frozenset(" \t")

# Horizontal whitespace the host scanner treats as trivia
SPACE_CHARS: frozenset[str] = frozenset(" \t\f")

COMMENT_START = "#"

# A line that continues with one of these is blank or comment-only
BLANK_LINE_ENDS: frozenset[str] = LINE_BREAKS | frozenset(COMMENT_START)

# After the legacy print keyword, these mean a call, attribute access or a
# bare name rather than a print statement
PRINT_CALL_FOLLOWERS: frozenset[str] = frozenset("(.\n\r#")

QUOTES: frozenset[str] = frozenset("'\"")

OCTAL_DIGITS: frozenset[str] = frozenset("01234567")

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Characters that stop a \N{...} named escape scan
NAMED_ESCAPE_STOPS: frozenset[str] = frozenset("}'\"\n\r")

# Trailing hex digits allowed after each escape letter
HEX_ESCAPE_DIGITS: dict[str, int] = {"x": 2, "u": 4, "U": 8}

# Valid string prefixes (lowercased); "" is the unprefixed string
STRING_PREFIXES: frozenset[str] = frozenset(
    {"", "r", "u", "f", "b", "br", "rb", "fr", "rf"}
)

# Operators and delimiters, longest first for maximal munch
OPERATORS: tuple[str, ...] = (
    "**=",
    "//=",
    ">>=",
    "<<=",
    "...",
    "->",
    ":=",
    "**",
    "//",
    "<<",
    ">>",
    "<=",
    ">=",
    "==",
    "!=",
    "<>",
    "+=",
    "-=",
    "*=",
    "/=",
    "%=",
    "&=",
    "|=",
    "^=",
    "@=",
    "+",
    "-",
    "*",
    "/",
    "%",
    "@",
    "&",
    "|",
    "^",
    "~",
    "<",
    ">",
    "=",
    ".",
    ",",
    ":",
    ";",
    "!",
    "`",
)

OPERATOR_STARTS: frozenset[str] = frozenset(op[0] for op in OPERATORS)


def is_ident_start(char: str) -> bool:
    """Check if char can start an identifier."""
    return char == "_" or char.isalpha()


def is_ident_char(char: str) -> bool:
    """Check if char can continue an identifier.

    The empty string (end of input) is never an identifier character.
    """
    return char == "_" or char.isalnum()
