"""Contextual lexer for an indentation-sensitive, string-interpolating grammar.

The tokens produced here depend on structural context a finite lexer cannot
see: bracket nesting, the active string quoting mode and the indentation
column. That context lives on a persistent stack (ctxlex.context) which the
tokenizers read and the driver updates after every token.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer driver (mixin composition + parse-state bookkeeping)
├── classifiers/         # Layout and keyword decisions
│   ├── indentation.py   # INDENT / DEDENT
│   ├── newline.py       # NEWLINE / NEWLINE_BRACKETED / BLANK_LINE_START / EOF
│   └── keyword.py       # Legacy print statement keyword
└── scanners/
    ├── string.py        # String bodies: content, escapes, interpolation, end
    └── code.py          # Names, numbers, operators, brackets, string starts

Usage:
    >>> from ctxlex.lexer import Lexer
    >>> for token in Lexer("x = (1,\\n 2)\\n").tokenize():
    ...     print(token)
    Token(NAME, 'x', 1:1)
    Token(OPERATOR, '=', 1:3)
    Token(PAREN_L, '(', 1:5)
    Token(NUMBER, '1', 1:6)
    Token(OPERATOR, ',', 1:7)
    Token(NEWLINE_BRACKETED, '\\n', 1:8)
    Token(NUMBER, '2', 2:2)
    Token(PAREN_R, ')', 2:3)
    Token(NEWLINE, '\\n', 2:4)
    Token(EOF, '', 3:1)

"""

from ctxlex.lexer.core import Lexer

__all__ = ["Lexer"]
