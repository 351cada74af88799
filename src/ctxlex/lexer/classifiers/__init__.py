"""Layout and keyword classifiers for the ctxlex lexer.

Each classifier is a mixin that decides, at one position, whether a
context-dependent layout or keyword token starts there. Classifiers only
read the current context; they never change it.
"""

from ctxlex.lexer.classifiers.indentation import (
    IndentationClassifierMixin,
)
from ctxlex.lexer.classifiers.keyword import (
    KeywordClassifierMixin,
)
from ctxlex.lexer.classifiers.newline import (
    NewlineClassifierMixin,
)

__all__ = [
    "IndentationClassifierMixin",
    "KeywordClassifierMixin",
    "NewlineClassifierMixin",
]
