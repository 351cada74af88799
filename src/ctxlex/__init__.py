"""
ctxlex: contextual lexer for indentation-sensitive, interpolating grammars

Produces the tokens a grammar needs but a finite lexer cannot: statement
newlines versus bracketed ones, blank-line markers, INDENT/DEDENT, string
bodies split into content, escapes and interpolation fields, and the legacy
``print`` statement keyword. Zero runtime dependencies.

Quick Start:
    >>> from ctxlex import tokenize
    >>> [t.type.name for t in tokenize("if x:\\n    print y\\n")]
    ['NAME', 'NAME', 'OPERATOR', 'NEWLINE', 'INDENT', 'PRINT_KEYWORD',
     'NAME', 'NEWLINE', 'DEDENT', 'EOF']

Embedding the tokenizers in another parser:
    The tokenizer mixins in ctxlex.lexer read an InputStream and a
    ParseStack (``context`` and ``can_shift``); ContextTracker supplies the
    shift/reduce rules that keep the context stack current.
"""

from ctxlex.cache import DictTokenCache, TokenCache, hash_config, hash_content
from ctxlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from ctxlex.context import (
    ROOT_CONTEXT,
    Context,
    ContextFlags,
    ContextTracker,
    count_indent,
)
from ctxlex.errors import CtxlexError, LexError
from ctxlex.input import InputStream
from ctxlex.lexer import Lexer
from ctxlex.location import SourceLocation
from ctxlex.nodes import NodeType
from ctxlex.protocols import ParseStack
from ctxlex.tokens import Token, TokenType
from ctxlex.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
    cache: TokenCache | None = None,
) -> list[Token]:
    """Tokenize source text into a list of tokens.

    Args:
        source: Source text
        source_file: Optional source file path for locations and errors
        config: Lexer configuration; defaults to the active LexConfig
        cache: Optional content-addressed token cache. When provided, checks
            cache before lexing; on miss, lexes and stores the result.

    Returns:
        Tokens ending with EOF

    Raises:
        LexError: In strict mode, on a character no tokenizer accepts.

    Example:
        >>> tokens = tokenize("print 'hi'\\n")
        >>> [t.type.name for t in tokens]
        ['PRINT_KEYWORD', 'STRING_START', 'STRING_CONTENT', 'STRING_END',
         'NEWLINE', 'EOF']
    """
    if config is None:
        config = get_lex_config()

    if cache is not None:
        content_hash = hash_content(source, source_file)
        config_hash = hash_config(config)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            logger.debug("Token cache hit for %s", source_file or "<string>")
            return list(cached)

    tokens = list(Lexer(source, source_file=source_file, config=config).tokenize())

    if cache is not None:
        cache.put(content_hash, config_hash, tuple(tokens))

    return tokens


__all__ = [
    "ROOT_CONTEXT",
    "Context",
    "ContextFlags",
    "ContextTracker",
    "CtxlexError",
    "DictTokenCache",
    "InputStream",
    "LexConfig",
    "LexError",
    "Lexer",
    "NodeType",
    "ParseStack",
    "SourceLocation",
    "Token",
    "TokenCache",
    "TokenType",
    "count_indent",
    "get_lex_config",
    "hash_config",
    "hash_content",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
