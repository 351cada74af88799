"""Reference host driver for the contextual tokenizers.

The tokenizers are written against a small protocol (an input cursor plus
a ParseStack exposing the current context and a shift-validity check) so
that an LR parser can embed them. This module supplies a host that needs no
grammar: it consults the tokenizers in a fixed order, filters their results
through a minimal validity predicate, and drives the ContextTracker.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; contexts and tokens are immutable.

"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Iterator

from ctxlex.config import LexConfig, get_lex_config
from ctxlex.context import Context, ContextTracker
from ctxlex.errors import LexError
from ctxlex.input import AcceptedToken, InputStream
from ctxlex.lexer.classifiers import (
    IndentationClassifierMixin,
    KeywordClassifierMixin,
    NewlineClassifierMixin,
)
from ctxlex.lexer.scanners import CodeScannerMixin, StringScannerMixin
from ctxlex.nodes import NodeType
from ctxlex.tokens import TRIVIA_TYPES, Token, TokenType
from ctxlex.utils.logger import get_logger

logger = get_logger(__name__)

_TRACKER = ContextTracker()

# Last significant token types after which a new line may change indentation
_LINE_START_TYPES: frozenset[TokenType | None] = frozenset(
    {None, TokenType.NEWLINE, TokenType.DEDENT}
)

# Tokens after which a new statement may begin
_STATEMENT_START_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.NEWLINE, TokenType.INDENT, TokenType.DEDENT}
)

# Tokens that neither start nor continue a statement
_LAYOUT_TYPES: frozenset[TokenType] = TRIVIA_TYPES | {
    TokenType.BLANK_LINE_START,
    TokenType.NEWLINE_BRACKETED,
}

Tokenizer = Callable[[InputStream], None]


class Lexer(
    # Classifiers (layout and keyword decisions)
    IndentationClassifierMixin,
    NewlineClassifierMixin,
    KeywordClassifierMixin,
    # Scanners (string bodies and context-free host tokens)
    StringScannerMixin,
    CodeScannerMixin,
):
    """Contextual lexer driver.

    Usage:
            >>> lexer = Lexer("if x:\\n    print y\\n")
            >>> [t.type.name for t in lexer.tokenize()]
            ['NAME', 'NAME', 'OPERATOR', 'NEWLINE', 'INDENT', 'PRINT_KEYWORD',
             'NAME', 'NEWLINE', 'DEDENT', 'EOF']

    At each position the driver asks, in order:

    - inside a string: the string body scanner, then the newline
      classifier (which only has something to say at end of input);
    - elsewhere: indentation, newline, legacy print, then the host code
      scanner.

    A tokenizer that declines has its lookahead discarded. A tokenizer whose
    token the grammar could not shift here is skipped the same way.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_input",
        "_pos",
        "_context",
        "_line_starts",
        "_last_type",  # Last significant token type
        "_statement_start",
        "_in_blank_line",
        "_string_tokenizers",
        "_code_tokenizers",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text
            source_file: Optional source file path for locations and errors
            config: Lexer configuration; defaults to the active LexConfig
        """
        self._source = source
        self._source_file = source_file
        self._config = config if config is not None else get_lex_config()
        self._input = InputStream(source)
        self._pos = 0
        self._context: Context = _TRACKER.start

        # A line starts after "\n", and after a "\r" not followed by "\n"
        self._line_starts = [0]
        for idx, char in enumerate(source):
            if char == "\n" or (char == "\r" and source[idx + 1 : idx + 2] != "\n"):
                self._line_starts.append(idx + 1)

        self._last_type: TokenType | None = None
        self._statement_start = True
        self._in_blank_line = False

        self._string_tokenizers: tuple[Tokenizer, ...] = (
            self._scan_string_body,
            self._classify_newline,
        )
        self._code_tokenizers: tuple[Tokenizer, ...] = (
            self._classify_indentation,
            self._classify_newline,
            self._classify_legacy_print,
            self._scan_code,
        )

    # =========================================================================
    # ParseStack protocol
    # =========================================================================

    @property
    def context(self) -> Context:
        """The current context frame."""
        return self._context

    def can_shift(self, token_type: TokenType) -> bool:
        """Minimal stand-in for the grammar's "is this token valid here".

        - BLANK_LINE_START: not while already inside a blank line
        - INDENT/DEDENT: only at the start of a logical line
        - PRINT_KEYWORD: only where a statement can start, and only when
          legacy print is enabled
        """
        if token_type is TokenType.BLANK_LINE_START:
            return not self._in_blank_line
        if token_type is TokenType.INDENT or token_type is TokenType.DEDENT:
            return self._last_type in _LINE_START_TYPES
        if token_type is TokenType.PRINT_KEYWORD:
            return self._config.legacy_print_enabled and self._statement_start
        return True

    # =========================================================================
    # Tokenization
    # =========================================================================

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF.
            Whitespace and comments are included only with keep_trivia.

        Raises:
            LexError: In strict mode, on a character no tokenizer accepts.
        """
        keep_trivia = self._config.keep_trivia
        while True:
            token = self._next_token()
            self._apply(token)
            if keep_trivia or token.type not in TRIVIA_TYPES:
                yield token
            if token.type is TokenType.EOF:
                return

    def _next_token(self) -> Token:
        """Ask each applicable tokenizer in turn for the token at _pos."""
        input = self._input
        tokenizers = (
            self._string_tokenizers if self._context.is_string else self._code_tokenizers
        )
        for tokenizer in tokenizers:
            input.reset(self._pos)
            tokenizer(input)
            accepted = input.accepted
            if accepted is not None and self.can_shift(accepted.type):
                return self._make_token(accepted)

        # Every position is covered by the code scanner or the EOF rule
        lineno, col = self._line_col(self._pos)
        raise LexError("no tokenizer accepted input", lineno, col, self._source_file)

    def _make_token(self, accepted: AcceptedToken) -> Token:
        start = self._pos
        lineno, col = self._line_col(start)
        token = Token(
            type=accepted.type,
            value=self._source[start : accepted.end],
            start=start,
            end=accepted.end,
            lineno=lineno,
            col=col,
            reclaimed=accepted.reclaimed,
            source_file=self._source_file,
        )
        if token.type is TokenType.ERROR:
            if self._config.strict:
                raise LexError(
                    f"unexpected character {token.value!r}", lineno, col, self._source_file
                )
            logger.debug("Unrecognized character %r at %d:%d", token.value, lineno, col)
        self._pos = accepted.end
        return token

    def _line_col(self, offset: int) -> tuple[int, int]:
        lineno = bisect_right(self._line_starts, offset)
        return lineno, offset - self._line_starts[lineno - 1] + 1

    # =========================================================================
    # Parse-state bookkeeping
    # =========================================================================

    def _apply(self, token: Token) -> None:
        """Shift ``token`` into the context stack and run any reduction."""
        context = _TRACKER.shift(self._context, token, self._input)
        node = self._completed_node(token, context)
        if node is not None:
            context = _TRACKER.reduce(context, node)
        self._context = context
        self._update_statement_state(token)

    def _completed_node(self, token: Token, context: Context) -> NodeType | None:
        """Grammar node that ``token`` completes, as far as the stack cares."""
        token_type = token.type
        if token_type is TokenType.STRING_END:
            if context.has_interpolation:
                return NodeType.FORMAT_STRING
            return NodeType.STRING
        if token_type is TokenType.PAREN_R:
            return NodeType.PARENTHESIZED_EXPRESSION
        if token_type is TokenType.BRACKET_R:
            return NodeType.ARRAY_EXPRESSION
        if token_type is TokenType.BRACE_R:
            parent = context.parent
            if parent is not None and parent.is_string:
                return NodeType.FORMAT_REPLACEMENT
            return NodeType.DICTIONARY_EXPRESSION
        return None

    def _update_statement_state(self, token: Token) -> None:
        token_type = token.type
        if token_type is TokenType.BLANK_LINE_START:
            self._in_blank_line = True
            return
        if token_type is TokenType.NEWLINE or token_type is TokenType.EOF:
            self._in_blank_line = False
        if token_type in _LAYOUT_TYPES:
            return

        self._last_type = token_type
        if token_type in _STATEMENT_START_TYPES:
            self._statement_start = True
        elif token_type is TokenType.OPERATOR and (
            token.value == ";" or (token.value == ":" and not self._context.flags)
        ):
            self._statement_start = True
        else:
            self._statement_start = False
