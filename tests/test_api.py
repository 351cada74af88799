"""Tests for the package-level API."""

import ctxlex
from ctxlex import SourceLocation, Token, TokenType, tokenize


class TestPublicApi:
    def test_all_exports_resolve(self) -> None:
        for name in ctxlex.__all__:
            assert hasattr(ctxlex, name), name

    def test_version(self) -> None:
        assert isinstance(ctxlex.__version__, str)

    def test_tokenize_returns_list(self) -> None:
        tokens = tokenize("x\n")
        assert isinstance(tokens, list)
        assert [t.type for t in tokens] == [TokenType.NAME, TokenType.NEWLINE, TokenType.EOF]

    def test_empty_source(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.EOF

    def test_source_file_on_tokens(self) -> None:
        tokens = tokenize("x", source_file="mod.py")
        assert all(t.source_file == "mod.py" for t in tokens)


class TestToken:
    def test_repr(self) -> None:
        token = Token(TokenType.NAME, "x", 0, 1)
        assert repr(token) == "Token(NAME, 'x', 1:1)"

    def test_repr_truncates_long_values(self) -> None:
        token = Token(TokenType.STRING_CONTENT, "a" * 40, 0, 40)
        assert "..." in repr(token)

    def test_width(self) -> None:
        assert Token(TokenType.INDENT, "    ", 2, 6).width == 4
        assert Token(TokenType.DEDENT, "", 2, 2, reclaimed=4).width == 0

    def test_equality_ignores_location_cache(self) -> None:
        a = Token(TokenType.NAME, "x", 0, 1)
        b = Token(TokenType.NAME, "x", 0, 1)
        _ = a.location
        assert a == b


class TestSourceLocation:
    def test_str(self) -> None:
        assert str(SourceLocation(lineno=3, col_offset=5)) == "3:5"
        assert str(SourceLocation(lineno=3, col_offset=5, source_file="m.py")) == "m.py:3:5"

    def test_span_to(self) -> None:
        start = SourceLocation(1, 1, offset=0, end_offset=2)
        end = SourceLocation(2, 4, offset=10, end_offset=12)
        span = start.span_to(end)
        assert (span.lineno, span.col_offset) == (1, 1)
        assert (span.offset, span.end_offset) == (0, 12)
