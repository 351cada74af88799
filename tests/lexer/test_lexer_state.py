"""Tests for the driver's context stack and locations."""

import pytest

from ctxlex import LexConfig, LexError, Lexer, tokenize
from ctxlex.context import ROOT_CONTEXT
from ctxlex.protocols import ParseStack
from ctxlex.tokens import TokenType

T = TokenType


def run(source: str) -> Lexer:
    lexer = Lexer(source)
    list(lexer.tokenize())
    return lexer


class TestContextStack:
    """Frames pushed while lexing are popped by the matching close."""

    def test_balanced_source_returns_to_root(self) -> None:
        source = (
            "def f(a, b):\n"
            "    if a:\n"
            "        return {a: [b, (1, 2)]}\n"
            "    s = f'{a!r:>{b}}' + r'\\d' + '''x\n"
            "y'''\n"
            "    print s\n"
        )
        assert run(source).context is ROOT_CONTEXT

    def test_unclosed_bracket_stays_bracketed(self) -> None:
        lexer = run("(a, [b\n")
        assert lexer.context.is_bracketed
        assert lexer.context.depth == 2

    def test_stray_closer_keeps_root(self) -> None:
        lexer = run(")]}\n")
        assert lexer.context is ROOT_CONTEXT

    def test_closer_inside_block_does_not_pop_indent(self) -> None:
        lexer = Lexer("if x:\n    )\n")
        for token in lexer.tokenize():
            if token.type is T.PAREN_R:
                assert lexer.context.indent == 4
        assert lexer.context is ROOT_CONTEXT

    def test_context_during_replacement_field(self) -> None:
        lexer = Lexer("f'{x}'")
        seen = []
        for token in lexer.tokenize():
            seen.append((token.type, lexer.context.is_string, lexer.context.is_bracketed))
        assert seen == [
            (T.STRING_START_F, True, False),
            (T.REPLACEMENT_START, False, True),
            (T.NAME, False, True),
            (T.BRACE_R, True, False),
            (T.STRING_END, False, False),
            (T.EOF, False, False),
        ]

    def test_lexer_is_a_parse_stack(self) -> None:
        stack: ParseStack = Lexer("")
        assert stack.context is ROOT_CONTEXT
        assert stack.can_shift(T.NAME)


class TestLocations:
    def test_line_and_column(self) -> None:
        tokens = tokenize("a\n  bb = 1\n")
        bb = tokens[3]
        assert bb.value == "bb"
        assert (bb.lineno, bb.col) == (2, 3)
        assert (bb.start, bb.end) == (4, 6)

    def test_location_is_cached(self) -> None:
        token = tokenize("x", source_file="m.py")[0]
        loc = token.location
        assert str(loc) == "m.py:1:1"
        assert (loc.offset, loc.end_offset) == (0, 1)
        assert token.location is loc

    def test_crlf_columns(self) -> None:
        tokens = tokenize("a\r\nbc\r\n")
        assert (tokens[2].lineno, tokens[2].col) == (2, 1)

    def test_bare_carriage_return_starts_a_line(self) -> None:
        names = [t for t in tokenize("a\rb\rc") if t.type is T.NAME]
        assert [(t.value, t.lineno, t.col) for t in names] == [
            ("a", 1, 1),
            ("b", 2, 1),
            ("c", 3, 1),
        ]

    def test_mixed_line_endings(self) -> None:
        names = [t for t in tokenize("a\r\nb\rc\nd") if t.type is T.NAME]
        assert [(t.value, t.lineno, t.col) for t in names] == [
            ("a", 1, 1),
            ("b", 2, 1),
            ("c", 3, 1),
            ("d", 4, 1),
        ]

    def test_error_location_after_carriage_return(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("x = 1\ry = $\r", config=LexConfig(strict=True))
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (2, 5)
