"""Tests for line-break classification and blank lines."""

from hypothesis import given, settings
from hypothesis import strategies as st

from ctxlex import LexConfig, tokenize
from ctxlex.context import ROOT_CONTEXT, ContextFlags
from ctxlex.input import AcceptedToken, InputStream
from ctxlex.lexer.classifiers import NewlineClassifierMixin
from ctxlex.tokens import TokenType

T = TokenType


class _Host(NewlineClassifierMixin):
    def __init__(self, flags: ContextFlags = ContextFlags(0), blank_ok: bool = True) -> None:
        self.context = ROOT_CONTEXT.push(flags=flags)
        self.blank_ok = blank_ok

    def can_shift(self, token_type: TokenType) -> bool:
        if token_type is T.BLANK_LINE_START:
            return self.blank_ok
        return True


def classify(text: str, pos: int, **host: object) -> AcceptedToken | None:
    input = InputStream(text)
    input.reset(pos)
    _Host(**host)._classify_newline(input)  # type: ignore[arg-type]
    return input.accepted


def types(source: str, **config: bool) -> list[TokenType]:
    return [t.type for t in tokenize(source, config=LexConfig(**config))]


class TestClassifier:
    """Priority order of the newline classifier."""

    def test_end_of_input(self) -> None:
        assert classify("x", 1) == (T.EOF, 1, 0)
        assert classify("", 0) == (T.EOF, 0, 0)

    def test_bracketed_line_break(self) -> None:
        assert classify("(\n", 1, flags=ContextFlags.BRACKETED) == (T.NEWLINE_BRACKETED, 2, 0)

    def test_bracketed_crlf(self) -> None:
        assert classify("(\r\n", 1, flags=ContextFlags.BRACKETED) == (T.NEWLINE_BRACKETED, 3, 0)

    def test_bracketed_declines_other_characters(self) -> None:
        assert classify("(x", 1, flags=ContextFlags.BRACKETED) is None

    def test_statement_newline(self) -> None:
        assert classify("x\ny", 1) == (T.NEWLINE, 2, 0)

    def test_crlf_is_one_newline(self) -> None:
        assert classify("x\r\ny", 1) == (T.NEWLINE, 3, 0)

    def test_empty_line_is_blank(self) -> None:
        assert classify("x\n\ny", 2) == (T.BLANK_LINE_START, 2, 0)

    def test_whitespace_line_reclaims_whitespace(self) -> None:
        assert classify("x\n  \t\ny", 2) == (T.BLANK_LINE_START, 2, 3)

    def test_comment_line_is_blank(self) -> None:
        assert classify("x\n    # note\ny", 2) == (T.BLANK_LINE_START, 2, 4)

    def test_first_line_can_be_blank(self) -> None:
        assert classify("\nx", 0) == (T.BLANK_LINE_START, 0, 0)

    def test_code_line_is_declined(self) -> None:
        assert classify("x\n  y", 2) is None

    def test_line_start_without_blank_line_allowed(self) -> None:
        assert classify("x\n\ny", 2, blank_ok=False) == (T.NEWLINE, 3, 0)

    def test_mid_line_is_declined(self) -> None:
        assert classify("x y", 1) is None


class TestStatementNewlines:
    def test_newlines_separate_statements(self) -> None:
        assert types("a\nb\n") == [T.NAME, T.NEWLINE, T.NAME, T.NEWLINE, T.EOF]

    def test_bracketed_newlines(self) -> None:
        assert types("(a,\nb)\n") == [
            T.PAREN_L,
            T.NAME,
            T.OPERATOR,
            T.NEWLINE_BRACKETED,
            T.NAME,
            T.PAREN_R,
            T.NEWLINE,
            T.EOF,
        ]

    def test_crlf_values(self) -> None:
        tokens = tokenize("a\r\nb\r\n")
        assert [(t.type, t.value) for t in tokens] == [
            (T.NAME, "a"),
            (T.NEWLINE, "\r\n"),
            (T.NAME, "b"),
            (T.NEWLINE, "\r\n"),
            (T.EOF, ""),
        ]

    def test_eof_is_zero_width_at_end(self) -> None:
        source = "a\n"
        eof = tokenize(source)[-1]
        assert eof.type is T.EOF
        assert eof.start == eof.end == len(source)
        assert eof.value == ""

    def test_line_continuation_is_not_a_newline(self) -> None:
        assert types("a = \\\n    1\n") == [
            T.NAME,
            T.OPERATOR,
            T.NUMBER,
            T.NEWLINE,
            T.EOF,
        ]


class TestBlankLines:
    def test_empty_line(self) -> None:
        assert types("a\n\nb\n") == [
            T.NAME,
            T.NEWLINE,
            T.BLANK_LINE_START,
            T.NEWLINE,
            T.NAME,
            T.NEWLINE,
            T.EOF,
        ]

    def test_whitespace_line_with_trivia(self) -> None:
        tokens = tokenize("a\n   \nb\n", config=LexConfig(keep_trivia=True))
        assert [(t.type, t.value) for t in tokens] == [
            (T.NAME, "a"),
            (T.NEWLINE, "\n"),
            (T.BLANK_LINE_START, ""),
            (T.SPACE, "   "),
            (T.NEWLINE, "\n"),
            (T.NAME, "b"),
            (T.NEWLINE, "\n"),
            (T.EOF, ""),
        ]
        assert tokens[2].reclaimed == 3

    def test_comment_line_with_trivia(self) -> None:
        assert types("a\n  # note\nb\n", keep_trivia=True) == [
            T.NAME,
            T.NEWLINE,
            T.BLANK_LINE_START,
            T.SPACE,
            T.COMMENT,
            T.NEWLINE,
            T.NAME,
            T.NEWLINE,
            T.EOF,
        ]

    def test_blank_lines_inside_block_do_not_dedent(self) -> None:
        assert types("if x:\n    a\n\n  # c\n    b\n") == [
            T.NAME,
            T.NAME,
            T.OPERATOR,
            T.NEWLINE,
            T.INDENT,
            T.NAME,
            T.NEWLINE,
            T.BLANK_LINE_START,
            T.NEWLINE,
            T.BLANK_LINE_START,
            T.NEWLINE,
            T.NAME,
            T.NEWLINE,
            T.DEDENT,
            T.EOF,
        ]

    def test_consecutive_blank_lines(self) -> None:
        assert types("\n\n\n") == [
            T.BLANK_LINE_START,
            T.NEWLINE,
            T.BLANK_LINE_START,
            T.NEWLINE,
            T.BLANK_LINE_START,
            T.NEWLINE,
            T.EOF,
        ]

    @given(
        space=st.text(alphabet=" \t", max_size=12),
        rest=st.sampled_from(["\n", "# c\n", "#\n"]),
    )
    @settings(max_examples=100)
    def test_blank_line_never_changes_indentation(self, space: str, rest: str) -> None:
        """A blank or comment-only line yields BLANK_LINE_START, never INDENT/DEDENT."""
        tokens = tokenize(f"a\n{space}{rest}b\n")
        token_types = [t.type for t in tokens]
        assert T.INDENT not in token_types
        assert T.DEDENT not in token_types
        blank = tokens[2]
        assert blank.type is T.BLANK_LINE_START
        assert blank.start == blank.end == 2
        assert blank.reclaimed == len(space)
