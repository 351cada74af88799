"""Tests for ContextVar-based lexer configuration."""

import threading

import pytest

from ctxlex import Lexer, tokenize
from ctxlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from ctxlex.tokens import TokenType


class TestLexConfig:
    """Test LexConfig dataclass."""

    def test_defaults(self) -> None:
        config = LexConfig()
        assert config.legacy_print_enabled is True
        assert config.keep_trivia is False
        assert config.strict is False

    def test_frozen(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"keep_trivia": True, "tab_size": 4})
        assert config.keep_trivia is True
        assert config == LexConfig(keep_trivia=True)


class TestConfigContext:
    """Test get/set/reset and the context manager."""

    def setup_method(self) -> None:
        reset_lex_config()

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        set_lex_config(LexConfig(strict=True))
        assert get_lex_config().strict is True
        reset_lex_config()
        assert get_lex_config().strict is False

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=True)):
            assert get_lex_config().keep_trivia is True
        assert get_lex_config().keep_trivia is False

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError), lex_config_context(LexConfig(strict=True)):
            raise RuntimeError("boom")
        assert get_lex_config().strict is False

    def test_nested_contexts(self) -> None:
        with lex_config_context(LexConfig(strict=True)):
            with lex_config_context(LexConfig(keep_trivia=True)):
                assert get_lex_config() == LexConfig(keep_trivia=True)
            assert get_lex_config() == LexConfig(strict=True)

    def test_threads_see_default(self) -> None:
        seen: list[LexConfig] = []
        set_lex_config(LexConfig(strict=True))

        thread = threading.Thread(target=lambda: seen.append(get_lex_config()))
        thread.start()
        thread.join()

        assert seen == [LexConfig()]
        assert get_lex_config().strict is True


class TestConfigEffect:
    """The active config reaches the lexer."""

    def setup_method(self) -> None:
        reset_lex_config()

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_active_config_used_by_tokenize(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=True)):
            types = [t.type for t in tokenize("a b")]
        assert TokenType.SPACE in types

    def test_lexer_reads_config_at_construction(self) -> None:
        with lex_config_context(LexConfig(legacy_print_enabled=False)):
            lexer = Lexer("print x\n")
        assert lexer.can_shift(TokenType.PRINT_KEYWORD) is False

    def test_explicit_config_wins(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=True)):
            types = [t.type for t in tokenize("a b", config=LexConfig())]
        assert TokenType.SPACE not in types
