"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior, and how Lexer
captures the active config.
"""

from threading import Thread

import pytest

from plexer import (
    ConfigError,
    Lexer,
    LexerConfig,
    RuleSetBuilder,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from plexer.config import DEFAULT_MAX_WINDOW


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_lexer_config()


class TestLexerConfigDataclass:
    """Test LexerConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        assert LexerConfig().max_window == DEFAULT_MAX_WINDOW == 1024

    def test_immutability(self) -> None:
        config = LexerConfig()
        with pytest.raises(AttributeError):
            config.max_window = 5  # type: ignore[misc]

    @pytest.mark.parametrize("bad", [0, -1, "10", 1.5, None, True, False])
    def test_invalid_window(self, bad: object) -> None:
        with pytest.raises(ConfigError):
            LexerConfig(max_window=bad)  # type: ignore[arg-type]


class TestFromDict:
    """LexerConfig.from_dict filters unknown keys."""

    def test_known_keys(self) -> None:
        assert LexerConfig.from_dict({"max_window": 64}).max_window == 64

    def test_unknown_keys_ignored(self) -> None:
        config = LexerConfig.from_dict({"max_window": 8, "verbose": True})
        assert config == LexerConfig(max_window=8)

    def test_empty_dict(self) -> None:
        assert LexerConfig.from_dict({}) == LexerConfig()

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigError):
            LexerConfig.from_dict({"max_window": 0})


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default(self) -> None:
        assert get_lexer_config() == LexerConfig()

    def test_set_and_reset(self) -> None:
        set_lexer_config(LexerConfig(max_window=5))
        assert get_lexer_config().max_window == 5
        reset_lexer_config()
        assert get_lexer_config().max_window == DEFAULT_MAX_WINDOW

    def test_context_manager_restores(self) -> None:
        with lexer_config_context(LexerConfig(max_window=3)):
            assert get_lexer_config().max_window == 3
        assert get_lexer_config().max_window == DEFAULT_MAX_WINDOW

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lexer_config_context(LexerConfig(max_window=3)):
                raise RuntimeError("boom")
        assert get_lexer_config().max_window == DEFAULT_MAX_WINDOW

    def test_nested_contexts(self) -> None:
        with lexer_config_context(LexerConfig(max_window=3)):
            with lexer_config_context(LexerConfig(max_window=7)):
                assert get_lexer_config().max_window == 7
            assert get_lexer_config().max_window == 3

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config; the caller's is untouched."""
        set_lexer_config(LexerConfig(max_window=9))
        results: dict[int, int] = {}

        def worker(thread_id: int, window: int) -> None:
            set_lexer_config(LexerConfig(max_window=window))
            results[thread_id] = get_lexer_config().max_window

        threads = [Thread(target=worker, args=(i, 10 + i)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == {0: 10, 1: 11, 2: 12, 3: 13}
        assert get_lexer_config().max_window == 9


class TestLexerCapture:
    """Lexer reads the config once, at construction."""

    def test_explicit_config_wins(self) -> None:
        rules = RuleSetBuilder().rule("A", "a").build()
        with lexer_config_context(LexerConfig(max_window=3)):
            lexer = Lexer(rules, LexerConfig(max_window=11))
        assert lexer.config.max_window == 11

    def test_later_changes_not_seen(self) -> None:
        rules = RuleSetBuilder().rule("A", "a").build()
        lexer = Lexer(rules)
        set_lexer_config(LexerConfig(max_window=2))
        assert lexer.config.max_window == DEFAULT_MAX_WINDOW
