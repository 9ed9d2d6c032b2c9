"""Property-based tests for tokenizer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from plexer import Lexer, LexerConfig, LexerError, RuleSetBuilder, Token, regex, tokenize

ARITH_ALPHABET = "abcxyz_0123456789+-*/= \n()#"


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(st.text(alphabet=ARITH_ALPHABET, max_size=100))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, arith_lexer: Lexer, source: str) -> None:
        first = list(arith_lexer.tokenize(source))
        second = list(arith_lexer.tokenize(source))
        assert first == second


class TestForwardProgress:
    """The cursor strictly increases and the scan always terminates."""

    @given(st.text(max_size=100))
    @settings(max_examples=100)
    def test_cursor_strictly_increases(self, arith_lexer: Lexer, source: str) -> None:
        lex = arith_lexer.tokenize(source)
        previous = lex.cursor
        for _ in lex:
            assert lex.cursor > previous
            previous = lex.cursor
        assert lex.cursor == len(source)

    @given(st.text(max_size=100))
    @settings(max_examples=100)
    def test_item_count_bounded_by_length(self, arith_lexer: Lexer, source: str) -> None:
        assert len(list(arith_lexer.tokenize(source))) <= len(source)


class TestContentPreservation:
    """No input is silently dropped."""

    @given(st.text(alphabet=ARITH_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_tokens_and_errors_rebuild_source(self, text_lexer: Lexer, source: str) -> None:
        pieces = [
            item.char if isinstance(item, LexerError) else item.value
            for item in text_lexer.tokenize(source)
        ]
        assert "".join(pieces) == source

    @given(st.text(alphabet=ARITH_ALPHABET, max_size=100), st.integers(1, 8))
    @settings(max_examples=50)
    def test_small_window_preserves_content(self, source: str, window: int) -> None:
        rules = RuleSetBuilder().rule("WORD", regex(r"[a-z_]+")).rule("DIGITS", str.isdigit).build()
        lexer = Lexer(rules, LexerConfig(max_window=window))
        pieces = []
        for item in lexer.tokenize(source):
            if isinstance(item, LexerError):
                pieces.append(item.char)
            else:
                assert len(item.value) <= window
                pieces.append(item.value)
        assert "".join(pieces) == source


class TestErrorRecovery:
    """One malformed character yields exactly one error at its offset."""

    @given(
        st.from_regex(r"[a-z]{1,10}( [0-9]{1,5})?", fullmatch=True),
        st.from_regex(r"[0-9]{1,5}( [a-z]{1,10})?", fullmatch=True),
    )
    @settings(max_examples=50)
    def test_single_bad_character(self, arith_lexer: Lexer, left: str, right: str) -> None:
        source = f"{left} # {right}"
        items = list(arith_lexer.tokenize(source))
        errors = [item for item in items if isinstance(item, LexerError)]
        assert errors == [LexerError(source, len(left) + 1)]

        clean = [item for item in items if not isinstance(item, LexerError)]
        expected = list(arith_lexer.tokenize(f"{left}  {right}"))
        assert clean == expected


class TestLongestMatchProperty:
    """The winning token comes from the longest, then earliest, rule."""

    @given(st.integers(1, 6), st.integers(1, 6))
    @settings(max_examples=50)
    def test_longest_literal_wins(self, short: int, long: int) -> None:
        rules = RuleSetBuilder().rule("FIRST", "a" * short).rule("SECOND", "a" * long).build()
        (token, *_) = tokenize(rules, "a" * max(short, long))
        if long > short:
            assert token == Token("SECOND", "a" * long)
        else:
            assert token == Token("FIRST", "a" * short)
