"""Longest-match lexer driven by an ordered rule set.

At each cursor position every rule's pattern is anchored at the cursor and
the longest match wins; among equally long matches the earliest-declared
rule wins. A position no rule matches yields a LexerError and the cursor
skips that one character, so scanning always runs to the end of the input.

Guarantees:
- Items are produced left to right, one per step.
- The cursor advances by at least one character per step, so a haystack
  of length n produces at most n items.
- Patterns only ever see a window of LexerConfig.max_window characters
  starting at the cursor.

Thread Safety:
Lexer instances are immutable and reusable. Tokenizer instances are
single-use iterators; create one per source string.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from plexer.config import LexerConfig, get_lexer_config
from plexer.errors import BuilderError, LexerError
from plexer.rules import Rule, RuleSet
from plexer.utils.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Tokenizer(Generic[T]):
    """Lazy iterator over the tokens and errors of one haystack.

    Yields built tokens, or LexerError for each unmatched character. Ends
    when the cursor reaches the end of the haystack. Not restartable: call
    Lexer.tokenize() again to rescan.

    Usage:
        >>> for item in lexer.tokenize("x = 1"):
        ...     print(item)

    """

    __slots__ = (
        "_rules",
        "_haystack",
        "_haystack_len",  # Cached len(haystack)
        "_cursor",
        "_max_window",
    )

    def __init__(self, rules: tuple[Rule[T], ...], haystack: str, max_window: int) -> None:
        self._rules = rules
        self._haystack = haystack
        self._haystack_len = len(haystack)
        self._cursor = 0
        self._max_window = max_window

    @property
    def haystack(self) -> str:
        """The string being tokenized."""
        return self._haystack

    @property
    def cursor(self) -> int:
        """Offset of the next character to scan."""
        return self._cursor

    def __iter__(self) -> Tokenizer[T]:
        return self

    def __next__(self) -> T | LexerError:
        if self._cursor >= self._haystack_len:
            raise StopIteration
        return self._step()

    def _step(self) -> T | LexerError:
        """Scan one token or one unexpected character at the cursor.

        Complexity: O(rules * cost of find_prefix_in on the window)
        """
        cursor = self._cursor
        window = self._haystack[cursor : cursor + self._max_window]

        token: T | None = None
        best_len = 0
        for rule in self._rules:
            mat = rule.pattern.find_prefix_in(window)
            # Strict comparison: earlier rules win ties
            if mat is not None and len(mat) > best_len:
                best_len = len(mat)
                token = self._build(rule, mat.text)

        if best_len == 0:
            self._cursor = cursor + 1
            logger.debug("Unexpected character %r at index %d", self._haystack[cursor], cursor)
            return LexerError(self._haystack, cursor)

        self._cursor = cursor + best_len
        return token  # type: ignore[return-value]

    @staticmethod
    def _build(rule: Rule[T], text: str) -> T:
        try:
            return rule.build(text)
        except Exception as exc:
            raise BuilderError(rule.name, text) from exc


class Lexer(Generic[T]):
    """Reusable lexer for one rule set.

    Usage:
        >>> digits = lambda s: s.isascii() and s.isdigit()
        >>> rules = RuleSetBuilder().rule("NUMBER", digits, int).build()
        >>> list(Lexer(rules).tokenize("12a"))
        [12, LexerError(cursor=2, char='a')]

    Thread Safety:
        Immutable after creation; each tokenize() call owns its own cursor.

    """

    __slots__ = ("_rules", "_config")

    def __init__(
        self,
        rules: RuleSet[T] | Iterable[Rule[T]],
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer.

        Args:
            rules: Rules in priority order
            config: Lexer configuration; defaults to the config active in the
                current context (see plexer.config)
        """
        self._rules: RuleSet[T] = rules if isinstance(rules, RuleSet) else RuleSet(rules)
        self._config = config if config is not None else get_lexer_config()

    @property
    def rules(self) -> RuleSet[T]:
        return self._rules

    @property
    def config(self) -> LexerConfig:
        return self._config

    def tokenize(self, haystack: str) -> Tokenizer[T]:
        """Start tokenizing haystack.

        Returns:
            Fresh Tokenizer positioned at index 0

        Complexity: O(n) steps for n = len(haystack)
        Memory: O(1) iterator (items yielded, not accumulated)
        """
        return Tokenizer(self._rules.rules, haystack, self._config.max_window)

    def tokenize_strict(self, haystack: str) -> Iterator[T]:
        """Tokenize haystack, raising the first LexerError instead of yielding it.

        Raises:
            LexerError: At the first character no rule matches
        """
        for item in self.tokenize(haystack):
            if isinstance(item, LexerError):
                raise item
            yield item


def tokenize(
    rules: RuleSet[T] | Iterable[Rule[T]],
    haystack: str,
    config: LexerConfig | None = None,
) -> Tokenizer[T]:
    """Tokenize haystack with a one-off Lexer.

    Example:
        >>> rules = RuleSetBuilder().rule("WORD", str.isalpha).build()
        >>> [str(item) for item in tokenize(rules, "ab!")]
        ["Token(WORD, 'ab')", "unexpected character '!' at index 2"]
    """
    return Lexer(rules, config).tokenize(haystack)


__all__ = ["Lexer", "Tokenizer", "tokenize"]
