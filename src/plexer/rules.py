"""Rule declarations for the lexer.

A rule pairs a pattern with a builder turning matched text into a token.
Rules are grouped under token names and kept in declaration order, which
is the priority order the lexer uses to break ties between equally long
matches.

Thread Safety:
RuleSet is immutable after creation. Safe to share.
Use RuleSetBuilder for mutable construction.

Example:
    >>> rules = (
    ...     RuleSetBuilder()
    ...     .group("OPERATOR", {"+": lambda _: "+", "-": lambda _: "-"})
    ...     .rule("NUMBER", str.isdigit, int)
    ...     .rule("WHITESPACE", [" ", "\\n"], lambda _: None)
    ...     .build()
    ... )
    >>> rules.names
    ('OPERATOR', 'NUMBER', 'WHITESPACE')
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from plexer.errors import RuleError
from plexer.pattern import Pattern, PatternLike, as_pattern
from plexer.tokens import text_token
from plexer.utils.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Rule(Generic[T]):
    """One (pattern, builder) pair registered under a token name.

    Attributes:
        name: Token name the rule produces
        pattern: Pattern anchored at the cursor during tokenization
        build: Converts matched text into a token; only called on text the
            pattern accepted

    """

    name: str
    pattern: Pattern
    build: Callable[[str], T]

    def __post_init__(self) -> None:
        if not self.name:
            raise RuleError("Rule name must be a non-empty string")
        if not callable(self.build):
            raise RuleError(f"Builder for rule '{self.name}' is not callable")
        object.__setattr__(self, "pattern", as_pattern(self.pattern))


class RuleSet(Generic[T]):
    """Immutable, priority-ordered sequence of rules.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_rules", "_names")

    def __init__(self, rules: Iterable[Rule[T]]) -> None:
        """Initialize with rules in priority order.

        Use RuleSetBuilder to create instances from shorthands.
        """
        self._rules: tuple[Rule[T], ...] = tuple(rules)
        self._names: tuple[str, ...] = tuple(dict.fromkeys(rule.name for rule in self._rules))

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        """All rules, highest priority first."""
        return self._rules

    @property
    def names(self) -> tuple[str, ...]:
        """Distinct token names in first-declaration order."""
        return self._names

    def for_name(self, name: str) -> tuple[Rule[T], ...]:
        """Rules registered under a token name, in priority order."""
        return tuple(rule for rule in self._rules if rule.name == name)

    def __iter__(self) -> Iterator[Rule[T]]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        """Support 'name in rules' syntax."""
        return name in self._names

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules: {', '.join(self._names)})"


class RuleSetBuilder(Generic[T]):
    """Mutable builder for RuleSet.

    Every registration appends, so registration order is priority order.
    A token name may be registered several times; all its rules share the
    name.

    Example:
        >>> builder = RuleSetBuilder()
        >>> _ = builder.rule("IF", "if").rule("NAME", str.isalpha)
        >>> len(builder.build())
        2
    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._rules: list[Rule[T]] = []

    def rule(
        self,
        name: str,
        pattern: PatternLike,
        build: Callable[[str], T] | None = None,
    ) -> RuleSetBuilder[T]:
        """Register one rule.

        Args:
            name: Token name
            pattern: Pattern or shorthand accepted by as_pattern()
            build: Builder for matched text; defaults to text_token(name)

        Returns:
            Self for chaining

        Raises:
            RuleError: If name is empty or build is not callable
            PatternError: If pattern is not usable
        """
        if build is None:
            build = text_token(name)  # type: ignore[assignment]
        self._rules.append(Rule(name, pattern, build))  # type: ignore[arg-type]
        return self

    def group(
        self,
        name: str,
        rules: Mapping[Any, Callable[[str], T] | None]
        | Iterable[tuple[PatternLike, Callable[[str], T] | None]],
    ) -> RuleSetBuilder[T]:
        """Register several rules sharing one token name.

        Args:
            name: Token name
            rules: Mapping of pattern to builder, or (pattern, builder) pairs
                for patterns that are not hashable

        Returns:
            Self for chaining
        """
        pairs = rules.items() if isinstance(rules, Mapping) else rules
        count = 0
        for pattern, build in pairs:
            self.rule(name, pattern, build)
            count += 1
        if count == 0:
            raise RuleError(f"Group '{name}' declares no rules")
        return self

    def build(self) -> RuleSet[T]:
        """Build immutable RuleSet from registered rules."""
        rule_set = RuleSet(self._rules)
        logger.debug("Built rule set with %d rules for %d tokens", len(rule_set), len(rule_set.names))
        return rule_set

    def __len__(self) -> int:
        """Number of registered rules."""
        return len(self._rules)


__all__ = ["Rule", "RuleSet", "RuleSetBuilder"]
