"""Exception classes for plexer.

All exceptions derive from PlexerError. LexerError is special: the tokenizer
yields it as a value in the token stream instead of raising it, and callers
decide whether an unexpected character is fatal.
"""

from __future__ import annotations

from functools import cached_property

from plexer.location import SourceLocation


class PlexerError(Exception):
    """Base exception for all plexer errors.

    Subclass this for specific error categories.
    """

    pass


class LexerError(PlexerError):
    """Unexpected character in the input.

    Produced by the tokenizer for every character no rule matches. Scanning
    continues after it, so one malformed region yields one error per
    unmatched character.

    Attributes:
        haystack: The complete input being tokenized
        cursor: Index of the unexpected character

    Example:
        >>> err = LexerError("x = (1)", 4)
        >>> str(err)
        "unexpected character '(' at index 4"
    """

    def __init__(self, haystack: str, cursor: int) -> None:
        """Initialize lexer error.

        Args:
            haystack: Input string being tokenized
            cursor: Offset of the unexpected character, 0 <= cursor < len(haystack)
        """
        self.haystack = haystack
        self.cursor = cursor
        super().__init__(f"unexpected character {haystack[cursor]!r} at index {cursor}")

    @property
    def char(self) -> str:
        """The unexpected character."""
        return self.haystack[self.cursor]

    @cached_property
    def location(self) -> SourceLocation:
        """Line/column of the unexpected character."""
        return SourceLocation.from_offset(self.haystack, self.cursor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return self.cursor == other.cursor and self.haystack == other.haystack

    def __hash__(self) -> int:
        return hash((self.haystack, self.cursor))

    def __reduce__(self) -> tuple[type[LexerError], tuple[str, int]]:
        return (type(self), (self.haystack, self.cursor))

    def __repr__(self) -> str:
        return f"LexerError(cursor={self.cursor}, char={self.char!r})"


class InvalidMatchError(PlexerError, ValueError):
    """Match constructed with an empty, inverted or out-of-range span.

    Always a programming error; never part of the token stream.
    """

    def __init__(self, haystack: str, start: int, end: int) -> None:
        self.haystack = haystack
        self.start = start
        self.end = end
        super().__init__(
            f"invalid match range [{start}, {end}) for haystack of length {len(haystack)}"
        )

    def __reduce__(self) -> tuple[type[InvalidMatchError], tuple[str, int, int]]:
        return (type(self), (self.haystack, self.start, self.end))


class PatternError(PlexerError):
    """Error when a value cannot be used as a pattern.

    Raised for empty literals, unordered collections, unsupported types and
    invalid regular expressions.
    """

    pass


class RuleError(PlexerError):
    """Error in a rule declaration."""

    pass


class BuilderError(PlexerError):
    """A rule's builder raised while converting matched text into a token.

    Builders only see text their pattern already accepted, so a failure here
    is a bug in the rule declaration.
    """

    def __init__(self, rule_name: str, text: str) -> None:
        """Initialize builder error.

        Args:
            rule_name: Token name of the failing rule
            text: Matched text passed to the builder
        """
        self.rule_name = rule_name
        self.text = text
        super().__init__(f"Builder for rule '{rule_name}' failed on {text!r}")

    def __reduce__(self) -> tuple[type[BuilderError], tuple[str, str]]:
        return (type(self), (self.rule_name, self.text))


class ConfigError(PlexerError):
    """Invalid lexer configuration value."""

    pass
