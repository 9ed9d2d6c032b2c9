"""Pattern matching over strings.

A Pattern locates occurrences of itself in a haystack. Every kind implements
one method, find_in(), which lazily yields Match objects; the prefix, suffix,
first-match and reverse searches are derived from it on the base class.

Kinds:

| Pattern              | Match condition                         |
|----------------------|-----------------------------------------|
| CharPattern          | is this character                       |
| StrPattern           | is this substring (non-overlapping)     |
| CharSetPattern       | any member character matches            |
| StrSetPattern        | any member string matches               |
| PredicatePattern     | predicate returns True (slow)           |
| RegexPattern         | regular expression matches (non-empty)  |

Rule declarations use shorthands, converted with as_pattern():

    >>> as_pattern("n")
    CharPattern(char='n')
    >>> hay = "Can you find a needle in a haystack"
    >>> as_pattern("you").find_one_in(hay).start
    4
    >>> as_pattern(["a", "e", "i", "o", "u"]).find_one_in(hay).start
    1
    >>> as_pattern(lambda s: s.startswith("f")).find_one_in(hay).start
    8

Thread Safety:
Patterns are frozen dataclasses; searching keeps all state in local
variables. Safe to share across threads as long as predicates are pure.

"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from itertools import chain

from plexer.errors import InvalidMatchError, PatternError


@dataclass(frozen=True, slots=True)
class Match:
    """A located occurrence: the half-open range [start, end) of haystack.

    Zero-length and out-of-range spans are rejected at construction.

    Attributes:
        haystack: The string that was searched
        start: Start of the match (inclusive)
        end: End of the match (exclusive)

    Example:
        >>> m = Match("it's here not here", 5, 9)
        >>> m.text, len(m)
        ('here', 4)

    """

    haystack: str = field(repr=False)
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end <= len(self.haystack):
            raise InvalidMatchError(self.haystack, self.start, self.end)

    @property
    def text(self) -> str:
        """The matched substring."""
        return self.haystack[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def shifted(self, haystack: str, offset: int) -> Match:
        """Re-anchor a match found in ``haystack[offset:]`` onto haystack."""
        return Match(haystack, self.start + offset, self.end + offset)


class Pattern(ABC):
    """Base class for every pattern kind.

    Subclasses implement find_in(). They may override a derived method only
    with a cheaper computation of the same result.
    """

    __slots__ = ()

    @abstractmethod
    def find_in(self, haystack: str) -> Iterator[Match]:
        """Yield every match in haystack, following the kind's overlap policy."""

    def find_one_in(self, haystack: str) -> Match | None:
        """First match yielded by find_in(), or None.

        Example:
            >>> StrPattern("ab").find_one_in("cabd")
            Match(start=1, end=3)
        """
        return next(self.find_in(haystack), None)

    def find_prefixes_in(self, haystack: str) -> Iterator[Match]:
        """Yield the matches that start at index 0."""
        return (mat for mat in self.find_in(haystack) if mat.start == 0)

    def find_prefix_in(self, haystack: str) -> Match | None:
        """First match that starts at index 0, or None.

        Example:
            >>> StrPattern("ab").find_prefix_in("abcd")
            Match(start=0, end=2)
            >>> StrPattern("ab").find_prefix_in("cdab") is None
            True
        """
        return next(self.find_prefixes_in(haystack), None)

    def find_suffixes_in(self, haystack: str) -> Iterator[Match]:
        """Yield the matches that end at len(haystack)."""
        end = len(haystack)
        return (mat for mat in self.find_in(haystack) if mat.end == end)

    def find_suffix_in(self, haystack: str) -> Match | None:
        """First match that ends at len(haystack), or None.

        Example:
            >>> StrPattern("ab").find_suffix_in("cdab")
            Match(start=2, end=4)
        """
        return next(self.find_suffixes_in(haystack), None)

    def rev_find_in(self, haystack: str) -> Match | None:
        """Last occurrence, by scanning start offsets from the end backward.

        Returns the first match found in ``haystack[cursor:]`` for the
        largest cursor that has one. A fallback scan, not an optimized
        reverse search: it may run find_in() once per character.

        Example:
            >>> StrPattern("ab").rev_find_in("abcab")
            Match(start=3, end=5)
        """
        for cursor in range(len(haystack) - 1, -1, -1):
            mat = self.find_one_in(haystack[cursor:])
            if mat is not None:
                return mat.shifted(haystack, cursor)
        return None


@dataclass(frozen=True, slots=True)
class CharPattern(Pattern):
    """Every occurrence of a single character, left to right."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise PatternError(f"CharPattern needs exactly one character, got {self.char!r}")

    def find_in(self, haystack: str) -> Iterator[Match]:
        idx = haystack.find(self.char)
        while idx != -1:
            yield Match(haystack, idx, idx + 1)
            idx = haystack.find(self.char, idx + 1)

    def find_prefixes_in(self, haystack: str) -> Iterator[Match]:
        if haystack.startswith(self.char):
            yield Match(haystack, 0, 1)

    def find_suffixes_in(self, haystack: str) -> Iterator[Match]:
        if haystack.endswith(self.char):
            end = len(haystack)
            yield Match(haystack, end - 1, end)


@dataclass(frozen=True, slots=True)
class StrPattern(Pattern):
    """Non-overlapping occurrences of a literal substring, left to right.

    The scan resumes after each occurrence, so "aa" matches "aaa" once.
    """

    literal: str

    def __post_init__(self) -> None:
        if not self.literal:
            raise PatternError("StrPattern cannot match the empty string")

    def find_in(self, haystack: str) -> Iterator[Match]:
        size = len(self.literal)
        idx = haystack.find(self.literal)
        while idx != -1:
            yield Match(haystack, idx, idx + size)
            idx = haystack.find(self.literal, idx + size)

    def find_prefixes_in(self, haystack: str) -> Iterator[Match]:
        # The first occurrence is the only one that can start at 0
        if haystack.startswith(self.literal):
            yield Match(haystack, 0, len(self.literal))


class _UnionPattern(Pattern):
    """Union of member patterns.

    Matches are produced member by member in declaration order, so they are
    grouped by member and not globally sorted by start.
    """

    __slots__ = ()

    members: tuple[Pattern, ...]

    def find_in(self, haystack: str) -> Iterator[Match]:
        return chain.from_iterable(member.find_in(haystack) for member in self.members)

    def find_prefixes_in(self, haystack: str) -> Iterator[Match]:
        return chain.from_iterable(member.find_prefixes_in(haystack) for member in self.members)

    def find_suffixes_in(self, haystack: str) -> Iterator[Match]:
        return chain.from_iterable(member.find_suffixes_in(haystack) for member in self.members)


@dataclass(frozen=True, slots=True)
class CharSetPattern(_UnionPattern):
    """Any of several characters.

    Example:
        >>> [m.start for m in CharSetPattern(("b", "a")).find_in("abab")]
        [1, 3, 0, 2]
    """

    chars: tuple[str, ...]
    members: tuple[Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.chars:
            raise PatternError("CharSetPattern needs at least one character")
        object.__setattr__(self, "members", tuple(CharPattern(c) for c in self.chars))


@dataclass(frozen=True, slots=True)
class StrSetPattern(_UnionPattern):
    """Any of several literal strings.

    Members keep their declaration order: for prefix matching the first
    member that matches wins, so list longer alternatives first when they
    share a prefix ("==" before "=").
    """

    literals: tuple[str, ...]
    members: tuple[Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.literals:
            raise PatternError("StrSetPattern needs at least one string")
        object.__setattr__(self, "members", tuple(as_pattern(s) for s in self.literals))


@dataclass(frozen=True, slots=True)
class PredicatePattern(Pattern):
    """Substrings accepted by an arbitrary predicate.

    Greedy and leftmost: start positions are tried left to right and, for
    each start, end positions from the end of the haystack down to start + 1.
    The first accepted substring is a match and scanning resumes at its end,
    so matches never overlap and each is the longest accepted substring at
    its start.

    Performance:
        O(n^2) predicate calls per find_in() on a haystack of length n when
        nothing matches, each on a fresh substring. The tokenizer bounds n
        with LexerConfig.max_window; prefer RegexPattern where possible.

    Example:
        >>> digits = PredicatePattern(str.isdigit)
        >>> [m.text for m in digits.find_in("a12b3")]
        ['12', '3']
    """

    predicate: Callable[[str], bool]

    def _longest_at(self, haystack: str, start: int) -> Match | None:
        for end in range(len(haystack), start, -1):
            if self.predicate(haystack[start:end]):
                return Match(haystack, start, end)
        return None

    def find_in(self, haystack: str) -> Iterator[Match]:
        start = 0
        size = len(haystack)
        while start < size:
            mat = self._longest_at(haystack, start)
            if mat is None:
                start += 1
            else:
                yield mat
                start = mat.end

    def find_prefixes_in(self, haystack: str) -> Iterator[Match]:
        mat = self._longest_at(haystack, 0)
        if mat is not None:
            yield mat


@dataclass(frozen=True, slots=True)
class RegexPattern(Pattern):
    """Matches of a compiled regular expression.

    Uses the re module's leftmost-first semantics. Empty matches are not
    occurrences and are skipped.
    """

    regex: re.Pattern[str]

    def find_in(self, haystack: str) -> Iterator[Match]:
        for m in self.regex.finditer(haystack):
            if m.end() > m.start():
                yield Match(haystack, m.start(), m.end())

    def find_prefixes_in(self, haystack: str) -> Iterator[Match]:
        m = self.regex.match(haystack)
        if m is None:
            return
        if m.end() > 0:
            yield Match(haystack, 0, m.end())
            return
        # Empty match at 0: a non-empty match may still start there
        mat = self.find_one_in(haystack)
        if mat is not None and mat.start == 0:
            yield mat


def regex(source: str, flags: int | re.RegexFlag = 0) -> RegexPattern:
    """Compile a regular expression into a RegexPattern.

    Raises:
        PatternError: If source is not a valid regular expression.

    Example:
        >>> regex(r"[a-z]+").find_prefix_in("abc1")
        Match(start=0, end=3)
    """
    try:
        compiled = re.compile(source, flags)
    except re.error as exc:
        raise PatternError(f"Invalid regular expression {source!r}: {exc}") from exc
    return RegexPattern(compiled)


PatternLike = Pattern | str | list[str] | tuple[str, ...] | re.Pattern[str] | Callable[[str], bool]


def as_pattern(obj: PatternLike) -> Pattern:
    """Convert a declaration shorthand into a Pattern.

    - Pattern: returned unchanged
    - one-character str: CharPattern
    - longer str: StrPattern
    - list/tuple of one-character strs: CharSetPattern
    - list/tuple of strs: StrSetPattern
    - compiled re.Pattern: RegexPattern
    - any other callable: PredicatePattern

    Raises:
        PatternError: For empty strings or sequences, unordered collections
            and unsupported types.
    """
    if isinstance(obj, Pattern):
        return obj
    if isinstance(obj, str):
        if len(obj) == 1:
            return CharPattern(obj)
        return StrPattern(obj)
    if isinstance(obj, (list, tuple)):
        if not all(isinstance(item, str) for item in obj):
            raise PatternError(f"Pattern sequences must contain only strings: {obj!r}")
        items = tuple(obj)
        if items and all(len(item) == 1 for item in items):
            return CharSetPattern(items)
        return StrSetPattern(items)
    if isinstance(obj, (set, frozenset)):
        raise PatternError("Pattern alternatives must be ordered; use a list or tuple")
    if isinstance(obj, re.Pattern):
        return RegexPattern(obj)
    if callable(obj):
        return PredicatePattern(obj)
    raise PatternError(f"Cannot use {type(obj).__name__} as a pattern")


__all__ = [
    "CharPattern",
    "CharSetPattern",
    "Match",
    "Pattern",
    "PatternLike",
    "PredicatePattern",
    "RegexPattern",
    "StrPattern",
    "StrSetPattern",
    "as_pattern",
    "regex",
]
