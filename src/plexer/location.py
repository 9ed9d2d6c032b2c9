"""Source location tracking for error messages.

Converts absolute character offsets into 1-indexed line/column pairs so
lexer errors can point at the offending character in multi-line input.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a single character in a source string.

    Line and column are 1-indexed; offset is the 0-indexed character index.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute offset in the source string

    Examples:
        >>> SourceLocation.from_offset("ab\\ncd", 4)
        SourceLocation(lineno=2, col_offset=2, offset=4)
        >>> str(SourceLocation(2, 2, 4))
        '2:2'

    """

    lineno: int
    col_offset: int
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(cls, source: str, offset: int) -> SourceLocation:
        """Locate an offset in source.

        Uses str.count/rfind over the prefix, so the cost is O(offset).

        Args:
            source: The complete source string
            offset: Character index, 0 <= offset <= len(source)

        Returns:
            SourceLocation for that offset

        Raises:
            ValueError: If offset is outside the source.
        """
        if not 0 <= offset <= len(source):
            raise ValueError(f"offset {offset} outside source of length {len(source)}")
        prefix = source[:offset]
        lineno = prefix.count("\n") + 1
        col_offset = offset - (prefix.rfind("\n") + 1) + 1
        return cls(lineno=lineno, col_offset=col_offset, offset=offset)
