"""Generic token value for rule sets that need no custom token types.

The lexer is generic over the token type: any builder returning any value
works. Token is the ready-made choice, pairing a rule name with a payload.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Token:
    """A token tagged by its rule name.

    Attributes:
        kind: Rule/token name (e.g., "NUMBER")
        value: Payload produced by the builder; the matched text by default

    """

    kind: str
    value: Any = None

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r})"


def text_token(kind: str) -> Callable[[str], Token]:
    """Builder producing Token(kind, matched_text).

    Example:
        >>> text_token("WORD")("hello")
        Token(WORD, 'hello')
    """

    def build(text: str) -> Token:
        return Token(kind, text)

    return build


__all__ = ["Token", "text_token"]
