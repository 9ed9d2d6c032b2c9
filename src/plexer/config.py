"""ContextVar-based lexer configuration for plexer.

A Lexer captures its configuration once, at construction: either the config
passed explicitly or the one active in the current context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from plexer.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(max_window=4096)):
        lexer = Lexer(rules)  # captures max_window=4096

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from plexer.errors import ConfigError

DEFAULT_MAX_WINDOW = 1024


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        max_window: Lookahead bound, in characters, handed to patterns at each
            step. Caps the per-step cost of predicate and regex patterns on
            long inputs; no token can be longer than this.

    """

    max_window: int = DEFAULT_MAX_WINDOW

    def __post_init__(self) -> None:
        if (
            isinstance(self.max_window, bool)
            or not isinstance(self.max_window, int)
            or self.max_window < 1
        ):
            raise ConfigError(f"max_window must be a positive integer, got {self.max_window!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexerConfig.from_dict({"max_window": 64, "other": 1}).max_window
            64

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get the lexer configuration active in this context."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for the current context."""
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to the default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lexer_config_context(LexerConfig(max_window=16)):
        ...     get_lexer_config().max_window
        16

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "DEFAULT_MAX_WINDOW",
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
