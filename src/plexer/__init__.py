"""
plexer: Pattern-matching lexer for Python

Declare token rules as (pattern, builder) pairs in priority order; the lexer
scans left to right and, at each position, emits the token of the rule with
the longest match. Characters no rule matches are reported as LexerError
values and skipped, so one bad character never aborts a scan.

Quick Start:
    >>> from plexer import Lexer, RuleSetBuilder, regex
    >>> rules = (
    ...     RuleSetBuilder()
    ...     .group("OPERATOR", {op: str for op in "+-*/="})
    ...     .rule("NUMBER", lambda s: s.isascii() and s.isdigit(), int)
    ...     .rule("IDENTIFIER", regex(r"[a-zA-Z_][a-zA-Z0-9_]*"))
    ...     .rule("WHITESPACE", [" ", "\\n"], lambda _: None)
    ...     .build()
    ... )
    >>> [t for t in Lexer(rules).tokenize("x = 1 + 2") if t is not None]
    [Token(IDENTIFIER, 'x'), '=', 1, '+', 2]

Installation:
    pip install plexer    # zero dependencies
"""

from plexer.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from plexer.errors import (
    BuilderError,
    ConfigError,
    InvalidMatchError,
    LexerError,
    PatternError,
    PlexerError,
    RuleError,
)
from plexer.lexer import Lexer, Tokenizer, tokenize
from plexer.location import SourceLocation
from plexer.pattern import (
    CharPattern,
    CharSetPattern,
    Match,
    Pattern,
    PredicatePattern,
    RegexPattern,
    StrPattern,
    StrSetPattern,
    as_pattern,
    regex,
)
from plexer.rules import Rule, RuleSet, RuleSetBuilder
from plexer.tokens import Token, text_token

__version__ = "0.1.0"

__all__ = [
    # Lexer
    "Lexer",
    "Tokenizer",
    "tokenize",
    # Rules
    "Rule",
    "RuleSet",
    "RuleSetBuilder",
    # Patterns
    "CharPattern",
    "CharSetPattern",
    "Match",
    "Pattern",
    "PredicatePattern",
    "RegexPattern",
    "StrPattern",
    "StrSetPattern",
    "as_pattern",
    "regex",
    # Tokens
    "Token",
    "text_token",
    # Configuration
    "LexerConfig",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
    # Errors
    "BuilderError",
    "ConfigError",
    "InvalidMatchError",
    "LexerError",
    "PatternError",
    "PlexerError",
    "RuleError",
    # Location
    "SourceLocation",
    "__version__",
]
