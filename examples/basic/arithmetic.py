"""Tokenize arithmetic with four rules and report unexpected characters."""

from plexer import Lexer, LexerError, RuleSetBuilder, Token, regex

rules = (
    RuleSetBuilder()
    .group("OPERATOR", {op: None for op in "+-*/="})
    .rule("NUMBER", lambda s: s.isascii() and s.isdigit(), lambda v: Token("NUMBER", int(v)))
    .rule("IDENTIFIER", regex(r"[a-zA-Z_][a-zA-Z0-9_]*"))
    .rule("WHITESPACE", [" ", "\n"], lambda _: None)
    .build()
)

for item in Lexer(rules).tokenize("x_4 = (1 + 3)"):
    if isinstance(item, LexerError):
        print(f"error: {item} ({item.location})")
    elif item is not None:
        print(item)
