"""Shared rule sets for the test suite."""

from __future__ import annotations

import pytest

from plexer import Lexer, RuleSet, RuleSetBuilder, Token, regex, text_token

DECIMAL_DIGITS = frozenset("0123456789")


def build_arithmetic_rules() -> RuleSet[Token]:
    """Minimal arithmetic lexer: operators, numbers, identifiers, whitespace."""
    return (
        RuleSetBuilder()
        .group("OPERATOR", {op: text_token("OPERATOR") for op in "+-*/="})
        .rule(
            "NUMBER",
            lambda s: all(c in DECIMAL_DIGITS for c in s),
            lambda v: Token("NUMBER", int(v)),
        )
        .rule("IDENTIFIER", regex(r"[a-zA-Z_][a-zA-Z0-9_]*"))
        .rule("WHITESPACE", [" ", "\n"], lambda _: Token("WHITESPACE"))
        .build()
    )


@pytest.fixture(scope="session")
def arith_lexer() -> Lexer[Token]:
    return Lexer(build_arithmetic_rules())


@pytest.fixture(scope="session")
def text_lexer() -> Lexer[Token]:
    """Arithmetic rules that keep every matched text verbatim."""
    rules = (
        RuleSetBuilder()
        .group("OPERATOR", {op: None for op in "+-*/="})
        .rule("NUMBER", regex(r"[0-9]+"))
        .rule("IDENTIFIER", regex(r"[a-zA-Z_][a-zA-Z0-9_]*"))
        .rule("WHITESPACE", [" ", "\n"])
        .build()
    )
    return Lexer(rules)
