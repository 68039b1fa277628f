"""
Expression parsing utilities for hrylang.

These functions operate on a `hrylang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. There is a single
precedence level: ``+`` and ``-`` fold left-associatively over primaries.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from hrylang.lexer import TokenType
from hrylang.nodes import BinaryExpression, Identifier, NumberLiteral, StringLiteral
from hrylang.operations import Op

if TYPE_CHECKING:
    from hrylang.nodes import Expression
    from hrylang.parser import Parser


def parse_primary(parser: 'Parser') -> 'Expression':
    """Parse a number, string, or variable reference."""
    tok = parser.curr_token
    if parser.check(TokenType.NUMBER):
        parser.eat(TokenType.NUMBER)
        return NumberLiteral(float(tok.value))

    if parser.check(TokenType.STRING):
        parser.eat(TokenType.STRING)
        return StringLiteral(tok.value)

    if parser.check(TokenType.IDENTIFIER):
        parser.eat(TokenType.IDENTIFIER)
        return Identifier(tok.value)

    raise SyntaxError(
        f"Unexpected token {parser.describe_current()} "
        f"in {parser.source_file}"
    )


def parse_expr(parser: 'Parser') -> 'Expression':
    """Parse addition and subtraction expressions."""
    result = parser.primary()
    while parser.check(TokenType.OPERATOR) and parser.curr_token.value in ('+', '-'):
        tok = parser.eat(TokenType.OPERATOR)
        result = BinaryExpression(Op(tok.value), result, parser.primary())
    return result
