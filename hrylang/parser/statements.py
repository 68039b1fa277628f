"""Statement parsing utilities for hrylang.

These functions operate on a `hrylang.parser.parser.Parser` instance and
handle the statement forms of the language: variable declarations and
print statements.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import TYPE_CHECKING

from hrylang.lexer import DATATYPES, TokenType
from hrylang.nodes import PrintStatement, VariableDeclaration

if TYPE_CHECKING:
    from hrylang.parser import Parser

logger = logging.getLogger(__name__)


def _parse_terminator(parser: 'Parser') -> None:
    """
    Consume an optional trailing ';', warning when it is missing.
    """
    if parser.check(TokenType.OPERATOR, ';'):
        parser.eat(TokenType.OPERATOR, ';')
    else:
        logger.warning("Semicolon not found at the end of the statement.")


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Syntax:
        <declaration> | <print>

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if parser.check(TokenType.KEYWORD, 'bagay'):
        return parser.parse_declaration()
    elif parser.check(TokenType.KEYWORD, 'ipakita'):
        return parser.parse_print()
    else:
        raise SyntaxError(
            f"Unexpected token '{tok.value}' "
            f"in {parser.source_file}"
        )


def parse_declaration(parser: 'Parser') -> VariableDeclaration:
    """
    Parse a variable declaration.

    Syntax:
        bagay <identifier> -> <datatype> = <expression> [;]

    Args:
        parser: The parser instance.

    Returns:
        VariableDeclaration: The declaration node.
    """
    parser.eat(TokenType.KEYWORD, 'bagay')
    id_tok = parser.eat(TokenType.IDENTIFIER, expected="variable name")
    parser.eat(TokenType.OPERATOR, '->')

    type_tok = parser.curr_token
    if type_tok is None or type_tok.type != TokenType.KEYWORD or type_tok.value not in DATATYPES:
        raise parser.error("Expected valid data type (teksto or bilang)")
    parser.eat(TokenType.KEYWORD)

    parser.eat(TokenType.OPERATOR, '=')
    expr_node = parser.expr()
    _parse_terminator(parser)
    return VariableDeclaration(id_tok.value, type_tok.value, expr_node)


def parse_print(parser: 'Parser') -> PrintStatement:
    """
    Parse a print statement.

    Syntax:
        ipakita <expression> [;]

    Args:
        parser: The parser instance.

    Returns:
        PrintStatement: The print node.
    """
    parser.eat(TokenType.KEYWORD, 'ipakita')
    expr_node = parser.expr()
    _parse_terminator(parser)
    return PrintStatement(expr_node)
