"""
Main parser entry point for hrylang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`hrylang.parser.expressions` and `hrylang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from hrylang.lexer import Token, TokenType
from hrylang.nodes import Expression, Statement

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """hrylang parser."""

    def __init__(self, tokens: list[Token], file: str = "<input>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances.
            file (str): The name of the script, used in error messages.
        """
        self.tokens = tokens
        self.position = 0
        self.source_file = file

    @property
    def curr_token(self) -> Token | None:
        """
        The token under the cursor, or None once the input is exhausted.
        """
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def check(self, token_type: TokenType, value: str | None = None) -> bool:
        """
        Return True if the current token has the given type (and value).
        """
        tok = self.curr_token
        if tok is None or tok.type != token_type:
            return False
        return value is None or tok.value == value

    def describe_current(self) -> str:
        """
        Describe the current token for error messages.
        """
        tok = self.curr_token
        if tok is None:
            return "end of input"
        return f"'{tok.value}'"

    def error(self, message: str) -> SyntaxError:
        """
        Build a SyntaxError naming the current token.
        """
        return SyntaxError(
            f"{message}, found {self.describe_current()} "
            f"in {self.source_file}"
        )

    def eat(self, token_type: TokenType, value: str | None = None, expected: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected type and value.

        Parameters:
            token_type (TokenType): The expected token type.
            value (str): The expected token text, if it matters.
            expected (str): Human readable description used in the error.

        Returns:
            Token: The consumed token.

        Raises:
            SyntaxError: If the token does not match.
        """
        if not self.check(token_type, value):
            if expected is None:
                expected = f"'{value}'" if value is not None else token_type.value
            raise self.error(f"Expected {expected}")
        tok = self.tokens[self.position]
        self.position += 1
        return tok

    # Expression wrappers
    def primary(self) -> Expression:
        """
        Parse a primary expression: a literal or a variable reference.
        """
        return _expr.parse_primary(self)

    def expr(self) -> Expression:
        """
        Parse a full expression of additions and subtractions.
        """
        return _expr.parse_expr(self)

    # Statement wrappers
    def statement(self) -> Statement:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_declaration(self) -> Statement:
        """
        Parse a 'bagay' variable declaration.
        """
        return _stmt.parse_declaration(self)

    def parse_print(self) -> Statement:
        """
        Parse an 'ipakita' print statement.
        """
        return _stmt.parse_print(self)

    def parse(self) -> list[Statement]:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while not self.at_end():
            statements.append(self.statement())
        return statements
