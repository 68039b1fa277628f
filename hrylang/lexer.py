"""Lexer for hrylang.

This lexer performs a single forward pass over the source code using a
combined regular expression of named groups. Each match yields a
:class:`Token` carrying its type and raw text.

Tokens cover string and number literals, words (keywords such as ``bagay``
and ``ipakita`` or plain identifiers) and the handful of operators the
grammar uses (``=``, ``->``, ``+``, ``-`` and ``;``). Whitespace is skipped.

The lexer never fails: a character it does not recognise becomes a
single-character ``UNKNOWN`` token and is left for the parser to reject.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


KEYWORDS = frozenset({"bagay", "teksto", "bilang", "ipakita"})
DATATYPES = frozenset({"teksto", "bilang"})


class TokenType(str, Enum):
    """
    Enumeration of token classifications.
    """

    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    OPERATOR = "OPERATOR"
    STRING = "STRING"
    NUMBER = "NUMBER"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True, repr=False)
class Token:
    """
    Represents a lexical token with a type and value.
    """

    type: TokenType
    value: str

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('STRING',    r'"[^"]*"?'),
    ('NUMBER',    r'[0-9]+'),

    # Keywords and identifiers
    ('WORD',      r'[A-Za-z_][A-Za-z0-9_]*'),

    # Operators
    ('ARROW',     r'->'),
    ('OPERATOR',  r'[=+\-;]'),

    # Miscellaneous
    ('SKIP',      r'[ \t\r\n]+'),
    ('MISMATCH',  r'.'),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances, empty for blank input.
    """
    tokens: list[Token] = []

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'SKIP':
            continue

        if kind == 'STRING':
            if len(value) == 1 or not value.endswith('"'):
                logger.warning("Unterminated string literal absorbed to end of input")
                tokens.append(Token(TokenType.STRING, value[1:]))
            else:
                tokens.append(Token(TokenType.STRING, value[1:-1]))
        elif kind == 'NUMBER':
            tokens.append(Token(TokenType.NUMBER, value))
        elif kind == 'WORD':
            type_ = TokenType.KEYWORD if value in KEYWORDS else TokenType.IDENTIFIER
            tokens.append(Token(type_, value))
        elif kind in ('ARROW', 'OPERATOR'):
            tokens.append(Token(TokenType.OPERATOR, value))
        else:
            tokens.append(Token(TokenType.UNKNOWN, value))

    return tokens
