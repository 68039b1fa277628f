"""Syntax tree nodes for hrylang.

Every node is an immutable dataclass that exclusively owns its children, so a
parsed program is a forest of independent trees: one root per statement.
``Expression`` and ``Statement`` name the closed sets of variants the
interpreter dispatches over.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from hrylang.operations import Op


@dataclass(frozen=True)
class NumberLiteral:
    """A numeric literal such as ``42``."""

    value: float


@dataclass(frozen=True)
class StringLiteral:
    """A string literal, stored without its quotes."""

    value: str


@dataclass(frozen=True)
class Identifier:
    """A reference to a previously declared variable."""

    name: str


@dataclass(frozen=True)
class BinaryExpression:
    """Application of ``+`` or ``-`` to two operands."""

    operator: Op
    left: Expression
    right: Expression


@dataclass(frozen=True)
class VariableDeclaration:
    """``bagay <name> -> <type> = <value>``"""

    name: str
    declared_type: str
    value: Expression


@dataclass(frozen=True)
class PrintStatement:
    """``ipakita <value>``"""

    value: Expression


Expression = Union[NumberLiteral, StringLiteral, Identifier, BinaryExpression]
Statement = Union[VariableDeclaration, PrintStatement]

__all__ = [
    "NumberLiteral",
    "StringLiteral",
    "Identifier",
    "BinaryExpression",
    "VariableDeclaration",
    "PrintStatement",
    "Expression",
    "Statement",
]
