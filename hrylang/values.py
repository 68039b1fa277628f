"""Runtime values.

The interpreter never stores bare Python objects in its binding table.
Every value is either a :class:`Number` or a :class:`Text`, and each
operator decides explicitly what to do with every pairing of the two, so
mixed-type arithmetic is a deliberate rule rather than host coercion.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Union

from hrylang.exceptions import TypeMismatchException
from hrylang.operations import Op


@dataclass(frozen=True)
class Number:
    """A numeric value backed by a float."""

    value: float

    def __str__(self) -> str:
        if float(self.value).is_integer():
            return str(int(self.value))
        return repr(self.value)


@dataclass(frozen=True)
class Text:
    """A string value."""

    value: str

    def __str__(self) -> str:
        return self.value


Value = Union[Number, Text]


def add(lhs: Value, rhs: Value, file: str | None = None) -> Value:
    """
    Add two values.

    Numbers sum and texts concatenate with no separator. Mixing a number
    with a text is an error.

    Raises:
        TypeMismatchException: If the operands are of different kinds.
    """
    match lhs, rhs:
        case Number(), Number():
            return Number(lhs.value + rhs.value)
        case Text(), Text():
            return Text(lhs.value + rhs.value)
        case _:
            raise TypeMismatchException(Op.ADD, lhs, rhs, file)


def subtract(lhs: Value, rhs: Value, file: str | None = None) -> Value:
    """
    Subtract ``rhs`` from ``lhs``. Only defined for two numbers.

    Raises:
        TypeMismatchException: If either operand is not a number.
    """
    match lhs, rhs:
        case Number(), Number():
            return Number(lhs.value - rhs.value)
        case _:
            raise TypeMismatchException(Op.SUB, lhs, rhs, file)


__all__ = ["Number", "Text", "Value", "add", "subtract"]
