"""Shared definitions for binary operator identifiers.

This module centralizes the operator symbols used by the parser and
interpreter to label ``BinaryExpression`` nodes. Keeping them in one place
prevents the two components from drifting apart when operators are added.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying symbol for nicer debug output.
        """
        return self.value


__all__ = ["Op"]
