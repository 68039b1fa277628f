"""Interpreter.

This is a tree-walk interpreter for evaluating the statement nodes produced by
the parser.

1. Execution Model
The interpreter walks the list of statements in order. Statements are executed
via the `execute()` method, and expressions are evaluated using `eval_expr()`.
Both dispatch exhaustively over the closed set of node classes in
`hrylang.nodes`.

2. Environment
The interpreter owns a single dictionary `vars`, the binding table, mapping
variable names to runtime values. There are no nested scopes: a declaration
overwrites any previous binding of the same name, and every statement sees the
bindings made by the statements before it. Each interpreter instance has its
own table, so independent runs never interfere.

3. Expression Evaluation
Literals evaluate to `Number` or `Text` values. Binary expressions evaluate
their left operand, then their right, and dispatch on the operator; the
per-type rules live in `hrylang.values`.

4. Error Handling
Runtime errors, such as undefined variables, operators applied to unsupported
operand types, or unknown operators, are surfaced as typed exceptions derived
from `EvaluationError`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import sys
from typing import Iterable, TextIO

from hrylang.exceptions import UndefinedVariableException, UnknownOpException
from hrylang.nodes import (
    BinaryExpression,
    Expression,
    Identifier,
    NumberLiteral,
    PrintStatement,
    Statement,
    StringLiteral,
    VariableDeclaration,
)
from hrylang.operations import Op
from hrylang.values import Number, Text, Value, add, subtract

logger = logging.getLogger(__name__)


class Interpreter:
    """Tree-walk interpreter for hrylang."""

    def __init__(self, file: str = "<input>", out: TextIO | None = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in error messages.
            out (TextIO): Stream for printed output. Defaults to the
                current ``sys.stdout`` at the time of each print.
        """
        self.vars: dict[str, Value] = {}
        self.file = file
        self.out = out

    def interpret(self, statements: Iterable[Statement]) -> None:
        """
        Execute a program: every statement, in order.
        """
        self.execute(statements)

    def eval_expr(self, node: Expression) -> Value:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node: An expression node.

        Returns:
            Value: The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            TypeMismatchException: If an operator is applied to unsupported operand types.
            UnknownOpException: If an unrecognized binary operator is encountered.
        """
        match node:
            case NumberLiteral(value=value):
                return Number(value)
            case StringLiteral(value=value):
                return Text(value)
            case Identifier(name=name):
                if name in self.vars:
                    return self.vars[name]
                raise UndefinedVariableException(name, self.file)
            case BinaryExpression(operator=op, left=left, right=right):
                lhs = self.eval_expr(left)
                rhs = self.eval_expr(right)
                match op:
                    case Op.ADD:
                        return add(lhs, rhs, self.file)
                    case Op.SUB:
                        return subtract(lhs, rhs, self.file)
                    case _:
                        raise UnknownOpException(op, self.file)
            case _:
                raise TypeError(f"Unknown expression node: {node!r}")

    def execute(self, statements: Iterable[Statement]) -> None:
        """
        Execute a sequence of statements.

        Raises:
            TypeError: If a node is not a known statement.
        """
        for stmt in statements:
            logger.debug("Executing %r", stmt)
            match stmt:
                case VariableDeclaration(name=name, value=expr_node):
                    self.vars[name] = self.eval_expr(expr_node)
                case PrintStatement(value=expr_node):
                    value = self.eval_expr(expr_node)
                    out = self.out if self.out is not None else sys.stdout
                    out.write(f"{value}\n")
                case _:
                    raise TypeError(f"Unknown statement type: {stmt!r}")
