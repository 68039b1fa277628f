"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class EvaluationError(RuntimeError):
    """
    Base class for errors raised while evaluating a program.
    """


class UndefinedVariableException(EvaluationError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, file=None):
        self.varname = varname
        message = f"Undefined variable '{varname}'"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnknownOpException(EvaluationError):
    """
    Error for unknown operations.
    """
    def __init__(self, op, file=None):
        self.op = op
        message = f"Unknown operation '{op}'"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class TypeMismatchException(EvaluationError):
    """
    Error for operators applied to operands of unsupported types.
    """
    def __init__(self, op, left, right, file=None):
        self.op = op
        self.left = left
        self.right = right
        message = (
            f"Unsupported operand types for '{op}': "
            f"{type(left).__name__} and {type(right).__name__}"
        )
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
