"""Pipeline helper.

Workflow:
1. The Lexer tokenizes the source code into tokens.
2. The Parser processes tokens into a list of statements.
3. The Interpreter walks the statements, binding variables and printing.

Set ``HRYDEBUG`` in the environment to log the tokens and the AST before
evaluation.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import os
from typing import TextIO

from hrylang.interpreter import Interpreter
from hrylang.lexer import tokenize
from hrylang.parser import Parser

logger = logging.getLogger(__name__)


def debug_enabled() -> bool:
    return bool(os.environ.get('HRYDEBUG'))


def debug_log_tokens_ast(tokens, ast) -> None:
    """
    Log tokenized source and AST.
    """
    logger.info("Tokens: %r", tokens)
    logger.info("AST: %r", ast)


def run_source(code: str, file: str = "<input>", out: TextIO | None = None) -> Interpreter:
    """
    Tokenize, parse and execute a program.

    Parameters:
        code (str): The program source.
        file (str): The name of the script, used in error messages.
        out (TextIO): Stream for printed output.

    Returns:
        Interpreter: The interpreter after execution, so callers can
        inspect its bindings.
    """
    interpreter = Interpreter(file, out)

    tokens = tokenize(code)
    parser = Parser(tokens, file)
    ast = parser.parse()

    if debug_enabled():
        debug_log_tokens_ast(tokens, ast)

    interpreter.interpret(ast)
    return interpreter
