"""
Utility functions shared across hrylang tests.
"""
from hrylang.interpreter import Interpreter
from hrylang.lexer import tokenize
from hrylang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens = tokenize(source)
    parser = Parser(tokens, "<test>")
    return parser.parse()


def execute_source(source: str) -> Interpreter:
    """
    Parse and execute source code, returning the interpreter instance.
    """
    interpreter = Interpreter("<test>")
    interpreter.interpret(parse_source(source))
    return interpreter
