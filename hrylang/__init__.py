"""hrylang: a small interpreted language with Tagalog keywords.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from hrylang.interpreter import Interpreter
from hrylang.lexer import Token, TokenType, tokenize
from hrylang.parser import Parser
from hrylang.runner import run_source

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Interpreter", "Parser", "Token", "TokenType", "run_source", "tokenize"]
