"""Scratch language: a small line-oriented interpreted language.

Source text flows through the lexer, the parser and the tree-walk
interpreter one line at a time; :func:`run_program` drives the pipeline.
"""

from scratchlang.exceptions import (
    EvalException,
    LexException,
    ParseException,
    ScratchError,
    UndefinedVariableException,
    UnsupportedOperationException,
)
from scratchlang.interpreter import Interpreter, Scope
from scratchlang.lexer import Token, tokenize
from scratchlang.parser import Parser
from scratchlang.program import run_program

__version__ = "0.1.0"

__all__ = [
    "EvalException",
    "Interpreter",
    "LexException",
    "ParseException",
    "Parser",
    "Scope",
    "ScratchError",
    "Token",
    "UndefinedVariableException",
    "UnsupportedOperationException",
    "run_program",
    "tokenize",
]
