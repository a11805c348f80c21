"""
Utility functions shared across scratch language tests.
"""
from pathlib import Path
import sys

from scratchlang.interpreter import Interpreter, Scope
from scratchlang.lexer import Token, tokenize
from scratchlang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def tok(type_, value=None) -> Token:
    """
    Build a token for comparisons; position is ignored by Token equality.
    """
    return Token(type_, value)


def parse_source(source: str) -> tuple:
    """
    Parse a single line of source and return the statement node.
    """
    return Parser(tokenize(source), "<test>").parse()


def eval_line(source: str, scope: Scope | None = None):
    """
    Parse and execute a single line, returning the statement's value.
    """
    interpreter = Interpreter("<test>", scope)
    return interpreter.execute(parse_source(source))
