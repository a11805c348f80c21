"""
Expression parsing utilities for the scratch language.

These functions operate on a `scratchlang.parser.parser.Parser` instance.
An expression is either a single term or exactly two terms joined by one
operator; there is no chaining and no precedence.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import TYPE_CHECKING

from scratchlang.lexer import describe
from scratchlang.operations import TOKEN_OPS

if TYPE_CHECKING:
    from scratchlang.parser import Parser


def parse_term(parser: 'Parser') -> tuple:
    """
    Parse a term.

    Syntax:
        <number> | <string> | <identifier>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('number', value, line), ('string', value, line)
               or ('ident', name, line)
    """
    tok = parser.curr_token
    if tok is None:
        parser.error("Expected term, but reached end of input")

    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return ('number', tok.value, tok.line)

    if tok.type == 'STRING':
        parser.eat('STRING')
        return ('string', tok.value, tok.line)

    if tok.type == 'ID':
        parser.eat('ID')
        return ('ident', tok.value, tok.line)

    parser.error(f"Expected term, got: {describe(tok)}", tok)


def parse_expr(parser: 'Parser') -> tuple:
    """
    Parse an expression.

    Syntax:
        <term> [ ('+' | '*') <term> ]

    Args:
        parser: The parser instance.

    Returns:
        tuple: the term node itself, or (Op, left, right, line)
    """
    left = parser.term()
    op_tok = parser.curr_token
    if op_tok is None:
        return left

    op = TOKEN_OPS.get(op_tok.type)
    if op is None:
        parser.error(f"Expected operation, got: {describe(op_tok)}", op_tok)
    parser.eat(op_tok.type)

    right = parser.term()
    return (op, left, right, op_tok.line)
