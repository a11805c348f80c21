"""Statement parsing utilities for the scratch language.

These functions operate on a `scratchlang.parser.parser.Parser` instance
and handle the two statement forms: `let` assignments and bare
expressions.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scratchlang.parser import Parser


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Syntax:
        <assignment> | <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.peek()
    if tok is None:
        parser.error("Expected statement, but reached end of input")
    if tok.type == 'LET':
        return parser.parse_assignment()
    expr_node = parser.expr()
    return ('expr_stmt', expr_node, expr_node[-1])


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse a variable assignment.

    Syntax:
        let <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('assign', name, expression_node, line_number)
    """
    tok = parser.eat('LET')
    name_tok = parser.eat('ID')
    parser.eat('EQUALS')
    value_expr = parser.expr()
    return ('assign', name_tok.value, value_expr, tok.line)
