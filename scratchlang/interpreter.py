"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser.

1. Execution Model
Statements are executed one at a time via `execute()` and expressions are evaluated
using `eval_expr()`. Both operate over the tuples built by the parser. Executing an
assignment returns None; executing an expression statement returns its value.

2. Environment
Variables live in a :class:`Scope` owned by whoever drives the run and handed to the
interpreter. Only assignment writes to it; evaluating an expression never does.

3. Expression Evaluation
A binary expression evaluates its left term, then its right term, then combines them.
Numbers are 64-bit signed integers. `+` between a number and a string concatenates the
number's decimal text, `+` between two strings concatenates, and `*` between a number and
a string repeats the string.

4. Error Handling
Undefined variables, unsupported operand kinds, negative or oversized repeat counts and integer overflow
are raised as `EvalException` subclasses carrying the line and file.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from scratchlang.exceptions import (
    EvalException,
    UndefinedVariableException,
    UnsupportedOperationException,
)
from scratchlang.lexer import INT64_MAX, INT64_MIN
from scratchlang.operations import Op

# Longest string a repetition may build
MAX_STRING_LENGTH = 2 ** 28


def kind_of(value) -> str:
    """
    Name of the runtime kind of `value`.
    """
    if isinstance(value, str):
        return 'string'
    return 'number'


class Scope:
    """Mapping of variable names to values for one program run."""

    def __init__(self, variables: dict | None = None):
        self._variables = dict(variables) if variables else {}

    def get(self, name: str, line=None, file=None):
        """
        Retrieve a variable's value.

        Raises:
            UndefinedVariableException: If `name` is not bound.
        """
        try:
            return self._variables[name]
        except KeyError:
            raise UndefinedVariableException(name, line, file) from None

    def set(self, name: str, value) -> None:
        """
        Bind `name` to `value`, replacing any earlier binding.
        """
        self._variables[name] = value

    def as_dict(self) -> dict:
        return dict(self._variables)

    def __contains__(self, name) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self):
        return iter(self._variables)

    def __repr__(self) -> str:
        return f"Scope({self._variables!r})"


class Interpreter:
    """Tree-walk interpreter for the scratch language."""

    def __init__(self, file: str = "<string>", scope: Scope | None = None):
        """Initialize the interpreter."""
        self.vars = scope if scope is not None else Scope()
        self.file = file

    def format_expr(self, node) -> str:
        """
        Convert AST back to a readable string for debugging.

        Args:
            node (tuple): An expression or statement node.

        Returns:
            str: A string representation of the node.
        """
        kind = node[0]
        match kind:
            case 'number':
                return str(node[1])
            case 'string':
                return f'"{node[1]}"'
            case 'ident':
                return node[1]
            case Op.ADD | Op.MUL:
                return f"{self.format_expr(node[1])} {kind.symbol} {self.format_expr(node[2])}"
            case 'assign':
                return f"let {node[1]} = {self.format_expr(node[2])}"
            case 'expr_stmt':
                return self.format_expr(node[1])
            case _:
                return f"<{kind}>"

    def _check_int(self, value: int, node) -> int:
        if not INT64_MIN <= value <= INT64_MAX:
            raise EvalException(
                f"Integer overflow in {self.format_expr(node)}", line=node[-1], file=self.file
            )
        return value

    def _unsupported(self, node, lhs, rhs):
        return UnsupportedOperationException(
            node[0].symbol, kind_of(lhs), kind_of(rhs), line=node[-1], file=self.file
        )

    def _add(self, lhs, rhs, node):
        match (kind_of(lhs), kind_of(rhs)):
            case ('number', 'number'):
                return self._check_int(lhs + rhs, node)
            case ('number', 'string'):
                return str(lhs) + rhs
            case ('string', 'number'):
                return lhs + str(rhs)
            case ('string', 'string'):
                return lhs + rhs
        raise self._unsupported(node, lhs, rhs)

    def _mul(self, lhs, rhs, node):
        match (kind_of(lhs), kind_of(rhs)):
            case ('number', 'number'):
                return self._check_int(lhs * rhs, node)
            case ('number', 'string'):
                return self._repeat(rhs, lhs, node)
            case ('string', 'number'):
                return self._repeat(lhs, rhs, node)
        raise self._unsupported(node, lhs, rhs)

    def _repeat(self, text: str, count: int, node) -> str:
        if count < 0:
            raise EvalException(
                f"Cannot repeat a string a negative number of times ({count}) "
                f"in {self.format_expr(node)}",
                line=node[-1],
                file=self.file,
            )
        if len(text) * count > MAX_STRING_LENGTH:
            raise EvalException(
                f"Repeated string would exceed {MAX_STRING_LENGTH} characters "
                f"in {self.format_expr(node)}",
                line=node[-1],
                file=self.file,
            )
        return text * count

    def eval_expr(self, node):
        """
        Evaluate an expression node.

        Args:
            node (tuple): A term or binary expression node.

        Returns:
            int | str: The computed value.
        """
        kind = node[0]
        match kind:
            case 'number' | 'string':
                return node[1]
            case 'ident':
                return self.vars.get(node[1], node[-1], self.file)
            case Op.ADD:
                lhs = self.eval_expr(node[1])
                rhs = self.eval_expr(node[2])
                return self._add(lhs, rhs, node)
            case Op.MUL:
                lhs = self.eval_expr(node[1])
                rhs = self.eval_expr(node[2])
                return self._mul(lhs, rhs, node)
        raise EvalException(f"Invalid expression node: {node}", line=node[-1], file=self.file)

    def execute(self, statement: tuple):
        """
        Execute a single statement.

        Args:
            statement (tuple): An 'assign' or 'expr_stmt' node.

        Returns:
            int | str | None: The value of an expression statement, None for an assignment.
        """
        kind = statement[0]
        if kind == 'assign':
            _, name, expr_node, _ = statement
            self.vars.set(name, self.eval_expr(expr_node))
            return None
        if kind == 'expr_stmt':
            return self.eval_expr(statement[1])
        raise EvalException(f"Unknown statement: {statement}", line=statement[-1], file=self.file)
