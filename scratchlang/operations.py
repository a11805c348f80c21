"""Shared definitions for AST operation identifiers.

This module centralizes the binary operators understood by the parser and
the interpreter. Adding an operator means adding a token type in the lexer,
a member here, an entry in ``TOKEN_OPS`` and an evaluation rule in the
interpreter.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operations.
    """

    ADD = "add"
    MUL = "mul"

    @property
    def symbol(self) -> str:
        """
        Source text of the operator.
        """
        return _SYMBOLS[self]

    def __str__(self) -> str:
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


_SYMBOLS = {
    Op.ADD: "+",
    Op.MUL: "*",
}

# Token type -> operation
TOKEN_OPS = {
    'PLUS': Op.ADD,
    'STAR': Op.MUL,
}


__all__ = ["Op", "TOKEN_OPS"]
