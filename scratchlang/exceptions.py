"""Errors.

Every failure raised by the lexer, parser or interpreter derives from
:class:`ScratchError`. The ``category`` attribute tells the three stages
apart (``lex``, ``parse``, ``eval``) and each error carries the line,
column and file it was raised for when those are known.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ScratchError(Exception):
    """
    Base error for the scratch language.
    """
    category = "error"

    def __init__(self, detail, line=None, column=None, file=None):
        self.detail = detail
        self.line = line
        self.column = column
        self.file = file
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.detail
        if self.line is not None:
            message += f" on line {self.line}"
            if self.column is not None:
                message += f", column {self.column}"
        if self.file is not None:
            message += f" in {self.file}"
        return message

    def __str__(self) -> str:
        return self._format()

    def locate(self, line=None, file=None) -> "ScratchError":
        """
        Fill in the line and file if they are still unknown.

        Returns:
            ScratchError: The same error, for re-raising.
        """
        if self.line is None and line is not None:
            self.line = line
        if self.file is None and file is not None:
            self.file = file
        self.args = (self._format(),)
        return self


class LexException(ScratchError):
    """
    Error for source text that cannot be split into tokens.
    """
    category = "lex"


class ParseException(ScratchError, SyntaxError):
    """
    Error for a token stream that does not match the grammar.
    """
    category = "parse"


class EvalException(ScratchError, RuntimeError):
    """
    Error raised while evaluating a statement.
    """
    category = "eval"


class UndefinedVariableException(EvalException):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line=line, file=file)


class UnsupportedOperationException(EvalException):
    """
    Error for an operator applied to operand kinds it has no rule for.
    """
    def __init__(self, op, left_kind, right_kind, line=None, file=None):
        self.op = op
        self.left_kind = left_kind
        self.right_kind = right_kind
        super().__init__(
            f"Unsupported operation '{op}' between {left_kind} and {right_kind}",
            line=line,
            file=file,
        )
