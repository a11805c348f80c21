"""
Main parser entry point for the scratch language.

This module defines the `Parser` class, which holds the token cursor and
coordinates parsing. The actual parsing routines are split across
`scratchlang.parser.expressions` and `scratchlang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from scratchlang.exceptions import ParseException
from scratchlang.lexer import Token, describe

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Scratch language parser."""

    def __init__(self, tokens: list[Token], file: str = "<string>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[0] if self.tokens else None
        self.source_file = file
        self.line = self.tokens[0].line if self.tokens else None

    def peek(self) -> Token | None:
        """
        Return the current token without consuming it.
        """
        return self.curr_token

    def advance(self) -> Token | None:
        """
        Consume and return the current token, or None if the stream is empty.
        """
        tok = self.curr_token
        if tok is not None:
            self.line = tok.line
            self.position += 1
            self.curr_token = (
                self.tokens[self.position] if self.position < len(self.tokens) else None
            )
        return tok

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Raises:
            ParseException: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok is None or tok.type != token_type:
            self.error(f"Expected token of type {token_type}, but got {describe(tok)}", tok)
        return self.advance()

    def error(self, detail: str, tok: Token | None = None):
        """
        Raise a ParseException positioned at `tok`, or at the last line seen.
        """
        if tok is not None:
            raise ParseException(detail, line=tok.line, column=tok.column, file=self.source_file)
        raise ParseException(detail, line=self.line, file=self.source_file)

    # Expression wrappers
    def term(self) -> tuple:
        """
        Parse a term: a literal or a variable reference.
        """
        return _expr.parse_term(self)

    def expr(self) -> tuple:
        """
        Parse an expression of one term or two terms joined by an operator.
        """
        return _expr.parse_expr(self)

    # Statement wrappers
    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_assignment(self) -> tuple:
        """
        Parse a `let` assignment statement.
        """
        return _stmt.parse_assignment(self)

    def parse(self) -> tuple:
        """
        Parse exactly one statement and require the token stream to be spent.
        """
        statement = self.statement()
        if self.curr_token is not None:
            self.error(f"Unexpected trailing token {describe(self.curr_token)}", self.curr_token)
        return statement
