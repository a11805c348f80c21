"""Lexer for the scratch language.

The lexer walks the source one character at a time. Operator characters
(``+``, ``*``, ``=``) become tokens as soon as they are seen, a double quote
starts a string literal that runs to the next double quote, and everything
else is collected in a pending buffer. The buffer is flushed on whitespace,
before any operator or string, and at the end of the input; :func:`classify`
then decides whether the buffered text is a number, the ``let`` keyword or an
identifier.

Each :class:`Token` records the line and column it started on so errors can
point at the offending text.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re

from scratchlang.exceptions import LexException


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

NUMBER_RE = re.compile(r'-?[0-9]+')

KEYWORDS = {
    'let': 'LET',
}

SINGLE_CHAR_TOKENS = {
    '+': 'PLUS',
    '*': 'STAR',
    '=': 'EQUALS',
}

WHITESPACE = ' \t\r\n'


class Token:
    """
    Represents a lexical token with a type and value.
    """
    __slots__ = ('type', 'value', 'line', 'column')

    def __init__(self, type_, value=None, line=1, column=None):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): Source line the token was read from.
            column (int | None): 1-based column of the first character.
        """
        self.type = type_
        self.value = value
        self.line = line
        self.column = column

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        if self.value is None:
            return f"Token({self.type}, line={self.line})"
        return f"Token({self.type}, {self.value!r}, line={self.line})"


def classify(text: str, line: int = 1, column: int | None = None) -> Token:
    """
    Turn flushed buffer text into a token.

    Parameters:
        text (str): Non-empty buffered text.
        line (int): Source line, for the token and for errors.
        column (int | None): Column where the text started.

    Returns:
        Token: A NUMBER, LET or ID token.

    Raises:
        LexException: If the text looks numeric but is not a valid 64-bit integer.
    """
    if NUMBER_RE.fullmatch(text):
        value = int(text)
        if not INT64_MIN <= value <= INT64_MAX:
            raise LexException(
                f"Integer literal '{text}' out of range", line=line, column=column
            )
        return Token('NUMBER', value, line, column)

    if text[0] in '0123456789':
        raise LexException(f"Malformed number '{text}'", line=line, column=column)

    if text in KEYWORDS:
        return Token(KEYWORDS[text], None, line, column)

    return Token('ID', text, line, column)


class Lexer:
    """
    Single-pass character lexer.
    """

    def __init__(self, source: str, line: int = 1):
        """
        Parameters:
            source (str): Source text, normally a single line.
            line (int): Line number to stamp on tokens and errors.
        """
        self.source = source
        self.line = line
        self.tokens: list[Token] = []
        self.buffer: list[str] = []
        self.buffer_start: int | None = None

    def flush(self) -> None:
        """
        Classify the pending buffer, if any, and emit its token.
        """
        if not self.buffer:
            return
        text = ''.join(self.buffer)
        self.tokens.append(classify(text, self.line, self.buffer_start))
        self.buffer.clear()
        self.buffer_start = None

    def tokens_list(self) -> list[Token]:
        """
        Convert the source into a list of tokens.

        Returns:
            list[Token]: Tokens in left-to-right order.

        Raises:
            LexException: On a control character, an unterminated string or
                malformed numeric text.
        """
        source = self.source
        position = 0
        length = len(source)

        while position < length:
            char = source[position]
            column = position + 1

            if char in WHITESPACE:
                self.flush()
            elif char in SINGLE_CHAR_TOKENS:
                self.flush()
                self.tokens.append(Token(SINGLE_CHAR_TOKENS[char], None, self.line, column))
            elif char == '"':
                self.flush()
                end = source.find('"', position + 1)
                if end == -1:
                    raise LexException(
                        "Unterminated string literal", line=self.line, column=column
                    )
                self.tokens.append(Token('STRING', source[position + 1:end], self.line, column))
                position = end
            elif ord(char) < 32 or ord(char) == 127:
                raise LexException(
                    f"Unexpected character {char!r}", line=self.line, column=column
                )
            else:
                if not self.buffer:
                    self.buffer_start = column
                self.buffer.append(char)
            position += 1

        self.flush()
        tokens, self.tokens = self.tokens, []
        return tokens


def tokenize(code: str, line: int = 1) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        line (int): Line number the code comes from.

    Returns:
        list[Token]: A list of Token instances.
    """
    return Lexer(code, line).tokens_list()


def describe(tok: Token | None) -> str:
    """
    Human readable description of a token for error messages.
    """
    if tok is None:
        return "end of input"
    if tok.value is None:
        return tok.type
    return f"{tok.type} {tok.value!r}"
