"""Program runner.

A program is multi-line source text. Each non-blank line holds exactly one
statement and is lexed, parsed and executed in order against a single
:class:`~scratchlang.interpreter.Scope` shared by the whole run. The result
of the run is whatever the last statement produced: a value for an
expression statement, None for an assignment or an empty program.

The first error aborts the run. It is re-raised with the failing line
number and file filled in.


File: program.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Callable, Iterator

from scratchlang.exceptions import ScratchError
from scratchlang.interpreter import Interpreter, Scope
from scratchlang.lexer import Token, tokenize
from scratchlang.parser import Parser


def iter_lines(source: str) -> Iterator[tuple[int, str]]:
    """
    Yield (line number, trimmed text) for every non-blank line.
    """
    for line_num, line in enumerate(source.split("\n"), start=1):
        text = line.strip(' \t\r')
        if text:
            yield line_num, text


def compile_line(text: str, line_num: int = 1, file: str = "<string>") -> tuple[list[Token], tuple]:
    """
    Lex and parse one line of source.

    Returns:
        tuple: The token list and the statement node.
    """
    tokens = tokenize(text, line_num)
    statement = Parser(tokens, file).parse()
    return tokens, statement


def run_program(
    source: str,
    file: str = "<string>",
    scope: Scope | None = None,
    on_compile: Callable[[int, list[Token], tuple], None] | None = None,
):
    """
    Run a multi-line program and return the value of its last statement.

    Args:
        source (str): Program text.
        file (str): Name used in error messages.
        scope (Scope | None): Scope to run against. A fresh one is created if omitted.
        on_compile (callable | None): Called with (line number, tokens, statement)
            before each statement is executed.

    Returns:
        int | str | None: The final value, or None.

    Raises:
        ScratchError: The first lex, parse or evaluation error.
    """
    interpreter = Interpreter(file, scope)
    result = None
    for line_num, text in iter_lines(source):
        try:
            tokens, statement = compile_line(text, line_num, file)
            if on_compile is not None:
                on_compile(line_num, tokens, statement)
            result = interpreter.execute(statement)
        except ScratchError as e:
            raise e.locate(line_num, file)
    return result
