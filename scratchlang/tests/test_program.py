"""Tests for running multi-line programs."""

import pytest

from scratchlang.exceptions import (
    LexException,
    ParseException,
    ScratchError,
    UndefinedVariableException,
)
from scratchlang.interpreter import Scope
from scratchlang.program import iter_lines, run_program


def test_program_result_is_last_statement():
    source = (
        "let x = 3 * 2\n"
        "let y = x + 5\n"
        "x + y\n"
    )
    assert run_program(source) == 17


def test_program_ending_in_assignment_has_no_value():
    assert run_program("1 + 1\nlet z = 4") is None


def test_empty_program_has_no_value():
    assert run_program("") is None
    assert run_program("\n   \n\t\n") is None


def test_blank_lines_and_indentation_skipped():
    source = (
        "\n"
        "   let greeting = \"hi \"\n"
        "\n"
        "      greeting * 2   \n"
        "\n"
    )
    assert run_program(source) == "hi hi "


def test_scope_persists_across_lines():
    scope = Scope()
    run_program("let a = 1\nlet b = a + 1", scope=scope)
    assert scope.as_dict() == {"a": 1, "b": 2}


def test_seeded_scope():
    assert run_program("21 + x", scope=Scope({"x": 2})) == 23


def test_runs_are_independent():
    source = "let n = 2\nn * 10"
    assert run_program(source) == run_program(source) == 20
    with pytest.raises(UndefinedVariableException):
        run_program("n")


def test_unbound_variable_fails_with_line():
    with pytest.raises(UndefinedVariableException) as excinfo:
        run_program("let a = 1\n\nx + 1", file="prog.txt")
    err = excinfo.value
    assert err.line == 3
    assert err.file == "prog.txt"
    assert "on line 3" in str(err)
    assert "in prog.txt" in str(err)


def test_first_error_aborts_run():
    scope = Scope()
    with pytest.raises(ParseException) as excinfo:
        run_program("let a = 1\nlet = 2\nlet b = 3", scope=scope)
    assert excinfo.value.line == 2
    assert "b" not in scope


@pytest.mark.parametrize(
    "source, category",
    [
        ('"open', "lex"),
        ("12ab + 1", "lex"),
        ("let 1 = 2", "parse"),
        ("1 + 2 3", "parse"),
        ("nope", "eval"),
        ('"a" * "b"', "eval"),
    ],
)
def test_error_categories(source, category):
    with pytest.raises(ScratchError) as excinfo:
        run_program("let ok = 1\n" + source)
    assert excinfo.value.category == category
    assert excinfo.value.line == 2


def test_lex_error_on_later_line():
    with pytest.raises(LexException) as excinfo:
        run_program('1\n2\n"x')
    assert excinfo.value.line == 3


def test_on_compile_sees_each_statement():
    seen = []
    run_program("let a = 1\n\na + 2", on_compile=lambda n, toks, stmt: seen.append((n, len(toks), stmt[0])))
    assert seen == [(1, 4, 'assign'), (3, 3, 'expr_stmt')]


def test_iter_lines():
    assert list(iter_lines(" a \n\n b")) == [(1, "a"), (3, "b")]


def test_only_newlines_separate_lines():
    with pytest.raises(LexException) as excinfo:
        run_program("1\x0c2")
    assert excinfo.value.line == 1
    with pytest.raises(LexException):
        run_program("let a = 1\n2\x0b")
    assert run_program("let a = 1\r\n\r\na + 1\r\n") == 2
    with pytest.raises(UndefinedVariableException) as excinfo:
        run_program("1 \nmissing")
    assert excinfo.value.line == 2
