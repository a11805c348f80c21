"""Tests for the character lexer and buffer classification."""

import pytest

from scratchlang.exceptions import LexException
from scratchlang.lexer import Token, classify, tokenize
from scratchlang.tests.utils import tok


def test_numbers_and_operators():
    assert tokenize("21 + 2") == [tok('NUMBER', 21), tok('PLUS'), tok('NUMBER', 2)]
    assert tokenize("3 * 2") == [tok('NUMBER', 3), tok('STAR'), tok('NUMBER', 2)]


def test_let_statement():
    assert tokenize("let x = 3 * 2") == [
        tok('LET'),
        tok('ID', 'x'),
        tok('EQUALS'),
        tok('NUMBER', 3),
        tok('STAR'),
        tok('NUMBER', 2),
    ]


def test_operators_without_spaces_keep_source_order():
    assert tokenize("21+2") == [tok('NUMBER', 21), tok('PLUS'), tok('NUMBER', 2)]
    assert tokenize("x=y*3") == [
        tok('ID', 'x'), tok('EQUALS'), tok('ID', 'y'), tok('STAR'), tok('NUMBER', 3),
    ]


def test_string_literal_kept_verbatim():
    assert tokenize('21 + "hello world"') == [
        tok('NUMBER', 21), tok('PLUS'), tok('STRING', 'hello world'),
    ]
    assert tokenize('"a+b*c = let"') == [tok('STRING', 'a+b*c = let')]
    assert tokenize('""') == [tok('STRING', '')]


def test_string_flushes_pending_word():
    assert tokenize('abc"def"') == [tok('ID', 'abc'), tok('STRING', 'def')]


def test_unterminated_string():
    with pytest.raises(LexException) as excinfo:
        tokenize('"hello', line=4)
    assert excinfo.value.line == 4
    assert excinfo.value.column == 1
    assert excinfo.value.category == "lex"


def test_whitespace_only_yields_nothing():
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_tabs_and_newlines_separate_tokens():
    assert tokenize("1\t+\n2") == [tok('NUMBER', 1), tok('PLUS'), tok('NUMBER', 2)]


def test_columns_and_line_recorded():
    tokens = tokenize('let name = "x"', line=7)
    assert [t.column for t in tokens] == [1, 5, 10, 12]
    assert all(t.line == 7 for t in tokens)


def test_control_character_rejected():
    with pytest.raises(LexException) as excinfo:
        tokenize("1 \x00 2")
    assert excinfo.value.column == 3


def test_classify():
    assert classify("42") == Token('NUMBER', 42)
    assert classify("-7") == Token('NUMBER', -7)
    assert classify("let") == Token('LET')
    assert classify("lets") == Token('ID', 'lets')
    assert classify("x1") == Token('ID', 'x1')
    assert classify("-") == Token('ID', '-')


def test_classify_malformed_number():
    with pytest.raises(LexException):
        classify("12abc")


def test_classify_int64_bounds():
    assert classify("9223372036854775807").value == 2 ** 63 - 1
    assert classify("-9223372036854775808").value == -(2 ** 63)
    with pytest.raises(LexException):
        classify("9223372036854775808")


def test_token_equality_ignores_position():
    assert Token('ID', 'x', 1, 1) == Token('ID', 'x', 9, 4)
    assert Token('ID', 'x') != Token('STRING', 'x')
    assert Token('NUMBER', 1) != 1


def test_non_ascii_digits_are_identifiers():
    assert tokenize("٣") == [tok('ID', '٣')]
    assert classify("²x") == Token('ID', '²x')
