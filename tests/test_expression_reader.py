import hypothesis.strategies as st
import numpy as np
import pytest
from hypothesis import given

from _rlparse.reader import (
    ExpressionKind,
    Identifier,
    InvalidNumericLiteral,
    Number,
    NumericLiteralFailure,
    ParseError,
    Reader,
    UnexpectedCharacter,
    UnexpectedEnd,
    UnsupportedExpression,
    read_expressions,
)

from .generators.source_text import (
    expression_lines,
    identifiers,
    number_literals,
    padded,
    uint64s,
    whitespace,
)


def test_number():
    assert read_expressions("42") == [Number(42)]


def test_number_value_is_uint64():
    (number,) = read_expressions("42")
    assert isinstance(number.value, np.uint64)
    assert number.kind == ExpressionKind.NUMBER


def test_identifier():
    assert read_expressions("foo") == [Identifier("foo")]


def test_number_followed_by_letters():
    (error,) = read_expressions("  123abc")
    assert isinstance(error, InvalidNumericLiteral)
    assert error.text == "123abc"
    assert error.reason == NumericLiteralFailure.INVALID_DIGIT
    assert error.position == 2


def test_unexpected_character():
    assert read_expressions("@") == [UnexpectedCharacter("@", 0)]


@pytest.mark.parametrize("source", ["", " ", "\t\n  \n"])
def test_empty_input(source):
    assert read_expressions(source) == []


def test_max_uint64():
    assert read_expressions("18446744073709551615") == [Number(2**64 - 1)]


def test_overflow():
    (error,) = read_expressions("18446744073709551616")
    assert isinstance(error, InvalidNumericLiteral)
    assert error.text == "18446744073709551616"
    assert error.reason == NumericLiteralFailure.OVERFLOW


def test_leading_zeros():
    assert read_expressions("007") == [Number(7)]


def test_literal_longer_than_int_conversion_limit():
    (error,) = read_expressions("1" * 5000)
    assert isinstance(error, InvalidNumericLiteral)
    assert error.reason == NumericLiteralFailure.OVERFLOW
    assert error.text == "1" * 5000


def test_long_run_of_leading_zeros():
    assert read_expressions("0" * 5000 + "7") == [Number(7)]


def test_zeros_only():
    assert read_expressions("0000") == [Number(0)]


def test_exhausted_does_not_move_cursor():
    reader = Reader("  x")
    assert not reader.exhausted
    assert reader.cursor.position == 0


@pytest.mark.parametrize(
    "source, expected",
    [
        ("a1 2", [Identifier("a1"), Number(2)]),
        ("+ - <=", [Identifier("+"), Identifier("-"), Identifier("<=")]),
        ("set! x 1", [Identifier("set!"), Identifier("x"), Number(1)]),
        ("x\ty\nz", [Identifier("x"), Identifier("y"), Identifier("z")]),
    ],
)
def test_sequences(source, expected):
    assert read_expressions(source) == expected


def test_reading_continues_after_error():
    assert read_expressions("@ 1") == [UnexpectedCharacter("@", 0), Number(1)]


def test_unexpected_character_ends_token():
    assert read_expressions("foo@bar") == [
        Identifier("foo"),
        UnexpectedCharacter("@", 3),
        Identifier("bar"),
    ]


def test_number_stops_at_non_identifier_character():
    assert read_expressions("12)") == [Number(12), UnexpectedCharacter(")", 2)]


def test_list_expressions_are_unsupported():
    results = read_expressions("(a)")
    assert results[0] == UnsupportedExpression(ExpressionKind.LIST, 0)
    assert results[1:] == [Identifier("a"), UnexpectedCharacter(")", 2)]


def test_carriage_return_is_not_whitespace():
    assert read_expressions("1\r\n") == [Number(1), UnexpectedCharacter("\r", 1)]


def test_read_expression_at_end():
    reader = Reader("  ")
    assert reader.read_expression() == UnexpectedEnd(2)


def test_exhausted_is_permanent():
    reader = Reader("x ")
    assert next(reader) == Identifier("x")
    assert not reader.exhausted
    with pytest.raises(StopIteration):
        next(reader)
    assert reader.exhausted
    with pytest.raises(StopIteration):
        next(reader)


def test_reader_is_single_pass():
    reader = Reader("a b")
    assert list(reader) == [Identifier("a"), Identifier("b")]
    assert list(reader) == []


def test_strict_expressions_raise():
    reader = Reader("a 1x b")
    expressions = reader.expressions(strict=True)
    assert next(expressions) == Identifier("a")
    with pytest.raises(InvalidNumericLiteral, match="'1x'"):
        next(expressions)


def test_errors_have_messages():
    for error in read_expressions("@ 99999999999999999999 (") + [UnexpectedEnd(0)]:
        assert isinstance(error, ParseError)
        assert str(error)


@given(uint64s, whitespace, whitespace)
def test_number_literals(value, before, after):
    assert read_expressions(before + str(value) + after) == [Number(value)]


@given(identifiers)
def test_identifiers(identifier):
    assert read_expressions(identifier) == [Identifier(identifier)]


@given(padded(st.one_of(identifiers, number_literals)))
def test_whitespace_does_not_change_token(padded_token):
    assert read_expressions(padded_token) == read_expressions(padded_token.strip())


@given(expression_lines())
def test_lines(line_and_tokens):
    line, tokens = line_and_tokens
    results = read_expressions(line)
    assert len(results) == len(tokens)
    for result, token in zip(results, tokens):
        if isinstance(result, Number):
            assert int(result.value) == int(token)
        else:
            assert result == Identifier(token)


@given(st.text(max_size=30))
def test_every_item_makes_progress(source):
    reader = Reader(source)
    positions = []
    for _ in reader:
        positions.append(reader.cursor.position)
    assert positions == sorted(set(positions))
    assert len(positions) <= len(source)
