import numpy as np

from _rlparse.reader.classifier import (
    is_digit,
    is_identifier_continue,
    is_identifier_start,
    is_whitespace,
)
from _rlparse.reader.cursor import Cursor
from _rlparse.reader.errors import (
    InvalidNumericLiteral,
    NumericLiteralFailure,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEnd,
    UnsupportedExpression,
)
from _rlparse.reader.expression import ExpressionKind, Identifier, Number

UINT64_MAX = int(np.iinfo(np.uint64).max)


def parse_uint64(text):
    """
    Convert the text of a numeric literal to a numpy.uint64.

    :returns: Tuple of the value and None, or None and the
        NumericLiteralFailure describing why text is not an unsigned
        64-bit integer.
    """
    if not text:
        return None, NumericLiteralFailure.EMPTY
    if not all(is_digit(c) for c in text):
        return None, NumericLiteralFailure.INVALID_DIGIT
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(UINT64_MAX)):
        return None, NumericLiteralFailure.OVERFLOW
    value = int(digits)
    if value > UINT64_MAX:
        return None, NumericLiteralFailure.OVERFLOW
    return np.uint64(value), None


class Reader:
    """
    Reads expressions from one source string. The reader is an iterator
    where each item is either an expression (Identifier or Number) or a
    ParseError describing why the next expression could not be read.
    Errors do not end the iteration, reading continues after the failed
    expression.

    >>> [type(result).__name__ for result in Reader("foo 42 @")]
    ['Identifier', 'Number', 'UnexpectedCharacter']

    A reader is created for each source and can only be iterated once.
    """

    def __init__(self, source):
        """
        :param source: The str to read expressions from.
        """
        self.cursor = Cursor(source)

    @property
    def exhausted(self):
        """
        True once the reader has read to the end of the source.
        """
        return self.cursor.at_end()

    def __iter__(self):
        return self

    def __next__(self):
        self.skip_whitespace()
        if self.exhausted:
            raise StopIteration
        return self.read_expression()

    def expressions(self, strict=False):
        """
        Generate the remaining results of the reader.

        :param strict: If True, raise the first ParseError encountered
            instead of generating it.
        """
        for result in self:
            if strict and isinstance(result, ParseError):
                raise result
            yield result

    def skip_whitespace(self):
        char = self.cursor.read()
        while char is not None:
            if not is_whitespace(char):
                self.cursor.unread()
                break
            char = self.cursor.read()

    def read_expression(self):
        """
        Read the next expression following any whitespace.

        :returns: Identifier, Number or a ParseError.
        """
        self.skip_whitespace()
        start = self.cursor.position
        char = self.cursor.peek()

        if char is None:
            return UnexpectedEnd(start)
        if char == "(":
            return self.read_compound()
        if is_identifier_start(char):
            return self.read_identifier()
        if is_digit(char):
            return self.read_number()

        # Step over the character so that the next read makes progress.
        self.cursor.read()
        return UnexpectedCharacter(char, start)

    def read_run(self, predicate):
        """
        Read characters while predicate holds, leaving the cursor on the
        first character that fails it.

        :returns: The str of characters read.
        """
        start = self.cursor.position
        char = self.cursor.read()
        while char is not None:
            if not predicate(char):
                self.cursor.unread()
                break
            char = self.cursor.read()
        return self.cursor.source[start : self.cursor.position]

    def read_identifier(self):
        return Identifier(self.read_run(is_identifier_continue))

    def read_number(self):
        """
        Read an unsigned integer literal, yields Number(123) for source
        "123" and InvalidNumericLiteral for "123foo".
        """
        start = self.cursor.position
        # Eagerly read all identifier characters so that "123foo" is read
        # as one invalid literal and not a number followed by an identifier.
        text = self.read_run(is_identifier_continue)
        value, failure = parse_uint64(text)
        if failure is not None:
            return InvalidNumericLiteral(text, failure, start)
        return Number(value)

    def read_compound(self):
        """
        Read an expression starting with '('. List expressions are not
        part of the grammar yet, so the opening parenthesis is consumed
        and UnsupportedExpression is returned.
        """
        start = self.cursor.position
        self.cursor.read()
        return UnsupportedExpression(ExpressionKind.LIST, start)


def read_expressions(source):
    """
    :returns: List of every expression and ParseError read from source.
    """
    return list(Reader(source))
