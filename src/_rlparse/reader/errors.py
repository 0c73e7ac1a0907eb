from enum import Enum, auto, unique


@unique
class NumericLiteralFailure(Enum):
    """
    The reason a token that was read as a number could not be converted
    to an unsigned 64-bit integer.
    """

    EMPTY = auto()
    INVALID_DIGIT = auto()
    OVERFLOW = auto()

    def describe(self):
        return {
            NumericLiteralFailure.EMPTY: "cannot parse integer from empty string",
            NumericLiteralFailure.INVALID_DIGIT: "invalid digit found in string",
            NumericLiteralFailure.OVERFLOW: "number too large to fit in 64 bits",
        }[self]


class ParseError(Exception):
    """
    Base class of the failures produced by the expression reader. A
    ParseError is returned (not raised) by the reader so that the rest of
    the input can still be read, see Reader.read_expression.

    :param position: Offset in the source where the failing expression
        started.
    """

    def __init__(self, message, position):
        super().__init__(message)
        self.position = position

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class UnexpectedCharacter(ParseError):
    """
    The next character cannot begin any known expression.
    """

    def __init__(self, character, position):
        super().__init__(
            f"Unexpected character {character!r} at {position}", position
        )
        self.character = character


class UnexpectedEnd(ParseError):
    """
    Input ended where an expression was expected.
    """

    def __init__(self, position):
        super().__init__(f"Unexpected end of input at {position}", position)


class InvalidNumericLiteral(ParseError):
    """
    A token starting with a digit could not be converted to an unsigned
    64-bit integer. The raw text of the token is kept verbatim.
    """

    def __init__(self, text, reason, position):
        super().__init__(
            f"Invalid numeric literal {text!r} at {position}: {reason.describe()}",
            position,
        )
        self.text = text
        self.reason = reason


class UnsupportedExpression(ParseError):
    """
    The input starts an expression form which is reserved by the grammar
    but not yet read by the reader, ie. list expressions starting with '('.
    """

    def __init__(self, kind, position):
        super().__init__(
            f"{kind.name.lower()} expressions are not supported yet, found at {position}",
            position,
        )
        self.kind = kind


class PushbackError(Exception):
    """
    Raised by the cursor when unread is called without a matching read.
    This is an error in the calling code, not in the input, and is never
    returned as a ParseError.
    """

    pass
