"""
In this module, a reader turns a line of source text into a sequence of
expressions. The reader keeps a cursor into the source and reads one
character at a time. As the grammar is simple (LL(1)), each rule reads at
most one character past the expression it is reading before deciding to
stop, and then steps back over it. This means that one character of
pushback is all the backtracking there is.

Failures to read an expression are returned as ParseError values rather
than raised, so that one malformed expression does not stop the rest of
the line from being read.
"""

from .errors import (
    InvalidNumericLiteral,
    NumericLiteralFailure,
    ParseError,
    PushbackError,
    UnexpectedCharacter,
    UnexpectedEnd,
    UnsupportedExpression,
)
from .expression import ExpressionKind, Identifier, Number
from .expression_reader import Reader, read_expressions

__all__ = [
    "ExpressionKind",
    "Identifier",
    "InvalidNumericLiteral",
    "Number",
    "NumericLiteralFailure",
    "ParseError",
    "PushbackError",
    "Reader",
    "UnexpectedCharacter",
    "UnexpectedEnd",
    "UnsupportedExpression",
    "read_expressions",
]
