import rlparse.version
from _rlparse.codegen import (
    ModuleVerificationError,
    UnsupportedExpressionError,
    compile_expression,
)
from _rlparse.reader import (
    ExpressionKind,
    Identifier,
    InvalidNumericLiteral,
    Number,
    NumericLiteralFailure,
    ParseError,
    PushbackError,
    Reader,
    UnexpectedCharacter,
    UnexpectedEnd,
    UnsupportedExpression,
    read_expressions,
)
from _rlparse.repl import run_repl

__version__ = rlparse.version.version

__all__ = [
    "ExpressionKind",
    "Identifier",
    "InvalidNumericLiteral",
    "ModuleVerificationError",
    "Number",
    "NumericLiteralFailure",
    "ParseError",
    "PushbackError",
    "Reader",
    "UnexpectedCharacter",
    "UnexpectedEnd",
    "UnsupportedExpression",
    "UnsupportedExpressionError",
    "compile_expression",
    "read_expressions",
    "run_repl",
]
