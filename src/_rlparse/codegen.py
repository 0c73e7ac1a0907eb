"""
Lowers a single expression read by the reader to an LLVM IR module
containing one function which returns the value of the expression.
"""

import warnings

import llvmlite.binding as llvm
from llvmlite import ir

from _rlparse.reader.expression import Number

INT64_MAX = 2**63 - 1


class UnsupportedExpressionError(Exception):
    """
    Raised when compiling an expression that the code generator cannot
    lower yet, currently anything but a Number.
    """

    pass


class ModuleVerificationError(Exception):
    """
    Raised when a generated module is rejected by the llvm verifier.
    """

    pass


def as_signed_int64(value):
    """
    Reinterpret an unsigned 64-bit value as the signed value with the same
    bit pattern, as llvm integer constants are printed signed.
    """
    value = int(value)
    if value > INT64_MAX:
        warnings.warn(
            f"Literal {value} does not fit in a signed 64-bit integer "
            "and is emitted as its two's complement bit pattern."
        )
        return value - 2**64
    return value


def verify_module(module):
    """
    Parse the textual IR of module with llvm and run the verifier on it.

    :raises ModuleVerificationError: If llvm cannot parse or verify the
        module.
    """
    try:
        llvm.parse_assembly(str(module)).verify()
    except RuntimeError as err:
        raise ModuleVerificationError(
            f"Module {module.name} failed verification: {err}"
        ) from err


def compile_expression(expression, module_name="rl", function_name="foo"):
    """
    Compile an expression to an llvm module with a function taking no
    arguments and returning i64, ie. for Number(42):

        define i64 @"foo"()
        {
        entry:
          ret i64 42
        }

    :param expression: The expression to compile.
    :param module_name: Name of the generated module.
    :param function_name: Name of the generated function.
    :raises UnsupportedExpressionError: If the expression is not a Number.
    :raises ModuleVerificationError: If the generated module is invalid.
    :returns: llvmlite.ir.Module.
    """
    if not isinstance(expression, Number):
        raise UnsupportedExpressionError(
            f"Cannot compile {expression}, only numbers are supported"
        )

    i64 = ir.IntType(64)
    module = ir.Module(name=module_name)
    function = ir.Function(module, ir.FunctionType(i64, []), name=function_name)
    builder = ir.IRBuilder(function.append_basic_block(name="entry"))
    builder.ret(ir.Constant(i64, as_signed_int64(expression.value)))
    verify_module(module)
    return module
