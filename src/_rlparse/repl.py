import sys

from _rlparse.codegen import (
    ModuleVerificationError,
    UnsupportedExpressionError,
    compile_expression,
)
from _rlparse.reader import ParseError, read_expressions


def report(result, output_stream):
    """
    Compile and print one result of the reader, or print the reason it
    could not be compiled.
    """
    if isinstance(result, ParseError):
        print(f"error: {result}", file=output_stream)
        return
    try:
        module = compile_expression(result)
    except (UnsupportedExpressionError, ModuleVerificationError) as err:
        print(f"error: {err}", file=output_stream)
        return
    print(module, file=output_stream)


def run_repl(input_stream, output_stream, prompt="rl> "):
    """
    Read lines from input_stream until it ends. Each expression on a line
    is compiled and its module printed to output_stream, expressions which
    fail to read or compile are reported and the loop continues.

    :param input_stream: Text stream of source lines, eg. sys.stdin.
    :param output_stream: Text stream for prompts, modules and errors.
    :param prompt: Printed before each line is read.
    """
    while True:
        output_stream.write(prompt)
        output_stream.flush()
        line = input_stream.readline()
        if not line:
            break
        for result in read_expressions(line):
            report(result, output_stream)


def main():
    try:
        run_repl(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        pass
    print(file=sys.stdout)
