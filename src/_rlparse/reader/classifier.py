"""
Character classes of the expression grammar. Each predicate is total,
ie. it accepts any single character as well as None (end of input),
for which it returns False.
"""

WHITESPACE = frozenset(" \t\n")
DIGITS = frozenset("0123456789")
IDENTIFIER_SYMBOLS = frozenset("_!?*-+/=<>")
LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


def is_whitespace(char):
    return char in WHITESPACE


def is_digit(char):
    return char in DIGITS


def is_identifier_start(char):
    """
    Letters, underscore and the operator-like symbols ! ? * - + / = < >.
    """
    return char in LETTERS or char in IDENTIFIER_SYMBOLS


def is_identifier_continue(char):
    return is_identifier_start(char) or is_digit(char)
