from dataclasses import dataclass
from enum import Enum, auto, unique

import numpy as np


@unique
class ExpressionKind(Enum):
    IDENTIFIER = auto()
    NUMBER = auto()
    # Reserved for parenthesized expressions, which the reader does not
    # read yet, see Reader.read_compound.
    LIST = auto()


@dataclass(frozen=True)
class Identifier:
    """
    A non-empty run of identifier characters, eg. Identifier("foo") for
    the input "foo".
    """

    text: str

    @property
    def kind(self):
        return ExpressionKind.IDENTIFIER


@dataclass(frozen=True)
class Number:
    """
    An unsigned 64-bit integer literal, eg. Number(42) for the input "42".
    The value is always stored as a numpy.uint64.
    """

    value: np.uint64

    def __post_init__(self):
        if not isinstance(self.value, np.uint64):
            object.__setattr__(self, "value", np.uint64(self.value))

    @property
    def kind(self):
        return ExpressionKind.NUMBER
