"""Either: a value that is exactly one of Left or Right."""

from either.errors import EitherError, InvalidArgumentError, NoSuchElementError
from either.value import Either, Left, Right, cond, cond_lazy, left, right

__all__ = [
    "Either",
    "EitherError",
    "InvalidArgumentError",
    "Left",
    "NoSuchElementError",
    "Right",
    "cond",
    "cond_lazy",
    "left",
    "right",
]
