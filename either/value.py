"""
Either type for values that are exactly one of two possibilities.

An Either is a Left or a Right. By convention Left carries an error or
alternative value and Right carries the success or primary value. Neither
side may hold None, and the variant never changes after construction.

Example:
    >>> def parse_port(raw: str) -> Either[str, int]:
    ...     return cond_lazy(raw.isdigit(), lambda: int(raw), lambda: f"bad port: {raw}")
    ...
    >>> parse_port("8080").fold(lambda err: -1, lambda port: port)
    8080
    >>> match parse_port("http"):
    ...     case Right(port):
    ...         print(port)
    ...     case Left(err):
    ...         print(err)
    ...
    bad port: http
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never

from either.errors import InvalidArgumentError, NoSuchElementError
from either.logging import get_library_logger

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_library_logger(__name__)


def _require_value(value: object, side: str) -> None:
    if value is None:
        logger.debug("Rejected absent value", side=side)
        raise InvalidArgumentError(f"{side} value must not be None")


@dataclass(frozen=True, slots=True)
class Right[R]:
    """
    The Right variant of an Either.

    Attributes:
        value: The right value, never None.
    """

    value: R

    def __post_init__(self) -> None:
        """Reject an absent value."""
        _require_value(self.value, "Right")

    def is_right(self) -> bool:
        """Return True if this is a Right."""
        return True

    def is_left(self) -> bool:
        """Return False if this is a Right."""
        return False

    def get_right(self) -> R:
        """Return the right value."""
        return self.value

    def get_left(self) -> Never:
        """
        Raise an error since this is a Right.

        Raises:
            NoSuchElementError: Always, since Right has no left value.
        """
        logger.debug("Accessed missing side", side="left", variant="Right")
        raise NoSuchElementError("get_left() on Right")

    def get_right_or_else_get(self, _fallback: Callable[[Any], R]) -> R:
        """
        Return the right value (the fallback is never called).

        Args:
            _fallback: Function of the left value (not used).

        Returns:
            The contained right value.
        """
        return self.value

    def get_left_or_else_get[L](self, fallback: Callable[[R], L]) -> L:
        """
        Derive a left value from the right value.

        Args:
            fallback: Function applied to the right value.

        Returns:
            The result of the fallback.
        """
        return fallback(self.value)

    def fold[U](self, _left_mapper: Callable[[Any], U], right_mapper: Callable[[R], U]) -> U:
        """
        Collapse the Either by applying right_mapper to the right value.

        Args:
            _left_mapper: Function for the left value (not used).
            right_mapper: Function applied to the right value.

        Returns:
            The result of right_mapper.
        """
        return right_mapper(self.value)

    def bimap[LL, RR](
        self,
        _left_mapper: Callable[[Any], LL],
        right_mapper: Callable[[R], RR],
    ) -> Right[RR]:
        """
        Map the right value into a new Right; self is left untouched.

        Args:
            _left_mapper: Function for the left value (not used).
            right_mapper: Function applied to the right value.

        Returns:
            New Right holding the mapped value.

        Raises:
            InvalidArgumentError: If right_mapper returns None.
        """
        return Right(right_mapper(self.value))

    def consume(
        self,
        _left_consumer: Callable[[Any], object],
        right_consumer: Callable[[R], object],
    ) -> None:
        """Pass the right value to right_consumer."""
        right_consumer(self.value)


@dataclass(frozen=True, slots=True)
class Left[L]:
    """
    The Left variant of an Either.

    Attributes:
        value: The left value, never None.
    """

    value: L

    def __post_init__(self) -> None:
        """Reject an absent value."""
        _require_value(self.value, "Left")

    def is_right(self) -> bool:
        """Return False if this is a Left."""
        return False

    def is_left(self) -> bool:
        """Return True if this is a Left."""
        return True

    def get_right(self) -> Never:
        """
        Raise an error since this is a Left.

        Raises:
            NoSuchElementError: Always, since Left has no right value.
        """
        logger.debug("Accessed missing side", side="right", variant="Left")
        raise NoSuchElementError("get_right() on Left")

    def get_left(self) -> L:
        """Return the left value."""
        return self.value

    def get_right_or_else_get[R](self, fallback: Callable[[L], R]) -> R:
        """
        Derive a right value from the left value.

        Args:
            fallback: Function applied to the left value.

        Returns:
            The result of the fallback.
        """
        return fallback(self.value)

    def get_left_or_else_get(self, _fallback: Callable[[Any], L]) -> L:
        """Return the left value (the fallback is never called)."""
        return self.value

    def fold[U](self, left_mapper: Callable[[L], U], _right_mapper: Callable[[Any], U]) -> U:
        """
        Collapse the Either by applying left_mapper to the left value.

        Args:
            left_mapper: Function applied to the left value.
            _right_mapper: Function for the right value (not used).

        Returns:
            The result of left_mapper.
        """
        return left_mapper(self.value)

    def bimap[LL, RR](
        self,
        left_mapper: Callable[[L], LL],
        _right_mapper: Callable[[Any], RR],
    ) -> Left[LL]:
        """
        Map the left value into a new Left; self is left untouched.

        Args:
            left_mapper: Function applied to the left value.
            _right_mapper: Function for the right value (not used).

        Returns:
            New Left holding the mapped value.

        Raises:
            InvalidArgumentError: If left_mapper returns None.
        """
        return Left(left_mapper(self.value))

    def consume(
        self,
        left_consumer: Callable[[L], object],
        _right_consumer: Callable[[Any], object],
    ) -> None:
        """Pass the left value to left_consumer."""
        left_consumer(self.value)


# Type alias for Either
type Either[L, R] = Left[L] | Right[R]


def right[R](value: R) -> Right[R]:
    """
    Create a Right.

    Args:
        value: The right value.

    Returns:
        A Right containing the value.

    Raises:
        InvalidArgumentError: If value is None.
    """
    return Right(value)


def left[L](value: L) -> Left[L]:
    """
    Create a Left.

    Args:
        value: The left value.

    Returns:
        A Left containing the value.

    Raises:
        InvalidArgumentError: If value is None.
    """
    return Left(value)


def cond[L, R](predicate: bool, right_value: R, left_value: L) -> Either[L, R]:
    """
    Create a Right if predicate holds, otherwise a Left.

    Both values are evaluated by the caller; use cond_lazy to defer them.

    Args:
        predicate: Selects the variant.
        right_value: Value wrapped when predicate is true.
        left_value: Value wrapped when predicate is false.

    Returns:
        Right(right_value) or Left(left_value).
    """
    if predicate:
        return right(right_value)
    return left(left_value)


def cond_lazy[L, R](
    predicate: bool,
    right_supplier: Callable[[], R],
    left_supplier: Callable[[], L],
) -> Either[L, R]:
    """Like cond, but only the supplier matching predicate is called."""
    if predicate:
        return right(right_supplier())
    return left(left_supplier())
