"""Precondition helpers.

Precondition violations are programmer errors: each helper raises a built-in
exception with a descriptive message and never returns a failure flag. They
are kept apart from ordinary move failures, which are plain ``False`` results.
"""

from typing import Any, Optional, Tuple, Type, TypeVar, Union

from zelda_grid.directions import Direction

T = TypeVar("T")


def require_not_none(value: Optional[T], name: str = "value") -> T:
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


def require_instance(
    value: Any, kind: Union[Type[Any], Tuple[Type[Any], ...]], name: str = "value"
) -> None:
    """Raise ``TypeError`` unless ``value`` is an instance of ``kind``."""
    require_not_none(value, name)
    if not isinstance(value, kind):
        raise TypeError(f"{name} must be {kind}, got {type(value).__name__}")


def require_int(value: Any, name: str = "value") -> int:
    """Return ``value`` if it is an integer (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {value!r}")
    return value


def require_in_range(value: int, upper: int, name: str = "value") -> int:
    """Return ``value`` if ``0 <= value < upper``; raise ``IndexError`` otherwise."""
    require_int(value, name)
    if not 0 <= value < upper:
        raise IndexError(f"{name}={value} is not in [0, {upper})")
    return value


def require_direction(value: Any) -> Direction:
    """Coerce ``value`` to a :class:`Direction`.

    Accepts ``Direction`` members and their string values (``"up"``, ...).

    Raises:
        ValueError: If ``value`` is not one of the five directions.
    """
    if isinstance(value, Direction):
        return value
    try:
        return Direction(value)
    except ValueError:
        raise ValueError(f"{value!r} is not a direction") from None
