"""Reusable type definitions for genfp.

Type Variables:
    E: Element type of an input sequence.
    F: Element type produced by a transform.
    A: Accumulator type of a left fold.

Capability Bounds:
    SupportsLessThan: Elements that can be ordered with ``<``. Equality needs
        no bound, every Python object supports ``==``.

Function Types:
    MapFunc: Unary transform ``E -> F``.
    FilterFunc: Predicate ``E -> bool``.
    ReduceFunc: Combining function ``(A, E) -> A``.

Validated Types:
    LogLevel: A standard ``logging`` level name, normalised to upper case.
"""

import logging
from typing import Annotated, Any, Callable, Protocol, TypeVar

from pydantic.functional_validators import AfterValidator, BeforeValidator

__all__ = [
    "E",
    "F",
    "A",
    "OrderedE",
    "SupportsLessThan",
    "MapFunc",
    "FilterFunc",
    "ReduceFunc",
    "LogLevel",
]


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


E = TypeVar("E")
F = TypeVar("F")
A = TypeVar("A")
OrderedE = TypeVar("OrderedE", bound=SupportsLessThan)

MapFunc = Callable[[E], F]
FilterFunc = Callable[[E], bool]
ReduceFunc = Callable[[A, E], A]


LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_level(value: Any) -> Any:
    """Upper-case and strip string level names, resolve numeric levels to names."""
    if isinstance(value, int) and not isinstance(value, bool):
        return logging.getLevelName(value)
    if isinstance(value, str):
        return value.strip().upper()
    return value


def validate_level(value: str) -> str:
    """Validator ensuring ``value`` is one of the standard level names.

    Args:
        value (str): Normalised level name.
    Returns:
        str: The level name if validation passes.
    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if value not in LEVEL_NAMES:
        raise ValueError(
            f"Unknown log level '{value}'. Expected one of {', '.join(LEVEL_NAMES)}."
        )
    return value


# A standard logging level name such as "DEBUG" or "INFO"
LogLevel = Annotated[
    str, BeforeValidator(normalize_level), AfterValidator(validate_level)
]
