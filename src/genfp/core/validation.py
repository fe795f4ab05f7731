"""Capability checks shared by the sequence operations."""

from collections.abc import Sequence
from typing import Any

from genfp.core.exceptions import CapabilityError
from genfp.logger.logger import get_logger

__all__ = ["ensure_sequence", "ensure_callable", "less_than", "OrderKey"]

logger = get_logger("validation")


def ensure_sequence(obj: Any, name: str = "sequence") -> Sequence:
    """Return ``obj`` if it is an ordered, indexable sequence.

    Args:
        obj: The candidate input.
        name: Argument name used in the error message.

    Returns:
        ``obj`` unchanged.

    Raises:
        CapabilityError: If ``obj`` is not a ``collections.abc.Sequence``.
            Sets, mappings, generators and iterators are rejected even when
            empty since their traversal order is not an indexable order.
    """
    if not isinstance(obj, Sequence):
        logger.debug("Rejected %s of type %s", name, type(obj).__name__)
        raise CapabilityError(
            f"'{name}' must be an ordered sequence, got {type(obj).__name__}."
        )
    return obj


def ensure_callable(obj: Any, name: str = "f") -> Any:
    """Return ``obj`` if it can be called, raise ``CapabilityError`` otherwise."""
    if not callable(obj):
        logger.debug("Rejected non-callable %s of type %s", name, type(obj).__name__)
        raise CapabilityError(
            f"'{name}' must be callable, got {type(obj).__name__}."
        )
    return obj


def less_than(a: Any, b: Any) -> Any:
    """Evaluate ``a < b``, raising ``CapabilityError`` when neither side supports it.

    Follows the interpreter's rules: ``type(a).__lt__`` first, then the
    reflected ``type(b).__gt__`` (tried first when ``type(b)`` is a subclass
    of ``type(a)``). Exceptions raised by the elements' own comparison methods
    propagate unchanged.
    """
    forward = (getattr(type(a), "__lt__", None), a, b)
    reflected = (getattr(type(b), "__gt__", None), b, a)
    if type(b) is not type(a) and issubclass(type(b), type(a)):
        attempts = (reflected, forward)
    else:
        attempts = (forward, reflected)

    for method, left, right in attempts:
        if method is None:
            continue
        result = method(left, right)
        if result is not NotImplemented:
            return result

    logger.debug(
        "Rejected comparison between %s and %s", type(a).__name__, type(b).__name__
    )
    raise CapabilityError(
        "Elements of 'sequence' cannot be ordered against each other: "
        f"'<' not supported between {type(a).__name__} and {type(b).__name__}."
    )


class OrderKey:
    """Sort key ordering its wrapped value with :func:`less_than`."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __lt__(self, other: "OrderKey") -> Any:
        return less_than(self.value, other.value)
