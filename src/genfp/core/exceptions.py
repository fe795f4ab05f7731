"""Exceptions raised by genfp."""

__all__ = ["GenFPError", "CapabilityError"]


class GenFPError(Exception):
    """Base class for all genfp errors."""


class CapabilityError(GenFPError, TypeError):
    """An argument lacks a capability the operation needs.

    Raised before any element is processed when the input is not an ordered
    sequence or a function argument is not callable, and when the elements of
    a sort input cannot be ordered against each other. Subclasses ``TypeError``
    so code catching the builtin error keeps working.
    """
