"""Core types and errors for genfp."""

from genfp.core.exceptions import CapabilityError, GenFPError
from genfp.core.types import (
    FilterFunc,
    MapFunc,
    ReduceFunc,
    SupportsLessThan,
)

__all__ = [
    "CapabilityError",
    "GenFPError",
    "SupportsLessThan",
    "MapFunc",
    "FilterFunc",
    "ReduceFunc",
]
