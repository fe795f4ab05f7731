"""Generic functional-programming helpers over ordered sequences."""

from genfp.core.exceptions import CapabilityError, GenFPError
from genfp.functional.sequences import (
    ascending_sort,
    contains,
    descending_sort,
    filter,
    map,
    reduce,
    reverse,
)

__version__ = "0.1.0"

__all__ = [
    "contains",
    "reverse",
    "ascending_sort",
    "descending_sort",
    "map",
    "filter",
    "reduce",
    "CapabilityError",
    "GenFPError",
]
