"""Functional primitives for genfp.

This module provides functional programming utilities over ordered sequences:
membership, reversal, sorting, map, filter and left-fold reduction. Utilities
are stateless and side-effect-free so they can be composed into pipelines.
"""

from genfp.functional.sequences import (
    ascending_sort,
    contains,
    descending_sort,
    filter,
    map,
    reduce,
    reverse,
)

__all__ = [
    "contains",
    "reverse",
    "ascending_sort",
    "descending_sort",
    "map",
    "filter",
    "reduce",
]
