"""Generic operations over ordered sequences.

Every function here is pure: the input sequence is only read, sequence results
are freshly allocated lists, and nothing is kept between calls. Inputs must be
``collections.abc.Sequence`` instances (list, tuple, str, range, ...). An empty
sequence is always valid.

Operations:
    - **contains**: Membership test under ``==``.
    - **reverse**: Elements in reverse traversal order.
    - **ascending_sort** / **descending_sort**: Ordered permutations using the
      elements' natural ordering.
    - **map**: Apply a transform to each element.
    - **filter**: Keep the elements matching a predicate.
    - **reduce**: Strict left fold from an initial accumulator.

Arguments lacking a required capability raise
:class:`~genfp.core.exceptions.CapabilityError`, as do sort inputs holding
elements that do not support `<` against each other. Exceptions raised by
caller-supplied functions or by the elements' own comparison methods
propagate unchanged.

Note:
    ``map``, ``filter`` and ``reduce`` shadow the builtins in this namespace.
    Import the module and call them qualified::

        >>> from genfp.functional import sequences as fp
        >>> fp.map([1, 2, 3], lambda x: x * 2)
        [2, 4, 6]
        >>> fp.filter([1, 2, 3, 4], lambda x: x % 2 == 0)
        [2, 4]
        >>> fp.reduce([1, 2, 3, 4], 0, lambda acc, x: acc + x)
        10
"""

import typing as tp

from genfp.core.types import A, E, F, FilterFunc, MapFunc, OrderedE, ReduceFunc
from genfp.core.validation import OrderKey, ensure_callable, ensure_sequence

__all__ = [
    "contains",
    "reverse",
    "ascending_sort",
    "descending_sort",
    "map",
    "filter",
    "reduce",
]


def contains(s: tp.Sequence[E], v: E) -> bool:
    """Return True if some element of ``s`` equals ``v``.

    Stops at the first match. Always False for an empty sequence.
    """
    ensure_sequence(s)
    for item in s:
        if item == v:
            return True
    return False


def reverse(s: tp.Sequence[E]) -> tp.List[E]:
    """Return a new list with the elements of ``s`` in reverse order."""
    ensure_sequence(s)
    return [s[i] for i in range(len(s) - 1, -1, -1)]


def _sorted(s: tp.Sequence[OrderedE], descending: bool) -> tp.List[OrderedE]:
    ensure_sequence(s)
    result = list(s)
    result.sort(key=OrderKey, reverse=descending)
    return result


def ascending_sort(s: tp.Sequence[OrderedE]) -> tp.List[OrderedE]:
    """Return a new list with the elements of ``s`` in non-decreasing order.

    Elements are compared with their natural ordering (``<``): numeric
    magnitude for numbers, lexicographic order for strings and tuples.

    Args:
        s: Sequence whose elements are mutually orderable.

    Returns:
        A sorted copy of ``s``; ``s`` itself is left untouched.

    Raises:
        CapabilityError: If two elements cannot be compared. Errors raised
            inside an element's own ``__lt__`` propagate unchanged.
    """
    return _sorted(s, descending=False)


def descending_sort(s: tp.Sequence[OrderedE]) -> tp.List[OrderedE]:
    """Return a new list with the elements of ``s`` in non-increasing order.

    Same contract as :func:`ascending_sort` with the order flipped.
    """
    return _sorted(s, descending=True)


def map(s: tp.Sequence[E], f: MapFunc[E, F]) -> tp.List[F]:
    """Return ``[f(x) for x in s]``.

    ``f`` is called exactly once per element, in input order. The result has
    the same length as ``s``.

    Raises:
        CapabilityError: If ``f`` is not callable, even when ``s`` is empty.
    """
    ensure_sequence(s)
    ensure_callable(f, "f")
    return [f(item) for item in s]


def filter(s: tp.Sequence[E], f: FilterFunc[E]) -> tp.List[E]:
    """Return the elements of ``s`` for which ``f`` returns a truthy value.

    Relative order is preserved and ``f`` is called exactly once per element,
    in input order. Returns an empty list when nothing matches.

    Raises:
        CapabilityError: If ``f`` is not callable, even when ``s`` is empty.
    """
    ensure_sequence(s)
    ensure_callable(f, "f")
    return [item for item in s if f(item)]


def reduce(s: tp.Sequence[E], init: A, f: ReduceFunc[A, E]) -> A:
    """Fold ``s`` from the left, starting from ``init``.

    Computes ``acc = f(acc, x)`` for every ``x`` of ``s`` in order, so
    ``reduce([a, b], init, f) == f(f(init, a), b)``. No short-circuiting and
    no reordering, ``f`` need not be associative.

    Args:
        s: Sequence to fold.
        init: Initial accumulator, returned unchanged when ``s`` is empty.
        f: Combining function ``(accumulator, element) -> accumulator``.

    Returns:
        The final accumulator.

    Raises:
        CapabilityError: If ``f`` is not callable, even when ``s`` is empty.
    """
    ensure_sequence(s)
    ensure_callable(f, "f")
    acc = init
    for item in s:
        acc = f(acc, item)
    return acc
