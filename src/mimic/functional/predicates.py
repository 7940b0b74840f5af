"""Membership and truth predicates over collections.

``contains`` answers "is this value somewhere in the collection". The
``true``/``false``/``truthy``/``falsy`` family is ``contains`` with a fixed
boolean, strict for ``true``/``false`` and loose for ``truthy``/``falsy``.

Equality follows :mod:`mimic.functional.compare`.
"""

import typing as tp

from mimic.core.types import Collection
from mimic.functional.collection import short
from mimic.functional.compare import loose_equals, strict_equals

__all__ = [
    "contains",
    "false",
    "falsy",
    "true",
    "truthy",
]


def contains(collection: Collection, value: tp.Any, strict: bool = False) -> bool:
    """Whether ``value`` exists in ``collection``.

    Args:
        collection: Collection to search (mapping values for mappings).
        value: Value to look for.
        strict: Require same type and value instead of loose equality.

    Returns:
        True if at least one element matches.

    Example:
        >>> contains([1, 2, 3], "2")
        True
        >>> contains([1, 2, 3], "2", strict=True)
        False
    """
    equals = strict_equals if strict else loose_equals
    return short(collection, lambda element: equals(value, element), True, False)


def false(collection: Collection) -> bool:
    """Whether collection contains an element identical to False."""
    return contains(collection, False, strict=True)


def falsy(collection: Collection) -> bool:
    """Whether collection contains an element that evaluates to False."""
    return contains(collection, False)


def true(collection: Collection) -> bool:
    """Whether collection contains an element identical to True."""
    return contains(collection, True, strict=True)


def truthy(collection: Collection) -> bool:
    """Whether collection contains an element that evaluates to True."""
    return contains(collection, True)
