"""Collection reductions over numeric elements.

Elements are ranked by their numeric value as defined by
:func:`mimic.functional.compare.to_number`; everything that is not numeric
(``None``, bools, non-numeric strings, containers, arbitrary objects) is
skipped. The original element is returned, so ``maximum(["3", 2])`` is the
string ``"3"``. On ties the first occurrence wins.

Example:
    >>> maximum([0, "", "something", "what", 1, 2])
    2
    >>> maximum(["", "Something5", "okay"]) is None
    True
"""

import operator
import typing as tp

from mimic.core.types import Collection
from mimic.functional.collection import iter_items
from mimic.functional.compare import to_number

__all__ = ["maximum", "minimum"]


def _extreme(
    collection: Collection, better: tp.Callable[[tp.Any, tp.Any], bool]
) -> tp.Any:
    best_element = None
    best_number = None
    for _, element in iter_items(collection):
        number = to_number(element)
        if number is None:
            continue
        if best_number is None or better(number, best_number):
            best_element, best_number = element, number
    return best_element


def maximum(collection: Collection) -> tp.Any:
    """Return the largest numeric element of ``collection``.

    Args:
        collection: Collection to scan (mapping values for mappings).

    Returns:
        The largest numeric element, or None if no element is numeric.
    """
    return _extreme(collection, operator.gt)


def minimum(collection: Collection) -> tp.Any:
    """Return the smallest numeric element of ``collection``, or None."""
    return _extreme(collection, operator.lt)
