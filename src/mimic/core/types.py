"""Reusable type definitions for the Mimic functional helpers.

Type Aliases:
    Collection: Any iterable the helpers can walk. Mappings are walked as
        ``(key, value)`` pairs, everything else by position.
    Index: The index handed to element callbacks (mapping key or position).
    ElementCallback: A callable receiving ``(element, index, collection)``
        or any leading subset of those arguments.
    Count: A non-negative integer, used for cache statistics.
"""

from typing import Annotated, Any, Callable, Hashable, Iterable, Mapping, Union
import annotated_types as at

__all__ = [
    "Collection",
    "Index",
    "ElementCallback",
    "Count",
]

Collection = Union[Mapping[Any, Any], Iterable[Any]]

Index = Hashable

ElementCallback = Callable[..., Any]

# A non-negative integer
Count = Annotated[int, at.Ge(0)]
