"""Collection iteration primitives.

Every helper in :mod:`mimic.functional` that walks a collection goes through
this module, so all of them agree on what a collection is and how element
callbacks are called.

Collections:
    - **Mappings** are walked as ``(key, value)`` pairs. The key is the index
      handed to callbacks and results that keep their shape (``map``,
      ``filter``, ``reverse``) come back as ``dict`` with the same keys.
    - **Any other iterable** (lists, tuples, sets, generators, numpy arrays,
      strings) is walked by position and results come back as ``list``.

Element callbacks:
    Callbacks are called as ``callback(element, index, collection)``. A
    callback that accepts fewer positional parameters only receives the
    leading ones, so ``lambda x: x > 1``, ``bool`` or ``str.isdigit`` can be
    used directly. Callbacks declaring ``*args`` receive all three.

Example:
    >>> from mimic.functional.collection import map_collection, first
    >>> map_collection({"a": 1, "b": 2}, lambda value, key: f"{key}={value}")
    {'a': 'a=1', 'b': 'b=2'}
    >>> first([1, 5, 10], lambda x: x > 2)
    5
"""

import inspect
import typing as tp
from collections.abc import Mapping

from mimic.core.types import Collection, ElementCallback, Index

__all__ = [
    "element_caller",
    "iter_items",
    "map_collection",
    "filter_collection",
    "first",
    "last",
    "short",
    "some",
    "every",
    "reverse_collection",
]

_ELEMENT_ARGS = 3


def _positional_arity(callback: tp.Callable) -> tp.Optional[int]:
    """Number of positional parameters ``callback`` accepts (None if unbounded)."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures take the element only
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def element_caller(
    callback: ElementCallback,
) -> tp.Callable[[tp.Any, Index, Collection], tp.Any]:
    """Adapt ``callback`` to the ``(element, index, collection)`` protocol.

    Args:
        callback: Any callable taking up to three positional arguments.

    Returns:
        A function that always takes ``(element, index, collection)`` and
        forwards as many of them as ``callback`` accepts.

    Raises:
        TypeError: If ``callback`` is not callable.
    """
    if not callable(callback):
        raise TypeError(
            f"Element callback must be callable, got {type(callback).__name__}."
        )

    arity = _positional_arity(callback)
    if arity is None or arity > _ELEMENT_ARGS:
        arity = _ELEMENT_ARGS

    def call(element, index, collection):
        return callback(*(element, index, collection)[:arity])

    return call


def iter_items(collection: Collection) -> tp.Iterator[tp.Tuple[Index, tp.Any]]:
    """Iterate ``(index, element)`` pairs of a collection.

    Raises:
        TypeError: If ``collection`` is not iterable.
    """
    if isinstance(collection, Mapping):
        return iter(collection.items())
    try:
        return enumerate(collection)
    except TypeError:
        raise TypeError(
            f"Expected an iterable collection, got {type(collection).__name__}."
        ) from None


def map_collection(
    collection: Collection, callback: ElementCallback
) -> tp.Union[tp.Dict[Index, tp.Any], tp.List[tp.Any]]:
    """Apply ``callback`` to every element, keeping mapping keys."""
    call = element_caller(callback)
    if isinstance(collection, Mapping):
        return {
            key: call(element, key, collection) for key, element in collection.items()
        }
    return [
        call(element, index, collection) for index, element in iter_items(collection)
    ]


def filter_collection(
    collection: Collection, callback: tp.Optional[ElementCallback] = None
) -> tp.Union[tp.Dict[Index, tp.Any], tp.List[tp.Any]]:
    """Keep the elements for which ``callback`` is truthy.

    Without a callback the elements themselves are tested for truthiness.
    """
    call = element_caller(callback if callback is not None else bool)
    if isinstance(collection, Mapping):
        return {
            key: element
            for key, element in collection.items()
            if call(element, key, collection)
        }
    return [
        element
        for index, element in iter_items(collection)
        if call(element, index, collection)
    ]


def first(
    collection: Collection,
    callback: tp.Optional[ElementCallback] = None,
    default: tp.Any = None,
) -> tp.Any:
    """Return the first element passing ``callback`` (or the first element).

    Args:
        collection: Collection to scan.
        callback: Optional element callback. When omitted the first element
            is returned.
        default: Returned when no element qualifies.
    """
    if callback is None:
        for _, element in iter_items(collection):
            return element
        return default

    call = element_caller(callback)
    for index, element in iter_items(collection):
        if call(element, index, collection):
            return element
    return default


def last(
    collection: Collection,
    callback: tp.Optional[ElementCallback] = None,
    default: tp.Any = None,
) -> tp.Any:
    """Return the last element passing ``callback`` (or the last element)."""
    call = element_caller(callback) if callback is not None else None
    found = default
    for index, element in iter_items(collection):
        if call is None or call(element, index, collection):
            found = element
    return found


def short(
    collection: Collection,
    callback: ElementCallback,
    on_match: tp.Any = True,
    default: tp.Any = False,
) -> tp.Any:
    """Short-circuit scan of a collection.

    Returns ``on_match`` as soon as ``callback`` is truthy for an element and
    stops iterating. Returns ``default`` when no element matches.
    """
    call = element_caller(callback)
    for index, element in iter_items(collection):
        if call(element, index, collection):
            return on_match
    return default


def some(collection: Collection, callback: ElementCallback) -> bool:
    """Whether ``callback`` is truthy for at least one element."""
    return short(collection, callback, True, False)


def every(collection: Collection, callback: ElementCallback) -> bool:
    """Whether ``callback`` is truthy for every element (True when empty)."""
    call = element_caller(callback)
    return short(
        collection,
        lambda element, index, source: not call(element, index, source),
        False,
        True,
    )


def reverse_collection(
    collection: Collection,
) -> tp.Union[tp.Dict[Index, tp.Any], tp.List[tp.Any]]:
    """Reverse a collection. Mappings keep their keys in reversed order."""
    if isinstance(collection, Mapping):
        return dict(reversed(list(collection.items())))
    return [element for _, element in iter_items(collection)][::-1]
