"""Memoization of pure callbacks.

:func:`memoize` wraps a callback in a :class:`MemoizeCache` that stores the
result for every distinct set of arguments. The wrapped callback must be pure:
it has to return the same result every time it receives the same arguments,
otherwise cached results will be inaccurate. Entries are never evicted.

Caches are kept in a process-wide registry keyed by the callback, so calling
``memoize(fn)`` twice returns the same cache object and shares its entries.

Argument signatures:
    - Signatures are type aware: ``f(1)``, ``f(1.0)`` and ``f(True)`` are
      cached separately.
    - Lists, tuples, dicts and sets are keyed by content, recursively.
    - numpy arrays (and anything exposing ``__array__``) are keyed by dtype,
      shape and raw bytes; pandas objects by their content hash.
    - Any other unhashable argument raises ``TypeError``.

Example:
    >>> @memoize
    ... def slow_square(x):
    ...     return x * x
    >>> slow_square(4)
    16
    >>> slow_square.cache_info().hits
    0
    >>> slow_square(4)
    16
    >>> slow_square.cache_info().hits
    1

Note:
    The registry and caches are plain dictionaries and are not safe for
    concurrent mutation.
"""

import functools
import typing as tp
from collections.abc import Mapping

import numpy as np
import pandas as pd

from mimic.core.models import CacheInfo
from mimic.logger.logger import logger

__all__ = [
    "MemoizeCache",
    "memoize",
    "signature",
    "forget",
    "clear_registry",
]

# =============================================================================
# Argument Signatures
# =============================================================================
# Arguments are frozen into hashable, type-tagged keys. Each leaf carries its
# exact type so that values which compare equal across types (1, 1.0, True)
# stay distinct.


def _freeze_array(array: np.ndarray, tag: type) -> tp.Tuple:
    if array.dtype.hasobject:
        return (tag, "object", array.shape, _freeze(array.tolist()))
    return (tag, array.dtype.str, array.shape, array.tobytes())


def _freeze_pandas(obj: tp.Union[pd.Series, pd.DataFrame, pd.Index]) -> tp.Tuple:
    if isinstance(obj, pd.DataFrame):
        labels = tuple(obj.columns)
        dtypes = tuple(str(dtype) for dtype in obj.dtypes)
    else:
        labels = (obj.name,)
        dtypes = (str(obj.dtype),)
    digest = pd.util.hash_pandas_object(obj, index=True).to_numpy().tobytes()
    return (type(obj), labels, dtypes, obj.shape, digest)


def _freeze(value: tp.Any) -> tp.Hashable:
    if isinstance(value, np.ndarray):
        return _freeze_array(value, type(value))

    if isinstance(value, (pd.Series, pd.DataFrame, pd.Index)):
        return _freeze_pandas(value)

    if isinstance(value, Mapping):
        return (
            type(value),
            frozenset((_freeze(key), _freeze(item)) for key, item in value.items()),
        )

    if isinstance(value, (list, tuple)):
        return (type(value), tuple(_freeze(item) for item in value))

    if isinstance(value, (set, frozenset)):
        return (type(value), frozenset(_freeze(item) for item in value))

    try:
        hash(value)
    except TypeError:
        pass
    else:
        return (type(value), value)

    if hasattr(value, "__array__"):
        return _freeze_array(np.asarray(value), type(value))

    raise TypeError(
        f"Cannot memoize on unhashable argument of type {type(value).__name__}."
    )


def signature(*args, **kwargs) -> tp.Hashable:
    """Build the cache key for a call with ``args`` and ``kwargs``.

    Raises:
        TypeError: If an argument can neither be hashed nor keyed by content.
    """
    return (
        tuple(_freeze(arg) for arg in args),
        frozenset((name, _freeze(arg)) for name, arg in kwargs.items()),
    )


# =============================================================================
# Cache
# =============================================================================


class MemoizeCache:
    """Callable wrapper caching the results of a pure callback.

    Decorating a method caches per instance: ``self`` becomes part of the
    argument signature. Instances must therefore be hashable (a class that
    defines ``__eq__`` without ``__hash__`` raises ``TypeError``), and every
    instance the method was called on stays referenced by the cache until
    :meth:`clear` is called.

    Attributes:
        callback: The wrapped callable.
    """

    def __init__(self, callback: tp.Callable):
        if not callable(callback):
            raise TypeError(
                f"Only callables can be memoized, got {type(callback).__name__}."
            )
        functools.update_wrapper(self, callback)
        self.callback = callback
        self._entries: tp.Dict[tp.Hashable, tp.Any] = {}
        self._hits = 0
        self._misses = 0

    def __call__(self, *args, **kwargs):
        key = signature(*args, **kwargs)
        try:
            result = self._entries[key]
        except KeyError:
            self._misses += 1
            logger.debug(f"Cache miss for {self._name} ({len(self._entries)} cached)")
            result = self.callback(*args, **kwargs)
            self._entries[key] = result
        else:
            self._hits += 1
        return result

    def __get__(self, instance, owner=None):
        # Support decorating methods: bind the instance as first argument
        if instance is None:
            return self
        return functools.partial(self, instance)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoizeCache({self._name}, size={len(self._entries)})"

    @property
    def _name(self) -> str:
        return getattr(self.callback, "__qualname__", repr(self.callback))

    def is_cached(self, *args, **kwargs) -> bool:
        """Whether a result for these arguments is already stored."""
        return signature(*args, **kwargs) in self._entries

    def cache_info(self) -> CacheInfo:
        """Snapshot of hit/miss counters and the number of stored entries."""
        return CacheInfo(hits=self._hits, misses=self._misses, size=len(self._entries))

    def clear(self) -> None:
        """Drop all stored results and reset the counters."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0


# =============================================================================
# Registry
# =============================================================================

_registry: tp.Dict[tp.Hashable, MemoizeCache] = {}


def _registry_key(callback: tp.Callable) -> tp.Hashable:
    try:
        hash(callback)
    except TypeError:
        # The registered cache keeps the callback alive, so its id stays unique
        return ("id", id(callback))
    return callback


def memoize(callback: tp.Callable) -> MemoizeCache:
    """Return the memoize cache for ``callback``, creating it on first use.

    Can be used as a decorator. Passing a :class:`MemoizeCache` returns it
    unchanged.

    Args:
        callback: Pure callable to memoize.

    Returns:
        The cache wrapping ``callback``, shared by every caller that memoizes
        the same callback.

    Raises:
        TypeError: If ``callback`` is not callable.
    """
    if isinstance(callback, MemoizeCache):
        return callback

    key = _registry_key(callback)
    cache = _registry.get(key)
    if cache is None:
        cache = MemoizeCache(callback)
        _registry[key] = cache
        logger.debug(f"Created memoize cache for {cache._name}")
    return cache


def forget(callback: tp.Callable) -> bool:
    """Remove the registry entry for ``callback``.

    Returns:
        True if a cache was registered for ``callback``.
    """
    if isinstance(callback, MemoizeCache):
        callback = callback.callback
    return _registry.pop(_registry_key(callback), None) is not None


def clear_registry() -> None:
    """Remove every registered cache."""
    _registry.clear()
