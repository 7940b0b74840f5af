"""Callback execution and method invocation helpers.

The ``invoke*`` helpers never raise for a missing method: a target that does
not expose a callable attribute of the requested name yields the default.
Errors raised by attribute lookup itself (a failing property) are not
missing methods and propagate.
Method lookups work on instances as well as on classes (static and class
methods).

Example:
    >>> invoke(["a", "b", 3], "upper")
    ['A', 'B', None]
    >>> invoke_if(42, "missing", default="n/a")
    'n/a'
"""

import typing as tp

from mimic.core.types import Collection, ElementCallback
from mimic.functional.collection import element_caller, first, last, map_collection
from mimic.logger.logger import logger

__all__ = [
    "apply",
    "attempt",
    "either",
    "execute",
    "invoke",
    "invoke_if",
    "invoke_first",
    "invoke_last",
    "negate",
]


def _ensure_callable(candidate: tp.Any, name: str) -> None:
    if not callable(candidate):
        raise TypeError(f"{name} must be callable, got {type(candidate).__name__}.")


def _method(target: tp.Any, method_name: str) -> tp.Optional[tp.Callable]:
    method = getattr(target, method_name, None)
    return method if callable(method) else None


def apply(callback: tp.Callable, *args, **kwargs) -> tp.Any:
    """Execute a single callback with optional arguments.

    Raises:
        TypeError: If ``callback`` is not callable.
    """
    _ensure_callable(callback, "Callback")
    return callback(*args, **kwargs)


def attempt(callback: tp.Callable, test: tp.Callable) -> tp.Callable[..., tp.Any]:
    """Build a closure that executes ``callback`` only when ``test`` passes.

    The closure forwards its arguments to ``test`` and, when the test result
    is not identical to ``False``, to ``callback``.

    Args:
        callback: Callable producing the result.
        test: Guard callable; returning ``False`` aborts the call.

    Returns:
        Closure returning the callback result, or ``False`` on failure.
    """
    _ensure_callable(callback, "Callback")
    _ensure_callable(test, "Test")

    def attempted(*args, **kwargs):
        if test(*args, **kwargs) is False:
            return False
        return callback(*args, **kwargs)

    return attempted


def either(left: tp.Callable, right: tp.Callable) -> tp.Callable[..., tp.Any]:
    """Build a closure that falls back to ``right`` when ``left`` fails.

    ``left`` fails when its result is identical to ``False``. Other falsy
    results (``0``, ``""``, ``None``) are returned as is.
    """
    _ensure_callable(left, "Left callback")
    _ensure_callable(right, "Right callback")

    def chosen(*args, **kwargs):
        result = left(*args, **kwargs)
        if result is not False:
            return result
        return right(*args, **kwargs)

    return chosen


def execute(*callbacks: tp.Any) -> tp.List[tp.Any]:
    """Call each callable without arguments.

    Returns:
        One result per argument, None in place of non-callables.
    """
    return [apply(callback) if callable(callback) else None for callback in callbacks]


def invoke_if(
    target: tp.Any,
    method_name: str,
    arguments: tp.Sequence[tp.Any] = (),
    default: tp.Any = None,
) -> tp.Any:
    """Invoke a method on ``target`` if callable and return result or default.

    Args:
        target: Instance or class.
        method_name: Name of the method to call.
        arguments: Positional arguments for the method.
        default: Returned when ``target`` has no callable ``method_name``.

    Note:
        Only a missing attribute (``AttributeError``) falls back to the
        default. Any other exception raised while looking the attribute up,
        e.g. by a property, propagates to the caller, and so do exceptions
        raised by the method itself.
    """
    method = _method(target, method_name)
    if method is None:
        logger.debug(
            f"{type(target).__name__} has no callable '{method_name}', returning default"
        )
        return default
    return method(*arguments)


def invoke(
    collection: Collection,
    method_name: str,
    arguments: tp.Sequence[tp.Any] = (),
) -> tp.Union[tp.Dict[tp.Any, tp.Any], tp.List[tp.Any]]:
    """Invoke a method on every element of a collection.

    Elements may mix instances and classes as long as they expose the method;
    elements without it contribute None.

    Returns:
        Results keyed like the collection (dict for mappings, list otherwise).
    """
    arguments = tuple(arguments)
    return map_collection(
        collection, lambda element: invoke_if(element, method_name, arguments)
    )


def invoke_first(
    collection: Collection,
    method_name: str,
    arguments: tp.Sequence[tp.Any] = (),
    default: tp.Any = None,
) -> tp.Any:
    """Result of the method call on the first element that supports it."""
    sentinel = object()
    element = first(
        collection, lambda item: _method(item, method_name) is not None, sentinel
    )
    if element is sentinel:
        return default
    return invoke_if(element, method_name, arguments, default)


def invoke_last(
    collection: Collection,
    method_name: str,
    arguments: tp.Sequence[tp.Any] = (),
    default: tp.Any = None,
) -> tp.Any:
    """Result of the method call on the last element that supports it."""
    sentinel = object()
    element = last(
        collection, lambda item: _method(item, method_name) is not None, sentinel
    )
    if element is sentinel:
        return default
    return invoke_if(element, method_name, arguments, default)


def negate(callback: ElementCallback) -> tp.Callable[..., bool]:
    """Negate the result of an element callback.

    The returned callback accepts ``(element, index=None, collection=None)``
    and forwards as many of them as ``callback`` takes.
    """
    call = element_caller(callback)

    def negated(element, index=None, collection=None):
        return not call(element, index, collection)

    return negated
