"""Value pass-through helpers."""

import typing as tp

__all__ = ["value", "with_"]

T = tp.TypeVar("T")


def value(candidate: tp.Any) -> tp.Any:
    """Pass through ``candidate``, unless it is callable.

    Callables (functions, lambdas, classes) are called without arguments and
    their result is returned, which makes ``value(SomeClass)`` a way to
    build an instance lazily.

    Args:
        candidate: Plain value or zero-argument callable.

    Returns:
        ``candidate()`` if callable, otherwise ``candidate`` unchanged.
    """
    if callable(candidate):
        return candidate()
    return candidate


def with_(candidate: tp.Any, callback: tp.Callable[[tp.Any], T]) -> T:
    """Apply ``callback`` to ``value(candidate)`` and return the result.

    Raises:
        TypeError: If ``callback`` is not callable.
    """
    if not callable(callback):
        raise TypeError(f"Callback must be callable, got {type(callback).__name__}.")
    return callback(value(candidate))
