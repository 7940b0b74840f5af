"""Explicit equality and numeric coercion rules.

The predicates and reductions never rely on implicit cross-type coercion.
Instead they use the rules below.

Numeric values (``to_number``):
    - Real numbers: ``int``, ``float``, ``Fraction``, ``Decimal`` and numpy
      integer/floating scalars. ``bool`` is *not* numeric and NaN is skipped.
    - Numeric strings: after stripping surrounding whitespace, an optional
      sign, digits with an optional fraction and an optional exponent, e.g.
      ``"10"``, ``" -2.5 "``, ``"1e3"``, ``".5"``. Spellings such as ``"inf"``,
      ``"nan"``, ``"1_000"`` or ``"0x1A"`` are rejected.

Loose equality (``loose_equals``), the first matching rule wins:
    1. Strict equality.
    2. Either side is a ``bool``: both sides are compared by truthiness.
    3. Either side is ``None``: equal when both sides are falsy.
    4. Both sides are numeric: compared by numeric value.
    5. Plain ``==``.
"""

import numbers
import re
import typing as tp
from decimal import Decimal

__all__ = [
    "to_number",
    "is_numeric",
    "strict_equals",
    "loose_equals",
]

_NUMERIC_STRING = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def to_number(value: tp.Any) -> tp.Optional[tp.Union[numbers.Real, Decimal]]:
    """Return the numeric value of ``value`` or None if it is not numeric.

    Args:
        value: Any object.

    Returns:
        The number itself for real numbers, the parsed ``int``/``float`` for
        numeric strings, otherwise None.

    Example:
        >>> to_number(" 42 ")
        42
        >>> to_number("4.2e1")
        42.0
        >>> to_number(True) is None
        True
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        # Covers signaling NaN, which raises on comparison
        return None if value.is_nan() else value

    if isinstance(value, numbers.Real):
        # NaN is the only value not equal to itself
        if value != value:
            return None
        return value

    if isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_STRING.fullmatch(text):
            return None
        if any(marker in text for marker in ".eE"):
            return float(text)
        try:
            return int(text)
        except ValueError:
            # Beyond the interpreter's int string conversion limit
            return Decimal(text)

    return None


def is_numeric(value: tp.Any) -> bool:
    """Whether ``value`` takes part in numeric comparisons."""
    return to_number(value) is not None


def _equals(left: tp.Any, right: tp.Any) -> bool:
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        # Element-wise results (numpy arrays, pandas objects) have no single
        # truth value
        return False


def _truth(value: tp.Any) -> tp.Optional[bool]:
    try:
        return bool(value)
    except (TypeError, ValueError):
        return None


def strict_equals(left: tp.Any, right: tp.Any) -> bool:
    """Identity, or same exact type and equal value."""
    if left is right:
        return True
    return type(left) is type(right) and _equals(left, right)


def loose_equals(left: tp.Any, right: tp.Any) -> bool:
    """Equality permitting the coercions listed in the module docstring.

    Example:
        >>> loose_equals("1e3", 1000)
        True
        >>> loose_equals(None, 0)
        True
        >>> loose_equals("abc", True)
        True
    """
    if strict_equals(left, right):
        return True

    if isinstance(left, bool) or isinstance(right, bool):
        left_truth = _truth(left)
        return left_truth is not None and left_truth == _truth(right)

    if left is None or right is None:
        return _truth(left) is False and _truth(right) is False

    left_number, right_number = to_number(left), to_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number

    return _equals(left, right)
