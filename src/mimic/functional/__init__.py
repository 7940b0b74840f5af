"""Functional primitives for Mimic.

This package provides small functional programming helpers: callback
execution, method invocation over collections, memoization, truth predicates
and numeric reductions. Apart from the memoize registry the helpers are
stateless, and they can be composed freely.
"""

from mimic.functional.collection import (
    every,
    filter_collection,
    first,
    iter_items,
    last,
    map_collection,
    reverse_collection,
    short,
    some,
)
from mimic.functional.compare import is_numeric, loose_equals, strict_equals, to_number
from mimic.functional.invocation import (
    apply,
    attempt,
    either,
    execute,
    invoke,
    invoke_first,
    invoke_if,
    invoke_last,
    negate,
)
from mimic.functional.memoization import MemoizeCache, clear_registry, forget, memoize
from mimic.functional.predicates import contains, false, falsy, true, truthy
from mimic.functional.reduce import maximum, minimum
from mimic.functional.values import value, with_

__all__ = [
    # collection
    "every",
    "filter_collection",
    "first",
    "iter_items",
    "last",
    "map_collection",
    "reverse_collection",
    "short",
    "some",
    # compare
    "is_numeric",
    "loose_equals",
    "strict_equals",
    "to_number",
    # invocation
    "apply",
    "attempt",
    "either",
    "execute",
    "invoke",
    "invoke_first",
    "invoke_if",
    "invoke_last",
    "negate",
    # memoization
    "MemoizeCache",
    "clear_registry",
    "forget",
    "memoize",
    # predicates
    "contains",
    "false",
    "falsy",
    "true",
    "truthy",
    # reduce
    "maximum",
    "minimum",
    # values
    "value",
    "with_",
]
