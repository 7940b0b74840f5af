import numpy as np
import pandas as pd
import pytest
from mimic.core.models import CacheInfo
from mimic.functional.memoization import (
    MemoizeCache,
    clear_registry,
    forget,
    memoize,
    signature,
)


@pytest.fixture(autouse=True)
def fresh_registry():
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def counted():
    calls = []

    def square(x):
        calls.append(x)
        return x * x

    return square, calls


def test_memoize_invokes_callback_at_most_once(counted):
    square, calls = counted
    cached = memoize(square)

    first = cached(4)
    second = cached(4)

    assert first == second == 16
    assert calls == [4]


def test_memoize_returns_identical_result_object():
    cached = memoize(lambda n: [n] * 3)
    assert cached(2) is cached(2)


def test_memoize_returns_same_cache_for_same_callback(counted):
    square, calls = counted
    assert memoize(square) is memoize(square)

    memoize(square)(3)
    memoize(square)(3)
    assert calls == [3]


def test_memoize_separate_caches_for_separate_callbacks():
    first = memoize(lambda x: x + 1)
    second = memoize(lambda x: x + 2)
    assert first is not second
    assert first(1) == 2
    assert second(1) == 3


def test_memoize_passes_cache_through():
    cache = memoize(abs)
    assert memoize(cache) is cache


def test_memoize_rejects_non_callable():
    with pytest.raises(TypeError, match="Only callables can be memoized"):
        memoize(42)


def test_memoize_as_decorator_keeps_metadata():
    @memoize
    def add(a, b=0):
        """Add two numbers."""
        return a + b

    assert isinstance(add, MemoizeCache)
    assert add.__name__ == "add"
    assert add.__doc__ == "Add two numbers."
    assert add(1, b=2) == 3


def test_signature_is_type_aware(counted):
    square, calls = counted
    cached = memoize(square)

    cached(1)
    cached(1.0)
    cached(True)

    assert calls == [1, 1.0, True]
    assert len(cached) == 3


def test_keyword_order_does_not_matter():
    calls = []

    def combine(a=0, b=0):
        calls.append((a, b))
        return a - b

    cached = memoize(combine)
    assert cached(a=5, b=2) == 3
    assert cached(b=2, a=5) == 3
    assert calls == [(5, 2)]


def test_unhashable_containers_are_keyed_by_content():
    calls = []

    def total(values, weights):
        calls.append(1)
        return sum(values) + sum(weights.values())

    cached = memoize(total)
    assert cached([1, 2], {"a": 3}) == 6
    assert cached([1, 2], {"a": 3}) == 6
    assert cached([1, 2, 0], {"a": 3}) == 6
    assert len(calls) == 2


def test_nested_containers_signature():
    assert signature([1, {2, 3}], key={"x": [1]}) == signature(
        [1, {3, 2}], key={"x": [1]}
    )
    assert signature([1]) != signature((1,))
    assert signature([1]) != signature([1.0])


def test_numpy_arrays_are_keyed_by_content():
    calls = []

    def norm(array):
        calls.append(1)
        return float(np.linalg.norm(array))

    cached = memoize(norm)
    assert cached(np.array([3.0, 4.0])) == 5.0
    assert cached(np.array([3.0, 4.0])) == 5.0
    assert cached(np.array([3, 4])) == 5.0
    assert len(calls) == 2

    assert signature(np.array([[1, 2]])) != signature(np.array([1, 2]))


def test_pandas_objects_are_keyed_by_content():
    calls = []

    def column_sum(frame):
        calls.append(1)
        return int(frame["close"].sum())

    cached = memoize(column_sum)
    frame = pd.DataFrame({"close": [1, 2, 3]})
    assert cached(frame) == 6
    assert cached(frame.copy()) == 6
    assert cached(pd.DataFrame({"close": [1, 2, 4]})) == 7
    assert len(calls) == 2

    series = pd.Series([1, 2, 3], name="close")
    assert signature(series) == signature(series.copy())
    assert signature(series) != signature(series.rename("open"))


def test_unhashable_objects_raise():
    class Unhashable:
        __hash__ = None

    cached = memoize(lambda value: value)
    with pytest.raises(TypeError, match="unhashable argument"):
        cached(Unhashable())


def test_cache_info_and_clear(counted):
    square, _ = counted
    cached = memoize(square)

    assert cached.cache_info() == CacheInfo(hits=0, misses=0, size=0)

    cached(2)
    cached(2)
    cached(3)
    info = cached.cache_info()
    assert (info.hits, info.misses, info.size) == (1, 2, 2)
    assert info.hit_ratio == pytest.approx(1 / 3)

    assert cached.is_cached(2)
    assert not cached.is_cached(4)

    cached.clear()
    assert len(cached) == 0
    assert cached.cache_info().hits == 0


def test_memoize_methods():
    class Pricer:
        def __init__(self):
            self.calls = 0

        @memoize
        def price(self, quantity):
            self.calls += 1
            return quantity * 2

    pricer = Pricer()
    assert pricer.price(3) == 6
    assert pricer.price(3) == 6
    assert pricer.calls == 1

    other = Pricer()
    assert other.price(3) == 6
    assert other.calls == 1


def test_bound_methods_share_a_cache():
    class Counter:
        def double(self, x):
            return x * 2

    counter = Counter()
    assert memoize(counter.double) is memoize(counter.double)


def test_forget_and_clear_registry(counted):
    square, calls = counted
    cache = memoize(square)
    cache(5)

    assert forget(square)
    assert not forget(square)

    fresh = memoize(square)
    assert fresh is not cache
    fresh(5)
    assert calls == [5, 5]

    memoize(abs)
    clear_registry()
    assert memoize(square) is not fresh


def test_forget_accepts_cache():
    cache = memoize(len)
    assert forget(cache)
    assert memoize(len) is not cache


def test_memoized_method_requires_hashable_instance():
    class Quote:
        def __init__(self, price):
            self.price = price

        def __eq__(self, other):
            return isinstance(other, Quote) and other.price == self.price

        @memoize
        def doubled(self):
            return self.price * 2

    assert Quote.__hash__ is None
    with pytest.raises(TypeError, match="unhashable argument"):
        Quote(3).doubled()


def test_memoized_method_keeps_instances_until_cleared():
    class Position:
        @memoize
        def size(self):
            return 1

    position = Position()
    position.size()
    cache = memoize(Position.__dict__["size"])
    assert cache.is_cached(position)

    cache.clear()
    assert not cache.is_cached(position)
