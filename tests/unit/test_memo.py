"""
Тесты для Memoizer

Проверяемые инварианты:
1. Прозрачность: memoize(f)(x) == f(x)
2. f вычисляется не более одного раза на ключ
3. Идемпотентность обёртки
4. Формат ключа и документированные коллизии
5. Явный (внедряемый) кэш
6. Потокобезопасность вставки
"""

import functools
import gc
import threading
import weakref

import pytest

from geomkernel.core.math import memo as memo_module
from geomkernel.core.math.memo import MemoCache, Memoized, make_key, memoize


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def counting_square():
    """Чистая функция, считающая свои вызовы."""
    calls = []

    def square(x):
        calls.append(x)
        return x * x

    return square, calls


# =============================================================================
# ТЕСТЫ: ключ кэша
# =============================================================================


class TestMakeKey:
    """Формат ключа: аргументы через запятую в порядке вызова"""

    def test_joins_in_order(self):
        assert make_key((5, 2)) == "5,2"
        assert make_key((2, 5)) == "2,5"

    def test_integral_float_matches_int(self):
        assert make_key((3.0,)) == make_key((3,))

    def test_fractional_float(self):
        assert make_key((0.5, -1.25)) == "0.5,-1.25"

    def test_empty(self):
        assert make_key(()) == ""

    def test_string_collides_with_number(self):
        """Документированное ограничение: 3 и '3' дают один ключ"""
        assert make_key(("3",)) == make_key((3,))


# =============================================================================
# ТЕСТЫ: memoize
# =============================================================================


class TestMemoize:
    """Поведение мемоизированной функции"""

    def test_transparent(self, counting_square):
        square, _ = counting_square
        memo = memoize(square)
        for x in (0, 1, 2, 7, -3, 0.5):
            assert memo(x) == square(x)

    def test_evaluated_once_per_key(self, counting_square):
        square, calls = counting_square
        memo = memoize(square)

        assert memo(4) == 16
        assert memo(4) == 16
        assert memo(4.0) == 16
        assert calls == [4]

        assert memo(5) == 25
        assert calls == [4, 5]

    def test_collision_returns_first_result(self):
        """Коллизия ключей возвращает закэшированное значение"""
        memo = memoize(lambda x: type(x).__name__)
        assert memo(3) == "int"
        assert memo("3") == "int"

    def test_multiple_arguments(self):
        calls = []

        def sub(a, b):
            calls.append((a, b))
            return a - b

        memo = memoize(sub)
        assert memo(5, 2) == 3
        assert memo(2, 5) == -3
        assert memo(5, 2) == 3
        assert calls == [(5, 2), (2, 5)]

    def test_wrapper_metadata(self, counting_square):
        square, _ = counting_square
        memo = memoize(square)
        assert isinstance(memo, Memoized)
        assert memo.__wrapped__ is square
        assert memo.__name__ == "square"


class TestMemoizeIdempotence:
    """Повторная обёртка возвращает существующий wrapper"""

    def test_wrapping_wrapper_returns_same(self, counting_square):
        square, _ = counting_square
        memo = memoize(square)
        assert memoize(memo) is memo

    def test_wrapping_function_twice_returns_same(self, counting_square):
        square, calls = counting_square
        first = memoize(square)
        second = memoize(square)
        assert first is second

        first(3)
        second(3)
        assert calls == [3]

    def test_unhashable_callable_still_wrapped(self):
        class Unhashable:
            __hash__ = None

            def __call__(self, x):
                return x + 1

        memo = memoize(Unhashable())
        assert memo(1) == 2
        assert memo(1) == 2


class TestMemoizeLifetime:
    """Wrapper хранится на функции и не переживает её"""

    def test_wrapper_attached_to_function(self, counting_square):
        square, _ = counting_square
        memo = memoize(square)
        assert square.memo is memo
        assert square not in memo_module._REGISTRY

    def test_wrapper_collected_with_function(self):
        def make():
            return lambda x: x + 1

        func = make()
        memoize(func)(1)
        ref = weakref.ref(func)
        del func
        gc.collect()
        assert ref() is None

    def test_copied_memo_attribute_not_reused(self, counting_square):
        """functools.wraps копирует f.memo в новую функцию"""
        square, _ = counting_square
        memo = memoize(square)

        @functools.wraps(square)
        def wrapped(x):
            return square(x) + 1

        assert wrapped.memo is memo
        assert memoize(wrapped) is not memo
        assert memoize(wrapped)(2) == 5

    def test_builtin_uses_registry(self):
        memo = memoize(abs)
        assert memoize(abs) is memo
        assert memo(-3) == 3
        assert memo_module._REGISTRY[abs] is memo


# =============================================================================
# ТЕСТЫ: MemoCache
# =============================================================================


class TestMemoCache:
    """Явный объект кэша"""

    def test_injected_cache_is_used(self):
        cache = MemoCache()
        memo = memoize(lambda x: x + 1, cache)

        assert memo.cache is cache
        memo(1)
        memo(2)
        assert len(cache) == 2
        assert "1" in cache
        assert sorted(cache.keys()) == ["1", "2"]

    def test_clear_forces_recompute(self, counting_square):
        square, calls = counting_square
        memo = memoize(square, MemoCache())

        memo(2)
        memo.cache.clear()
        memo(2)
        assert calls == [2, 2]

    def test_insert_keeps_first_value(self):
        cache = MemoCache()
        assert cache.insert("k", 1) == 1
        assert cache.insert("k", 2) == 1

    def test_concurrent_first_calls(self):
        """Одновременные вызовы дают один и тот же результат, кэш цел"""
        memo = memoize(lambda x: x * 10, MemoCache())
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            for i in range(50):
                results.append(memo(i))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8 * 50
        assert len(memo.cache) == 50
        assert all(memo(i) == i * 10 for i in range(50))
