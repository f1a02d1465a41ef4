"""
Тесты для Combinatorics: factorial и binomial

Проверяемые инварианты:
1. Корректность значений на малых аргументах
2. NaN для отрицательного (и нецелого) factorial
3. Граничные случаи binomial (k > n, k < 0, k == 0, k == n)
4. Мемоизация на уровне целого вызова
5. Поведение при переполнении
"""

import math

import pytest

from geomkernel.core.math.combinatorics import (
    BINOMIAL_CACHE,
    FACTORIAL_CACHE,
    binomial,
    factorial,
)
from geomkernel.core.math.memo import Memoized, memoize


@pytest.fixture(autouse=True)
def clean_caches():
    FACTORIAL_CACHE.clear()
    BINOMIAL_CACHE.clear()
    yield
    FACTORIAL_CACHE.clear()
    BINOMIAL_CACHE.clear()


# =============================================================================
# ТЕСТЫ: factorial
# =============================================================================


class TestFactorial:
    """Тесты factorial"""

    def test_known_values(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(10) == 3628800

    def test_matches_math_factorial(self):
        for n in range(20):
            assert factorial(n) == pytest.approx(math.factorial(n))

    def test_negative_is_nan(self):
        assert math.isnan(factorial(-1))
        assert math.isnan(factorial(-10))

    def test_non_integral_is_nan(self):
        assert math.isnan(factorial(2.5))

    def test_integral_float_argument(self):
        assert factorial(5.0) == 120

    def test_overflow_gives_inf(self):
        assert factorial(170) < math.inf
        assert factorial(171) == math.inf
        assert factorial(100000) == math.inf


class TestFactorialMemoization:
    """factorial кэширует только целые вызовы"""

    def test_is_memoized(self):
        assert isinstance(factorial, Memoized)
        assert factorial.cache is FACTORIAL_CACHE
        assert memoize(factorial) is factorial

    def test_whole_call_cached(self):
        factorial(6)
        assert "6" in FACTORIAL_CACHE
        assert len(FACTORIAL_CACHE) == 1

    def test_intermediate_values_not_cached(self):
        factorial(6)
        assert "5" not in FACTORIAL_CACHE
        assert "4" not in FACTORIAL_CACHE

    def test_repeat_call_hits_cache(self):
        first = factorial(7)
        assert factorial(7) == first
        assert len(FACTORIAL_CACHE) == 1


# =============================================================================
# ТЕСТЫ: binomial
# =============================================================================


class TestBinomial:
    """Тесты binomial"""

    def test_known_values(self):
        assert binomial(5, 2) == 10
        assert binomial(10, 3) == 120
        assert binomial(6, 3) == 20

    def test_k_greater_than_n(self):
        assert binomial(5, 6) == 0

    def test_negative_k(self):
        assert binomial(5, -1) == 0

    def test_edges_are_one(self):
        assert binomial(5, 0) == 1
        assert binomial(5, 5) == 1
        assert binomial(0, 0) == 1

    def test_symmetry(self):
        for n in range(1, 15):
            for k in range(n + 1):
                assert binomial(n, k) == pytest.approx(binomial(n, n - k))

    def test_matches_math_comb(self):
        for n in range(25):
            for k in range(n + 1):
                assert binomial(n, k) == pytest.approx(math.comb(n, k))

    def test_pascal_rule(self):
        for n in range(2, 12):
            for k in range(1, n):
                assert binomial(n, k) == pytest.approx(
                    binomial(n - 1, k - 1) + binomial(n - 1, k)
                )

    def test_large_n_without_factorial_overflow(self):
        """Мультипликативная формула не проходит через 1000!"""
        assert binomial(1000, 2) == pytest.approx(499500)
        assert math.isfinite(binomial(1000, 10))


class TestBinomialMemoization:
    """binomial кэширует по (n, k)"""

    def test_cached_on_argument_pair(self):
        binomial(7, 3)
        assert "7,3" in BINOMIAL_CACHE
        assert "7,4" not in BINOMIAL_CACHE

    def test_argument_order_matters(self):
        assert binomial(3, 7) == 0
        assert binomial(7, 3) == 35
        assert len(BINOMIAL_CACHE) == 2
