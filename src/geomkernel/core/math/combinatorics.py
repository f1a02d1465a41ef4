"""
Combinatorics — factorial и биномиальные коэффициенты

Обе функции мемоизированы через memoize (кэш на уровне целого вызова):
повторный вызов с тем же n (или (n, k)) — попадание в кэш.
Промежуточные значения factorial(n-1), factorial(n-2), ... не
кэшируются: произведение считается итеративно внутри одного вызова.

Результаты — float: переполнение даёт inf, а не огромный int, что
совпадает с ожиданиями кода кривых Безье, который их потребляет.
"""

import math

from geomkernel.core.math.memo import MemoCache, memoize
from geomkernel.core.math.numerical_safeguards import NAN, is_integral

FACTORIAL_CACHE = MemoCache()
BINOMIAL_CACHE = MemoCache()


def _factorial(n: float) -> float:
    """
    Факториал n! (float).

    Returns:
        NaN для n < 0 (и нецелого n), 1.0 для n ∈ {0, 1},
        иначе n * (n-1) * ... * 2

    Examples:
        >>> factorial(5)
        120.0
    """
    # Рекурсивное определение n * (n-1)! для нецелого n уходит в
    # отрицательный аргумент и даёт NaN; здесь то же без рекурсии.
    if n < 0 or not is_integral(n):
        return NAN
    if n == 0 or n == 1:
        return 1.0

    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
        if math.isinf(result):
            break
    return result


def _binomial(n: float, k: float) -> float:
    """
    Биномиальный коэффициент C(n, k) (float).

    Returns:
        0 если k > n или k < 0, 1 если k == 0 или k == n,
        иначе prod_{i<k} (n-i)/(i+1)

    Examples:
        >>> binomial(5, 2)
        10.0
    """
    if k > n or k < 0:
        return 0.0
    if k == 0 or k == n:
        return 1.0

    # Мультипликативная формула: без промежуточных факториалов
    b = 1.0
    i = 0
    while i < k:
        b *= n - i
        b /= i + 1
        i += 1
    return b


factorial = memoize(_factorial, FACTORIAL_CACHE)
binomial = memoize(_binomial, BINOMIAL_CACHE)
