"""
Scalar helpers — обобщённая степень и гиперболические функции

Модуль дополняет стандартный math:
- power(a, b): 0^0 = 1, 0^b = 0, NaN для отрицательного основания
  с нецелым показателем (вместо исключения или complex)
- cosh / sinh через exp, тотальные (переполнение даёт inf, не OverflowError)
"""

import math

from geomkernel.core.math.numerical_safeguards import NAN, is_integral


def _exp(x: float) -> float:
    # math.exp бросает OverflowError при x > ~709.78
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def power(a: float, b: float) -> float:
    """
    Вычисление a^b.

    Правила:
    - a == 0: 1 при b == 0, иначе 0
    - b целое (или бесконечное): стандартная степень
    - b нецелое, a > 0: exp(b * ln(a))
    - b нецелое, a <= 0: NaN

    Args:
        a: Основание
        b: Показатель

    Returns:
        a в степени b (float) или NaN

    Examples:
        >>> power(0, 0)
        1.0
        >>> power(0, 3)
        0.0
        >>> power(2, 3)
        8.0
        >>> import math; math.isnan(power(-2, 0.5))
        True
    """
    if a == 0:
        if b == 0:
            return 1.0
        return 0.0

    if math.isinf(b) or is_integral(b):
        try:
            return float(a) ** b
        except OverflowError:
            odd = not math.isinf(b) and int(b) % 2 == 1
            return math.copysign(math.inf, a) if odd else math.inf

    if a > 0:
        return _exp(b * math.log(a))
    return NAN


# Имя без конфликта с builtin pow
pow_ = power


def cosh(x: float) -> float:
    """Cosine hyperbolicus: (e^x + e^-x) / 2."""
    return (_exp(x) + _exp(-x)) * 0.5


def sinh(x: float) -> float:
    """Sine hyperbolicus: (e^x - e^-x) / 2."""
    return (_exp(x) - _exp(-x)) * 0.5
