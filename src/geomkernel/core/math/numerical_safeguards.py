"""
Numerical Safeguards — базовые численные примитивы

Модуль обеспечивает единообразную работу с float во всём ядре:
- EPS: порог близости к нулю (closeness-to-zero)
- NaN/Inf проверки
- Epsilon-сравнения float
- Деление с семантикой IEEE-754 (x/0 = ±inf, 0/0 = NaN) без исключений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ieee_divide никогда не бросает ZeroDivisionError
2. NaN сигнализирует неопределённый результат и не заменяется молча
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Optional

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог близости к нулю: |x| < EPS считается нулём.
# Значение по умолчанию для KernelConfig.eps; is_zero читает конфигурацию.
EPS: Final[float] = 1e-6

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-12

NAN: Final[float] = math.nan


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_integral(value: float) -> bool:
    """
    Проверка, что число целое (int или float без дробной части).

    Examples:
        >>> is_integral(3)
        True
        >>> is_integral(3.0)
        True
        >>> is_integral(2.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return True
    return math.isfinite(value) and math.floor(value) == value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: Optional[float] = None) -> bool:
    """
    Проверка, близко ли значение к нулю.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: KernelConfig.eps,
            т.е. EPS, если не переопределено через GEOMKERNEL_EPS)

    Returns:
        True если abs(value) < tol
    """
    if tol is None:
        # config импортирует EPS из этого модуля
        from geomkernel.core.config import get_config

        tol = get_config().eps
    return abs(value) < tol


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = 0.0,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    В отличие от math.isclose, два NaN считаются равными, а бесконечности
    одного знака — близкими. Это нужно для сравнения stdform прямых,
    у которых слоты радиуса и центра не конечны.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-15)
        True
        >>> is_close(float('nan'), float('nan'))
        True
        >>> is_close(1.0, 1.1)
        False
    """
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    Python бросает ZeroDivisionError при делении float на ноль; здесь
    результат совпадает с аппаратным:
    - x / ±0 = ±inf (знак = sign(x) * sign(0))
    - 0 / 0 = NaN, NaN / 0 = NaN

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(-0.5, 0.0)
        -inf
        >>> ieee_divide(6.0, 3.0)
        2.0
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator) or math.isnan(denominator):
        return NAN

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)
