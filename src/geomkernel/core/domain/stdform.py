"""
Stdform — каноническая форма обобщённой окружности

Обобщённая окружность (окружность или прямая как окружность
бесконечного радиуса) задаётся 8 слотами:

    [c, b0, b1, a, k, r, q0, q1]

    c       — свободный член
    b0, b1  — линейные коэффициенты
    a       — квадратичный коэффициент (0 для прямой)
    k       — параметр кривизны
    r       — радиус, k / (2a) (inf или NaN для прямой)
    q0, q1  — центр, (-b0 / 2a, -b1 / 2a)

normalize_stdform пересчитывает слоты в один из трёх режимов:

1. Прямая (r бесконечен или NaN): (b0, b1) — единичная нормаль, a = 0, k = 1
2. Большой радиус (|r| >= 1): коэффициенты из центра и радиуса, k = 1
3. Общий случай: знак signr фиксирует ориентацию, a = signr / 2

Нормализация чистая: вход не изменяется, возвращается новый массив.
Повторная нормализация — неподвижная точка.
"""

import math
from typing import List, Sequence

from pydantic import BaseModel, Field

from geomkernel.core.math.numerical_safeguards import ieee_divide
from geomkernel.log import get_logger

logger = get_logger(__name__)

STDFORM_SIZE = 8

# Минимум осмысленных слотов на входе: c, b0, b1, a, k
STDFORM_MIN_INPUT_SIZE = 5


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_stdform(stdform: Sequence[float]) -> List[float]:
    """
    Нормализация stdform [c, b0, b1, a, k, r, q0, q1].

    Повторная нормализация результата — неподвижная точка: точно при
    |r| < 1, с относительной погрешностью до 1e-12 для прямых и при
    |r| >= 1 (1 / (1 / r) и hypot не точны в двоичной арифметике).
    Сравнивайте такие результаты через is_close.

    Args:
        stdform: 5-8 чисел; значимы слоты 0-4, слоты 5-7 пересчитываются

    Returns:
        Новый список из 8 float в канонической форме

    Raises:
        ValueError: Если длина вне диапазона 5..8

    Examples:
        >>> normalize_stdform([5.0, 3.0, 4.0, 0.0, 0.0])[:5]
        [1.0, 0.6, 0.8, 0.0, 1.0]
        >>> normalize_stdform([0.0, 0.0, 0.0, 0.5, 0.5])[3]
        0.5
    """
    if not STDFORM_MIN_INPUT_SIZE <= len(stdform) <= STDFORM_SIZE:
        raise ValueError(
            f"stdform must have {STDFORM_MIN_INPUT_SIZE}..{STDFORM_SIZE} slots, "
            f"got {len(stdform)}"
        )

    s = [float(x) for x in stdform] + [0.0] * (STDFORM_SIZE - len(stdform))

    a2 = 2.0 * s[3]
    r = ieee_divide(s[4], a2)  # k / (2a)
    s[5] = r
    s[6] = ieee_divide(-s[1], a2)
    s[7] = ieee_divide(-s[2], a2)

    if math.isinf(r) or math.isnan(r):
        n = math.hypot(s[1], s[2])
        if n == 0:
            logger.warning("stdform line with zero normal: %r", list(stdform))
        s[0] = ieee_divide(s[0], n)
        s[1] = ieee_divide(s[1], n)
        s[2] = ieee_divide(s[2], n)
        s[3] = 0.0
        s[4] = 1.0
        # производные слоты согласуются с новыми k = 1, a = 0
        s[5] = ieee_divide(s[4], 0.0)
        s[6] = ieee_divide(-s[1], 0.0)
        s[7] = ieee_divide(-s[2], 0.0)
    elif abs(r) >= 1:
        s[0] = (s[6] * s[6] + s[7] * s[7] - r * r) / (2 * r)
        s[1] = -s[6] / r
        s[2] = -s[7] / r
        s[3] = 1 / (2 * r)
        s[4] = 1.0
    else:
        signr = -1.0 if r <= 0 else 1.0
        s[0] = signr * (s[6] * s[6] + s[7] * s[7] - r * r) * 0.5
        s[1] = -signr * s[6]
        s[2] = -signr * s[7]
        s[3] = signr / 2
        s[4] = signr * r

    return s


normalize = normalize_stdform


# =============================================================================
# STDFORM MODEL
# =============================================================================


class Stdform(BaseModel):
    """
    Stdform обобщённой окружности.

    Immutable модель (frozen=True): normalize() возвращает новый экземпляр.
    Бесконечные и NaN значения допустимы (радиус и центр прямой).
    """

    c: float = Field(0.0, description="Свободный член")
    b0: float = Field(0.0, description="Линейный коэффициент при x")
    b1: float = Field(0.0, description="Линейный коэффициент при y")
    a: float = Field(0.0, description="Квадратичный коэффициент (0 для прямой)")
    k: float = Field(0.0, description="Параметр кривизны")
    r: float = Field(0.0, description="Радиус k / (2a)")
    q0: float = Field(0.0, description="Центр, x")
    q1: float = Field(0.0, description="Центр, y")

    model_config = {"frozen": True}

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Stdform":
        """
        Модель из массива 5-8 чисел; недостающие слоты заполняются нулями.

        Raises:
            ValueError: Если длина вне диапазона 5..8
        """
        if not STDFORM_MIN_INPUT_SIZE <= len(values) <= STDFORM_SIZE:
            raise ValueError(
                f"stdform must have {STDFORM_MIN_INPUT_SIZE}..{STDFORM_SIZE} slots, "
                f"got {len(values)}"
            )
        padded = list(values) + [0.0] * (STDFORM_SIZE - len(values))
        return cls(
            c=padded[0], b0=padded[1], b1=padded[2], a=padded[3],
            k=padded[4], r=padded[5], q0=padded[6], q1=padded[7],
        )

    @classmethod
    def from_circle(cls, center: Sequence[float], radius: float) -> "Stdform":
        """
        Нормализованная stdform окружности.

        Args:
            center: (x, y) центра
            radius: Радиус (бесконечный радиус даёт вырожденную прямую)
        """
        return cls(
            b0=-center[0], b1=-center[1], a=0.5, k=radius,
        ).normalize()

    @classmethod
    def from_line(cls, line: Sequence[float]) -> "Stdform":
        """
        Нормализованная stdform прямой c + b0*x + b1*y = 0.

        Args:
            line: однородные координаты прямой [c, b0, b1]
                  (например, cross_product двух точек)
        """
        return cls(c=line[0], b0=line[1], b1=line[2], a=0.0, k=1.0).normalize()

    def to_list(self) -> List[float]:
        """Массив [c, b0, b1, a, k, r, q0, q1]."""
        return [self.c, self.b0, self.b1, self.a, self.k, self.r, self.q0, self.q1]

    def normalize(self) -> "Stdform":
        """Новая stdform в канонической форме."""
        return Stdform.from_sequence(normalize_stdform(self.to_list()))

    def is_line(self) -> bool:
        """Прямая: квадратичный коэффициент равен нулю."""
        return self.a == 0

    @property
    def center(self) -> tuple[float, float]:
        return (self.q0, self.q1)
