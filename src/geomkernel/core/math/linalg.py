"""
Linalg — матрицы и векторы малой размерности

Матрица — список строк (row-major), вектор — список float.
Операции рассчитаны на небольшие массивы фиксированной формы
(однородные координаты 2D: длина 3), а не на общую линейную алгебру.

ПРОВЕРКА РАЗМЕРНОСТЕЙ:
    Несогласованные формы приводят к ShapeMismatchError до начала
    вычислений. Проверку можно отключить через KernelConfig.check_shapes;
    результат для согласованных входов от этого не меняется.

ОДНОРОДНЫЕ КООРДИНАТЫ:
    cross_product двух точек — прямая через них;
    cross_product двух прямых — их точка пересечения.
"""

import math
from typing import List, Optional, Sequence

from geomkernel.core import config as kernel_config

Vector = List[float]
Matrix = List[List[float]]


class ShapeMismatchError(ValueError):
    """Размерности аргументов не согласованы для операции."""

    pass


# =============================================================================
# ПРОВЕРКИ РАЗМЕРНОСТЕЙ
# =============================================================================


def _checks_enabled() -> bool:
    return kernel_config.get_config().check_shapes


def _columns(mat: Sequence[Sequence[float]]) -> int:
    return len(mat[0]) if len(mat) > 0 else 0


def _check_rectangular(op: str, name: str, mat: Sequence[Sequence[float]]) -> None:
    cols = _columns(mat)
    for i, row in enumerate(mat):
        if len(row) != cols:
            raise ShapeMismatchError(
                f"{op}: {name} is not rectangular "
                f"(row 0 has {cols} columns, row {i} has {len(row)})"
            )


def _size(op: str, name: str, value: float) -> int:
    # Дробные размеры округляются вверх
    if value < 0:
        raise ShapeMismatchError(f"{op}: {name} must be >= 0, got {value}")
    return int(math.ceil(value))


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def matrix(n: float, m: float, init: float = 0.0) -> Matrix:
    """
    Матрица n x m, все элементы равны init.

    Args:
        n: Число строк (дробное округляется вверх)
        m: Число столбцов (дробное округляется вверх)
        init: Начальное значение (default: 0.0)

    Returns:
        Новая матрица (строки не разделяют память)

    Raises:
        ShapeMismatchError: Если n или m отрицательны

    Examples:
        >>> matrix(2, 3, 1.5)
        [[1.5, 1.5, 1.5], [1.5, 1.5, 1.5]]
        >>> matrix(1.2, 1)
        [[0.0], [0.0]]
    """
    rows = _size("matrix", "n", n)
    cols = _size("matrix", "m", m)
    return [[init] * cols for _ in range(rows)]


def identity(n: float, m: Optional[float] = None):
    """
    Вектор из единиц или единичная (диагональная) матрица.

    С одним аргументом возвращает вектор длины n, все элементы которого
    равны 1 (не единичный вектор). Вызывающий код на это поведение
    опирается, оно сохраняется.

    Args:
        n: Длина вектора или число строк
        m: Число столбцов (optional)

    Returns:
        [1.0] * n, либо матрица n x m с 1.0 на диагонали до min(n, m)

    Examples:
        >>> identity(3)
        [1.0, 1.0, 1.0]
        >>> identity(2, 3)
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
    """
    if m is None:
        return [1.0] * _size("identity", "n", n)

    result = matrix(n, m)
    for i in range(min(len(result), _columns(result))):
        result[i][i] = 1.0
    return result


# =============================================================================
# ПРОИЗВЕДЕНИЯ
# =============================================================================


def mat_vec_mult(mat: Sequence[Sequence[float]], vec: Sequence[float]) -> Vector:
    """
    Произведение матрицы на вектор: mat * vec.

    Для векторов длины 3 используется развёрнутый цикл; результат
    побитово совпадает с общим путём.

    Raises:
        ShapeMismatchError: Если длина строки mat != len(vec)

    Examples:
        >>> mat_vec_mult([[2, 1], [1, 3]], [4, 5])
        [13.0, 19.0]
    """
    n = len(vec)
    if _checks_enabled():
        for i, row in enumerate(mat):
            if len(row) != n:
                raise ShapeMismatchError(
                    f"mat_vec_mult: row {i} has {len(row)} columns, vector has length {n}"
                )

    if n == 3:
        v0, v1, v2 = vec
        return [0.0 + row[0] * v0 + row[1] * v1 + row[2] * v2 for row in mat]

    result = []
    for row in mat:
        s = 0.0
        for k in range(n):
            s += row[k] * vec[k]
        result.append(s)
    return result


def mat_mat_mult(mat1: Sequence[Sequence[float]], mat2: Sequence[Sequence[float]]) -> Matrix:
    """
    Произведение матриц mat1 * mat2.

    Raises:
        ShapeMismatchError: Если число столбцов mat1 != число строк mat2
            или одна из матриц не прямоугольная
    """
    m = len(mat1)
    n = _columns(mat2) if m > 0 else 0
    inner = len(mat2)

    if _checks_enabled() and m > 0:
        _check_rectangular("mat_mat_mult", "mat1", mat1)
        _check_rectangular("mat_mat_mult", "mat2", mat2)
        if _columns(mat1) != inner:
            raise ShapeMismatchError(
                f"mat_mat_mult: cannot multiply {m}x{_columns(mat1)} by {inner}x{n}"
            )

    result = matrix(m, n)
    for i in range(m):
        row = mat1[i]
        for j in range(n):
            s = 0.0
            for k in range(inner):
                s += row[k] * mat2[k][j]
            result[i][j] = s
    return result


def mat_transpose(mat: Sequence[Sequence[float]]) -> Matrix:
    """
    Транспонирование матрицы.

    Пустая матрица (0 строк) даёт пустой результат.

    Raises:
        ShapeMismatchError: Если матрица не прямоугольная
    """
    if _checks_enabled():
        _check_rectangular("mat_transpose", "mat", mat)

    rows = len(mat)
    cols = _columns(mat)
    return [[mat[j][i] for j in range(rows)] for i in range(cols)]


def cross_product(c1: Sequence[float], c2: Sequence[float]) -> Vector:
    """
    Векторное произведение двух векторов длины 3.

    В однородных координатах:
    - две точки -> прямая через них
    - две прямые -> точка пересечения

    Args:
        c1: однородные координаты прямой (точки) 1
        c2: однородные координаты прямой (точки) 2

    Returns:
        Вектор длины 3: однородные координаты результата

    Raises:
        ShapeMismatchError: Если длина аргумента не 3
    """
    if _checks_enabled() and (len(c1) != 3 or len(c2) != 3):
        raise ShapeMismatchError(
            f"cross_product: expected two 3-vectors, got lengths {len(c1)} and {len(c2)}"
        )

    return [
        c1[1] * c2[2] - c1[2] * c2[1],
        c1[2] * c2[0] - c1[0] * c2[2],
        c1[0] * c2[1] - c1[1] * c2[0],
    ]


def inner_product(a: Sequence[float], b: Sequence[float], n: Optional[int] = None) -> float:
    """
    Скалярное произведение по первым n компонентам.

    Args:
        a: Вектор
        b: Вектор
        n: Число компонент (default: len(a))

    Raises:
        ShapeMismatchError: Если n больше длины a или b

    Examples:
        >>> inner_product([1, 2, 3], [4, 5, 6])
        32.0
        >>> inner_product([1, 2, 3], [4, 5, 6], 2)
        14.0
    """
    if n is None:
        n = len(a)

    if _checks_enabled() and (n > len(a) or n > len(b)):
        raise ShapeMismatchError(
            f"inner_product: n={n} exceeds vector lengths {len(a)} and {len(b)}"
        )

    s = 0.0
    for i in range(n):
        s += a[i] * b[i]
    return s


# =============================================================================
# CAMELCASE ALIASES
# =============================================================================

matVecMult = mat_vec_mult
matMatMult = mat_mat_mult
matTranspose = mat_transpose
crossProduct = cross_product
innerProduct = inner_product
