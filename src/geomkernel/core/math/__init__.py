"""
Core math modules для geomkernel

Скалярные helpers, мемоизация, комбинаторика и матрично-векторное ядро.
"""

# Numerical Safeguards
from geomkernel.core.math.numerical_safeguards import (
    EPS,
    EPS_FLOAT_COMPARE_REL,
    ieee_divide,
    is_close,
    is_integral,
    is_valid_float,
    is_zero,
)

# Scalar helpers
from geomkernel.core.math.scalar import cosh, pow_, power, sinh

# Memoizer
from geomkernel.core.math.memo import MemoCache, Memoized, make_key, memoize

# Combinatorics
from geomkernel.core.math.combinatorics import (
    BINOMIAL_CACHE,
    FACTORIAL_CACHE,
    binomial,
    factorial,
)

# Linalg
from geomkernel.core.math.linalg import (
    Matrix,
    ShapeMismatchError,
    Vector,
    crossProduct,
    cross_product,
    identity,
    innerProduct,
    inner_product,
    matMatMult,
    matTranspose,
    matVecMult,
    mat_mat_mult,
    mat_transpose,
    mat_vec_mult,
    matrix,
)

__all__ = [
    # Numerical Safeguards
    "EPS",
    "EPS_FLOAT_COMPARE_REL",
    "ieee_divide",
    "is_close",
    "is_integral",
    "is_valid_float",
    "is_zero",
    # Scalar helpers
    "cosh",
    "pow_",
    "power",
    "sinh",
    # Memoizer
    "MemoCache",
    "Memoized",
    "make_key",
    "memoize",
    # Combinatorics
    "BINOMIAL_CACHE",
    "FACTORIAL_CACHE",
    "binomial",
    "factorial",
    # Linalg — Types
    "Matrix",
    "Vector",
    "ShapeMismatchError",
    # Linalg — Functions
    "cross_product",
    "identity",
    "inner_product",
    "mat_mat_mult",
    "mat_transpose",
    "mat_vec_mult",
    "matrix",
    # Linalg — camelCase aliases
    "crossProduct",
    "innerProduct",
    "matMatMult",
    "matTranspose",
    "matVecMult",
]
