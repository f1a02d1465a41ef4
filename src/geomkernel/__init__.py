"""
geomkernel — вычислительное ядро 2D интерактивной геометрии

Плотная линейная алгебра малой размерности, однородные координаты,
комбинаторика с мемоизацией и каноническая форма обобщённых окружностей.
"""

from geomkernel.core.config import KernelConfig, get_config, set_config
from geomkernel.core.domain import Stdform, normalize, normalize_stdform
from geomkernel.core.math import (
    EPS,
    MemoCache,
    ShapeMismatchError,
    binomial,
    cosh,
    cross_product,
    factorial,
    identity,
    inner_product,
    mat_mat_mult,
    mat_transpose,
    mat_vec_mult,
    matrix,
    memoize,
    power,
    sinh,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Config
    "KernelConfig",
    "get_config",
    "set_config",
    # Math
    "EPS",
    "MemoCache",
    "ShapeMismatchError",
    "binomial",
    "cosh",
    "cross_product",
    "factorial",
    "identity",
    "inner_product",
    "mat_mat_mult",
    "mat_transpose",
    "mat_vec_mult",
    "matrix",
    "memoize",
    "power",
    "sinh",
    # Domain
    "Stdform",
    "normalize",
    "normalize_stdform",
]
