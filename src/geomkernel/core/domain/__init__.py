"""
Domain models and value objects.

Contains the generalized-circle standard form (Stdform) and its normalizer.
"""

from geomkernel.core.domain.stdform import (
    STDFORM_MIN_INPUT_SIZE,
    STDFORM_SIZE,
    Stdform,
    normalize,
    normalize_stdform,
)

__all__ = [
    "STDFORM_SIZE",
    "STDFORM_MIN_INPUT_SIZE",
    "Stdform",
    "normalize",
    "normalize_stdform",
]
