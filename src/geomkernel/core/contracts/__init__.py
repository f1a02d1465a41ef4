"""
Contract Validation Module

Модуль для валидации JSON контрактов ядра (stdform, vector3, matrix).
"""

from .validators import (
    ContractValidator,
    MatrixValidator,
    SchemaLoader,
    StdformValidator,
    Vector3Validator,
    validate_matrix,
    validate_stdform,
    validate_vector3,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "StdformValidator",
    "Vector3Validator",
    "MatrixValidator",
    # Functions
    "validate_stdform",
    "validate_vector3",
    "validate_matrix",
]
