"""
JSON Schema Contract Validators

Модуль для валидации массивов, которыми ядро обменивается с
геометрическим слоем, согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (geomkernel/core/contracts/schema/):
- stdform.json  — обобщённая окружность, 5-8 чисел
- vector3.json  — однородные координаты точки или прямой
- matrix.json   — матрица как массив строк
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы, поставляемые вместе с пакетом.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'stdform')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class StdformValidator(ContractValidator):
    def __init__(self):
        super().__init__("stdform")


class Vector3Validator(ContractValidator):
    def __init__(self):
        super().__init__("vector3")


class MatrixValidator(ContractValidator):
    def __init__(self):
        super().__init__("matrix")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_VALIDATORS: Dict[str, ContractValidator] = {}


def _validator(cls: type) -> ContractValidator:
    if cls.__name__ not in _VALIDATORS:
        _VALIDATORS[cls.__name__] = cls()
    return _VALIDATORS[cls.__name__]


def validate_stdform(data: Any) -> None:
    """
    Валидация stdform массива.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _validator(StdformValidator).validate(data)


def validate_vector3(data: Any) -> None:
    """
    Валидация вектора однородных координат.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _validator(Vector3Validator).validate(data)


def validate_matrix(data: Any) -> None:
    """
    Валидация матрицы (без проверки прямоугольности).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _validator(MatrixValidator).validate(data)
