"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- affine_fit_request.json: 4 исходные и 4 целевые точки
- affine_transform.json: 6 коэффициентов (a, b, c, d, e, f)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета: schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'affine_transform')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

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

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Запрос подгонки или результат (dict, уже разобранный из JSON)

        Raises:
            jsonschema.ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """
        Проверка валидности данных без exception.

        Args:
            data: Запрос подгонки или результат (dict)

        Returns:
            True если data соответствует схеме
        """
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Args:
            data: Запрос подгонки или результат (dict)

        Yields:
            ValidationError для каждого нарушения верхнего уровня
            (например, по одной ошибке на каждую некорректную точку)
        """
        return self.validator.iter_errors(data)

    def error_paths(self, data: Dict[str, Any]) -> list[str]:
        """
        Пути к некорректным полям в виде 'source/0/x', отсортированные.

        Args:
            data: Запрос подгонки или результат (dict)

        Returns:
            Пустой список, если data валидна
        """
        return sorted("/".join(str(p) for p in error.absolute_path) for error in self.iter_errors(data))


class AffineFitRequestValidator(ContractValidator):
    """Валидатор для affine_fit_request контракта."""

    def __init__(self):
        super().__init__("affine_fit_request")


class AffineTransformValidator(ContractValidator):
    """Валидатор для affine_transform контракта."""

    def __init__(self):
        super().__init__("affine_transform")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_affine_fit_request(data: Dict[str, Any]) -> None:
    """
    Валидация affine_fit_request данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    AffineFitRequestValidator().validate(data)


def validate_affine_transform(data: Dict[str, Any]) -> None:
    """
    Валидация affine_transform данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    AffineTransformValidator().validate(data)
