"""
JSON Schema Contract Validators

Модуль для валидации конфигурационных документов согласно JSON Schema
контрактам из `contracts/schema/` (Draft 2020-12). Использует библиотеку
jsonschema для проверки соответствия данных схемам.

Схемы:
- sampling_config.json (SamplingConfig)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema import Draft202012Validator

from homotopy.validation.sampling import SamplingConfig

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в `schema/` рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'sampling_config')

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация данных по одной именованной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class SamplingConfigValidator(ContractValidator):
    """Валидатор контракта sampling_config."""

    def __init__(self):
        super().__init__("sampling_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_sampling_config(data: Dict[str, Any]) -> None:
    """
    Валидация документа sampling_config.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SamplingConfigValidator().validate(data)


def load_sampling_config(path: Union[str, Path]) -> SamplingConfig:
    """
    Загрузка SamplingConfig из JSON файла.

    Документ сначала проверяется по схеме, затем строится pydantic модель.

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        ValidationError: Если документ не соответствует схеме
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_sampling_config(data)
    logger.debug("loaded sampling config from %s: %r", path, data)
    return SamplingConfig(**data)
