"""
Contract Validators — JSON Schema контракт снимков ErrorTrackedFloat

Схема error_bound_snapshot.json лежит внутри пакета (src/core/contracts/schema)
и читается через importlib.resources, поэтому валидация работает из любой
установки, а не только из checkout репозитория.

Импорт модуля не обращается к файловой системе: общий загрузчик создаётся
при первой валидации (get_schema_loader).

Схемы:
- error_bound_snapshot.json (снимок пары value/error_bound)
"""

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

# Пакет, внутри которого лежит каталог schema/
_SCHEMA_PACKAGE = "src.core.contracts"
_SCHEMA_SUBDIR = "schema"

ERROR_BOUND_SNAPSHOT_SCHEMA = "error_bound_snapshot"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema с meta-валидацией и кэшем.

    По умолчанию читает схемы из ресурсов пакета. Явный schema_dir
    используется для внешних или тестовых схем.
    """

    def __init__(self, schema_dir: Path | None = None):
        if schema_dir is None:
            root = resources.files(_SCHEMA_PACKAGE).joinpath(_SCHEMA_SUBDIR)
        else:
            root = schema_dir
        if not root.is_dir():
            raise RuntimeError(f"Schema directory not found: {root}")

        self._root = root
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени (без .json), из кэша или с диска.

        Raises:
            FileNotFoundError: Если файла схемы нет
            json.JSONDecodeError: Если файл не является JSON
            ValueError: Если документ не проходит meta-валидацию draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        source = self._root.joinpath(f"{schema_name}.json")
        if not source.is_file():
            raise FileNotFoundError(f"Schema not found: {source}")

        schema = json.loads(source.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем пакета (создаётся при первом вызове)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения, а не только первое."""
        return self.validator.iter_errors(data)


class ErrorBoundSnapshotValidator(ContractValidator):
    """Контракт ErrorBoundSnapshot.model_dump()."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(ERROR_BOUND_SNAPSHOT_SCHEMA, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_error_bound_snapshot(data: Dict[str, Any]) -> None:
    """
    Проверка сериализованного снимка против контракта.

    Args:
        data: Словарь вида ErrorBoundSnapshot.model_dump()

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ErrorBoundSnapshotValidator().validate(data)
