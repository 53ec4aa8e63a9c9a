"""
JSON Schema Contract Validators

Контракты калькулятора CPMM (draft 2020-12, библиотека jsonschema):
- session_state.json — снапшот SessionState (CalculatorSession.snapshot())
- calculator_output.json — строки отображения (CalculatorSession.render())

CalculatorSession проверяет свои выходы этими валидаторами, если
CalculatorConfig.validate_contracts включён.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError

# contracts/schema/ в корне проекта (src/core/contracts/validators.py → 4 уровня вверх)
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"

SESSION_STATE_SCHEMA = "session_state"
CALCULATOR_OUTPUT_SCHEMA = "calculator_output"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов калькулятора.

    Каждая схема проходит meta-validation при первой загрузке.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        """
        Args:
            schema_dir: каталог со схемами (default: contracts/schema/ проекта)

        Raises:
            FileNotFoundError: если каталог не существует
        """
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise FileNotFoundError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: если файл схемы не найден
            ValueError: если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик для каталога схем проекта (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def _error_path(error: ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


class ContractValidator:
    """Валидатор данных против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: наиболее релевантное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде "путь: сообщение", отсортированные по пути."""
        return sorted(f"{_error_path(e)}: {e.message}" for e in self.iter_errors(data))


class SessionStateValidator(ContractValidator):
    """Контракт снапшота SessionState."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(SESSION_STATE_SCHEMA, loader)


class CalculatorOutputValidator(ContractValidator):
    """Контракт строк отображения render()."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(CALCULATOR_OUTPUT_SCHEMA, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_session_state(data: Dict[str, Any]) -> None:
    SessionStateValidator().validate(data)


def validate_calculator_output(data: Dict[str, Any]) -> None:
    CalculatorOutputValidator().validate(data)
