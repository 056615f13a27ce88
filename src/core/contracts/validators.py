"""
Контракты записей KaratCloud (JSON Schema, Draft 2020-12)

Записи склада и сделок приходят из хранилища и форм в camelCase.
До построения доменных моделей каждая запись проверяется по своей
схеме из contracts/schema/:

- inventory_item — складская позиция
- transaction — сделка
- price_request — запрос расчёта цены калькулятором
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator


DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

CONTRACT_NAMES: Final[tuple] = ("inventory_item", "transaction", "price_request")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение и meta-проверка схем контрактов.

    Схема читается с диска один раз; повторные запросы отдаются из кэша.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема контракта по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не является корректной схемой Draft 2020-12
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_loader: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем (создаётся при первом обращении)"""
    global _loader
    if _loader is None:
        _loader = SchemaLoader()
    return _loader


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка записи по одной схеме контракта."""

    contract_name: str = ""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or get_schema_loader()).load_schema(self.contract_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, record: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        self._validator.validate(record)

    def is_valid(self, record: Dict[str, Any]) -> bool:
        return self._validator.is_valid(record)

    def iter_errors(self, record: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(record)

    def describe_errors(self, record: Dict[str, Any]) -> List[str]:
        """
        Все нарушения записи в виде "поле: сообщение" для показа в форме.

        Нарушения верхнего уровня (нет обязательного поля) помечаются "$".
        """
        messages = []
        for error in sorted(self.iter_errors(record), key=lambda e: list(e.absolute_path)):
            location = ".".join(str(part) for part in error.absolute_path) or "$"
            messages.append(f"{location}: {error.message}")
        return messages


class InventoryItemValidator(ContractValidator):
    contract_name = "inventory_item"


class TransactionValidator(ContractValidator):
    contract_name = "transaction"


class PriceRequestValidator(ContractValidator):
    contract_name = "price_request"


_VALIDATORS: Final[Dict[str, type]] = {
    cls.contract_name: cls
    for cls in (InventoryItemValidator, TransactionValidator, PriceRequestValidator)
}


def get_validator(contract_name: str) -> ContractValidator:
    """
    Валидатор по имени контракта.

    Raises:
        KeyError: Если контракт неизвестен
    """
    return _VALIDATORS[contract_name]()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_inventory_item(record: Dict[str, Any]) -> None:
    """Raises jsonschema.ValidationError, если запись позиции некорректна"""
    InventoryItemValidator().validate(record)


def validate_transaction(record: Dict[str, Any]) -> None:
    """Raises jsonschema.ValidationError, если запись сделки некорректна"""
    TransactionValidator().validate(record)


def validate_price_request(request: Dict[str, Any]) -> None:
    """Raises jsonschema.ValidationError, если запрос расчёта некорректен"""
    PriceRequestValidator().validate(request)
