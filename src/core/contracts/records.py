"""
Records — JSON-записи хранилища ↔ доменные модели

Хранилище держит записи в camelCase (как их пишет UI). Старые записи
хранят значения перечислений в произвольном регистре ("Bars", "22k"),
поэтому перед проверкой контрактом они приводятся к wire-значениям теми же
parse_*, что и в моделях. Нераспознанное значение не трогается и
отклоняется контрактом.

Лишние поля хранилища, которые ядро пересчитывает само (equivalent24k),
отбрасываются.
"""

from typing import Any, Callable, Dict, Final, Mapping

from pydantic import BaseModel

from src.core.contracts.validators import validate_inventory_item, validate_transaction
from src.core.domain.inventory import InventoryItem
from src.core.domain.purity import parse_purity
from src.core.domain.transaction import Transaction
from src.core.domain.units import parse_weight_unit
from src.core.domain.vocabulary import (
    parse_category,
    parse_commission_mode,
    parse_currency,
    parse_direction,
    parse_payment_method,
    parse_register_type,
)


_INVENTORY_FIELDS: Final[Mapping[str, str]] = {
    "id": "id",
    "type": "register_type",
    "category": "category",
    "name": "name",
    "weight": "weight",
    "weightUnit": "weight_unit",
    "purity": "purity",
    "quantity": "quantity",
    "dateAdded": "date_added",
    "barcode": "barcode",
    "description": "description",
    "costPrice": "cost_price",
    "featured": "featured",
}

_TRANSACTION_FIELDS: Final[Mapping[str, str]] = {
    "id": "id",
    "type": "type",
    "itemId": "item_id",
    "quantity": "quantity",
    "dateTime": "date_time",
    "spotPrice": "spot_price",
    "commission": "commission",
    "commissionType": "commission_type",
    "paymentMethod": "payment_method",
    "currency": "currency",
    "totalPrice": "total_price",
    "cashAmount": "cash_amount",
    "goldAmount": "gold_amount",
    "goldPurity": "gold_purity",
    "goldWeightUnit": "gold_weight_unit",
    "customer": "customer",
    "notes": "notes",
    "customerPhone": "customer_phone",
    "registerType": "register_type",
}

# Поля-перечисления записи → нормализатор
_INVENTORY_DESIGNATIONS: Final[Mapping[str, Callable[[Any], Any]]] = {
    "type": parse_register_type,
    "category": parse_category,
    "weightUnit": parse_weight_unit,
    "purity": parse_purity,
}

_TRANSACTION_DESIGNATIONS: Final[Mapping[str, Callable[[Any], Any]]] = {
    "type": parse_direction,
    "commissionType": parse_commission_mode,
    "paymentMethod": parse_payment_method,
    "currency": parse_currency,
    "registerType": parse_register_type,
    "goldPurity": parse_purity,
    "goldWeightUnit": parse_weight_unit,
}


def _normalize_designation(value: Any, parser: Callable[[Any], Any]) -> Any:
    try:
        parsed = parser(value)
    except ValueError:
        # контракт сообщит об ошибке с путём до поля
        return value
    return value if parsed is None else parsed.value


def normalize_record(
    data: Mapping[str, Any], designations: Mapping[str, Callable[[Any], Any]]
) -> Dict[str, Any]:
    """Копия записи с перечислениями, приведёнными к wire-значениям"""
    record = dict(data)
    for key, parser in designations.items():
        if key in record:
            record[key] = _normalize_designation(record[key], parser)
    return record


def _remap(data: Mapping[str, Any], fields: Mapping[str, str]) -> Dict[str, Any]:
    return {fields[key]: value for key, value in data.items() if key in fields}


def _to_record(model: BaseModel, fields: Mapping[str, str]) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    for key, attr in fields.items():
        value = getattr(model, attr)
        if value is None:
            continue
        record[key] = value.value if hasattr(value, "value") else value
    return record


def inventory_item_from_record(data: Dict[str, Any]) -> InventoryItem:
    """
    Построение InventoryItem из записи хранилища.

    Raises:
        jsonschema.ValidationError: Если запись не соответствует контракту
    """
    record = normalize_record(data, _INVENTORY_DESIGNATIONS)
    validate_inventory_item(record)
    return InventoryItem(**_remap(record, _INVENTORY_FIELDS))


def inventory_item_to_record(item: InventoryItem) -> Dict[str, Any]:
    """
    InventoryItem → запись хранилища.

    equivalent24k пересчитывается при каждой записи.
    """
    record = _to_record(item, _INVENTORY_FIELDS)
    record["equivalent24k"] = item.equivalent_24k()
    return record


def transaction_from_record(data: Dict[str, Any]) -> Transaction:
    """
    Построение Transaction из записи хранилища.

    Raises:
        jsonschema.ValidationError: Если запись не соответствует контракту
    """
    record = normalize_record(data, _TRANSACTION_DESIGNATIONS)
    validate_transaction(record)
    return Transaction(**_remap(record, _TRANSACTION_FIELDS))


def transaction_to_record(transaction: Transaction) -> Dict[str, Any]:
    """Transaction → запись хранилища (поля None не пишутся)"""
    return _to_record(transaction, _TRANSACTION_FIELDS)


_PRICE_REQUEST_DESIGNATIONS: Final[Mapping[str, Callable[[Any], Any]]] = {
    "direction": parse_direction,
    "category": parse_category,
    "weightUnit": parse_weight_unit,
    "currency": parse_currency,
}


def normalize_price_request(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Запрос калькулятора с перечислениями в wire-регистре.

    Проба не трогается: для запроса это свободная строка.
    """
    request = normalize_record(data, _PRICE_REQUEST_DESIGNATIONS)
    commission = request.get("commission")
    if isinstance(commission, Mapping):
        request["commission"] = normalize_record(commission, {"mode": parse_commission_mode})
    return request
