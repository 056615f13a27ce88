"""
Contract Validation Module

Проверка записей склада, сделок и запросов калькулятора по JSON Schema
контрактам и преобразование записей хранилища в доменные модели.
"""

from .validators import (
    CONTRACT_NAMES,
    ContractValidator,
    InventoryItemValidator,
    PriceRequestValidator,
    SchemaLoader,
    TransactionValidator,
    get_schema_loader,
    get_validator,
    validate_inventory_item,
    validate_price_request,
    validate_transaction,
)
from .records import (
    normalize_price_request,
    normalize_record,
    inventory_item_from_record,
    inventory_item_to_record,
    transaction_from_record,
    transaction_to_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InventoryItemValidator",
    "TransactionValidator",
    "PriceRequestValidator",
    # Functions
    "CONTRACT_NAMES",
    "get_schema_loader",
    "get_validator",
    "validate_inventory_item",
    "validate_transaction",
    "validate_price_request",
    # Records
    "normalize_price_request",
    "normalize_record",
    "inventory_item_from_record",
    "inventory_item_to_record",
    "transaction_from_record",
    "transaction_to_record",
]
