"""Valuation — сводные показатели склада и сделок поверх ценового ядра.

- Суммы 24K-эквивалента и стоимости склада
- Изменение остатков по сделке
- Статическая конверсия валют для отчётов
"""

from .aggregation import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    InventoryAvailability,
    calculate_total_24k_weight,
    calculate_total_inventory_value,
    calculate_transactions_total,
    get_category_totals,
    get_low_stock_items,
    verify_inventory_availability,
)
from .currency import STATIC_EXCHANGE_RATES, convert_currency
from .debug import log_inventory_breakdown
from .inventory_update import apply_transaction_to_item, update_inventory_weight

__all__ = [
    "DEFAULT_LOW_STOCK_THRESHOLD",
    "InventoryAvailability",
    "calculate_total_24k_weight",
    "calculate_total_inventory_value",
    "calculate_transactions_total",
    "get_category_totals",
    "get_low_stock_items",
    "verify_inventory_availability",
    "STATIC_EXCHANGE_RATES",
    "convert_currency",
    "log_inventory_breakdown",
    "apply_transaction_to_item",
    "update_inventory_weight",
]
