"""
Aggregation — Сводные показатели склада и сделок

Суммы 24K-эквивалента и стоимости по коллекциям записей для дашборда
и отчётов. 24K-эквивалент каждой позиции пересчитывается из веса,
единицы и пробы; сохранённым значениям не доверяем.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from src.core.domain.inventory import InventoryItem
from src.core.domain.transaction import Transaction
from src.core.domain.units import GRAMS_PER_TROY_OUNCE
from src.core.domain.vocabulary import TransactionDirection
from src.core.math.numerical_safeguards import has_at_least


DEFAULT_LOW_STOCK_THRESHOLD = 2


@dataclass(frozen=True)
class InventoryAvailability:
    """Достаточно ли остатка для сделки"""

    quantity_available: bool
    weight_available: bool

    @property
    def is_available(self) -> bool:
        return self.quantity_available and self.weight_available


def calculate_total_24k_weight(items: Iterable[InventoryItem]) -> float:
    """
    Суммарный 24K-эквивалент позиций в граммах.

    Количество не учитывается: вес позиции — общий вес партии.
    """
    return sum((item.equivalent_24k() for item in items), 0.0)


def get_category_totals(items: Iterable[InventoryItem]) -> Dict[str, float]:
    """24K-эквивалент (г) по категориям: {"Bars": ..., "Jewelry": ...}"""
    totals: Dict[str, float] = {}
    for item in items:
        category = item.category.value.capitalize()
        totals[category] = totals.get(category, 0.0) + item.equivalent_24k()
    return totals


def calculate_total_inventory_value(
    items: Iterable[InventoryItem], spot_price: float
) -> float:
    """
    Стоимость склада по spot-цене.

    Σ (24K граммы / 31.1035) * spot * quantity

    Args:
        items: Позиции склада
        spot_price: Spot за тройскую унцию

    Returns:
        Стоимость в валюте spot-цены
    """
    total = 0.0
    for item in items:
        troy_ounces = item.equivalent_24k() / GRAMS_PER_TROY_OUNCE
        total += troy_ounces * spot_price * item.quantity
    return total


def calculate_transactions_total(
    transactions: Iterable[Transaction],
    direction: Optional[TransactionDirection] = None,
) -> float:
    """Сумма total_price, опционально только по одному направлению"""
    return sum(
        (
            tx.total_price
            for tx in transactions
            if direction is None or tx.type == direction
        ),
        0.0,
    )


def get_low_stock_items(
    items: Iterable[InventoryItem], threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
) -> List[InventoryItem]:
    """Позиции с количеством <= threshold"""
    return [item for item in items if item.quantity <= threshold]


def verify_inventory_availability(
    item: InventoryItem, quantity: int, weight: float
) -> InventoryAvailability:
    """
    Проверка остатка перед продажей.

    Вес сравнивается с допуском EPS_WEIGHT_G.

    Args:
        item: Позиция склада
        quantity: Требуемое количество
        weight: Требуемый вес (в единице позиции)
    """
    return InventoryAvailability(
        quantity_available=item.quantity >= quantity,
        weight_available=has_at_least(item.weight, weight),
    )
