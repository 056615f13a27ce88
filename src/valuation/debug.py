"""
Debug — Пошаговый разбор 24K-эквивалента склада в лог
"""

from typing import Iterable

import structlog

from src.core.domain.inventory import InventoryItem
from src.core.domain.purity import purity_factor


logger = structlog.get_logger(__name__)


def log_inventory_breakdown(items: Iterable[InventoryItem]) -> float:
    """
    Логирует разбор каждой позиции и возвращает суммарное содержание
    чистого золота в граммах.
    """
    total_pure_gold = 0.0

    for item in items:
        weight_in_grams = item.weight_in_grams()
        factor = purity_factor(item.purity)
        pure_gold = weight_in_grams * factor
        total_pure_gold += pure_gold

        logger.debug(
            "inventory_item_breakdown",
            name=item.name,
            original_weight=f"{item.weight} {item.weight_unit.value}",
            weight_in_grams=round(weight_in_grams, 2),
            purity=item.purity.value,
            purity_factor=factor,
            pure_gold_g=round(pure_gold, 2),
            quantity=item.quantity,
        )

    logger.debug("inventory_pure_gold_total", total_pure_gold_g=round(total_pure_gold, 2))
    return total_pure_gold
