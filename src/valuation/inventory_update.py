"""
InventoryUpdate — Изменение остатков по сделке

Покупка добавляет на склад, продажа списывает (не ниже нуля).
Позиции неизменяемы: возвращается новый экземпляр.
"""

import structlog

from src.core.domain.inventory import InventoryItem
from src.core.domain.transaction import Transaction
from src.core.domain.vocabulary import TransactionDirection
from src.core.math.numerical_safeguards import safe_divide


logger = structlog.get_logger(__name__)


def update_inventory_weight(
    current_weight: float,
    transaction_weight: float,
    direction: TransactionDirection,
) -> float:
    """
    Новый вес позиции после сделки.

    buy:  current + transaction
    sell: max(0, current - transaction)
    """
    if direction == TransactionDirection.BUY:
        return current_weight + transaction_weight
    return max(0.0, current_weight - transaction_weight)


def apply_transaction_to_item(item: InventoryItem, transaction: Transaction) -> InventoryItem:
    """
    Применение сделки к позиции склада.

    Вес меняется пропорционально количеству: weight / quantity на единицу.
    Для позиции с нулевым количеством вес единицы считается нулевым.

    Args:
        item: Текущая позиция
        transaction: Сделка по этой позиции

    Returns:
        Новая позиция с обновлёнными quantity и weight

    Raises:
        ValueError: Если сделка относится к другой позиции
    """
    if transaction.item_id != item.id:
        raise ValueError(
            f"Transaction {transaction.id} targets item {transaction.item_id}, not {item.id}"
        )

    weight_per_unit = safe_divide(item.weight, item.quantity)
    weight_change = transaction.quantity * weight_per_unit

    if transaction.type == TransactionDirection.BUY:
        new_quantity = item.quantity + transaction.quantity
    else:
        new_quantity = max(0, item.quantity - transaction.quantity)
    new_weight = update_inventory_weight(item.weight, weight_change, transaction.type)

    updated = item.model_copy(update={"quantity": new_quantity, "weight": new_weight})

    logger.info(
        "inventory_updated",
        item_id=item.id,
        transaction_id=transaction.id,
        direction=transaction.type.value,
        quantity=new_quantity,
        weight=new_weight,
        weight_unit=item.weight_unit.value,
        equivalent_24k_g=updated.equivalent_24k(),
    )
    return updated
