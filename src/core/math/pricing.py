"""
Pricing — Расчёт цены сделки с золотом

Единственный источник формул цены покупки/продажи слитков, монет и ювелирки.

Базовая цена:

    слитки/монеты:  spot * rate / 1000 * grams * factor
    ювелирка:       spot * rate / 1000 * grams * (factor / 0.995)

    rate = 32.15 при продаже, 31.99 при покупке

Ставки 32.15 / 31.99 переводят spot за тройскую унцию в цену за грамм
пробы 999.9 и уже содержат спред покупки/продажи. Заменять их на
spot_per_gram * purity нельзя: изменятся все исторические цены.

Комиссия:
    percentage: base * (rate / 100)
    flat:       rate
    per_gram:   grams * rate

Итог: продажа base + commission, покупка base - commission.
Комиссия всегда в пользу магазина.

Все функции чистые и детерминированные: одинаковый ввод даёт бит-в-бит
одинаковый результат. Числовые вырожденные случаи (ноль, отрицательные
значения) не считаются ошибкой и не клампятся.
"""

from dataclasses import dataclass
from typing import Final, Optional

from src.core.domain.commission import NO_COMMISSION, CommissionSpec
from src.core.domain.purity import purity_factor
from src.core.domain.units import UnitLike, to_grams
from src.core.domain.vocabulary import (
    CommissionMode,
    Currency,
    ItemCategory,
    TransactionDirection,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ставка продажи (магазин продаёт клиенту)
SELL_RATE: Final[float] = 32.15

# Ставка покупки (магазин покупает у клиента)
BUY_RATE: Final[float] = 31.99

# Делитель ставки
RATE_DIVISOR: Final[float] = 1000.0

# Нормализатор пробы для ювелирки (база - проба 995)
JEWELRY_PURITY_NORMALIZER: Final[float] = 0.995


# =============================================================================
# ТИПЫ
# =============================================================================


@dataclass(frozen=True)
class PriceBreakdown:
    """Разбор расчёта цены по шагам"""

    direction: TransactionDirection
    category: ItemCategory
    weight_in_grams: float
    purity_factor: float  # из таблицы проб
    effective_purity_factor: float  # для ювелирки factor / 0.995
    rate: float  # 32.15 / 31.99
    base_price: float
    commission: float
    price: float


@dataclass(frozen=True)
class PriceQuote:
    """Итоговая цена, которую вызывающий код прикрепляет к записи"""

    amount: float
    currency: Currency
    direction: TransactionDirection


# =============================================================================
# ШАГИ РАСЧЁТА
# =============================================================================


def direction_rate(direction: TransactionDirection) -> float:
    """32.15 при продаже, 31.99 при покупке"""
    return SELL_RATE if direction == TransactionDirection.SELL else BUY_RATE


def effective_purity_factor(category: ItemCategory, factor: float) -> float:
    """
    Коэффициент пробы, входящий в формулу.

    Слитки/монеты: factor как есть.
    Ювелирка: factor / 0.995 (одинаково для покупки и продажи;
    асимметрию даёт только ставка).
    """
    if category.is_bullion:
        return factor
    return factor / JEWELRY_PURITY_NORMALIZER


def calculate_base_price(
    direction: TransactionDirection,
    category: ItemCategory,
    spot_price: float,
    weight_in_grams: float,
    purity: object,
) -> float:
    """
    Базовая цена без комиссии.

    Args:
        direction: Покупка / продажа
        category: Категория изделия
        spot_price: Spot за тройскую унцию
        weight_in_grams: Вес в граммах
        purity: Обозначение пробы (нераспознанное → 0.995)

    Returns:
        Базовая цена
    """
    rate = direction_rate(direction)
    factor = effective_purity_factor(category, purity_factor(purity))
    # Порядок операций фиксирован: результат должен совпадать бит-в-бит
    return spot_price * rate / RATE_DIVISOR * weight_in_grams * factor


def calculate_commission(
    commission: CommissionSpec,
    base_price: float,
    weight_in_grams: float,
) -> float:
    """
    Сумма комиссии.

    Args:
        commission: Ставка + режим
        base_price: Базовая цена (для percentage)
        weight_in_grams: Вес в граммах (для per_gram)

    Returns:
        Сумма комиссии (знак не проверяется)
    """
    if commission.mode == CommissionMode.PERCENTAGE:
        return base_price * (commission.rate / 100)
    if commission.mode == CommissionMode.PER_GRAM_AMOUNT:
        return weight_in_grams * commission.rate
    return commission.rate


def apply_commission(
    direction: TransactionDirection, base_price: float, commission_amount: float
) -> float:
    """Продажа: base + commission. Покупка: base - commission (без клампа)."""
    if direction == TransactionDirection.SELL:
        return base_price + commission_amount
    return base_price - commission_amount


# =============================================================================
# ПОЛНЫЙ РАСЧЁТ
# =============================================================================


def calculate_price_breakdown(
    direction: TransactionDirection,
    category: ItemCategory,
    spot_price: float,
    weight: float,
    weight_unit: UnitLike,
    purity: object,
    commission: Optional[CommissionSpec] = None,
) -> PriceBreakdown:
    """
    Расчёт цены сделки с разбором по шагам.

    1. weight_in_grams = to_grams(weight, weight_unit)
    2. factor = purity_factor(purity)
    3. base_price по формуле категории
    4. commission по режиму
    5. price = base ± commission

    Raises:
        InvalidUnitError: Если единица веса не распознана
    """
    fee = commission if commission is not None else NO_COMMISSION

    weight_in_grams = to_grams(weight, weight_unit)
    factor = purity_factor(purity)
    base_price = calculate_base_price(
        direction, category, spot_price, weight_in_grams, purity
    )
    commission_amount = calculate_commission(fee, base_price, weight_in_grams)

    return PriceBreakdown(
        direction=direction,
        category=category,
        weight_in_grams=weight_in_grams,
        purity_factor=factor,
        effective_purity_factor=effective_purity_factor(category, factor),
        rate=direction_rate(direction),
        base_price=base_price,
        commission=commission_amount,
        price=apply_commission(direction, base_price, commission_amount),
    )


def calculate_transaction_price(
    direction: TransactionDirection,
    category: ItemCategory,
    spot_price: float,
    weight: float,
    weight_unit: UnitLike,
    purity: object,
    commission: Optional[CommissionSpec] = None,
) -> float:
    """
    Итоговая цена сделки.

    Args:
        direction: Покупка / продажа
        category: Категория изделия
        spot_price: Spot за тройскую унцию
        weight: Вес
        weight_unit: Единица веса
        purity: Обозначение пробы
        commission: Комиссия (None = flat 0)

    Returns:
        Цена (при большой комиссии на покупке может быть отрицательной)

    Raises:
        InvalidUnitError: Если единица веса не распознана
    """
    return calculate_price_breakdown(
        direction, category, spot_price, weight, weight_unit, purity, commission
    ).price


def quote_price(
    direction: TransactionDirection,
    category: ItemCategory,
    spot_price: float,
    weight: float,
    weight_unit: UnitLike,
    purity: object,
    commission: Optional[CommissionSpec] = None,
    currency: Currency = Currency.USD,
) -> PriceQuote:
    """Цена сделки с меткой валюты (валюта не конвертируется)"""
    amount = calculate_transaction_price(
        direction, category, spot_price, weight, weight_unit, purity, commission
    )
    return PriceQuote(amount=amount, currency=currency, direction=direction)


def calculate_buy_sell_spread(
    category: ItemCategory,
    spot_price: float,
    weight: float,
    weight_unit: UnitLike,
    purity: object,
    commission: Optional[CommissionSpec] = None,
) -> tuple[PriceBreakdown, PriceBreakdown]:
    """
    Цены покупки и продажи для одного изделия.

    Returns:
        (buy, sell)
    """
    buy = calculate_price_breakdown(
        TransactionDirection.BUY,
        category,
        spot_price,
        weight,
        weight_unit,
        purity,
        commission,
    )
    sell = calculate_price_breakdown(
        TransactionDirection.SELL,
        category,
        spot_price,
        weight,
        weight_unit,
        purity,
        commission,
    )
    return buy, sell
