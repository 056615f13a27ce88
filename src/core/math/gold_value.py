"""
GoldValue — Стоимость металла по spot-цене

Вспомогательные расчёты для отчётов: melt value, наценка, прибыль.
Спред покупки/продажи здесь не применяется (см. src.core.math.pricing).
"""

from src.core.domain.units import GRAMS_PER_TROY_OUNCE, UnitLike, WeightUnit, to_grams


def spot_price_per_gram(price_per_ounce: float) -> float:
    """Spot за тройскую унцию → spot за грамм"""
    return price_per_ounce / GRAMS_PER_TROY_OUNCE


def calculate_gold_value(
    weight: float,
    purity_fraction: float,
    spot_per_gram: float,
    unit: UnitLike = WeightUnit.GRAM,
) -> float:
    """
    Стоимость чистого золота в изделии.

    grams * purity_fraction * spot_per_gram

    Args:
        weight: Вес
        purity_fraction: Доля золота (0..1)
        spot_per_gram: Spot за грамм
        unit: Единица веса

    Returns:
        Стоимость металла
    """
    return to_grams(weight, unit) * purity_fraction * spot_per_gram


def calculate_melt_value(
    weight: float,
    purity_fraction: float,
    spot_per_gram: float,
    unit: UnitLike = WeightUnit.GRAM,
) -> float:
    """Стоимость на переплавку (то же, что calculate_gold_value)"""
    return calculate_gold_value(weight, purity_fraction, spot_per_gram, unit)


def calculate_retail_price(base_value: float, markup_percentage: float) -> float:
    """base_value * (1 + markup / 100)"""
    return base_value * (1 + markup_percentage / 100)


def calculate_profit(selling_price: float, cost_price: float) -> float:
    return selling_price - cost_price
