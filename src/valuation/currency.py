"""
Currency — Статическая таблица курсов для отчётов

Курсы заданы как единицы валюты за 1 USD. Сервиса курсов нет:
таблица обновляется вручную.
"""

from typing import Final, Mapping

from src.core.domain.vocabulary import Currency, parse_currency


STATIC_EXCHANGE_RATES: Final[Mapping[Currency, float]] = {
    Currency.USD: 1.0,
    Currency.EUR: 0.92,
    Currency.GBP: 0.79,
    Currency.CHF: 0.90,
}


def convert_currency(
    amount: float,
    from_currency: object,
    to_currency: object,
    rates: Mapping[Currency, float] = STATIC_EXCHANGE_RATES,
) -> float:
    """
    Конверсия суммы через USD.

    Args:
        amount: Сумма
        from_currency: Исходная валюта
        to_currency: Целевая валюта
        rates: Курсы (единиц валюты за 1 USD)

    Returns:
        Сумма в целевой валюте

    Raises:
        InvalidDesignationError: Если валюта не распознана
    """
    source = parse_currency(from_currency)
    target = parse_currency(to_currency)
    if source == target:
        return amount

    amount_usd = amount if source == Currency.USD else amount / rates[source]
    return amount_usd if target == Currency.USD else amount_usd * rates[target]
