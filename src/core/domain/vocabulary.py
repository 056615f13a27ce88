"""
Vocabulary — закрытые перечисления на границе ядра

Направление сделки, категория изделия, режим комиссии, валюта.

Записи и формы исторически хранят эти значения строками в разном регистре
("Bars" / "bars"). Нормализация выполняется только здесь, в parse_*;
бизнес-логика работает исключительно с enum.
"""

from enum import Enum
from typing import Type, TypeVar


class TransactionDirection(str, Enum):
    """Направление сделки с точки зрения магазина"""

    BUY = "buy"  # магазин покупает у клиента
    SELL = "sell"  # магазин продаёт клиенту


class ItemCategory(str, Enum):
    """Категория изделия"""

    BARS = "bars"
    COINS = "coins"
    JEWELRY = "jewelry"

    @property
    def is_bullion(self) -> bool:
        """Слитки и монеты считаются по одной формуле"""
        return self is not ItemCategory.JEWELRY


class CommissionMode(str, Enum):
    """Режим комиссии"""

    PERCENTAGE = "percentage"  # процент от базовой цены
    FLAT_AMOUNT = "flat"  # фиксированная сумма за сделку
    PER_GRAM_AMOUNT = "per_gram"  # сумма за грамм


class Currency(str, Enum):
    """Валюта сделки. В ядре только метка, конверсии нет."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CHF = "CHF"


class PaymentMethod(str, Enum):
    """Способ оплаты"""

    CASH = "cash"
    GOLD = "gold"
    MIXED = "mixed"


class RegisterType(str, Enum):
    """Касса / склад"""

    WHOLESALE = "wholesale"
    RETAIL = "retail"


class InvalidDesignationError(ValueError):
    """Нераспознанное значение закрытого перечисления"""

    def __init__(self, kind: str, value: object):
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown {kind}: {value!r}")


E = TypeVar("E", bound=Enum)


def _parse(enum_cls: Type[E], kind: str, value: object) -> E:
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise InvalidDesignationError(kind, value)

    key = value.strip().lower()
    for member in enum_cls:
        if key == str(member.value).lower() or key == member.name.lower():
            return member
    raise InvalidDesignationError(kind, value)


def parse_direction(value: object) -> TransactionDirection:
    """'Buy' / 'SELL' → TransactionDirection"""
    return _parse(TransactionDirection, "transaction direction", value)


def parse_category(value: object) -> ItemCategory:
    """'Bars' / 'jewelry' → ItemCategory"""
    return _parse(ItemCategory, "item category", value)


def parse_commission_mode(value: object) -> CommissionMode:
    """'Flat' / 'per_gram' / 'PERCENTAGE' → CommissionMode"""
    return _parse(CommissionMode, "commission mode", value)


def parse_currency(value: object) -> Currency:
    """'usd' → Currency.USD"""
    return _parse(Currency, "currency", value)


def parse_payment_method(value: object) -> PaymentMethod:
    return _parse(PaymentMethod, "payment method", value)


def parse_register_type(value: object) -> RegisterType:
    return _parse(RegisterType, "register type", value)
