"""
Transaction — Модель сделки покупки/продажи

Immutable Pydantic модель. Итоговая цена (total_price) вычисляется
вызывающим кодом через src.core.math.pricing и прикрепляется к записи.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.commission import CommissionSpec
from src.core.domain.purity import PurityDesignation, parse_purity
from src.core.domain.units import WeightUnit, parse_weight_unit
from src.core.domain.vocabulary import (
    CommissionMode,
    Currency,
    PaymentMethod,
    RegisterType,
    TransactionDirection,
    parse_commission_mode,
    parse_currency,
    parse_direction,
    parse_payment_method,
    parse_register_type,
)


class Transaction(BaseModel):
    """
    Сделка по одной складской позиции.

    Направление и режим комиссии нормализуются на входе ("Buy" → buy,
    "Flat" → flat).
    """

    # Идентификация
    id: str = Field(..., min_length=1, description="Идентификатор сделки")
    type: TransactionDirection = Field(..., description="Направление (buy/sell)")
    item_id: str = Field(..., min_length=1, description="Идентификатор позиции")
    quantity: int = Field(..., gt=0, description="Количество единиц")
    date_time: str = Field(..., min_length=1, description="Время сделки (ISO)")

    # Цена
    spot_price: float = Field(..., gt=0, description="Spot за тройскую унцию на момент сделки")
    commission: float = Field(default=0.0, description="Ставка комиссии")
    commission_type: CommissionMode = Field(
        default=CommissionMode.FLAT_AMOUNT, description="Режим комиссии"
    )
    currency: Currency = Field(default=Currency.USD, description="Валюта")
    total_price: float = Field(..., description="Итоговая цена")

    # Оплата
    payment_method: PaymentMethod = Field(
        default=PaymentMethod.CASH, description="Способ оплаты"
    )
    cash_amount: Optional[float] = Field(default=None, description="Оплачено деньгами")
    gold_amount: Optional[float] = Field(default=None, description="Оплачено золотом (вес)")
    gold_purity: Optional[PurityDesignation] = Field(
        default=None, description="Проба золота, принятого в оплату"
    )
    gold_weight_unit: Optional[WeightUnit] = Field(
        default=None, description="Единица веса золота, принятого в оплату"
    )

    # Клиент
    customer: Optional[str] = Field(default=None, description="Имя клиента")
    customer_phone: Optional[str] = Field(default=None, description="Телефон клиента")
    notes: Optional[str] = Field(default=None, description="Заметки")
    register_type: RegisterType = Field(
        default=RegisterType.WHOLESALE, description="Касса (wholesale/retail)"
    )

    model_config = {"frozen": True}

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: object) -> TransactionDirection:
        return parse_direction(v)

    @field_validator("commission_type", mode="before")
    @classmethod
    def normalize_commission_type(cls, v: object) -> CommissionMode:
        return parse_commission_mode(v)

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v: object) -> Currency:
        return parse_currency(v)

    @field_validator("payment_method", mode="before")
    @classmethod
    def normalize_payment_method(cls, v: object) -> PaymentMethod:
        return parse_payment_method(v)

    @field_validator("register_type", mode="before")
    @classmethod
    def normalize_register_type(cls, v: object) -> RegisterType:
        return parse_register_type(v)

    @field_validator("gold_purity", mode="before")
    @classmethod
    def normalize_gold_purity(cls, v: object) -> Optional[PurityDesignation]:
        """Проба золота в оплате; в отличие от расчёта цены fallback нет"""
        if v is None:
            return None
        parsed = parse_purity(v)
        if parsed is None:
            raise ValueError(f"Unknown purity designation: {v!r}")
        return parsed

    @field_validator("gold_weight_unit", mode="before")
    @classmethod
    def normalize_gold_weight_unit(cls, v: object) -> Optional[WeightUnit]:
        return None if v is None else parse_weight_unit(v)

    def commission_spec(self) -> CommissionSpec:
        """Комиссия сделки в виде CommissionSpec для расчёта цены"""
        return CommissionSpec(rate=self.commission, mode=self.commission_type)
