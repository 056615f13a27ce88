"""
InventoryItem — Модель складской позиции

Immutable Pydantic модель. Все изменения позиции создают новый экземпляр
(model_copy(update=...)).

24K-эквивалент не хранится в модели: он пересчитывается из веса, единицы
и пробы при каждом обращении, чтобы не расходиться с исходными полями.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.purity import PurityDesignation, parse_purity, to_24k_equivalent
from src.core.domain.units import WeightUnit, parse_weight_unit, to_grams
from src.core.domain.vocabulary import (
    ItemCategory,
    RegisterType,
    parse_category,
    parse_register_type,
)


class InventoryItem(BaseModel):
    """
    Складская позиция (слиток, монета, ювелирное изделие).

    Категория и единица нормализуются на входе ("Bars" → bars, "G" → g).
    Проба хранится как PurityDesignation; нераспознанная проба отклоняется
    моделью, fallback 0.995 применяется только в чистых функциях расчёта.
    """

    # Идентификация
    id: str = Field(..., min_length=1, description="Идентификатор позиции")
    register_type: RegisterType = Field(
        default=RegisterType.WHOLESALE, description="Склад (wholesale/retail)"
    )
    category: ItemCategory = Field(..., description="Категория изделия")
    name: str = Field(..., min_length=1, description="Наименование")

    # Металл
    weight: float = Field(..., ge=0, description="Вес (в weight_unit)")
    weight_unit: WeightUnit = Field(default=WeightUnit.GRAM, description="Единица веса")
    purity: PurityDesignation = Field(..., description="Проба")

    # Учёт
    quantity: int = Field(..., ge=0, description="Количество на складе")
    date_added: str = Field(..., min_length=1, description="Дата поступления (ISO)")
    barcode: Optional[str] = Field(default=None, description="Штрихкод")
    description: Optional[str] = Field(default=None, description="Описание")
    cost_price: Optional[float] = Field(default=None, ge=0, description="Себестоимость")
    featured: bool = Field(default=False, description="Показывать на дашборде")

    model_config = {"frozen": True}

    @field_validator("register_type", mode="before")
    @classmethod
    def normalize_register_type(cls, v: object) -> RegisterType:
        return parse_register_type(v)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v: object) -> ItemCategory:
        return parse_category(v)

    @field_validator("weight_unit", mode="before")
    @classmethod
    def normalize_weight_unit(cls, v: object) -> WeightUnit:
        return parse_weight_unit(v)

    @field_validator("purity", mode="before")
    @classmethod
    def normalize_purity(cls, v: object) -> PurityDesignation:
        parsed = parse_purity(v)
        if parsed is None:
            raise ValueError(f"Unknown purity designation: {v!r}")
        return parsed

    def weight_in_grams(self) -> float:
        """Вес позиции в граммах"""
        return to_grams(self.weight, self.weight_unit)

    def equivalent_24k(self) -> float:
        """
        24K-эквивалент позиции в граммах.

        Пересчитывается при каждом вызове.
        """
        return to_24k_equivalent(self.weight_in_grams(), self.purity)
