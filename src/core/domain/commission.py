"""
CommissionSpec — параметры комиссии сделки

Передаётся в каждый расчёт цены. Никакая сущность не владеет комиссией.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.vocabulary import CommissionMode, parse_commission_mode


class CommissionSpec(BaseModel):
    """
    Ставка + режим комиссии.

    Ставка не ограничивается снизу: расчёт цены тотален, а проверка
    разумности сделки — задача слоя записей.
    """

    rate: float = Field(default=0.0, description="Ставка (%, сумма или сумма за грамм)")
    mode: CommissionMode = Field(
        default=CommissionMode.FLAT_AMOUNT, description="Режим комиссии"
    )

    model_config = {"frozen": True}

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v: object) -> CommissionMode:
        """'Flat' и 'flat' — одно и то же"""
        return parse_commission_mode(v)

    @classmethod
    def flat(cls, amount: float = 0.0) -> "CommissionSpec":
        return cls(rate=amount, mode=CommissionMode.FLAT_AMOUNT)

    @classmethod
    def percentage(cls, percent: float) -> "CommissionSpec":
        return cls(rate=percent, mode=CommissionMode.PERCENTAGE)

    @classmethod
    def per_gram(cls, amount_per_gram: float) -> "CommissionSpec":
        return cls(rate=amount_per_gram, mode=CommissionMode.PER_GRAM_AMOUNT)


NO_COMMISSION = CommissionSpec()
