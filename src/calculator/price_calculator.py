"""Price Calculator — экран калькулятора цен.

Четыре расчёта поверх ценового ядра:
- слитки/монеты: цены покупки и продажи
- ювелирка: цены покупки и продажи
- конвертер веса
- конвертер пробы (24K-эквивалент)

Каждый вызов пересчитывает результат целиком из текущих входов;
предыдущие результаты не переиспользуются.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import structlog

from src.core.contracts.records import normalize_price_request
from src.core.contracts.validators import validate_price_request
from src.core.domain.commission import CommissionSpec
from src.core.domain.purity import (
    BULLION_PURITIES,
    PurityDesignation,
    parse_purity,
    to_24k_equivalent,
)
from src.core.domain.units import UnitLike, WeightUnit, convert_weight, to_grams
from src.core.domain.vocabulary import (
    Currency,
    InvalidDesignationError,
    ItemCategory,
    parse_category,
    parse_currency,
    parse_direction,
)
from src.core.math.numerical_safeguards import validate_positive
from src.core.math.pricing import (
    PriceBreakdown,
    PriceQuote,
    calculate_buy_sell_spread,
    quote_price,
)


logger = structlog.get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора."""

    spot_price: float = 2000.0  # USD за тройскую унцию
    currency: Currency = Currency.USD
    bar_category: ItemCategory = ItemCategory.BARS


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalculatorResult:
    """Цены покупки и продажи одного изделия."""

    spot_price: float
    currency: Currency
    buy: PriceBreakdown
    sell: PriceBreakdown

    @property
    def buying_price(self) -> float:
        return self.buy.price

    @property
    def selling_price(self) -> float:
        return self.sell.price

    @property
    def spread(self) -> float:
        return self.sell.price - self.buy.price


# =============================================================================
# CALCULATOR
# =============================================================================


class PriceCalculator:
    """Калькулятор цен для экрана калькулятора и формы сделки.

    Хранит только текущую spot-цену; все расчёты делегируются чистым
    функциям src.core.math.pricing.
    """

    def __init__(self, config: CalculatorConfig | None = None):
        """Инициализация калькулятора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CalculatorConfig()
        self._spot_price = self.config.spot_price

    @property
    def spot_price(self) -> float:
        return self._spot_price

    def update_spot_price(self, price: float) -> None:
        """Обновление spot-цены.

        Raises:
            ValueError: если цена не положительная или NaN/Inf
        """
        validate_positive(price, "spot_price")
        logger.info("spot_price_updated", previous=self._spot_price, current=price)
        self._spot_price = price

    def bar_quote(
        self,
        weight: float,
        weight_unit: UnitLike = WeightUnit.GRAM,
        purity: PurityDesignation = PurityDesignation.FINE_9999,
        commission: Optional[CommissionSpec] = None,
        category: ItemCategory | None = None,
    ) -> CalculatorResult:
        """Цены покупки/продажи слитка или монеты.

        Raises:
            InvalidDesignationError: если проба не 999.9 / 995,
                либо категория не слиток/монета
        """
        parsed = parse_purity(purity)
        if parsed not in BULLION_PURITIES:
            raise InvalidDesignationError("bullion purity", purity)

        bar_category = parse_category(category or self.config.bar_category)
        if not bar_category.is_bullion:
            raise InvalidDesignationError("bullion category", bar_category)

        return self._quote(bar_category, weight, weight_unit, parsed, commission)

    def jewelry_quote(
        self,
        weight: float,
        weight_unit: UnitLike = WeightUnit.GRAM,
        purity: object = PurityDesignation.K22,
        commission: Optional[CommissionSpec] = None,
    ) -> CalculatorResult:
        """Цены покупки/продажи ювелирного изделия.

        Нераспознанная проба считается как 995 (поведение ядра).
        """
        return self._quote(ItemCategory.JEWELRY, weight, weight_unit, purity, commission)

    def convert_weight(self, amount: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
        """Конвертер веса"""
        return convert_weight(amount, from_unit, to_unit)

    def convert_purity(
        self, weight: float, purity: object, weight_unit: UnitLike = WeightUnit.GRAM
    ) -> float:
        """Конвертер пробы: 24K-эквивалент в граммах"""
        return to_24k_equivalent(to_grams(weight, weight_unit), purity)

    def quote_request(self, data: Dict[str, Any]) -> PriceQuote:
        """Расчёт цены по JSON-запросу (контракт price_request).

        Spot-цена из запроса, если её нет — текущая калькулятора.
        Регистр перечислений ("Sell", "OZ") не важен.

        Raises:
            jsonschema.ValidationError: если запрос не соответствует контракту
        """
        data = normalize_price_request(data)
        validate_price_request(data)

        commission = None
        if "commission" in data:
            commission = CommissionSpec(**data["commission"])

        quote = quote_price(
            direction=parse_direction(data["direction"]),
            category=parse_category(data["category"]),
            spot_price=data.get("spotPrice", self._spot_price),
            weight=data["weight"],
            weight_unit=data["weightUnit"],
            purity=data["purity"],
            commission=commission,
            currency=parse_currency(data.get("currency", self.config.currency)),
        )
        logger.debug(
            "price_request_quoted",
            direction=quote.direction.value,
            amount=quote.amount,
            currency=quote.currency.value,
        )
        return quote

    def _quote(
        self,
        category: ItemCategory,
        weight: float,
        weight_unit: UnitLike,
        purity: object,
        commission: Optional[CommissionSpec],
    ) -> CalculatorResult:
        buy, sell = calculate_buy_sell_spread(
            category, self._spot_price, weight, weight_unit, purity, commission
        )
        logger.debug(
            "calculator_quote",
            category=category.value,
            spot_price=self._spot_price,
            weight_in_grams=buy.weight_in_grams,
            purity_factor=buy.purity_factor,
            buying_price=buy.price,
            selling_price=sell.price,
        )
        return CalculatorResult(
            spot_price=self._spot_price,
            currency=self.config.currency,
            buy=buy,
            sell=sell,
        )
