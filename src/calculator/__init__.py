"""Calculator — калькулятор цен покупки/продажи, конвертеры веса и пробы."""

from .price_calculator import CalculatorConfig, CalculatorResult, PriceCalculator

__all__ = [
    "CalculatorConfig",
    "CalculatorResult",
    "PriceCalculator",
]
