"""
Numerical Safeguards — допуски и проверки для учёта склада

Используется слоем оценки склада и калькулятором:
- сравнение остатка по весу с допуском на погрешность конверсий
- деление без ZeroDivisionError (вес единицы при нулевом количестве)
- проверка spot-цены и других входов калькулятора

Формулы цены (src.core.math.pricing) сюда не обращаются: они тотальны
и пропускают вырожденные значения насквозь.
"""

import math
from typing import Final


# Вес, введённый в унциях и пересчитанный в граммы, расходится
# с исходным на доли миллиграмма
EPS_WEIGHT_G: Final[float] = 0.001

EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


def is_valid_float(value: float) -> bool:
    """Число и при этом не NaN / ±Inf"""
    return isinstance(value, (int, float)) and math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """math.isclose с допусками ядра по умолчанию"""
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def has_at_least(available: float, required: float, tol: float = EPS_WEIGHT_G) -> bool:
    """
    Хватает ли остатка: available >= required - tol.

    >>> has_at_least(10.0, 10.0005)
    True
    >>> has_at_least(10.0, 10.01)
    False
    """
    return available >= required - tol


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """
    numerator / denominator; fallback, если знаменатель 0 / NaN / Inf
    или результат не конечен.

    Позиция с нулевым количеством имеет вес единицы 0, а не ошибку:

    >>> safe_divide(100.0, 0)
    0.0
    """
    if not is_valid_float(denominator) or denominator == 0:
        return fallback

    quotient = numerator / denominator
    if not is_valid_float(quotient):
        return fallback
    return quotient


def _require_finite(value: float, name: str) -> None:
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Raises:
        ValueError: value <= 0, NaN или Inf (например, spot_price = 0)
    """
    _require_finite(value, name)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Raises:
        ValueError: value < 0, NaN или Inf
    """
    _require_finite(value, name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
