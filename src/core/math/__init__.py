"""
Core math modules для KaratCloud

Формулы цены и вспомогательные численные примитивы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_WEIGHT_G,
    has_at_least,
    is_close,
    is_valid_float,
    safe_divide,
    validate_non_negative,
    validate_positive,
)

# Pricing
from src.core.math.pricing import (
    BUY_RATE,
    JEWELRY_PURITY_NORMALIZER,
    RATE_DIVISOR,
    SELL_RATE,
    PriceBreakdown,
    PriceQuote,
    apply_commission,
    calculate_base_price,
    calculate_buy_sell_spread,
    calculate_commission,
    calculate_price_breakdown,
    calculate_transaction_price,
    direction_rate,
    effective_purity_factor,
    quote_price,
)

# Gold Value
from src.core.math.gold_value import (
    calculate_gold_value,
    calculate_melt_value,
    calculate_profit,
    calculate_retail_price,
    spot_price_per_gram,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_WEIGHT_G",
    # Numerical Safeguards: Functions
    "has_at_least",
    "is_close",
    "is_valid_float",
    "safe_divide",
    "validate_non_negative",
    "validate_positive",
    # Pricing: Constants
    "BUY_RATE",
    "JEWELRY_PURITY_NORMALIZER",
    "RATE_DIVISOR",
    "SELL_RATE",
    # Pricing: Types
    "PriceBreakdown",
    "PriceQuote",
    # Pricing: Functions
    "apply_commission",
    "calculate_base_price",
    "calculate_buy_sell_spread",
    "calculate_commission",
    "calculate_price_breakdown",
    "calculate_transaction_price",
    "direction_rate",
    "effective_purity_factor",
    "quote_price",
    # Gold Value
    "calculate_gold_value",
    "calculate_melt_value",
    "calculate_profit",
    "calculate_retail_price",
    "spot_price_per_gram",
]
