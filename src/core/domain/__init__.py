"""
Domain models and value objects.

Contains the closed vocabularies (units, purities, categories, commission
modes) and the immutable record models the pricing core consumes.
"""

from src.core.domain.commission import NO_COMMISSION, CommissionSpec
from src.core.domain.inventory import InventoryItem
from src.core.domain.purity import (
    BULLION_PURITIES,
    FALLBACK_PURITY_FACTOR,
    PURITY_FACTORS,
    PurityDesignation,
    karat_to_purity_fraction,
    parse_purity,
    pure_gold_content,
    purity_factor,
    purity_fraction_to_karat,
    to_24k_equivalent,
)
from src.core.domain.transaction import Transaction
from src.core.domain.units import (
    GRAMS_PER_TROY_OUNCE,
    GRAMS_PER_UNIT,
    InvalidUnitError,
    WeightUnit,
    convert_weight,
    from_grams,
    grams_per_unit,
    parse_weight_unit,
    to_grams,
)
from src.core.domain.vocabulary import (
    CommissionMode,
    Currency,
    InvalidDesignationError,
    ItemCategory,
    PaymentMethod,
    RegisterType,
    TransactionDirection,
    parse_category,
    parse_commission_mode,
    parse_currency,
    parse_direction,
    parse_payment_method,
    parse_register_type,
)

__all__ = [
    # Units module
    "GRAMS_PER_TROY_OUNCE",
    "GRAMS_PER_UNIT",
    "InvalidUnitError",
    "WeightUnit",
    "convert_weight",
    "from_grams",
    "grams_per_unit",
    "parse_weight_unit",
    "to_grams",
    # Purity module
    "BULLION_PURITIES",
    "FALLBACK_PURITY_FACTOR",
    "PURITY_FACTORS",
    "PurityDesignation",
    "karat_to_purity_fraction",
    "parse_purity",
    "pure_gold_content",
    "purity_factor",
    "purity_fraction_to_karat",
    "to_24k_equivalent",
    # Vocabulary
    "CommissionMode",
    "Currency",
    "InvalidDesignationError",
    "ItemCategory",
    "PaymentMethod",
    "RegisterType",
    "TransactionDirection",
    "parse_category",
    "parse_commission_mode",
    "parse_currency",
    "parse_direction",
    "parse_payment_method",
    "parse_register_type",
    # Commission
    "CommissionSpec",
    "NO_COMMISSION",
    # Records
    "InventoryItem",
    "Transaction",
]
