"""
Purity — Пробы и каратность золота

Два независимых представления чистоты:

1. Таблица обозначений (PURITY_FACTORS): фиксированные округлённые
   коэффициенты пробы ("22K" → 0.916). Используется во всех ценовых расчётах
   и в 24K-эквиваленте.
2. Идеальная каратность (karat / 24): "22K" → 0.91666...

Представления расходятся в четвёртом знаке. Смешивать их нельзя без явного
намерения: цены считаются только по таблице.
"""

import math
from enum import Enum
from typing import Final, Mapping, Optional


# =============================================================================
# ТИПЫ
# =============================================================================


class PurityDesignation(str, Enum):
    """Обозначение пробы (fineness для слитков, карат для ювелирки)"""

    FINE_9999 = "999.9"
    FINE_995 = "995"
    K22 = "22K"
    K21 = "21K"
    K18 = "18K"
    K14 = "14K"
    K9 = "9K"


# =============================================================================
# КОЭФФИЦИЕНТЫ ПРОБЫ
# =============================================================================

# Порядок строго убывающий: 999.9 - эталон (~24K)
PURITY_FACTORS: Final[Mapping[PurityDesignation, float]] = {
    PurityDesignation.FINE_9999: 0.9999,
    PurityDesignation.FINE_995: 0.995,
    PurityDesignation.K22: 0.916,
    PurityDesignation.K21: 0.875,
    PurityDesignation.K18: 0.75,
    PurityDesignation.K14: 0.583,
    PurityDesignation.K9: 0.375,
}

# Нераспознанное обозначение трактуется как 995
FALLBACK_PURITY_FACTOR: Final[float] = 0.995

# Слитки и монеты бывают только этих проб
BULLION_PURITIES: Final[frozenset] = frozenset(
    {PurityDesignation.FINE_9999, PurityDesignation.FINE_995}
)

KARATS_PURE: Final[int] = 24


# =============================================================================
# АДАПТЕР НА ГРАНИЦЕ
# =============================================================================


def parse_purity(value: object) -> Optional[PurityDesignation]:
    """
    Нормализация обозначения пробы из внешнего ввода.

    "22k" → K22, " 999.9 " → FINE_9999.

    Args:
        value: Обозначение (PurityDesignation или строка)

    Returns:
        PurityDesignation, либо None если обозначение не распознано
        (решение о fallback остаётся за вызывающим кодом)
    """
    if isinstance(value, PurityDesignation):
        return value
    if not isinstance(value, str):
        return None

    key = value.strip().upper()
    for designation in PurityDesignation:
        if key == designation.value:
            return designation
    return None


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def purity_factor(designation: object) -> float:
    """
    Коэффициент пробы по обозначению.

    Тотальная функция: всё нераспознанное (опечатки, None) получает
    FALLBACK_PURITY_FACTOR (0.995), исключение не бросается.

    Args:
        designation: Обозначение пробы

    Returns:
        Коэффициент в (0, 1]
    """
    parsed = parse_purity(designation)
    if parsed is None:
        return FALLBACK_PURITY_FACTOR
    return PURITY_FACTORS[parsed]


def to_24k_equivalent(weight: float, designation: object) -> float:
    """
    Вес в эквиваленте чистого золота 24K.

    weight * purity_factor(designation)

    Результат не кэшируется: пересчитывайте при любом изменении веса,
    единицы или пробы записи.

    Args:
        weight: Вес (в любой единице, результат в той же единице)
        designation: Обозначение пробы

    Returns:
        24K-эквивалент
    """
    return weight * purity_factor(designation)


def karat_to_purity_fraction(karat: float) -> float:
    """Идеальная доля золота: karat / 24 (22K → 0.91666...)"""
    return karat / KARATS_PURE


def purity_fraction_to_karat(fraction: float) -> int:
    """
    Доля золота → ближайший целый карат.

    Округление половин вверх (0.9375 * 24 = 22.5 → 23), а не банковское.
    """
    return int(math.floor(fraction * KARATS_PURE + 0.5))


def pure_gold_content(weight: float, fraction: float) -> float:
    """Содержание чистого золота при произвольной доле fraction"""
    return weight * fraction
