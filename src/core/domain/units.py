"""
WeightUnits — Централизованный модуль конверсии единиц веса

Единственный допустимый способ преобразований между:
- граммы (g)
- килограммы (kg)
- тройские унции (oz)
- тола (tola)
- бат (baht)

Все конверсии идут через граммы: amount * grams(from) / grams(to).
Новая единица требует ровно одного нового коэффициента в GRAMS_PER_UNIT.

ЗАПРЕЩЕНО держать копию таблицы коэффициентов где-либо ещё.
"""

from enum import Enum
from typing import Final, Mapping, Union


# =============================================================================
# ТИПЫ
# =============================================================================


class WeightUnit(str, Enum):
    """Единица веса (значения совпадают со строками в записях)"""

    GRAM = "g"
    KILOGRAM = "kg"
    TROY_OUNCE = "oz"
    TOLA = "tola"
    BAHT = "baht"


class InvalidUnitError(ValueError):
    """Нераспознанная единица веса. Разумного значения по умолчанию нет."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown weight unit: {value!r}")


# =============================================================================
# КОЭФФИЦИЕНТЫ (граммов в одной единице)
# =============================================================================

GRAMS_PER_TROY_OUNCE: Final[float] = 31.1035

GRAMS_PER_UNIT: Final[Mapping[WeightUnit, float]] = {
    WeightUnit.GRAM: 1.0,
    WeightUnit.KILOGRAM: 1000.0,
    WeightUnit.TROY_OUNCE: GRAMS_PER_TROY_OUNCE,
    WeightUnit.TOLA: 11.6638,  # Indian tola
    WeightUnit.BAHT: 15.244,  # Thai baht
}

# Длинные имена, встречающиеся в формах и старых записях
_UNIT_ALIASES: Final[Mapping[str, WeightUnit]] = {
    "gram": WeightUnit.GRAM,
    "grams": WeightUnit.GRAM,
    "kilogram": WeightUnit.KILOGRAM,
    "kilograms": WeightUnit.KILOGRAM,
    "troyounce": WeightUnit.TROY_OUNCE,
    "troy_ounce": WeightUnit.TROY_OUNCE,
    "ounce": WeightUnit.TROY_OUNCE,
}

UnitLike = Union[WeightUnit, str]


# =============================================================================
# АДАПТЕР НА ГРАНИЦЕ
# =============================================================================


def parse_weight_unit(value: UnitLike) -> WeightUnit:
    """
    Нормализация единицы веса из внешнего ввода.

    Принимает WeightUnit, wire-значение в любом регистре ("G", "oz"),
    имя члена enum ("TROY_OUNCE") или длинный псевдоним ("troyOunce").

    Args:
        value: Единица веса

    Returns:
        WeightUnit

    Raises:
        InvalidUnitError: Если единица не распознана
    """
    if isinstance(value, WeightUnit):
        return value
    if not isinstance(value, str):
        raise InvalidUnitError(value)

    key = value.strip().lower()
    for unit in WeightUnit:
        if key == unit.value or key == unit.name.lower():
            return unit

    alias = _UNIT_ALIASES.get(key)
    if alias is None:
        raise InvalidUnitError(value)
    return alias


def grams_per_unit(unit: UnitLike) -> float:
    """Коэффициент: сколько граммов в одной единице"""
    return GRAMS_PER_UNIT[parse_weight_unit(unit)]


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def to_grams(amount: float, unit: UnitLike) -> float:
    """
    Конверсия: вес в единице unit → граммы

    Args:
        amount: Вес (знак не проверяется)
        unit: Исходная единица

    Returns:
        Вес в граммах
    """
    return amount * grams_per_unit(unit)


def from_grams(weight_in_grams: float, unit: UnitLike) -> float:
    """
    Конверсия: граммы → вес в единице unit

    Args:
        weight_in_grams: Вес в граммах
        unit: Целевая единица

    Returns:
        Вес в целевой единице
    """
    return weight_in_grams / grams_per_unit(unit)


def convert_weight(amount: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Конверсия веса между единицами через граммы.

    amount * grams(from_unit) / grams(to_unit)

    При from_unit == to_unit возвращается amount без арифметики:
    x * f / f не обязан быть бит-в-бит равен x.

    Функция тотальна на числовом домене: 0 → 0, отрицательные значения
    и NaN не валидируются и проходят насквозь.

    Args:
        amount: Вес в исходной единице
        from_unit: Исходная единица
        to_unit: Целевая единица

    Returns:
        Вес в целевой единице

    Raises:
        InvalidUnitError: Если одна из единиц не распознана
    """
    source = parse_weight_unit(from_unit)
    target = parse_weight_unit(to_unit)

    if source == target:
        return amount

    return from_grams(to_grams(amount, source), target)
