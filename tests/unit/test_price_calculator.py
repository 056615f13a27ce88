"""
Тесты для PriceCalculator

Покрывает:
- Котировки слитков/монет и ювелирки (buy/sell/spread)
- Запрет не-bullion пробы и категории для слитков
- Обновление spot-цены с валидацией
- Конвертеры веса и пробы
- Расчёт по JSON-запросу
"""

import pytest
from jsonschema import ValidationError
from structlog.testing import capture_logs

from src.calculator import CalculatorConfig, PriceCalculator
from src.core.domain import (
    CommissionSpec,
    Currency,
    InvalidDesignationError,
    ItemCategory,
    PurityDesignation,
    TransactionDirection,
    WeightUnit,
)


@pytest.fixture
def calculator():
    return PriceCalculator(CalculatorConfig(spot_price=2000.0))


class TestCalculatorConfig:
    """Тесты конфигурации"""

    def test_defaults(self) -> None:
        calc = PriceCalculator()
        assert calc.spot_price == 2000.0
        assert calc.config.currency == Currency.USD
        assert calc.config.bar_category == ItemCategory.BARS

    def test_config_frozen(self) -> None:
        config = CalculatorConfig()
        with pytest.raises(AttributeError):
            config.spot_price = 1.0  # type: ignore[misc]


class TestBarQuote:
    """Тесты котировки слитков и монет"""

    def test_10g_fine_bar(self, calculator) -> None:
        result = calculator.bar_quote(10.0)
        assert result.selling_price == pytest.approx(2000 * 32.15 / 1000 * 10 * 0.9999, rel=1e-12)
        assert result.buying_price == pytest.approx(2000 * 31.99 / 1000 * 10 * 0.9999, rel=1e-12)
        assert result.spread == pytest.approx(result.selling_price - result.buying_price)
        assert result.spread > 0

    def test_ounce_with_flat_commission(self, calculator) -> None:
        result = calculator.bar_quote(
            1.0, WeightUnit.TROY_OUNCE, PurityDesignation.FINE_995, CommissionSpec.flat(5.0)
        )
        base_sell = 2000 * 32.15 / 1000 * 31.1035 * 0.995
        base_buy = 2000 * 31.99 / 1000 * 31.1035 * 0.995
        assert result.selling_price == pytest.approx(base_sell + 5.0, rel=1e-12)
        assert result.buying_price == pytest.approx(base_buy - 5.0, rel=1e-12)

    def test_coins_category(self, calculator) -> None:
        coins = calculator.bar_quote(10.0, category=ItemCategory.COINS)
        bars = calculator.bar_quote(10.0)
        assert coins.selling_price == bars.selling_price
        assert coins.sell.category == ItemCategory.COINS

    def test_purity_as_string(self, calculator) -> None:
        assert calculator.bar_quote(10.0, purity="995").sell.purity_factor == 0.995

    @pytest.mark.parametrize("purity", ["22K", "18K", "junk"])
    def test_non_bullion_purity_rejected(self, calculator, purity: str) -> None:
        with pytest.raises(InvalidDesignationError):
            calculator.bar_quote(10.0, purity=purity)

    def test_jewelry_category_rejected(self, calculator) -> None:
        with pytest.raises(InvalidDesignationError):
            calculator.bar_quote(10.0, category=ItemCategory.JEWELRY)

    def test_result_carries_spot_and_currency(self, calculator) -> None:
        result = calculator.bar_quote(1.0)
        assert result.spot_price == 2000.0
        assert result.currency == Currency.USD
        assert result.buy.direction == TransactionDirection.BUY
        assert result.sell.direction == TransactionDirection.SELL


class TestJewelryQuote:
    """Тесты котировки ювелирки"""

    def test_22k_normalized_purity(self, calculator) -> None:
        result = calculator.jewelry_quote(5.0)
        factor = 0.916 / 0.995
        assert result.sell.effective_purity_factor == pytest.approx(factor, rel=1e-12)
        assert result.selling_price == pytest.approx(2000 * 32.15 / 1000 * 5.0 * factor, rel=1e-12)

    def test_unknown_purity_falls_back(self, calculator) -> None:
        """Нераспознанная проба → 0.995, для ювелирки фактор 1.0"""
        result = calculator.jewelry_quote(1.0, purity="925")
        assert result.sell.purity_factor == 0.995
        assert result.sell.effective_purity_factor == pytest.approx(1.0)

    def test_percentage_commission(self, calculator) -> None:
        plain = calculator.jewelry_quote(5.0)
        with_fee = calculator.jewelry_quote(5.0, commission=CommissionSpec.percentage(2.0))
        assert with_fee.selling_price == pytest.approx(plain.selling_price * 1.02, rel=1e-12)
        assert with_fee.buying_price == pytest.approx(plain.buying_price * 0.98, rel=1e-12)

    def test_logs_quote(self, calculator) -> None:
        with capture_logs() as logs:
            calculator.jewelry_quote(5.0)
        assert logs[0]["event"] == "calculator_quote"
        assert logs[0]["category"] == "jewelry"


class TestSpotPrice:
    """Тесты обновления spot-цены"""

    def test_update_changes_quotes(self, calculator) -> None:
        before = calculator.bar_quote(10.0).selling_price
        calculator.update_spot_price(4000.0)
        assert calculator.spot_price == 4000.0
        assert calculator.bar_quote(10.0).selling_price == pytest.approx(before * 2, rel=1e-12)

    @pytest.mark.parametrize("price", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_price_rejected(self, calculator, price: float) -> None:
        with pytest.raises(ValueError):
            calculator.update_spot_price(price)
        assert calculator.spot_price == 2000.0

    def test_update_logged(self, calculator) -> None:
        with capture_logs() as logs:
            calculator.update_spot_price(2100.0)
        assert logs == [
            {
                "event": "spot_price_updated",
                "log_level": "info",
                "previous": 2000.0,
                "current": 2100.0,
            }
        ]


class TestConverters:
    """Тесты конвертеров веса и пробы"""

    def test_convert_weight(self, calculator) -> None:
        assert calculator.convert_weight(1.0, "oz", "g") == pytest.approx(31.1035)
        assert calculator.convert_weight(1.0, "kg", "kg") == 1.0

    def test_convert_purity(self, calculator) -> None:
        assert calculator.convert_purity(10.0, "18K") == pytest.approx(7.5)
        assert calculator.convert_purity(1.0, "999.9", "oz") == pytest.approx(31.1035 * 0.9999)


class TestQuoteRequest:
    """Тесты расчёта по JSON-запросу"""

    def test_sell_request(self, calculator) -> None:
        quote = calculator.quote_request(
            {
                "direction": "sell",
                "category": "bars",
                "spotPrice": 2000.0,
                "weight": 10.0,
                "weightUnit": "g",
                "purity": "999.9",
                "commission": {"rate": 5.0, "mode": "flat"},
                "currency": "EUR",
            }
        )
        assert quote.direction == TransactionDirection.SELL
        assert quote.currency == Currency.EUR
        assert quote.amount == pytest.approx(2000 * 32.15 / 1000 * 10 * 0.9999 + 5.0, rel=1e-12)

    def test_spot_defaults_to_calculator(self, calculator) -> None:
        calculator.update_spot_price(3000.0)
        quote = calculator.quote_request(
            {
                "direction": "buy",
                "category": "coins",
                "weight": 1.0,
                "weightUnit": "g",
                "purity": "995",
            }
        )
        assert quote.amount == pytest.approx(3000 * 31.99 / 1000 * 0.995, rel=1e-12)
        assert quote.currency == Currency.USD

    def test_request_case_insensitive(self, calculator) -> None:
        """Регистр перечислений в запросе не важен"""
        quote = calculator.quote_request(
            {
                "direction": "Sell",
                "category": "Bars",
                "weight": 1.0,
                "weightUnit": "OZ",
                "purity": "999.9",
                "commission": {"rate": 2.0, "mode": "Percentage"},
                "currency": "eur",
            }
        )
        base = 2000 * 32.15 / 1000 * 31.1035 * 0.9999
        assert quote.direction == TransactionDirection.SELL
        assert quote.currency == Currency.EUR
        assert quote.amount == pytest.approx(base + base * (2.0 / 100), rel=1e-12)

    def test_unknown_designation_still_rejected(self, calculator) -> None:
        with pytest.raises(ValidationError):
            calculator.quote_request(
                {
                    "direction": "swap",
                    "category": "bars",
                    "weight": 1.0,
                    "weightUnit": "g",
                    "purity": "999.9",
                }
            )

    def test_invalid_request(self, calculator) -> None:
        with pytest.raises(ValidationError):
            calculator.quote_request({"direction": "sell"})
