"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных записей
- Детекция нарушений required полей
- Детекция нарушений enum / minimum
- Преобразование записей хранилища в доменные модели
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CONTRACT_NAMES,
    InventoryItemValidator,
    PriceRequestValidator,
    SchemaLoader,
    TransactionValidator,
    get_validator,
    inventory_item_from_record,
    inventory_item_to_record,
    normalize_price_request,
    normalize_record,
    transaction_from_record,
    transaction_to_record,
    validate_inventory_item,
    validate_price_request,
    validate_transaction,
)
from src.core.domain import (
    CommissionMode,
    Currency,
    ItemCategory,
    PaymentMethod,
    PurityDesignation,
    RegisterType,
    TransactionDirection,
    WeightUnit,
    parse_category,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_inventory_record():
    """Валидная запись складской позиции (как в хранилище)."""
    return {
        "id": "lw0x3k9a2b",
        "type": "retail",
        "category": "bars",
        "name": "PAMP 100g",
        "weight": 100.0,
        "weightUnit": "g",
        "purity": "999.9",
        "quantity": 3,
        "dateAdded": "2024-02-10T09:30:00.000Z",
        "barcode": "7612345678901",
        "equivalent24k": 99.99,
        "featured": True,
    }


@pytest.fixture
def valid_transaction_record():
    """Валидная запись сделки (как в хранилище)."""
    return {
        "id": "lw0x4m1c7d",
        "type": "sell",
        "itemId": "lw0x3k9a2b",
        "quantity": 1,
        "dateTime": "2024-02-11T15:00:00.000Z",
        "spotPrice": 2000.0,
        "commission": 5.0,
        "commissionType": "flat",
        "paymentMethod": "cash",
        "currency": "USD",
        "totalPrice": 6434.357,
        "customer": "Walk-in",
        "registerType": "retail",
    }


@pytest.fixture
def valid_price_request():
    """Валидный запрос расчёта цены."""
    return {
        "direction": "buy",
        "category": "jewelry",
        "spotPrice": 2000.0,
        "weight": 5.0,
        "weightUnit": "g",
        "purity": "22K",
        "commission": {"rate": 0.0, "mode": "flat"},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", ["inventory_item", "transaction", "price_request"])
    def test_schemas_load(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("transaction") is loader.load_schema("transaction")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_custom_schema_dir(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        loader = SchemaLoader(tmp_path)
        with pytest.raises(ValueError, match="broken.json"):
            loader.load_schema("broken")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "absent")

    @pytest.mark.parametrize("name", CONTRACT_NAMES)
    def test_get_validator(self, name: str) -> None:
        assert get_validator(name).contract_name == name

    def test_get_validator_unknown(self) -> None:
        with pytest.raises(KeyError):
            get_validator("invoice")

    def test_enums_match_domain(self) -> None:
        """Enum в схемах совпадают с wire-значениями доменных enum"""
        item = SchemaLoader().load_schema("inventory_item")["properties"]
        assert item["weightUnit"]["enum"] == [u.value for u in WeightUnit]
        assert item["purity"]["enum"] == [p.value for p in PurityDesignation]
        assert item["category"]["enum"] == [c.value for c in ItemCategory]

        tx = SchemaLoader().load_schema("transaction")["properties"]
        assert tx["commissionType"]["enum"] == [m.value for m in CommissionMode]


# =============================================================================
# INVENTORY ITEM
# =============================================================================


class TestInventoryItemContract:
    """Тесты inventory_item контракта"""

    def test_valid(self, valid_inventory_record) -> None:
        validate_inventory_item(valid_inventory_record)
        assert InventoryItemValidator().is_valid(valid_inventory_record)

    def test_missing_required(self, valid_inventory_record) -> None:
        del valid_inventory_record["purity"]
        with pytest.raises(ValidationError):
            validate_inventory_item(valid_inventory_record)

    def test_unknown_unit(self, valid_inventory_record) -> None:
        valid_inventory_record["weightUnit"] = "lb"
        with pytest.raises(ValidationError):
            validate_inventory_item(valid_inventory_record)

    def test_negative_weight(self, valid_inventory_record) -> None:
        valid_inventory_record["weight"] = -5.0
        assert not InventoryItemValidator().is_valid(valid_inventory_record)

    def test_collects_all_errors(self, valid_inventory_record) -> None:
        valid_inventory_record["weight"] = -5.0
        valid_inventory_record["quantity"] = -1
        errors = list(InventoryItemValidator().iter_errors(valid_inventory_record))
        assert len(errors) == 2

    def test_describe_errors(self, valid_inventory_record) -> None:
        del valid_inventory_record["name"]
        valid_inventory_record["weight"] = -5.0
        messages = InventoryItemValidator().describe_errors(valid_inventory_record)
        assert len(messages) == 2
        assert messages[0].startswith("$: ")
        assert "'name' is a required property" in messages[0]
        assert messages[1].startswith("weight: ")

    def test_describe_errors_valid_record(self, valid_inventory_record) -> None:
        assert InventoryItemValidator().describe_errors(valid_inventory_record) == []

    def test_describe_errors_missing_required(self, valid_inventory_record) -> None:
        del valid_inventory_record["id"]
        assert InventoryItemValidator().describe_errors(valid_inventory_record) == [
            "$: 'id' is a required property"
        ]

    def test_describe_errors_nested_path(self, valid_price_request) -> None:
        """Путь до вложенного поля через точку"""
        valid_price_request["commission"] = {"rate": 1.0, "mode": "tiered"}
        messages = PriceRequestValidator().describe_errors(valid_price_request)
        assert len(messages) == 1
        assert messages[0].startswith("commission.mode: 'tiered' is not one of")


# =============================================================================
# TRANSACTION
# =============================================================================


class TestTransactionContract:
    """Тесты transaction контракта"""

    def test_valid(self, valid_transaction_record) -> None:
        validate_transaction(valid_transaction_record)
        assert TransactionValidator().is_valid(valid_transaction_record)

    def test_zero_quantity(self, valid_transaction_record) -> None:
        valid_transaction_record["quantity"] = 0
        with pytest.raises(ValidationError):
            validate_transaction(valid_transaction_record)

    def test_unknown_commission_type(self, valid_transaction_record) -> None:
        valid_transaction_record["commissionType"] = "tiered"
        with pytest.raises(ValidationError):
            validate_transaction(valid_transaction_record)


# =============================================================================
# PRICE REQUEST
# =============================================================================


class TestPriceRequestContract:
    """Тесты price_request контракта"""

    def test_valid(self, valid_price_request) -> None:
        validate_price_request(valid_price_request)

    def test_unknown_purity_allowed(self, valid_price_request) -> None:
        """Проба — свободная строка: fallback 0.995 решает ядро"""
        valid_price_request["purity"] = "garbage"
        assert PriceRequestValidator().is_valid(valid_price_request)

    def test_unknown_direction(self, valid_price_request) -> None:
        valid_price_request["direction"] = "swap"
        with pytest.raises(ValidationError):
            validate_price_request(valid_price_request)

    def test_commission_requires_mode(self, valid_price_request) -> None:
        valid_price_request["commission"] = {"rate": 1.0}
        with pytest.raises(ValidationError):
            validate_price_request(valid_price_request)

    def test_spot_price_optional(self, valid_price_request) -> None:
        """Без spotPrice калькулятор берёт текущую spot-цену"""
        del valid_price_request["spotPrice"]
        validate_price_request(valid_price_request)

    def test_spot_price_positive(self, valid_price_request) -> None:
        valid_price_request["spotPrice"] = 0
        with pytest.raises(ValidationError):
            validate_price_request(valid_price_request)


# =============================================================================
# RECORDS
# =============================================================================


class TestRecords:
    """Тесты преобразования записей хранилища"""

    def test_inventory_item_from_record(self, valid_inventory_record) -> None:
        item = inventory_item_from_record(valid_inventory_record)
        assert item.id == "lw0x3k9a2b"
        assert item.register_type is RegisterType.RETAIL
        assert item.category is ItemCategory.BARS
        assert item.purity is PurityDesignation.FINE_9999
        assert item.featured is True

    def test_stored_equivalent_ignored(self, valid_inventory_record) -> None:
        """Сохранённый equivalent24k не используется: пересчёт из полей"""
        valid_inventory_record["equivalent24k"] = 1.0
        item = inventory_item_from_record(valid_inventory_record)
        assert item.equivalent_24k() == 100.0 * 0.9999

    def test_inventory_item_to_record(self, valid_inventory_record) -> None:
        item = inventory_item_from_record(valid_inventory_record)
        record = inventory_item_to_record(item)
        validate_inventory_item(record)
        assert record["weightUnit"] == "g"
        assert record["type"] == "retail"
        assert record["equivalent24k"] == 100.0 * 0.9999
        assert "description" not in record

    def test_invalid_record_rejected_before_model(self, valid_inventory_record) -> None:
        valid_inventory_record["category"] = "rings"
        with pytest.raises(ValidationError):
            inventory_item_from_record(valid_inventory_record)

    def test_transaction_from_record(self, valid_transaction_record) -> None:
        tx = transaction_from_record(valid_transaction_record)
        assert tx.type is TransactionDirection.SELL
        assert tx.item_id == "lw0x3k9a2b"
        assert tx.commission_spec().mode is CommissionMode.FLAT_AMOUNT
        assert tx.register_type is RegisterType.RETAIL

    def test_legacy_case_inventory_record(self, valid_inventory_record) -> None:
        """Старые записи хранят перечисления в произвольном регистре"""
        valid_inventory_record.update(
            {"type": "Retail", "category": "Bars", "weightUnit": "G", "purity": "22k"}
        )
        item = inventory_item_from_record(valid_inventory_record)
        assert item.register_type is RegisterType.RETAIL
        assert item.category is ItemCategory.BARS
        assert item.weight_unit is WeightUnit.GRAM
        assert item.purity is PurityDesignation.K22

        record = inventory_item_to_record(item)
        assert record["category"] == "bars"
        assert record["purity"] == "22K"

    def test_legacy_record_not_mutated(self, valid_inventory_record) -> None:
        valid_inventory_record["category"] = "Bars"
        inventory_item_from_record(valid_inventory_record)
        assert valid_inventory_record["category"] == "Bars"

    def test_unknown_purity_still_rejected(self, valid_inventory_record) -> None:
        valid_inventory_record["purity"] = "23k"
        with pytest.raises(ValidationError):
            inventory_item_from_record(valid_inventory_record)

    def test_normalize_record_keeps_unknown_values(self) -> None:
        record = normalize_record({"category": "Rings", "name": "x"}, {"category": parse_category})
        assert record == {"category": "Rings", "name": "x"}

    def test_legacy_case_transaction_record(self, valid_transaction_record) -> None:
        valid_transaction_record.update(
            {
                "type": "Sell",
                "commissionType": "Flat",
                "paymentMethod": "Cash",
                "currency": "usd",
                "registerType": "RETAIL",
            }
        )
        tx = transaction_from_record(valid_transaction_record)
        assert tx.type is TransactionDirection.SELL
        assert tx.commission_type is CommissionMode.FLAT_AMOUNT
        assert tx.payment_method is PaymentMethod.CASH
        assert tx.currency is Currency.USD
        assert tx.register_type is RegisterType.RETAIL

    def test_mixed_payment_round_trip(self, valid_transaction_record) -> None:
        """Золотая часть смешанной оплаты не теряется"""
        valid_transaction_record.update(
            {
                "paymentMethod": "mixed",
                "cashAmount": 3000.0,
                "goldAmount": 3.0,
                "goldPurity": "22K",
                "goldWeightUnit": "g",
            }
        )
        tx = transaction_from_record(valid_transaction_record)
        assert tx.payment_method is PaymentMethod.MIXED
        assert tx.gold_purity is PurityDesignation.K22
        assert tx.gold_weight_unit is WeightUnit.GRAM

        record = transaction_to_record(tx)
        validate_transaction(record)
        assert record == valid_transaction_record

    def test_transaction_to_record_skips_missing(self, valid_transaction_record) -> None:
        record = transaction_to_record(transaction_from_record(valid_transaction_record))
        assert "goldPurity" not in record
        assert "goldWeightUnit" not in record
        assert record["registerType"] == "retail"

    def test_gold_unit_outside_contract(self, valid_transaction_record) -> None:
        valid_transaction_record["goldWeightUnit"] = "kg"
        with pytest.raises(ValidationError):
            transaction_from_record(valid_transaction_record)

    def test_normalize_price_request(self, valid_price_request) -> None:
        valid_price_request.update(
            {"direction": "Buy", "category": "JEWELRY", "weightUnit": "OZ", "purity": "22k"}
        )
        valid_price_request["commission"] = {"rate": 1.0, "mode": "Percentage"}
        request = normalize_price_request(valid_price_request)
        validate_price_request(request)
        assert request["direction"] == "buy"
        assert request["weightUnit"] == "oz"
        assert request["commission"]["mode"] == "percentage"
        assert request["purity"] == "22k"
