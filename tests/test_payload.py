"""Tests for canonical payload construction."""

import pytest

from predator_sdk.domain.options import BuyOptions, CreateOptions, SellOptions
from predator_sdk.domain.payload import PayloadBuilder, resolve_operation
from predator_sdk.utils.enums import Operation
from predator_sdk.utils.errors import ValidationError


@pytest.fixture
def builder():
    return PayloadBuilder()


class TestBuy:
    def test_fields(self, builder, buy_options):
        payload = builder.build(Operation.BUY, buy_options)

        assert payload == {
            "privateKeys": "PK1,PK2",
            "tokenBAddress": "Mint111",
            "tokenBAmount": "0.001",
        }

    def test_accepts_operation_name_and_dataclass(self, builder):
        options = BuyOptions(private_keys="PK", token_address="Mint", amount="1")

        payload = builder.build("buy", options)

        assert payload["tokenBAddress"] == "Mint"

    def test_snake_case_keys(self, builder):
        payload = builder.build(
            "buy", {"private_keys": "PK", "token_address": "Mint", "amount": "2"}
        )

        assert payload == {"privateKeys": "PK", "tokenBAddress": "Mint", "tokenBAmount": "2"}

    def test_missing_amount(self, builder):
        with pytest.raises(ValidationError, match="amount"):
            builder.build("buy", {"privateKeys": "PK", "tokenAddress": "Mint"})


class TestSell:
    def test_percentage_becomes_amount(self, builder):
        options = SellOptions(private_keys="PK", token_address="Mint", percentage=25)

        payload = builder.build(Operation.SELL, options)

        assert payload == {"privateKeys": "PK", "tokenBAddress": "Mint", "tokenBAmount": 25}


class TestCreate:
    def test_fields(self, builder, create_options):
        payload = builder.build(Operation.CREATE, create_options)

        assert payload == {
            "privateKeys": "PK1",
            "tokenBAddress": "D",
            "tokenBAmount": "0.5",
            "tokenName": "Example Token",
            "tokenSymbol": "EXT",
            "tokenDescription": "An example token",
            "telegramLink": "https://t.me/exampletoken",
            "twitterLink": "https://twitter.com/exampletoken",
            "websiteLink": "https://www.exampletoken.com",
            "fileUrl": "https://example.com/logo.png",
        }

    def test_dev_private_key_goes_in_token_b_address(self, builder, create_options):
        payload = builder.build("create", {**create_options, "devPrivateKey": "D"})

        assert payload["tokenBAddress"] == "D"

    def test_unset_metadata_is_omitted(self, builder):
        options = CreateOptions(
            private_keys="PK", dev_private_key="D", amount="1", name="N", symbol="S"
        )

        payload = builder.build("create", options)

        assert set(payload) == {
            "privateKeys", "tokenBAddress", "tokenBAmount", "tokenName", "tokenSymbol",
        }

    def test_missing_dev_private_key(self, builder, create_options):
        del create_options["devPrivateKey"]

        with pytest.raises(ValidationError, match="devPrivateKey"):
            builder.build("create", create_options)


@pytest.mark.parametrize(
    "operation, options",
    [
        ("buy", {"privateKeys": "PK", "tokenAddress": "M", "amount": "1"}),
        ("sell", {"privateKeys": "PK", "tokenAddress": "M", "percentage": 10}),
        ("create", {"privateKeys": "PK", "devPrivateKey": "D", "amount": "1", "name": "N", "symbol": "S"}),
    ],
)
def test_private_keys_always_copied_verbatim(builder, operation, options):
    assert builder.build(operation, options)["privateKeys"] == "PK"


@pytest.mark.parametrize("operation", ["transfer", "BUY", "", None])
def test_unsupported_operation(builder, operation):
    with pytest.raises(ValidationError, match="Unsupported operation"):
        builder.build(operation, {"privateKeys": "PK"})


def test_mismatched_options_record(builder):
    options = BuyOptions(private_keys="PK", token_address="Mint", amount="1")

    with pytest.raises(ValidationError, match="BuyOptions"):
        builder.build(Operation.CREATE, options)


def test_non_mapping_options(builder):
    with pytest.raises(ValidationError, match="expects a mapping"):
        builder.build("buy", ["PK", "Mint", "1"])


def test_resolve_operation_endpoint():
    assert resolve_operation("sell").endpoint == "/sell"
