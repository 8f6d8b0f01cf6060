"""
Canonical plaintext payloads.

The field names below are the server's wire contract. ``tokenBAddress`` in
the create payload carries the dev private key, not a token address; the
server reads it from that field, so the mapping must stay as is.
"""

from typing import Any, Callable, Dict, Mapping, Union

from predator_sdk.domain.options import (
    BuyOptions,
    CreateOptions,
    OperationOptions,
    SellOptions,
)
from predator_sdk.utils.enums import Operation
from predator_sdk.utils.errors import ValidationError

CanonicalPayload = Dict[str, Any]


def _build_buy(options: BuyOptions) -> CanonicalPayload:
    return {
        "privateKeys": options.private_keys,
        "tokenBAddress": options.token_address,
        "tokenBAmount": options.amount,
    }


def _build_sell(options: SellOptions) -> CanonicalPayload:
    return {
        "privateKeys": options.private_keys,
        "tokenBAddress": options.token_address,
        "tokenBAmount": options.percentage,
    }


def _build_create(options: CreateOptions) -> CanonicalPayload:
    payload = {
        "privateKeys": options.private_keys,
        "tokenBAddress": options.dev_private_key,
        "tokenBAmount": options.amount,
        "tokenName": options.name,
        "tokenSymbol": options.symbol,
        "tokenDescription": options.description,
        "telegramLink": options.telegram,
        "twitterLink": options.twitter,
        "websiteLink": options.website,
        "fileUrl": options.file,
    }
    # unset metadata is left off the wire rather than sent as null
    return {k: v for k, v in payload.items() if v is not None}


_OPTIONS_TYPES = {
    Operation.BUY: BuyOptions,
    Operation.SELL: SellOptions,
    Operation.CREATE: CreateOptions,
}

_BUILDERS: Dict[Operation, Callable[[Any], CanonicalPayload]] = {
    Operation.BUY: _build_buy,
    Operation.SELL: _build_sell,
    Operation.CREATE: _build_create,
}

if not set(_BUILDERS) == set(Operation) == set(_OPTIONS_TYPES):
    raise RuntimeError("every Operation needs a payload builder")


def resolve_operation(operation: Union[Operation, str]) -> Operation:
    """Accept an Operation or its wire name ("buy", "sell", "create")"""
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        raise ValidationError("Unsupported operation") from None


def coerce_options(
    operation: Operation, options: Union[OperationOptions, Mapping[str, Any]]
) -> OperationOptions:
    """Return `options` as the record type `operation` expects"""
    expected = _OPTIONS_TYPES[operation]
    if isinstance(options, expected):
        return options
    if isinstance(options, (BuyOptions, SellOptions, CreateOptions)):
        raise ValidationError(
            f"{type(options).__name__} cannot be used for the {operation.value} operation"
        )
    return expected.from_dict(options)


class PayloadBuilder:
    """Maps an operation and its options to the plaintext the server expects"""

    def build(
        self,
        operation: Union[Operation, str],
        options: Union[OperationOptions, Mapping[str, Any]],
    ) -> CanonicalPayload:
        op = resolve_operation(operation)
        return _BUILDERS[op](coerce_options(op, options))
