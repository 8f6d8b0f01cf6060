from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union

from predator_sdk.utils.errors import ValidationError

# Caller-facing camelCase keys, as accepted by the original JavaScript SDK
_CAMEL_KEYS = {
    "private_keys": "privateKeys",
    "token_address": "tokenAddress",
    "dev_private_key": "devPrivateKey",
}


def _lookup(data: Mapping[str, Any], name: str) -> Any:
    camel = _CAMEL_KEYS.get(name, name)
    if camel in data:
        return data[camel]
    return data.get(name)


def _coerce(cls, data: Mapping[str, Any]):
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"{cls.__name__} expects a mapping, got {type(data).__name__}"
        )
    values: Dict[str, Any] = {}
    for f in fields(cls):
        value = _lookup(data, f.name)
        if value is None:
            if f.name in cls.REQUIRED:
                raise ValidationError(
                    f"Missing required option: {_CAMEL_KEYS.get(f.name, f.name)}"
                )
            continue
        values[f.name] = value
    return cls(**values)


@dataclass(frozen=True)
class BuyOptions:
    """Buy `amount` (SOL per wallet) of `token_address` with every wallet in `private_keys`"""
    private_keys: str
    token_address: str
    amount: str

    REQUIRED = ("private_keys", "token_address", "amount")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BuyOptions":
        return _coerce(cls, data)


@dataclass(frozen=True)
class SellOptions:
    """Sell `percentage` percent of the holdings of `token_address`"""
    private_keys: str
    token_address: str
    percentage: Union[str, int, float]

    REQUIRED = ("private_keys", "token_address", "percentage")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SellOptions":
        return _coerce(cls, data)


@dataclass(frozen=True)
class CreateOptions:
    """Token metadata for a new launch; `dev_private_key` signs the creation"""
    private_keys: str
    dev_private_key: str
    amount: str
    name: str
    symbol: str
    description: Optional[str] = None
    telegram: Optional[str] = None
    twitter: Optional[str] = None
    website: Optional[str] = None
    file: Optional[str] = None

    REQUIRED = ("private_keys", "dev_private_key", "amount", "name", "symbol")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateOptions":
        return _coerce(cls, data)


OperationOptions = Union[BuyOptions, SellOptions, CreateOptions]
