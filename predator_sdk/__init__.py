"""
Predator SDK - a client for the Predator trading bot API.

Buy, sell and create Solana tokens through the Predator backend. Request
payloads carry wallet private keys and are sealed with AES-256-CBC under a
key fetched from the server on first use.
"""

__version__ = "0.1.0"

from predator_sdk.client.predator_client import PredatorClient
from predator_sdk.domain.options import BuyOptions, SellOptions, CreateOptions
from predator_sdk.utils.enums import Operation, ErrorKind
from predator_sdk.utils.errors import (
    DomainError,
    ValidationError,
    KeyInitError,
    ApiError,
    NoResponseError,
    RequestError,
)

__all__ = [
    # Client
    "PredatorClient",
    # Options
    "BuyOptions",
    "SellOptions",
    "CreateOptions",
    "Operation",
    # Errors
    "ErrorKind",
    "DomainError",
    "ValidationError",
    "KeyInitError",
    "ApiError",
    "NoResponseError",
    "RequestError",
    "__version__",
]
