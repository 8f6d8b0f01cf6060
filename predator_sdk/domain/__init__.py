from .options import BuyOptions, SellOptions, CreateOptions, OperationOptions
from .payload import PayloadBuilder, CanonicalPayload, resolve_operation, coerce_options

__all__ = [
    "BuyOptions",
    "SellOptions",
    "CreateOptions",
    "OperationOptions",
    "PayloadBuilder",
    "CanonicalPayload",
    "resolve_operation",
    "coerce_options",
]
