"""
Utilities module for the Predator SDK.

Configuration, enums, the error taxonomy and logging helpers shared by the
rest of the package.
"""

# Configuration management
from .config import read_config, create_default_config, config_from_env, SdkConfig

# Enums and constants
from .enums import Operation, KeyState, ErrorKind

# Errors
from .errors import (
    DomainError,
    ValidationError,
    KeyInitError,
    ApiError,
    NoResponseError,
    RequestError,
    classify,
)

# Logging utilities
from .logger import ThreadLogger, create_console_handler, create_file_handler

__all__ = [
    # Configuration
    "read_config",
    "create_default_config",
    "config_from_env",
    "SdkConfig",

    # Enums
    "Operation",
    "KeyState",
    "ErrorKind",

    # Errors
    "DomainError",
    "ValidationError",
    "KeyInitError",
    "ApiError",
    "NoResponseError",
    "RequestError",
    "classify",

    # Logging
    "ThreadLogger",
    "create_console_handler",
    "create_file_handler",
]
