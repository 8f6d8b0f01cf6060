"""
Core request pipeline: key bootstrap, envelope encryption and HTTP transport.
"""

from .encryptor import Encryptor
from .key_manager import KeyManager, KEY_ENDPOINT
from .transport import HttpTransport, build_http_session

__all__ = [
    "Encryptor",
    "KeyManager",
    "KEY_ENDPOINT",
    "HttpTransport",
    "build_http_session",
]
