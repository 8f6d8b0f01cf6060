import asyncio
from typing import Any, List, Optional, Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

KEY = bytes(range(32))
KEY_HEX = KEY.hex()


def open_envelope(envelope: str, key: bytes = KEY) -> str:
    """Server-side view of an envelope: decrypt and unpad"""
    iv_hex, cipher_hex = envelope.split(":")
    decryptor = Cipher(algorithms.AES(key), modes.CBC(bytes.fromhex(iv_hex))).decryptor()
    padded = decryptor.update(bytes.fromhex(cipher_hex)) + decryptor.finalize()
    unpadder = padding.PKCS7(128).unpadder()
    return (unpadder.update(padded) + unpadder.finalize()).decode("utf-8")


class FakeTransport:
    """In-memory stand-in for HttpTransport"""

    def __init__(
        self,
        key_hex: str = KEY_HEX,
        response: Any = None,
        key_error: Optional[BaseException] = None,
        post_error: Optional[BaseException] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self.key_hex = key_hex
        self.response = {"status": "ok"} if response is None else response
        self.key_error = key_error
        self.post_error = post_error
        self.gate = gate
        self.get_calls: List[str] = []
        self.posts: List[Tuple[str, dict]] = []
        self.closed = False

    async def get(self, endpoint: str) -> Any:
        self.get_calls.append(endpoint)
        if self.gate is not None:
            await self.gate.wait()
        if self.key_error is not None:
            raise self.key_error
        return {"encryptionKey": self.key_hex}

    async def post(self, endpoint: str, body: dict) -> Any:
        self.posts.append((endpoint, body))
        if self.post_error is not None:
            raise self.post_error
        return self.response

    def close(self) -> None:
        self.closed = True
