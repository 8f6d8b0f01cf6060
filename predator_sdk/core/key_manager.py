import asyncio
import logging
from typing import Any, Optional, Protocol

from predator_sdk.utils.enums import KeyState
from predator_sdk.utils.errors import KeyInitError

KEY_ENDPOINT = "/encryption-key"


class KeySource(Protocol):
    async def get(self, endpoint: str) -> Any: ...


class KeyManager:
    """
    Owns the symmetric key fetched from ``/encryption-key``.

    The key is fetched lazily on the first ``ensure()``; concurrent callers
    share one in-flight fetch. Once READY the key is kept for the life of the
    instance. A failed fetch leaves the manager UNINITIALIZED so the next
    call starts over.
    """

    def __init__(self, transport: KeySource, logger: Optional[logging.Logger] = None, key_length: int = 32):
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.key_length = key_length
        self.state = KeyState.UNINITIALIZED
        self._key: Optional[bytes] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def key(self) -> Optional[bytes]:
        return self._key

    @property
    def is_ready(self) -> bool:
        return self.state is KeyState.READY

    async def ensure(self) -> bytes:
        if self._key is not None:
            return self._key

        if self._pending is None:
            self.state = KeyState.FETCHING_KEY
            self._pending = asyncio.create_task(self._fetch(), name="predator-key-fetch")
        else:
            self.logger.debug("Key fetch already in flight, waiting on it")

        # cancelling one waiter leaves the shared fetch running
        return await asyncio.shield(self._pending)

    async def _fetch(self) -> bytes:
        self.logger.info("Fetching encryption key")
        try:
            response = await self.transport.get(KEY_ENDPOINT)
            key = self._decode(response)
        except asyncio.CancelledError:
            self._reset()
            raise
        except Exception as e:
            self._reset()
            self.logger.error(f"Failed to fetch encryption key: {e}")
            raise KeyInitError(f"Failed to fetch encryption key: {e}", cause=e) from e

        self._key = key
        self.state = KeyState.READY
        self.logger.info("Encryption key ready")
        return key

    def _reset(self) -> None:
        self._pending = None
        self.state = KeyState.UNINITIALIZED

    def _decode(self, response: Any) -> bytes:
        if not isinstance(response, dict) or "encryptionKey" not in response:
            raise ValueError("response has no 'encryptionKey' field")
        try:
            key = bytes.fromhex(response["encryptionKey"])
        except (TypeError, ValueError) as e:
            raise ValueError(f"encryptionKey is not a hex string: {e}") from e
        if len(key) != self.key_length:
            raise ValueError(f"expected a {self.key_length} byte key, got {len(key)} bytes")
        return key
