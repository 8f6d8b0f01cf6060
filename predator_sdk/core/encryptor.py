import os
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from predator_sdk.utils.errors import KeyInitError


class Encryptor:
    """
    Seals plaintext into the envelope format the server decrypts.

    Envelope: ``<iv hex>:<ciphertext hex>``, AES-256-CBC with PKCS7 padding
    and a fresh random 16 byte IV per call.
    """

    IV_SIZE = 16
    BLOCK_SIZE_BITS = algorithms.AES.block_size

    def seal(self, plaintext: str, key: Optional[bytes]) -> str:
        if not key:
            raise KeyInitError("Encryption key not initialized. Call initialize() first.")

        iv = os.urandom(self.IV_SIZE)
        padder = padding.PKCS7(self.BLOCK_SIZE_BITS).padder()
        padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()

        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return f"{iv.hex()}:{ciphertext.hex()}"
