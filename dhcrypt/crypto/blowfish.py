"""
Blowfish Encryption & Decryption Utilities.

- Implements Blowfish (16 rounds, 64-bit block) in ECB mode.
- No padding: input must already be a whole number of 8-byte blocks.
- Keys are raw bytes, 1 to 56 bytes long.
"""

from typing import Union
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.decrepit.ciphers.algorithms import Blowfish
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from dhcrypt.common.errors import CipherFailure, InvalidBlockSize, InvalidKey
from dhcrypt.common.utils import log

BLOCK_SIZE = 64 // 8
MIN_KEY_SIZE = 1
MAX_KEY_SIZE = 448 // 8

# Smallest key the cryptography backend accepts (32 bits)
_BACKEND_MIN_KEY_SIZE = 4

BytesLike = Union[bytes, bytearray, memoryview]


def _expand_short_key(key: bytes) -> bytes:
    """
    Repeats a 1-3 byte key up to the backend minimum.

    Blowfish's key schedule consumes the key cyclically, so k and k*n
    produce the same subkeys.
    """
    if len(key) >= _BACKEND_MIN_KEY_SIZE:
        return key
    repeats = -(-_BACKEND_MIN_KEY_SIZE // len(key))
    return key * repeats


class BlockCipher:
    """
    A keyed Blowfish-ECB cipher.

    Each 8-byte block is transformed independently with the same key,
    so equal plaintext blocks give equal ciphertext blocks.
    """

    def __init__(self, key: BytesLike, verbose: bool = False):
        """
        Args:
            key: The raw Blowfish key (1-56 bytes).
            verbose: Print a [Blowfish] line when the key is set up.
        Raises:
            InvalidKey: If key is not bytes-like or has a bad length.
        """
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise InvalidKey(f"Key must be bytes, got {type(key).__name__}.")
        key = bytes(key)
        if not MIN_KEY_SIZE <= len(key) <= MAX_KEY_SIZE:
            raise InvalidKey(
                f"Blowfish key must be {MIN_KEY_SIZE}-{MAX_KEY_SIZE} bytes (got {len(key)})."
            )

        try:
            self._cipher = Cipher(Blowfish(_expand_short_key(key)), modes.ECB())
        except ValueError as e:
            raise InvalidKey(f"Blowfish rejected the key: {e}") from e
        log("Blowfish", f"Key schedule set up from a {len(key)}-byte key", verbose)

    @staticmethod
    def _check_blocks(data: BytesLike) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes, got {type(data).__name__}.")
        data = bytes(data)
        if len(data) % BLOCK_SIZE != 0:
            raise InvalidBlockSize(
                f"Input length {len(data)} is not a multiple of {BLOCK_SIZE} bytes."
            )
        return data

    def encrypt(self, plaintext: BytesLike) -> bytes:
        """
        Encrypts whole blocks under Blowfish-ECB.

        Returns:
            The ciphertext, same length as the plaintext.
        Raises:
            InvalidBlockSize: If len(plaintext) % 8 != 0.
            CipherFailure: If the backend cannot run Blowfish.
        """
        plaintext = self._check_blocks(plaintext)
        if not plaintext:
            return b""
        try:
            encryptor = self._cipher.encryptor()
            return encryptor.update(plaintext) + encryptor.finalize()
        except (UnsupportedAlgorithm, ValueError) as e:
            raise CipherFailure(f"Encryption failed: {e}") from e

    def decrypt(self, ciphertext: BytesLike) -> bytes:
        """
        Decrypts whole blocks under Blowfish-ECB.

        Raises:
            InvalidBlockSize: If len(ciphertext) % 8 != 0.
            CipherFailure: If the backend cannot run Blowfish.
        """
        ciphertext = self._check_blocks(ciphertext)
        if not ciphertext:
            return b""
        try:
            decryptor = self._cipher.decryptor()
            return decryptor.update(ciphertext) + decryptor.finalize()
        except (UnsupportedAlgorithm, ValueError) as e:
            raise CipherFailure(f"Decryption failed: {e}") from e
