"""
Exception types raised by the key-agreement engine and the block cipher.

- Bad values from the caller raise ValueError subclasses.
- Using a KeyAgreement before it holds parameters raises NotInitialized.
- Failures inside the cipher backend raise CipherFailure.
"""


class DHCryptError(Exception):
    """Base class for every error raised by dhcrypt."""


class InvalidParameters(DHCryptError, ValueError):
    """Raised when adopted (p, g) values are unusable."""


class NotInitialized(DHCryptError, RuntimeError):
    """Raised when a KeyAgreement is queried before generate() or adopt()."""


class InvalidPeerShare(DHCryptError, ValueError):
    """Raised when a peer's public share lies outside (0, p)."""


class InvalidKey(DHCryptError, ValueError):
    """Raised when a Blowfish key has the wrong type or length."""


class InvalidBlockSize(DHCryptError, ValueError):
    """Raised when cipher input is not a whole number of 8-byte blocks."""


class CipherFailure(DHCryptError):
    """Raised when the underlying cipher backend fails at runtime."""
