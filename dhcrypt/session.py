"""
Session helper: turns a finished key agreement into a Blowfish cipher.

The shared secret bytes are used directly as the Blowfish key.
"""

from dhcrypt.crypto.blowfish import BlockCipher
from dhcrypt.crypto.dh import KeyAgreement


def open_session(agreement: KeyAgreement, peer_share: int) -> BlockCipher:
    """
    Derives the shared secret with the peer and keys a BlockCipher with it.

    Args:
        agreement: A KeyAgreement that has run generate() or adopt().
        peer_share: The public share received from the peer.

    Returns:
        A BlockCipher both peers can construct identically.
    Raises:
        InvalidKey: If the secret is wider than 56 bytes (prime_bits > 448).
    """
    key = agreement.derive_shared(peer_share)
    return BlockCipher(key, verbose=agreement.settings.verbose)
