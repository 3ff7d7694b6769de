"""
Diffie-Hellman Key Agreement.

- Generates DH parameters (p, g) of configured bit-widths.
- Samples a secret exponent x and computes the public share A = g^x mod p.
- Adopts a peer's (p, g) for the responder side of an exchange.
- Computes the shared secret S = B^x mod p as fixed-length little-endian bytes.

All exponentiation is integer modular exponentiation (three-argument pow).
The parameters are deliberately small and unauthenticated; see DHSettings.
"""

import random
from typing import Optional

from dhcrypt.common.config import DHSettings
from dhcrypt.common.errors import InvalidParameters, InvalidPeerShare, NotInitialized
from dhcrypt.common.utils import byte_length, int_to_le_bytes, log
from dhcrypt.crypto.primes import random_prime


class KeyAgreement:
    """
    One party's side of an unauthenticated Diffie-Hellman exchange.

    Initiator: generate(), send (p, g, A), then derive_shared(B).
    Responder: adopt(p, g), send A, then derive_shared(peer A).

    The secret exponent never leaves the instance.
    """

    def __init__(
        self,
        settings: Optional[DHSettings] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        """
        Args:
            settings: Widths and exponent range (defaults if omitted).
            rng: Random source owned by this instance. Takes precedence
                over `seed`.
            seed: Seed for a private random.Random, for reproducible runs.
                With neither rng nor seed, a SystemRandom is used.
        """
        self.settings = settings or DHSettings()
        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = random.Random(seed)
        else:
            self._rng = random.SystemRandom()

        self._prime: Optional[int] = None
        self._base: Optional[int] = None
        self._secret: Optional[int] = None
        self._public: Optional[int] = None

    # --- State transitions ---

    def generate(self) -> tuple[int, int, int]:
        """
        Samples fresh (p, g, x) and computes the public share.

        Returns:
            tuple: (p, g, A), everything the initiator sends to its peer.
        """
        cfg = self.settings
        prime = random_prime(cfg.prime_bits, self._rng)
        base = random_prime(cfg.base_bits, self._rng)
        log("DH", f"Generated {cfg.prime_bits}-bit prime p and {cfg.base_bits}-bit generator g={base}", cfg.verbose)

        self._install(prime, base)
        return prime, base, self._public

    def adopt(self, p: int, g: int) -> int:
        """
        Installs the peer's (p, g), samples a fresh x and computes A.

        Primality of p is not checked.

        Returns:
            The public share A to send back to the initiator.
        Raises:
            InvalidParameters: If p <= 1, g <= 1 or g >= p, or either
                value is not an integer.
        """
        for name, value in (("p", p), ("g", g)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameters(f"{name} must be an integer, got {type(value).__name__}.")
        if p <= 1:
            raise InvalidParameters(f"p must be greater than 1 (got {p}).")
        if g <= 1:
            raise InvalidParameters(f"g must be greater than 1 (got {g}).")
        if g >= p:
            raise InvalidParameters(f"g must be smaller than p (got g={g}, p={p}).")

        log("DH", f"Adopted {p.bit_length()}-bit prime p and generator g={g}", self.settings.verbose)
        self._install(p, g)
        return self._public

    def _install(self, prime: int, base: int):
        """Replaces p, g and x, then recomputes A."""
        self._prime = prime
        self._base = base
        self._secret = self._sample_secret()
        self._public = pow(base, self._secret, prime)

    def _sample_secret(self) -> int:
        """Draws x uniformly from [secret_min, secret_max]."""
        lo = self.settings.secret_min
        hi = self.settings.secret_max
        return lo + self._rng.randrange(hi - lo + 1)

    # --- Accessors ---

    @property
    def is_ready(self) -> bool:
        """True once generate() or adopt() has run."""
        return self._secret is not None

    def _require_ready(self):
        if not self.is_ready:
            raise NotInitialized("Call generate() or adopt() first.")

    def public_share(self) -> int:
        """Returns A = g^x mod p."""
        self._require_ready()
        return self._public

    def parameters(self) -> tuple[int, int]:
        """Returns (p, g)."""
        self._require_ready()
        return self._prime, self._base

    @property
    def shared_secret_size(self) -> int:
        """
        Byte length of derive_shared() output.

        ceil(prime_bits / 8), widened if an adopted p is larger than
        prime_bits so that S always fits.
        """
        self._require_ready()
        bits = max(self.settings.prime_bits, self._prime.bit_length())
        return byte_length(bits)

    # --- Shared secret ---

    def shared_secret(self, peer_share: int) -> int:
        """
        Computes S = B^x mod p as an integer.

        Raises:
            NotInitialized: If no exponent has been sampled yet.
            InvalidPeerShare: If B is not an integer in (0, p).
        """
        self._require_ready()
        if isinstance(peer_share, bool) or not isinstance(peer_share, int):
            raise InvalidPeerShare(f"Peer share must be an integer, got {type(peer_share).__name__}.")
        if not 0 < peer_share < self._prime:
            raise InvalidPeerShare("Peer share must lie strictly between 0 and p.")
        return pow(peer_share, self._secret, self._prime)

    def derive_shared(self, peer_share: int) -> bytes:
        """
        Computes the shared secret and serializes it for use as a key.

        Byte i of the result is (S >> 8*i) & 0xFF; the length is
        shared_secret_size (8 bytes for the default 63-bit prime).
        Does not modify the instance.
        """
        secret = self.shared_secret(peer_share)
        return int_to_le_bytes(secret, self.shared_secret_size)

    def __repr__(self) -> str:
        if not self.is_ready:
            return "<KeyAgreement empty>"
        return f"<KeyAgreement p={self._prime} g={self._base} A={self._public}>"
