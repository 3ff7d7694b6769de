"""
Prime Sampling Utilities.

- random_prime: samples a prime of an exact bit-width from a given RNG.

Candidates come from the caller's RNG so a seeded RNG gives a reproducible
prime; the primality decision itself is sympy's isprime.
"""

import random
from sympy import isprime


def random_prime(bits: int, rng: random.Random) -> int:
    """
    Draws random `bits`-bit odd candidates until one is prime.

    The top bit is forced so the result has exactly `bits` bits.

    Raises:
        ValueError: If bits < 2.
    """
    if bits < 2:
        raise ValueError("A prime needs at least 2 bits.")
    top_bit = 1 << (bits - 1)
    while True:
        candidate = rng.getrandbits(bits) | top_bit | 1
        if isprime(candidate):
            return candidate
