import random

import pytest
from sympy import isprime

from dhcrypt.crypto.primes import random_prime


@pytest.mark.parametrize("bits", [2, 3, 8, 16, 63, 100, 128])
def test_random_prime_has_exact_width(bits):
    p = random_prime(bits, random.Random(bits))
    assert p.bit_length() == bits
    assert p % 2 == 1
    assert isprime(p)


def test_three_bit_primes_are_five_or_seven():
    rng = random.Random(99)
    seen = {random_prime(3, rng) for _ in range(50)}
    assert seen == {5, 7}


def test_two_bit_prime_is_three():
    assert random_prime(2, random.Random(0)) == 3


def test_random_prime_reproducible_with_seed():
    assert random_prime(63, random.Random(7)) == random_prime(63, random.Random(7))


def test_random_prime_follows_rng():
    assert random_prime(63, random.Random(7)) != random_prime(63, random.Random(8))


def test_random_prime_rejects_one_bit():
    with pytest.raises(ValueError):
        random_prime(1, random.Random(0))
