"""
Factorization utilities.

Responsibility: prime factors of single integers by trial division.
This file must not know about sieves or counting tables.
"""

import numpy as np
from numba import njit

from .bounds import PRIME_DTYPE, check_integer, empty_sequence

# A uint32 value has at most 32 prime factors (2**32 - 1 < 2**32)
MAX_FACTORS = 32


@njit
def _trial_factor(n: int) -> np.ndarray:
    """
    Factor n >= 2 into primes, smallest first.

    Returns the filled prefix of a fixed-size int64 buffer.
    """
    factors = np.zeros(MAX_FACTORS, dtype=np.int64)
    count = 0

    while n % 2 == 0:
        factors[count] = 2
        count += 1
        n //= 2

    i = 3
    while i * i <= n:
        while n % i == 0:
            factors[count] = i
            count += 1
            n //= i
        i += 2

    # Whatever survives has no factor <= its square root
    if n > 1:
        factors[count] = n
        count += 1

    return factors[:count]


def prime_factorization(n: int) -> np.ndarray:
    """
    Return the prime factors of n with multiplicity.

    Parameters
    ----------
    n : int
        Integer in [0, 2**32 - 1].

    Returns
    -------
    np.ndarray
        Non-decreasing uint32 array whose product is n.
        Empty for n < 2 (0 and 1 have no prime factors).
    """
    n = check_integer(n, "n")
    if n < 2:
        return empty_sequence()
    return _trial_factor(np.int64(n)).astype(PRIME_DTYPE)


def omega(n: int) -> int:
    """
    Count distinct prime factors of n (little omega).

    Returns 0 for n < 2.
    """
    factors = prime_factorization(n)
    return len(np.unique(factors))


def big_omega(n: int) -> int:
    """
    Count prime factors of n with multiplicity (big Omega).

    Returns 0 for n < 2.
    """
    return len(prime_factorization(n))
