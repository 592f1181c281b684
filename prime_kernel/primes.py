"""
Prime generation utilities.

Responsibility: prime generation only. No factorization, no counting.
"""

import math

import numpy as np

from .bounds import (
    MAX_PRIME_COUNT,
    PRIME_DTYPE,
    U32_MAX,
    check_integer,
    empty_sequence,
)

# Covers the first five primes (2, 3, 5, 7, 11) with margin
SMALL_COUNT_BOUND = 15

# Safety factor applied to the n*(ln n + ln ln n) estimate of p_n
ESTIMATE_MARGIN = 1.3


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (all False when N < 2).
    """
    N = check_integer(N, "N")
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    # Multiples below p*p were already marked by smaller primes
    for p in range(2, math.isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def sieve_of_eratosthenes(bound: int) -> np.ndarray:
    """
    Return array of all primes <= bound.

    Parameters
    ----------
    bound : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Ascending uint32 array of primes. Empty when bound < 2.
    """
    bound = check_integer(bound, "bound")
    if bound < 2:
        return empty_sequence()
    flags = prime_flags_upto(bound)
    return np.nonzero(flags)[0].astype(PRIME_DTYPE)


def estimate_upper_bound(n: int) -> int:
    """
    Initial sieve bound expected to contain the first n primes.

    Uses p_n < n(ln n + ln ln n) (valid for n >= 6), scaled by
    ESTIMATE_MARGIN. Small counts use a fixed bound.
    """
    n = check_integer(n, "n", MAX_PRIME_COUNT)
    if n < 6:
        return SMALL_COUNT_BOUND
    ln_n = math.log(n)
    return int(n * (ln_n + math.log(ln_n)) * ESTIMATE_MARGIN)


def first_n_primes(n: int) -> np.ndarray:
    """
    Return the first n primes in ascending order.

    Sieves up to estimate_upper_bound(n); if that yields fewer than n
    primes the working bound is doubled and the sieve rerun from scratch.

    Parameters
    ----------
    n : int
        Number of primes wanted, 0 <= n <= MAX_PRIME_COUNT.

    Returns
    -------
    np.ndarray
        uint32 array of length n.
    """
    n = check_integer(n, "n", MAX_PRIME_COUNT)
    if n == 0:
        return empty_sequence()

    bound = min(estimate_upper_bound(n), U32_MAX)
    primes = sieve_of_eratosthenes(bound)

    # Terminates: at U32_MAX the sieve holds MAX_PRIME_COUNT >= n primes
    while len(primes) < n:
        bound = min(bound * 2, U32_MAX)
        primes = sieve_of_eratosthenes(bound)

    return primes[:n].copy()
