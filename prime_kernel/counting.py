"""
Prime-counting function.

Responsibility: the table pi(0), pi(1), ..., pi(limit).
"""

import numpy as np
from numba import njit

from .bounds import PRIME_DTYPE, check_integer
from .primes import sieve_of_eratosthenes


@njit
def _merge_counts(primes: np.ndarray, limit: int) -> np.ndarray:
    """Single forward pass: counts[i] = number of primes <= i."""
    counts = np.zeros(limit + 1, dtype=np.uint32)
    cursor = 0
    n_primes = len(primes)
    for i in range(limit + 1):
        while cursor < n_primes and primes[cursor] <= i:
            cursor += 1
        counts[i] = cursor
    return counts


def prime_counting(limit: int) -> np.ndarray:
    """
    Return pi(i) for every i in [0, limit].

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Non-decreasing uint32 array of length limit+1, starting at 0
        and stepping by exactly 1 at each prime.
    """
    limit = check_integer(limit, "limit")
    primes = sieve_of_eratosthenes(limit).astype(np.int64)
    return _merge_counts(primes, limit).astype(PRIME_DTYPE, copy=False)
