"""
Deterministic primality testing by trial division.
"""

import numpy as np
from numba import njit

from .bounds import check_integer


@njit
def _trial_division(n: int) -> bool:
    """Trial-divide n by odd candidates up to sqrt(n)."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    i = 3
    # i and n are int64 here, so i * i cannot wrap for n < 2**32
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def is_prime(n: int) -> bool:
    """
    Return True iff n is prime.

    Parameters
    ----------
    n : int
        Integer in [0, 2**32 - 1].

    Returns
    -------
    bool
    """
    n = check_integer(n, "n")
    return bool(_trial_division(np.int64(n)))
