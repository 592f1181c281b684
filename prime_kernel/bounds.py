"""
Input domain of the kernel.

Responsibility: integer ceilings and argument checks. Every public entry
point funnels its integer arguments through here before touching numpy.

All primes and factors are reported as uint32, so inputs are limited to the
unsigned 32-bit range. Intermediate products (i*i, sieve multiples) are
computed in 64-bit integers and cannot overflow inside these ceilings.
"""

import operator

import numpy as np

U32_MAX = 2**32 - 1

# pi(2**32 - 1): the number of primes representable as uint32
MAX_PRIME_COUNT = 203_280_221

PRIME_DTYPE = np.uint32


def check_integer(value, name: str, ceiling: int = U32_MAX) -> int:
    """
    Coerce value to a plain int and check 0 <= value <= ceiling.

    Parameters
    ----------
    value : int-like
        Python int or numpy integer scalar.
    name : str
        Argument name used in error messages.
    ceiling : int
        Largest accepted value (inclusive).

    Returns
    -------
    int
        The validated value.

    Raises
    ------
    TypeError
        If value is not an integer (bools are rejected too).
    ValueError
        If value is negative or above ceiling.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    if value > ceiling:
        raise ValueError(f"{name} must be <= {ceiling:,}, got {value:,}")
    return value


def empty_sequence() -> np.ndarray:
    """Return an empty uint32 array."""
    return np.empty(0, dtype=PRIME_DTYPE)
