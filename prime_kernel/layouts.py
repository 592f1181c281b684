"""
Plane layouts for integers and primes.

Responsibility: positions only. Each function maps integers to
coordinates; which numbers are prime is decided elsewhere.

Ulam spiral orientation (counter-clockwise, y up):

    17 16 15 14 13
    18  5  4  3 12
    19  6  1  2 11
    20  7  8  9 10
    21 22 23 24 25

Ring k >= 1 holds (2k-1)^2 + 1 .. (2k+1)^2 and starts one step to the
right of the last number of ring k-1. Ring 0 is the single cell of 1.
"""

import numpy as np
from typing import Tuple

from .bounds import check_integer


def _isqrt(values: np.ndarray) -> np.ndarray:
    """Exact floor(sqrt(v)) for a non-negative int64 array."""
    root = np.floor(np.sqrt(values.astype(np.float64))).astype(np.int64)
    # Float sqrt can be off by one near perfect squares
    root -= (root * root > values)
    root += ((root + 1) * (root + 1) <= values)
    return root


def ulam_coordinates(max_value: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Integer positions of 1..max_value on the Ulam spiral.

    Parameters
    ----------
    max_value : int
        Largest number placed (inclusive).

    Returns
    -------
    tuple
        (x, y) int64 arrays of length max_value; entry i is number i+1.
    """
    max_value = check_integer(max_value, "max_value")
    n = np.arange(1, max_value + 1, dtype=np.int64)

    k = (_isqrt(np.maximum(n - 1, 0)) + 1) // 2
    t = n - (2 * k - 1) ** 2
    side = 2 * k

    right = t <= side
    top = (t > side) & (t <= 2 * side)
    left = (t > 2 * side) & (t <= 3 * side)

    x = np.select([right, top, left],
                  [k, k - (t - side), -k],
                  default=-k + (t - 3 * side))
    y = np.select([right, top, left],
                  [-k + t, k, k - (t - 2 * side)],
                  default=-k)

    return x.astype(np.int64), y.astype(np.int64)


def sacks_coordinates(numbers) -> Tuple[np.ndarray, np.ndarray]:
    """
    Positions on the Sacks spiral: angle 2*pi*sqrt(n), radius sqrt(n).

    Perfect squares land on the positive x axis.
    """
    root = np.sqrt(np.asarray(numbers, dtype=np.float64))
    angle = 2 * np.pi * root
    return root * np.cos(angle), root * np.sin(angle)


def polar_coordinates(numbers) -> Tuple[np.ndarray, np.ndarray]:
    """Positions with angle n radians and radius n."""
    values = np.asarray(numbers, dtype=np.float64)
    return values * np.cos(values), values * np.sin(values)


def spherical_coordinates(numbers) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    3D positions with azimuth = polar angle = n radians, radius 10*sqrt(n).

    Returns
    -------
    tuple
        (x, y, z) float arrays.
    """
    values = np.asarray(numbers, dtype=np.float64)
    r = 10 * np.sqrt(values)
    return (r * np.cos(values) * np.sin(values),
            r * np.sin(values) * np.sin(values),
            r * np.cos(values))


def modular_grid_positions(max_value: int, modulus: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Row and column of 1..max_value written in rows of width modulus.

    Column is (n-1) mod modulus, so each column is one residue class.

    Parameters
    ----------
    max_value : int
        Largest number placed (inclusive).
    modulus : int
        Row width, >= 1.

    Returns
    -------
    tuple
        (row, col) int64 arrays of length max_value.
    """
    max_value = check_integer(max_value, "max_value")
    modulus = check_integer(modulus, "modulus")
    if modulus < 1:
        raise ValueError("modulus must be >= 1")

    offset = np.arange(max_value, dtype=np.int64)
    return offset // modulus, offset % modulus
