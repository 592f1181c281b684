"""
Gaps between consecutive primes.

Responsibility: differences of an ascending prime sequence and the
statistics reported about them. Input is trusted to be ascending primes;
it is never re-validated.
"""

import numpy as np
from typing import Dict, Optional

from .bounds import PRIME_DTYPE, empty_sequence

# Constellation labels, keyed by the gap that defines them
TWIN = 'twin'      # p, p+2
COUSIN = 'cousin'  # p, p+4
SEXY = 'sexy'      # p, p+6

CONSTELLATIONS = {2: TWIN, 4: COUSIN, 6: SEXY}


def prime_gaps(primes) -> np.ndarray:
    """
    Return differences between consecutive primes.

    Parameters
    ----------
    primes : array-like
        Ascending primes. Not modified.

    Returns
    -------
    np.ndarray
        uint32 array of length len(primes) - 1, or empty if fewer
        than 2 primes are given.
    """
    values = np.asarray(primes, dtype=np.int64)
    if len(values) < 2:
        return empty_sequence()
    return np.diff(values).astype(PRIME_DTYPE)


def gap_histogram(gaps) -> Dict[int, int]:
    """
    Count how often each gap value occurs.

    Parameters
    ----------
    gaps : array-like
        Gap sequence from prime_gaps.

    Returns
    -------
    dict
        {gap: count}, ordered by ascending gap.
    """
    values, counts = np.unique(np.asarray(gaps, dtype=np.int64),
                               return_counts=True)
    return {int(g): int(c) for g, c in zip(values, counts)}


def gap_summary(gaps) -> Dict[str, float]:
    """
    Compute summary statistics for a gap sequence.

    Parameters
    ----------
    gaps : array-like
        Gap sequence from prime_gaps.

    Returns
    -------
    dict
        Dictionary with count, mean, median, max, std.
    """
    values = np.asarray(gaps, dtype=np.int64)
    if len(values) == 0:
        return {
            'count': 0,
            'mean': np.nan,
            'median': np.nan,
            'max': np.nan,
            'std': np.nan
        }

    return {
        'count': len(values),
        'mean': float(np.mean(values)),
        'median': float(np.median(values)),
        'max': int(np.max(values)),
        'std': float(np.std(values))
    }


def classify_gap(gap: int) -> Optional[str]:
    """Return the constellation a gap denotes ('twin', 'cousin', 'sexy') or None."""
    return CONSTELLATIONS.get(int(gap))


def constellation_counts(gaps) -> Dict[str, int]:
    """
    Count twin, cousin and sexy gaps.

    Only gaps between consecutive primes are counted, so e.g. (5, 11)
    is not a sexy pair here because 7 lies between them.
    """
    values = np.asarray(gaps, dtype=np.int64)
    return {name: int(np.sum(values == gap))
            for gap, name in CONSTELLATIONS.items()}
