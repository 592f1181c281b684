"""
Batch report: runs every kernel routine once and saves tables.

Outputs CSVs and a summary table.
"""

import math
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Any, Dict

from .bounds import U32_MAX
from .primes import prime_flags_upto, sieve_of_eratosthenes, first_n_primes
from .primality import is_prime
from .factorization import prime_factorization, omega, big_omega
from .gaps import prime_gaps, gap_histogram, gap_summary, constellation_counts
from .counting import prime_counting


def numbers_with_prime_flags(max_value: int) -> pd.DataFrame:
    """
    List 1..max_value with a primality flag for each number.

    Parameters
    ----------
    max_value : int
        Largest number listed (inclusive).

    Returns
    -------
    pd.DataFrame
        Columns: number, is_prime. Empty when max_value < 1.
    """
    flags = prime_flags_upto(max_value)
    return pd.DataFrame({
        'number': np.arange(1, len(flags), dtype=np.int64),
        'is_prime': flags[1:]
    })


def factorization_table(values) -> pd.DataFrame:
    """
    Factorize each value and tabulate the result.

    Columns: n, factors (space separated), omega, big_omega, is_prime,
    product_ok (product of factors equals n).
    """
    rows = []
    for n in values:
        n = int(n)
        factors = [int(f) for f in prime_factorization(n)]
        rows.append({
            'n': n,
            'factors': ' '.join(str(f) for f in factors),
            'omega': omega(n),
            'big_omega': big_omega(n),
            'is_prime': is_prime(n),
            'product_ok': n < 2 or math.prod(factors) == n
        })
    return pd.DataFrame(rows)


def run_prime_report(config: Dict[str, Any], output_dir: Path,
                     verbose: bool = True) -> Dict[str, Any]:
    """
    Run the full prime report.

    Parameters
    ----------
    config : dict
        Validated configuration (see config.load_config).
    output_dir : Path
        Directory for output files.
    verbose : bool
        Print progress.

    Returns
    -------
    dict
        summary: DataFrame with columns metric, value.
        primes, is_prime, counts: sieve output, its flags over 0..limit
        and the pi table.
        first_primes, gaps, histogram: the gap survey inputs and results.
    """
    limit = config['limit']
    n_primes = config['n_primes']

    if verbose:
        print(f"Running prime report with limit={limit:,}, n_primes={n_primes:,}")

    primes = sieve_of_eratosthenes(limit)
    is_prime_mask = np.zeros(limit + 1, dtype=bool)
    is_prime_mask[primes] = True
    counts = prime_counting(limit)

    if verbose:
        print(f"  Sieve: {len(primes):,} primes <= {limit:,}")

    first = first_n_primes(n_primes)
    gaps = prime_gaps(first)
    histogram = gap_histogram(gaps)
    stats = gap_summary(gaps)
    constellations = constellation_counts(gaps)

    if verbose:
        print(f"  Gaps: {len(gaps):,} gaps among the first {n_primes:,} primes")
        print("  Factorizing samples...")

    rng = np.random.default_rng(config['seed'])
    random_values = rng.integers(2, U32_MAX, size=config['sample_size'],
                                 endpoint=True, dtype=np.int64)
    df_factors = factorization_table(
        list(config['factor_samples']) + [int(v) for v in random_values]
    )

    df_primes = pd.DataFrame({'prime': primes.astype(np.int64)})
    df_counts = pd.DataFrame({
        'x': np.arange(limit + 1, dtype=np.int64),
        'pi': counts.astype(np.int64)
    })
    df_gaps = pd.DataFrame({
        'p': first[:-1].astype(np.int64),
        'next_p': first[1:].astype(np.int64),
        'gap': gaps.astype(np.int64)
    })
    df_hist = pd.DataFrame({
        'gap': list(histogram.keys()),
        'count': list(histogram.values())
    })

    rows = [
        {'metric': 'limit', 'value': limit},
        {'metric': 'primes_upto_limit', 'value': len(primes)},
        {'metric': 'pi_limit', 'value': int(counts[-1])},
        {'metric': 'n_primes', 'value': len(first)},
        {'metric': 'largest_of_first_n', 'value': int(first[-1]) if len(first) else np.nan},
        {'metric': 'gap_mean', 'value': stats['mean']},
        {'metric': 'gap_median', 'value': stats['median']},
        {'metric': 'gap_max', 'value': stats['max']},
        {'metric': 'gap_std', 'value': stats['std']},
    ]
    for name, count in constellations.items():
        rows.append({'metric': f'{name}_gaps', 'value': count})
    rows.append({'metric': 'factorizations', 'value': len(df_factors)})
    rows.append({'metric': 'factorizations_ok',
                 'value': int(df_factors['product_ok'].sum())})

    df_summary = pd.DataFrame(rows)

    # Save results
    output_dir.mkdir(parents=True, exist_ok=True)
    df_primes.to_csv(output_dir / 'primes.csv', index=False)
    df_counts.to_csv(output_dir / 'prime_counting.csv', index=False)
    df_gaps.to_csv(output_dir / 'gaps.csv', index=False)
    df_hist.to_csv(output_dir / 'gap_histogram.csv', index=False)
    df_factors.to_csv(output_dir / 'factorizations.csv', index=False)
    df_summary.to_csv(output_dir / 'summary.csv', index=False)

    if verbose:
        print(f"  Results saved to {output_dir}")

    return {
        'summary': df_summary,
        'primes': primes,
        'is_prime': is_prime_mask,
        'counts': counts,
        'first_primes': first,
        'gaps': gaps,
        'histogram': histogram
    }
