"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Dict, Optional


def plot_prime_gaps(primes: np.ndarray, gaps: np.ndarray,
                    histogram: Dict[int, int],
                    output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot gap size against prime index, with the gap histogram alongside.

    Parameters
    ----------
    primes : np.ndarray
        Ascending primes the gaps were taken from.
    gaps : np.ndarray
        Output of prime_gaps(primes).
    histogram : dict
        Output of gap_histogram(gaps).
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    ax = axes[0]
    if len(gaps) > 0:
        ax.scatter(primes[:-1], gaps, c=gaps, cmap='plasma', s=6)
    ax.set_xlabel('p')
    ax.set_ylabel('Gap to next prime')
    ax.set_title(f'Prime Gaps (first {len(primes):,} primes)')
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.bar(list(histogram.keys()), list(histogram.values()), width=1.6,
           alpha=0.8, edgecolor='black')
    for gap, label in [(2, 'twin'), (4, 'cousin'), (6, 'sexy')]:
        if gap in histogram:
            ax.annotate(label, (gap, histogram[gap]), ha='center',
                        textcoords='offset points', xytext=(0, 4))
    ax.set_xlabel('Gap')
    ax.set_ylabel('Count')
    ax.set_title('Gap Distribution')
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_prime_counting(counts: np.ndarray,
                        output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot pi(x) as a step function against the x/ln(x) approximation.

    Parameters
    ----------
    counts : np.ndarray
        Output of prime_counting(limit).
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    x = np.arange(len(counts))
    ax.step(x, counts, where='post', label='pi(x)')

    if len(counts) > 2:
        xs = x[2:].astype(float)
        ax.plot(xs, xs / np.log(xs), '--', label='x / ln x')

    ax.set_xlabel('x')
    ax.set_ylabel('Primes <= x')
    ax.set_title('Prime Counting Function')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_ulam_spiral(x: np.ndarray, y: np.ndarray, is_prime: np.ndarray,
                     output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot the Ulam spiral with primes highlighted.

    Parameters
    ----------
    x, y : np.ndarray
        Output of ulam_coordinates(max_value).
    is_prime : np.ndarray
        Boolean mask aligned with x and y.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    ax.scatter(x[~is_prime], y[~is_prime], s=1, color='lightgray')
    ax.scatter(x[is_prime], y[is_prime], s=2, color='black', label='prime')

    ax.set_aspect('equal')
    ax.set_title(f'Ulam Spiral (1..{len(x):,})')
    ax.set_xticks([])
    ax.set_yticks([])

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_sacks_spiral(x: np.ndarray, y: np.ndarray,
                      output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot primes on the Sacks spiral.

    Parameters
    ----------
    x, y : np.ndarray
        Output of sacks_coordinates(primes).
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    ax.scatter(x, y, s=2, c=np.arange(len(x)), cmap='viridis')

    ax.set_aspect('equal')
    ax.set_title(f'Sacks Spiral ({len(x):,} primes)')
    ax.set_xticks([])
    ax.set_yticks([])

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
