"""
Prime number kernel.

Exact, synchronous routines for primes and derived sequences on the
unsigned 32-bit range.
"""

from .primes import sieve_of_eratosthenes, first_n_primes
from .gaps import prime_gaps
from .primality import is_prime
from .factorization import prime_factorization
from .counting import prime_counting
from .runtime import init

__all__ = [
    'sieve_of_eratosthenes',
    'first_n_primes',
    'prime_gaps',
    'is_prime',
    'prime_factorization',
    'prime_counting',
    'init',
]

__version__ = '0.1.0'
