"""
Reference sieve.

Responsibility: an independent oracle for the trial-division code in
primes.py. Nothing in the core depends on this module.
"""

from math import isqrt

import numpy as np


def sieve_flags(N: int) -> np.ndarray:
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
        Boolean array of length N+1 (length 0 if N < 0).
    """
    if N < 0:
        return np.zeros(0, dtype=bool)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def sieve_primes(N: int) -> np.ndarray:
    """Return array of all primes <= N from the reference sieve."""
    return np.nonzero(sieve_flags(N))[0]


def sieve_prime_counts(N: int) -> np.ndarray:
    """
    Return pi(x) for every x in [0, N].

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Integer array where counts[x] is the number of primes <= x.
    """
    return np.cumsum(sieve_flags(N), dtype=np.int64)
