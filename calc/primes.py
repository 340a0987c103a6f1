"""
Primality utilities.

Responsibility: trial-division primality and enumeration.
No sieve logic here; see reference.py for the independent check.
"""

from math import isqrt
from typing import List

import numpy as np


def is_prime(n: int) -> bool:
    """
    Return True iff n is prime.

    Trial division by odd d in [3, isqrt(n)]. Total over all integers:
    anything below 2 is not prime.

    Parameters
    ----------
    n : int
        Integer to test.

    Returns
    -------
    bool
        True if n is prime.
    """
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    # isqrt is exact, so perfect squares like 25 still test d = 5
    for d in range(3, isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


def primes_up_to(n: int) -> List[int]:
    """
    Return all primes p with 2 <= p <= n, ascending.

    Parameters
    ----------
    n : int
        Upper bound (inclusive).

    Returns
    -------
    list of int
        Fresh list of primes. Empty if n < 2.
    """
    return [i for i in range(2, n + 1) if is_prime(i)]


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff is_prime(i).

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (length 0 if N < 0).
    """
    flags = np.zeros(max(N + 1, 0), dtype=bool)
    flags[primes_up_to(N)] = True
    return flags


def prime_count_upto(N: int) -> int:
    """Prime-counting function pi(N) via trial division."""
    return len(primes_up_to(N))
