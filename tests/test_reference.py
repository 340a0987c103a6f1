"""
Tests for the reference sieve used to cross-check trial division.
"""

import numpy as np
import pytest

from calc.reference import sieve_flags, sieve_primes, sieve_prime_counts


class TestSieveFlags:
    """sieve_flags marks exactly the primes."""

    def test_primes_up_to_30(self):
        assert sieve_primes(30).tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_zero_and_one_not_prime(self):
        flags = sieve_flags(10)
        assert not flags[0]
        assert not flags[1]

    @pytest.mark.parametrize("N,length", [(-3, 0), (0, 1), (1, 2), (2, 3)])
    def test_small_bounds(self, N, length):
        flags = sieve_flags(N)
        assert flags.dtype == bool
        assert len(flags) == length

    @pytest.mark.parametrize("N", [4, 9, 25, 49, 121])
    def test_square_bound_marked_composite(self, N):
        """When N is a prime square, N itself must be crossed off."""
        assert not sieve_flags(N)[N]


class TestSievePrimeCounts:
    """sieve_prime_counts is pi(x) for every x."""

    def test_known_values(self):
        counts = sieve_prime_counts(1000)
        assert counts[1] == 0
        assert counts[2] == 1
        assert counts[10] == 4
        assert counts[100] == 25
        assert counts[1000] == 168

    def test_non_decreasing(self):
        counts = sieve_prime_counts(500)
        assert np.all(np.diff(counts) >= 0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
