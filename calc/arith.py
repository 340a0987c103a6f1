"""
Integer arithmetic.

Responsibility: addition only. Knows nothing about primes.
"""


def add(a: int, b: int) -> int:
    """Return the sum a + b."""
    return a + b
