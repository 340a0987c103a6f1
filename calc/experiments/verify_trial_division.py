#!/usr/bin/env python3
"""
Verify trial division against the reference sieve.

Compares:
1. is_prime(n) for every 0 <= n <= N (and a few negatives)
2. primes_up_to(N) ordering, duplicates, and contents
3. Neighbourhoods of perfect squares p^2, where a short sqrt bound would bite
4. pi(x) at configured checkpoints

Run at small N first; trial division is O(N sqrt N) overall.
"""

import sys
import time
import numpy as np
import pandas as pd
from pathlib import Path
from typing import List

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from calc.primes import is_prime, primes_up_to, prime_flags_upto
from calc.reference import sieve_flags, sieve_primes, sieve_prime_counts


NEGATIVE_SAMPLES = [-1, -2, -3, -7, -17, -100]

MAX_REPORTED = 10


def verify_is_prime(N: int, verbose: bool = True) -> bool:
    """Verify is_prime agrees with the sieve on [0, N]."""
    if verbose:
        print(f"\n=== Verifying is_prime for N={N:,} ===")

    t0 = time.time()
    flags_trial = prime_flags_upto(N)
    t_trial = time.time() - t0

    t0 = time.time()
    flags_sieve = sieve_flags(N)
    t_sieve = time.time() - t0

    if verbose:
        print(f"  Trial division: {t_trial:.1f}s")
        print(f"  Reference sieve: {t_sieve:.1f}s")

    mismatches = np.nonzero(flags_trial != flags_sieve)[0]
    if verbose:
        for n in mismatches[:MAX_REPORTED]:
            print(f"  MISMATCH at n={n}: trial={flags_trial[n]}, sieve={flags_sieve[n]}")

    errors = len(mismatches)
    for n in NEGATIVE_SAMPLES:
        if is_prime(n):
            errors += 1
            if verbose:
                print(f"  MISMATCH at n={n}: negative input reported prime")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {N + 1 + len(NEGATIVE_SAMPLES):,} values match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def verify_primes_up_to(N: int, verbose: bool = True) -> bool:
    """Verify primes_up_to(N) is ascending, duplicate-free, and complete."""
    if verbose:
        print(f"\n=== Verifying primes_up_to for N={N:,} ===")

    primes = primes_up_to(N)
    expected = sieve_primes(N)

    ascending = all(a < b for a, b in zip(primes, primes[1:]))
    unique = len(set(primes)) == len(primes)
    complete = np.array_equal(np.asarray(primes, dtype=np.int64), expected)

    if verbose:
        print(f"  Found {len(primes):,} primes (sieve: {len(expected):,})")
        print(f"  Strictly ascending: {ascending}")
        print(f"  No duplicates: {unique}")
        print(f"  Matches sieve: {complete}")

    if verbose and not complete:
        missing = sorted(set(expected.tolist()) - set(primes))
        extra = sorted(set(primes) - set(expected.tolist()))
        for n in missing[:MAX_REPORTED]:
            print(f"  MISSING {n}")
        for n in extra[:MAX_REPORTED]:
            print(f"  EXTRA {n}")

    ok = ascending and unique and complete
    if verbose:
        print(f"  {'✓' if ok else '✗'} primes_up_to({N:,})")

    return ok


def verify_perfect_squares(N: int, verbose: bool = True) -> bool:
    """
    Check p^2 and p^2 +/- 2 for every prime p with p^2 + 2 <= N.

    p^2 is composite but has no divisor below p, so a square-root bound
    that lands one short of p would report it prime.
    """
    if verbose:
        print(f"\n=== Verifying perfect squares up to N={N:,} ===")

    flags = sieve_flags(N)
    errors = 0
    checked = 0
    for p in sieve_primes(N):
        sq = int(p) * int(p)
        if sq + 2 > N:
            break
        for n in (sq - 2, sq, sq + 2):
            checked += 1
            trial = is_prime(n)
            if trial != bool(flags[n]):
                errors += 1
                if verbose and errors <= MAX_REPORTED:
                    print(f"  MISMATCH at n={n} (p={p}): trial={trial}, sieve={flags[n]}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {checked:,} square neighbourhoods match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def prime_count_table(N: int, checkpoints: List[int]) -> pd.DataFrame:
    """
    Tabulate pi(x) from trial division and from the sieve.

    Parameters
    ----------
    N : int
        Upper bound; every checkpoint must be <= N.
    checkpoints : list of int
        x values to report.

    Returns
    -------
    pd.DataFrame
        Columns: x, pi_trial, pi_sieve, match.
    """
    for x in checkpoints:
        if not 0 <= x <= N:
            raise ValueError(f"Checkpoint {x} is outside [0, {N}]")

    primes = np.asarray(primes_up_to(N), dtype=np.int64)
    counts = sieve_prime_counts(N)

    rows = []
    for x in checkpoints:
        pi_trial = int(np.searchsorted(primes, x, side='right'))
        pi_sieve = int(counts[x])
        rows.append({
            'x': x,
            'pi_trial': pi_trial,
            'pi_sieve': pi_sieve,
            'match': pi_trial == pi_sieve,
        })
    return pd.DataFrame(rows, columns=['x', 'pi_trial', 'pi_sieve', 'match'])


def run_verification(N: int, checkpoints: List[int], output_dir: Path,
                     verbose: bool = True) -> bool:
    """
    Run every check and write prime_counts.csv to output_dir.

    Returns
    -------
    bool
        True if every check passed.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    is_prime_ok = verify_is_prime(N, verbose)
    primes_ok = verify_primes_up_to(N, verbose)
    squares_ok = verify_perfect_squares(N, verbose)

    df = prime_count_table(N, checkpoints)
    df.to_csv(output_dir / 'prime_counts.csv', index=False)
    counts_ok = bool(df['match'].all())

    if verbose:
        print(f"\n=== pi(x) checkpoints ===")
        print(df.to_string(index=False))
        print(f"\n  Saved: {output_dir / 'prime_counts.csv'}")

    return is_prime_ok and primes_ok and squares_ok and counts_ok


if __name__ == '__main__':
    import argparse
    import math

    parser = argparse.ArgumentParser(description='Verify trial division against a sieve')
    parser.add_argument('--N', type=float, default=1e5, help='Upper bound (default: 1e5)')
    parser.add_argument('--output', type=str, default='data/results', help='Output directory')
    args = parser.parse_args()
    if not math.isfinite(args.N):
        parser.error(f"--N must be finite, got {args.N}")

    N = int(args.N)
    checkpoints = [x for x in (10, 100, 1000, 10000, 100000) if x <= N]

    print(f"Trial Division Verification")
    print(f"N = {N:,}")
    print("=" * 50)

    ok = run_verification(N, checkpoints, Path(args.output))

    print("\n" + "=" * 50)
    if ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)
