#!/usr/bin/env python3
"""
Cross-check trial division against the reference sieve.

Usage:
    python run_verify.py
    python run_verify.py --config config/custom.yaml
    python run_verify.py --N 1e6
"""

import argparse
import math
import sys
import time
import yaml
from pathlib import Path

from calc.experiments.verify_trial_division import run_verification


REQUIRED_KEYS = ('N', 'checkpoints', 'output_dir')


def load_config(path) -> dict:
    """Load and validate a verification config."""
    with open(path) as f:
        config = yaml.safe_load(f) or {}

    for key in REQUIRED_KEYS:
        if key not in config:
            raise ValueError(f"Config {path} is missing '{key}'")
    validate_config(config)
    return config


def validate_config(config: dict) -> None:
    """Raise ValueError if N or checkpoints are out of range."""
    N = config['N']
    if isinstance(N, bool) or not isinstance(N, int) or N < 0:
        raise ValueError(f"'N' must be a non-negative integer, got {N!r}")
    for x in config['checkpoints']:
        if isinstance(x, bool) or not isinstance(x, int) or not 0 <= x <= N:
            raise ValueError(f"'checkpoints' entries must be integers in [0, {N}], got {x!r}")


def main():
    parser = argparse.ArgumentParser(description='Verify trial division against a sieve')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--N', type=float, default=None,
                        help='Override the configured upper bound')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.N is not None:
        if not math.isfinite(args.N):
            parser.error(f"--N must be finite, got {args.N}")
        config['N'] = int(args.N)
        config['checkpoints'] = [x for x in config['checkpoints'] if x <= config['N']]
        validate_config(config)

    print("=" * 60)
    print("Trial Division Verification")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  N = {config['N']:,}")
    print(f"  checkpoints = {config['checkpoints']}")
    print(f"  output_dir = {config['output_dir']}")

    start = time.time()
    ok = run_verification(config['N'], config['checkpoints'], Path(config['output_dir']))

    print("\n" + "=" * 60)
    print(f"Total runtime: {time.time() - start:.1f}s")
    if ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)


if __name__ == '__main__':
    main()
