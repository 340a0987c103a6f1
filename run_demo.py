#!/usr/bin/env python3
"""
Demonstration program.

Usage:
    python run_demo.py
"""

import argparse

from calc.arith import add
from calc.primes import is_prime


def main():
    parser = argparse.ArgumentParser(description='Print two fixed arithmetic examples')
    parser.parse_args()

    print(f"2 + 3 = {add(2, 3)}")
    print(f"Is 17 prime? {'yes' if is_prime(17) else 'no'}")


if __name__ == '__main__':
    main()
