#!/usr/bin/env python3
"""
Benchmark and verify the prime oracle.

Times:
1. find_primes_up_to for each configured limit
2. get_next_prime for each configured input

Sieve counts at powers of ten are checked against pi(10^k), and the next
prime is checked by testing every integer in between.

Usage:
    python benchmark_sieve.py
    python benchmark_sieve.py --config config/custom.yaml --output data/results
"""

import argparse
import time
from pathlib import Path

import pandas as pd

from prime_oracle.config import load_config
from prime_oracle.next_prime import get_next_prime
from prime_oracle.primality import is_prime
from prime_oracle.primes import find_primes_up_to

# pi(10^k): number of primes <= 10^k
PRIME_COUNTS = {
    10: 4,
    100: 25,
    1000: 168,
    10000: 1229,
    100000: 9592,
    1000000: 78498,
    10000000: 664579,
    100000000: 5761455,
    1000000000: 50847534,
}


def _verify_next_prime(n: int, p: int) -> bool:
    if p <= n or not is_prime(p):
        return False
    return not any(is_prime(q) for q in range(n + 1, p))


def run_benchmark(config: dict, output_dir: Path = None, verbose: bool = True) -> pd.DataFrame:
    """
    Time and verify every configured case.

    Parameters
    ----------
    config : dict
        Loaded configuration (see prime_oracle.config.load_config).
    output_dir : Path, optional
        If given, benchmark.csv is written there.
    verbose : bool
        Print progress and summary.

    Returns
    -------
    pd.DataFrame
        One row per case: operation, argument, result, seconds,
        within_budget, verified. verified is None when no reference exists.
    """
    bench = config['benchmark']
    budget = bench['time_budget_seconds']
    max_limit = config['max_sieve_limit']

    if verbose:
        print("=" * 60)
        print("Prime Oracle Benchmark")
        print("=" * 60)
        print(f"  time budget = {budget}s per call")
        print(f"  max_sieve_limit = {max_limit:,}")
        print()

    rows = []

    if verbose:
        print("-" * 60)
        print("find_primes_up_to")
        print("-" * 60)
    for limit in bench['limits']:
        t0 = time.perf_counter()
        primes = find_primes_up_to(limit, max_limit=max_limit)
        elapsed = time.perf_counter() - t0

        expected = PRIME_COUNTS.get(limit)
        verified = None if expected is None else len(primes) == expected
        rows.append({
            'operation': 'find_primes_up_to',
            'argument': limit,
            'result': len(primes),
            'seconds': elapsed,
            'within_budget': elapsed < budget,
            'verified': verified,
        })
        if verbose:
            if verified is None:
                status = "-"
            elif verified:
                status = "OK"
            else:
                status = f"MISMATCH (expected {expected:,})"
            print(f"  limit={limit:,}: {len(primes):,} primes in {elapsed:.4f}s  {status}")
    if verbose:
        print()

    if verbose:
        print("-" * 60)
        print("get_next_prime")
        print("-" * 60)
    for n in bench['next_prime_inputs']:
        t0 = time.perf_counter()
        p = get_next_prime(n)
        elapsed = time.perf_counter() - t0

        verified = _verify_next_prime(n, p)
        rows.append({
            'operation': 'get_next_prime',
            'argument': n,
            'result': p,
            'seconds': elapsed,
            'within_budget': elapsed < budget,
            'verified': verified,
        })
        if verbose:
            status = "OK" if verified else "MISMATCH"
            print(f"  n={n:,}: {p:,} in {elapsed:.4f}s  {status}")
    if verbose:
        print()

    df = pd.DataFrame(rows)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_dir / 'benchmark.csv', index=False)

    if verbose:
        print("=" * 60)
        print("SUMMARY")
        print("=" * 60)
        slow = df[~df['within_budget']]
        failed = df[df['verified'] == False]  # noqa: E712
        print(f"Cases: {len(df)}, over budget: {len(slow)}, failed: {len(failed)}")
        if output_dir is not None:
            print(f"Results saved to {output_dir / 'benchmark.csv'}")

    return df


def main():
    parser = argparse.ArgumentParser(description='Benchmark the prime oracle')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--output', type=str, default='data/results',
                        help='Directory for benchmark.csv')
    args = parser.parse_args()

    config = load_config(args.config)
    run_benchmark(config, Path(args.output))


if __name__ == '__main__':
    main()
