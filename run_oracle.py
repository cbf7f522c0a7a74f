#!/usr/bin/env python3
"""
Command-line front end for the prime oracle.

Usage:
    python run_oracle.py is-prime 97
    python run_oracle.py primes-up-to 100
    python run_oracle.py primes-up-to 10000 --count
    python run_oracle.py next-prime 1000
    python run_oracle.py --config config/custom.yaml primes-up-to 100
"""

import argparse
import sys

from prime_oracle.config import load_config
from prime_oracle.errors import PrimeOracleError
from prime_oracle.next_prime import get_next_prime
from prime_oracle.primality import is_prime
from prime_oracle.primes import find_primes_up_to


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Answer questions about primes')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (default: config/default.yaml)')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('is-prime', help='Test a single integer')
    p.add_argument('n', type=int)

    p = sub.add_parser('primes-up-to', help='List all primes <= LIMIT')
    p.add_argument('limit', type=int)
    p.add_argument('--count', action='store_true',
                   help='Print only how many primes there are')

    p = sub.add_parser('next-prime', help='Smallest prime greater than N')
    p.add_argument('n', type=int)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == 'is-prime':
            verdict = 'is prime' if is_prime(args.n) else 'is not prime'
            print(f"{args.n} {verdict}")

        elif args.command == 'primes-up-to':
            config = load_config(args.config)
            primes = find_primes_up_to(args.limit, max_limit=config['max_sieve_limit'])
            if args.count:
                print(len(primes))
            else:
                print(' '.join(str(p) for p in primes))

        elif args.command == 'next-prime':
            print(get_next_prime(args.n))

    except PrimeOracleError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
