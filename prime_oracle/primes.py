"""
Prime generation utilities.

Responsibility: prime enumeration only. No primality test of single values.
"""

import operator
from math import isqrt
from typing import Optional

import numpy as np

from .bounds import DEFAULT_MAX_SIEVE_LIMIT, sieve_nbytes
from .errors import SieveLimitError


def _check_limit(N: int, max_limit: Optional[int] = None):
    """Refuse limits whose marker array would exceed max_limit."""
    N = operator.index(N)
    if max_limit is None:
        max_limit = DEFAULT_MAX_SIEVE_LIMIT
    if N > max_limit:
        raise SieveLimitError(N, max_limit)
    return N, max_limit


def prime_flags_upto(N: int, max_limit: Optional[int] = None) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive). Negative bounds give an empty array.
    max_limit : int, optional
        Largest N allowed. Defaults to DEFAULT_MAX_SIEVE_LIMIT.

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.

    Raises
    ------
    SieveLimitError
        If N exceeds max_limit or the array cannot be allocated.
    """
    N, max_limit = _check_limit(N, max_limit)
    if N < 0:
        return np.zeros(0, dtype=bool)

    try:
        flags = np.ones(N + 1, dtype=bool)
    except MemoryError:
        raise SieveLimitError(
            N, max_limit, reason=f"could not allocate {sieve_nbytes(N):,} bytes"
        ) from None

    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int, max_limit: Optional[int] = None) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).
    max_limit : int, optional
        Largest N allowed. Defaults to DEFAULT_MAX_SIEVE_LIMIT.

    Returns
    -------
    np.ndarray
        Ascending int64 array of primes.
    """
    if operator.index(N) < 2:
        return np.zeros(0, dtype=np.int64)
    flags = prime_flags_upto(N, max_limit)
    return np.flatnonzero(flags).astype(np.int64)


def find_primes_up_to(limit: int, max_limit: Optional[int] = None) -> list:
    """
    Return every prime p with 2 <= p <= limit, ascending.

    A limit below 2 gives an empty list. Limits above max_limit raise
    SieveLimitError instead of returning a truncated result.
    """
    return primes_upto(limit, max_limit).tolist()
