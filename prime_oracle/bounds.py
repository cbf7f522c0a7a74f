"""
Integer range and sieve sizing.

Responsibility: the numeric limits every operation is checked against.
The machine integer is the signed 64-bit integer used by numpy.
"""

import numpy as np

INT_MIN = int(np.iinfo(np.int64).min)
INT_MAX = int(np.iinfo(np.int64).max)

# 2**63 - 25; no prime lies in (LARGEST_PRIME, INT_MAX]
LARGEST_PRIME = 9223372036854775783

# One byte per marker, so this caps a single sieve at ~1 GB
DEFAULT_MAX_SIEVE_LIMIT = 10**9


def sieve_nbytes(limit: int) -> int:
    """Bytes needed for a boolean marker array indexed 0..limit."""
    if limit < 0:
        return 0
    return (limit + 1) * np.dtype(bool).itemsize
