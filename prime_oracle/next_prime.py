"""
Next-prime search.

Responsibility: stepping from an integer to its prime successor.
"""

import operator

from .bounds import INT_MAX, LARGEST_PRIME
from .errors import PrimeOverflowError
from .primality import is_prime


def get_next_prime(n: int) -> int:
    """
    Return the smallest prime strictly greater than n.

    Parameters
    ----------
    n : int
        Starting point. Any integer below 2 yields 2.

    Returns
    -------
    int
        The immediate prime successor of n.

    Raises
    ------
    PrimeOverflowError
        If n >= LARGEST_PRIME, where the successor does not fit in 64 bits.
    """
    n = operator.index(n)
    if n < 2:
        return 2
    if n >= LARGEST_PRIME:
        raise PrimeOverflowError(n)

    candidate = n + 1
    if candidate % 2 == 0:
        candidate += 1

    # Only odd candidates from here on
    while not is_prime(candidate):
        candidate += 2
        if candidate > INT_MAX:
            raise PrimeOverflowError(n)
    return candidate
