"""
Primality test.

Responsibility: deciding whether a single integer is prime. No sieve logic.
"""

import operator
from math import isqrt


def is_prime(n: int) -> bool:
    """
    Return True iff n is prime, by trial division.

    Defined for every integer: anything below 2 (zero, one, negatives)
    is simply not prime. Only odd divisors up to isqrt(n) are tried once
    the even case is settled.

    Parameters
    ----------
    n : int
        Candidate. numpy integer scalars are accepted.

    Returns
    -------
    bool
        Whether n is prime.
    """
    n = operator.index(n)
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    for d in range(3, isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True
