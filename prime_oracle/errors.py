"""
Error taxonomy.

Values below 2 are ordinary inputs with ordinary answers and never appear
here. Only resource exhaustion, range overflow and bad configuration are
reported, always by raising.
"""

from typing import Optional


class PrimeOracleError(Exception):
    """Base class for every condition reported by prime_oracle."""


class SieveLimitError(PrimeOracleError, MemoryError):
    """The sieve marker array for `limit` cannot be allocated."""

    def __init__(self, limit: int, max_limit: int, reason: Optional[str] = None):
        self.limit = limit
        self.max_limit = max_limit
        self.reason = reason
        if reason is None:
            reason = f"exceeds the configured maximum of {max_limit:,}"
        super().__init__(f"Cannot sieve up to {limit:,}: {reason}")

    def __reduce__(self):
        # Unpickling replays the constructor arguments, not the message
        return (type(self), (self.limit, self.max_limit, self.reason))


class PrimeOverflowError(PrimeOracleError, OverflowError):
    """The next prime after `n` is outside the 64-bit integer range."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"No representable prime greater than {n}")

    def __reduce__(self):
        return (type(self), (self.n,))


class ConfigError(PrimeOracleError, ValueError):
    """Configuration file is missing or malformed."""
