"""
Exceptions raised by the quadratic-residue PRNG.

Construction failures subclass ValidationError (itself a ValueError).
IndexOutOfRange is advisory: it is only raised by direct index access, and
callers may reduce the index modulo the prime and retry instead.
"""


class ValidationError(ValueError):
    """Generator parameters failed validation."""


class InvalidPrimeForm(ValidationError):
    """Prime is not 3 mod 4 (or does not fit in 64 bits)."""

    def __init__(self, prime: int):
        super().__init__(f"invalid prime {prime}: must be 3 mod 4 and less than 2^64")
        self.prime = prime


class OffsetOutOfRange(ValidationError):
    """Intermediate offset is not in [0, prime)."""

    def __init__(self, intermediate_offset: int, prime: int):
        super().__init__(
            f"invalid intermediate offset {intermediate_offset}: "
            f"must be less than chosen prime {prime}"
        )
        self.intermediate_offset = intermediate_offset
        self.prime = prime


class NotPrime(ValidationError):
    """Prime failed the probabilistic primality test."""

    def __init__(self, prime: int):
        super().__init__(f"invalid prime {prime}: number is not prime")
        self.prime = prime


class IndexOutOfRange(ValueError):
    """Index is outside [0, prime); the permutation would cycle."""

    def __init__(self, index: int, prime: int):
        super().__init__(f"invalid index {index}: must be less than chosen prime {prime}")
        self.index = index
        self.prime = prime
