"""
Parameters for the quadratic-residue permutation.

Key parameters:
- prime: Size of the permuted domain [0, prime). Must be prime and 3 mod 4
- intermediate_offset: Secondary seed in [0, prime), shifts the permutation phase
- offset: Added to every output (mod 2^64), placing a floor on output values

Derived once from the above:
- max_mask: Upper end of the masked low band, 2^(bits(prime - 1) - 1) - 1
- mask: XOR mask applied to the low band to remove the fixed points near zero

The prime must be 3 mod 4 so that -1 is a quadratic non-residue. Folding
i -> p - (i^2 mod p) for i > p/2 then turns squaring into a bijection.
"""

from dataclasses import dataclass, field

from Crypto.Util.number import isPrime

from .errors import InvalidPrimeForm, NotPrime, OffsetOutOfRange, ValidationError

UINT64_MASK = (1 << 64) - 1
INT63_MASK = (1 << 63) - 1

# Largest prime (3 mod 4) less than 2^64, permutes [0, 2^64 - 189)
DEFAULT_PRIME = UINT64_MASK - 188
DEFAULT_INTERMEDIATE_OFFSET = 5_577_006_791_947_779_410

# ~50 Miller-Rabin rounds
PRIMALITY_FALSE_POSITIVE_PROB = 1e-30


def is_probable_prime(n: int) -> bool:
    """Return True if n passes a Miller-Rabin test with negligible error."""
    if n < 2:
        return False
    return bool(isPrime(n, false_positive_prob=PRIMALITY_FALSE_POSITIVE_PROB))


def calculate_max_mask(prime: int) -> int:
    """Largest value with one fewer bit than prime - 1."""
    prime_bits = (prime - 1).bit_length()
    return (1 << (prime_bits - 1)) - 1


def calculate_mask(prime: int, intermediate_offset: int, max_mask: int) -> int:
    """
    Derive the fixed-point-removing mask.

    Returns a value in [lo, max_mask) where lo = 2^(bits(max_mask) - 1),
    so the mask always has the top bit of the masked band set and never
    maps a value onto itself. For prime 3 the range is empty and lo is used.
    """
    lo = 1 << (max_mask.bit_length() - 1)
    span = max_mask - lo
    if span == 0:
        return lo
    return lo + ((prime + intermediate_offset) % span)


def check_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True)
class Params:
    """Validated parameters for a quadratic-residue permutation."""

    prime: int                    # Domain size, prime and 3 mod 4
    intermediate_offset: int      # Secondary seed in [0, prime)
    offset: int = 0               # Added to every output
    max_mask: int = field(init=False, repr=False)
    mask: int = field(init=False, repr=False)

    def __post_init__(self):
        check_int("prime", self.prime)
        check_int("intermediate_offset", self.intermediate_offset)
        check_int("offset", self.offset)

        # Checked in order; the first failure wins
        if self.prime % 4 != 3 or not 0 < self.prime <= UINT64_MASK:
            raise InvalidPrimeForm(self.prime)
        if not 0 <= self.intermediate_offset < self.prime:
            raise OffsetOutOfRange(self.intermediate_offset, self.prime)
        if not 0 <= self.offset <= UINT64_MASK:
            raise ValidationError(f"invalid offset {self.offset}: must fit in 64 bits")
        if not is_probable_prime(self.prime):
            raise NotPrime(self.prime)

        max_mask = calculate_max_mask(self.prime)
        object.__setattr__(self, "max_mask", max_mask)
        object.__setattr__(
            self, "mask", calculate_mask(self.prime, self.intermediate_offset, max_mask)
        )

    @classmethod
    def default(cls) -> "Params":
        """Largest usable prime below 2^64 with the fixed default seed."""
        return cls(DEFAULT_PRIME, DEFAULT_INTERMEDIATE_OFFSET, 0)

    @property
    def period(self) -> int:
        """Number of outputs before the sequence repeats."""
        return self.prime

    def contains(self, index: int) -> bool:
        """Return True if index lies in the single-period domain [0, prime)."""
        return 0 <= index < self.prime
