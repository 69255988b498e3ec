"""
qrprng: Permutation-based pseudorandom number generation

A seedable PRNG built on Preshing's quadratic-residue permutation. For a
prime p = 3 mod 4 the generator visits every value in [0, p) exactly once
before repeating, which an ordinary PRNG does not guarantee.

Not cryptographically secure, not thread-safe.

Modules:
- params: Parameter validation and mask derivation
- permutation: Pure permutation functions
- generator: Stateful counter-based generator
- source: random.Random adapter
- protocols: RandomSource interface
"""

from .errors import (
    IndexOutOfRange,
    InvalidPrimeForm,
    NotPrime,
    OffsetOutOfRange,
    ValidationError,
)
from .params import (
    DEFAULT_INTERMEDIATE_OFFSET,
    DEFAULT_PRIME,
    INT63_MASK,
    UINT64_MASK,
    Params,
    is_probable_prime,
)
from .permutation import apply_mask, evaluate_index, permute, quadratic_residue
from .generator import QuadraticResiduePRNG, default
from .source import QuadraticResidueRandom
from .protocols import RandomSource

__version__ = "0.1.0"
__all__ = [
    "Params",
    "QuadraticResiduePRNG",
    "QuadraticResidueRandom",
    "RandomSource",
    "default",
    "evaluate_index",
    "permute",
    "quadratic_residue",
    "apply_mask",
    "is_probable_prime",
    "ValidationError",
    "InvalidPrimeForm",
    "OffsetOutOfRange",
    "NotPrime",
    "IndexOutOfRange",
    "DEFAULT_PRIME",
    "DEFAULT_INTERMEDIATE_OFFSET",
    "UINT64_MASK",
    "INT63_MASK",
]
