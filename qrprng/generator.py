"""
Stateful quadratic-residue PRNG.

Wraps the permutation in a counter: each call to next64() evaluates the
permutation at the current index and advances it. With offset 0 the output
cycles through every number below the prime without repeats, then restarts.

Not thread-safe: the counter is mutated on every call. Use one generator per
thread, or guard it with a lock. Params are immutable and can be shared.
"""

from collections.abc import Iterator

from .errors import IndexOutOfRange, ValidationError
from .params import INT63_MASK, UINT64_MASK, Params, check_int
from .permutation import permute

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class QuadraticResiduePRNG:
    """
    Permutation-based PRNG over [0, prime).

    Provides the {uint64, int63, seed} triple expected by generic random
    sources (see qrprng.protocols.RandomSource), plus direct index access.
    """

    def __init__(self, prime: int, intermediate_offset: int, offset: int = 0):
        """
        Initialize PRNG.

        Args:
            prime: Prime, 3 mod 4, below 2^64
            intermediate_offset: Seed in [0, prime)
            offset: Added to every output

        Raises:
            ValidationError: If the parameters are invalid
        """
        self._init_from(Params(prime, intermediate_offset, offset))

    @classmethod
    def from_params(cls, params: Params) -> "QuadraticResiduePRNG":
        """Create a generator from already validated parameters."""
        prng = cls.__new__(cls)
        prng._init_from(params)
        return prng

    @classmethod
    def default(cls) -> "QuadraticResiduePRNG":
        """
        Generator suitable for general-purpose use.

        Uses the largest prime (3 mod 4) below 2^64, so it permutes all but
        189 of the uint64 values.
        """
        try:
            params = Params.default()
        except ValidationError as e:
            raise RuntimeError(f"default parameters rejected: {e}") from e
        return cls.from_params(params)

    def _init_from(self, params: Params) -> None:
        self._params = params
        self._intermediate_offset = params.intermediate_offset
        self._idx = 0

    @property
    def params(self) -> Params:
        """Parameters fixed at construction."""
        return self._params

    @property
    def prime(self) -> int:
        return self._params.prime

    @property
    def offset(self) -> int:
        return self._params.offset

    @property
    def intermediate_offset(self) -> int:
        """Current seed. Differs from params.intermediate_offset after reseed()."""
        return self._intermediate_offset

    @property
    def idx(self) -> int:
        """Index of the next output."""
        return self._idx

    def index(self, i: int) -> int:
        """
        Return the ith element of the permutation, ignoring the counter.

        Raises:
            IndexOutOfRange: If i is not in [0, prime)
        """
        check_int("i", i)
        if not self._params.contains(i):
            raise IndexOutOfRange(i, self._params.prime)
        return permute(self._params, i, self._intermediate_offset)

    def next64(self) -> int:
        """Next 64-bit unsigned output. Wraps around after prime outputs."""
        n = permute(self._params, self._idx % self._params.prime, self._intermediate_offset)
        self._idx += 1
        return n

    def next63(self) -> int:
        """Next output with the sign bit cleared (non-negative int64)."""
        return self.next64() & INT63_MASK

    def reseed(self, seed: int) -> None:
        """
        Change the seed and reset the counter.

        Non-negative seeds are used directly as the intermediate offset;
        negative seeds map to 2^64 - 1 - |seed|. The mask derived at
        construction is kept, and the new offset is not checked against prime.
        """
        check_int("seed", seed)
        if not INT64_MIN <= seed <= INT64_MAX:
            raise ValueError(f"seed {seed} out of int64 range")

        if seed >= 0:
            self._intermediate_offset = seed
        else:
            self._intermediate_offset = UINT64_MASK - (-seed)
        self._idx = 0

    def seek(self, idx: int) -> None:
        """Move the counter so the next output is element idx (mod prime)."""
        check_int("idx", idx)
        if idx < 0:
            raise ValueError(f"invalid index {idx}: must be non-negative")
        self._idx = idx

    def getstate(self) -> tuple[int, int, int, int, int]:
        """Return (prime, params intermediate_offset, offset, intermediate_offset, idx)."""
        params = self._params
        return (
            params.prime,
            params.intermediate_offset,
            params.offset,
            self._intermediate_offset,
            self._idx,
        )

    def setstate(self, state: tuple[int, int, int, int, int]) -> None:
        """
        Restore a state returned by getstate().

        Raises:
            ValueError: If the state was taken from a generator with different params
        """
        prime, params_offset, offset, intermediate_offset, idx = state
        params = self._params
        if (prime, params_offset, offset) != (params.prime, params.intermediate_offset, params.offset):
            raise ValueError(
                f"state for params (prime={prime}, intermediate_offset={params_offset}, "
                f"offset={offset}) does not match {params!r}"
            )
        check_int("intermediate_offset", intermediate_offset)
        if not 0 <= intermediate_offset <= UINT64_MASK:
            raise ValueError(f"invalid intermediate offset {intermediate_offset}")
        self.seek(idx)
        self._intermediate_offset = intermediate_offset

    # RandomSource spelling
    uint64 = next64
    int63 = next63
    seed = reseed

    def take(self, n: int) -> list[int]:
        """Return the next n outputs."""
        if n < 0:
            raise ValueError("n must be non-negative")
        return [self.next64() for _ in range(n)]

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next64()

    def __repr__(self) -> str:
        return (
            f"QuadraticResiduePRNG(prime={self.prime}, "
            f"intermediate_offset={self._intermediate_offset}, "
            f"offset={self.offset}, idx={self._idx})"
        )


def default() -> QuadraticResiduePRNG:
    """Return a new generator with the default parameters."""
    return QuadraticResiduePRNG.default()
