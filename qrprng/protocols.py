"""
Random source protocol.

The capability triple a host random framework needs from a bit generator:
- uint64: Next 64-bit unsigned value
- int63: Next non-negative 63-bit value
- seed: Reset the sequence from an int64 seed

QuadraticResiduePRNG satisfies this structurally.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniformly distributed 64-bit values."""

    def uint64(self) -> int:
        """
        Next value.

        Returns:
            Integer in [0, 2^64)
        """
        ...

    def int63(self) -> int:
        """
        Next value with the sign bit cleared.

        Returns:
            Integer in [0, 2^63)
        """
        ...

    def seed(self, seed: int) -> None:
        """
        Reset the sequence.

        Args:
            seed: Signed 64-bit seed
        """
        ...
