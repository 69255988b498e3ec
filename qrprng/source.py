"""
random.Random adapter.

Lets a QuadraticResiduePRNG drive the standard library API (random(),
randrange(), shuffle(), choice(), ...). Only next64() and reseed() are used.
"""

import random

from .generator import QuadraticResiduePRNG

_RECIP_BPF = 1.0 / (1 << 53)


class QuadraticResidueRandom(random.Random):
    """random.Random backed by a quadratic-residue permutation."""

    def __init__(self, generator: QuadraticResiduePRNG | None = None):
        """
        Args:
            generator: Bit source. Defaults to QuadraticResiduePRNG.default()
        """
        if generator is None:
            generator = QuadraticResiduePRNG.default()
        self._generator = generator
        super().__init__()

    @property
    def generator(self) -> QuadraticResiduePRNG:
        return self._generator

    def seed(self, a=None, version=2):
        """
        Reseed the underlying generator.

        None restarts the sequence at index 0 with the current seed. Integers
        must fit in int64 and are passed to QuadraticResiduePRNG.reseed().
        """
        if a is None:
            self._generator.seek(0)
        else:
            self._generator.reseed(a)
        self.gauss_next = None

    def random(self) -> float:
        """Float in [0.0, 1.0) from the top 53 bits of one output."""
        return (self._generator.next64() >> 11) * _RECIP_BPF

    def getrandbits(self, k: int) -> int:
        """Non-negative int with k random bits, most significant output first."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0

        words = (k + 63) // 64
        value = 0
        for _ in range(words):
            value = (value << 64) | self._generator.next64()
        return value >> (words * 64 - k)

    def getstate(self):
        return self._generator.getstate(), self.gauss_next

    def setstate(self, state):
        generator_state, gauss_next = state
        self._generator.setstate(generator_state)
        self.gauss_next = gauss_next

    def __reduce__(self):
        # Rebuild on a fresh generator with the same params, not the default one
        generator = QuadraticResiduePRNG.from_params(self._generator.params)
        return self.__class__, (generator,), self.getstate()
