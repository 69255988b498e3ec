"""
Quadratic-residue permutation on [0, p) for a prime p = 3 mod 4.

Based on Preshing's construction:

    permute_qpr(x):
        r = x^2 mod p
        if x <= p/2: return r
        else:        return p - r

For p = 3 mod 4 the two square roots of a residue sit on opposite sides of p/2,
so the fold maps exactly one of them to r and the other to p - r, giving a
bijection. A single pass leaves visible structure (small inputs map to small
squares), so the full map is two passes with an offset and a mask between:

    intermediate = permute_qpr(i) + intermediate_offset
    masked       = apply_mask(intermediate mod p)
    output       = offset + permute_qpr(masked)

permute_qpr fixes 0 (and a few other small values). XOR-ing the low band
[0, max_mask] with a nonzero mask moves those fixed points while keeping the
band closed under the map, since max_mask + 1 is a power of 2.

All functions here are pure. Python integers are unbounded, so i * i is exact
even for i near 2^64.
"""

from .errors import IndexOutOfRange
from .params import Params, UINT64_MASK


def quadratic_residue(i: int, prime: int) -> int:
    """Fold x^2 mod p so the map is one-to-one on [0, p)."""
    residue = (i * i) % prime
    if i <= prime // 2:
        return residue
    return prime - residue


def apply_mask(i: int, max_mask: int, mask: int) -> int:
    """XOR values in the low band [0, max_mask] with mask; leave the rest."""
    if i <= max_mask:
        return i ^ mask
    return i


def permute(params: Params, i: int, intermediate_offset: int | None = None) -> int:
    """
    Evaluate the permutation at i without a bounds check.

    Args:
        params: Validated parameters
        i: Index, expected in [0, prime)
        intermediate_offset: Overrides params.intermediate_offset (used after reseed)

    Returns:
        offset + P(i), wrapped to 64 bits
    """
    if intermediate_offset is None:
        intermediate_offset = params.intermediate_offset

    intermediate = quadratic_residue(i, params.prime) + intermediate_offset
    masked = apply_mask(intermediate % params.prime, params.max_mask, params.mask)
    return (params.offset + quadratic_residue(masked, params.prime)) & UINT64_MASK


def evaluate_index(params: Params, i: int) -> int:
    """
    Generate the ith element of the permutation.

    Raises:
        IndexOutOfRange: If i is not in [0, prime). The sequence simply cycles,
            so callers may catch this and retry with i % prime.
    """
    if not params.contains(i):
        raise IndexOutOfRange(i, params.prime)
    return permute(params, i)
