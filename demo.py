#!/usr/bin/env python3
"""
Demo and benchmarks for the quadratic-residue PRNG.

Usage:
    python3 demo.py --permutation   # Show a full-period permutation for a small prime
    python3 demo.py --benchmark     # Benchmark against the stdlib generator
    python3 demo.py                 # Both
"""

import argparse
import random
import time

from qrprng import Params, QuadraticResiduePRNG, QuadraticResidueRandom, evaluate_index

# Parameters used by the custom-parameter benchmark
BENCH_PRIME = 9_021_057_379
BENCH_OFFSET = 1_000_014_012
BENCH_INTERMEDIATE_OFFSET = 2_947_624_585


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_count(n: int) -> str:
    """Format number with K/M suffix."""
    if n >= 1_000_000:
        return f"{n/1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n/1_000:.1f}K"
    return str(n)


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    if seconds >= 0.000_001:
        return f"{seconds*1_000_000:.1f}us"
    return f"{seconds*1_000_000_000:.0f}ns"


# =============================================================================
# Permutation Demo
# =============================================================================


def run_permutation_demo(prime: int, intermediate_offset: int, offset: int):
    """Print every element of the permutation for a small prime."""
    print("=" * 70)
    print("Quadratic-Residue Permutation - Demo")
    print("=" * 70)

    params = Params(prime, intermediate_offset, offset)

    print(f"\n{'Parameters':─^70}")
    print(f"  Prime:                {params.prime:>12}")
    print(f"  Intermediate offset:  {params.intermediate_offset:>12}")
    print(f"  Offset:               {params.offset:>12}")
    print(f"  Max mask:             {params.max_mask:>12}")
    print(f"  Mask:                 {params.mask:>12}")

    print(f"\n{'Permutation':─^70}")
    outputs = [evaluate_index(params, i) for i in range(params.prime)]
    for i, y in enumerate(outputs):
        print(f"  {i:>6} -> {y:>6}")

    expected = set(range(params.offset, params.offset + params.prime))
    is_permutation = len(set(outputs)) == params.prime and set(outputs) == expected
    fixed_points = sum(1 for i, y in enumerate(outputs) if y - params.offset == i)

    print(f"\n{'Summary':─^70}")
    print(f"  Full period:    {'PASS' if is_permutation else 'FAIL':>12}")
    print(f"  Fixed points:   {fixed_points:>12}")


# =============================================================================
# Benchmarks
# =============================================================================


def bench(label: str, fn, iterations: int):
    """Time iterations calls of fn and print the per-call cost."""
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter() - start
    per_call = elapsed / iterations
    ops = iterations / elapsed if elapsed > 0 else float("inf")
    print(f"  {label:<32} {format_time(per_call):>10}/op  ({ops:>12,.0f} ops/s)")


def run_benchmark(iterations: int):
    """Compare generators over the same number of draws."""
    print("=" * 70)
    print("Quadratic-Residue PRNG - Benchmarks")
    print("=" * 70)
    print(f"\n{'Throughput (' + format_count(iterations) + ' draws each)':─^70}")

    custom = QuadraticResiduePRNG(BENCH_PRIME, BENCH_INTERMEDIATE_OFFSET, BENCH_OFFSET)
    bench("uint64 (custom params)", custom.next64, iterations)

    default = QuadraticResiduePRNG.default()
    bench("uint64 (default params)", default.next64, iterations)

    stdlib = random.Random()
    bench("stdlib getrandbits(64)", lambda: stdlib.getrandbits(64), iterations)

    adapted = QuadraticResidueRandom()
    bench("stdlib API over qrprng", lambda: adapted.getrandbits(64), iterations)


def main():
    parser = argparse.ArgumentParser(description="Quadratic-residue PRNG demo and benchmarks")
    parser.add_argument("--permutation", action="store_true", help="Run permutation demo")
    parser.add_argument("--benchmark", action="store_true", help="Run benchmarks")
    parser.add_argument("--prime", type=int, default=23, help="Prime for the permutation demo (3 mod 4)")
    parser.add_argument("--intermediate-offset", type=int, default=5, help="Seed for the permutation demo")
    parser.add_argument("--offset", type=int, default=0, help="Output offset for the permutation demo")
    parser.add_argument("--iterations", type=int, default=200_000, help="Draws per benchmark")
    args = parser.parse_args()

    run_all = not (args.permutation or args.benchmark)

    if args.permutation or run_all:
        run_permutation_demo(args.prime, args.intermediate_offset, args.offset)
        print()

    if args.benchmark or run_all:
        run_benchmark(args.iterations)


if __name__ == "__main__":
    main()
