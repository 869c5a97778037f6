#!/usr/bin/env python3
"""
nwdist Benchmark Script

Times the three distance engines on synthetic sequences.

Usage:
    python benchmark.py
    python benchmark.py --block-sizes 16 64 256
    python benchmark.py --numpy  # Include NumPy table comparison
"""

import time
import argparse
import random
import sys
from typing import Callable, List

# Add parent directory to path
sys.path.insert(0, '.')

from nwdist.bases import BaseClassifier
from nwdist.blocked import BlockedEngine, DEFAULT_BLOCK_SIZE
from nwdist.costs import CostModel
from nwdist.iterative import IterativeEngine
from nwdist.recursive import RecursiveEngine


def time_function(func: Callable, *args, iterations: int = 1, **kwargs) -> float:
    """Time a function over multiple iterations."""
    start = time.perf_counter()
    for _ in range(iterations):
        result = func(*args, **kwargs)
    end = time.perf_counter()
    return (end - start) * 1000  # Return milliseconds


def random_sequence(length: int, rng: random.Random, line_width: int = 60) -> str:
    """FASTA-like text: a header plus wrapped random bases."""
    bases = ''.join(rng.choice('ACGT') for _ in range(length))
    lines = [bases[i:i + line_width] for i in range(0, length, line_width)]
    return '>bench\n' + '\n'.join(lines) + '\n'


def benchmark_engines(sizes: List[int], seed: int):
    """Benchmark every engine on the same pairs."""
    print("\n=== Engine Benchmark ===")

    rng = random.Random(seed)
    engines = [RecursiveEngine(), IterativeEngine(), BlockedEngine()]

    for size in sizes:
        seq1 = random_sequence(size, rng)
        seq2 = random_sequence(size, rng)

        print(f"  {size} x {size} bp:")
        distances = set()
        for engine in engines:
            distances.add(engine(seq1, seq2))
            elapsed = time_function(engine, seq1, seq2, iterations=1)
            print(f"    {engine.name:>9}: {elapsed:.2f}ms")

        if len(distances) != 1:
            print(f"    ENGINES DISAGREE: {sorted(distances)}")


def benchmark_block_sizes(size: int, block_sizes: List[int], seed: int):
    """Benchmark the blocked engine across tile sizes."""
    print("\n=== Block Size Benchmark ===")

    rng = random.Random(seed)
    seq1 = random_sequence(size, rng)
    seq2 = random_sequence(size, rng)
    engine = BlockedEngine()

    baseline = time_function(IterativeEngine(), seq1, seq2, iterations=1)
    print(f"  {size} x {size} bp, iterative baseline: {baseline:.2f}ms")

    for block_size in block_sizes:
        elapsed = time_function(
            engine.compute, seq1, len(seq1), seq2, len(seq2),
            block_size=block_size, iterations=1
        )
        print(f"    block {block_size:>5}: {elapsed:.2f}ms")


def benchmark_with_numpy(size: int, seed: int):
    """Benchmark comparison with a NumPy-backed table."""
    print("\n=== NumPy Comparison Benchmark ===")

    try:
        import numpy as np

        print("  NumPy is available - running comparison...")

        rng = random.Random(seed)
        seq1 = random_sequence(size, rng)
        seq2 = random_sequence(size, rng)
        costs = CostModel.default()
        classifier = BaseClassifier.dna()

        pure_elapsed = time_function(IterativeEngine(costs, classifier), seq1, seq2, iterations=1)
        expected = IterativeEngine(costs, classifier)(seq1, seq2)

        def numpy_iterative():
            """Row-major fill into a flat int64 ndarray."""
            x, y = (seq1, seq2) if len(seq1) >= len(seq2) else (seq2, seq1)
            m, n = len(x), len(y)
            width = n + 1
            x_base = np.array([classifier.is_base(c) for c in x], dtype=bool)
            y_base = np.array([classifier.is_base(c) for c in y], dtype=bool)

            D = np.zeros((m + 1) * width, dtype=np.int64)
            D[width::width] = np.cumsum(x_base * costs.indel_cost)
            D[1:width] = np.cumsum(y_base * costs.indel_cost)

            for i in range(1, m + 1):
                row = i * width
                above = row - width
                if not x_base[i - 1]:
                    D[row + 1:row + width] = D[above + 1:above + width]
                    continue
                for j in range(1, n + 1):
                    if not y_base[j - 1]:
                        D[row + j] = D[row + j - 1]
                        continue
                    D[row + j] = min(
                        D[above + j - 1] + costs.substitution(x[i - 1], y[j - 1], classifier),
                        D[above + j] + costs.indel_cost,
                        D[row + j - 1] + costs.indel_cost,
                    )

            return int(D[-1])

        numpy_elapsed = time_function(numpy_iterative, iterations=1)
        agrees = numpy_iterative() == expected

        print(f"\n  Iterative fill ({size} x {size} bp):")
        print(f"    Python list: {pure_elapsed:.2f}ms")
        print(f"    NumPy array: {numpy_elapsed:.2f}ms")
        print(f"    Speedup: {pure_elapsed/numpy_elapsed:.1f}x (limited - loop-heavy)")
        print(f"    Same distance: {agrees}")

    except ImportError:
        print("  NumPy not available - skipping NumPy comparison")
        print("  Install with: pip install numpy")


def run_all_benchmarks(sizes: List[int], block_sizes: List[int],
                       seed: int, include_numpy: bool = False):
    """Run all benchmarks."""
    print("=" * 60)
    print("nwdist Benchmark Suite")
    print("=" * 60)

    benchmark_engines(sizes, seed)
    benchmark_block_sizes(max(sizes), block_sizes, seed)

    if include_numpy:
        benchmark_with_numpy(min(sizes), seed)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='nwdist engine benchmarks')
    parser.add_argument('--sizes', type=int, nargs='+', default=[100, 250, 500],
                        help='Sequence lengths to benchmark')
    parser.add_argument('--block-sizes', type=int, nargs='+',
                        default=[8, 32, DEFAULT_BLOCK_SIZE, 256],
                        help='Tile edges for the blocked engine')
    parser.add_argument('--seed', type=int, default=1,
                        help='Random seed for synthetic sequences')
    parser.add_argument('--numpy', action='store_true',
                        help='Include NumPy comparison benchmarks')
    args = parser.parse_args()

    run_all_benchmarks(args.sizes, args.block_sizes, args.seed, include_numpy=args.numpy)
    return 0


if __name__ == '__main__':
    sys.exit(main())
