#!/usr/bin/env python3
"""
nwdist Demo

Walks through the edit distance engines on small inputs.

Usage:
    python demo.py
"""

import sys
sys.path.insert(0, '..')

from nwdist import (
    BaseClassifier, CostModel, GeneticSequence, Method,
    RecursiveEngine, IterativeEngine, BlockedEngine,
    edit_distance, compare_engines
)


def main():
    """Main entry point."""
    print("nwdist Edit Distance Demo")
    print("=========================\n")

    example_basic_distance()
    example_engines()
    example_non_base_characters()
    example_cost_models()

    print("All examples completed successfully!")
    return 0


def example_basic_distance():
    """Example 1: Basic Distance"""
    print("Example 1: Basic Distance")
    print("-------------------------")

    pairs = [("GATTACA", "GATTACA"), ("ACGT", "AGT"), ("AAAA", "TTTT"), ("", "ACGT")]
    for a, b in pairs:
        print(f"  {a or '(empty)':>8} vs {b or '(empty)':<8} -> {edit_distance(a, b)}")

    print()


def example_engines():
    """Example 2: Three Engines, One Answer"""
    print("Example 2: Three Engines, One Answer")
    print("------------------------------------")

    costs = CostModel.simple(substitution=2, unknown=1, indel=2)
    classifier = BaseClassifier(known_bases="ACGT", unknown_bases="NU")

    results = compare_engines("GATTACA", "GCATGCU", costs, classifier, block_size=3)
    for method, distance in results.items():
        print(f"  {method.value:>9}: {distance}")

    table = RecursiveEngine(costs, classifier).fill_table("GATTACA", 7, "GCATGCU", 7)
    print(f"  recursive engine visited {table.computed_count()} of {len(table)} cells")

    table = IterativeEngine(costs, classifier).fill_table("GATTACA", 7, "GCATGCU", 7)
    print("  iterative table:")
    for i in range(table.rows):
        print("    " + " ".join(f"{v:>2}" for v in table.row(i)))

    print()


def example_non_base_characters():
    """Example 3: FASTA Text Is Skipped"""
    print("Example 3: FASTA Text Is Skipped")
    print("--------------------------------")

    classifier = BaseClassifier.dna()
    fasta = GeneticSequence(">x1\nGATT\nACA\n", id="x1")
    plain = GeneticSequence.new("GATTACA")

    print(f"  {fasta.id}: {fasta.non_base_count(classifier)} non-base characters skipped")
    print(f"  distance to plain GATTACA: {edit_distance(fasta, plain, method=Method.BLOCKED)}")

    engine = BlockedEngine(block_size=2)
    print(f"  blocked engine, block size 2: {engine(fasta, plain)}")

    print()


def example_cost_models():
    """Example 4: Cost Models"""
    print("Example 4: Cost Models")
    print("----------------------")

    for name, costs in [("default", CostModel.default()), ("unit", CostModel.unit()),
                        ("expensive substitution", CostModel.simple(5, 5, 2))]:
        distance = edit_distance("AAAA", "TTTT", costs=costs)
        print(f"  {name:>22}: AAAA vs TTTT -> {distance}")

    print()


if __name__ == '__main__':
    sys.exit(main())
