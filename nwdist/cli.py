"""
nwdist - Command Line

Usage:
    nwdist seq1.fasta seq2.fasta
    nwdist seq1.fasta seq2.fasta --method blocked --block-size 128 --time

Files are read whole, headers and line breaks included; anything that is not
a base is skipped at zero cost and only counted in the log.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .bases import BaseClassifier
from .blocked import DEFAULT_BLOCK_SIZE
from .costs import CostModel
from .distance import Method, make_engine
from .sequence import GeneticSequence
from .table import TableAllocationError

logger = logging.getLogger(__name__)


ALPHABETS = {
    "dna": BaseClassifier.dna,
    "rna": BaseClassifier.rna,
    "iupac": BaseClassifier.iupac,
}


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    defaults = CostModel.default()
    parser = argparse.ArgumentParser(
        prog="nwdist",
        description="Needleman-Wunsch edit distance between two sequence files"
    )
    parser.add_argument("file_a", help="First sequence file (FASTA or raw)")
    parser.add_argument("file_b", help="Second sequence file (FASTA or raw)")
    parser.add_argument("--method", choices=[m.value for m in Method],
                        default=Method.ITERATIVE.value,
                        help="Evaluation strategy (default: iterative)")
    parser.add_argument("--block-size", type=positive_int, default=DEFAULT_BLOCK_SIZE,
                        help=f"Tile edge for the blocked method (default: {DEFAULT_BLOCK_SIZE})")
    parser.add_argument("--substitution-cost", type=non_negative_int,
                        default=defaults.substitution_cost)
    parser.add_argument("--unknown-cost", type=non_negative_int,
                        default=defaults.substitution_unknown_cost,
                        help="Substitution cost when either base is ambiguous")
    parser.add_argument("--indel-cost", type=non_negative_int,
                        default=defaults.indel_cost)
    parser.add_argument("--alphabet", choices=sorted(ALPHABETS), default="dna")
    parser.add_argument("--time", action="store_true",
                        help="Report elapsed computation time on stderr")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    classifier = ALPHABETS[args.alphabet]()
    costs = CostModel(
        substitution_cost=args.substitution_cost,
        substitution_unknown_cost=args.unknown_cost,
        indel_cost=args.indel_cost
    )

    sequences = []
    for path in (args.file_a, args.file_b):
        try:
            sequence = GeneticSequence.from_file(path)
        except OSError as e:
            logger.error("Cannot read %s: %s", path, e)
            return 1
        skipped = sequence.non_base_count(classifier)
        if skipped:
            logger.info("%s: skipped %d non-base characters", path, skipped)
        sequences.append(sequence)

    engine = make_engine(args.method, costs=costs, classifier=classifier,
                         block_size=args.block_size)
    seq_a, seq_b = sequences

    start = time.perf_counter()
    try:
        distance = engine(seq_a, seq_b)
    except TableAllocationError as e:
        logger.error("%s", e)
        return 1
    elapsed = time.perf_counter() - start

    print(distance)
    if args.time:
        print(f"{args.method}: {len(seq_a)} x {len(seq_b)} in {elapsed * 1000:.2f}ms",
              file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
