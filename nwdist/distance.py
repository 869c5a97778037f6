"""
nwdist - Edit Distance API

Engine selection and one-call helpers.

    >>> edit_distance("GATTACA", "GATTACA")
    0
    >>> edit_distance("ACGT", "ACG", method=Method.RECURSIVE)
    2
"""

from enum import Enum
from typing import Dict, Optional, Union

from .bases import BaseClassifier
from .blocked import DEFAULT_BLOCK_SIZE, BlockedEngine
from .costs import CostModel
from .engine import DistanceEngine
from .iterative import IterativeEngine
from .recursive import RecursiveEngine


class Method(Enum):
    """Strategy used to evaluate the recurrence."""
    RECURSIVE = "recursive"  # Top-down, memoized, reachable cells only
    ITERATIVE = "iterative"  # Bottom-up, row-major
    BLOCKED = "blocked"      # Bottom-up, tiled for cache locality


ENGINES = {
    Method.RECURSIVE: RecursiveEngine,
    Method.ITERATIVE: IterativeEngine,
    Method.BLOCKED: BlockedEngine,
}


def make_engine(
    method: Union[Method, str] = Method.ITERATIVE,
    costs: Optional[CostModel] = None,
    classifier: Optional[BaseClassifier] = None,
    block_size: int = DEFAULT_BLOCK_SIZE
) -> DistanceEngine:
    """
    Build an engine for `method`.

    `method` may be a `Method` or its string value. `block_size` is only
    used by the blocked engine.
    """
    method = Method(method)
    if method is Method.BLOCKED:
        return BlockedEngine(costs=costs, classifier=classifier, block_size=block_size)
    return ENGINES[method](costs=costs, classifier=classifier)


def edit_distance(
    seq_a,
    seq_b,
    method: Union[Method, str] = Method.ITERATIVE,
    costs: Optional[CostModel] = None,
    classifier: Optional[BaseClassifier] = None,
    block_size: Optional[int] = None
) -> int:
    """
    Needleman-Wunsch edit distance between two whole sequences.

    Args:
        seq_a: First sequence (str or GeneticSequence)
        seq_b: Second sequence
        method: Engine to use (default: iterative)
        costs: Cost model (default: CostModel.default())
        classifier: Base classifier (default: BaseClassifier.dna())
        block_size: Tile edge for the blocked engine

    Returns:
        Non-negative distance
    """
    engine = make_engine(
        method,
        costs=costs,
        classifier=classifier,
        block_size=DEFAULT_BLOCK_SIZE if block_size is None else block_size
    )
    return engine(seq_a, seq_b)


def compare_engines(
    seq_a,
    seq_b,
    costs: Optional[CostModel] = None,
    classifier: Optional[BaseClassifier] = None,
    block_size: int = DEFAULT_BLOCK_SIZE
) -> Dict[Method, int]:
    """Run every engine on the same pair and return the distances by method."""
    return {
        method: make_engine(method, costs, classifier, block_size)(seq_a, seq_b)
        for method in Method
    }
