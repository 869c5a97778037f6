"""
nwdist - Distance Engine Base

Common plumbing for the three Needleman-Wunsch engines.

Each engine realizes the same recurrence and differs only in how it fills the
table. This base class owns everything around the fill: argument checks,
orienting the inputs longest-first, allocating the table and reading the
answer back out.
"""

import logging
from typing import Optional, Tuple

from .bases import BaseClassifier
from .costs import CostModel
from .sequence import characters, check_length
from .table import DistanceTable

logger = logging.getLogger(__name__)


class DistanceEngine:
    """
    Abstract engine.

    Subclasses set `name` and `table_fill`, and implement `_answer()` plus
    either `_fill()` or their own `fill_table()` built on `_prepare()`. Instances only hold configuration, so one engine can serve
    concurrent calls; every call works on its own freshly allocated table.
    """
    name = "abstract"
    table_fill = 0

    def __init__(
        self,
        costs: Optional[CostModel] = None,
        classifier: Optional[BaseClassifier] = None
    ):
        self.costs = costs if costs is not None else CostModel.default()
        self.classifier = classifier if classifier is not None else BaseClassifier.dna()

    def compute(self, seq_a, length_a: int, seq_b, length_b: int) -> int:
        """
        Edit distance between the first `length_a` characters of `seq_a` and
        the first `length_b` characters of `seq_b`.
        """
        table = self.fill_table(seq_a, length_a, seq_b, length_b)
        return table[self._answer(table)]

    def __call__(self, seq_a, seq_b) -> int:
        return self.compute(seq_a, len(seq_a), seq_b, len(seq_b))

    def fill_table(self, seq_a, length_a: int, seq_b, length_b: int) -> DistanceTable:
        """Run the engine and return the filled table instead of the distance."""
        table, x, m, y, n = self._prepare(seq_a, length_a, seq_b, length_b)
        self._fill(table, x, m, y, n)
        return table

    def _prepare(self, seq_a, length_a: int, seq_b, length_b: int):
        """Orient the inputs, initialize the classifier and allocate the table."""
        x, m, y, n = orient(seq_a, length_a, seq_b, length_b)
        self.classifier.initialize()

        logger.debug("%s engine: allocating %d x %d table", self.name, m + 1, n + 1)
        table = DistanceTable(m + 1, n + 1, fill=self.table_fill)
        return table, x, m, y, n

    def _fill(self, table: DistanceTable, x, m: int, y, n: int) -> None:
        raise NotImplementedError

    def _answer(self, table: DistanceTable) -> Tuple[int, int]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(costs={self.costs!r}, classifier={self.classifier!r})"


def orient(seq_a, length_a: int, seq_b, length_b: int):
    """
    Return (long, M, short, N) with M >= N.

    Ties keep the argument order. The recurrence is symmetric, so swapping
    never changes the distance, only the table shape.
    """
    a = characters(seq_a)
    b = characters(seq_b)
    length_a = check_length(a, length_a)
    length_b = check_length(b, length_b)
    if length_a >= length_b:
        return a, length_a, b, length_b
    return b, length_b, a, length_a
