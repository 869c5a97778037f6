"""
nwdist - Memoized Recursive Engine

Top-down evaluation of the Needleman-Wunsch distance over sequence suffixes.

With X the longer sequence (length M) and Y the shorter (length N), f(i, j)
is the distance between X[i:] and Y[j:]:

    f(M, N) = 0
    f(M, j) = ins(Y[j]) + f(M, j+1)
    f(i, N) = ins(X[i]) + f(i+1, N)
    f(i, j) = f(i+1, j)                      if X[i] is not a base
            = f(i, j+1)                      if Y[j] is not a base
            = min(sub(X[i], Y[j]) + f(i+1, j+1),
                  indel + f(i+1, j),
                  indel + f(i, j+1))         otherwise

where ins(c) is the indel cost for a base and 0 for anything else.

The descent is driven by an explicit stack rather than Python recursion, so
sequences longer than the interpreter's recursion limit are fine. Only cells
reachable from f(0, 0) are ever evaluated, and each of them exactly once.
"""

from typing import List, Tuple

from .engine import DistanceEngine
from .table import NOT_YET_COMPUTED, DistanceTable


class RecursiveEngine(DistanceEngine):
    """Memoized top-down engine (suffix formulation)."""
    name = "recursive"
    table_fill = NOT_YET_COMPUTED

    def _answer(self, table: DistanceTable) -> Tuple[int, int]:
        return (0, 0)

    def _fill(self, table: DistanceTable, x, m: int, y, n: int) -> None:
        cells = table.cells
        width = n + 1
        classifier = self.classifier
        costs = self.costs
        indel = costs.indel_cost

        x_is_base = [classifier.is_base(c) for c in x[:m]]
        y_is_base = [classifier.is_base(c) for c in y[:n]]
        x_ins = [costs.skip_or_insert(c, classifier) for c in x[:m]]
        y_ins = [costs.skip_or_insert(c, classifier) for c in y[:n]]

        stack = [(0, 0)]
        while stack:
            i, j = stack[-1]
            k = i * width + j
            if cells[k] != NOT_YET_COMPUTED:
                stack.pop()
                continue

            # (offset of sub-problem, cost of the step leading to it)
            steps: List[Tuple[int, int]]
            if i == m:
                if j == n:
                    cells[k] = 0
                    stack.pop()
                    continue
                steps = [(k + 1, y_ins[j])]
            elif j == n:
                steps = [(k + width, x_ins[i])]
            elif not x_is_base[i]:
                steps = [(k + width, 0)]
            elif not y_is_base[j]:
                steps = [(k + 1, 0)]
            else:
                steps = [
                    (k + width + 1, costs.substitution(x[i], y[j], classifier)),
                    (k + width, indel),
                    (k + 1, indel),
                ]

            pending = [
                divmod(offset, width)
                for offset, _ in steps
                if cells[offset] == NOT_YET_COMPUTED
            ]
            if pending:
                stack.extend(pending)
                continue

            cells[k] = min(cost + cells[offset] for offset, cost in steps)
            stack.pop()
