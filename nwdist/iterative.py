"""
nwdist - Iterative Tabulation Engine

Bottom-up evaluation of the Needleman-Wunsch distance over sequence prefixes.

D[i][j] is the distance between X[:i] and Y[:j]. Row 0 and column 0 are
running sums of insertion costs; every other cell is derived from its three
already computed neighbours, D[i-1][j-1], D[i-1][j] and D[i][j-1]. A
non-base X[i-1] copies the cell above, a non-base Y[j-1] copies the cell to
the left.
"""

from typing import List, Tuple

from .engine import DistanceEngine
from .table import DistanceTable


class IterativeEngine(DistanceEngine):
    """Row-major bottom-up engine (prefix formulation)."""
    name = "iterative"

    def _answer(self, table: DistanceTable) -> Tuple[int, int]:
        return (table.rows - 1, table.cols - 1)

    def _fill(self, table: DistanceTable, x, m: int, y, n: int) -> None:
        x_is_base, y_is_base = self._fill_borders(table, x, m, y, n)
        for i in range(1, m + 1):
            self._fill_row(table, x, y, x_is_base, y_is_base, i, 1, n + 1)

    def _fill_borders(self, table: DistanceTable, x, m: int, y, n: int):
        """Fill row 0 and column 0; return per-character base flags."""
        cells = table.cells
        width = n + 1
        costs = self.costs
        classifier = self.classifier

        x_is_base: List[bool] = [classifier.is_base(c) for c in x[:m]]
        y_is_base: List[bool] = [classifier.is_base(c) for c in y[:n]]

        cells[0] = 0
        for i in range(1, m + 1):
            cells[i * width] = cells[(i - 1) * width] + costs.skip_or_insert(x[i - 1], classifier)
        for j in range(1, n + 1):
            cells[j] = cells[j - 1] + costs.skip_or_insert(y[j - 1], classifier)

        return x_is_base, y_is_base

    def _fill_row(
        self,
        table: DistanceTable,
        x,
        y,
        x_is_base: List[bool],
        y_is_base: List[bool],
        i: int,
        col_start: int,
        col_stop: int
    ) -> None:
        """Fill cells (i, col_start) .. (i, col_stop - 1) left to right."""
        cells = table.cells
        row = i * table.cols
        above = row - table.cols

        if not x_is_base[i - 1]:
            cells[row + col_start:row + col_stop] = cells[above + col_start:above + col_stop]
            return

        costs = self.costs
        classifier = self.classifier
        indel = costs.indel_cost
        xi = x[i - 1]

        for j in range(col_start, col_stop):
            if not y_is_base[j - 1]:
                cells[row + j] = cells[row + j - 1]
                continue

            best = cells[above + j - 1] + costs.substitution(xi, y[j - 1], classifier)
            delete = cells[above + j] + indel
            if delete < best:
                best = delete
            insert = cells[row + j - 1] + indel
            if insert < best:
                best = insert
            cells[row + j] = best
