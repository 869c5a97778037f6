"""
nwdist - Cache-Aware Blocked Engine

Same recurrence and result as the iterative engine, swept tile by tile.

The interior of the table (i, j >= 1) is cut into square tiles of edge
`block_size`. Tiles are visited in row-major order and cells inside a tile
in row-major order. Every dependency of a cell is either earlier in its own
tile or in the completed tile above or to the left, so this is a valid
evaluation order for any block size. Tiles do not overlap; tiles on the
bottom and right edges are simply cut short.
"""

import logging
from typing import Optional

from .iterative import IterativeEngine
from .table import DistanceTable

logger = logging.getLogger(__name__)


DEFAULT_BLOCK_SIZE = 64


def check_block_size(block_size) -> int:
    """Return `block_size` if it is a positive integer, else raise."""
    if isinstance(block_size, bool) or not isinstance(block_size, int):
        raise TypeError(f"Block size must be an integer, got {block_size!r}")
    if block_size < 1:
        raise ValueError(f"Block size must be positive, got {block_size}")
    return block_size


class BlockedEngine(IterativeEngine):
    """
    Tiled bottom-up engine.

    Attributes:
        block_size: Default tile edge, overridable per call
    """
    name = "blocked"

    def __init__(self, costs=None, classifier=None, block_size: int = DEFAULT_BLOCK_SIZE):
        super().__init__(costs=costs, classifier=classifier)
        self.block_size = check_block_size(block_size)

    def compute(self, seq_a, length_a: int, seq_b, length_b: int,
                block_size: Optional[int] = None) -> int:
        table = self.fill_table(seq_a, length_a, seq_b, length_b, block_size)
        return table[self._answer(table)]

    def fill_table(self, seq_a, length_a: int, seq_b, length_b: int,
                   block_size: Optional[int] = None) -> DistanceTable:
        block = check_block_size(self.block_size if block_size is None else block_size)
        table, x, m, y, n = self._prepare(seq_a, length_a, seq_b, length_b)
        self._fill_tiles(table, x, m, y, n, block)
        return table

    def _fill_tiles(self, table: DistanceTable, x, m: int, y, n: int, block: int) -> None:
        x_is_base, y_is_base = self._fill_borders(table, x, m, y, n)
        logger.debug("tiling %d x %d interior with %d x %d blocks", m, n, block, block)

        for row_start in range(1, m + 1, block):
            row_stop = min(row_start + block, m + 1)
            for col_start in range(1, n + 1, block):
                col_stop = min(col_start + block, n + 1)
                for i in range(row_start, row_stop):
                    self._fill_row(table, x, y, x_is_base, y_is_base, i, col_start, col_stop)

    def __repr__(self) -> str:
        return (
            f"BlockedEngine(costs={self.costs!r}, classifier={self.classifier!r}, "
            f"block_size={self.block_size})"
        )
