"""
nwdist - Distance Table

Dense dynamic-programming table stored as one flat buffer.

Cell (i, j) of a table with `cols` columns lives at `i * cols + j`. Rows are
contiguous, which is what the blocked engine relies on for locality.
"""

from typing import Iterator, Tuple


# Impossible distance marking a cell the recursive engine has not visited
NOT_YET_COMPUTED = -1


class DistanceError(Exception):
    """Base class for errors raised while computing a distance."""
    pass


class TableAllocationError(DistanceError):
    """Raised when the table buffer cannot be allocated."""
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"Cannot allocate a {rows} x {cols} distance table")


class DistanceTable:
    """
    Flat (rows x cols) grid of integer distances.

    Engines read and write `cells` directly with precomputed offsets; the
    indexing helpers are for inspection and tests.
    """
    __slots__ = ("rows", "cols", "cells")

    def __init__(self, rows: int, cols: int, fill: int = 0):
        if rows < 1 or cols < 1:
            raise ValueError(f"Table dimensions must be positive, got {rows} x {cols}")
        self.rows = rows
        self.cols = cols
        try:
            self.cells = [fill] * (rows * cols)
        except (MemoryError, OverflowError) as exc:
            raise TableAllocationError(rows, cols) from exc

    def index(self, i: int, j: int) -> int:
        """Return the flat offset of cell (i, j)."""
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"Cell ({i}, {j}) outside {self.rows} x {self.cols} table")
        return i * self.cols + j

    def __getitem__(self, cell: Tuple[int, int]) -> int:
        i, j = cell
        return self.cells[self.index(i, j)]

    def __setitem__(self, cell: Tuple[int, int], value: int) -> None:
        i, j = cell
        self.cells[self.index(i, j)] = value

    def row(self, i: int) -> list:
        """Return a copy of row `i`."""
        start = self.index(i, 0)
        return self.cells[start:start + self.cols]

    def is_computed(self, i: int, j: int) -> bool:
        return self[i, j] != NOT_YET_COMPUTED

    def computed_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the coordinates of every cell holding a distance."""
        for k, value in enumerate(self.cells):
            if value != NOT_YET_COMPUTED:
                yield divmod(k, self.cols)

    def computed_count(self) -> int:
        return sum(1 for value in self.cells if value != NOT_YET_COMPUTED)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"DistanceTable(rows={self.rows}, cols={self.cols})"
