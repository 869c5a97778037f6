"""
Tests for the distance table.
"""

import pytest
from nwdist.table import (
    DistanceTable, DistanceError, TableAllocationError, NOT_YET_COMPUTED
)


class TestDistanceTable:
    """Tests for DistanceTable."""

    def test_flat_layout(self):
        """Cells are addressed row * cols + col."""
        table = DistanceTable(3, 4)
        table[2, 1] = 7
        assert table.index(2, 1) == 9
        assert table.cells[9] == 7
        assert table[2, 1] == 7

    def test_shape(self):
        """Shape and size."""
        table = DistanceTable(3, 4)
        assert table.shape == (3, 4)
        assert len(table) == 12

    def test_fill(self):
        """Tables start filled with the given value."""
        table = DistanceTable(2, 2, fill=NOT_YET_COMPUTED)
        assert table.computed_count() == 0
        table[1, 1] = 0
        assert table.computed_count() == 1
        assert list(table.computed_cells()) == [(1, 1)]

    def test_row(self):
        """Rows are copied out in order."""
        table = DistanceTable(2, 3)
        table[1, 0], table[1, 1], table[1, 2] = 4, 5, 6
        assert table.row(1) == [4, 5, 6]

    def test_out_of_range(self):
        """Indexing outside the table raises IndexError."""
        table = DistanceTable(2, 2)
        with pytest.raises(IndexError):
            table[2, 0]
        with pytest.raises(IndexError):
            table[0, -1]

    def test_invalid_dimensions(self):
        """Tables have at least one cell."""
        with pytest.raises(ValueError):
            DistanceTable(0, 3)

    def test_allocation_failure(self):
        """Impossible sizes raise TableAllocationError."""
        with pytest.raises(TableAllocationError) as excinfo:
            DistanceTable(10 ** 10, 10 ** 10)
        assert isinstance(excinfo.value, DistanceError)
        assert excinfo.value.rows == 10 ** 10
