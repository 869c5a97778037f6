"""
Tests for the cost model.
"""

import pytest
from nwdist.bases import BaseClassifier
from nwdist.costs import CostModel, SKIP_COST


class TestCostModel:
    """Tests for CostModel construction."""

    def test_default_costs(self):
        """Default cost model."""
        costs = CostModel.default()
        assert costs.substitution_cost == 1
        assert costs.substitution_unknown_cost == 1
        assert costs.indel_cost == 2

    def test_unit_costs(self):
        """Unit cost model."""
        costs = CostModel.unit()
        assert (costs.substitution_cost, costs.substitution_unknown_cost, costs.indel_cost) == (1, 1, 1)

    def test_simple(self):
        """Positional construction."""
        costs = CostModel.simple(substitution=2, unknown=1, indel=3)
        assert costs.substitution_cost == 2
        assert costs.substitution_unknown_cost == 1
        assert costs.indel_cost == 3

    def test_negative_cost(self):
        """Negative costs raise an error."""
        with pytest.raises(ValueError):
            CostModel(indel_cost=-1)

    def test_non_integer_cost(self):
        """Costs must be integers."""
        with pytest.raises(TypeError):
            CostModel(substitution_cost=1.5)
        with pytest.raises(TypeError):
            CostModel(substitution_cost=True)

    def test_zero_costs_allowed(self):
        """Zero is a valid cost."""
        assert CostModel.simple(0, 0, 0).indel_cost == 0


class TestPricing:
    """Tests for per-operation costs."""

    def setup_method(self):
        self.costs = CostModel.simple(substitution=2, unknown=1, indel=3)
        self.classifier = BaseClassifier.dna()

    def test_match(self):
        """Matching bases are free."""
        assert self.costs.substitution("A", "a", self.classifier) == 0

    def test_mismatch(self):
        """Different known bases cost a substitution."""
        assert self.costs.substitution("A", "C", self.classifier) == 2

    def test_unknown_either_side(self):
        """An unknown base on either side costs the unknown rate."""
        assert self.costs.substitution("N", "C", self.classifier) == 1
        assert self.costs.substitution("C", "N", self.classifier) == 1
        assert self.costs.substitution("N", "N", self.classifier) == 1

    def test_insert_base(self):
        """Consuming a base on one side is an indel."""
        assert self.costs.skip_or_insert("G", self.classifier) == 3

    def test_skip_non_base(self):
        """Consuming a non-base character is free."""
        assert self.costs.skip_or_insert("\n", self.classifier) == SKIP_COST == 0
