"""
nwdist - Cost Model

Edit costs shared by every distance engine.

A single `CostModel` instance is handed to whichever engine computes the
distance, so the recursive, iterative and blocked engines always price an
alignment the same way.
"""

from dataclasses import dataclass


# Consuming a character that is not a base never costs anything
SKIP_COST = 0


@dataclass(frozen=True)
class CostModel:
    """
    Costs of the elementary edit operations.

    Attributes:
        substitution_cost: Aligning two different known bases
        substitution_unknown_cost: Aligning where either side is an unknown base
        indel_cost: Inserting or deleting one base

    All costs are non-negative, so every distance is non-negative too.
    """
    substitution_cost: int = 1
    substitution_unknown_cost: int = 1
    indel_cost: int = 2

    def __post_init__(self):
        """Validate cost parameters."""
        for name in ("substitution_cost", "substitution_unknown_cost", "indel_cost"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def default(cls) -> 'CostModel':
        """Substitutions cost 1, insertions and deletions cost 2."""
        return cls(substitution_cost=1, substitution_unknown_cost=1, indel_cost=2)

    @classmethod
    def unit(cls) -> 'CostModel':
        """Every edit costs 1 (Levenshtein distance over bases)."""
        return cls(substitution_cost=1, substitution_unknown_cost=1, indel_cost=1)

    @classmethod
    def simple(cls, substitution: int, unknown: int, indel: int) -> 'CostModel':
        """Create a cost model from positional values."""
        return cls(
            substitution_cost=substitution,
            substitution_unknown_cost=unknown,
            indel_cost=indel
        )

    def substitution(self, x: str, y: str, classifier) -> int:
        """
        Cost of aligning base `x` against base `y`.

        Both characters must already be known to be bases. An unknown base on
        either side is priced with `substitution_unknown_cost`, which keeps
        the distance symmetric in its arguments.
        """
        if classifier.is_unknown_base(x) or classifier.is_unknown_base(y):
            return self.substitution_unknown_cost
        if classifier.is_same_base(x, y):
            return 0
        return self.substitution_cost

    def skip_or_insert(self, c: str, classifier) -> int:
        """Cost of consuming `c` on one side only."""
        if classifier.is_base(c):
            return self.indel_cost
        return SKIP_COST
