"""
nwdist - Base Classification

Maps raw input characters to nucleotide bases.

Distance engines never interpret characters themselves. They ask a
classifier three questions:

    is_base(c)            is `c` a recognized nucleotide symbol?
    is_unknown_base(c)    is `c` a recognized but ambiguous symbol (e.g. N)?
    is_same_base(a, b)    do two recognized symbols denote the same base?

Any object providing these methods plus an idempotent `initialize()` can be
passed to an engine. `BaseClassifier` is the implementation shipped here.
"""

from typing import Dict, FrozenSet, Iterable, Optional


DNA_BASES = "ACGT"
RNA_BASES = "ACGU"

# IUPAC nucleotide ambiguity codes
IUPAC_AMBIGUITY_CODES = "RYSWKMBDHVN"


class BaseClassifier:
    """
    Character-to-base lookup.

    Attributes:
        known_bases: Symbols treated as unambiguous bases
        unknown_bases: Symbols treated as ambiguous bases
        case_sensitive: When False (default), 'a' and 'A' are the same base

    The lookup table is built lazily by `initialize()`. Engines call it once
    per top-level computation; repeated calls are no-ops.
    """

    def __init__(
        self,
        known_bases: str = DNA_BASES,
        unknown_bases: str = "N",
        case_sensitive: bool = False
    ):
        overlap = set(known_bases) & set(unknown_bases)
        if overlap:
            raise ValueError(
                f"Symbols cannot be both known and unknown: {''.join(sorted(overlap))}"
            )
        self.known_bases = known_bases
        self.unknown_bases = unknown_bases
        self.case_sensitive = case_sensitive
        self._canonical: Optional[Dict[str, str]] = None
        self._unknown: FrozenSet[str] = frozenset()

    @classmethod
    def dna(cls) -> 'BaseClassifier':
        """DNA alphabet with N as the only ambiguity code."""
        return cls(known_bases=DNA_BASES, unknown_bases="N")

    @classmethod
    def rna(cls) -> 'BaseClassifier':
        """RNA alphabet with N as the only ambiguity code."""
        return cls(known_bases=RNA_BASES, unknown_bases="N")

    @classmethod
    def iupac(cls) -> 'BaseClassifier':
        """DNA alphabet with every IUPAC ambiguity code treated as unknown."""
        return cls(known_bases=DNA_BASES, unknown_bases=IUPAC_AMBIGUITY_CODES)

    @property
    def initialized(self) -> bool:
        return self._canonical is not None

    def initialize(self) -> None:
        """Build the lookup table. Safe to call any number of times."""
        if self._canonical is not None:
            return

        canonical = {}
        for symbol in self.known_bases + self.unknown_bases:
            for variant in self._variants(symbol):
                canonical[variant] = symbol

        self._unknown = frozenset(
            variant
            for symbol in self.unknown_bases
            for variant in self._variants(symbol)
        )
        self._canonical = canonical

    def _variants(self, symbol: str) -> Iterable[str]:
        if self.case_sensitive:
            return (symbol,)
        return {symbol, symbol.upper(), symbol.lower()}

    def _lookup(self) -> Dict[str, str]:
        if self._canonical is None:
            self.initialize()
        return self._canonical

    def is_base(self, c: str) -> bool:
        """Return True if `c` is a recognized nucleotide symbol."""
        return c in self._lookup()

    def is_unknown_base(self, c: str) -> bool:
        """Return True if `c` is a recognized but ambiguous symbol."""
        self._lookup()
        return c in self._unknown

    def is_same_base(self, c1: str, c2: str) -> bool:
        """Return True if both characters are bases denoting the same symbol."""
        lookup = self._lookup()
        base1 = lookup.get(c1)
        return base1 is not None and base1 == lookup.get(c2)

    def count_non_bases(self, characters: Iterable[str]) -> int:
        """
        Count characters that engines will skip.

        Engines skip silently; callers use this to report what was ignored.
        """
        lookup = self._lookup()
        return sum(1 for c in characters if c not in lookup)

    def __repr__(self) -> str:
        return (
            f"BaseClassifier(known_bases={self.known_bases!r}, "
            f"unknown_bases={self.unknown_bases!r}, "
            f"case_sensitive={self.case_sensitive!r})"
        )
