"""
Tests for the base classifier.
"""

import pytest
from nwdist.bases import BaseClassifier, IUPAC_AMBIGUITY_CODES


class TestPresets:
    """Tests for classifier presets."""

    def test_dna(self):
        """DNA bases plus N."""
        classifier = BaseClassifier.dna()
        for c in "ACGTN":
            assert classifier.is_base(c)
        assert not classifier.is_base("U")
        assert classifier.is_unknown_base("N")
        assert not classifier.is_unknown_base("A")

    def test_rna(self):
        """RNA uses U instead of T."""
        classifier = BaseClassifier.rna()
        assert classifier.is_base("U")
        assert not classifier.is_base("T")

    def test_iupac(self):
        """Every ambiguity code is an unknown base."""
        classifier = BaseClassifier.iupac()
        for c in IUPAC_AMBIGUITY_CODES:
            assert classifier.is_base(c)
            assert classifier.is_unknown_base(c)
        assert not classifier.is_unknown_base("G")


class TestClassification:
    """Tests for per-character queries."""

    def test_non_bases(self):
        """Header and formatting characters are not bases."""
        classifier = BaseClassifier.dna()
        for c in ">\n\r -*1x":
            assert not classifier.is_base(c)
            assert not classifier.is_unknown_base(c)

    def test_case_insensitive_by_default(self):
        """Lower-case symbols are bases and match upper-case ones."""
        classifier = BaseClassifier.dna()
        assert classifier.is_base("a")
        assert classifier.is_unknown_base("n")
        assert classifier.is_same_base("g", "G")

    def test_case_sensitive(self):
        """Case-sensitive classifiers reject other cases."""
        classifier = BaseClassifier(case_sensitive=True)
        assert classifier.is_base("A")
        assert not classifier.is_base("a")

    def test_same_base(self):
        """Only identical bases are the same."""
        classifier = BaseClassifier.dna()
        assert classifier.is_same_base("A", "A")
        assert not classifier.is_same_base("A", "C")

    def test_non_bases_never_same(self):
        """Two equal non-base characters are not the same base."""
        classifier = BaseClassifier.dna()
        assert not classifier.is_same_base(">", ">")

    def test_count_non_bases(self):
        """Counting skipped characters."""
        classifier = BaseClassifier.dna()
        assert classifier.count_non_bases(">x1\nACGT\n") == 5
        assert classifier.count_non_bases("ACGTN") == 0


class TestInitialization:
    """Tests for the lookup table lifecycle."""

    def test_lazy(self):
        """The table is built on first use."""
        classifier = BaseClassifier.dna()
        assert not classifier.initialized
        assert classifier.is_base("A")
        assert classifier.initialized

    def test_idempotent(self):
        """Repeated initialization is a no-op."""
        classifier = BaseClassifier.dna()
        classifier.initialize()
        lookup = classifier._canonical
        classifier.initialize()
        assert classifier._canonical is lookup

    def test_overlapping_alphabets(self):
        """A symbol cannot be both known and unknown."""
        with pytest.raises(ValueError):
            BaseClassifier(known_bases="ACGT", unknown_bases="NT")

    def test_independent_instances(self):
        """Classifiers do not share state."""
        dna = BaseClassifier.dna()
        custom = BaseClassifier(known_bases="ACGT", unknown_bases="NU")
        assert custom.is_unknown_base("U")
        assert not dna.is_base("U")
