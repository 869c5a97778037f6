"""
nwdist - Sequence Type

Raw genetic sequences as handed to the distance engines.

Unlike a validated sequence type, a `GeneticSequence` keeps every character
it was given: FASTA headers, line breaks and stray symbols are left in place
and skipped by the engines at zero cost. What counts as a base is decided by
a classifier at computation time, not here.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


class SequenceError(ValueError):
    """Error types for sequence operations."""
    pass


class InvalidLengthError(SequenceError):
    """Raised when a declared length does not fit the sequence."""
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Declared length {expected} does not fit sequence of length {actual}")


@dataclass(frozen=True)
class GeneticSequence:
    """
    Immutable, 0-indexed run of characters.

    Attributes:
        bases: Raw characters, possibly including non-base characters
        id: Optional identifier (taken from the FASTA header when loaded)
        source: Optional path the characters were read from
    """
    bases: str
    id: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def new(cls, bases: str) -> 'GeneticSequence':
        return cls(bases=bases)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'GeneticSequence':
        """
        Read a whole file as one sequence.

        The file content is kept verbatim, header line included. The first
        header, if any, is also used as the sequence identifier.
        """
        path = Path(path)
        with open(path, encoding="ascii", errors="replace") as f:
            content = f.read()
        return cls(bases=content, id=header_id(content), source=str(path))

    def __len__(self) -> int:
        return len(self.bases)

    def __getitem__(self, index):
        return self.bases[index]

    def __iter__(self):
        return iter(self.bases)

    def base_count(self, classifier) -> int:
        """Number of characters the classifier recognizes as bases."""
        return len(self.bases) - classifier.count_non_bases(self.bases)

    def non_base_count(self, classifier) -> int:
        """Number of characters engines will skip."""
        return classifier.count_non_bases(self.bases)

    def __str__(self) -> str:
        if self.id:
            return f"{self.id} ({len(self.bases)} chars)"
        return self.bases


def header_id(content: str) -> Optional[str]:
    """Return the identifier from a leading FASTA header, if present."""
    if not content.startswith(">"):
        return None
    header = content[1:].split("\n", 1)[0].strip()
    if not header:
        return None
    return header.split()[0]


def characters(sequence) -> Union[str, GeneticSequence]:
    """Return an indexable view of `sequence`'s characters."""
    if isinstance(sequence, GeneticSequence):
        return sequence.bases
    return sequence


def check_length(sequence, length: int) -> int:
    """
    Validate a declared length against the sequence it describes.

    Shorter lengths select a prefix; negative or too-long lengths raise.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"Length must be an integer, got {length!r}")
    actual = len(sequence)
    if length < 0 or length > actual:
        raise InvalidLengthError(length, actual)
    return length
