"""
nwdist - Needleman-Wunsch Edit Distance

Global-alignment edit distance between genetic sequences, tolerant of
non-base characters such as FASTA headers and line breaks.

Three engines evaluate the same recurrence and always agree:
    - recursive: memoized top-down evaluation
    - iterative: bottom-up row-major tabulation
    - blocked: bottom-up tabulation swept in cache-sized tiles

Modules:
    - bases: character-to-base classification
    - costs: edit cost model shared by all engines
    - table: flat dynamic-programming table
    - recursive, iterative, blocked: the engines
    - distance: engine selection and one-call helpers
    - sequence: raw sequence container and file loading
"""

from .bases import BaseClassifier
from .costs import CostModel
from .table import DistanceTable, DistanceError, TableAllocationError, NOT_YET_COMPUTED
from .engine import DistanceEngine
from .recursive import RecursiveEngine
from .iterative import IterativeEngine
from .blocked import BlockedEngine, DEFAULT_BLOCK_SIZE
from .distance import Method, make_engine, edit_distance, compare_engines
from .sequence import GeneticSequence, SequenceError, InvalidLengthError

__version__ = "0.1.0"
__all__ = [
    "BaseClassifier",
    "CostModel",
    "DistanceTable",
    "DistanceError",
    "TableAllocationError",
    "NOT_YET_COMPUTED",
    "DistanceEngine",
    "RecursiveEngine",
    "IterativeEngine",
    "BlockedEngine",
    "DEFAULT_BLOCK_SIZE",
    "Method",
    "make_engine",
    "edit_distance",
    "compare_engines",
    "GeneticSequence",
    "SequenceError",
    "InvalidLengthError",
]
