"""Lazy Sequences - a traversal protocol and composable lazy operators."""

__version__ = "0.1.0"

from .containers import EMPTY, EmptyList, Pair, Stack, cons, linked_list
from .data_generator import FakeRecordStream, IterableSequence, NaturalNumbers, RandomNumbers, from_iterable
from .frames import dataframe_batches, to_arrow_table, to_dataframe
from .models import DONE, Step
from .operators import batch, filter_with, first, fold, map_with, materialize, rest, take, take_until
from .protocols import SupportsTraversal, TraversalLike
from .sequence_interface import Sequence, Traversal, advance, get_traversal

__all__ = [
    # Protocol
    "Step",
    "DONE",
    "Sequence",
    "Traversal",
    "SupportsTraversal",
    "TraversalLike",
    "get_traversal",
    "advance",
    # Operators
    "map_with",
    "filter_with",
    "take_until",
    "first",
    "rest",
    "materialize",
    "take",
    "batch",
    "fold",
    # Containers
    "Stack",
    "Pair",
    "EmptyList",
    "EMPTY",
    "cons",
    "linked_list",
    # Sources
    "NaturalNumbers",
    "IterableSequence",
    "from_iterable",
    "RandomNumbers",
    "FakeRecordStream",
    # Frames
    "to_dataframe",
    "to_arrow_table",
    "dataframe_batches",
]
