"""Operators that build new sequences out of existing ones.

Every operator wraps its input lazily: nothing is computed until a
consumer advances a traversal of the result, and each fresh traversal of
the result opens a fresh traversal of the input. A result is therefore
replayable whenever its input is.

Operators that consume a whole traversal (``materialize`` without a
limit, ``fold``) and ``filter_with`` over a sequence with no matching
element never return on infinite input. Bound the input with
``take_until``, ``take`` or a ``limit`` first.
"""

import logging
from numbers import Integral
from typing import Any, Callable, List, Optional

from .models import DONE, Step
from .protocols import SupportsTraversal, TraversalLike
from .sequence_interface import Sequence, Traversal, get_traversal

logger = logging.getLogger(__name__)


def _check_sequence(sequence: Any) -> None:
    if not isinstance(sequence, SupportsTraversal):
        raise TypeError(f"{type(sequence).__name__} object is not a sequence")


def _check_integer(name: str, value: Any) -> None:
    if not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


class _WrappingSequence(Sequence):
    """Base for operator results that wrap a single input sequence."""

    def __init__(self, source: SupportsTraversal):
        self._source = source

    @property
    def replayable(self) -> bool:
        return getattr(self._source, "replayable", True)


class MappedTraversal(Traversal):
    """Applies a transform to each value of the input traversal."""

    def __init__(self, source: TraversalLike, transform: Callable[[Any], Any]):
        self._source = source
        self._transform = transform

    def _step(self) -> Step:
        step = self._source.advance()
        if step.done:
            return DONE
        return Step.of(self._transform(step.value))


class MappedSequence(_WrappingSequence):
    """Sequence of ``transform(value)`` for each input value."""

    def __init__(self, transform: Callable[[Any], Any], source: SupportsTraversal):
        super().__init__(source)
        self._transform = transform

    def get_traversal(self) -> MappedTraversal:
        return MappedTraversal(get_traversal(self._source), self._transform)


class FilteredTraversal(Traversal):
    """Skips input values that do not satisfy the predicate."""

    def __init__(self, source: TraversalLike, predicate: Callable[[Any], bool]):
        self._source = source
        self._predicate = predicate

    def _step(self) -> Step:
        while True:
            step = self._source.advance()
            if step.done or self._predicate(step.value):
                return step


class FilteredSequence(_WrappingSequence):
    """Sequence of the input values that satisfy a predicate."""

    def __init__(self, predicate: Callable[[Any], bool], source: SupportsTraversal):
        super().__init__(source)
        self._predicate = predicate

    def get_traversal(self) -> FilteredTraversal:
        return FilteredTraversal(get_traversal(self._source), self._predicate)


class TakeUntilTraversal(Traversal):
    """Stops at the first input value satisfying the predicate."""

    def __init__(self, source: TraversalLike, predicate: Callable[[Any], bool]):
        self._source = source
        self._predicate = predicate

    def _step(self) -> Step:
        step = self._source.advance()
        if step.done or self._predicate(step.value):
            return DONE
        return step


class TakeUntilSequence(_WrappingSequence):
    """Prefix of the input that ends before the first matching value."""

    def __init__(self, predicate: Callable[[Any], bool], source: SupportsTraversal):
        super().__init__(source)
        self._predicate = predicate

    def get_traversal(self) -> TakeUntilTraversal:
        return TakeUntilTraversal(get_traversal(self._source), self._predicate)


class RestSequence(_WrappingSequence):
    """Sequence of every input value except the first."""

    def get_traversal(self) -> TraversalLike:
        traversal = get_traversal(self._source)
        traversal.advance()
        return traversal


class TakeTraversal(Traversal):
    """Yields at most ``count`` values of the input traversal."""

    def __init__(self, source: TraversalLike, count: int):
        self._source = source
        self._remaining = count

    def _step(self) -> Step:
        if self._remaining <= 0:
            return DONE
        self._remaining -= 1
        return self._source.advance()


class TakeSequence(_WrappingSequence):
    """Bounded prefix of the input."""

    def __init__(self, count: int, source: SupportsTraversal):
        super().__init__(source)
        self._count = count

    def get_traversal(self) -> TakeTraversal:
        return TakeTraversal(get_traversal(self._source), self._count)


class BatchedTraversal(Traversal):
    """Groups successive input values into lists."""

    def __init__(self, source: TraversalLike, size: int):
        self._source = source
        self._size = size

    def _step(self) -> Step:
        batch: List[Any] = []
        while len(batch) < self._size:
            step = self._source.advance()
            if step.done:
                break
            batch.append(step.value)

        # No trailing empty batch
        if not batch:
            return DONE
        return Step.of(batch)


class BatchedSequence(_WrappingSequence):
    """Sequence of lists of at most ``size`` input values."""

    def __init__(self, size: int, source: SupportsTraversal):
        super().__init__(source)
        self._size = size

    def get_traversal(self) -> BatchedTraversal:
        return BatchedTraversal(get_traversal(self._source), self._size)


def map_with(transform: Callable[[Any], Any], sequence: SupportsTraversal) -> MappedSequence:
    """
    Lazily apply ``transform`` to every value of ``sequence``.

    Args:
        transform: Function applied once per produced value
        sequence: Input sequence

    Returns:
        A new sequence, replayable when ``sequence`` is
    """
    _check_sequence(sequence)
    return MappedSequence(transform, sequence)


def filter_with(predicate: Callable[[Any], bool], sequence: SupportsTraversal) -> FilteredSequence:
    """
    Keep only the values of ``sequence`` that satisfy ``predicate``.

    If ``sequence`` is infinite and no value ever matches, advancing the
    result never returns.

    Args:
        predicate: Function deciding which values to keep
        sequence: Input sequence

    Returns:
        A new sequence, replayable when ``sequence`` is
    """
    _check_sequence(sequence)
    return FilteredSequence(predicate, sequence)


def take_until(predicate: Callable[[Any], bool], sequence: SupportsTraversal) -> TakeUntilSequence:
    """
    Truncate ``sequence`` before the first value satisfying ``predicate``.

    The matching value itself is not produced.

    Args:
        predicate: Stop condition
        sequence: Input sequence

    Returns:
        A new sequence, replayable when ``sequence`` is
    """
    _check_sequence(sequence)
    return TakeUntilSequence(predicate, sequence)


def first(sequence: SupportsTraversal, default: Any = None) -> Any:
    """
    Return the first value of a fresh traversal of ``sequence``.

    Args:
        sequence: Input sequence
        default: Returned when ``sequence`` is empty

    Returns:
        The first value, or ``default``
    """
    step = get_traversal(sequence).advance()
    if step.done:
        return default
    return step.value


def rest(sequence: SupportsTraversal) -> RestSequence:
    """
    Everything but the first value of ``sequence``.

    Each traversal of the result skips one value of its own fresh input
    traversal; the skip is never shared between traversals.
    """
    _check_sequence(sequence)
    return RestSequence(sequence)


def take(count: int, sequence: SupportsTraversal) -> TakeSequence:
    """
    At most ``count`` values from the start of ``sequence``.

    Raises:
        TypeError: If ``count`` is not an integer
        ValueError: If ``count`` is negative
    """
    _check_sequence(sequence)
    _check_integer("count", count)
    if count < 0:
        raise ValueError("count must not be negative")
    return TakeSequence(count, sequence)


def batch(size: int, sequence: SupportsTraversal) -> BatchedSequence:
    """
    Group the values of ``sequence`` into lists of ``size``.

    The last batch may be shorter; an empty input gives no batches.

    Raises:
        TypeError: If ``size`` is not an integer
        ValueError: If ``size`` is not positive
    """
    _check_sequence(sequence)
    _check_integer("batch size", size)
    if size <= 0:
        raise ValueError("batch size must be positive")
    return BatchedSequence(size, sequence)


def fold(reducer: Callable[[Any, Any], Any], initial: Any, sequence: SupportsTraversal) -> Any:
    """
    Combine every value of one traversal from left to right.

    Args:
        reducer: Function of (accumulator, value) returning the new accumulator
        initial: Starting accumulator
        sequence: Finite input sequence

    Returns:
        The final accumulator
    """
    accumulator = initial
    traversal = get_traversal(sequence)
    step = traversal.advance()
    while not step.done:
        accumulator = reducer(accumulator, step.value)
        step = traversal.advance()
    return accumulator


def materialize(sequence: SupportsTraversal, limit: Optional[int] = None) -> List[Any]:
    """
    Collect the values of one traversal into a list.

    Without ``limit`` this never returns on an infinite sequence.

    Args:
        sequence: Input sequence
        limit: Maximum number of values to collect

    Returns:
        The collected values, in traversal order

    Raises:
        TypeError: If ``limit`` is not an integer
        ValueError: If ``limit`` is negative
    """
    if limit is not None:
        _check_integer("limit", limit)
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")

    values: List[Any] = []
    traversal = get_traversal(sequence)
    while limit is None or len(values) < limit:
        step = traversal.advance()
        if step.done:
            break
        values.append(step.value)

    logger.debug(f"Materialized {len(values)} values from {type(sequence).__name__}")
    return values
