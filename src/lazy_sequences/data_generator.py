"""Source sequences: counters, wrapped iterables and random streams."""

import logging
import random
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence as TypingSequence

from faker import Faker

from .models import DONE, Step
from .sequence_interface import Sequence, Traversal

logger = logging.getLogger(__name__)

DEFAULT_FAKE_FIELDS = ("name", "email", "city", "job")


class CountingTraversal(Traversal):
    """Counts upward forever from its own starting point."""

    def __init__(self, start: int, step: int):
        self._current = start
        self._increment = step

    def _step(self) -> Step:
        value = self._current
        self._current += self._increment
        return Step.of(value)


class NaturalNumbers(Sequence):
    """Infinite, replayable sequence ``start, start + step, ...``."""

    def __init__(self, start: int = 0, step: int = 1):
        self.start = start
        self.step = step

    def get_traversal(self) -> CountingTraversal:
        return CountingTraversal(self.start, self.step)


class IteratorTraversal(Traversal):
    """Adapts a Python iterator to the traversal protocol."""

    def __init__(self, iterator: Iterator[Any]):
        self._iterator = iterator

    def _step(self) -> Step:
        try:
            return Step.of(next(self._iterator))
        except StopIteration:
            return DONE


class IterableSequence(Sequence):
    """
    Wraps a Python iterable as a sequence.

    Each traversal calls ``iter()`` afresh, so a collection such as a list
    or tuple is replayable while a one-shot iterator (a generator, a file
    object) is not: its second traversal continues where the first one
    stopped.
    """

    def __init__(self, iterable: Iterable[Any]):
        self._iterable = iterable
        self.replayable = iter(iterable) is not iterable

    def get_traversal(self) -> IteratorTraversal:
        return IteratorTraversal(iter(self._iterable))


def from_iterable(iterable: Iterable[Any]) -> IterableSequence:
    """Wrap ``iterable`` as a sequence."""
    return IterableSequence(iterable)


class GeneratorTraversal(Traversal):
    """Pulls values from a stream's shared generator."""

    def __init__(self, generator: Iterator[Any]):
        self._generator = generator

    def _step(self) -> Step:
        return Step.of(next(self._generator))


class RandomNumbers(Sequence):
    """
    Infinite stream of random integers in ``[low, high]``.

    All traversals share one random generator, so a second traversal
    continues the stream instead of replaying it.
    """

    replayable = False

    def __init__(self, low: int = 0, high: int = 100, seed: Optional[int] = None):
        """
        Initialize stream.

        Args:
            low: Smallest possible value
            high: Largest possible value
            seed: Random seed for reproducibility

        Raises:
            ValueError: If ``low`` is greater than ``high``
        """
        if low > high:
            raise ValueError("low must not be greater than high")
        self.low = low
        self.high = high
        self._random = random.Random(seed)

    def _numbers(self) -> Iterator[int]:
        while True:
            yield self._random.randint(self.low, self.high)

    def get_traversal(self) -> GeneratorTraversal:
        return GeneratorTraversal(self._numbers())


class FakeRecordStream(Sequence):
    """
    Infinite stream of fake records built with Faker.

    Like ``RandomNumbers`` the Faker instance is shared by all traversals,
    so the stream is not replayable.
    """

    replayable = False

    def __init__(self, fields: TypingSequence[str] = DEFAULT_FAKE_FIELDS, seed: Optional[int] = 42):
        """
        Initialize the record stream.

        Args:
            fields: Faker provider names, one per record key
            seed: Random seed for reproducibility

        Raises:
            ValueError: If ``fields`` is empty or names an unknown provider
        """
        if not fields:
            raise ValueError("fields must not be empty")

        self.faker = Faker()
        if seed is not None:
            self.faker.seed_instance(seed)

        unknown = [name for name in fields if not callable(getattr(self.faker, name, None))]
        if unknown:
            raise ValueError(f"Unknown Faker providers: {', '.join(unknown)}")

        self.fields: List[str] = list(fields)
        self._generated = 0

    def _records(self) -> Iterator[Dict[str, Any]]:
        while True:
            record = {name: getattr(self.faker, name)() for name in self.fields}
            self._generated += 1
            if self._generated % 10000 == 0:
                logger.debug(f"Generated {self._generated:,} fake records...")
            yield record

    def get_traversal(self) -> GeneratorTraversal:
        return GeneratorTraversal(self._records())
