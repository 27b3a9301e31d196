"""Abstract interface for lazy sequences and their traversals."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional

from .models import DONE, Step
from .protocols import SupportsTraversal, TraversalLike

logger = logging.getLogger(__name__)


class Traversal(ABC):
    """Stateful, forward-only cursor over a sequence.

    Subclasses implement ``_step``. ``advance`` guarantees that once a
    traversal has reported completion it keeps reporting completion, no
    matter what ``_step`` would return afterwards.

    A traversal is also a plain Python iterator.
    """

    _finished = False

    def advance(self) -> Step:
        """Advance once and return the resulting step."""
        if self._finished:
            return DONE
        step = self._step()
        if step.done:
            self._finished = True
            return DONE
        return step

    @abstractmethod
    def _step(self) -> Step:
        """Produce the next step from the traversal's own state."""
        pass

    def __iter__(self) -> "Traversal":
        return self

    def __next__(self) -> Any:
        step = self.advance()
        if step.done:
            raise StopIteration
        return step.value


class Sequence(ABC):
    """Anything that can hand out fresh traversals on request.

    ``replayable`` documents whether every fresh traversal starts again at
    the first element. It is a promise made by the implementer, the
    protocol does not check it.
    """

    replayable = True

    @abstractmethod
    def get_traversal(self) -> TraversalLike:
        """Open a fresh traversal.

        Returns:
            A new traversal with its own cursor state
        """
        pass

    def __iter__(self) -> Iterator[Any]:
        """Iterate a fresh traversal with a for loop."""
        traversal = self.get_traversal()
        while True:
            step = traversal.advance()
            if step.done:
                return
            yield step.value

    # Fluent helpers, delegating to the operator functions

    def map(self, transform: Callable[[Any], Any]) -> "Sequence":
        from .operators import map_with

        return map_with(transform, self)

    def filter(self, predicate: Callable[[Any], bool]) -> "Sequence":
        from .operators import filter_with

        return filter_with(predicate, self)

    def take_until(self, predicate: Callable[[Any], bool]) -> "Sequence":
        from .operators import take_until

        return take_until(predicate, self)

    def take(self, count: int) -> "Sequence":
        from .operators import take

        return take(count, self)

    def batch(self, size: int) -> "Sequence":
        from .operators import batch

        return batch(size, self)

    def rest(self) -> "Sequence":
        from .operators import rest

        return rest(self)

    def first(self, default: Any = None) -> Any:
        from .operators import first

        return first(self, default)

    def fold(self, reducer: Callable[[Any, Any], Any], initial: Any) -> Any:
        from .operators import fold

        return fold(reducer, initial, self)

    def materialize(self, limit: Optional[int] = None) -> List[Any]:
        from .operators import materialize

        return materialize(self, limit)


def get_traversal(sequence: SupportsTraversal) -> TraversalLike:
    """Open a fresh traversal of ``sequence``.

    Raises:
        TypeError: If ``sequence`` does not implement ``get_traversal``
    """
    if not isinstance(sequence, SupportsTraversal):
        raise TypeError(f"{type(sequence).__name__} object is not a sequence")
    traversal = sequence.get_traversal()
    logger.debug(f"Opened traversal {type(traversal).__name__} of {type(sequence).__name__}")
    return traversal


def advance(traversal: TraversalLike) -> Step:
    """Advance ``traversal`` once.

    Raises:
        TypeError: If ``traversal`` does not implement ``advance``
    """
    if not isinstance(traversal, TraversalLike):
        raise TypeError(f"{type(traversal).__name__} object is not a traversal")
    return traversal.advance()
