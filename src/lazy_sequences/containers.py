"""Demonstration containers implementing the sequence protocol."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Union

from .models import DONE, Step
from .sequence_interface import Sequence, Traversal


class StackTraversal(Traversal):
    """
    Walks a stack from the top down.

    The cursor is owned by the traversal and starts at the top of the
    stack as it stood when the traversal was opened. Any push or pop after
    that ends the traversal, so it never yields a value that was not on
    the stack when it was opened.
    """

    def __init__(self, stack: "Stack"):
        self._stack = stack
        self._cursor = len(stack) - 1
        self._version = stack._version

    def _step(self) -> Step:
        if self._cursor < 0 or self._version != self._stack._version:
            return DONE
        value = self._stack._items[self._cursor]
        self._cursor -= 1
        return Step.of(value)


class Stack(Sequence):
    """Last-in/first-out bag whose traversals yield the newest value first."""

    def __init__(self, values: Iterable[Any] = ()):
        """
        Initialize stack.

        Args:
            values: Initial values, pushed in order
        """
        self._items: List[Any] = []
        # Bumped on every push and pop
        self._version = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> "Stack":
        """Push ``value`` on top and return the stack."""
        self._items.append(value)
        self._version += 1
        return self

    def pop(self) -> Any:
        """
        Remove and return the top value.

        Raises:
            IndexError: If the stack is empty
        """
        if not self._items:
            raise IndexError("pop from empty stack")
        self._version += 1
        return self._items.pop()

    def peek(self) -> Any:
        """
        Return the top value without removing it.

        Raises:
            IndexError: If the stack is empty
        """
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def get_traversal(self) -> StackTraversal:
        return StackTraversal(self)


class ListTraversal(Traversal):
    """Walks a linked list front to back."""

    def __init__(self, node: "LinkedList"):
        self._node = node

    def _step(self) -> Step:
        if self._node.is_empty:
            return DONE
        value = self._node.head
        self._node = self._node.tail
        return Step.of(value)


class EmptyList(Sequence):
    """The empty linked list. There is exactly one instance, ``EMPTY``."""

    _instance = None
    is_empty = True

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def get_traversal(self) -> ListTraversal:
        return ListTraversal(self)


EMPTY = EmptyList()


@dataclass(frozen=True, repr=False, eq=False)
class Pair(Sequence):
    """Immutable linked-list node: a value and the rest of the list.

    Equality and hashing walk the list iteratively, so long lists do not
    hit the recursion limit.
    """

    head: Any
    tail: Union["Pair", EmptyList] = EMPTY

    is_empty = False

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        left: LinkedList = self
        right: LinkedList = other
        while not left.is_empty and not right.is_empty:
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return left is right

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"linked_list({list(self)!r})"

    def get_traversal(self) -> ListTraversal:
        return ListTraversal(self)


LinkedList = Union[Pair, EmptyList]


def cons(value: Any, tail: LinkedList = EMPTY) -> Pair:
    """
    Insert ``value`` in front of ``tail``.

    Raises:
        TypeError: If ``tail`` is not a linked list
    """
    if not isinstance(tail, (Pair, EmptyList)):
        raise TypeError(f"cannot cons onto {type(tail).__name__}")
    return Pair(value, tail)


def linked_list(values: Iterable[Any]) -> LinkedList:
    """Build a linked list holding ``values`` in order."""
    result: LinkedList = EMPTY
    for value in reversed(list(values)):
        result = Pair(value, result)
    return result
