"""Protocol definitions for structural typing."""

from typing import Protocol, runtime_checkable

from .models import Step


@runtime_checkable
class TraversalLike(Protocol):
    """Protocol for anything that can be advanced one step at a time."""

    def advance(self) -> Step:
        """Return the next step."""
        ...


@runtime_checkable
class SupportsTraversal(Protocol):
    """Protocol for anything that can open a fresh traversal."""

    def get_traversal(self) -> TraversalLike:
        """Open a fresh traversal."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
