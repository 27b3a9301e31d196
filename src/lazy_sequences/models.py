"""Data models shared by the protocol, operators and demo."""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class Step:
    """Result of advancing a traversal once.

    ``value`` is only meaningful when ``done`` is False.
    """

    done: bool
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "Step":
        """Create a step carrying a value."""
        return cls(done=False, value=value)


# Shared completion step
DONE = Step(done=True)


@dataclass
class ScenarioResult:
    """Outcome of one demo scenario."""

    name: str
    values: List[Any] = field(default_factory=list)
    expected: List[Any] = field(default_factory=list)
    elapsed_time: float = 0.0

    @property
    def passed(self) -> bool:
        """True when the scenario produced what it expected."""
        return self.values == self.expected
