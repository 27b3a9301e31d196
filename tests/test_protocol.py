"""Tests for the sequence protocol and the demo entry point."""

import pytest

from lazy_sequences import main as demo
from lazy_sequences.config import SequenceConfig
from lazy_sequences.containers import Stack
from lazy_sequences.data_generator import NaturalNumbers
from lazy_sequences.models import DONE, Step
from lazy_sequences.operators import first, materialize, take_until
from lazy_sequences.protocols import SupportsTraversal, TraversalLike
from lazy_sequences.sequence_interface import Traversal, advance, get_traversal


class Countdown:
    """Sequence implemented structurally, without the base classes."""

    def __init__(self, start):
        self.start = start

    def get_traversal(self):
        return CountdownTraversal(self.start)


class CountdownTraversal:
    def __init__(self, current):
        self.current = current

    def advance(self):
        if self.current < 0:
            return DONE
        value = self.current
        self.current -= 1
        return Step.of(value)


def test_get_traversal_and_advance():
    """Test the two protocol functions."""
    traversal = get_traversal(Stack([1, 2]))

    assert advance(traversal) == Step.of(2)
    assert advance(traversal) == Step.of(1)
    assert advance(traversal) == DONE
    assert advance(traversal) == DONE


def test_protocol_type_errors():
    """Test that non-conforming objects are rejected."""
    with pytest.raises(TypeError, match="not a sequence"):
        get_traversal([1, 2, 3])

    with pytest.raises(TypeError, match="not a traversal"):
        advance(iter([1, 2, 3]))


def test_structural_sequence():
    """Test that objects matching the protocol work with the operators."""
    countdown = Countdown(3)

    assert isinstance(countdown, SupportsTraversal)
    assert isinstance(countdown.get_traversal(), TraversalLike)
    assert materialize(countdown) == [3, 2, 1, 0]
    assert materialize(take_until(lambda x: x < 2, countdown)) == [3, 2]
    assert first(Countdown(-1), default="none") == "none"


def test_traversal_is_python_iterator():
    """Test that traversals and sequences work in for loops."""
    traversal = NaturalNumbers().get_traversal()

    assert isinstance(traversal, Traversal)
    assert iter(traversal) is traversal
    assert next(traversal) == 0
    assert next(traversal) == 1

    collected = []
    for value in Stack([5, 10, 2000]):
        collected.append(value)
    assert collected == [2000, 10, 5]


def test_exhausted_traversal_raises_stop_iteration():
    """Test that a finished traversal keeps raising StopIteration."""
    traversal = Stack([1]).get_traversal()

    assert list(traversal) == [1]
    with pytest.raises(StopIteration):
        next(traversal)


def test_demo_scenarios_pass():
    """Test that every demo scenario produces its expected values."""
    results = demo.build_scenarios(SequenceConfig(demo_limit=5))

    assert len(results) == 5
    assert all(result.passed for result in results)
    assert results[-1].values == [0, 1, 4, 9, 16]


def test_main_returns_success(monkeypatch, capsys):
    """Test running the demo end to end."""
    monkeypatch.setenv("LAZY_SEQUENCES_DEMO_LIMIT", "6")
    monkeypatch.setenv("LAZY_SEQUENCES_BATCH_SIZE", "4")
    monkeypatch.delenv("LAZY_SEQUENCES_VERBOSE", raising=False)

    assert demo.main() == 0
    assert "Scenarios passed: 5/5" in capsys.readouterr().out


def test_main_reports_configuration_error(monkeypatch):
    """Test that invalid configuration gives a failing exit code."""
    monkeypatch.setenv("LAZY_SEQUENCES_BATCH_SIZE", "0")

    assert demo.main() == 1
