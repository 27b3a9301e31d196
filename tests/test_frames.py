"""Tests for frames module."""

import pytest

from lazy_sequences.containers import EMPTY, linked_list
from lazy_sequences.data_generator import FakeRecordStream, NaturalNumbers, from_iterable
from lazy_sequences.frames import dataframe_batches, to_arrow_table, to_dataframe
from lazy_sequences.operators import map_with


def test_to_dataframe_scalars():
    """Test collecting plain values into a single column."""
    df = to_dataframe(linked_list([1, 4, 9, 16, 25]))

    assert list(df.columns) == ["value"]
    assert df["value"].tolist() == [1, 4, 9, 16, 25]


def test_to_dataframe_records_with_limit():
    """Test collecting a bounded prefix of records."""
    people = map_with(lambda n: {"id": n, "name": f"user_{n}"}, NaturalNumbers())

    df = to_dataframe(people, limit=3)

    assert len(df) == 3
    assert list(df.columns) == ["id", "name"]
    assert df["name"].tolist() == ["user_0", "user_1", "user_2"]


def test_to_dataframe_empty():
    """Test that an empty sequence gives an empty DataFrame."""
    df = to_dataframe(EMPTY, column="n")

    assert len(df) == 0
    assert list(df.columns) == ["n"]


def test_to_arrow_table():
    """Test collecting values into a PyArrow table."""
    table = to_arrow_table(NaturalNumbers(), limit=5, column="n")

    assert table.num_rows == 5
    assert table.column_names == ["n"]
    assert table.column("n").to_pylist() == [0, 1, 2, 3, 4]


def test_to_arrow_table_records():
    """Test collecting mappings into a PyArrow table."""
    table = to_arrow_table(from_iterable([{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]))

    assert table.num_rows == 2
    assert table.num_columns == 2
    assert table.column("b").to_pylist() == ["x", "y"]


def test_dataframe_batches():
    """Test streaming a bounded infinite sequence in DataFrame batches."""
    frames = list(dataframe_batches(NaturalNumbers(), batch_size=4, limit=10))

    assert [len(df) for df in frames] == [4, 4, 2]
    assert frames[-1]["value"].tolist() == [8, 9]
    assert frames[-1]["batch_number"].unique().tolist() == [3]


def test_dataframe_batches_is_lazy():
    """Test that batches are built only when requested."""
    batches = dataframe_batches(NaturalNumbers(), batch_size=3)

    first_df = next(batches)
    second_df = next(batches)

    assert first_df["value"].tolist() == [0, 1, 2]
    assert second_df["value"].tolist() == [3, 4, 5]


def test_dataframe_batches_fake_records():
    """Test batching fake records into DataFrames."""
    stream = FakeRecordStream(fields=["name", "city"], seed=1)

    frames = list(dataframe_batches(stream, batch_size=5, limit=12))

    assert sum(len(df) for df in frames) == 12
    assert list(frames[0].columns) == ["name", "city", "batch_number"]


def test_dataframe_batches_invalid_size():
    """Test that a non-positive batch size raises on first use."""
    with pytest.raises(ValueError, match="must be positive"):
        next(dataframe_batches(NaturalNumbers(), batch_size=0))
