"""Materialize sequences into pandas DataFrames and PyArrow tables."""

import logging
from collections.abc import Mapping
from typing import Any, Iterator, List, Optional

import pandas as pd
import pyarrow as pa

from .operators import batch, materialize, take
from .protocols import LoggerProtocol, SupportsTraversal


def _rows_to_dataframe(values: List[Any], column: str) -> pd.DataFrame:
    """Build a DataFrame from mappings (one row each) or plain values."""
    if values and all(isinstance(value, Mapping) for value in values):
        return pd.DataFrame([dict(value) for value in values])
    return pd.DataFrame({column: values})


def to_dataframe(
    sequence: SupportsTraversal, limit: Optional[int] = None, column: str = "value"
) -> pd.DataFrame:
    """
    Collect a sequence into a DataFrame.

    Mapping values become rows; any other values go into a single column.

    Args:
        sequence: Input sequence
        limit: Maximum number of values to collect
        column: Column name for non-mapping values

    Returns:
        DataFrame with one row per collected value
    """
    return _rows_to_dataframe(materialize(sequence, limit), column)


def to_arrow_table(
    sequence: SupportsTraversal, limit: Optional[int] = None, column: str = "value"
) -> pa.Table:
    """
    Collect a sequence into a PyArrow table.

    Args:
        sequence: Input sequence
        limit: Maximum number of values to collect
        column: Column name for non-mapping values

    Returns:
        PyArrow Table with one row per collected value
    """
    values = materialize(sequence, limit)
    if values and all(isinstance(value, Mapping) for value in values):
        return pa.Table.from_pylist([dict(value) for value in values])
    return pa.table({column: pa.array(values)})


def dataframe_batches(
    sequence: SupportsTraversal,
    batch_size: int,
    limit: Optional[int] = None,
    column: str = "value",
    logger: Optional[LoggerProtocol] = None,
) -> Iterator[pd.DataFrame]:
    """
    Lazily turn a sequence into DataFrames of ``batch_size`` rows.

    Only one batch is held in memory at a time.

    Args:
        sequence: Input sequence
        batch_size: Rows per DataFrame
        limit: Maximum number of values to consume
        column: Column name for non-mapping values
        logger: Logger instance (defaults to module logger)

    Yields:
        DataFrames with a ``batch_number`` column

    Raises:
        ValueError: If ``batch_size`` is not positive or ``limit`` is negative
    """
    logger = logger or logging.getLogger(__name__)
    source = take(limit, sequence) if limit is not None else sequence
    batches = batch(batch_size, source)

    for batch_num, values in enumerate(batches, 1):
        df = _rows_to_dataframe(values, column)
        df["batch_number"] = batch_num
        logger.info(f"Created DataFrame batch {batch_num} with {len(df)} records")
        yield df
