"""Adapters between index pairs and the numpy/pandas table stack.

pandas and numpy play the role of the host framework here: a two-level
``pandas.MultiIndex`` or an ``(n, 2)`` integer array is the natural way a
collection of (section, row) locations shows up in tabular code. These
functions convert at that boundary and leave ``IndexPair`` itself
framework-independent.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd

from .core import IndexPair

LEVEL_NAMES = ("section", "row")
"""Level names used for MultiIndex objects built by ``to_multiindex``."""


def from_array(array: np.ndarray | Sequence[Sequence[int]]) -> list[IndexPair]:
    """Convert an ``(n, 2)`` integer array into index pairs.

    Parameters
    ----------
    array : np.ndarray or nested sequence
        One (section, row) pair per row.

    Returns
    -------
    list[IndexPair]
        Pairs in row order.

    Raises
    ------
    ValueError
        If the array is not two-dimensional with two integer columns.
    """
    arr = np.asarray(array)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an array of shape (n, 2), got {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Expected an integer array, got dtype {arr.dtype}")
    return [IndexPair(section=int(s), row=int(r)) for s, r in arr]


def to_array(pairs: Iterable[IndexPair]) -> np.ndarray:
    """Stack index pairs into an ``(n, 2)`` ``int64`` array."""
    rows = [pair.to_tuple() for pair in pairs]
    if not rows:
        return np.empty((0, 2), dtype=np.int64)
    return np.array(rows, dtype=np.int64)


def to_multiindex(pairs: Iterable[IndexPair]) -> pd.MultiIndex:
    """Build a two-level MultiIndex named ``("section", "row")``."""
    pairs = list(pairs)
    return pd.MultiIndex.from_arrays(
        [[p.section for p in pairs], [p.row for p in pairs]],
        names=list(LEVEL_NAMES),
    )


def from_multiindex(index: pd.Index) -> list[IndexPair | None]:
    """Convert each label of an index into an ``IndexPair``.

    Labels are treated as index paths, so only two-component integer labels
    convert; every other label maps to None.
    """
    return [IndexPair.from_index_path(label) for label in index]


def to_keys(pairs: Iterable[IndexPair]) -> list[str]:
    """Canonical string keys, one per pair."""
    return [pair.raw_value for pair in pairs]


def from_keys(keys: Iterable[str]) -> list[IndexPair | None]:
    """Parse canonical string keys. Malformed keys map to None."""
    return [IndexPair.from_string(key) for key in keys]
