"""Tests for the numpy/pandas adapters."""

import numpy as np
import pandas as pd
import pytest

from indexpair import (
    IndexPair,
    from_array,
    from_keys,
    from_multiindex,
    to_array,
    to_keys,
    to_multiindex,
)


class TestArrays:
    """Test conversion to and from (n, 2) arrays."""

    def test_from_array(self):
        pairs = from_array(np.array([[0, 1], [2, 3]]))
        assert pairs == [IndexPair(0, 1), IndexPair(2, 3)]
        assert all(type(p.section) is int for p in pairs)

    def test_from_nested_list(self):
        assert from_array([[4, 5]]) == [IndexPair(4, 5)]

    def test_empty(self):
        assert from_array([]) == []
        assert from_array(np.empty((0, 2), dtype=np.int64)) == []

    @pytest.mark.parametrize(
        "array",
        [np.array([1, 2]), np.array([[1, 2, 3]]), np.zeros((2, 2, 2), dtype=int)],
    )
    def test_wrong_shape(self, array):
        with pytest.raises(ValueError, match="shape"):
            from_array(array)

    def test_non_integer_dtype(self):
        with pytest.raises(ValueError, match="integer array"):
            from_array(np.array([[0.5, 1.0]]))
        with pytest.raises(ValueError, match="integer array"):
            from_array(np.array([[True, False]]))

    def test_to_array(self, sample_pairs):
        arr = to_array(sample_pairs)
        assert arr.shape == (3, 2)
        assert arr.dtype == np.int64
        np.testing.assert_array_equal(arr, [[0, 0], [0, 1], [2, 5]])

    def test_to_array_empty(self):
        arr = to_array([])
        assert arr.shape == (0, 2)
        assert arr.dtype == np.int64

    def test_array_round_trip(self, sample_pairs):
        assert from_array(to_array(sample_pairs)) == sample_pairs


class TestMultiIndex:
    """Test conversion to and from pandas MultiIndex objects."""

    def test_to_multiindex(self, sample_pairs):
        index = to_multiindex(sample_pairs)
        assert isinstance(index, pd.MultiIndex)
        assert list(index.names) == ["section", "row"]
        assert list(index) == [(0, 0), (0, 1), (2, 5)]

    def test_from_multiindex(self, sample_pairs):
        assert from_multiindex(to_multiindex(sample_pairs)) == sample_pairs

    def test_three_levels_rejected(self):
        index = pd.MultiIndex.from_tuples([(1, 2, 3), (4, 5, 6)])
        assert from_multiindex(index) == [None, None]

    def test_flat_index_rejected(self):
        assert from_multiindex(pd.Index([1, 2])) == [None, None]

    def test_non_integer_levels_rejected(self):
        index = pd.MultiIndex.from_tuples([("a", 1), ("b", 2)])
        assert from_multiindex(index) == [None, None]

    def test_dataframe_lookup(self, sample_pairs):
        df = pd.DataFrame({"value": [10, 20, 30]}, index=to_multiindex(sample_pairs))
        assert df.loc[IndexPair(2, 5).to_tuple(), "value"] == 30
        assert from_multiindex(df.index)[1] == IndexPair(0, 1)


class TestKeys:
    """Test bulk canonical-key conversion."""

    def test_to_keys(self, sample_pairs):
        assert to_keys(sample_pairs) == ["0,0", "0,1", "2,5"]

    def test_from_keys(self):
        assert from_keys(["0,0", "bad", "3,-1"]) == [
            IndexPair(0, 0),
            None,
            IndexPair(3, -1),
        ]

    def test_keys_round_trip(self, sample_pairs):
        assert from_keys(to_keys(sample_pairs)) == sample_pairs
