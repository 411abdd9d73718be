"""Type aliases for indexpair.

This module defines type aliases used throughout the package for clarity
and consistency. The actual data structures are in core.py.
"""

from collections.abc import Sequence

import numpy as np

# Type aliases for the two components
Section = int
"""Alias for the first (outer) component of an index pair."""

Row = int
"""Alias for the second (inner) component of an index pair."""

IndexPath = Sequence[int] | np.ndarray
"""Alias for a multi-component index path handed over by a host framework.

Any ordered container with ``len()`` and positional access qualifies: lists,
tuples, one-dimensional integer arrays, or the label tuples of a
``pandas.MultiIndex``.
"""
