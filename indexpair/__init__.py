"""indexpair: a (section, row) value type for addressing cells in tabular data.

The indexpair package provides:
- IndexPair: an immutable, hashable pair of integer components
- A canonical ``"<section>,<row>"`` string form for storage keys
- Adapters between index pairs and numpy arrays / pandas MultiIndex objects
"""

import logging
from importlib import metadata

# Core types
from .core import SEPARATOR, IndexPair, MalformedIndexPairError

# Framework adapters
from .frames import (
    from_array,
    from_keys,
    from_multiindex,
    to_array,
    to_keys,
    to_multiindex,
)
from .types import IndexPath, Row, Section

try:
    __version__ = metadata.version("indexpair")
except metadata.PackageNotFoundError:
    # Fallback for development installs
    __version__ = "0.1.0"

__all__ = [
    # Core types
    "IndexPair",
    "MalformedIndexPairError",
    "SEPARATOR",
    "IndexPath",
    "Row",
    "Section",
    # Adapters
    "from_array",
    "to_array",
    "from_multiindex",
    "to_multiindex",
    "from_keys",
    "to_keys",
    # Logging
    "get_logger",
]


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for the indexpair package.

    Parameters
    ----------
    name : str | None, optional
        Logger name. If None, uses the package name.

    Returns
    -------
    logging.Logger
        Logger instance. Handlers are left to the application.
    """
    if name is None:
        name = __name__.split(".")[0]
    return logging.getLogger(name)


logging.getLogger(__name__).addHandler(logging.NullHandler())
