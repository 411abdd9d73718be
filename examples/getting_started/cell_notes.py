"""Storing per-cell notes keyed by index pair.

This example demonstrates:
1. Building index pairs from integers, index paths and strings
2. Persisting them as canonical string keys
3. Moving between index pairs and a pandas MultiIndex
"""

import json
import logging

import numpy as np
import pandas as pd

from indexpair import (
    IndexPair,
    from_array,
    from_multiindex,
    get_logger,
    to_keys,
    to_multiindex,
)

# Set up logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = get_logger(__name__)


def main():
    notes = {
        IndexPair(section=0, row=0): "header row",
        IndexPair.from_index_path([1, 3]): "needs review",
        IndexPair.parse("2,7"): "duplicate of 1,3",
    }

    # Canonical keys survive a JSON round trip
    payload = json.dumps({str(pair): text for pair, text in notes.items()})
    restored = {IndexPair.parse(key): text for key, text in json.loads(payload).items()}
    assert restored == notes
    logger.info("Stored keys: %s", to_keys(notes))

    # Malformed keys are rejected, not half-parsed
    for key in ["3,4", "3;4", "3,4,5"]:
        logger.info("%-6s -> %r", key, IndexPair.from_string(key))

    # Index a frame by (section, row) and read it back
    locations = from_array(np.array([[0, 0], [1, 3], [2, 7]]))
    df = pd.DataFrame(
        {"note": [notes[p] for p in locations]}, index=to_multiindex(locations)
    )
    print(df)
    for pair in from_multiindex(df.index):
        logger.info("%r", pair)


if __name__ == "__main__":
    main()
