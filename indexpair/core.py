"""Core value type for indexpair.

This module defines the fundamental building block of the package:
- IndexPair: a (section, row) location with a canonical string form
- MalformedIndexPairError: raised by the strict parser on bad input

The canonical form is ``"<section>,<row>"``. ``IndexPair.from_string`` and
``IndexPair.from_index_path`` return ``None`` for input they cannot accept;
only ``IndexPair.parse`` raises.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from .types import IndexPath, Row, Section

logger = logging.getLogger(__name__)

SEPARATOR = ","
"""Separator between section and row in the canonical string form."""

# One base-10 component: optional minus sign, ASCII digits only.
_COMPONENT = re.compile(r"-?[0-9]+")


class MalformedIndexPairError(ValueError):
    """Raised when text is not in the canonical ``"<section>,<row>"`` form."""

    def __init__(self, text: object):
        self.text = text
        super().__init__(
            f"Malformed index pair {text!r}: expected two comma-separated integers"
        )


def _is_integral(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass(frozen=True, order=True, repr=False)
class IndexPair:
    """A location in a table-like structure.

    Attributes
    ----------
    section : int
        Outer component (a group of rows)
    row : int
        Inner component (position within the section)

    Notes
    -----
    Equality, hashing and ordering are structural over ``(section, row)``.
    ``str()`` gives the canonical form, ``repr()`` the debug form.
    """

    section: Section
    row: Row

    def __post_init__(self):
        """Validate components and normalise numpy integers to ``int``."""
        for name in ("section", "row"):
            value = getattr(self, name)
            if not _is_integral(value):
                raise TypeError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            value = int(value)
            # Must stay within the interpreter's int/str conversion limit
            try:
                str(value)
            except ValueError:
                raise ValueError(
                    f"{name} has too many digits for its decimal form"
                ) from None
            object.__setattr__(self, name, value)

    @classmethod
    def from_index_path(cls, path: IndexPath | None) -> "IndexPair | None":
        """Build a pair from a multi-component index path.

        Parameters
        ----------
        path : IndexPath | None
            Ordered integer components, e.g. a list, tuple, 1-d array or a
            MultiIndex label.

        Returns
        -------
        IndexPair | None
            The pair of the first and second components if the path has
            exactly two integral components, else None.
        """
        if path is None:
            return None
        try:
            length = len(path)
        except TypeError:
            logger.debug("Rejected index path %r: no length", path)
            return None
        if length != 2:
            logger.debug("Rejected index path %r: %d components", path, length)
            return None

        # Positional read; Series labels and mapping keys are not positions
        try:
            section, row = list(path)
        except (TypeError, ValueError):
            logger.debug("Rejected index path %r: not iterable by position", path)
            return None
        if not (_is_integral(section) and _is_integral(row)):
            logger.debug("Rejected index path %r: non-integral component", path)
            return None
        try:
            return cls(section=section, row=row)
        except ValueError:
            logger.debug("Rejected index path: component too large to format")
            return None

    @classmethod
    def from_string(cls, text: str) -> "IndexPair | None":
        """Parse the canonical ``"<section>,<row>"`` form.

        Returns None unless the text splits on ``,`` into exactly two pieces
        and each piece is a plain base-10 integer.
        """
        if not isinstance(text, str):
            return None
        pieces = text.split(SEPARATOR)
        if len(pieces) != 2:
            logger.debug("Rejected %r: %d pieces", text, len(pieces))
            return None
        if not all(_COMPONENT.fullmatch(piece) for piece in pieces):
            logger.debug("Rejected %r: non-integer piece", text)
            return None
        try:
            return cls(section=int(pieces[0]), row=int(pieces[1]))
        except ValueError:
            logger.debug("Rejected %r: piece exceeds integer digit limit", text)
            return None

    @classmethod
    def parse(cls, text: str) -> "IndexPair":
        """Like ``from_string``, but raise ``MalformedIndexPairError`` on failure."""
        pair = cls.from_string(text)
        if pair is None:
            raise MalformedIndexPairError(text)
        return pair

    @property
    def raw_value(self) -> str:
        """Canonical string form, e.g. ``"3,14"``."""
        return f"{self.section}{SEPARATOR}{self.row}"

    @property
    def debug_description(self) -> str:
        """Human-readable form for diagnostics. Not parseable."""
        return f"section: '{self.section}', row: '{self.row}'"

    def to_tuple(self) -> tuple[Section, Row]:
        """Components as a plain ``(section, row)`` tuple."""
        return (self.section, self.row)

    def __iter__(self) -> Iterator[int]:
        yield self.section
        yield self.row

    def __str__(self) -> str:
        return self.raw_value

    def __repr__(self) -> str:
        return self.debug_description
