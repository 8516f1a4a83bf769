"""
Index-tracked bounding box over a packed sequence.

Instead of four bound values, an IndexedEnvelope remembers the buffer
offsets of the ordinates that realise min x, min y, max x and max y, and
reads the sequence every time a bound is needed. It holds a reference to the
sequence but does not own it.

The offsets are found once, at construction. Nothing is recomputed when the
sequence is mutated afterwards: the caller must build a new IndexedEnvelope
after writing to the sequence, otherwise the stored offsets may no longer
point at the true extrema.
"""

import logging
import math
from typing import Optional, Tuple

from ..core.envelope import EnvelopeBase
from .packed import PackedCoordinateSequence


logger = logging.getLogger(__name__)

NULL_INDEX = -1


class IndexedEnvelope(EnvelopeBase):
    """
    Bounding box resolved through indices into a PackedCoordinateSequence.

    Parameters
    ----------
    sequence : PackedCoordinateSequence or None
        The sequence to scan. None or an empty sequence gives a null
        envelope.

    Notes
    -----
    On ties the first coordinate encountered keeps the extremum: a later
    ordinate only replaces it when strictly smaller (or larger).
    """

    __slots__ = ('_sequence', '_min_x_idx', '_min_y_idx', '_max_x_idx', '_max_y_idx')

    def __init__(self, sequence: Optional[PackedCoordinateSequence]):
        self._sequence = sequence
        self._scan()

    def _scan(self) -> None:
        seq = self._sequence
        if seq is None or seq.size() == 0:
            self._set_to_null()
            return

        stride = seq.get_dimension()
        xy = seq.raw_coordinates().reshape(-1, stride)[:, :2]

        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        # Seeded with the first coordinate so all-NaN columns still resolve
        min_x_idx = max_x_idx = 0
        min_y_idx = max_y_idx = 1

        for k, (x, y) in enumerate(xy):
            i = k * stride
            if x < min_x:
                min_x_idx = i
                min_x = x
            if x > max_x:
                max_x_idx = i
                max_x = x

            j = i + 1
            if y < min_y:
                min_y_idx = j
                min_y = y
            if y > max_y:
                max_y_idx = j
                max_y = y

        self._min_x_idx = min_x_idx
        self._min_y_idx = min_y_idx
        self._max_x_idx = max_x_idx
        self._max_y_idx = max_y_idx
        logger.debug("Indexed envelope over %d coordinates: offsets %s",
                     seq.size(), self.indices)

    def _set_to_null(self) -> None:
        self._min_x_idx = NULL_INDEX
        self._min_y_idx = NULL_INDEX
        self._max_x_idx = NULL_INDEX
        self._max_y_idx = NULL_INDEX

    def is_null(self) -> bool:
        return self._min_x_idx == NULL_INDEX

    @property
    def sequence(self) -> Optional[PackedCoordinateSequence]:
        return self._sequence

    @property
    def indices(self) -> Tuple[int, int, int, int]:
        """Buffer offsets of (min x, min y, max x, max y)."""
        return self._min_x_idx, self._min_y_idx, self._max_x_idx, self._max_y_idx

    @property
    def min_x_index(self) -> int:
        return self._min_x_idx

    @property
    def min_y_index(self) -> int:
        return self._min_y_idx

    @property
    def max_x_index(self) -> int:
        return self._max_x_idx

    @property
    def max_y_index(self) -> int:
        return self._max_y_idx

    @property
    def point_indices(self) -> Tuple[int, int, int, int]:
        """Coordinate indices of (min x, min y, max x, max y), -1 when null."""
        if self.is_null():
            return NULL_INDEX, NULL_INDEX, NULL_INDEX, NULL_INDEX
        stride = self._sequence.get_dimension()
        return tuple(offset // stride for offset in self.indices)

    @property
    def min_x(self) -> float:
        if self.is_null():
            return 0.0
        return self._sequence.get_raw_ordinate(self._min_x_idx)

    @property
    def max_x(self) -> float:
        if self.is_null():
            return -1.0
        return self._sequence.get_raw_ordinate(self._max_x_idx)

    @property
    def min_y(self) -> float:
        if self.is_null():
            return 0.0
        return self._sequence.get_raw_ordinate(self._min_y_idx)

    @property
    def max_y(self) -> float:
        if self.is_null():
            return -1.0
        return self._sequence.get_raw_ordinate(self._max_y_idx)
