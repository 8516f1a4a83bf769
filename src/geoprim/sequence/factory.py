"""
Explicit construction context for packed sequences.

Callers hold a SequenceFactory and pass it to the code that builds
sequences; there is no process-wide default factory to mutate.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from ..core.coordinate import Coordinate
from .packed import PackedCoordinateSequence, _validate_layout


@dataclass(frozen=True)
class SequenceFactory:
    """
    Layout and storage settings shared by every sequence a caller creates.

    Attributes
    ----------
    dtype : numpy dtype
        Element type of the packed buffer. Default float64.
    dimension : int
        Ordinates per coordinate, measures included. Default 2.
    measures : int
        Number of measure ordinates. Default 0.
    check_bounds : bool
        Whether created sequences raise IndexError on out-of-range access.
    """
    dtype: np.dtype = field(default=np.dtype(np.float64))
    dimension: int = 2
    measures: int = 0
    check_bounds: bool = False

    def __post_init__(self):
        _validate_layout(self.dimension, self.measures)
        object.__setattr__(self, 'dtype', np.dtype(self.dtype))

    def create(self, coords) -> PackedCoordinateSequence:
        """Wrap an interleaved ordinate buffer."""
        return PackedCoordinateSequence(coords, self.dimension, self.measures,
                                        dtype=self.dtype, check_bounds=self.check_bounds)

    def create_from_coordinates(
        self,
        coordinates: Optional[Iterable[Coordinate]]
    ) -> PackedCoordinateSequence:
        return PackedCoordinateSequence.from_coordinates(
            coordinates, self.dimension, self.measures,
            dtype=self.dtype, check_bounds=self.check_bounds
        )

    def create_of_size(self, size: int) -> PackedCoordinateSequence:
        return PackedCoordinateSequence.from_size(
            size, self.dimension, self.measures,
            dtype=self.dtype, check_bounds=self.check_bounds
        )


DOUBLE_XY = SequenceFactory(dtype=np.float64)
FLOAT_XY = SequenceFactory(dtype=np.float32)
