"""
Packed Coordinate Sequence Module

Stores N coordinates as one contiguous numpy buffer of interleaved
ordinates (x0, y0, x1, y1, ... for XY data) instead of N point objects.

Features:
- Element type and ordinate width are parameters, not separate classes
- Coordinates are materialised on demand and cached as a list
- The cache is dropped synchronously by every mutator and may also be
  released at any time (see ``release_cache``) at the cost of a rebuild
- Optional bounds checking for callers that prefer loud failures

Ordinate access is unchecked by default: an out-of-range point or ordinate
index is a caller error with undefined result.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np

from ..core.coordinate import Coordinate, X, Y
from ..core.envelope import Envelope
from .base import CoordinateSequence


logger = logging.getLogger(__name__)


def _validate_layout(dimension: int, measures: int) -> None:
    if not 2 <= dimension <= 4:
        raise ValueError(f"dimension must be between 2 and 4, got {dimension}")
    if not 0 <= measures <= 1:
        raise ValueError(f"measures must be 0 or 1, got {measures}")
    if dimension - measures < 2:
        raise ValueError(
            f"dimension {dimension} leaves no room for x and y with {measures} measure(s)"
        )


class PackedCoordinateSequence(CoordinateSequence):
    """
    A coordinate sequence backed by a flat numpy array.

    Parameters
    ----------
    coords : array_like
        Interleaved ordinates, either flat of length N * dimension or of
        shape (N, dimension). A numpy array that already has the target
        dtype is used without copying, so the caller keeps sharing it.
    dimension : int
        Ordinates per coordinate (2 to 4, measures included). Default 2.
    measures : int
        Number of measure ordinates (0 or 1). Default 0.
    dtype : numpy dtype, optional
        Storage element type. Defaults to the class ``DTYPE``. Values of
        another type are converted, narrowing if necessary.
    check_bounds : bool
        If True, ordinate access raises IndexError for out-of-range indices
        instead of leaving the result undefined. Default False.

    Raises
    ------
    ValueError
        If the buffer length is not a multiple of ``dimension`` or the
        layout is unsupported.
    """

    DTYPE = np.float64

    def __init__(
        self,
        coords,
        dimension: int = 2,
        measures: int = 0,
        dtype=None,
        check_bounds: bool = False
    ):
        _validate_layout(dimension, measures)
        dtype = np.dtype(self.DTYPE if dtype is None else dtype)

        buffer = np.asarray(coords, dtype=dtype)
        if buffer.ndim == 2:
            if buffer.shape[1] != dimension:
                raise ValueError(
                    f"Expected coordinates of shape (N, {dimension}), got {buffer.shape}"
                )
            buffer = buffer.reshape(-1)
        elif buffer.ndim != 1:
            raise ValueError(f"Expected a flat ordinate buffer, got shape {buffer.shape}")

        if buffer.size % dimension != 0:
            raise ValueError(
                "Packed array does not contain an integral number of coordinates: "
                f"length {buffer.size} is not a multiple of dimension {dimension}"
            )

        self._coords = buffer
        self._dimension = dimension
        self._measures = measures
        self._check_bounds = check_bounds
        self._cache: Optional[List[Coordinate]] = None

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Optional[Iterable[Coordinate]],
        dimension: int = 2,
        measures: int = 0,
        dtype=None,
        check_bounds: bool = False
    ) -> "PackedCoordinateSequence":
        """
        Pack a list of Coordinates.

        Z is taken from ``Coordinate.z`` and M from ``Coordinate.m`` when the
        layout has room for them; other ordinates are dropped. A 4-ordinate
        layout always stores M in its last slot, with or without a declared
        measure.
        """
        _validate_layout(dimension, measures)
        coordinates = list(coordinates) if coordinates is not None else []
        has_z = dimension - measures > 2
        has_m = measures > 0 or dimension == 4

        rows = []
        for c in coordinates:
            row = [c.x, c.y]
            if has_z:
                row.append(c.z)
            if has_m:
                row.append(c.m)
            rows.append(row)

        dtype = np.dtype(cls.DTYPE if dtype is None else dtype)
        buffer = np.array(rows, dtype=dtype).reshape(-1)
        return cls(buffer, dimension, measures, dtype=dtype, check_bounds=check_bounds)

    @classmethod
    def from_size(
        cls,
        size: int,
        dimension: int = 2,
        measures: int = 0,
        dtype=None,
        check_bounds: bool = False
    ) -> "PackedCoordinateSequence":
        """Create a zero-filled sequence of ``size`` coordinates."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        dtype = np.dtype(cls.DTYPE if dtype is None else dtype)
        return cls(np.zeros(size * dimension, dtype=dtype), dimension, measures,
                   dtype=dtype, check_bounds=check_bounds)

    @property
    def dtype(self) -> np.dtype:
        return self._coords.dtype

    @property
    def check_bounds(self) -> bool:
        return self._check_bounds

    @property
    def is_cached(self) -> bool:
        """Whether a materialised coordinate list is currently held."""
        return self._cache is not None

    def size(self) -> int:
        return self._coords.size // self._dimension

    def get_dimension(self) -> int:
        return self._dimension

    def get_measures(self) -> int:
        return self._measures

    def _check_index(self, index: int, ordinate_index: int) -> None:
        if not 0 <= index < self.size():
            raise IndexError(f"Coordinate index {index} out of range for size {self.size()}")
        if not 0 <= ordinate_index < self._dimension:
            raise IndexError(
                f"Ordinate index {ordinate_index} out of range for dimension {self._dimension}"
            )

    def get_ordinate(self, index: int, ordinate_index: int) -> float:
        if self._check_bounds:
            self._check_index(index, ordinate_index)
        return float(self._coords[index * self._dimension + ordinate_index])

    def set_ordinate(self, index: int, ordinate_index: int, value: float) -> None:
        if self._check_bounds:
            self._check_index(index, ordinate_index)
        self._cache = None
        self._coords[index * self._dimension + ordinate_index] = value

    def get_raw_ordinate(self, offset: int) -> float:
        """Read one slot of the packed buffer by its flat offset."""
        if self._check_bounds and not 0 <= offset < self._coords.size:
            raise IndexError(f"Buffer offset {offset} out of range for length {self._coords.size}")
        return float(self._coords[offset])

    def raw_coordinates(self) -> np.ndarray:
        """
        The packed buffer itself, not a copy.

        Writing to it directly bypasses cache invalidation; call
        ``release_cache`` afterwards.
        """
        return self._coords

    def release_cache(self) -> None:
        if self._cache is not None:
            logger.debug("Releasing %d cached coordinates", len(self._cache))
        self._cache = None

    def _build_coordinate(self, index: int) -> Coordinate:
        offset = index * self._dimension
        x = float(self._coords[offset])
        y = float(self._coords[offset + 1])
        if self._dimension == 2:
            return Coordinate(x, y)
        if self._measures == 0:
            z = float(self._coords[offset + 2])
            if self._dimension == 3:
                return Coordinate(x, y, z)
            # Fourth ordinate without a declared measure is kept as m
            return Coordinate(x, y, z, float(self._coords[offset + 3]))
        if self._dimension == 3:
            return Coordinate(x, y, m=float(self._coords[offset + 2]))
        return Coordinate(x, y, float(self._coords[offset + 2]), float(self._coords[offset + 3]))

    def get_coordinate(self, index: int) -> Coordinate:
        if self._check_bounds:
            self._check_index(index, X)
        cache = self._cache
        if cache is not None:
            return cache[index]
        return self._build_coordinate(index)

    def get_coordinate_copy(self, index: int) -> Coordinate:
        if self._check_bounds:
            self._check_index(index, X)
        return self._build_coordinate(index)

    def to_coordinate_array(self) -> List[Coordinate]:
        """
        Materialise every coordinate, reusing the cached list when present.

        Returns
        -------
        list of Coordinate
            Shared list; callers must not modify it or its elements.
        """
        cache = self._cache
        if cache is not None:
            return cache
        cache = [self._build_coordinate(i) for i in range(self.size())]
        logger.debug("Materialised %d coordinates", len(cache))
        self._cache = cache
        return cache

    def expand_envelope(self, env: Envelope) -> Envelope:
        xy = self._coords.reshape(-1, self._dimension)[:, :2].tolist()
        for x, y in xy:
            env.expand_to_include(x, y)
        return env

    def envelope(self) -> Envelope:
        """Bounding box of all coordinates, null for an empty sequence."""
        return self.expand_envelope(Envelope())

    def to_numpy(self) -> np.ndarray:
        """Copy of the ordinates as an array of shape (N, dimension)."""
        return self._coords.reshape(-1, self._dimension).copy()

    def copy(self) -> "PackedCoordinateSequence":
        return type(self)(self._coords.copy(), self._dimension, self._measures,
                          dtype=self._coords.dtype, check_bounds=self._check_bounds)

    def __copy__(self):
        return self.copy()

    def __repr__(self):
        return (f"{type(self).__name__}(size={self.size()}, dimension={self._dimension}, "
                f"measures={self._measures}, dtype={self._coords.dtype.name})")


class PackedDoubleSequence(PackedCoordinateSequence):
    """Packed sequence storing float64 ordinates."""

    DTYPE = np.float64


class PackedFloatSequence(PackedCoordinateSequence):
    """
    Packed sequence storing float32 ordinates.

    Values are accepted and returned as Python floats but persisted with
    single precision, so writes are rounded. The narrowing is intentional.
    """

    DTYPE = np.float32
