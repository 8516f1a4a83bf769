"""
The coordinate-sequence capability expected by higher-level geometry code.

Geometry types outside this kernel only talk to point storage through the
methods declared here, so any implementation must keep their semantics.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List

from ..core.coordinate import Coordinate, X, Y, Z
from ..core.envelope import Envelope


class CoordinateSequence(ABC):
    """
    Abstract ordered list of coordinates.

    Concrete subclasses decide how ordinates are stored. Ordinate ``k`` of
    point ``i`` follows the layout x, y, then z if present, then m if
    present.
    """

    @abstractmethod
    def size(self) -> int:
        """Number of coordinates in the sequence."""

    @abstractmethod
    def get_dimension(self) -> int:
        """Number of ordinates per coordinate, measures included."""

    def get_measures(self) -> int:
        return 0

    def has_z(self) -> bool:
        return self.get_dimension() - self.get_measures() > 2

    def has_m(self) -> bool:
        return self.get_measures() > 0

    def _stores_m(self) -> bool:
        # A fourth ordinate is read as m even when no measure is declared
        return self.has_m() or self.get_dimension() == 4

    @abstractmethod
    def get_ordinate(self, index: int, ordinate_index: int) -> float:
        """Read ordinate ``ordinate_index`` of point ``index``."""

    @abstractmethod
    def set_ordinate(self, index: int, ordinate_index: int, value: float) -> None:
        """Write ordinate ``ordinate_index`` of point ``index``."""

    @abstractmethod
    def get_coordinate(self, index: int) -> Coordinate:
        """Return a coordinate that may be shared; callers must not mutate it."""

    @abstractmethod
    def get_coordinate_copy(self, index: int) -> Coordinate:
        """Return a freshly built coordinate owned by the caller."""

    @abstractmethod
    def to_coordinate_array(self) -> List[Coordinate]:
        """Materialise every coordinate."""

    @abstractmethod
    def copy(self) -> "CoordinateSequence":
        """Deep copy of the sequence."""

    def get_x(self, index: int) -> float:
        return self.get_ordinate(index, X)

    def get_y(self, index: int) -> float:
        return self.get_ordinate(index, Y)

    def get_z(self, index: int) -> float:
        if self.has_z():
            return self.get_ordinate(index, Z)
        return float('nan')

    def get_m(self, index: int) -> float:
        if self._stores_m():
            return self.get_ordinate(index, self.get_dimension() - 1)
        return float('nan')

    def set_x(self, index: int, value: float) -> None:
        self.set_ordinate(index, X, value)

    def set_y(self, index: int, value: float) -> None:
        self.set_ordinate(index, Y, value)

    def get_coordinate_into(self, index: int, coord: Coordinate) -> None:
        """Copy the ordinates of point ``index`` into an existing coordinate."""
        coord.x = self.get_ordinate(index, X)
        coord.y = self.get_ordinate(index, Y)
        if self.has_z():
            coord.z = self.get_z(index)
        if self._stores_m():
            coord.m = self.get_m(index)

    def expand_envelope(self, env: Envelope) -> Envelope:
        for i in range(self.size()):
            env.expand_to_include(self.get_x(i), self.get_y(i))
        return env

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Coordinate]:
        for i in range(self.size()):
            yield self.get_coordinate_copy(i)

    def __str__(self) -> str:
        dim = self.get_dimension()
        parts = []
        for i in range(self.size()):
            parts.append(' '.join(repr(self.get_ordinate(i, k)) for k in range(dim)))
        return '(' + ', '.join(parts) + ')'
