"""
Point value used throughout the kernel.

A Coordinate carries x, y and optional z / m ordinates. Missing ordinates
are stored as NaN. Equality and hashing only look at x and y, so two
coordinates at the same planar location compare equal regardless of their
elevation or measure.
"""

import math


# Ordinate indices
X = 0
Y = 1
Z = 2
M = 3

NULL_ORDINATE = float('nan')


class Coordinate:
    """
    A lightweight (x, y[, z][, m]) point value.

    Parameters
    ----------
    x, y : float
        Planar ordinates.
    z : float, optional
        Elevation. NaN when absent.
    m : float, optional
        Measure. NaN when absent.
    """

    __slots__ = ('x', 'y', 'z', 'm')

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = NULL_ORDINATE, m: float = NULL_ORDINATE):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.m = float(m)

    def get_ordinate(self, ordinate_index: int) -> float:
        if ordinate_index == X:
            return self.x
        if ordinate_index == Y:
            return self.y
        if ordinate_index == Z:
            return self.z
        if ordinate_index == M:
            return self.m
        raise ValueError(f"Invalid ordinate index: {ordinate_index}")

    def set_ordinate(self, ordinate_index: int, value: float) -> None:
        if ordinate_index == X:
            self.x = float(value)
        elif ordinate_index == Y:
            self.y = float(value)
        elif ordinate_index == Z:
            self.z = float(value)
        elif ordinate_index == M:
            self.m = float(value)
        else:
            raise ValueError(f"Invalid ordinate index: {ordinate_index}")

    def copy(self) -> "Coordinate":
        return Coordinate(self.x, self.y, self.z, self.m)

    def equals_2d(self, other: "Coordinate", tolerance: float = 0.0) -> bool:
        """
        Compare planar ordinates, optionally within a tolerance.

        Parameters
        ----------
        other : Coordinate
            Coordinate to compare against.
        tolerance : float
            Maximum allowed absolute difference per ordinate. Default 0.

        Returns
        -------
        bool
            True if both x and y agree.
        """
        if tolerance == 0.0:
            return self.x == other.x and self.y == other.y
        return (abs(self.x - other.x) <= tolerance
                and abs(self.y - other.y) <= tolerance)

    def equals_3d(self, other: "Coordinate") -> bool:
        """Compare x, y and z, treating two NaN elevations as equal."""
        if not self.equals_2d(other):
            return False
        return self.z == other.z or (math.isnan(self.z) and math.isnan(other.z))

    def distance(self, other: "Coordinate") -> float:
        """Planar Euclidean distance to another coordinate."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        if math.isnan(self.z):
            return f"({self.x}, {self.y})"
        return f"({self.x}, {self.y}, {self.z})"
