"""
Tests for the Coordinate value type.
"""

import math

import pytest

from geoprim import Coordinate, X, Y, Z, M


class TestCoordinate:

    def test_defaults(self):
        c = Coordinate()
        assert (c.x, c.y) == (0.0, 0.0)
        assert math.isnan(c.z)
        assert math.isnan(c.m)

    def test_equality_ignores_z_and_m(self):
        assert Coordinate(1, 2, 3) == Coordinate(1, 2, 99, 4)
        assert Coordinate(1, 2) != Coordinate(2, 1)
        assert hash(Coordinate(1, 2, 3)) == hash(Coordinate(1, 2))

    def test_equals_3d(self):
        assert Coordinate(1, 2).equals_3d(Coordinate(1, 2))
        assert Coordinate(1, 2, 3).equals_3d(Coordinate(1, 2, 3))
        assert not Coordinate(1, 2, 3).equals_3d(Coordinate(1, 2, 4))
        assert not Coordinate(1, 2, 3).equals_3d(Coordinate(1, 2))

    def test_equals_2d_tolerance(self):
        assert Coordinate(1, 2).equals_2d(Coordinate(1.05, 1.96), tolerance=0.1)
        assert not Coordinate(1, 2).equals_2d(Coordinate(1.05, 1.96))

    def test_ordinate_access(self):
        c = Coordinate(1, 2, 3, 4)
        assert [c.get_ordinate(i) for i in (X, Y, Z, M)] == [1.0, 2.0, 3.0, 4.0]
        c.set_ordinate(Z, 7)
        assert c.z == 7.0

    def test_invalid_ordinate(self):
        with pytest.raises(ValueError, match="Invalid ordinate"):
            Coordinate().get_ordinate(4)
        with pytest.raises(ValueError):
            Coordinate().set_ordinate(-1, 0.0)

    def test_copy_is_independent(self):
        a = Coordinate(1, 2, 3)
        b = a.copy()
        b.x = 10.0
        assert a.x == 1.0
        assert b.z == 3.0

    def test_distance(self):
        assert Coordinate(0, 0).distance(Coordinate(3, 4)) == 5.0

    def test_unpacking_and_repr(self):
        x, y = Coordinate(1, 2)
        assert (x, y) == (1.0, 2.0)
        assert repr(Coordinate(1, 2)) == "(1.0, 2.0)"
        assert repr(Coordinate(1, 2, 3)) == "(1.0, 2.0, 3.0)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
