"""
Azimuth between two nearby lon/lat points.

A planar local approximation: the longitude difference is scaled by the
cosine of the mean latitude before taking the arctangent. It is not a
great-circle initial bearing and is only meaningful for points close
together.
"""

import math

from ..core.coordinate import Coordinate
from .distance import PI_OVER_2, PI_TIMES_2, PI_TIMES_3_OVER_2, scale_lon_rad


# Returned when both points are identical
NO_AZIMUTH = -1.0


def azimuth_rad(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Azimuth of the vector from point 1 to point 2, in radians.

    Measured clockwise from north, in [0, 2*pi). Returns NO_AZIMUTH when the
    two points are the same.
    """
    if lat1 == lat2:
        if lon1 == lon2:
            return NO_AZIMUTH
        elif lon1 > lon2:
            return PI_TIMES_3_OVER_2
        else:
            return PI_OVER_2

    delta_lat = lat2 - lat1
    delta_lon = lon2 - lon1
    delta_lon *= float(scale_lon_rad(lat1, lat2))
    angle = math.atan(delta_lon / delta_lat)

    if delta_lat > 0:
        if delta_lon > 0:
            result = angle
        else:
            result = PI_TIMES_2 + angle
    else:
        result = math.pi + angle

    # Due north lands on 2*pi through the second branch
    if result >= PI_TIMES_2:
        result -= PI_TIMES_2
    return result


def azimuth(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Azimuth of the vector from point 1 to point 2, in degrees.

    Parameters
    ----------
    lon1, lat1 : float
        Start point in degrees.
    lon2, lat2 : float
        End point in degrees.

    Returns
    -------
    float
        Bearing in [0, 360), or NO_AZIMUTH (-1) if the points are equal.
    """
    if lon1 == lon2 and lat1 == lat2:
        return NO_AZIMUTH

    result = azimuth_rad(math.radians(lon1), math.radians(lat1),
                         math.radians(lon2), math.radians(lat2))
    return math.degrees(result)


def azimuth_between(a: Coordinate, b: Coordinate) -> float:
    """Azimuth in degrees from coordinate ``a`` to ``b`` (x = lon, y = lat)."""
    return azimuth(a.x, a.y, b.x, b.y)
