"""
Line Projector Module

Projects a lon/lat point onto the arc between two lon/lat points and reports
whether the foot of the perpendicular falls before the start, past the end,
or inside the segment.

Method:
- Meridian segments (equal longitudes) reduce to a latitude clamp
- Otherwise the spherical triangle point/p1/p2 is solved from the three
  arc cosines, giving the angular offset of the foot from p1, then its
  longitude offset, then its latitude
- The longitude offset decides the position and the clamped endpoint

Poles and antipodal inputs make the general case ill-conditioned. Arccosine
and square-root arguments are clamped to their valid domain; divisions by a
vanishing denominator follow IEEE semantics and may yield NaN coordinates.
The solved latitude comes from an arccosine and is therefore never negative.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from ..core.coordinate import Coordinate


class LinePosition(Enum):
    """Where the foot of the perpendicular falls relative to the segment."""
    OUTSIDE_START = 'outside_start'
    OUTSIDE_END = 'outside_end'
    INSIDE = 'inside'


@dataclass
class LineProjectResult:
    """
    Result of projecting a point onto a segment.

    Attributes
    ----------
    position : LinePosition
        Location of the projection relative to the segment.
    lon : float
        Longitude of the projected point.
    lat : float
        Latitude of the projected point.
    """
    position: LinePosition
    lon: float
    lat: float

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.lon, self.lat)


def _project_meridian(lat, lon1, lat1, lat2) -> LineProjectResult:
    if lat1 > lat2:
        if lat > lat1:
            return LineProjectResult(LinePosition.OUTSIDE_START, lon1, lat1)
        elif lat < lat2:
            return LineProjectResult(LinePosition.OUTSIDE_END, lon1, lat2)
        else:
            return LineProjectResult(LinePosition.INSIDE, lon1, lat)
    else:
        if lat < lat1:
            return LineProjectResult(LinePosition.OUTSIDE_START, lon1, lat1)
        elif lat > lat2:
            return LineProjectResult(LinePosition.OUTSIDE_END, lon1, lat2)
        else:
            return LineProjectResult(LinePosition.INSIDE, lon1, lat)


def _sqrt_complement(value):
    """sqrt(1 - value**2) with the argument kept non-negative; NaN propagates."""
    return np.sqrt(np.clip(1.0 - value * value, 0.0, None))


def project_rad(
    lon: float,
    lat: float,
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float
) -> LineProjectResult:
    """
    Project a point onto the segment p1 -> p2, all angles in radians.

    Parameters
    ----------
    lon, lat : float
        Point to project.
    lon1, lat1 : float
        Segment start.
    lon2, lat2 : float
        Segment end.

    Returns
    -------
    LineProjectResult
        Position and projected lon/lat in radians.
    """
    if lon1 == lon2:
        return _project_meridian(lat, lon1, lat1, lat2)

    lon, lat, lon1, lat1, lon2, lat2 = (
        np.float64(v) for v in (lon, lat, lon1, lat1, lon2, lat2)
    )

    with np.errstate(divide='ignore', invalid='ignore'):
        sin_lat = np.sin(lat)
        sin_lat1 = np.sin(lat1)
        sin_lat2 = np.sin(lat2)
        cos_lat = _sqrt_complement(sin_lat)
        cos_lat1 = _sqrt_complement(sin_lat1)
        cos_lat2 = _sqrt_complement(sin_lat2)

        delta_lon_pp1 = lon - lon1
        delta_lon_p2p = lon2 - lon
        delta_lon_p2p1 = lon2 - lon1
        cos_lon_pp1 = np.cos(delta_lon_pp1)
        cos_lon_p2p = np.cos(delta_lon_p2p)
        cos_lon_p2p1 = np.cos(delta_lon_p2p1)

        # Cosines of the three great-circle arcs
        cos_dist_pp1 = sin_lat * sin_lat1 + cos_lat * cos_lat1 * cos_lon_pp1
        cos_dist_pp2 = sin_lat * sin_lat2 + cos_lat * cos_lat2 * cos_lon_p2p
        cos_dist_p1p2 = sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * cos_lon_p2p1
        sin_dist_p1p2 = _sqrt_complement(cos_dist_p1p2)

        # Angular offset of the foot from p1
        tan_dist_fp1 = (cos_dist_pp2 / cos_dist_pp1 - cos_dist_p1p2) / sin_dist_p1p2
        dist_fp1 = np.arctan(tan_dist_fp1)

        # Longitude offset of the foot from p1
        sin_lon_p2p1 = _sqrt_complement(cos_lon_p2p1)
        tan_lon_fp1 = sin_lon_p2p1 / (
            cos_lat1 / cos_lat2 * (sin_dist_p1p2 / tan_dist_fp1 - cos_dist_p1p2)
            + cos_lon_p2p1
        )
        delta_lon_fp1 = np.arctan(tan_lon_fp1)

        sin_lon_fp1 = np.sin(delta_lon_fp1)
        sin_dist_fp1 = np.sin(dist_fp1)
        cos_lat_f = sin_lon_p2p1 / sin_lon_fp1 * sin_dist_fp1 / sin_dist_p1p2 * cos_lat2
        lat_f = np.arccos(np.clip(cos_lat_f, -1.0, 1.0))

    if delta_lon_fp1 < 0.0:
        return LineProjectResult(LinePosition.OUTSIDE_START, float(lon1), float(lat1))
    elif delta_lon_fp1 > delta_lon_p2p1:
        return LineProjectResult(LinePosition.OUTSIDE_END, float(lon2), float(lat2))
    else:
        return LineProjectResult(LinePosition.INSIDE,
                                 float(lon1 + delta_lon_fp1), float(lat_f))


def project(
    lon: float,
    lat: float,
    lon1: float,
    lat1: float,
    lon2: float,
    lat2: float
) -> LineProjectResult:
    """
    Project a point onto the segment p1 -> p2, all angles in degrees.

    Parameters
    ----------
    lon, lat : float
        Point to project.
    lon1, lat1 : float
        Segment start.
    lon2, lat2 : float
        Segment end.

    Returns
    -------
    LineProjectResult
        Position and projected lon/lat in degrees.

    Examples
    --------
    >>> project(0, 5, 0, 0, 0, 10).position
    <LinePosition.INSIDE: 'inside'>
    """
    result = project_rad(
        np.radians(lon), np.radians(lat),
        np.radians(lon1), np.radians(lat1),
        np.radians(lon2), np.radians(lat2)
    )
    result.lon = float(np.degrees(result.lon))
    result.lat = float(np.degrees(result.lat))
    return result


def project_coordinate(p: Coordinate, p1: Coordinate, p2: Coordinate) -> LineProjectResult:
    """Coordinate form of ``project`` (x = lon, y = lat, degrees)."""
    return project(p.x, p.y, p1.x, p1.y, p2.x, p2.y)
