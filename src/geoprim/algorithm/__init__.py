"""
Geodetic primitives over longitude/latitude pairs.
"""

from .distance import (
    EARTH_RADIUS_M,
    PI_TIMES_2,
    PI_TIMES_3_OVER_2,
    PI_OVER_2,
    PI_OVER_4,
    distance_to_meters,
    local_lonlat_distance,
    local_lonlat_distance_rad,
)
from .azimuth import NO_AZIMUTH, azimuth, azimuth_rad, azimuth_between
from .line_projector import (
    LinePosition,
    LineProjectResult,
    project,
    project_rad,
    project_coordinate,
)

__all__ = [
    'EARTH_RADIUS_M',
    'PI_TIMES_2',
    'PI_TIMES_3_OVER_2',
    'PI_OVER_2',
    'PI_OVER_4',
    'distance_to_meters',
    'local_lonlat_distance',
    'local_lonlat_distance_rad',
    'NO_AZIMUTH',
    'azimuth',
    'azimuth_rad',
    'azimuth_between',
    'LinePosition',
    'LineProjectResult',
    'project',
    'project_rad',
    'project_coordinate',
]
