"""
Local lon/lat distance.

Equirectangular approximation: the longitude difference is scaled by the
cosine of the mean latitude and combined with the latitude difference by the
Euclidean norm. It is only accurate over short spans and is not a
great-circle (haversine) distance.

All functions accept scalars or numpy arrays and broadcast.
"""

import numpy as np


# Earth mean radius in metres
EARTH_RADIUS_M = 6371008.7714

PI_TIMES_2 = np.pi * 2.0
PI_TIMES_3_OVER_2 = np.pi * 1.5
PI_OVER_2 = np.pi / 2.0
PI_OVER_4 = np.pi / 4.0


def distance_to_meters(dist_rad):
    """Convert an angular distance in radians to metres on the mean sphere."""
    return dist_rad * EARTH_RADIUS_M


def scale_lon_rad(lat1, lat2=None):
    """
    Longitude scale factor at a latitude, or at the mean of two latitudes.

    Parameters
    ----------
    lat1 : float or np.ndarray
        Latitude in radians.
    lat2 : float or np.ndarray, optional
        Second latitude in radians. If given, the mean latitude is used.

    Returns
    -------
    float or np.ndarray
        cos(latitude).
    """
    if lat2 is None:
        return np.cos(lat1)
    return np.cos((lat1 + lat2) * 0.5)


def local_lonlat_distance_rad(lon1, lat1, lon2, lat2):
    """
    Approximate angular distance between two lon/lat points.

    Parameters
    ----------
    lon1, lat1 : float or np.ndarray
        Start point in radians.
    lon2, lat2 : float or np.ndarray
        End point in radians.

    Returns
    -------
    float or np.ndarray
        Distance in radians of arc.
    """
    delta_lon = (lon2 - lon1) * scale_lon_rad(lat1, lat2)
    delta_lat = lat2 - lat1
    return np.sqrt(delta_lon * delta_lon + delta_lat * delta_lat)


def local_lonlat_distance(lon1, lat1, lon2, lat2):
    """
    Approximate distance in metres between two lon/lat points.

    Parameters
    ----------
    lon1, lat1 : float or np.ndarray
        Start point in degrees.
    lon2, lat2 : float or np.ndarray
        End point in degrees.

    Returns
    -------
    float or np.ndarray
        Distance in metres.

    Examples
    --------
    >>> round(float(local_lonlat_distance(0, 0, 1, 0)))
    111195
    """
    distance_rad = local_lonlat_distance_rad(
        np.radians(lon1), np.radians(lat1),
        np.radians(lon2), np.radians(lat2)
    )
    return distance_to_meters(distance_rad)
