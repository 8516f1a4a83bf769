"""
Conversions between kernel types and Shapely geometries.
"""

import warnings

import numpy as np
from shapely.geometry import LineString, MultiPolygon, Polygon, box
from shapely.geometry.base import BaseGeometry

from ..core.envelope import Envelope, EnvelopeBase
from ..sequence.factory import DOUBLE_XY, SequenceFactory
from ..sequence.packed import PackedCoordinateSequence


def envelope_from_shapely(geom: BaseGeometry) -> Envelope:
    """Bounding box of a Shapely geometry; null for an empty geometry."""
    if geom.is_empty:
        return Envelope()
    min_x, min_y, max_x, max_y = geom.bounds
    return Envelope(min_x, max_x, min_y, max_y)


def envelope_to_shapely(env: EnvelopeBase) -> Polygon:
    """
    Convert an envelope to a rectangular Shapely polygon.

    Parameters
    ----------
    env : EnvelopeBase
        Envelope or IndexedEnvelope.

    Returns
    -------
    Polygon
        The box polygon, or an empty polygon for a null envelope.
    """
    if env.is_null():
        return Polygon()
    return box(env.min_x, env.min_y, env.max_x, env.max_y)


def sequence_from_shapely(
    geom: BaseGeometry,
    factory: SequenceFactory = DOUBLE_XY
) -> PackedCoordinateSequence:
    """
    Pack the coordinates of a Shapely geometry.

    Polygons contribute their exterior ring (closing vertex included); for a
    MultiPolygon the largest part is used.

    Parameters
    ----------
    geom : BaseGeometry
        Point, LineString, LinearRing, Polygon or MultiPolygon.
    factory : SequenceFactory
        Layout and storage type of the result. Default DOUBLE_XY.

    Returns
    -------
    PackedCoordinateSequence
        Sequence in the factory's layout. Missing Z values are NaN.
    """
    if isinstance(geom, MultiPolygon):
        geom = max(geom.geoms, key=lambda g: g.area)
    if isinstance(geom, Polygon):
        geom = geom.exterior

    coords = np.asarray(geom.coords, dtype=np.float64)
    if coords.size == 0:
        return factory.create_of_size(0)
    coords = coords.reshape(len(coords), -1)

    dimension = factory.dimension
    n_spatial = dimension - factory.measures
    if coords.shape[1] > n_spatial:
        warnings.warn(
            f"Dropping {coords.shape[1] - n_spatial} ordinate(s) not held by a "
            f"dimension-{dimension} sequence",
            stacklevel=2
        )
        coords = coords[:, :n_spatial]

    packed = np.full((len(coords), dimension), np.nan)
    packed[:, :coords.shape[1]] = coords
    return factory.create(packed.reshape(-1))


def sequence_to_linestring(seq: PackedCoordinateSequence) -> LineString:
    """
    Build a LineString from a sequence, keeping Z when the sequence has it.

    Raises
    ------
    ValueError
        If the sequence has fewer than 2 coordinates.
    """
    n = seq.size()
    if n < 2:
        raise ValueError(f"Need at least 2 coordinates, got {n}")
    n_spatial = 3 if seq.has_z() else 2
    return LineString(seq.to_numpy()[:, :n_spatial])
