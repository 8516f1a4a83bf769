"""
geoprim - Geometric primitives for a planar geometry engine.

This package provides the storage and measurement building blocks that
point-based geometries sit on:
- Envelopes (axis-aligned bounding boxes with a null state)
- Packed coordinate sequences backed by a single numpy buffer
- Index-tracked envelopes that read their bounds through a sequence
- Local lon/lat azimuth, distance and segment projection

Main Classes and Functions
--------------------------
Coordinate : Point value compared by x and y
Envelope : Mutable bounding box
PackedCoordinateSequence : Packed point storage with a lazily built cache
SequenceFactory : Explicit layout/storage context for new sequences
IndexedEnvelope : Bounding box resolved through sequence indices
azimuth : Local bearing between two lon/lat points
local_lonlat_distance : Equirectangular distance in metres
project : Foot of the perpendicular from a point onto a lon/lat segment

Example
-------
>>> from geoprim import DOUBLE_XY, IndexedEnvelope
>>> seq = DOUBLE_XY.create([1.0, 5.0, 3.0, 2.0, 0.0, 9.0])
>>> env = IndexedEnvelope(seq)
>>> env.min_x, env.max_x, env.min_y, env.max_y
(0.0, 3.0, 2.0, 9.0)
"""

import logging

from .core.coordinate import Coordinate, X, Y, Z, M
from .core.envelope import Envelope, EnvelopeBase
from .sequence.base import CoordinateSequence
from .sequence.packed import (
    PackedCoordinateSequence,
    PackedDoubleSequence,
    PackedFloatSequence,
)
from .sequence.factory import SequenceFactory, DOUBLE_XY, FLOAT_XY
from .sequence.indexed_envelope import IndexedEnvelope
from .algorithm.distance import (
    EARTH_RADIUS_M,
    distance_to_meters,
    local_lonlat_distance,
    local_lonlat_distance_rad,
)
from .algorithm.azimuth import NO_AZIMUTH, azimuth, azimuth_rad, azimuth_between
from .algorithm.line_projector import (
    LinePosition,
    LineProjectResult,
    project,
    project_rad,
    project_coordinate,
)
from .interop.shapely_io import (
    envelope_from_shapely,
    envelope_to_shapely,
    sequence_from_shapely,
    sequence_to_linestring,
)
from .visualization.plotting import plot_envelope, plot_sequence, plot_projection

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core values
    'Coordinate',
    'X',
    'Y',
    'Z',
    'M',
    'Envelope',
    'EnvelopeBase',
    # Sequences
    'CoordinateSequence',
    'PackedCoordinateSequence',
    'PackedDoubleSequence',
    'PackedFloatSequence',
    'SequenceFactory',
    'DOUBLE_XY',
    'FLOAT_XY',
    'IndexedEnvelope',
    # Geodetic
    'EARTH_RADIUS_M',
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
    # Interop
    'envelope_from_shapely',
    'envelope_to_shapely',
    'sequence_from_shapely',
    'sequence_to_linestring',
    # Visualization
    'plot_envelope',
    'plot_sequence',
    'plot_projection',
]
