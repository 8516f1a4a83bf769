"""
Packed coordinate storage and bounding boxes derived from it.
"""

from .base import CoordinateSequence
from .packed import PackedCoordinateSequence, PackedDoubleSequence, PackedFloatSequence
from .factory import SequenceFactory, DOUBLE_XY, FLOAT_XY
from .indexed_envelope import IndexedEnvelope, NULL_INDEX

__all__ = [
    'CoordinateSequence',
    'PackedCoordinateSequence',
    'PackedDoubleSequence',
    'PackedFloatSequence',
    'SequenceFactory',
    'DOUBLE_XY',
    'FLOAT_XY',
    'IndexedEnvelope',
    'NULL_INDEX',
]
