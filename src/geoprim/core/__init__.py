"""
Core value types: coordinates and envelopes.
"""

from .coordinate import Coordinate, X, Y, Z, M, NULL_ORDINATE
from .envelope import Envelope, EnvelopeBase

__all__ = [
    'Coordinate',
    'X',
    'Y',
    'Z',
    'M',
    'NULL_ORDINATE',
    'Envelope',
    'EnvelopeBase',
]
