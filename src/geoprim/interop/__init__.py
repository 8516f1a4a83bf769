"""
Shapely interoperability.
"""

from .shapely_io import (
    envelope_from_shapely,
    envelope_to_shapely,
    sequence_from_shapely,
    sequence_to_linestring,
)

__all__ = [
    'envelope_from_shapely',
    'envelope_to_shapely',
    'sequence_from_shapely',
    'sequence_to_linestring',
]
