"""
Visualization utilities for sequences, envelopes and projections.

Contains plotting functions for:
- Envelope rectangles (plain or index-tracked)
- Packed sequences with their bounding box
- Point-to-segment projections in lon/lat space
"""

from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..core.envelope import EnvelopeBase
from ..sequence.indexed_envelope import IndexedEnvelope
from ..sequence.packed import PackedCoordinateSequence
from ..algorithm.line_projector import LineProjectResult, LinePosition


def plot_envelope(
    env: EnvelopeBase,
    ax: Optional[plt.Axes] = None,
    color: str = 'green',
    label: Optional[str] = 'Envelope'
) -> plt.Axes:
    """
    Draw an envelope as a filled rectangle.

    Parameters
    ----------
    env : EnvelopeBase
        Envelope or IndexedEnvelope. A null envelope draws nothing.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    color : str
        Edge and fill colour.
    label : str, optional
        Legend label.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    if env.is_null():
        return ax

    ax.add_patch(Rectangle(
        (env.min_x, env.min_y), env.width, env.height,
        fill=True, facecolor=color, alpha=0.15,
        edgecolor=color, linewidth=2, zorder=1, label=label
    ))
    ax.add_patch(Rectangle(
        (env.min_x, env.min_y), env.width, env.height,
        fill=False, edgecolor=color, linewidth=2, zorder=3
    ))
    return ax


def plot_sequence(
    seq: PackedCoordinateSequence,
    envelope: Optional[EnvelopeBase] = None,
    ax: Optional[plt.Axes] = None,
    title: str = "Coordinate sequence",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a packed sequence as a polyline with its bounding box.

    Parameters
    ----------
    seq : PackedCoordinateSequence
        Sequence to draw.
    envelope : EnvelopeBase, optional
        Bounding box to overlay. Defaults to ``seq.envelope()``. When an
        IndexedEnvelope is given, the coordinates realising each extremum are
        highlighted.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    show_stats : bool
        Whether to show size and envelope extents.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    if envelope is None:
        envelope = seq.envelope()

    xy = seq.to_numpy()[:, :2]
    if len(xy):
        ax.plot(xy[:, 0], xy[:, 1], '-', color='steelblue', linewidth=1, zorder=2)
        ax.scatter(xy[:, 0], xy[:, 1], c='steelblue', s=20, label='Coordinates', zorder=4)

    plot_envelope(envelope, ax=ax)

    if isinstance(envelope, IndexedEnvelope) and not envelope.is_null():
        extrema = np.array(sorted(set(envelope.point_indices)))
        ax.scatter(xy[extrema, 0], xy[extrema, 1], c='red', s=80, marker='s',
                   label='Extrema', zorder=5)

    if show_stats:
        stats_text = (
            f"Size: {seq.size()}\n"
            f"Width: {envelope.width:.3g}\n"
            f"Height: {envelope.height:.3g}\n"
            f"Area: {envelope.area:.3g}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)

    return ax


def plot_projection(
    point: Tuple[float, float],
    segment: Tuple[Tuple[float, float], Tuple[float, float]],
    result: LineProjectResult,
    ax: Optional[plt.Axes] = None,
    title: str = "Segment projection"
) -> plt.Axes:
    """
    Visualize a point projected onto a lon/lat segment.

    Parameters
    ----------
    point : tuple of float
        The (lon, lat) that was projected.
    segment : tuple
        ((lon1, lat1), (lon2, lat2)) segment endpoints.
    result : LineProjectResult
        Output of ``project`` for these inputs, in degrees.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    (lon1, lat1), (lon2, lat2) = segment
    ax.plot([lon1, lon2], [lat1, lat2], 'k-', linewidth=2, label='Segment', zorder=2)
    ax.scatter([lon1], [lat1], c='black', s=50, marker='s', zorder=3)
    ax.scatter([lon2], [lat2], c='black', s=50, marker='^', zorder=3)

    color = 'seagreen' if result.position is LinePosition.INSIDE else 'coral'
    ax.scatter([point[0]], [point[1]], c='steelblue', s=60, label='Point', zorder=4)
    ax.scatter([result.lon], [result.lat], c=color, s=150, marker='*',
               label=f'Projection ({result.position.value})', zorder=5)
    ax.plot([point[0], result.lon], [point[1], result.lat], '--', color=color,
            linewidth=1, zorder=1)

    ax.set_xlabel('Longitude')
    ax.set_ylabel('Latitude')
    ax.set_title(title)
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3)

    return ax
