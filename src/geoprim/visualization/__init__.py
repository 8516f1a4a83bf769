"""
Visualization utilities.
"""

from .plotting import plot_envelope, plot_sequence, plot_projection

__all__ = ['plot_envelope', 'plot_sequence', 'plot_projection']
