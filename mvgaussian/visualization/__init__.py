#!/usr/bin/env python3
"""
Visualization modules for Gaussian beliefs
"""

from .belief_plot import plot_belief_ellipse, plot_belief_samples

__all__ = [
    'plot_belief_ellipse',
    'plot_belief_samples'
]
