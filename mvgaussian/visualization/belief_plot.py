#!/usr/bin/env python3
"""
Plotting helpers for Gaussian beliefs.
Draws uncertainty ellipses and sample clouds of two-dimensional marginals.
"""

import numpy as np
from matplotlib.axes import Axes
from matplotlib.patches import Ellipse
from typing import Optional, Tuple

from ..errors import DimensionError, ImproperDistributionError
from ..gaussian_belief import GaussianBelief


def _marginal(belief: GaussianBelief, dims: Tuple[int, int]) -> Tuple[np.ndarray, np.ndarray]:
    if belief.dimension < 2:
        raise DimensionError(f"Cannot plot a {belief.dimension}-dimensional belief in the plane")
    if len(dims) != 2 or not all(0 <= d < belief.dimension for d in dims):
        raise DimensionError(f"Plot dimensions {dims} out of range for a {belief.dimension}-dimensional belief")
    if not belief.is_proper():
        raise ImproperDistributionError("Cannot plot improper distribution")

    idx = list(dims)
    mean = belief.get_mean()[idx]
    cov = belief.get_covariance()[np.ix_(idx, idx)]
    return mean, cov


def plot_belief_ellipse(
    ax: Axes,
    belief: GaussianBelief,
    dims: Tuple[int, int] = (0, 1),
    n_std: float = 1.0,
    **kwargs
) -> Ellipse:
    """
    Draw the mean and the `n_std`-sigma uncertainty ellipse of a belief.

    Args:
        ax: Axes to draw on
        belief: Proper belief of dimension >= 2
        dims: Indices of the two plotted dimensions
        n_std: Number of standard deviations spanned by the ellipse
        **kwargs: Passed on to matplotlib.patches.Ellipse

    Returns:
        The added Ellipse patch
    """
    mean, cov = _marginal(belief, dims)

    eigenvals, eigenvecs = np.linalg.eigh(cov)
    angle = np.degrees(np.arctan2(eigenvecs[1, 1], eigenvecs[0, 1]))
    height, width = 2 * n_std * np.sqrt(eigenvals)  # eigh sorts eigenvalues ascending

    style = {'fill': True, 'facecolor': 'lightblue', 'edgecolor': 'navy', 'alpha': 0.4}
    style.update(kwargs)
    ellipse = Ellipse(mean, width, height, angle=angle, **style)
    ax.add_patch(ellipse)
    ax.plot(mean[0], mean[1], 'o', color='lightblue', markersize=8,
            markeredgecolor='navy', markeredgewidth=1)
    return ellipse


def plot_belief_samples(
    ax: Axes,
    belief: GaussianBelief,
    num_samples: int = 200,
    rng: Optional[np.random.Generator] = None,
    dims: Tuple[int, int] = (0, 1),
    **kwargs
) -> np.ndarray:
    """Scatter `num_samples` draws of the belief and return them."""
    _marginal(belief, dims)
    samples = belief.sample(rng=rng, size=num_samples)

    style = {'s': 5, 'color': 'gray', 'alpha': 0.5}
    style.update(kwargs)
    ax.scatter(samples[:, dims[0]], samples[:, dims[1]], **style)
    return samples
