#!/usr/bin/env python3
"""
Conversions between GaussianBelief and neighbouring value types.

Point masses become beliefs with a vanishing (but non-zero) covariance, and
one-dimensional beliefs can be exchanged with the scalar ScalarGaussianBelief.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional, Union

from .config import TINY
from .errors import DimensionError, UnderdeterminedBeliefError
from .gaussian_belief import GaussianBelief

logger = logging.getLogger(__name__)


@dataclass
class PointMass:
    """Deterministic vector value."""
    value: np.ndarray

    def __post_init__(self):
        self.value = np.array(self.value, dtype=np.float64).reshape(-1)


@dataclass
class ScalarGaussianBelief:
    """Univariate Gaussian with mean `m`, variance `V`, precision `W` and weighted mean `xi`."""
    m: Optional[float] = None
    V: Optional[float] = None
    W: Optional[float] = None
    xi: Optional[float] = None

    def __post_init__(self):
        if (self.m is None and self.xi is None) or (self.V is None and self.W is None):
            raise UnderdeterminedBeliefError("Cannot create ScalarGaussianBelief: distribution is underdetermined")


def from_point_mass(point: Union[PointMass, np.ndarray], tiny: float = TINY) -> GaussianBelief:
    """
    Approximate a point mass by a Gaussian belief.

    A true point mass has zero variance, which GaussianBelief rejects, so the
    covariance is set to `tiny` * I instead.

    Args:
        point: PointMass or vector holding the deterministic value
        tiny: Variance substituted on every dimension

    Returns:
        GaussianBelief centred on the point
    """
    if not isinstance(point, PointMass):
        point = PointMass(point)
    dim = point.value.shape[0]
    logger.debug("Approximating point mass (dim=%d) with covariance %g * I", dim, tiny)
    return GaussianBelief(mean=point.value, covariance=tiny * np.eye(dim))


def from_scalar(dist: ScalarGaussianBelief) -> GaussianBelief:
    """Wrap every set field of a scalar belief into a one-dimensional GaussianBelief."""
    def vec(x):
        return None if x is None else np.array([x], dtype=np.float64)

    def mat(x):
        return None if x is None else np.array([[x]], dtype=np.float64)

    return GaussianBelief(
        mean=vec(dist.m),
        covariance=mat(dist.V),
        precision=mat(dist.W),
        weighted_mean=vec(dist.xi)
    )


def to_scalar(belief: GaussianBelief) -> ScalarGaussianBelief:
    """
    Extract the single entry of every set field of a one-dimensional belief.

    Raises:
        DimensionError: If the belief is not one-dimensional
    """
    if belief.dimension != 1:
        raise DimensionError(
            f"Can only convert GaussianBelief to ScalarGaussianBelief if it has dimensionality 1, got {belief.dimension}"
        )

    def scalar(arr):
        return None if arr is None else float(arr.reshape(-1)[0])

    return ScalarGaussianBelief(
        m=scalar(belief.mean),
        V=scalar(belief.covariance),
        W=scalar(belief.precision),
        xi=scalar(belief.weighted_mean)
    )
