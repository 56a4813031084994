#!/usr/bin/env python3
"""
Multivariate Gaussian beliefs package

Gaussian beliefs in moment and canonical form with lazy conversion between the two
"""

from .gaussian_belief import GaussianBelief
from .conversions import (
    PointMass,
    ScalarGaussianBelief,
    from_point_mass,
    from_scalar,
    to_scalar
)
from .errors import (
    BeliefError,
    MalformedBeliefError,
    NumericRangeError,
    UnderdeterminedBeliefError,
    SingularMatrixError,
    ImproperDistributionError,
    DimensionError
)

__all__ = [
    'GaussianBelief',
    'PointMass',
    'ScalarGaussianBelief',
    'from_point_mass',
    'from_scalar',
    'to_scalar',
    'BeliefError',
    'MalformedBeliefError',
    'NumericRangeError',
    'UnderdeterminedBeliefError',
    'SingularMatrixError',
    'ImproperDistributionError',
    'DimensionError'
]
