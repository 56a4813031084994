#!/usr/bin/env python3
"""
Exceptions raised by Gaussian beliefs.
"""

import numpy as np


class BeliefError(Exception):
    """Base class for all Gaussian belief errors."""


class MalformedBeliefError(BeliefError, ValueError):
    """Paired fields have mismatched shapes or dimensions."""


class NumericRangeError(BeliefError, ValueError):
    """A covariance or precision matrix has an infinite entry or a zero diagonal."""


class UnderdeterminedBeliefError(BeliefError, ValueError):
    """Neither a mean-like nor a covariance-like field can be resolved."""


class SingularMatrixError(BeliefError, np.linalg.LinAlgError):
    """A covariance or precision matrix could not be inverted."""


class ImproperDistributionError(BeliefError, ValueError):
    """Moments or samples were requested from an improper belief."""


class DimensionError(BeliefError, ValueError):
    """A conversion was attempted at the wrong dimension."""
