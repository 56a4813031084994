#!/usr/bin/env python3
"""
Gaussian belief data structure for Belief Propagation.

A GaussianBelief holds a multivariate Gaussian in moment form (mean, covariance),
in canonical form (weighted mean, precision), or in any mix of the two. Missing
fields are derived on demand and cached on the instance.

Example:
    GaussianBelief(mean=[1.0, 3.0], covariance=[[2.0, 0.0], [0.0, 2.0]])
"""

import logging
import threading
import numpy as np
from dataclasses import dataclass, field
from typing import Any, Optional

from .config import FLOAT_TINY, HUGE
from .errors import (
    ImproperDistributionError,
    MalformedBeliefError,
    NumericRangeError,
    SingularMatrixError,
    UnderdeterminedBeliefError
)
from .utils.linear_algebra_utils import (
    inverse,
    is_approx_equal,
    is_rounded_pos_def,
    is_valid,
    principal_sqrtm
)

logger = logging.getLogger(__name__)


def _as_vector(value, name: str) -> Optional[np.ndarray]:
    if value is None:
        return None
    arr = np.array(value, dtype=np.float64)
    if arr.ndim != 1:
        raise MalformedBeliefError(f"Cannot create GaussianBelief: {name} should be a vector, got shape {arr.shape}")
    return arr if is_valid(arr) else None


def _as_matrix(value, name: str) -> Optional[np.ndarray]:
    if value is None:
        return None
    arr = np.array(value, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise MalformedBeliefError(f"Cannot create GaussianBelief: {name} should be a square matrix, got shape {arr.shape}")
    return arr if is_valid(arr) else None


def _check_numeric_range(matrix: np.ndarray, name: str):
    if np.any(np.isinf(matrix)):
        raise NumericRangeError(f"Cannot create GaussianBelief: {name} cannot contain Inf")
    if not np.all(np.abs(np.diag(matrix)) > FLOAT_TINY):
        raise NumericRangeError(f"Cannot create GaussianBelief: diagonal of {name} should be non-zero")


def _format_array(arr: np.ndarray) -> str:
    return np.array2string(arr, separator=', ')


@dataclass(eq=False, repr=False)
class GaussianBelief:
    """Multivariate Gaussian with lazily completed moment and canonical parameters."""
    mean: Optional[np.ndarray] = None
    covariance: Optional[np.ndarray] = None
    precision: Optional[np.ndarray] = None
    weighted_mean: Optional[np.ndarray] = None
    _lock: Any = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    # Unhashable: unset fields are filled in place
    __hash__ = None

    def __post_init__(self):
        self.mean = _as_vector(self.mean, "mean")
        self.weighted_mean = _as_vector(self.weighted_mean, "weighted_mean")
        self.covariance = _as_matrix(self.covariance, "covariance")
        self.precision = _as_matrix(self.precision, "precision")

        if self.mean is not None and self.weighted_mean is not None:
            if self.mean.shape != self.weighted_mean.shape:
                raise MalformedBeliefError("Cannot create GaussianBelief: mean and weighted_mean should have the same size")
        if self.covariance is not None and self.precision is not None:
            if self.covariance.shape != self.precision.shape:
                raise MalformedBeliefError("Cannot create GaussianBelief: covariance and precision should have the same size")

        if len(set(self._set_dimensions())) > 1:
            raise MalformedBeliefError("Cannot create GaussianBelief: inconsistent parameter dimensions")

        if self.covariance is not None:
            _check_numeric_range(self.covariance, "covariance matrix")
        if self.precision is not None:
            _check_numeric_range(self.precision, "precision matrix")

        if not self.is_well_defined():
            raise UnderdeterminedBeliefError("Cannot create GaussianBelief: distribution is underdetermined")

    @classmethod
    def vague(cls, dim: int = 1, huge: float = HUGE) -> 'GaussianBelief':
        """Near-uninformative prior: zero mean and covariance `huge` * I."""
        return cls(mean=np.zeros(dim), covariance=huge * np.eye(dim))

    @classmethod
    def standard(cls, dim: int = 1) -> 'GaussianBelief':
        """Standard normal belief: zero mean and identity covariance."""
        return cls(mean=np.zeros(dim), covariance=np.eye(dim))

    def _set_dimensions(self):
        fields = (self.mean, self.weighted_mean, self.covariance, self.precision)
        return [f.shape[0] for f in fields if f is not None]

    @property
    def dimension(self) -> int:
        return self._set_dimensions()[0]

    # Validity

    def is_well_defined(self) -> bool:
        """Whether a mean-like and a covariance-like field are set with agreeing dimensions."""
        if self.mean is None and self.weighted_mean is None:
            return False
        if self.covariance is None and self.precision is None:
            return False
        return len(set(self._set_dimensions())) == 1

    def is_proper(self) -> bool:
        """Whether the belief is well defined and its covariance (or precision) is positive definite."""
        if not self.is_well_defined():
            return False
        param = self.covariance if self.covariance is not None else self.precision
        return is_rounded_pos_def(param)

    def is_consistent(self) -> bool:
        """
        Check that an over-determined belief agrees with itself.

        Returns False when the supplied parametrizations disagree.

        Raises:
            SingularMatrixError: If both covariance and precision are set and
                neither can be inverted
        """
        if self.covariance is not None and self.precision is not None:
            try:
                consistent = is_approx_equal(inverse(self.covariance, "covariance"), self.precision)
            except SingularMatrixError:
                logger.warning("Covariance is singular, checking consistency through the precision inverse")
                try:
                    consistent = is_approx_equal(inverse(self.precision, "precision"), self.covariance)
                except SingularMatrixError as err:
                    raise SingularMatrixError(
                        "Cannot check consistency of GaussianBelief because both covariance and precision are non-invertible"
                    ) from err
            if not consistent:
                return False

        if self.mean is not None and self.weighted_mean is not None:
            if self.covariance is not None:
                if not is_approx_equal(self.covariance @ self.weighted_mean, self.mean):
                    return False
            elif not is_approx_equal(self.precision @ self.mean, self.weighted_mean):
                return False

        return True

    # Lazy parametrization completion

    def ensure_mean(self) -> 'GaussianBelief':
        """Ensure that `mean` is set, deriving it from the canonical form if needed."""
        with self._lock:
            if self.mean is None:
                logger.debug("Deriving mean from weighted mean (dim=%d)", self.dimension)
                self.mean = self.ensure_covariance().covariance @ self.weighted_mean
        return self

    def ensure_weighted_mean(self) -> 'GaussianBelief':
        """Ensure that `weighted_mean` is set, deriving it from the mean if needed."""
        with self._lock:
            if self.weighted_mean is None:
                logger.debug("Deriving weighted mean from mean (dim=%d)", self.dimension)
                self.weighted_mean = self.ensure_precision().precision @ self.mean
        return self

    def ensure_covariance(self) -> 'GaussianBelief':
        """Ensure that `covariance` is set by inverting the precision if needed."""
        with self._lock:
            if self.covariance is None:
                logger.debug("Deriving covariance by inverting precision (dim=%d)", self.dimension)
                self.covariance = inverse(self.precision, "precision")
        return self

    def ensure_precision(self) -> 'GaussianBelief':
        """Ensure that `precision` is set by inverting the covariance if needed."""
        with self._lock:
            if self.precision is None:
                logger.debug("Deriving precision by inverting covariance (dim=%d)", self.dimension)
                self.precision = inverse(self.covariance, "covariance")
        return self

    def ensure_moment_form(self) -> 'GaussianBelief':
        return self.ensure_mean().ensure_covariance()

    def ensure_mean_precision_form(self) -> 'GaussianBelief':
        return self.ensure_mean().ensure_precision()

    def ensure_canonical_form(self) -> 'GaussianBelief':
        return self.ensure_weighted_mean().ensure_precision()

    def ensure_weighted_covariance_form(self) -> 'GaussianBelief':
        return self.ensure_weighted_mean().ensure_covariance()

    def copy(self) -> 'GaussianBelief':
        """Independent belief holding copies of the currently set fields."""
        with self._lock:
            return GaussianBelief(
                mean=self.mean,
                covariance=self.covariance,
                precision=self.precision,
                weighted_mean=self.weighted_mean
            )

    def resolved(self) -> 'GaussianBelief':
        """New belief with all four fields materialized; this belief is left as is."""
        return self.copy().ensure_moment_form().ensure_canonical_form()

    # Moments

    def get_mean(self) -> np.ndarray:
        if not self.is_proper():
            return np.full(self.dimension, np.nan)
        return self.ensure_moment_form().mean.copy()

    def get_covariance(self) -> np.ndarray:
        if not self.is_proper():
            return np.full((self.dimension, self.dimension), np.nan)
        return self.ensure_covariance().covariance.copy()

    def get_variance(self) -> np.ndarray:
        """Diagonal of the covariance, or NaNs if the belief is improper."""
        if not self.is_proper():
            return np.full(self.dimension, np.nan)
        return np.diag(self.ensure_covariance().covariance).copy()

    def sample(self, rng: Optional[np.random.Generator] = None, size: Optional[int] = None) -> np.ndarray:
        """
        Draw from the belief.

        Args:
            rng: Random generator (default: a fresh `np.random.default_rng()`)
            size: Number of draws; None returns a single vector

        Returns:
            A vector of shape (n,), or an array of shape (size, n)

        Raises:
            ImproperDistributionError: If the belief is not proper
        """
        if not self.is_proper():
            raise ImproperDistributionError("Cannot sample from improper distribution")
        if rng is None:
            rng = np.random.default_rng()

        self.ensure_moment_form()
        root = principal_sqrtm(self.covariance)
        if size is None:
            return root @ rng.standard_normal(self.dimension) + self.mean
        return rng.standard_normal((size, self.dimension)) @ root.T + self.mean

    # Comparison and rendering

    def __eq__(self, other):
        if not isinstance(other, GaussianBelief):
            return NotImplemented
        if self is other:
            return True
        if not self.is_well_defined() or not other.is_well_defined():
            return False

        if self.mean is not None and other.mean is not None:
            if not is_approx_equal(self.mean, other.mean):
                return False
        elif self.weighted_mean is not None and other.weighted_mean is not None:
            if not is_approx_equal(self.weighted_mean, other.weighted_mean):
                return False
        else:
            self.ensure_mean()
            other.ensure_mean()
            if not is_approx_equal(self.mean, other.mean):
                return False

        if self.covariance is not None and other.covariance is not None:
            return is_approx_equal(self.covariance, other.covariance)
        if self.precision is not None and other.precision is not None:
            return is_approx_equal(self.precision, other.precision)
        self.ensure_covariance()
        other.ensure_covariance()
        return is_approx_equal(self.covariance, other.covariance)

    def format(self) -> str:
        if self.mean is not None and self.covariance is not None:
            return f"N(m={_format_array(self.mean)}, V={_format_array(self.covariance)})"
        elif self.mean is not None and self.precision is not None:
            return f"N(m={_format_array(self.mean)}, W={_format_array(self.precision)})"
        elif self.weighted_mean is not None and self.precision is not None:
            return f"N(xi={_format_array(self.weighted_mean)}, W={_format_array(self.precision)})"
        elif self.weighted_mean is not None and self.covariance is not None:
            return f"N(xi={_format_array(self.weighted_mean)}, V={_format_array(self.covariance)})"
        return "N(underdetermined)"

    def __str__(self):
        return self.format()

    __repr__ = __str__
