#!/usr/bin/env python3
"""
Linear algebra utilities for Gaussian beliefs.
Contains inversion, principal square root and tolerance-based comparisons.
"""

import numpy as np
from scipy.linalg import sqrtm
from typing import Optional

from ..config import APPROX_ATOL, APPROX_RTOL, ROUND_DIGITS
from ..errors import SingularMatrixError


def is_valid(arr: Optional[np.ndarray]) -> bool:
    """
    Whether `arr` holds a value.

    An absent array and an array whose every entry is NaN both count as unset.
    """
    if arr is None:
        return False
    return not np.all(np.isnan(arr))


def inverse(matrix: np.ndarray, name: str = "matrix") -> np.ndarray:
    """
    Invert a square matrix.

    Args:
        matrix: Matrix to invert
        name: Name of the matrix used in error messages

    Returns:
        The inverse of `matrix`

    Raises:
        SingularMatrixError: If `matrix` is singular or the inverse is not finite
    """
    try:
        inv = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as err:
        raise SingularMatrixError(f"Cannot invert {name}: {err}") from err

    if not np.all(np.isfinite(inv)):
        raise SingularMatrixError(f"Cannot invert {name}: inverse is not finite")
    return inv


def principal_sqrtm(matrix: np.ndarray) -> np.ndarray:
    """
    Principal square root of a symmetric positive semi-definite matrix.

    The result R is symmetric and satisfies R @ R = matrix.
    """
    root = np.real(sqrtm(matrix))
    return (root + root.T) / 2


def is_rounded_pos_def(matrix: np.ndarray, round_digits: int = ROUND_DIGITS) -> bool:
    """
    Whether `matrix` is symmetric positive definite after rounding.

    Args:
        matrix: Square matrix to test
        round_digits: Decimals kept before testing

    Returns:
        True if the rounded matrix is symmetric and admits a Cholesky factorization
    """
    rounded = np.round(matrix, round_digits)
    if rounded.ndim != 2 or rounded.shape[0] != rounded.shape[1]:
        return False
    if not np.all(np.isfinite(rounded)):
        return False
    if not np.allclose(rounded, rounded.T, rtol=APPROX_RTOL, atol=APPROX_ATOL):
        return False

    try:
        np.linalg.cholesky((rounded + rounded.T) / 2)
    except np.linalg.LinAlgError:
        return False
    return True


def is_approx_equal(
    a: np.ndarray,
    b: np.ndarray,
    rtol: float = APPROX_RTOL,
    atol: float = APPROX_ATOL
) -> bool:
    """Elementwise approximate equality; arrays of different shape are never equal."""
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        return False
    return bool(np.allclose(a, b, rtol=rtol, atol=atol))
