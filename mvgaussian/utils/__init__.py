#!/usr/bin/env python3
"""
Utility modules for Gaussian beliefs
"""

from .linear_algebra_utils import (
    inverse,
    principal_sqrtm,
    is_rounded_pos_def,
    is_approx_equal,
    is_valid
)

__all__ = [
    'inverse',
    'principal_sqrtm',
    'is_rounded_pos_def',
    'is_approx_equal',
    'is_valid'
]
