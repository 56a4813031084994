#!/usr/bin/env python3
"""
Numeric constants shared by the Gaussian belief code.
"""

import numpy as np

# Scale of the covariance used for vague (near-uninformative) priors
HUGE = 1e12

# Variance substituted for the zero variance of a point mass
TINY = 1e-12

# Float64 limits used by the construction-time range checks
FLOAT_TINY = np.finfo(np.float64).tiny
FLOAT_MAX = np.finfo(np.float64).max

# Decimals kept before the positive-definiteness test
ROUND_DIGITS = 12

# Tolerances for approximate elementwise equality
APPROX_RTOL = 1e-8
APPROX_ATOL = 1e-10
