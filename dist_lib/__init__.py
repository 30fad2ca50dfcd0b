"""
Discrete Distribution Library.

This library provides an ordered discrete probability distribution with
inverse-CDF sampling, empirical re-estimation and constructors for common
skewed shapes (exponential, linear, zeta, two-step), mainly for simulating
skewed workloads such as key-access patterns.
"""

__version__ = '0.1.0'

from dist_lib import distribution
from dist_lib import migration
from dist_lib import utils
from dist_lib.distribution import Distribution
from dist_lib.migration import MigrationCostEstimator

__all__ = [
    'distribution',
    'migration',
    'utils',
    'Distribution',
    'MigrationCostEstimator'
]
