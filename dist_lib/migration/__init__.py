"""
Migration module for the distribution library.
"""

from dist_lib.migration.estimator import MigrationCostEstimator

__all__ = ['MigrationCostEstimator']
