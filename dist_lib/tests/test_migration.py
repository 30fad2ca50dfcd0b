"""
Tests for the migration cost estimation capability.
"""

import unittest
from typing import Optional

from dist_lib.migration import MigrationCostEstimator


class FixedCostEstimator(MigrationCostEstimator):
    """Estimator reporting a preset cost."""

    def __init__(self, cost: Optional[float]):
        self.cost = cost

    def get_migration_cost_estimation(self) -> Optional[float]:
        return self.cost


class TestMigrationCostEstimator(unittest.TestCase):
    """Test cases for the estimator interface."""

    def test_cannot_instantiate_interface(self):
        """Test that the interface is abstract."""
        with self.assertRaises(TypeError):
            MigrationCostEstimator()

    def test_reports_estimate(self):
        """Test reporting an estimate."""
        estimator = FixedCostEstimator(12.5)
        self.assertEqual(estimator.get_migration_cost_estimation(), 12.5)
        # querying has no side effects
        self.assertEqual(estimator.get_migration_cost_estimation(), 12.5)

    def test_reports_no_estimate(self):
        """Test reporting no estimate."""
        self.assertIsNone(FixedCostEstimator(None).get_migration_cost_estimation())


if __name__ == '__main__':
    unittest.main()
