"""
Migration cost estimation capability.
"""

from abc import ABC, abstractmethod
from typing import Optional


class MigrationCostEstimator(ABC):
    """
    Capability of a component to estimate its migration cost.

    Implementers report a numeric estimate, or None when no estimate is
    available. Querying the estimate has no side effects.
    """

    @abstractmethod
    def get_migration_cost_estimation(self) -> Optional[float]:
        """
        Return the estimated migration cost.

        Returns:
            The estimate, or None if no estimate is available
        """
        pass
