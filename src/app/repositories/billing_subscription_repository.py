from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import BillingSubscription


class IBillingSubscriptionRepository(ABC):
    """BillingSubscription repository interface - application layer"""

    @abstractmethod
    async def get_most_recent_by_workspace_id(
        self, workspace_id: UUID
    ) -> Optional[BillingSubscription]:
        """Get the most recently updated subscription of a workspace"""
        pass

    @abstractmethod
    async def create(self, subscription: BillingSubscription) -> BillingSubscription:
        """Create a new billing subscription"""
        pass
