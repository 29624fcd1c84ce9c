from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.billing_subscription_repository import IBillingSubscriptionRepository
from src.domain.entities import BillingSubscription


class BillingSubscriptionRepository(IBillingSubscriptionRepository):
    """BillingSubscription repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_most_recent_by_workspace_id(
        self, workspace_id: UUID
    ) -> Optional[BillingSubscription]:
        """Get the most recently updated subscription of a workspace"""
        stmt = (
            select(BillingSubscription)
            .where(BillingSubscription.workspace_id == workspace_id)
            .order_by(BillingSubscription.updated_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, subscription: BillingSubscription) -> BillingSubscription:
        """Create a new billing subscription"""
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription
