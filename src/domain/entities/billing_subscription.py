"""
BillingSubscription Entity

Billing state of a workspace, mirrored from the billing provider.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import BillingSubscriptionStatus


class BillingSubscription(SQLModel, table=True):
    """
    BillingSubscription entity - one billing subscription of a workspace.

    Business Rules:
    - A workspace may have several subscriptions over time
    - updated_at of the most recent one marks the last billing activity
    - No subscription at all means "no billing history", not zero inactivity
    """

    __tablename__ = "billing_subscriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)

    status: BillingSubscriptionStatus = Field(default=BillingSubscriptionStatus.active)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_billing_subscription_workspace_updated", "workspace_id", "updated_at"),
    )
