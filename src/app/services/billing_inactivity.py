"""
Billing inactivity of a workspace.

Inactivity is the number of whole days elapsed since the most recent update
of any of the workspace's billing subscriptions. It is recomputed on every
run and never persisted.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Callable, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Workspace

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def utc_now() -> datetime:
    return datetime.now(UTC)


class BillingInactivityCalculator:
    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock

    async def compute(self, uow: UnitOfWork, workspace: Workspace) -> Optional[int]:
        """
        Compute the billing inactivity of a workspace, in whole days.

        Args:
            uow: Entered unit of work used for the lookup
            workspace: Workspace to inspect

        Returns:
            Floor of the elapsed days since the last subscription update,
            None when the workspace has no billing subscription at all
        """
        subscription = await uow.billing_subscriptions.get_most_recent_by_workspace_id(
            workspace.id
        )
        if subscription is None:
            logger.error(
                f"No billing subscription found for workspace {workspace.id} {workspace.display_name}"
            )
            return None

        # Stored timestamps are naive UTC
        updated_at = subscription.updated_at
        if updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=UTC)

        return (self.clock() - updated_at) // ONE_DAY
