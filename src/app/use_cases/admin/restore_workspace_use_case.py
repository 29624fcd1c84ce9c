"""
Use Case: Restore Workspace

Billing integration endpoint to reactivate a suspended workspace after payment.
Reactivation resets the deletion-warning ledger of the workspace so a later
suspension starts a fresh warning cycle.
"""

import logging
from datetime import datetime, UTC
from uuid import UUID
from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.warning_ledger import WarningLedger
from src.domain.entities import AuditEvent
from src.domain.entities.enums import WorkspaceActivationStatus

logger = logging.getLogger(__name__)


class RestoreWorkspaceResponse(BaseModel):
    """Response DTO for RestoreWorkspaceUseCase"""

    status: str
    warnings_cleared: int
    warnings_not_cleared: int


class RestoreWorkspaceUseCase:
    """
    Restore a suspended workspace after payment received.

    Business Logic:
    1. Validate workspace exists
    2. Update activation status to active
    3. Create audit event and commit
    4. Clear every member's deletion warning (best effort, leftovers are logged)

    Idempotent: Restoring already-active workspace succeeds
    """

    def __init__(self, uow: UnitOfWork, warning_ledger: WarningLedger):
        self.uow = uow
        self.warning_ledger = warning_ledger

    async def execute(self, workspace_id: UUID) -> Result[RestoreWorkspaceResponse]:
        """
        Execute restore workspace use case.

        Args:
            workspace_id: UUID of workspace to restore

        Returns:
            Result[RestoreWorkspaceResponse] with status and cleared warnings
        """
        async with self.uow:
            # 1. Get workspace
            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            if not workspace:
                return Return.err(Error("WORKSPACE_NOT_FOUND", "Workspace not found"))

            # 2. Update activation status to active
            workspace.activation_status = WorkspaceActivationStatus.active
            await self.uow.workspaces.update(workspace)
            members = await self.uow.workspace_members.get_by_workspace_id(workspace_id)

            # 3. Create audit event
            audit_event = AuditEvent(
                workspace_id=workspace_id,
                user_id=None,  # System action, no specific user
                action="workspace_restored",
                event_metadata={
                    "restored_at": datetime.now(UTC).isoformat(),
                },
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

        # 4. Clear warnings, each member in its own transaction
        cleared = await self.warning_ledger.clear_warned(workspace_id, members)
        if cleared.failed:
            logger.warning(
                f"Workspace {workspace_id} restored but deletion warnings of "
                f"{len(cleared.failed)} member(s) remain: {[str(u) for u in cleared.failed]}"
            )

        return Return.ok(
            RestoreWorkspaceResponse(
                status="active",
                warnings_cleared=len(cleared.succeeded),
                warnings_not_cleared=len(cleared.failed),
            )
        )
