"""
Use Case: Suspend Workspace

Billing integration endpoint to suspend a workspace for non-payment.
Suspended workspaces enter the scheduled cleanup pipeline.
"""

from datetime import datetime, UTC
from uuid import UUID
from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from src.domain.entities.enums import WorkspaceActivationStatus


class SuspendWorkspaceResponse(BaseModel):
    """Response DTO for SuspendWorkspaceUseCase"""

    status: str


class SuspendWorkspaceUseCase:
    """
    Suspend a workspace for non-payment (billing integration).

    Business Logic:
    1. Validate workspace exists
    2. Update activation status to suspended
    3. Create audit event

    Idempotent: Suspending already-suspended workspace succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, workspace_id: UUID) -> Result[SuspendWorkspaceResponse]:
        """
        Execute suspend workspace use case.

        Args:
            workspace_id: UUID of workspace to suspend

        Returns:
            Result[SuspendWorkspaceResponse] with status
        """
        async with self.uow:
            # 1. Get workspace
            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            if not workspace:
                return Return.err(Error("WORKSPACE_NOT_FOUND", "Workspace not found"))

            # 2. Update activation status
            workspace.activation_status = WorkspaceActivationStatus.suspended
            await self.uow.workspaces.update(workspace)

            # 3. Create audit event
            audit_event = AuditEvent(
                workspace_id=workspace_id,
                user_id=None,  # System action, no specific user
                action="workspace_suspended",
                event_metadata={
                    "suspended_at": datetime.now(UTC).isoformat(),
                },
            )
            await self.uow.audit_events.create(audit_event)

            # 4. Commit transaction
            await self.uow.commit()

            return Return.ok(SuspendWorkspaceResponse(status="suspended"))
