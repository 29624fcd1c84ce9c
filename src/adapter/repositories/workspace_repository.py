from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.workspace_repository import IWorkspaceRepository
from src.domain.entities import (
    BillingSubscription,
    UserVar,
    Workspace,
    WorkspaceActivationStatus,
    WorkspaceMember,
)


class WorkspaceRepository(IWorkspaceRepository):
    """Workspace repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        stmt = select(Workspace).where(Workspace.id == workspace_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_suspended(self) -> List[Workspace]:
        """Get all suspended workspaces, oldest first"""
        stmt = (
            select(Workspace)
            .where(Workspace.activation_status == WorkspaceActivationStatus.suspended)
            .order_by(Workspace.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        self.session.add(workspace)
        await self.session.flush()
        await self.session.refresh(workspace)
        return workspace

    async def update(self, workspace: Workspace) -> Workspace:
        """Update existing workspace"""
        self.session.add(workspace)
        await self.session.flush()
        await self.session.refresh(workspace)
        return workspace

    async def delete(self, workspace_id: UUID) -> None:
        """Hard delete a workspace and every row scoped to it"""
        # Bulk statements: no ORM cascade, children first
        await self.session.execute(delete(UserVar).where(UserVar.workspace_id == workspace_id))
        await self.session.execute(
            delete(WorkspaceMember).where(WorkspaceMember.workspace_id == workspace_id)
        )
        await self.session.execute(
            delete(BillingSubscription).where(BillingSubscription.workspace_id == workspace_id)
        )
        await self.session.execute(delete(Workspace).where(Workspace.id == workspace_id))
        await self.session.flush()
