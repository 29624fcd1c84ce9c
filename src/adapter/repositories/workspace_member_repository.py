from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.workspace_member_repository import IWorkspaceMemberRepository
from src.domain.entities import WorkspaceMember


class WorkspaceMemberRepository(IWorkspaceMemberRepository):
    """WorkspaceMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_workspace_id(self, workspace_id: UUID) -> List[WorkspaceMember]:
        """Get all members of a workspace"""
        stmt = (
            select(WorkspaceMember)
            .where(WorkspaceMember.workspace_id == workspace_id)
            .order_by(WorkspaceMember.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, member: WorkspaceMember) -> WorkspaceMember:
        """Create a new workspace member"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member
