from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import WorkspaceMember


class IWorkspaceMemberRepository(ABC):
    """WorkspaceMember repository interface - application layer"""

    @abstractmethod
    async def get_by_workspace_id(self, workspace_id: UUID) -> List[WorkspaceMember]:
        """Get all members of a workspace"""
        pass

    @abstractmethod
    async def create(self, member: WorkspaceMember) -> WorkspaceMember:
        """Create a new workspace member"""
        pass
