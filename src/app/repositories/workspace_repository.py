from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Workspace


class IWorkspaceRepository(ABC):
    """Workspace repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        pass

    @abstractmethod
    async def find_suspended(self) -> List[Workspace]:
        """Get all workspaces whose activation status is suspended"""
        pass

    @abstractmethod
    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        pass

    @abstractmethod
    async def update(self, workspace: Workspace) -> Workspace:
        """Update existing workspace"""
        pass

    @abstractmethod
    async def delete(self, workspace_id: UUID) -> None:
        """Hard delete a workspace with its members, subscriptions and user vars"""
        pass
