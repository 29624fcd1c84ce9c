from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID


class IUserVarRepository(ABC):
    """UserVar key-value store interface - application layer"""

    @abstractmethod
    async def get(self, user_id: UUID, workspace_id: UUID, key: str) -> Optional[Any]:
        """Get the value stored for (user, workspace, key), None if absent"""
        pass

    @abstractmethod
    async def set(self, user_id: UUID, workspace_id: UUID, key: str, value: Any) -> None:
        """Insert or overwrite the value stored for (user, workspace, key)"""
        pass

    @abstractmethod
    async def delete(self, user_id: UUID, workspace_id: UUID, key: str) -> None:
        """Delete the value stored for (user, workspace, key), no-op if absent"""
        pass
