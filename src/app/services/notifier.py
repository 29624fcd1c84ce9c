from abc import ABC, abstractmethod
from typing import Sequence

from src.domain.entities import Workspace, WorkspaceMember


class INotifier(ABC):
    """Notification interface - application layer"""

    @abstractmethod
    async def send_deletion_warning(
        self,
        workspace: Workspace,
        members: Sequence[WorkspaceMember],
        days_until_deletion: int,
    ) -> None:
        """Tell the members of a workspace that it will be deleted soon"""
        pass
