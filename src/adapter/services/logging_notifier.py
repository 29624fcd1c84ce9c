import logging
from typing import Sequence

from src.app.services.notifier import INotifier
from src.domain.entities import Workspace, WorkspaceMember

logger = logging.getLogger(__name__)


class LoggingNotifier(INotifier):
    """Notifier that only logs; e-mail delivery is handled outside this service"""

    async def send_deletion_warning(
        self,
        workspace: Workspace,
        members: Sequence[WorkspaceMember],
        days_until_deletion: int,
    ) -> None:
        logger.info(
            f"Deletion warning for workspace {workspace.id} {workspace.display_name}: "
            f"{len(members)} member(s), deletion in {days_until_deletion} day(s)"
        )
