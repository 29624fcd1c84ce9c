"""
Deletion-warning ledger.

Records, per (member, workspace), that the member was warned about the
upcoming deletion of the workspace. The flag lives in the user vars store
under USER_WORKSPACE_DELETION_WARNING_SENT_KEY. A workspace counts as warned
as soon as any one of its members carries the flag.

Writes are best effort per member: every member is written in its own unit
of work, a failure is logged and reported in the returned LedgerWriteResult
and never rolls back the other members.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence
from uuid import UUID

from src.app.services.chunked_runner import run_in_chunks
from src.app.services.unit_of_work import UnitOfWorkFactory
from src.domain.entities import WorkspaceMember
from src.domain.workspace_lifecycle import USER_WORKSPACE_DELETION_WARNING_SENT_KEY

logger = logging.getLogger(__name__)

MEMBER_CHUNK_SIZE = 5


@dataclass
class LedgerWriteResult:
    succeeded: List[UUID] = field(default_factory=list)
    failed: List[UUID] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    @property
    def any_succeeded(self) -> bool:
        return bool(self.succeeded)


class WarningLedger:
    def __init__(self, uow_factory: UnitOfWorkFactory, chunk_size: int = MEMBER_CHUNK_SIZE):
        self.uow_factory = uow_factory
        self.chunk_size = chunk_size

    async def is_warned(self, workspace_id: UUID, members: Sequence[WorkspaceMember]) -> bool:
        """True when at least one member of the workspace carries the flag"""
        async with self.uow_factory() as uow:
            for member in members:
                value = await uow.user_vars.get(
                    member.user_id, workspace_id, USER_WORKSPACE_DELETION_WARNING_SENT_KEY
                )
                if value is True:
                    return True
        return False

    async def mark_warned(
        self, workspace_id: UUID, members: Sequence[WorkspaceMember]
    ) -> LedgerWriteResult:
        """Set the warning flag for every member"""

        async def _mark(member: WorkspaceMember) -> None:
            async with self.uow_factory() as uow:
                await uow.user_vars.set(
                    member.user_id,
                    workspace_id,
                    USER_WORKSPACE_DELETION_WARNING_SENT_KEY,
                    True,
                )
                await uow.commit()

        return await self._write_all(workspace_id, members, _mark, "mark")

    async def clear_warned(
        self, workspace_id: UUID, members: Sequence[WorkspaceMember]
    ) -> LedgerWriteResult:
        """Delete the warning flag of every member"""

        async def _clear(member: WorkspaceMember) -> None:
            async with self.uow_factory() as uow:
                await uow.user_vars.delete(
                    member.user_id, workspace_id, USER_WORKSPACE_DELETION_WARNING_SENT_KEY
                )
                await uow.commit()

        return await self._write_all(workspace_id, members, _clear, "clear")

    async def _write_all(self, workspace_id, members, write, verb) -> LedgerWriteResult:
        run = await run_in_chunks(members, self.chunk_size, write)

        result = LedgerWriteResult()
        for outcome in run.outcomes:
            if outcome.ok:
                result.succeeded.append(outcome.item.user_id)
            else:
                result.failed.append(outcome.item.user_id)
                logger.warning(
                    f"Failed to {verb} deletion warning for user {outcome.item.user_id} "
                    f"in workspace {workspace_id}: {outcome.error!r}"
                )
        return result
