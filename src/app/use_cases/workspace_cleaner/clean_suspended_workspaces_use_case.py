"""
Use Case: Clean Suspended Workspaces

Scheduled batch job. Scans suspended workspaces, measures their billing
inactivity and warns members of, or deletes, the workspaces that have been
inactive for too long.
"""

import logging
from collections import Counter
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.billing_inactivity import BillingInactivityCalculator
from src.app.services.chunked_runner import run_in_chunks
from src.app.services.deletion_budget import DeletionBudget
from src.app.services.notifier import INotifier
from src.app.services.unit_of_work import UnitOfWorkFactory
from src.app.services.warning_ledger import WarningLedger
from src.app.use_cases.workspace_cleaner.settings import WorkspaceCleanerSettings
from src.domain.entities import AuditEvent, Workspace
from src.domain.workspace_lifecycle import WorkspaceLifecycleAction, classify_workspace

logger = logging.getLogger(__name__)


class WorkspaceCleanupOutcome(str, Enum):
    """What happened to one workspace during a run"""

    ignored = "ignored"
    skipped_no_billing = "skipped_no_billing"
    warned = "warned"
    already_warned = "already_warned"
    warning_failed = "warning_failed"
    no_members = "no_members"
    deleted = "deleted"
    deletion_capped = "deletion_capped"


class CleanSuspendedWorkspacesResponse(BaseModel):
    """Response DTO for CleanSuspendedWorkspacesUseCase"""

    processed: int
    ignored: int
    skipped_no_billing: int
    warned: int
    already_warned: int
    warning_failed: int
    no_members: int
    deleted: int
    deletion_capped: int
    failed: int


class CleanSuspendedWorkspacesUseCase:
    """
    Warn or delete suspended workspaces according to their billing inactivity.

    Business Logic:
    1. Load every suspended workspace (failure aborts the run)
    2. Process them in chunks, concurrently inside a chunk
    3. Per workspace: compute inactivity, classify, then
       - delete: clear warning flags and delete, within the per-run cap
       - warn: flag members and notify, unless already warned
       - none / no billing history: leave untouched
    4. Return per-outcome counts

    A failure on one workspace is logged and counted; it neither stops its
    chunk siblings nor the following chunks. Nothing is retried inside a run,
    the next scheduled run re-evaluates everything from source data.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        notifier: INotifier,
        settings: WorkspaceCleanerSettings,
        inactivity_calculator: Optional[BillingInactivityCalculator] = None,
        warning_ledger: Optional[WarningLedger] = None,
    ):
        self.uow_factory = uow_factory
        self.notifier = notifier
        self.settings = settings
        self.inactivity_calculator = inactivity_calculator or BillingInactivityCalculator()
        self.warning_ledger = warning_ledger or WarningLedger(uow_factory)

    async def execute(self) -> Result[CleanSuspendedWorkspacesResponse]:
        """
        Execute one cleanup run.

        Returns:
            Result[CleanSuspendedWorkspacesResponse] with per-outcome counts

        Raises:
            Any error raised while loading the suspended workspaces
        """
        logger.info("Job running...")

        try:
            async with self.uow_factory() as uow:
                suspended_workspaces = await uow.workspaces.find_suspended()
        except Exception:
            logger.exception("Could not load suspended workspaces, aborting run")
            raise

        budget = DeletionBudget(self.settings.max_deletions_per_run)

        async def process(workspace: Workspace) -> WorkspaceCleanupOutcome:
            label = f"{workspace.id} {workspace.display_name}"
            try:
                return await self._process_workspace(workspace, budget)
            except Exception:
                logger.exception(f"Failed to clean workspace {label}")
                raise

        run = await run_in_chunks(suspended_workspaces, self.settings.chunk_size, process)

        counts = Counter(outcome.value for outcome in run.succeeded)
        response = CleanSuspendedWorkspacesResponse(
            processed=len(suspended_workspaces),
            ignored=counts[WorkspaceCleanupOutcome.ignored],
            skipped_no_billing=counts[WorkspaceCleanupOutcome.skipped_no_billing],
            warned=counts[WorkspaceCleanupOutcome.warned],
            already_warned=counts[WorkspaceCleanupOutcome.already_warned],
            warning_failed=counts[WorkspaceCleanupOutcome.warning_failed],
            no_members=counts[WorkspaceCleanupOutcome.no_members],
            deleted=counts[WorkspaceCleanupOutcome.deleted],
            deletion_capped=counts[WorkspaceCleanupOutcome.deletion_capped],
            failed=len(run.failed),
        )

        logger.info(
            f"Job done! {response.processed} suspended workspace(s): "
            f"{response.warned} warned, {response.deleted} deleted, "
            f"{response.deletion_capped} over deletion cap, {response.failed} failed"
        )
        return Return.ok(response)

    async def _process_workspace(
        self, workspace: Workspace, budget: DeletionBudget
    ) -> WorkspaceCleanupOutcome:
        async with self.uow_factory() as uow:
            inactivity = await self.inactivity_calculator.compute(uow, workspace)

        if inactivity is None:
            return WorkspaceCleanupOutcome.skipped_no_billing

        action = classify_workspace(
            inactivity,
            self.settings.inactive_days_before_warning,
            self.settings.inactive_days_before_deletion,
        )

        if action == WorkspaceLifecycleAction.delete:
            return await self._delete_workspace(workspace, inactivity, budget)

        if action == WorkspaceLifecycleAction.warn:
            return await self._warn_workspace(workspace, inactivity)

        return WorkspaceCleanupOutcome.ignored

    async def _delete_workspace(
        self, workspace: Workspace, inactivity: int, budget: DeletionBudget
    ) -> WorkspaceCleanupOutcome:
        if not await budget.try_reserve():
            logger.warning(
                f"Deletion cap of {budget.limit} reached ({budget.deleted} reserved), "
                f"workspace {workspace.id} {workspace.display_name} left for next run"
            )
            return WorkspaceCleanupOutcome.deletion_capped

        try:
            async with self.uow_factory() as uow:
                members = await uow.workspace_members.get_by_workspace_id(workspace.id)

            cleared = await self.warning_ledger.clear_warned(workspace.id, members)

            async with self.uow_factory() as uow:
                await uow.workspaces.delete(workspace.id)
                await uow.audit_events.create(
                    AuditEvent(
                        workspace_id=workspace.id,
                        user_id=None,  # System action, no specific user
                        action="workspace_deleted",
                        event_metadata={
                            "display_name": workspace.display_name,
                            "inactive_days": inactivity,
                            "members": len(members),
                            "warnings_not_cleared": [str(user_id) for user_id in cleared.failed],
                        },
                    )
                )
                await uow.commit()
        except Exception:
            await budget.release()
            raise

        logger.info(f"Cleaning Workspace {workspace.id} {workspace.display_name}")
        return WorkspaceCleanupOutcome.deleted

    async def _warn_workspace(
        self, workspace: Workspace, inactivity: int
    ) -> WorkspaceCleanupOutcome:
        async with self.uow_factory() as uow:
            members = await uow.workspace_members.get_by_workspace_id(workspace.id)

        if not members:
            logger.warning(
                f"Workspace {workspace.id} {workspace.display_name} has no members to warn"
            )
            return WorkspaceCleanupOutcome.no_members

        if await self.warning_ledger.is_warned(workspace.id, members):
            logger.info(f"Workspace {workspace.id} {workspace.display_name} already warned")
            return WorkspaceCleanupOutcome.already_warned

        marked = await self.warning_ledger.mark_warned(workspace.id, members)
        if not marked.any_succeeded:
            logger.error(
                f"Could not flag any member of workspace {workspace.id} "
                f"{workspace.display_name}, warning postponed to next run"
            )
            return WorkspaceCleanupOutcome.warning_failed
        if not marked.all_succeeded:
            logger.warning(
                f"Workspace {workspace.id} {workspace.display_name}: "
                f"{len(marked.failed)} of {len(members)} member(s) not flagged"
            )

        await self.notifier.send_deletion_warning(
            workspace, members, self.settings.days_until_deletion
        )

        async with self.uow_factory() as uow:
            await uow.audit_events.create(
                AuditEvent(
                    workspace_id=workspace.id,
                    user_id=None,
                    action="workspace_deletion_warned",
                    event_metadata={
                        "display_name": workspace.display_name,
                        "inactive_days": inactivity,
                        "days_until_deletion": self.settings.days_until_deletion,
                        "members_flagged": len(marked.succeeded),
                        "members_not_flagged": [str(user_id) for user_id in marked.failed],
                    },
                )
            )
            await uow.commit()

        logger.info(f"Warning Workspace {workspace.id} {workspace.display_name}")
        return WorkspaceCleanupOutcome.warned
