"""
Admin API Routes - Workspace Administration Endpoints

These endpoints are for internal service integrations (e.g., billing system)
and operators. Authentication is via Admin API Key.
"""

from uuid import UUID
from fastapi import APIRouter, Depends, status

from src.api.error import to_http_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.notifier import INotifier
from src.app.services.unit_of_work import UnitOfWork, UnitOfWorkFactory
from src.app.services.warning_ledger import WarningLedger
from src.app.use_cases.admin import (
    RestoreWorkspaceResponse,
    RestoreWorkspaceUseCase,
    SuspendWorkspaceResponse,
    SuspendWorkspaceUseCase,
)
from src.app.use_cases.workspace_cleaner import (
    CleanSuspendedWorkspacesResponse,
    CleanSuspendedWorkspacesUseCase,
    WorkspaceCleanerSettings,
)
from src.depends import (
    get_notifier,
    get_unit_of_work,
    get_unit_of_work_factory,
    get_workspace_cleaner_settings,
)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/workspaces/{workspace_id}/suspend",
    status_code=status.HTTP_200_OK,
    response_model=SuspendWorkspaceResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def suspend_workspace(
    workspace_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Suspend Workspace

    Billing system endpoint to suspend a workspace for non-payment.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: WORKSPACE_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = SuspendWorkspaceUseCase(uow)
    result = await use_case.execute(workspace_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/workspaces/{workspace_id}/restore",
    status_code=status.HTTP_200_OK,
    response_model=RestoreWorkspaceResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def restore_workspace(
    workspace_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    uow_factory: UnitOfWorkFactory = Depends(get_unit_of_work_factory),
):
    """
    Restore Workspace

    Billing system endpoint to reactivate a suspended workspace after payment.
    Clears pending deletion warnings of every member.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: WORKSPACE_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = RestoreWorkspaceUseCase(uow, WarningLedger(uow_factory))
    result = await use_case.execute(workspace_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/workspace-cleaner/run",
    status_code=status.HTTP_200_OK,
    response_model=CleanSuspendedWorkspacesResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def run_workspace_cleaner(
    uow_factory: UnitOfWorkFactory = Depends(get_unit_of_work_factory),
    notifier: INotifier = Depends(get_notifier),
    settings: WorkspaceCleanerSettings = Depends(get_workspace_cleaner_settings),
):
    """
    Run Workspace Cleaner

    Runs one cleanup of suspended workspaces immediately, outside the
    schedule. Callers must not overlap it with a scheduled run.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = CleanSuspendedWorkspacesUseCase(uow_factory, notifier, settings)
    result = await use_case.execute()

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
