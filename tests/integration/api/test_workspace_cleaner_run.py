"""
Integration tests for the scheduled cleanup of suspended workspaces,
run through the admin trigger against a real database.
"""

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import (
    BillingSubscription,
    UserVar,
    Workspace,
    WorkspaceMember,
)
from src.domain.entities.enums import WorkspaceActivationStatus
from tests.fixtures.database_seed import seed_workspace

ADMIN_HEADERS = {"X-Admin-API-Key": "test-admin-key-12345"}


async def _count(session_factory, model, workspace_id) -> int:
    async with session_factory() as session:
        rows = (await session.exec(select(model).where(model.workspace_id == workspace_id))).all()
        return len(rows)


async def _workspace_exists(uow_factory, workspace_id) -> bool:
    async with uow_factory() as uow:
        return await uow.workspaces.get_by_id(workspace_id) is not None


async def _audit_actions(uow_factory, workspace_id):
    async with uow_factory() as uow:
        events = await uow.audit_events.get_by_workspace_id(workspace_id)
    return [event.action for event in events]


@pytest.mark.asyncio
async def test_cleanup_run_warns_deletes_and_skips(
    client: AsyncClient, session_factory, uow_factory, notifier
):
    # Arrange
    to_delete = await seed_workspace(uow_factory, inactive_days=40, member_count=3, warned=True)
    to_warn = await seed_workspace(uow_factory, inactive_days=20, member_count=3)
    no_billing = await seed_workspace(uow_factory, inactive_days=None, member_count=3)
    recent = await seed_workspace(uow_factory, inactive_days=3, member_count=3)
    active = await seed_workspace(
        uow_factory, inactive_days=90, member_count=3, status=WorkspaceActivationStatus.active
    )

    # Act
    response = await client.post("/admin/workspace-cleaner/run", headers=ADMIN_HEADERS)

    # Assert
    assert response.status_code == 200
    summary = response.json()
    assert summary["processed"] == 4
    assert summary["deleted"] == 1
    assert summary["warned"] == 1
    assert summary["skipped_no_billing"] == 1
    assert summary["ignored"] == 1
    assert summary["failed"] == 0

    # Deleted workspace is gone with everything scoped to it
    assert not await _workspace_exists(uow_factory, to_delete)
    assert await _count(session_factory, WorkspaceMember, to_delete) == 0
    assert await _count(session_factory, BillingSubscription, to_delete) == 0
    assert await _count(session_factory, UserVar, to_delete) == 0
    assert await _audit_actions(uow_factory, to_delete) == ["workspace_deleted"]

    # Warned workspace: every member flagged, notified once
    assert await _workspace_exists(uow_factory, to_warn)
    assert await _count(session_factory, UserVar, to_warn) == 3
    assert [call[0] for call in notifier.calls] == [to_warn]
    assert len(notifier.calls[0][1]) == 3
    assert notifier.calls[0][2] == 15
    assert await _audit_actions(uow_factory, to_warn) == ["workspace_deletion_warned"]

    # Untouched workspaces
    for workspace_id in (no_billing, recent, active):
        assert await _workspace_exists(uow_factory, workspace_id)
        assert await _count(session_factory, UserVar, workspace_id) == 0


@pytest.mark.asyncio
async def test_second_run_does_not_warn_again(
    client: AsyncClient, session_factory, uow_factory, notifier
):
    # Arrange
    to_warn = await seed_workspace(uow_factory, inactive_days=20, member_count=3)

    # Act
    first = await client.post("/admin/workspace-cleaner/run", headers=ADMIN_HEADERS)
    second = await client.post("/admin/workspace-cleaner/run", headers=ADMIN_HEADERS)

    # Assert
    assert first.json()["warned"] == 1
    assert second.json()["warned"] == 0
    assert second.json()["already_warned"] == 1
    assert len(notifier.calls) == 1
    assert await _count(session_factory, UserVar, to_warn) == 3


@pytest.mark.asyncio
async def test_deletion_cap_limits_a_run(client: AsyncClient, uow_factory):
    # Arrange: cap is 3 in the test settings
    workspace_ids = [
        await seed_workspace(uow_factory, inactive_days=40, member_count=2) for _ in range(5)
    ]

    # Act
    first = await client.post("/admin/workspace-cleaner/run", headers=ADMIN_HEADERS)

    # Assert
    assert first.json()["deleted"] == 3
    assert first.json()["deletion_capped"] == 2
    remaining = [wid for wid in workspace_ids if await _workspace_exists(uow_factory, wid)]
    assert len(remaining) == 2

    # Act: next run
    second = await client.post("/admin/workspace-cleaner/run", headers=ADMIN_HEADERS)

    # Assert
    assert second.json()["deleted"] == 2
    for workspace_id in workspace_ids:
        assert not await _workspace_exists(uow_factory, workspace_id)


@pytest.mark.asyncio
async def test_restored_workspace_leaves_the_pipeline(
    client: AsyncClient, session_factory, uow_factory, notifier
):
    # Arrange: warned workspace gets paid for
    workspace_id = await seed_workspace(uow_factory, inactive_days=20, member_count=3)
    await client.post("/admin/workspace-cleaner/run", headers=ADMIN_HEADERS)
    assert await _count(session_factory, UserVar, workspace_id) == 3

    # Act
    restore = await client.post(
        f"/admin/workspaces/{workspace_id}/restore", headers=ADMIN_HEADERS
    )
    run = await client.post("/admin/workspace-cleaner/run", headers=ADMIN_HEADERS)

    # Assert
    assert restore.json()["warnings_cleared"] == 3
    assert restore.json()["warnings_not_cleared"] == 0
    assert run.json()["processed"] == 0
    assert await _count(session_factory, UserVar, workspace_id) == 0
    assert len(notifier.calls) == 1
    assert sorted(await _audit_actions(uow_factory, workspace_id)) == [
        "workspace_deletion_warned",
        "workspace_restored",
    ]
