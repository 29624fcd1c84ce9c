"""
Unit tests for the per-run deletion cap.
"""

import asyncio

import pytest

from src.app.services.deletion_budget import DeletionBudget


@pytest.mark.asyncio
async def test_reservations_stop_at_limit():
    budget = DeletionBudget(3)

    granted = [await budget.try_reserve() for _ in range(5)]

    assert granted == [True, True, True, False, False]
    assert budget.deleted == 3
    assert not await budget.try_reserve()


@pytest.mark.asyncio
async def test_release_frees_a_slot():
    budget = DeletionBudget(1)
    assert await budget.try_reserve()
    assert not await budget.try_reserve()

    await budget.release()

    assert budget.deleted == 0
    assert await budget.try_reserve()


@pytest.mark.asyncio
async def test_release_never_goes_negative():
    budget = DeletionBudget(2)
    await budget.release()
    assert budget.deleted == 0


@pytest.mark.asyncio
async def test_zero_limit_disables_deletion():
    budget = DeletionBudget(0)
    assert not await budget.try_reserve()
    assert budget.deleted == 0


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        DeletionBudget(-1)


@pytest.mark.asyncio
async def test_concurrent_reservations_never_exceed_limit():
    budget = DeletionBudget(3)

    async def reserve():
        await asyncio.sleep(0)
        return await budget.try_reserve()

    granted = await asyncio.gather(*(reserve() for _ in range(20)))

    assert granted.count(True) == 3
    assert budget.deleted == 3
