"""
Scheduled entry point of the workspace cleaner.

RUN:  python cleanup.py

Runs a single cleanup of suspended workspaces and exits. Meant to be started
by an external scheduler (cron, Kubernetes CronJob) that guarantees at most
one run at a time.
"""

import asyncio
import logging
import sys

from sqlmodel import SQLModel

from config import ApplicationConfig
from src.app.use_cases.workspace_cleaner import CleanSuspendedWorkspacesUseCase
from src.depends import (
    engine,
    get_notifier,
    get_unit_of_work_factory,
    get_workspace_cleaner_settings,
)

logger = logging.getLogger("workspace_cleaner")


async def run_once() -> int:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    try:
        use_case = CleanSuspendedWorkspacesUseCase(
            get_unit_of_work_factory(),
            get_notifier(),
            get_workspace_cleaner_settings(),
        )
        result = await use_case.execute()
    finally:
        await engine.dispose()

    if result.is_err():
        logger.error(f"Cleanup failed: {result.error.code} {result.error.message}")
        return 1

    return 1 if result.value.failed else 0


def main() -> int:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s  %(message)s",
    )
    return asyncio.run(run_once())


if __name__ == "__main__":
    sys.exit(main())
