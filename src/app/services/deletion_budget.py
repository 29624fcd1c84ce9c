import asyncio


class DeletionBudget:
    """
    Run-scoped cap on the number of workspaces deleted.

    Reservations are taken before the delete starts, under a lock, so
    workspaces processed concurrently in the same chunk can never push the
    total above the limit. A reservation is released when the delete fails.
    """

    def __init__(self, limit: int):
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        self.limit = limit
        self._reserved = 0
        self._lock = asyncio.Lock()

    @property
    def deleted(self) -> int:
        return self._reserved

    async def try_reserve(self) -> bool:
        """Take one deletion slot, False when the cap is reached"""
        async with self._lock:
            if self._reserved >= self.limit:
                return False
            self._reserved += 1
            return True

    async def release(self) -> None:
        """Give back a slot whose deletion did not happen"""
        async with self._lock:
            if self._reserved > 0:
                self._reserved -= 1
