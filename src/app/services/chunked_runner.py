"""
Chunked concurrent execution.

Splits an ordered sequence into groups of at most ``chunk_size`` items.
Groups run one after another; the items of a group run concurrently and the
runner waits for every one of them to settle before starting the next group.
Peak concurrency is therefore bounded by ``chunk_size``.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class ItemOutcome(Generic[T]):
    """Outcome of one action invocation"""

    item: T
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ChunkedRunResult(Generic[T]):
    """Outcomes of every item, in input order"""

    outcomes: List[ItemOutcome[T]] = field(default_factory=list)

    @property
    def succeeded(self) -> List[ItemOutcome[T]]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> List[ItemOutcome[T]]:
        return [outcome for outcome in self.outcomes if not outcome.ok]


def chunk(items: Sequence[T], chunk_size: int) -> List[List[T]]:
    """Split items into ordered groups of at most chunk_size"""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    return [list(items[i : i + chunk_size]) for i in range(0, len(items), chunk_size)]


async def run_in_chunks(
    items: Sequence[T],
    chunk_size: int,
    action: Callable[[T], Awaitable[Any]],
) -> ChunkedRunResult[T]:
    """
    Invoke ``action`` exactly once per item, ``chunk_size`` items at a time.

    A failing action does not cancel its siblings nor the following chunks:
    the exception is captured in the item's outcome. Cancellation and other
    BaseExceptions propagate.

    Args:
        items: Ordered items to process
        chunk_size: Maximum number of concurrent invocations (>= 1)
        action: Coroutine function called with each item

    Returns:
        ChunkedRunResult with one ItemOutcome per item, in input order

    Raises:
        ValueError: chunk_size is lower than 1
    """
    result: ChunkedRunResult[T] = ChunkedRunResult()

    for group in chunk(items, chunk_size):
        settled = await asyncio.gather(
            *(action(item) for item in group), return_exceptions=True
        )
        for item, value in zip(group, settled):
            if isinstance(value, Exception):
                result.outcomes.append(ItemOutcome(item=item, error=value))
            elif isinstance(value, BaseException):
                raise value
            else:
                result.outcomes.append(ItemOutcome(item=item, value=value))

    return result
