"""Settle-all primitive built on ``asyncio.gather``.

Every awaitable runs to a terminal state; one failure never cancels or
short-circuits its siblings. Results come back in initiation order, not
completion order.
"""

import asyncio
import logging
from typing import Any, Awaitable, Iterable, List, Optional, TypeVar

from settle.core.classifier import classify_settled
from settle.core.models.outcome import ClassificationResult, Fulfilled, Outcome, Rejected

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _settle_one(awaitable: Awaitable[T]) -> Outcome[T, Exception]:
    """Await one operation and record how it ended."""
    try:
        return Fulfilled(await awaitable)
    except Exception as e:
        return Rejected(e)


def from_gather_results(results: Iterable[Any]) -> List[Outcome[Any, BaseException]]:
    """Convert raw ``gather(..., return_exceptions=True)`` output into outcomes.

    Exception instances become ``Rejected``; anything else is ``Fulfilled``.
    """
    return [
        Rejected(result) if isinstance(result, BaseException) else Fulfilled(result)
        for result in results
    ]


async def settle_all(awaitables: Iterable[Awaitable[T]]) -> List[Outcome[T, BaseException]]:
    """Wait for every awaitable to succeed or fail.

    Args:
        awaitables: Independent operations, in initiation order

    Returns:
        One outcome per awaitable, in the same order

    Raises:
        Whatever the *awaitables* iterable raises while being consumed; any
        coroutines already taken from it are closed first and never run
    """
    collected: List[Awaitable[T]] = []
    try:
        for awaitable in awaitables:
            collected.append(awaitable)
    except Exception:
        for awaitable in collected:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
        raise

    tasks = [_settle_one(awaitable) for awaitable in collected]

    # A child cancelled on its own comes back as a CancelledError result
    results = await asyncio.gather(*tasks, return_exceptions=True)
    outcomes = [
        result if isinstance(result, (Fulfilled, Rejected)) else Rejected(result)
        for result in results
    ]

    fulfilled = sum(1 for outcome in outcomes if isinstance(outcome, Fulfilled))
    logger.debug(
        f"Settled {len(outcomes)} operations: "
        f"{fulfilled} fulfilled, {len(outcomes) - fulfilled} rejected"
    )
    return outcomes


async def settle_and_classify(
    awaitables: Iterable[Awaitable[Any]], reason_type: Optional[type] = None
) -> ClassificationResult[Any, Any]:
    """Settle every awaitable, then split the outcomes."""
    outcomes = await settle_all(awaitables)
    return classify_settled(outcomes, reason_type)
