"""
Mock request batch for the ``settle demo`` command.

Odd counts fulfil with the count itself, even counts reject with it, so a
run over ``1..N`` produces an even split of outcomes.
"""

import asyncio
import logging
import random
from typing import Any

from settle.core.models.outcome import ClassificationResult
from settle.core.settle import settle_and_classify
from settle.core.utils.helpers import inclusive_range

logger = logging.getLogger(__name__)


class RequestRejected(Exception):
    """Raised by a mock request; ``payload`` is the rejected count."""

    def __init__(self, payload: Any):
        super().__init__(payload)
        self.payload = payload


async def mock_request(count: int = 0, max_delay: float = 0.0) -> int:
    """Pretend to make a request.

    Args:
        count: Request number; odd fulfils, even rejects
        max_delay: Upper bound of a random sleep before settling, so requests
            finish out of the order they were started

    Returns:
        The count, for odd counts

    Raises:
        RequestRejected: For even counts
    """
    if max_delay > 0:
        await asyncio.sleep(random.uniform(0, max_delay))

    if count % 2 == 1:
        return count
    raise RequestRejected(count)


async def run_demo(
    start: int, stop: int, step: int, max_delay: float = 0.0
) -> ClassificationResult[int, RequestRejected]:
    """Issue one mock request per number in ``start..stop`` and split the outcomes."""
    counts = inclusive_range(start, stop, step)
    logger.info(f"Issuing {len(counts)} mock requests (max delay {max_delay}s)")

    return await settle_and_classify(
        (mock_request(count, max_delay) for count in counts),
        reason_type=RequestRejected,
    )
