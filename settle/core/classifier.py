"""Partition a batch of settled outcomes into values and reasons."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Type, TypeVar, overload

from settle.core.models.outcome import (
    ClassificationResult,
    Fulfilled,
    MalformedOutcomeError,
    Outcome,
    Rejected,
)

__all__: list[str] = ["MalformedOutcomeError", "classify_settled"]

F = TypeVar("F")
R = TypeVar("R")
PinnedR = TypeVar("PinnedR")


@overload
def classify_settled(batch: Iterable[Outcome[F, R]]) -> ClassificationResult[F, R]: ...


@overload
def classify_settled(
    batch: Iterable[Outcome[F, Any]], reason_type: Type[PinnedR]
) -> ClassificationResult[F, PinnedR]: ...


def classify_settled(
    batch: Iterable[Outcome[Any, Any]], reason_type: Optional[type] = None
) -> ClassificationResult[Any, Any]:
    """Split settled outcomes into fulfilled values and rejected reasons.

    Both output lists keep the relative order of the input. The batch is
    read once and left untouched.

    Args:
        batch: Settled outcomes in the order their operations were started
        reason_type: Pins the reason type for static checkers when rejection
            payloads are untyped at the boundary; ignored at runtime

    Returns:
        ClassificationResult with ``fulfilled_values`` and ``rejected_reasons``

    Raises:
        MalformedOutcomeError: If an entry is neither Fulfilled nor Rejected

    Example:
        values, reasons = classify_settled(await settle_all(requests))
        errors = classify_settled(outcomes, reason_type=HTTPError).rejected_reasons
    """
    fulfilled_values: list[Any] = []
    rejected_reasons: list[Any] = []

    for position, outcome in enumerate(batch):
        if isinstance(outcome, Fulfilled):
            fulfilled_values.append(outcome.value)
        elif isinstance(outcome, Rejected):
            rejected_reasons.append(outcome.reason)
        else:
            raise MalformedOutcomeError(
                f"Entry {position} is not a settled outcome: {outcome!r}"
            )

    return ClassificationResult(fulfilled_values, rejected_reasons)
