"""Settled outcome types.

An outcome is the terminal state of one asynchronous operation: either
``Fulfilled`` with the produced value or ``Rejected`` with the failure
reason. The record shape mirrors what a settle-all primitive reports::

    {"status": "fulfilled", "value": 1}
    {"status": "rejected", "reason": "timeout"}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Generic, Iterator, List, Mapping, TypeVar, Union

__all__: list[str] = [
    "ClassificationResult",
    "Fulfilled",
    "MalformedOutcomeError",
    "Outcome",
    "Rejected",
    "outcome_from_record",
]

F = TypeVar("F")
R = TypeVar("R")


class MalformedOutcomeError(TypeError):
    """Raised when an entry is neither a fulfilled nor a rejected outcome."""
    pass


@dataclass(frozen=True)
class Fulfilled(Generic[F]):
    """An operation that completed successfully."""
    value: F

    status: ClassVar[str] = "fulfilled"

    def to_record(self) -> Dict[str, Any]:
        return {"status": self.status, "value": self.value}


@dataclass(frozen=True)
class Rejected(Generic[R]):
    """An operation that failed; ``reason`` is kept exactly as produced."""
    reason: R

    status: ClassVar[str] = "rejected"

    def to_record(self) -> Dict[str, Any]:
        return {"status": self.status, "reason": self.reason}


Outcome = Union[Fulfilled[F], Rejected[R]]


@dataclass(frozen=True)
class ClassificationResult(Generic[F, R]):
    """Fulfilled values and rejected reasons, each in input order.

    Unpacks like a pair::

        values, reasons = classify_settled(batch)
    """
    fulfilled_values: List[F] = field(default_factory=list)
    rejected_reasons: List[R] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.fulfilled_values) + len(self.rejected_reasons)

    def __iter__(self) -> Iterator[Any]:
        yield self.fulfilled_values
        yield self.rejected_reasons


def outcome_from_record(record: Mapping[str, Any]) -> Outcome[Any, Any]:
    """Build an outcome from a ``{"status": ..., "value"/"reason": ...}`` record.

    Args:
        record: Mapping with a ``status`` discriminant and the matching payload key

    Returns:
        ``Fulfilled`` or ``Rejected`` carrying the payload unchanged

    Raises:
        MalformedOutcomeError: If the record is not a mapping, the status is
            unknown, or the payload key for the status is missing
    """
    if not isinstance(record, Mapping):
        raise MalformedOutcomeError(
            f"Outcome record must be a mapping, got {type(record).__name__}"
        )

    status = record.get("status")
    if status == Fulfilled.status:
        if "value" not in record:
            raise MalformedOutcomeError("Fulfilled record is missing 'value'")
        return Fulfilled(record["value"])
    elif status == Rejected.status:
        if "reason" not in record:
            raise MalformedOutcomeError("Rejected record is missing 'reason'")
        return Rejected(record["reason"])
    else:
        raise MalformedOutcomeError(f"Unknown outcome status: {status!r}")
