"""settle: partition settled asynchronous outcomes into values and reasons."""

from settle.core.classifier import MalformedOutcomeError, classify_settled
from settle.core.models.outcome import (
    ClassificationResult,
    Fulfilled,
    Outcome,
    Rejected,
    outcome_from_record,
)
from settle.core.settle import from_gather_results, settle_all, settle_and_classify

__all__: list[str] = [
    "ClassificationResult",
    "Fulfilled",
    "MalformedOutcomeError",
    "Outcome",
    "Rejected",
    "classify_settled",
    "from_gather_results",
    "outcome_from_record",
    "settle_all",
    "settle_and_classify",
]
