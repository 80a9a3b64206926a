"""Serializable summary of a classification, used for ``--json`` output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from settle.core.models.outcome import ClassificationResult
from settle.core.utils.helpers import describe_reason

__all__: list[str] = ["SettlementSummary"]


class SettlementSummary(BaseModel):
    """Counts plus both groups, with reasons rendered for display."""

    total: int = Field(0, description="Number of settled operations.")
    fulfilled_count: int = Field(0, description="Operations that completed successfully.")
    rejected_count: int = Field(0, description="Operations that failed.")
    fulfilled_values: list[Any] = Field(default_factory=list, description="Fulfilled values in input order.")
    rejected_reasons: list[str] = Field(default_factory=list, description="Rejection reasons in input order.")

    @classmethod
    def from_result(cls, result: ClassificationResult[Any, Any]) -> "SettlementSummary":
        """Build a summary from a classification result."""
        return cls(
            total=result.total,
            fulfilled_count=len(result.fulfilled_values),
            rejected_count=len(result.rejected_reasons),
            fulfilled_values=list(result.fulfilled_values),
            rejected_reasons=[describe_reason(reason) for reason in result.rejected_reasons],
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializes the summary to a dictionary."""
        return self.model_dump()
