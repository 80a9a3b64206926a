"""JSON utilities for Settle CLI."""

import json
from datetime import date, datetime
from typing import Any

from settle.core.models.outcome import ClassificationResult
from settle.core.models.summary import SettlementSummary
from settle.core.utils.helpers import describe_reason


def json_serializer(obj: Any) -> Any:
    """JSON serializer for objects not serializable by default json code.

    Args:
        obj: Object to serialize

    Returns:
        A JSON-encodable stand-in for the object

    Raises:
        TypeError: If object type is not supported
    """
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).decode("utf-8", errors="replace")
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if isinstance(obj, BaseException):
        return describe_reason(obj)
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def render_summary_json(result: ClassificationResult[Any, Any]) -> str:
    """Render a classification result as an indented JSON summary."""
    summary = SettlementSummary.from_result(result)
    return json.dumps(summary.to_dict(), indent=2, default=json_serializer)
