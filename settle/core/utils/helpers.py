"""Miscellaneous helper utilities."""

from __future__ import annotations

from typing import Any

__all__: list[str] = ["describe_reason", "inclusive_range"]


def inclusive_range(start: int, stop: int, step: int) -> list[int]:
    """Return ``start, start + step, ...`` up to and including *stop* when reachable.

    The length is ``trunc((stop - start) / step + 1)`` clamped at zero, so a
    *step* pointing away from *stop* yields an empty list.
    """
    if step == 0:
        raise ValueError("step must be non-zero")

    length = max(int((stop - start) / step + 1), 0)
    return [start + i * step for i in range(length)]


def describe_reason(reason: Any) -> str:
    """Render a rejection reason for display.

    Exceptions show as ``TypeName: message``; other payloads use ``str``.
    """
    if isinstance(reason, BaseException):
        message = str(reason)
        return f"{type(reason).__name__}: {message}" if message else type(reason).__name__
    return str(reason)
