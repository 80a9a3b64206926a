"""CLI utilities and helpers."""

from .console import SettleConsole, format_error, format_success
from .json_utils import json_serializer, render_summary_json

__all__ = [
    "SettleConsole",
    "format_error",
    "format_success",
    "json_serializer",
    "render_summary_json",
]
