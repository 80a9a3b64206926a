"""Settle CLI commands."""

from . import classify, demo

__all__ = ["classify", "demo"]
