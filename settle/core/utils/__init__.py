"""Shared helpers and constants."""
