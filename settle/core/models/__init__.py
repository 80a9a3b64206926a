"""Outcome and summary data models."""
