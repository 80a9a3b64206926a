"""Command-line interface for settle."""
