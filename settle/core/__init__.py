"""Core settlement primitives."""
