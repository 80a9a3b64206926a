"""Project-wide constant definitions."""

__all__: list[str] = [
    "DEFAULT_DEMO_START",
    "DEFAULT_DEMO_STOP",
    "DEFAULT_DEMO_STEP",
    "DEFAULT_DEMO_MAX_DELAY",
    "DEFAULT_LOG_LEVEL",
]

# Demo request range (inclusive)
DEFAULT_DEMO_START: int = 1
DEFAULT_DEMO_STOP: int = 100
DEFAULT_DEMO_STEP: int = 1

# Upper bound for the random per-request delay, in seconds
DEFAULT_DEMO_MAX_DELAY: float = 0.0

# Logging
DEFAULT_LOG_LEVEL: str = "WARNING"
