"""Command-line entry point for settle.

Run a batch of asynchronous operations to completion and split the results
into fulfilled values and rejected reasons.
"""

from __future__ import annotations

import importlib.metadata as _metadata
import logging
import sys

import click
from dotenv import load_dotenv

from settle.cli.commands import classify, demo
from settle.cli.utils import SettleConsole, format_error
from settle.config import get_settings

console = SettleConsole()


def _get_version() -> str:
    """Return the installed version of settle-cli."""
    try:
        return _metadata.version("settle-cli")
    except _metadata.PackageNotFoundError:
        return "0.1.0-dev"


@click.group(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "max_content_width": 120
    }
)
@click.version_option(_get_version(), message="Settle CLI v%(version)s")
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging verbosity (default: SETTLE_LOG_LEVEL or WARNING)')
def main(log_level: str | None) -> None:
    """Settle: split settled async results into values and reasons.

    \b
    Examples:
      settle demo                 # 100 mock requests, odd fulfil, even reject
      settle demo --stop 10 --json
      settle classify results.json
    """
    # Load environment variables from .env file, but don't override existing ones
    load_dotenv(override=False)

    try:
        settings = get_settings()
    except ValueError as e:
        console.print(format_error(f"Invalid configuration: {str(e)}"))
        raise click.exceptions.Exit(1)

    log_level = log_level or settings.log_level
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))


main.add_command(demo.demo)
main.add_command(classify.classify)


if __name__ == "__main__":
    sys.exit(main())
