"""Settle demo command - classify a batch of mock requests."""

import asyncio
import json

import click

from settle.cli.utils import SettleConsole, format_error, format_success, render_summary_json
from settle.config import get_settings
from settle.demo import run_demo

console = SettleConsole()


@click.command()
@click.option('--start', type=int, default=None, help='First request number (default: 1)')
@click.option('--stop', type=int, default=None, help='Last request number, inclusive (default: 100)')
@click.option('--step', type=int, default=None, help='Increment between request numbers (default: 1)')
@click.option('--max-delay', type=float, default=None,
              help='Random delay per request in seconds, to finish out of order (default: 0)')
@click.option('--json', 'json_output', is_flag=True, help='Output JSON instead of rich text')
def demo(start, stop, step, max_delay, json_output: bool):
    """Run mock requests, wait for all of them to settle, and split the results.

    Odd request numbers fulfil with the number, even ones reject with it.
    Unset options fall back to SETTLE_DEMO_* environment variables.

    Example:
        settle demo
        settle demo --stop 10 --max-delay 0.05
        settle demo --json
    """
    try:
        settings = get_settings()
        start = settings.demo_start if start is None else start
        stop = settings.demo_stop if stop is None else stop
        step = settings.demo_step if step is None else step
        max_delay = settings.demo_max_delay if max_delay is None else max_delay

        result = asyncio.run(run_demo(start, stop, step, max_delay))
        rendered = render_summary_json(result) if json_output else None
    except Exception as e:
        if json_output:
            print(json.dumps({"error": str(e)}, indent=2))
        else:
            console.print(format_error(f"Demo failed: {str(e)}"))
        raise click.exceptions.Exit(1)

    if json_output:
        print(rendered)
        return

    console.print_header(f"Settled mock requests {start}..{stop} (step {step})")
    console.print_classification(result)
    console.print(format_success("All requests settled"))
