"""Settle classify command - split a file of settled outcome records."""

import json
import logging
from pathlib import Path
from typing import Any, List

import click
import yaml

from settle.cli.utils import SettleConsole, format_error, render_summary_json
from settle.core.classifier import MalformedOutcomeError, classify_settled
from settle.core.models.outcome import Outcome, outcome_from_record

logger = logging.getLogger(__name__)

console = SettleConsole()


def load_records(path: Path) -> List[Outcome[Any, Any]]:
    """Load outcome records from a JSON or YAML file.

    The file holds a list of ``{"status": "fulfilled", "value": ...}`` /
    ``{"status": "rejected", "reason": ...}`` records.

    Raises:
        MalformedOutcomeError: If the document is not a list or a record is malformed
    """
    with open(path, 'r') as f:
        if path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if data is None:
        data = []
    if not isinstance(data, list):
        raise MalformedOutcomeError(
            f"Expected a list of outcome records, got {type(data).__name__}"
        )

    logger.debug(f"Loaded {len(data)} records from {path}")
    return [outcome_from_record(record) for record in data]


@click.command()
@click.argument('records_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--json', 'json_output', is_flag=True, help='Output JSON instead of rich text')
def classify(records_path: str, json_output: bool):
    """Split a file of settled outcome records into values and reasons.

    RECORDS_PATH is a JSON or YAML list shaped like allSettled output.

    Example:
        settle classify results.json
        settle classify results.yaml --json
    """
    path = Path(records_path)
    try:
        result = classify_settled(load_records(path))
        rendered = render_summary_json(result) if json_output else None
    except Exception as e:
        if json_output:
            print(json.dumps({"error": str(e)}, indent=2))
        else:
            console.print(format_error(f"Classification failed: {str(e)}"))
        raise click.exceptions.Exit(1)

    if json_output:
        print(rendered)
        return

    console.print_header(f"Settled outcomes from {path.name}")
    console.print_classification(result)
