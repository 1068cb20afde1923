#!/usr/bin/env python3
"""
Resume Suggestions CLI

Loads a resume YAML file, runs the suggestion rules over it and prints the
suggestions. Optionally applies the summary suggestion and saves the result.

Usage:
    # Print suggestions in rule order
    python analyze_resume.py resume.yaml

    # Highest priority first, no simulated delay
    python analyze_resume.py resume.yaml --sort-priority --delay 0

    # Machine-readable output
    python analyze_resume.py resume.yaml --json
"""

import json
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from smartresume.contexts.analysis import analyze, sort_by_priority
from smartresume.contexts.analysis.logger import setup_analysis_logger
from smartresume.contexts.editing import (
    InvalidRecordError,
    SuggestionNotApplicableError,
    apply_suggestion,
    load_record,
    save_record,
)

load_dotenv()
SUGGESTION_DELAY_SECONDS = float(os.getenv("SUGGESTION_DELAY_SECONDS", "2.0"))

PRIORITY_MARKERS = {"high": "!!", "medium": "! ", "low": "  "}

app = typer.Typer(
    help="Analyze a resume and print improvement suggestions",
    add_completion=False,
)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Resume YAML file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ],
    delay: Annotated[
        Optional[float],
        typer.Option(
            "--delay",
            help="Seconds to wait before analyzing (defaults to SUGGESTION_DELAY_SECONDS)",
        )
    ] = None,
    sort_priority: Annotated[
        bool,
        typer.Option(
            "--sort-priority",
            "-p",
            help="Show high priority suggestions first"
        )
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print suggestions as JSON"
        )
    ] = False,
    apply_id: Annotated[
        Optional[str],
        typer.Option(
            "--apply",
            "-a",
            help="Apply the suggestion with this id and save the resume"
        )
    ] = None,
    output_file: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Where to save the resume after --apply (defaults to overwriting input)",
            dir_okay=False,
            resolve_path=True,
        )
    ] = None,
):
    """
    Analyze a resume and print improvement suggestions.

    Examples:

        python analyze_resume.py resume.yaml

        python analyze_resume.py resume.yaml --apply summary-length -o improved.yaml
    """
    if delay is None:
        delay = SUGGESTION_DELAY_SECONDS
    if delay < 0:
        typer.echo("Error: --delay must not be negative", err=True)
        raise typer.Exit(code=1)

    setup_analysis_logger(
        input_file,
        delay_seconds=delay,
        sort_priority=sort_priority,
        console=sys.stderr if as_json else sys.stdout,
    )

    try:
        record = load_record(input_file)
    except InvalidRecordError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    suggestions = analyze(record, delay_seconds=delay)
    if sort_priority:
        suggestions = sort_by_priority(suggestions)

    if as_json:
        typer.echo(json.dumps([s.to_dict() for s in suggestions], indent=2))
    else:
        typer.echo(f"\n{len(suggestions)} Suggestions Found\n")
        for s in suggestions:
            marker = PRIORITY_MARKERS[s.priority.value]
            typer.echo(f"{marker} [{s.priority.value}] {s.title} ({s.id})")
            typer.echo(f"     {s.description}")
            typer.echo(f"     -> {s.suggestion_text}")
            typer.echo()

    if apply_id is None:
        return

    chosen = next((s for s in suggestions if s.id == apply_id), None)
    if chosen is None:
        typer.echo(f"Error: suggestion '{apply_id}' was not produced for this resume", err=True)
        raise typer.Exit(code=1)

    try:
        updated = apply_suggestion(record, chosen)
    except SuggestionNotApplicableError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    saved = save_record(updated, output_file or input_file)
    typer.echo(f"✓ Applied '{apply_id}', saved to {saved}")


if __name__ == "__main__":
    app()
