#!/usr/bin/env python3
"""
Resume Preview CLI

Renders a resume YAML file as a printable HTML document.

Usage:
    # Write to outs/results/<input stem>.html
    python render_resume.py resume.yaml

    # Explicit output path
    python render_resume.py resume.yaml preview.html
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from smartresume.contexts.editing import InvalidRecordError, load_record
from smartresume.contexts.rendering import PreviewRenderError, export_preview
from smartresume.contexts.rendering.logger import setup_rendering_logger

load_dotenv()
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

app = typer.Typer(
    help="Render a resume as a printable HTML document",
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
    output_file: Annotated[
        Optional[Path],
        typer.Argument(
            help="Output .html file (defaults to RESULTS_PATH/<input stem>.html)",
            dir_okay=False,
            resolve_path=True,
        )
    ] = None,
):
    """Render a resume as a printable HTML document."""
    if output_file is None:
        output_file = RESULTS_PATH / f"{input_file.stem}.html"

    setup_rendering_logger(input_file, output_path=output_file)

    try:
        record = load_record(input_file)
        written = export_preview(record, output_file)
    except (InvalidRecordError, PreviewRenderError) as e:
        typer.echo(f"✗ {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✓ {written}")


if __name__ == "__main__":
    app()
