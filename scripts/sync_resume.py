#!/usr/bin/env python3
"""
Resume Page Sync CLI

Regenerates the resume fragments of index.html (header, summary, experience,
education, skills, certifications, continuous learning) from resume.md.
Everything else in the page is left as written.

Usage:
    # Update index.html in place from resume.md
    python scripts/sync_resume.py

    # Explicit paths
    python scripts/sync_resume.py -s docs/resume.md -t site/index.html

    # Write the result somewhere else
    python scripts/sync_resume.py -o /tmp/index.preview.html

    # Preview the change as a diff
    python scripts/sync_resume.py --dry-run
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumesync.contexts.site.builder import RESUME_MARKDOWN_PATH, SITE_HTML_PATH, build_site
from resumesync.contexts.site.logger import _log_error, setup_site_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Regenerate resume fragments of an HTML page from a markdown resume",
    add_completion=False,
)


@app.command()
def main(
    source: Annotated[
        Path,
        typer.Option(
            "--source",
            "-s",
            help="Markdown resume to read",
            dir_okay=False,
        ),
    ] = RESUME_MARKDOWN_PATH,
    target: Annotated[
        Path,
        typer.Option(
            "--target",
            "-t",
            help="HTML page to update",
            dir_okay=False,
        ),
    ] = SITE_HTML_PATH,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the updated page here instead of overwriting the target",
            dir_okay=False,
        ),
    ] = None,
    schema: Annotated[
        Optional[Path],
        typer.Option(
            "--schema",
            help="Alternative anchor contract YAML",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the run log (default: LOGS_PATH/sync_<timestamp>)",
            file_okay=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Print the diff of the change without writing the page",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Also show skipped sections and dropped records",
        ),
    ] = False,
):
    """
    Update the resume page from the markdown resume.

    Exits with code 1 if either file cannot be read or the page cannot be
    written. Sections whose anchor is missing from the page are skipped.
    """
    if log_dir is None:
        log_dir = LOGS_PATH / f"sync_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    setup_site_logger(log_dir, source, target, verbose=verbose)

    try:
        result = build_site(
            source=source,
            target=target,
            output=output,
            dry_run=dry_run,
            schema_path=schema,
        )
    except Exception as e:
        _log_error(f"Error converting Markdown to HTML: {e}")
        raise typer.Exit(code=1)

    if not result.success:
        raise typer.Exit(code=1)

    if dry_run:
        if result.diff:
            for line in result.diff:
                typer.echo(line)
        else:
            typer.echo("No changes")


if __name__ == "__main__":
    app()
