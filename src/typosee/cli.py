from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .edit_distance import levenshtein
from .errors import SourceFormatError
from .report import format_edit, render_lines, write_html, write_json
from .scan import MAX_THRESHOLD, MIN_THRESHOLD, ScanOptions, scan as run_scan
from .schemas import EditRecord
from .sources import load_keywords, read_fqdns


app = typer.Typer(
    add_completion=False,
    help="Find domain labels within a small edit distance of watched keywords.",
    pretty_exceptions_show_locals=False,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(debug: bool) -> None:
    """
    Log to stderr; DEBUG with `--debug` or `TYPOSEE_DEBUG=1`, else WARNING.
    """
    import os

    if os.environ.get("TYPOSEE_DEBUG", "").strip().lower() in {"1", "true", "yes"}:
        debug = True
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _ensure_parent(path: str | Path | None) -> None:
    if not path:
        return
    p = Path(path)
    if p.parent and not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)


@app.command()
def scan(
    subdomains: Path = typer.Argument(..., exists=True, dir_okay=False, help="Subdomain file (header + one FQDN record per line)."),
    keywords: Path = typer.Argument(..., exists=True, dir_okay=False, help="Keyword file (.txt, .yaml or .json)."),
    threshold: int = typer.Argument(..., help=f"Maximum edit distance to report ({MIN_THRESHOLD}-{MAX_THRESHOLD})."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List the edits for every match."),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug logging on stderr."),
    no_header: bool = typer.Option(False, "--no-header", help="Subdomain file has no header line."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON report."),
    out_html: Optional[str] = typer.Option(None, "--out-html", help="Write HTML report."),
) -> None:
    _configure_logging(debug)
    try:
        options = ScanOptions(threshold=threshold, skip_header=not no_header)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="THRESHOLD") from e

    try:
        keyword_list = load_keywords(keywords)
    except SourceFormatError as e:
        raise typer.BadParameter(str(e), param_hint="KEYWORDS") from e
    fqdns = list(read_fqdns(subdomains, skip_header=options.skip_header))
    result = run_scan(keyword_list, fqdns, options)

    for line in render_lines(result, verbose=verbose):
        typer.echo(line)
    for f in result.failures:
        typer.echo(f"[ERR] could not compare {f.keyword},{f.label},{f.fqdn}: {f.reason}", err=True)

    if out_json:
        _ensure_parent(out_json)
        write_json(result, out_json)
    if out_html:
        _ensure_parent(out_html)
        write_html(result, out_html)

    typer.echo(f"Total lines processed: {result.fqdns_processed}")
    if result.failures:
        raise typer.Exit(code=1)


@app.command()
def distance(
    source: str = typer.Argument(..., help="String to transform (e.g. the keyword)."),
    target: str = typer.Argument(..., help="String to transform into (e.g. a domain label)."),
) -> None:
    """
    Print the edit distance between two strings and the edits realizing it.
    """
    d, ops = levenshtein(source, target)
    typer.echo(str(d))
    for o in ops:
        typer.echo(format_edit(EditRecord(op=o.op, source=o.source, target=o.target, position=o.position)))  # type: ignore[arg-type]
