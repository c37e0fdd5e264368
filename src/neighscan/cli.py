from __future__ import annotations

import logging
from pathlib import Path

import typer

from neighscan.config.loader import load_config
from neighscan.core.errors import ConfigError, NeighscanError, ParseError
from neighscan.core.logging import configure_logging
from neighscan.core.results import ScanSummary
from neighscan.parser.neighbors import parse_neighbor_header
from neighscan.render.report_json import write_json_report
from neighscan.render.report_md import write_markdown_report
from neighscan.render.report_table import render_table
from neighscan.source.lines import open_source, run_scan

app = typer.Typer(add_completion=False)
logger = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    """Summarize 'show bgp vpnv4 unicast all neighbors' output."""


def _scan(input_path: Path | None) -> ScanSummary:
    source = str(input_path) if input_path else "<stdin>"
    logger.info("reading from %s", source)
    try:
        with open_source(input_path) as stream:
            return run_scan(stream, source=source)
    except NeighscanError as exc:
        # Opening failed before any line was read.
        return ScanSummary(source=source, error=exc)


@app.command()
def scan(
    input_path: Path | None = typer.Option(None, "--input", "-i", help="Read from file instead of stdin"),
    config: Path | None = typer.Option(None, "--config"),
    json_out: Path | None = typer.Option(None, "--json-out"),
    md_out: Path | None = typer.Option(None, "--md-out"),
    verbose: bool | None = typer.Option(None, "--verbose/--quiet"),
) -> None:
    try:
        cfg = load_config(config)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    configure_logging(cfg.verbose if verbose is None else verbose)
    summary = _scan(input_path or cfg.input)
    if summary.error is not None:
        logger.error("scan stopped: %s", summary.error)

    # The partial table is still reported after a fatal error.
    typer.echo(render_table(summary.table.records()), nl=False)

    out_json = json_out or cfg.json_out
    out_md = md_out or cfg.md_out
    if out_json:
        write_json_report(summary, out_json)
    if out_md:
        write_markdown_report(summary, out_md)
    raise typer.Exit(code=summary.exit_code)


@app.command("parse-line")
def parse_line(line: str = typer.Argument(..., help="A 'BGP neighbor is ...' line")) -> None:
    try:
        address, vrf, remote_as = parse_neighbor_header(line, 1)
    except ParseError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"address={address} vrf={vrf} remote_as={remote_as}")


if __name__ == "__main__":
    app()
