"""Typer-based command line interface for URLs Core."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
import typer

from ..collect import scheme_counts
from ..config import AppConfig, dump_default_config, load_config
from ..logging import configure_logging
from ..models import ExtractionResult, FileFormat
from ..paths import project_config_path
from ..postprocess import SortOrder, dedupe_lines, dedupe_urls, sort_lines
from ..safety import check_document_count, check_output_size, check_safety
from ..scanner import extract_urls
from ..utils.text import split_lines, to_text

app = typer.Typer(help="URLs Core command line interface")

_SUFFIX_FORMATS: Dict[str, FileFormat] = {
    ".md": FileFormat.MARKDOWN,
    ".markdown": FileFormat.MARKDOWN,
    ".html": FileFormat.HTML,
    ".htm": FileFormat.HTML,
    ".css": FileFormat.CSS,
    ".js": FileFormat.JAVASCRIPT,
    ".mjs": FileFormat.JAVASCRIPT,
    ".cjs": FileFormat.JAVASCRIPT,
    ".jsx": FileFormat.JAVASCRIPT,
    ".ts": FileFormat.TYPESCRIPT,
    ".tsx": FileFormat.TYPESCRIPT,
    ".json": FileFormat.JSON,
    ".yaml": FileFormat.YAML,
    ".yml": FileFormat.YAML,
    ".properties": FileFormat.PROPERTIES,
    ".toml": FileFormat.TOML,
    ".ini": FileFormat.INI,
    ".cfg": FileFormat.INI,
    ".xml": FileFormat.XML,
    ".pom": FileFormat.XML,
}


def format_for_path(path: Path) -> str:
    return _SUFFIX_FORMATS.get(path.suffix.lower(), FileFormat.UNKNOWN).value


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    ctx.obj = load_config(config)
    configure_logging(ctx.obj.logging.normalized_level())


def _config() -> AppConfig:
    ctx = click.get_current_context()
    return ctx.obj


def _result_payload(path: Path, result: ExtractionResult, urls: List[Any], show_errors: bool) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "file": str(path),
        "format": result.file_type.value,
        "success": result.success,
        "schemes": scheme_counts(urls),
        "urls": [asdict(url) for url in urls],
    }
    if show_errors:
        payload["errors"] = [asdict(error) for error in result.errors]
    return payload


@app.command()
def extract(
    paths: List[Path] = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    file_format: Optional[str] = typer.Option(None, "--format", help="Format tag; inferred from the suffix if omitted"),
    dedupe: Optional[bool] = typer.Option(None, "--dedupe/--no-dedupe", help="Deduplicate extracted URLs"),
    as_json: bool = typer.Option(False, "--json", help="Emit URL records as JSON"),
    show_errors: Optional[bool] = typer.Option(None, "--show-errors/--hide-errors", help="Report parse errors"),
) -> None:
    config = _config()
    dedupe = config.output.dedupe_enabled if dedupe is None else dedupe
    show_errors = config.output.show_parse_errors if show_errors is None else show_errors

    many = check_document_count(len(paths), config.safety)
    if not many.proceed:
        typer.echo(many.message, err=True)
        raise typer.Exit(code=2)

    payloads: List[Dict[str, Any]] = []
    values: List[str] = []
    failed = False
    for path in paths:
        content = to_text(path.read_bytes())
        safety = check_safety(content, config.safety)
        if not safety.proceed:
            typer.echo(f"{path}: {safety.message}", err=True)
            raise typer.Exit(code=2)

        result = extract_urls(content, file_format or format_for_path(path))
        if not result.success:
            failed = True
            reason = result.errors[0].message if result.errors else "Unknown error"
            typer.echo(f"{path}: extraction incomplete: {reason}", err=True)
        urls = dedupe_urls(result.urls) if dedupe else list(result.urls)
        payloads.append(_result_payload(path, result, urls, show_errors))
        values.extend(url.value for url in urls)
        if show_errors and not as_json:
            for error in result.errors:
                typer.echo(f"{path}: {error.severity.value}: {error.message}", err=True)

    large = check_output_size(len(values), config.safety)
    if not large.proceed:
        typer.echo(large.message, err=True)

    if as_json:
        typer.echo(json.dumps(payloads, ensure_ascii=False, indent=2))
    elif values:
        typer.echo("\n".join(values))
    if failed:
        raise typer.Exit(code=1)


def _write_lines(lines: List[str], output: Optional[Path]) -> None:
    text = "\n".join(lines)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text, encoding="utf-8")


@app.command()
def dedupe(
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write result here instead of stdout"),
) -> None:
    """Remove repeated lines from a one-URL-per-line file."""
    lines = split_lines(to_text(path.read_bytes()))
    deduped = dedupe_lines(lines)
    _write_lines(deduped, output)
    removed = len([line for line in lines if line.strip()]) - len(deduped)
    typer.echo(f"Removed {removed} duplicate URLs ({len(deduped)} remaining)", err=True)


@app.command()
def sort(
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    order: SortOrder = typer.Option(SortOrder.ASC, "--order", help="Sort order"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write result here instead of stdout"),
) -> None:
    """Sort a one-URL-per-line file."""
    ordered = sort_lines(split_lines(to_text(path.read_bytes())), order)
    _write_lines(ordered, output)
    typer.echo(f"Sorted {len(ordered)} URLs ({order.value})", err=True)


@app.command()
def formats() -> None:
    for file_format in FileFormat:
        typer.echo(file_format.value)


@app.command()
def config_show() -> None:
    typer.echo(_config().model_dump_json(indent=2))


@app.command()
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Target file; defaults to ./.urls-core/config.yaml"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    target = path or project_config_path()
    if target.exists() and not force:
        typer.echo(f"{target} already exists; pass --force to overwrite it", err=True)
        raise typer.Exit(code=1)
    dump_default_config(target)
    typer.echo(str(target))


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
