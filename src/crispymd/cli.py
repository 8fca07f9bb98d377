"""Click CLI for crispymd — render markdown and manage the render cache."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from crispymd.config.schema import RendererConfig
from crispymd.errors.exceptions import ConfigurationError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level)
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _load_settings(**overrides: object) -> RendererConfig:
    from crispymd.core import load_settings

    try:
        return load_settings(**overrides)
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {e.message}")
        sys.exit(2)


_VERBOSE = click.option(
    "-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)."
)


def _read_markdown(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


@click.group()
@click.version_option(package_name="crispymd")
def cli() -> None:
    """crispymd — cached Markdown rendering."""


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--id", "content_id", required=True, help="Content ID the markdown belongs to.")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output HTML file.")
@click.option("--no-cache", is_flag=True, default=False, help="Disable caching.")
@_VERBOSE
def render(
    input_path: str,
    content_id: str,
    output: str | None,
    no_cache: bool,
    verbose: int,
) -> None:
    """Render a markdown file to HTML through the cache."""
    config = _load_settings(cache_disabled=no_cache or None)
    _setup_logging(verbose, config.log_level)

    from crispymd.core import create_renderer

    renderer = create_renderer(config)
    html = renderer.render(content_id, _read_markdown(input_path))
    _emit(html, output)

    if verbose >= 1:
        stats = renderer.stats()
        error_console.print(f"hits={stats.hits} misses={stats.misses}")
    renderer.close()


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Output HTML file.")
@_VERBOSE
def preview(input_path: str, output: str | None, verbose: int) -> None:
    """Render a markdown file without reading or writing the cache."""
    config = _load_settings(cache_disabled=True)
    _setup_logging(verbose, config.log_level)

    from crispymd.core import create_renderer

    renderer = create_renderer(config)
    _emit(renderer.render_without_cache(_read_markdown(input_path)), output)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--words", type=int, default=None, help="Number of words to keep.")
@click.option("--sentence", is_flag=True, default=False, help="End at a sentence boundary.")
@_VERBOSE
def excerpt(input_path: str, words: int | None, sentence: bool, verbose: int) -> None:
    """Print a plain-text excerpt of a markdown file."""
    config = _load_settings(excerpt_length=words)
    _setup_logging(verbose, config.log_level)

    from crispymd.core import create_excerpt_generator

    generator = create_excerpt_generator(config)
    markdown = _read_markdown(input_path)
    if sentence:
        text = generator.generate_with_sentence_boundary(markdown)
    else:
        text = generator.generate_from_markdown(markdown)
    click.echo(text)


@cli.group()
def cache() -> None:
    """Cache management commands."""


@cache.command("stats")
@_VERBOSE
def cache_stats(verbose: int) -> None:
    """Show cache statistics."""
    config = _load_settings()
    _setup_logging(verbose, config.log_level)

    from crispymd.core import create_renderer

    renderer = create_renderer(config)

    table = Table(title="Cache Statistics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")

    stats = renderer.stats()
    table.add_row("Enabled", "yes" if renderer.cache_enabled else "no")
    table.add_row("Entries", str(stats.count))
    table.add_row("Size (bytes)", f"{stats.total_size_bytes:,}")

    console.print(table)
    renderer.close()


@cache.command("clear")
@click.argument("content_id", required=False)
@click.option("--all", "clear_all", is_flag=True, default=False, help="Clear every cached render.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@_VERBOSE
def cache_clear(content_id: str | None, clear_all: bool, yes: bool, verbose: int) -> None:
    """Clear cached renders for CONTENT_ID, or everything with --all."""
    if not content_id and not clear_all:
        error_console.print("[red]Error:[/red] give a CONTENT_ID or --all.")
        sys.exit(1)

    if clear_all and not yes:
        click.confirm("Are you sure you want to clear the cache?", abort=True)

    from crispymd.core import create_renderer

    config = _load_settings()
    _setup_logging(verbose, config.log_level)
    renderer = create_renderer(config)
    if clear_all:
        count = renderer.clear_all()
        console.print(f"[green]Cache cleared.[/green] {count} entries removed.")
    else:
        count = renderer.invalidate(content_id)
        console.print(f"[green]Cleared {count} entries for content {content_id}.[/green]")
    renderer.close()


def _emit(html: str, output: str | None) -> None:
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(html, encoding="utf-8")
        error_console.print(f"[green]Written to {out_path}[/green]")
    else:
        click.echo(html)


def main() -> None:
    """Entry point for the CLI."""
    cli()
