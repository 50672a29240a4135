"""Command-line entry point for Fuzzy TUI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import ConfigError, load_config
from ..data import DataLoadError
from .formatters import (
    echo_error,
    echo_header,
    echo_success,
    echo_warning,
    format_benchmark,
    format_result_row,
)
from .helpers import get_search_service, resolve_data_path

DATA_OPTION = click.option(
    "--data",
    "data",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="JSON dataset (country file or list of strings). Defaults to bundled countries.",
)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to a TOML config file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="fuzzy-tui")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """Fuzzy TUI - fzf-style fuzzy search over lists."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


@main.command()
@click.argument("pattern")
@DATA_OPTION
@click.option(
    "-n", "--limit", type=click.IntRange(min=0), default=None, help="Max results (0 = all)."
)
@click.option("--weights/--no-weights", default=None, help="Show match weights.")
@click.option("--no-highlight", is_flag=True, help="Mark matches with brackets instead of color.")
@click.pass_context
def search(
    ctx: click.Context,
    pattern: str,
    data: Optional[Path],
    limit: Optional[int],
    weights: Optional[bool],
    no_highlight: bool,
) -> None:
    """Rank the dataset against PATTERN and print matches, best first."""
    cfg = ctx.obj["config"]
    try:
        service = get_search_service(ctx, data)
    except DataLoadError as e:
        echo_error(str(e))
        sys.exit(1)

    if not pattern.strip():
        echo_warning("Empty pattern - nothing to rank.")
        return

    limit = cfg.search.max_results if limit is None else limit
    show_weights = cfg.display.show_weights if weights is None else weights

    results = service.search(pattern, limit=limit)
    if not results:
        echo_warning(f"No matches for '{pattern}'")
        return

    style = cfg.display.highlight_style
    for result in results:
        click.echo(
            format_result_row(
                result, highlight=not no_highlight, show_weight=show_weights, style=style
            )
        )


@main.command()
@DATA_OPTION
@click.pass_context
def tui(ctx: click.Context, data: Optional[Path]) -> None:
    """Launch the interactive search TUI."""
    from ..tui import FuzzySearchApp

    try:
        service = get_search_service(ctx, data)
    except DataLoadError as e:
        echo_error(str(e))
        sys.exit(1)

    app = FuzzySearchApp(service=service, config=ctx.obj["config"])
    app.run()


@main.command()
@DATA_OPTION
@click.option("-p", "--pattern", default="la sart", show_default=True, help="Pattern to type.")
@click.option("-r", "--rounds", type=click.IntRange(min=1), default=5, show_default=True)
@click.option("--no-progress", is_flag=True, help="Hide progress bars.")
@click.pass_context
def bench(
    ctx: click.Context,
    data: Optional[Path],
    pattern: str,
    rounds: int,
    no_progress: bool,
) -> None:
    """Time typing PATTERN one key at a time, uncached vs cached."""
    from ..data import load_dataset
    from ..services import benchmark_incremental

    try:
        items = load_dataset(resolve_data_path(ctx, data))
    except DataLoadError as e:
        echo_error(str(e))
        sys.exit(1)

    echo_header(f"Benchmark: '{pattern}' over {len(items)} candidates")
    results = []
    for use_cache in (False, True):
        result = benchmark_incremental(
            items, pattern, rounds=rounds, use_cache=use_cache, progress=not no_progress
        )
        click.echo(format_benchmark(result))
        results.append(result)

    uncached, with_cache = results

    if with_cache.best > 0:
        echo_success(f"Cache speedup: {uncached.best / with_cache.best:.1f}x")
    else:
        echo_success("Cached searches finished below timer resolution")


if __name__ == "__main__":
    main()
