"""CLI output formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import click
from rich.color import ColorSystem
from rich.style import Style

from ..search import Span, char_offsets, text_of

if TYPE_CHECKING:
    from ..services import BenchmarkResult
    from ..search import RankedResult


def highlight_ranges(
    text: str, ranges: Sequence[Span], color: bool = True, style: str = "bold red"
) -> str:
    """Render matched ranges of ``text`` with a Rich style as ANSI codes.

    Args:
        text: Candidate text as displayed.
        ranges: Matched spans, in character positions.
        color: If False, wrap matches in square brackets instead.
        style: Rich style definition, e.g. "bold red" or "underline green".

    Returns:
        Text with matched runs styled.
    """
    offsets = char_offsets(text)
    match_style = Style.parse(style)
    parts = []
    pos = 0
    for span in ranges:
        start, end = offsets[span.start], offsets[span.end]
        parts.append(text[pos:start])
        matched = text[start:end]
        parts.append(
            match_style.render(matched, color_system=ColorSystem.STANDARD)
            if color
            else f"[{matched}]"
        )
        pos = end
    parts.append(text[pos:])
    return "".join(parts)


def format_result_row(
    result: RankedResult,
    highlight: bool = True,
    show_weight: bool = False,
    style: str = "bold red",
) -> str:
    """Format one ranked result for CLI display.

    Countries show their native name after the matched English name.
    """
    item = result.item
    text = text_of(item)
    row = highlight_ranges(text, result.ranges, color=highlight, style=style)

    native = getattr(item, "display_native", "")
    if native:
        row += click.style(f"  ({native})", dim=True) if highlight else f"  ({native})"

    if show_weight:
        row = f"{result.weight:>8}  {row}"
    return row


def format_benchmark(result: BenchmarkResult) -> str:
    """Format benchmark timings as a single line."""
    return (
        f"{result.mode:<9} {result.searches} searches x {result.rounds} rounds  "
        f"best {result.best * 1000:8.2f}ms  mean {result.mean * 1000:8.2f}ms"
    )


def echo_success(message: str) -> None:
    """Echo a success message in green."""
    click.echo(click.style(f"✓ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Echo an error message in red."""
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Echo a warning message in yellow."""
    click.echo(click.style(f"⚠ {message}", fg="yellow"))


def echo_header(message: str) -> None:
    """Echo a header with underline."""
    click.echo(f"\n{message}")
    click.echo("=" * len(message))
