"""Rich text rendering of match ranges."""

from typing import Sequence

from rich.text import Text

from ..search import Span, char_offsets


def highlight_text(text: str, ranges: Sequence[Span], style: str = "bold red") -> Text:
    """Build a Rich Text with the matched ranges styled.

    Args:
        text: Candidate text as displayed.
        ranges: Matched spans, in character positions.
        style: Rich style applied to each matched run.

    Returns:
        Text suitable for a Static widget.
    """
    rich_text = Text(text)
    if not ranges:
        return rich_text
    offsets = char_offsets(text)
    for span in ranges:
        rich_text.stylize(style, offsets[span.start], offsets[span.end])
    return rich_text
