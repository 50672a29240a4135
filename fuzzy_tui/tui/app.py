"""Main TUI application for Fuzzy TUI.

Built with Textual. Searches run in a background thread worker so typing
never waits on ranking; only the most recent search is ever displayed.
"""

from functools import partial
from typing import Optional

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Footer, Input, ListItem, ListView, Static
from textual.worker import get_current_worker

from .. import __version__
from ..config import Config
from ..search import RankedResult, text_of
from ..services import SearchService
from .highlight import highlight_text


class ResultListItem(ListItem):
    """A list item displaying one search result."""

    def __init__(
        self,
        result: RankedResult,
        highlight_style: str = "bold red",
        show_weight: bool = False,
    ) -> None:
        """Initialize with a ranked result.

        Args:
            result: The result to display.
            highlight_style: Rich style for matched characters.
            show_weight: Whether to prefix the row with the match weight.
        """
        super().__init__()
        self.result = result
        self._highlight_style = highlight_style
        self._show_weight = show_weight

    @property
    def item(self) -> object:
        """The underlying candidate."""
        return self.result.item

    def compose(self) -> ComposeResult:
        """Compose the list item content."""
        yield Static(self._format_row(), classes="row-content")

    def _format_row(self) -> Text:
        """Format the result as a highlighted row."""
        row = Text()
        if self._show_weight:
            row.append(f"{self.result.weight:>8}  ", style="dim")
        row.append_text(
            highlight_text(text_of(self.item), self.result.ranges, self._highlight_style)
        )
        native = getattr(self.item, "display_native", "")
        if native:
            row.append(f"  {native}", style="dim")
        return row


class FuzzySearchApp(App):
    """Interactive fuzzy search over a list of candidates."""

    TITLE = "Fuzzy TUI"
    CSS = """
    Screen {
        background: $surface;
    }

    #app-header {
        dock: top;
        height: 1;
        background: $primary;
        padding: 0 1;
        text-align: center;
        text-style: bold;
    }

    #search-input {
        height: 3;
        margin: 1 1 0 1;
    }

    #results-list {
        height: 1fr;
        margin: 0 1;
        border: solid $primary;
    }

    ResultListItem {
        height: auto;
        padding: 0 1;
    }

    ResultListItem.-highlight {
        background: $primary;
    }

    #status-bar {
        dock: bottom;
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "clear_query", "Clear", priority=True),
        Binding("down", "focus_results", "Results", show=False),
        Binding("slash", "focus_search", "Search"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, service: SearchService, config: Optional[Config] = None) -> None:
        """Initialize the app.

        Args:
            service: Search service over the candidates to show.
            config: Display and search settings.
        """
        super().__init__()
        self._service = service
        self._settings = config or Config()
        self._results: list[RankedResult] = []
        self._pattern = ""
        # Bumped on every keystroke; results from older searches are dropped
        self._search_generation = 0
        self._search_timer: Timer | None = None

    @property
    def results(self) -> list[RankedResult]:
        """Results currently displayed."""
        return self._results

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        yield Static(f"Fuzzy TUI v{__version__}", id="app-header")
        yield Input(placeholder="Type to search...", id="search-input")
        yield ListView(id="results-list")
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Show every candidate and focus the search box."""
        limit = self._settings.search.max_results
        self._apply_results("", self._search_generation, self._service.search("", limit=limit))
        self.query_one("#search-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Schedule a search for the new query, superseding any pending one."""
        if self._search_timer is not None:
            self._search_timer.stop()
            self._search_timer = None

        self._search_generation += 1
        generation = self._search_generation
        pattern = event.value

        delay = self._settings.search.debounce_delay
        if delay > 0:
            self._search_timer = self.set_timer(
                delay, partial(self._start_search, pattern, generation)
            )
        else:
            self._start_search(pattern, generation)

    def _start_search(self, pattern: str, generation: int) -> None:
        """Start the background search for a query."""
        self._search_timer = None
        self._run_search(pattern, generation)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the search box moves to the results."""
        self.action_focus_results()

    @work(exclusive=True, thread=True, group="search")
    def _run_search(self, pattern: str, generation: int) -> None:
        """Rank candidates off the UI thread."""
        worker = get_current_worker()
        try:
            results = self._service.search(pattern, limit=self._settings.search.max_results)
        except Exception as e:
            if not worker.is_cancelled:
                self.call_from_thread(self._update_status, f"[red]Search failed: {e}[/red]")
            return
        if not worker.is_cancelled:
            self.call_from_thread(self._apply_results, pattern, generation, results)

    def _apply_results(self, pattern: str, generation: int, results: list[RankedResult]) -> bool:
        """Display results if they belong to the latest search.

        Returns:
            True if the results were applied, False if they were stale.
        """
        if generation != self._search_generation:
            return False

        self._results = results
        self._pattern = pattern.strip()

        list_view = self.query_one("#results-list", ListView)
        list_view.clear()
        if results:
            style = self._settings.display.highlight_style
            show_weight = self._settings.display.show_weights and bool(self._pattern)
            list_view.extend(ResultListItem(r, style, show_weight) for r in results)
        else:
            list_view.append(ListItem(Static("No matches found")))

        self._update_status(self._build_status_text())
        return True

    def _build_status_text(self) -> str:
        """Status bar text with result counts and query."""
        total = len(self._service)
        if not self._pattern:
            return f"{total} items"
        return f"{len(self._results)} of {total} │ [b]{self._pattern}[/b]"

    def _update_status(self, text: str) -> None:
        """Update the status bar."""
        self.query_one("#status-bar", Static).update(text)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Show details for the selected result."""
        if not isinstance(event.item, ResultListItem):
            return
        item = event.item.item
        parts = [text_of(item)]
        native = getattr(item, "display_native", "")
        if native:
            parts.append(native)
        capital = getattr(item, "capital", None)
        if capital:
            parts.append(f"capital: {capital}")
        self._update_status(" │ ".join(parts))

    def action_clear_query(self) -> None:
        """Clear the search box (shows every candidate again)."""
        search_input = self.query_one("#search-input", Input)
        search_input.value = ""
        search_input.focus()

    def action_focus_results(self) -> None:
        """Move focus to the results list."""
        list_view = self.query_one("#results-list", ListView)
        list_view.focus()
        if list_view.index is None and len(list_view) > 0:
            list_view.index = 0

    def action_focus_search(self) -> None:
        """Move focus back to the search box."""
        self.query_one("#search-input", Input).focus()
