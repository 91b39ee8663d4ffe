"""Docs Deck - a TUI for browsing the FusionKit documentation index."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Rule,
    Static,
)

from fusionkit_docs.indexing import DocIndexer, categorize_path
from fusionkit_docs.ingesters import get_ingester
from fusionkit_docs.models import Category, DocSection, IndexedDocs


@dataclass
class IndexStats:
    """Statistics of the last indexing run."""

    files: int = 0
    sections: dict[str, int] = field(default_factory=dict)
    status: str = "idle"
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def elapsed(self) -> str:
        if not self.start_time:
            return "0.00s"
        end = self.end_time or datetime.now()
        return f"{(end - self.start_time).total_seconds():.2f}s"

    @classmethod
    def from_index(cls, indexed: IndexedDocs, start_time: datetime) -> IndexStats:
        return cls(
            files=indexed.file_count,
            sections={c.value: len(indexed.by_category(c)) for c in Category},
            status="complete",
            start_time=start_time,
            end_time=datetime.now(),
        )


class StatsPanel(Static):
    """Index statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(IndexStats())

    def update_display(self, stats: IndexStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        rows = "\n".join(
            f"  {c.value.capitalize():<11} [magenta]{stats.sections.get(c.value, 0):,}[/]"
            for c in Category
        )
        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]TIME[/b]    {stats.elapsed}

[b]FILES[/b]   [cyan]{stats.files:,}[/]

[b]SECTIONS[/b]
{rows}
  Total       [green]{sum(stats.sections.values()):,}[/]""")


class SectionTable(DataTable):
    """Indexed sections as a table."""

    def on_mount(self) -> None:
        self.add_columns("Category", "Lvl", "Title", "File")
        self.cursor_type = "row"

    def show_sections(self, sections: list[DocSection]) -> None:
        self.clear()
        for section in sections:
            title = section.title if len(section.title) <= 40 else section.title[:37] + "..."
            self.add_row(
                categorize_path(section.file_path).value,
                f"h{section.level}",
                title,
                section.file_path,
                key=section.id + f"@{len(self.rows)}",
            )


class DocsDeck(App):
    """The Docs Deck - documentation index browser."""

    # Messages for thread-safe communication
    class IndexBuilt(Message):
        def __init__(self, indexer: DocIndexer, stats: IndexStats) -> None:
            self.indexer = indexer
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 35;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 30;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-bottom: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    SectionTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #preview {
        height: 10;
        padding: 0 1;
        border: round $accent;
        overflow-y: auto;
    }

    #log-panel {
        height: 8;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }
    """

    BINDINGS = [
        Binding("i", "index", "Index", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "FusionKit Docs Deck"
    SUB_TITLE = "Documentation Index Browser"

    def __init__(self, docs_path: str = "") -> None:
        super().__init__()
        self.initial_docs = docs_path
        self.indexer: DocIndexer | None = None
        self.shown: dict[str, DocSection] = {}

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            # Left panel - Stats & Controls
            with Vertical(id="left-panel"):
                yield Label("INDEX", classes="section-title")
                yield StatsPanel()
                yield Rule()
                yield Label("Docs Path")
                yield Input(
                    value=self.initial_docs,
                    placeholder="Enter docs folder or .zip path...",
                    id="docs-input",
                )
                with Horizontal(id="action-buttons"):
                    yield Button("INDEX", id="index-btn", variant="success")
                    yield Button("Clear", id="clear-btn", variant="warning")
                yield Label("Search")
                yield Input(placeholder="Title, content or path...", id="query-input")

            # Center panel - Sections
            with Vertical(id="center-panel"):
                yield Label("SECTIONS", classes="section-title")
                yield SectionTable(id="section-table")
                yield Static("[dim]Select a section to preview it[/]", id="preview")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            # Right panel - Directory browser
            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        """Initialize the app on mount."""
        self._log("Docs Deck initialized")
        if self.initial_docs:
            self.action_index()
        else:
            self._log("Enter a docs path and press INDEX to begin")

    def _log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def _show(self, sections: list[DocSection]) -> None:
        self.query_one("#section-table", SectionTable).show_sections(sections)
        self.shown = {f"{s.id}@{i}": s for i, s in enumerate(sections)}

    # Message handlers for thread-safe updates
    def on_docs_deck_index_built(self, event: IndexBuilt) -> None:
        """Handle a finished index from the worker thread."""
        self.indexer = event.indexer
        self.query_one(StatsPanel).update_display(event.stats)
        self._show(event.indexer.get_by_category("all"))

    def on_docs_deck_log_message(self, event: LogMessage) -> None:
        """Handle log message from worker thread."""
        self._log(event.message)

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        """Use a selected directory as the docs path."""
        self.query_one("#docs-input", Input).value = str(event.path)

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        """Use a selected zip file as the docs path."""
        if event.path.suffix.lower() == ".zip":
            self.query_one("#docs-input", Input).value = str(event.path)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Index on docs path submit, search on query submit."""
        if event.input.id == "docs-input":
            self.action_index()
        elif event.input.id == "query-input":
            self.run_search(event.value.strip())

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Preview the selected section."""
        section = self.shown.get(str(event.row_key.value))
        if section is None:
            return
        self.query_one("#preview", Static).update(
            f"[b]{section.title}[/b]  [dim]{section.id}[/]\n\n{section.content}"
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "index-btn":
            self.action_index()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def run_search(self, query: str) -> None:
        if self.indexer is None:
            self._log("[red]ERROR: Index the docs first[/]")
            return
        if not query:
            self._show(self.indexer.get_by_category("all"))
            return
        results = self.indexer.find_content(query)
        self._show(results)
        self._log(f"Search {query!r}: {len(results)} sections")

    def action_clear(self) -> None:
        """Clear the table, log and stats."""
        self.indexer = None
        self.query_one(StatsPanel).update_display(IndexStats())
        self._show([])
        self.query_one("#preview", Static).update("[dim]Select a section to preview it[/]")
        self.query_one("#log-panel", Log).clear()
        self._log("Cleared - ready for new run")

    def action_index(self) -> None:
        """Start indexing the docs path."""
        source = self.query_one("#docs-input", Input).value.strip()
        if not source:
            self._log("[red]ERROR: No docs path specified[/]")
            return
        self.run_index(source)

    @work(exclusive=True, thread=True)
    def run_index(self, source: str) -> None:
        """Build the index in a background thread."""
        source_path = Path(source)
        start_time = datetime.now()
        self.post_message(self.LogMessage(f"Indexing: {source}"))

        ingester = get_ingester(source_path)
        if ingester is None:
            self.post_message(
                self.LogMessage("[red]ERROR: Unsupported docs source (use folder or .zip)[/]")
            )
            return

        indexer = DocIndexer(source_path)
        indexed = indexer.index_docs()
        stats = IndexStats.from_index(indexed, start_time)

        self.post_message(self.IndexBuilt(indexer, stats))
        self.post_message(
            self.LogMessage(
                f"[cyan]COMPLETE: {stats.files} files, {len(indexed.all)} sections "
                f"({ingester.source_type}, {stats.elapsed})[/]"
            )
        )


def main(docs_path: str = "") -> None:
    """Run the Docs Deck TUI."""
    app = DocsDeck(docs_path)
    app.run()


if __name__ == "__main__":
    main()
