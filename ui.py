# ui.py
from typing import Optional, Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import (Button, DataTable, Input, Label, Markdown, RichLog,
                             Static)

from models import MovieDetail, SearchResult
from pagination import ELLIPSIS, PaginationPlan

class SearchControls(Static):
    """Widget for the search input and button."""
    class SearchRequested(Message):
        def __init__(self, query: str) -> None:
            self.query = query
            super().__init__()

    def compose(self) -> ComposeResult:
        yield Label("Search for a movie title:")
        yield Input(placeholder="e.g., Batman")
        yield Button("Search", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_search_message()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.post_search_message()

    def post_search_message(self) -> None:
        # Empty queries are posted too; the controller rejects them with a message.
        self.post_message(self.SearchRequested(self.query_one(Input).value))

    def set_query(self, query: str) -> None:
        self.query_one(Input).value = query


class ResultsDisplay(DataTable):
    """Widget for one page of search results."""
    class RowSelected(Message):
        def __init__(self, key: str) -> None:
            self.key = key
            super().__init__()

    def on_mount(self) -> None:
        self.add_columns("Title", "Year", "Type", "Poster")
        self.cursor_type = "row"

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value:
            self.post_message(self.RowSelected(event.row_key.value))

    def update_results(self, results: Sequence[SearchResult]) -> None:
        self.clear()
        for r in results:
            self.add_row(r.title, r.year, r.media_type, "yes" if r.poster_url else "-", key=r.imdb_id)


class PageButton(Button):
    def __init__(self, label: str, page_number: Optional[int], **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.page_number = page_number


class PaginationBar(Horizontal):
    """Renders a PaginationPlan as a row of buttons."""
    class PageRequested(Message):
        def __init__(self, page: int) -> None:
            self.page = page
            super().__init__()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if isinstance(event.button, PageButton) and event.button.page_number is not None:
            self.post_message(self.PageRequested(event.button.page_number))

    def update_plan(self, plan: Optional[PaginationPlan]) -> None:
        self.remove_children()
        if not plan:
            return
        controls = []
        for entry in plan.controls:
            if entry.kind == ELLIPSIS:
                controls.append(Label(entry.label, classes="page-ellipsis"))
            else:
                controls.append(PageButton(
                    entry.label,
                    entry.number,
                    variant="primary" if entry.is_active else "default",
                    disabled=entry.is_disabled,
                    classes="page-button",
                ))
        self.mount(*controls)


def detail_markdown(detail: Optional[MovieDetail]) -> str:
    if detail is None:
        return "## Details\n\n*Select a movie to see its details.*"
    info = [
        ("Title", detail.title),
        ("Year", detail.year),
        ("Country", detail.country),
        ("Genres", detail.genre),
        ("Language", detail.language),
        ("Release Date", detail.released),
        ("Runtime", detail.runtime),
        ("Director", detail.director),
        ("Writer", detail.writer),
        ("Actors", detail.actors),
    ]
    lines = [f"## {detail.title} ({detail.year})", ""]
    lines += [f"- **{label}**: {value}" for label, value in info]
    lines.append(f"- **IMDb**: {detail.imdb_url}")
    lines.append(f"- **Poster**: {detail.poster_url or 'No poster available'}")
    if detail.ratings:
        lines += ["", "### Ratings", ""]
        lines += [f"- **{r.source}**: {r.value}" for r in detail.ratings]
    lines += ["", "### Plot", "", detail.plot]
    return "\n".join(lines)


class DetailsPane(Static):
    """Widget to display details of the selected movie."""
    def compose(self) -> ComposeResult:
        yield Markdown()

    def update_details(self, detail: Optional[MovieDetail]) -> None:
        self.query_one(Markdown).update(detail_markdown(detail))


class LogPane(RichLog):
    """A dedicated widget for logging application events."""
    def add_message(self, message: str) -> None:
        self.write(message)
