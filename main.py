# main.py
import logging

import pyperclip
from textual.app import App, ComposeResult
from textual.containers import Container, Vertical
from textual.logging import TextualHandler
from textual.widgets import ContentSwitcher, Footer, Header, Input, Label

from config import Config
from controller import (Back, ChangePage, GoHome, Intent, NavigationController,
                        Outcome, Search, SelectItem, View)
from models import Page
from services import MovieSearchService
from ui import (DetailsPane, LogPane, PaginationBar, ResultsDisplay,
                SearchControls)

logger = logging.getLogger("cinelight.app")

NOTICE_STYLES = {"info": "green", "warning": "yellow", "error": "red"}


class CineLightApp(App):
    TITLE = "CineLight"
    SUB_TITLE = "Movie lookup"
    BINDINGS = [
        ("d", "toggle_dark", "Toggle dark mode"),
        ("q", "quit", "Quit"),
        ("h", "home", "Home"),
        ("escape", "back", "Back"),
        ("c", "copy_link", "Copy IMDb Link"),
    ]
    CSS = """
    #main-container { height: 1fr; }
    #pages { height: 1fr; }
    #results-table { height: 1fr; }
    #pagination { height: auto; }
    .page-ellipsis { padding: 1 1; }
    #log { height: 8; }
    """

    def __init__(self, controller: NavigationController, config: Config):
        super().__init__()
        self.controller = controller
        self.config = config

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            with ContentSwitcher(initial=Page.START.value, id="pages"):
                with Vertical(id=Page.START.value):
                    yield Label("Welcome to CineLight")
                    yield SearchControls(id="start-search")
                with Vertical(id=Page.RESULTS.value):
                    yield SearchControls(id="results-search")
                    yield Label(id="results-summary")
                    yield ResultsDisplay(id="results-table")
                    yield PaginationBar(id="pagination")
                with Vertical(id=Page.DETAILS.value):
                    yield DetailsPane(id="details-pane")
            yield LogPane(id="log", wrap=True, highlight=True, markup=True)
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#start-search").query_one(Input).focus()
        self.render_view(self.controller.view())

    async def on_unmount(self) -> None:
        await self.controller.search_service.aclose()

    def render_view(self, view: View) -> None:
        """Pushes a controller snapshot to the widgets."""
        self.query_one(ContentSwitcher).current = view.page.value
        for controls in self.query(SearchControls):
            controls.set_query(view.query)
        if view.page is Page.RESULTS:
            self.query_one("#results-summary", Label).update(
                f"{view.total_results} results for '{view.query}', "
                f"page {view.current_page_number}"
            )
            self.query_one(ResultsDisplay).update_results(view.results)
            self.query_one(PaginationBar).update_plan(view.pagination)
            self.query_one(ResultsDisplay).focus()
        elif view.page is Page.DETAILS:
            self.query_one(DetailsPane).update_details(view.detail)
        else:
            self.query_one("#start-search").query_one(Input).focus()

    def send_intent(self, intent: Intent) -> None:
        # No exclusive group: superseded responses are dropped by the controller.
        self.run_worker(self.perform(intent), group="navigation")

    async def perform(self, intent: Intent) -> None:
        switcher = self.query_one(ContentSwitcher)
        switcher.loading = True
        outcome = await self.controller.dispatch(intent)
        switcher.loading = outcome.view.loading
        self.show_outcome(outcome)

    def show_outcome(self, outcome: Outcome) -> None:
        if outcome.stale:
            return
        if outcome.accepted:
            self.render_view(outcome.view)
        if outcome.notice:
            style = NOTICE_STYLES.get(outcome.notice.level, "white")
            self.query_one(LogPane).add_message(f"[{style}]{outcome.notice.text}[/{style}]")

    # --- Actions ---
    def action_home(self) -> None:
        self.send_intent(GoHome())

    def action_back(self) -> None:
        self.send_intent(Back())

    def action_copy_link(self) -> None:
        log = self.query_one(LogPane)
        detail = self.controller.view().detail
        if detail is None:
            log.add_message("[yellow]⚠️ No movie selected.[/yellow]")
            return
        try:
            pyperclip.copy(detail.imdb_url)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Clipboard unavailable: {e}")
            log.add_message("[red]❌ No clipboard available.[/red]")
            return
        log.add_message(f"📋 Copied IMDb link for '[b]{detail.title}[/b]'.")

    # --- Message Handlers ---
    def on_search_controls_search_requested(self, message: SearchControls.SearchRequested) -> None:
        if message.query.strip():
            self.query_one(LogPane).add_message(f"🔎 Searching for '{message.query.strip()}'...")
        self.send_intent(Search(message.query))

    def on_results_display_row_selected(self, message: ResultsDisplay.RowSelected) -> None:
        self.send_intent(SelectItem(message.key))

    def on_pagination_bar_page_requested(self, message: PaginationBar.PageRequested) -> None:
        self.send_intent(ChangePage(message.page))


def run() -> None:
    app_config = Config.from_env()
    logging.basicConfig(level=app_config.LOG_LEVEL, handlers=[TextualHandler()])
    search_service = MovieSearchService(app_config)
    controller = NavigationController(search_service, app_config)

    app = CineLightApp(controller, app_config)
    app.run()


if __name__ == "__main__":
    run()
