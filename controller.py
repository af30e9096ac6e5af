# controller.py
"""Navigation between the start, results and details pages.

Every user action reaches the controller as an intent. The controller talks
to the search service, and only once a call has resolved does it update the
AppState. Each remote call is tagged with a sequence number; a response whose
number is no longer the latest issued is dropped, so a slow earlier request
can never overwrite the state set by a newer one. Back and GoHome also take a
number, so a response arriving after them is dropped as well.
"""
import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import pagination
from config import Config
from errors import NotFoundError, TransportError, ValidationError
from models import AppState, MovieDetail, Page, SearchResult
from pagination import PaginationPlan
from services import MovieSearchService

logger = logging.getLogger("cinelight.controller")

SEARCH_FAILED = "An error occurred while searching. Please try again."
DETAILS_FAILED = "An error occurred while loading movie details. Please try again."


# --- Intents ---

@dataclass(frozen=True)
class Search:
    query: str
    page: int = 1


@dataclass(frozen=True)
class ChangePage:
    page: int


@dataclass(frozen=True)
class SelectItem:
    imdb_id: str


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class GoHome:
    pass


Intent = Union[Search, ChangePage, SelectItem, Back, GoHome]


# --- What the presentation layer gets back ---

@dataclass(frozen=True)
class Notice:
    level: str  # "info", "warning" or "error"
    text: str


@dataclass(frozen=True)
class View:
    """Read-only snapshot of the session for rendering."""
    page: Page
    query: str
    results: Tuple[SearchResult, ...]
    total_results: int
    current_page_number: int
    pagination: Optional[PaginationPlan]
    detail: Optional[MovieDetail]
    loading: bool


@dataclass(frozen=True)
class Outcome:
    view: View
    accepted: bool = True
    stale: bool = False
    notice: Optional[Notice] = None


class NavigationController:
    """Runs the start -> results -> details state machine for one session."""

    def __init__(self, search_service: MovieSearchService, config: Config, state: Optional[AppState] = None):
        self.search_service = search_service
        self.config = config
        self.state = state or AppState()
        self._sequence = itertools.count(1)
        self._latest = 0
        self._in_flight = 0

    @property
    def total_pages(self) -> int:
        return pagination.total_pages(self.state.total_results, self.config.PAGE_SIZE)

    def view(self) -> View:
        state = self.state
        on_results = state.current_page is Page.RESULTS
        on_details = state.current_page is Page.DETAILS
        return View(
            page=state.current_page,
            query=state.query,
            results=tuple(state.results) if on_results else (),
            total_results=state.total_results,
            current_page_number=state.current_page_number,
            pagination=pagination.plan(state.current_page_number, self.total_pages) if on_results else None,
            detail=state.selected_detail if on_details else None,
            loading=self._in_flight > 0,
        )

    async def dispatch(self, intent: Intent) -> Outcome:
        if isinstance(intent, Search):
            return await self.search(intent.query, intent.page)
        if isinstance(intent, ChangePage):
            return await self.change_page(intent.page)
        if isinstance(intent, SelectItem):
            return await self.select_item(intent.imdb_id)
        if isinstance(intent, Back):
            return self.back()
        if isinstance(intent, GoHome):
            return self.go_home()
        raise TypeError(f"Unknown intent: {intent!r}")

    # --- Intent handlers ---

    async def search(self, query: str, page: int = 1) -> Outcome:
        if self.state.current_page not in (Page.START, Page.RESULTS):
            return self._ignored("search", self.state.current_page)

        query = query.strip()
        if not query:
            return self._rejected("Please enter a movie title to search.")

        seq = self._issue()
        logger.info(f"[#{seq}] Searching for '{query}' (page {page})")
        try:
            result = await self._remote(self.search_service.search(query, page))
        except (ValidationError, NotFoundError) as e:
            return self._failed(seq, "warning", str(e))
        except TransportError as e:
            logger.error(f"[#{seq}] Search transport error: {e}")
            return self._failed(seq, "error", SEARCH_FAILED)

        if self._is_stale(seq):
            return self._stale(seq)

        self.state.query = query
        self.state.set_search_results(list(result.items), result.total_count)
        self.state.current_page_number = page
        self.state.selected_detail = None
        self.state.current_page = Page.RESULTS
        return Outcome(
            view=self.view(),
            notice=Notice("info", f"Found {result.total_count} results for '{query}'."),
        )

    async def change_page(self, page: int) -> Outcome:
        if self.state.current_page is not Page.RESULTS:
            return self._ignored("change page", self.state.current_page)
        if not 1 <= page <= self.total_pages:
            return self._rejected(f"Page {page} is out of range (1-{self.total_pages}).")
        return await self.search(self.state.query, page)

    async def select_item(self, imdb_id: str) -> Outcome:
        if self.state.current_page is not Page.RESULTS:
            return self._ignored("select item", self.state.current_page)

        seq = self._issue()
        logger.info(f"[#{seq}] Loading details for {imdb_id}")
        try:
            detail = await self._remote(self.search_service.fetch_details(imdb_id))
        except (ValidationError, NotFoundError) as e:
            return self._failed(seq, "warning", str(e))
        except TransportError as e:
            logger.error(f"[#{seq}] Detail transport error: {e}")
            return self._failed(seq, "error", DETAILS_FAILED)

        if self._is_stale(seq):
            return self._stale(seq)

        self.state.selected_detail = detail
        self.state.current_page = Page.DETAILS
        return Outcome(view=self.view())

    def back(self) -> Outcome:
        if self.state.current_page is not Page.DETAILS:
            return self._ignored("back", self.state.current_page)
        self._supersede()
        self.state.selected_detail = None
        self.state.current_page = Page.RESULTS
        return Outcome(view=self.view())

    def go_home(self) -> Outcome:
        self._supersede()
        self.state.selected_detail = None
        self.state.current_page = Page.START
        return Outcome(view=self.view())

    # --- Helpers ---

    def _issue(self) -> int:
        self._latest = next(self._sequence)
        self._in_flight += 1
        return self._latest

    def _supersede(self) -> None:
        """Makes every outstanding response stale without issuing a request."""
        self._latest = next(self._sequence)

    async def _remote(self, call):
        try:
            return await call
        finally:
            self._in_flight -= 1

    def _is_stale(self, seq: int) -> bool:
        return seq != self._latest

    def _stale(self, seq: int) -> Outcome:
        logger.debug(f"[#{seq}] Discarding response superseded by #{self._latest}")
        return Outcome(view=self.view(), stale=True)

    def _failed(self, seq: int, level: str, text: str) -> Outcome:
        if self._is_stale(seq):
            return self._stale(seq)
        return Outcome(view=self.view(), notice=Notice(level, text))

    def _rejected(self, text: str) -> Outcome:
        logger.info(f"Rejected: {text}")
        return Outcome(view=self.view(), accepted=False, notice=Notice("warning", text))

    def _ignored(self, action: str, page: Page) -> Outcome:
        logger.warning(f"Ignoring '{action}' on the {page.value} page")
        return Outcome(view=self.view(), accepted=False)
