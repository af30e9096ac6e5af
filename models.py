# models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

IMDB_TITLE_URL = "https://www.imdb.com/title/{imdb_id}/"


class Page(Enum):
    START = "start"
    RESULTS = "results"
    DETAILS = "details"


@dataclass(frozen=True)
class SearchResult:
    """A single title from a search listing."""
    imdb_id: str
    title: str
    year: str
    media_type: str
    poster_url: Optional[str] = None


@dataclass(frozen=True)
class Rating:
    source: str
    value: str


@dataclass(frozen=True)
class MovieDetail:
    """Everything OMDb knows about one title."""
    imdb_id: str
    title: str
    year: str
    rated: str = "N/A"
    released: str = "N/A"
    runtime: str = "N/A"
    genre: str = "N/A"
    director: str = "N/A"
    writer: str = "N/A"
    actors: str = "N/A"
    plot: str = "N/A"
    language: str = "N/A"
    country: str = "N/A"
    awards: str = "N/A"
    poster_url: Optional[str] = None
    ratings: Tuple[Rating, ...] = ()
    metascore: str = "N/A"
    imdb_rating: str = "N/A"
    imdb_votes: str = "N/A"
    media_type: str = "movie"
    box_office: str = "N/A"
    production: str = "N/A"
    website: str = "N/A"

    @property
    def imdb_url(self) -> str:
        return IMDB_TITLE_URL.format(imdb_id=self.imdb_id)


@dataclass(frozen=True)
class SearchPage:
    """One server page of a search: at most PAGE_SIZE items plus the overall count."""
    items: Tuple[SearchResult, ...]
    total_count: int


@dataclass
class AppState:
    """A single object to hold the entire session state.

    Only the NavigationController writes to it; the UI reads snapshots.
    """
    current_page: Page = Page.START
    query: str = ""
    results: List[SearchResult] = field(default_factory=list)
    total_results: int = 0
    current_page_number: int = 1
    selected_detail: Optional[MovieDetail] = None

    def set_search_results(self, results: List[SearchResult], total: int) -> None:
        self.results = list(results)
        self.total_results = total
