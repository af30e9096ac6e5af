# services.py
import logging
from typing import Any, Dict, Optional

import httpx

from config import Config
from errors import NotFoundError, TransportError, ValidationError
from models import MovieDetail, Rating, SearchPage, SearchResult

logger = logging.getLogger("cinelight.services")

NO_MOVIES_FOUND = "No movies found. Please try a different search term."
NO_DETAILS_FOUND = "Failed to load movie details."


def _optional(value: Optional[str]) -> Optional[str]:
    """OMDb spells a missing value as "N/A"."""
    if not value or value == "N/A":
        return None
    return value


class MovieSearchService:
    """A service to handle interactions with the OMDb API."""

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def search(self, query: str, page: int = 1) -> SearchPage:
        """Fetches one page of titles matching the query."""
        query = query.strip()
        if not query:
            raise ValidationError("Please enter a movie title to search.")
        if page < 1:
            raise ValidationError(f"Page numbers start at 1, got {page}.")

        data = await self._get({"s": query, "page": page})
        if data.get("Response") == "False":
            logger.info(f"OMDb found nothing for '{query}' (page {page}): {data.get('Error')}")
            raise NotFoundError(data.get("Error"), default=NO_MOVIES_FOUND)

        try:
            items = tuple(self._parse_item(item) for item in data["Search"])
            total_count = int(data["totalResults"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed search payload for '{query}': {e!r}")
            raise TransportError("Malformed search response.") from e

        logger.info(f"'{query}' page {page}: {len(items)} items of {total_count}")
        return SearchPage(items=items, total_count=max(total_count, 0))

    async def fetch_details(self, imdb_id: str) -> MovieDetail:
        """Fetches the full record for one title."""
        imdb_id = imdb_id.strip()
        if not imdb_id:
            raise ValidationError("A title id is required.")

        data = await self._get({"i": imdb_id})
        if data.get("Response") == "False":
            logger.info(f"OMDb has no record for {imdb_id}: {data.get('Error')}")
            raise NotFoundError(data.get("Error"), default=NO_DETAILS_FOUND)

        try:
            return self._parse_detail(data)
        except (KeyError, TypeError) as e:
            logger.warning(f"Malformed detail payload for {imdb_id}: {e!r}")
            raise TransportError("Malformed detail response.") from e

    async def _get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Performs one OMDb request and returns the decoded JSON object."""
        request_params = {"apikey": self.config.OMDB_API_KEY, **params}
        try:
            response = await self.client.get(
                self.config.OMDB_BASE_URL,
                params=request_params,
                timeout=self.config.REQUEST_TIMEOUT,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"OMDb request timed out after {self.config.REQUEST_TIMEOUT}s: {params}")
            raise TransportError("The request timed out.") from e
        except httpx.HTTPError as e:
            logger.error(f"OMDb request failed: {e!r}")
            raise TransportError(str(e)) from e
        except ValueError as e:
            logger.error(f"OMDb returned invalid JSON: {e!r}")
            raise TransportError("Invalid JSON in response.") from e

        if not isinstance(data, dict):
            raise TransportError("Unexpected response shape.")
        return data

    def _parse_item(self, item: dict) -> SearchResult:
        """Parses a single raw API item into our SearchResult data model."""
        return SearchResult(
            imdb_id=item["imdbID"],
            title=item.get("Title", "N/A"),
            year=item.get("Year", "N/A"),
            media_type=item.get("Type", "movie"),
            poster_url=_optional(item.get("Poster")),
        )

    def _parse_detail(self, data: dict) -> MovieDetail:
        ratings = tuple(
            Rating(source=r["Source"], value=r["Value"]) for r in data.get("Ratings") or []
        )
        return MovieDetail(
            imdb_id=data["imdbID"],
            title=data.get("Title", "N/A"),
            year=data.get("Year", "N/A"),
            rated=data.get("Rated", "N/A"),
            released=data.get("Released", "N/A"),
            runtime=data.get("Runtime", "N/A"),
            genre=data.get("Genre", "N/A"),
            director=data.get("Director", "N/A"),
            writer=data.get("Writer", "N/A"),
            actors=data.get("Actors", "N/A"),
            plot=data.get("Plot", "N/A"),
            language=data.get("Language", "N/A"),
            country=data.get("Country", "N/A"),
            awards=data.get("Awards", "N/A"),
            poster_url=_optional(data.get("Poster")),
            ratings=ratings,
            metascore=data.get("Metascore", "N/A"),
            imdb_rating=data.get("imdbRating", "N/A"),
            imdb_votes=data.get("imdbVotes", "N/A"),
            media_type=data.get("Type", "movie"),
            box_office=data.get("BoxOffice", "N/A"),
            production=data.get("Production", "N/A"),
            website=data.get("Website", "N/A"),
        )
