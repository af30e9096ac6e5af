import argparse
import asyncio
import logging
import sys

from config import Config
from errors import CineLightError
from models import MovieDetail, SearchPage
from pagination import ELLIPSIS, plan, total_pages
from services import MovieSearchService

logger = logging.getLogger("cinelight.cli")


def format_page(query: str, page: int, result: SearchPage, page_size: int = 10) -> str:
    """Renders one page of search results as plain text."""
    lines = [f"{result.total_count} results for \"{query}\" (page {page}):"]
    for i, movie in enumerate(result.items, start=(page - 1) * page_size + 1):
        lines.append(f"{i:>4}. {movie.title} ({movie.year}) [{movie.media_type}] {movie.imdb_id}")

    layout = plan(page, total_pages(result.total_count, page_size))
    if layout.pages:
        labels = []
        for entry in layout.pages:
            if entry.kind == ELLIPSIS:
                labels.append("...")
            elif entry.is_active:
                labels.append(f"[{entry.number}]")
            else:
                labels.append(str(entry.number))
        lines.append("")
        lines.append("Pages: " + " ".join(labels))
    return "\n".join(lines)


def format_detail(detail: MovieDetail) -> str:
    lines = [
        f"{detail.title} ({detail.year})",
        f"Country: {detail.country}",
        f"Genres: {detail.genre}",
        f"Language: {detail.language}",
        f"Release Date: {detail.released}",
        f"Runtime: {detail.runtime}",
        f"Director: {detail.director}",
        f"Writer: {detail.writer}",
        f"Actors: {detail.actors}",
        f"IMDb: {detail.imdb_url}",
    ]
    for rating in detail.ratings:
        lines.append(f"{rating.source}: {rating.value}")
    lines.append("")
    lines.append(detail.plot)
    return "\n".join(lines)


async def lookup(args: argparse.Namespace, config: Config) -> str:
    service = MovieSearchService(config)
    try:
        if args.id:
            return format_detail(await service.fetch_details(args.id))
        result = await service.search(args.title, args.page)
        return format_page(args.title.strip(), args.page, result, config.PAGE_SIZE)
    finally:
        await service.aclose()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Look up movies on OMDb.")
    parser.add_argument("title", nargs="?", help="The movie title to search for.")
    parser.add_argument("-p", "--page", type=int, default=1,
                        help="Result page to show, 10 titles per page (default: 1).")
    parser.add_argument("-i", "--id", help="Show the details of one IMDb id instead of searching.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr.")

    args = parser.parse_args(argv)
    if not args.title and not args.id:
        parser.error("either a title or --id is required")

    config = Config.from_env()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        print(asyncio.run(lookup(args, config)))
    except CineLightError as e:
        logger.debug("Lookup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
