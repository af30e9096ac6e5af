from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import findmovie
from errors import NotFoundError
from models import MovieDetail, Rating, SearchPage, SearchResult


def results(count: int, total: int) -> SearchPage:
    return SearchPage(
        items=tuple(
            SearchResult(imdb_id=f"tt{i:07d}", title=f"Batman {i}", year="2001", media_type="movie")
            for i in range(count)
        ),
        total_count=total,
    )


class FormatTests(unittest.TestCase):
    def test_page_listing_numbers_items_and_shows_pages(self) -> None:
        text = findmovie.format_page("batman", 2, results(10, 23))

        lines = text.splitlines()
        self.assertEqual(lines[0], '23 results for "batman" (page 2):')
        self.assertTrue(lines[1].strip().startswith("11. Batman 0 (2001)"))
        self.assertEqual(lines[-1], "Pages: 1 [2] 3")

    def test_single_page_has_no_pages_line(self) -> None:
        text = findmovie.format_page("heat", 1, results(3, 3))

        self.assertNotIn("Pages:", text)

    def test_long_listing_uses_ellipsis(self) -> None:
        text = findmovie.format_page("love", 1, results(10, 400))

        self.assertTrue(text.endswith("Pages: [1] 2 3 ... 40"))

    def test_detail_includes_ratings_and_link(self) -> None:
        detail = MovieDetail(
            imdb_id="tt0110912",
            title="Pulp Fiction",
            year="1994",
            plot="Two hitmen.",
            ratings=(Rating("Rotten Tomatoes", "92%"),),
        )

        text = findmovie.format_detail(detail)

        self.assertIn("Pulp Fiction (1994)", text)
        self.assertIn("Rotten Tomatoes: 92%", text)
        self.assertIn("https://www.imdb.com/title/tt0110912/", text)
        self.assertTrue(text.endswith("Two hitmen."))


class MainTests(unittest.TestCase):
    def test_search_prints_listing(self) -> None:
        stdout = io.StringIO()
        with mock.patch("findmovie.MovieSearchService") as service_cls, redirect_stdout(stdout):
            service = service_cls.return_value
            service.search = mock.AsyncMock(return_value=results(2, 2))
            service.aclose = mock.AsyncMock()
            code = findmovie.main(["batman"])

        self.assertEqual(code, 0)
        service.search.assert_awaited_once_with("batman", 1)
        service.aclose.assert_awaited_once()
        self.assertIn('2 results for "batman"', stdout.getvalue())

    def test_not_found_exits_with_error(self) -> None:
        stderr = io.StringIO()
        with mock.patch("findmovie.MovieSearchService") as service_cls, redirect_stderr(stderr):
            service = service_cls.return_value
            service.fetch_details = mock.AsyncMock(side_effect=NotFoundError("Incorrect IMDb ID."))
            service.aclose = mock.AsyncMock()
            code = findmovie.main(["--id", "tt0"])

        self.assertEqual(code, 1)
        self.assertIn("Error: Incorrect IMDb ID.", stderr.getvalue())

    def test_title_or_id_required(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            findmovie.main([])


if __name__ == "__main__":
    unittest.main()
