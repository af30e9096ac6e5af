from __future__ import annotations

import unittest

from pagination import ELLIPSIS, NEXT, PAGE, PREV, plan, total_pages


def layout(current: int, total: int) -> list:
    """Page numbers as ints, ellipses as "...", active page as "(n)"."""
    shown = []
    for entry in plan(current, total).pages:
        if entry.kind == ELLIPSIS:
            shown.append("...")
        elif entry.is_active:
            shown.append(f"({entry.number})")
        else:
            shown.append(entry.number)
    return shown


class TotalPagesTests(unittest.TestCase):
    def test_rounds_up_to_whole_pages(self) -> None:
        self.assertEqual(total_pages(23), 3)
        self.assertEqual(total_pages(20), 2)
        self.assertEqual(total_pages(1), 1)

    def test_no_results_means_no_pages(self) -> None:
        self.assertEqual(total_pages(0), 0)


class WindowingPolicyTests(unittest.TestCase):
    def test_single_page_has_no_controls(self) -> None:
        for total in (0, 1):
            result = plan(1, total)
            self.assertEqual(result.pages, ())
            self.assertEqual(result.controls, ())
            self.assertEqual(len(result), 0)

    def test_few_pages_are_all_shown(self) -> None:
        self.assertEqual(layout(2, 4), [1, "(2)", 3, 4])
        self.assertEqual(layout(5, 5), [1, 2, 3, 4, "(5)"])

    def test_first_two_pages(self) -> None:
        self.assertEqual(layout(1, 10), ["(1)", 2, 3, "...", 10])
        self.assertEqual(layout(2, 10), [1, "(2)", 3, "...", 10])

    def test_last_two_pages(self) -> None:
        self.assertEqual(layout(10, 10), [1, "...", 8, 9, "(10)"])
        self.assertEqual(layout(9, 10), [1, "...", 8, "(9)", 10])

    def test_third_page(self) -> None:
        self.assertEqual(layout(3, 10), [1, 2, "(3)", 4, "...", 10])

    def test_third_from_last_page(self) -> None:
        self.assertEqual(layout(8, 10), [1, "...", 7, "(8)", 9, 10])

    def test_middle_page(self) -> None:
        self.assertEqual(layout(7, 10), [1, "...", 6, "(7)", 8, "...", 10])
        self.assertEqual(layout(4, 10), [1, "...", 3, "(4)", 5, "...", 10])

    def test_six_pages_use_edge_cases_only(self) -> None:
        self.assertEqual(layout(3, 6), [1, 2, "(3)", 4, "...", 6])
        self.assertEqual(layout(4, 6), [1, "...", 3, "(4)", 5, 6])

    def test_bounded_for_every_position(self) -> None:
        for total in range(6, 60):
            for current in range(1, total + 1):
                pages = plan(current, total).pages
                numbers = [e.number for e in pages if e.kind == PAGE]
                active = [e.number for e in pages if e.is_active]
                self.assertLessEqual(len(pages), 7)
                self.assertEqual(pages[0].number, 1)
                self.assertEqual(pages[-1].number, total)
                self.assertLessEqual(sum(1 for e in pages if e.kind == ELLIPSIS), 2)
                self.assertEqual(active, [current])
                self.assertEqual(numbers, sorted(numbers))

    def test_small_totals_show_every_page_once(self) -> None:
        for total in range(2, 6):
            for current in range(1, total + 1):
                pages = plan(current, total).pages
                self.assertEqual([e.number for e in pages], list(range(1, total + 1)))
                self.assertEqual(sum(1 for e in pages if e.is_active), 1)

    def test_ellipsis_is_never_numbered_or_active(self) -> None:
        for entry in plan(7, 10).pages:
            if entry.kind == ELLIPSIS:
                self.assertIsNone(entry.number)
                self.assertFalse(entry.is_active)
                self.assertFalse(entry.is_interactive)

    def test_same_input_same_plan(self) -> None:
        self.assertEqual(plan(7, 42), plan(7, 42))


class PrevNextTests(unittest.TestCase):
    def test_three_pages_on_first(self) -> None:
        controls = plan(1, 3).controls
        self.assertEqual([e.kind for e in controls], [PREV, PAGE, PAGE, PAGE, NEXT])
        self.assertTrue(controls[0].is_disabled)
        self.assertTrue(controls[1].is_active)
        self.assertFalse(controls[-1].is_disabled)
        self.assertEqual(controls[-1].number, 2)

    def test_next_disabled_on_last_page(self) -> None:
        result = plan(10, 10)
        self.assertTrue(result.next.is_disabled)
        self.assertIsNone(result.next.number)
        self.assertFalse(result.prev.is_disabled)
        self.assertEqual(result.prev.number, 9)

    def test_out_of_range_current_is_clamped(self) -> None:
        self.assertEqual(plan(99, 10).current, 10)
        self.assertEqual(plan(0, 10).current, 1)


if __name__ == "__main__":
    unittest.main()
