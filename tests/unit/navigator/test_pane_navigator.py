"""Navigator traversal, lazy population, and action dispatch."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from millerview.actions import MoveDown, MoveLeft, MoveRight, MoveUp, Quit, default_key_bindings
from millerview.geometry import Rect
from millerview.navigator import PaneNavigator
from millerview.pane_model import DirectoryPane, DirectoryUnreadable, FilePane
from millerview.pane_model.fs import scan_directory
from millerview.render import RegionSurface
from millerview.ui_theme import PLAIN_THEME

REGION = Rect(0, 0, 91, 5)


def _navigator(directory: Path, **kwargs) -> PaneNavigator:
    return PaneNavigator(REGION, directory, PLAIN_THEME.style_table(), default_key_bindings(), **kwargs)


def _make_a(root: Path) -> Path:
    a = root / "a"
    a.mkdir()
    (a / "b").mkdir()
    (a / "c.txt").write_text("c\n", encoding="utf-8")
    return a


class NavigatorStartupTests(unittest.TestCase):
    def test_start_populates_parent_focus_and_preview(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)

            nav.start()

            self.assertEqual(nav.focus_path, a)
            self.assertEqual(nav.directory_at(0).selected_name(), "b")
            self.assertIn(a / "b", nav.cache)
            self.assertIn(root, nav.cache)
            self.assertEqual(nav.directory_at(-1).selected_name(), "a")
            self.assertEqual(nav.traverse(1), a / "b")
            self.assertEqual(nav.traverse(-1), root)

    def test_pane_count_below_two_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                _navigator(Path(tmp), pane_count=1)

    def test_unreadable_focus_aborts_start(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            nav = _navigator(Path(tmp))
            with mock.patch(
                "millerview.pane_model.directory.scan_directory",
                side_effect=DirectoryUnreadable(Path(tmp), "denied"),
            ):
                with self.assertRaises(DirectoryUnreadable):
                    nav.start()

    def test_wider_layout_populates_more_ancestors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            deep = root / "x" / "y"
            deep.mkdir(parents=True)
            nav = _navigator(deep, pane_count=4)

            nav.start()

            self.assertIn(root / "x", nav.cache)
            self.assertIn(root, nav.cache)
            self.assertEqual(nav.directory_at(-2).selected_name(), "x")


class NavigatorScenarioTests(unittest.TestCase):
    def test_move_right_down_left_keeps_parent_selection(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()

            self.assertTrue(nav.dispatch(MoveRight(1)))
            self.assertEqual(nav.focus_path, a / "b")
            self.assertIsInstance(nav.cache.get(a / "b"), DirectoryPane)

            self.assertFalse(nav.dispatch(MoveDown(1)))
            self.assertEqual(nav.cache.get(a).selected_name(), "b")

            self.assertTrue(nav.dispatch(MoveLeft(1)))
            self.assertEqual(nav.focus_path, a)
            self.assertEqual(nav.directory_at(0).selected_name(), "b")

    def test_vertical_move_refreshes_preview_pane(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()

            self.assertTrue(nav.dispatch(MoveDown(1)))

            self.assertEqual(nav.directory_at(0).selected_name(), "c.txt")
            self.assertIsInstance(nav.pane_at(1), FilePane)
            self.assertFalse(nav.dispatch(MoveDown(1)))
            self.assertTrue(nav.dispatch(MoveUp(5)))
            self.assertEqual(nav.directory_at(0).selected_name(), "b")

    def test_focus_on_file_pane_is_a_dead_end_for_vertical_moves(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()
            nav.dispatch(MoveDown(1))

            self.assertTrue(nav.dispatch(MoveRight(1)))
            self.assertEqual(nav.focus_path, a / "c.txt")
            self.assertFalse(nav.dispatch(MoveDown(1)))
            self.assertFalse(nav.dispatch(MoveRight(1)))
            self.assertEqual([slot.offset for slot, _pane in nav.layout()], [-1, 0])

            self.assertTrue(nav.dispatch(MoveLeft(1)))
            self.assertEqual(nav.focus_path, a)

    def test_empty_directory_has_no_preview(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            nav = _navigator(root)
            nav.start()

            self.assertEqual(nav.directory_at(0).entry_count(), 0)
            self.assertIsNone(nav.traverse(1))
            self.assertEqual(nav.ensure_populated(1), 0)
            self.assertFalse(nav.dispatch(MoveRight(1)))
            self.assertFalse(nav.dispatch(MoveDown(1)))
            self.assertEqual(nav.focus_path, root)

    def test_root_cannot_move_left(self) -> None:
        root = Path(Path.cwd().anchor).resolve()
        nav = _navigator(root)

        self.assertIsNone(nav.traverse(-1))
        self.assertEqual(nav.ensure_populated(-1), 0)
        self.assertFalse(nav.dispatch(MoveLeft(1)))
        self.assertEqual(nav.focus_path, root)

    def test_multi_level_moves_stop_where_population_stops(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a" / "b" / "c").mkdir(parents=True)
            nav = _navigator(root)
            nav.start()

            self.assertTrue(nav.dispatch(MoveRight(5)))
            self.assertEqual(nav.focus_path, root / "a" / "b" / "c")

            self.assertTrue(nav.dispatch(MoveLeft(2)))
            self.assertEqual(nav.focus_path, root / "a")
            self.assertEqual(nav.directory_at(0).selected_name(), "b")

    def test_quit_is_not_a_navigation_change(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            nav = _navigator(Path(tmp))
            nav.start()
            self.assertFalse(nav.dispatch(Quit()))

    def test_action_for_key_uses_binding_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            nav = _navigator(Path(tmp))
            self.assertEqual(nav.action_for_key("j"), MoveDown(1))
            self.assertIsNone(nav.action_for_key("z"))


class NavigatorPopulationTests(unittest.TestCase):
    def test_ensure_populated_is_idempotent_without_rescanning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()

            with mock.patch(
                "millerview.pane_model.directory.scan_directory",
                wraps=scan_directory,
            ) as spy:
                self.assertEqual(nav.ensure_populated(1), 1)
                self.assertEqual(nav.ensure_populated(-1), -1)
                self.assertEqual(nav.ensure_populated(0), 0)

            self.assertEqual(spy.call_count, 0)

    def test_smaller_offset_after_deeper_population_does_not_rescan(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            (a / "b" / "d").mkdir()
            nav = _navigator(a)
            nav.start()
            self.assertEqual(nav.ensure_populated(2), 2)

            with mock.patch(
                "millerview.pane_model.directory.scan_directory",
                wraps=scan_directory,
            ) as spy:
                self.assertEqual(nav.ensure_populated(1), 1)
                self.assertEqual(nav.ensure_populated(2), 2)

            self.assertEqual(spy.call_count, 0)
            self.assertIn(a / "b" / "d", nav.cache)

    def test_unreadable_child_stops_forward_population(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)

            def scan(directory: Path) -> list[Path]:
                if directory.name == "b":
                    raise DirectoryUnreadable(directory, "denied")
                return scan_directory(directory)

            nav = _navigator(a)
            with mock.patch("millerview.pane_model.directory.scan_directory", side_effect=scan):
                nav.start()
                self.assertNotIn(a / "b", nav.cache)
                self.assertFalse(nav.dispatch(MoveRight(1)))
                self.assertEqual(nav.focus_path, a)

    def test_symlinked_directory_reuses_canonical_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            (a / "link").symlink_to(a / "b")
            nav = _navigator(a)
            nav.start()
            cached_before = len(nav.cache)

            nav.dispatch(MoveDown(2))

            self.assertEqual(nav.directory_at(0).selected_name(), "link")
            self.assertEqual(nav.traverse(1), a / "b")
            self.assertEqual(len(nav.cache), cached_before)

    def test_vanished_cached_selection_still_resolves(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()
            (a / "b").rmdir()

            with mock.patch(
                "millerview.pane_model.directory.scan_directory",
                wraps=scan_directory,
            ) as spy, mock.patch("millerview.view_cache.canonical_path") as canonicalize:
                self.assertEqual(nav.traverse(1), a / "b")
                self.assertIsInstance(nav.pane_at(1), DirectoryPane)
                self.assertEqual(nav.ensure_populated(1), 1)

            self.assertEqual(spy.call_count, 0)
            canonicalize.assert_not_called()
            self.assertEqual([slot.offset for slot, _pane in nav.layout()], [-1, 0, 1])
            self.assertTrue(nav.dispatch(MoveRight(1)))
            self.assertEqual(nav.focus_path, a / "b")

    def test_vanished_uncached_selection_has_no_pane(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()
            (a / "c.txt").unlink()

            self.assertTrue(nav.dispatch(MoveDown(1)))
            self.assertEqual(nav.directory_at(0).selected_name(), "c.txt")
            self.assertEqual(nav.traverse(1), a / "c.txt")
            self.assertIsNone(nav.pane_at(1))
            self.assertEqual(nav.ensure_populated(1), 0)
            self.assertFalse(nav.dispatch(MoveRight(1)))
            self.assertEqual(nav.focus_path, a)


class NavigatorLayoutTests(unittest.TestCase):
    def test_layout_places_visible_panes_side_by_side(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()

            placed = nav.layout()

            self.assertEqual([slot.offset for slot, _pane in placed], [-1, 0, 1])
            self.assertEqual([pane.geometry.x for _slot, pane in placed], [0, 30, 60])
            self.assertTrue(all(pane.geometry.w == 30 and pane.geometry.h == 5 for _slot, pane in placed))

    def test_draw_writes_entry_names_once_per_frame(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            a = _make_a(root)
            nav = _navigator(a)
            nav.start()
            frames: list[str] = []

            nav.draw(RegionSurface(REGION, frames.append), clear=True)

            self.assertEqual(len(frames), 1)
            self.assertIn("c.txt", frames[0])
            self.assertIn("b" + " " * 29, frames[0])


if __name__ == "__main__":
    unittest.main()
