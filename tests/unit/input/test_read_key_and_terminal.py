"""Raw key decoding and terminal region fitting."""

from __future__ import annotations

import os
import unittest

from millerview import input as input_mod
from millerview.geometry import Rect
from millerview.terminal import fit_region


def _read(payload: bytes) -> str:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        return input_mod.read_key(read_fd)
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_printable_and_arrow_keys(self) -> None:
        self.assertEqual(_read(b"j"), "j")
        self.assertEqual(_read(b"\x1b[A"), "UP")
        self.assertEqual(_read(b"\x1b[D"), "LEFT")
        self.assertEqual(_read(b"\x1bOB"), "DOWN")

    def test_lone_escape_and_interrupt(self) -> None:
        self.assertEqual(_read(b"\x1b"), "ESC")
        self.assertEqual(_read(b"\x03"), "CTRL_C")

    def test_carriage_return_is_passed_through_as_plain_key(self) -> None:
        self.assertEqual(_read(b"\r"), "\r")

    def test_escape_keeps_following_key(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1bq")
            self.assertEqual(input_mod.read_key(read_fd), "ESC")
            self.assertEqual(input_mod.read_key(read_fd), "q")
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_multibyte_character_is_decoded_whole(self) -> None:
        self.assertEqual(_read("é".encode("utf-8")), "é")

    def test_end_of_input_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            self.assertEqual(input_mod.read_key(read_fd), "")
        finally:
            os.close(read_fd)


class FitRegionTests(unittest.TestCase):
    def test_region_that_fits_is_unchanged(self) -> None:
        self.assertEqual(fit_region(Rect(0, 2, 90, 5), 100, 24), (Rect(0, 2, 90, 5), 0))

    def test_width_is_clamped_to_terminal(self) -> None:
        region, scroll = fit_region(Rect(10, 0, 90, 5), 80, 24)
        self.assertEqual(region, Rect(10, 0, 70, 5))
        self.assertEqual(scroll, 0)

    def test_region_near_bottom_scrolls_terminal(self) -> None:
        region, scroll = fit_region(Rect(0, 22, 90, 5), 100, 24)
        self.assertEqual(scroll, 3)
        self.assertEqual(region, Rect(0, 19, 90, 5))

    def test_region_taller_than_terminal_is_clamped(self) -> None:
        region, scroll = fit_region(Rect(0, 3, 90, 40), 100, 24)
        self.assertEqual(region.h, 24)
        self.assertEqual(region.y + region.h, 24)
        self.assertEqual(scroll, 3)


if __name__ == "__main__":
    unittest.main()
