#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from c8core.display import Display


class TestDisplay(unittest.TestCase):
    def setUp(self):
        self.display = Display()
        self.small_display = Display(4, 5)

    def test_display_size(self):
        self.assertEqual((64, 32), self.display.get_vid_size())
        self.assertEqual(2048, len(self.display.get_bitmap()))
        self.assertEqual((4, 5), self.small_display.get_vid_size())

    def test_display_writes(self):
        display = self.small_display
        self.assertFalse(display.xor_pixel(0, 0))
        self.assertEqual("0100000000000000000000000000000000000000", display.get_bitmap().hex())
        self.assertFalse(display.xor_pixel(1, 1))
        self.assertEqual("0100000000010000000000000000000000000000", display.get_bitmap().hex())
        self.assertTrue(display.xor_pixel(1, 1))  # Collision
        self.assertEqual("0100000000000000000000000000000000000000", display.get_bitmap().hex())

    def test_display_row_spill(self):
        display = self.small_display
        self.assertFalse(display.xor_pixel(5, 0))  # Past the right edge, so lands on the next row
        self.assertEqual(1, display.get_pixel(1, 1))

    def test_display_truncate(self):
        display = self.small_display
        self.assertIsNone(display.xor_pixel(0, 5))
        self.assertIsNone(display.xor_pixel(4, 4))
        self.assertEqual("0000000000000000000000000000000000000000", display.get_bitmap().hex())
        self.assertFalse(display.xor_pixel(3, 4))
        self.assertEqual(1, display.get_pixel(3, 4))

    def test_display_clear(self):
        display = self.display
        display.xor_pixel(0, 0)
        display.xor_pixel(63, 31)
        display.clear()
        self.assertEqual(bytes(2048), display.get_bitmap().tobytes())
