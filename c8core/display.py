#!/usr/bin/env python3

"""
Display Emulator

Holds the 64x32 monochrome bitmap, one byte per pixel, in row-major order.
Programs cannot write directly into video memory.  Sprites are drawn with XOR,
and any pixel switched off by a draw is reported as a collision.

The display does not talk to the host.  The interpreter raises a flag when the
bitmap has changed, and the host renders the whole bitmap when it sees it.

Pixels are addressed by their linear offset, so a sprite running off the right
edge continues on the next row down, and anything past the last pixel is
dropped rather than wrapped to the top.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import DISPLAY_WIDTH, DISPLAY_HEIGHT
from .ram import RAM


class Display:
    def __init__(self, vid_width=DISPLAY_WIDTH, vid_height=DISPLAY_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.vram = RAM(self.vid_size)

    def clear(self):
        self.vram.clear()

    def xor_pixel(self, x, y):
        # Returns None if the pixel is off the bitmap, otherwise whether a set pixel was cleared
        vram_loc = y * self.vid_width + x

        if vram_loc >= self.vid_size:
            return None

        pixel = self.vram.read(vram_loc)
        self.vram.write(vram_loc, pixel ^ 1)
        return pixel == 1

    def get_pixel(self, x, y):
        return self.vram.read(y * self.vid_width + x)

    def get_bitmap(self):
        return self.vram.mem

    def get_vid_size(self):
        return self.vid_width, self.vid_height
