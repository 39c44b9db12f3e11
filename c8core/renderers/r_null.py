#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if nothing needs to be
shown, e.g. when running headless.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.title = ""

    def draw(self, bitmap, width, height):  # pylint: disable=unused-argument
        # Show the whole bitmap.  Each cell is 0 (background) or 1 (lit), in row-major order
        pass

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
