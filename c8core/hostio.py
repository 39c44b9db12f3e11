#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading program images for later writing into RAM.  Images are raw
big-endian instructions with no header, so there is nothing to parse.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()
