#!/usr/bin/env python3

"""
Keypad Emulator

Sixteen keys, 0-F, each either up (0) or down (1).  The host's input plugin
writes key states in, and the interpreter only reads them.  How physical keys
map onto these 16 is entirely up to the input plugin.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.state = memoryview(bytearray(NUM_KEYS))

    def _check_key(self, key):
        if not 0 <= key < NUM_KEYS:
            raise KeypadError("Key 0x{:02x} does not exist".format(key))

    def press(self, key):
        self._check_key(key)
        self.state[key] = 1

    def release(self, key):
        self._check_key(key)
        self.state[key] = 0

    def is_key_down(self, key):
        self._check_key(key)
        return self.state[key] != 0

    def get_keypress(self):
        # Scan every key without stopping, so the highest-numbered key held down wins
        key_pressed = None

        for key in range(NUM_KEYS):
            if self.state[key]:
                key_pressed = key

        return key_pressed

    def clear(self):
        self.state[:] = bytes(NUM_KEYS)
