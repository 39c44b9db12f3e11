#!/usr/bin/env python3

"""
Stack Emulator

The call stack is not part of the address space.  Programs cannot see the
stack pointer, so a fixed list of return addresses plus a pointer into it is
all that is needed.

Nesting more calls than there are slots, or returning with nothing on the
stack, has no defined behaviour on real hardware.  Either one means the
program is broken, so both are raised as errors and the run is stopped.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size):
        self.items = [0] * size
        self.size = size
        self.sp = 0

    def push(self, item):
        if self.sp >= self.size:
            raise StackError("Stack overflow")

        self.items[self.sp] = item
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackError("Stack underflow")

        self.sp -= 1
        return self.items[self.sp]

    def get_items(self):
        # For debugging
        return self.items[:self.sp]
