#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from c8core.debugger import Debugger
from c8core.interpreter import Interpreter


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.debugger = Debugger()
        self.interpreter = Interpreter(debugger=self.debugger)

    def test_debugger_debug(self):
        self.interpreter.v[0xF] = 0xAB
        self.interpreter.v[0x0] = 0x12
        self.interpreter.i = 0x345
        debug_str = self.debugger.debug(self.interpreter)
        self.assertTrue(debug_str.startswith("V: 0xab"))
        self.assertIn("12 I: 0x0345 DT: 0x00 ST: 0x00 PC: 0x200 OP: 0x0000", debug_str)
        self.assertNotIn("Stack", debug_str)

    def test_debugger_debug_verbose(self):
        self.assertIn("\nStack: (Empty)", self.debugger.debug(self.interpreter, verbose=True))
        self.interpreter.stack.push(0x204)
        self.interpreter.stack.push(0x30A)
        self.assertIn("\nStack: 0x204 0x30a", self.debugger.debug(self.interpreter, verbose=True))
