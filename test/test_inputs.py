#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from c8core.constants import DEFAULT_KEYMAP
from c8core.inputs.i_null import Inputs, InputsError
from c8core.keypad import Keypad
from c8core.renderers.r_null import Renderer


class TestInputs(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()
        self.renderer = Renderer()

    def test_inputs_default_keymap(self):
        inputs = Inputs(DEFAULT_KEYMAP, self.keypad, self.renderer)
        self.assertEqual(16, len(inputs.keymap_dict))
        self.assertEqual(0x0, inputs.keymap_dict[ord("x")])
        self.assertEqual(0x1, inputs.keymap_dict[ord("1")])
        self.assertEqual(0xC, inputs.keymap_dict[ord("4")])
        self.assertEqual(0xF, inputs.keymap_dict[ord("v")])
        self.assertFalse(inputs.process_messages())

    def test_inputs_wrong_count(self):
        self.assertRaises(InputsError, Inputs, "1,2,3", self.keypad, self.renderer)

    def test_inputs_not_integers(self):
        keymap = ",".join(["a"] * 16)
        self.assertRaises(InputsError, Inputs, keymap, self.keypad, self.renderer)

    def test_inputs_duplicates(self):
        keymap = ",".join(["1"] * 16)
        self.assertRaises(InputsError, Inputs, keymap, self.keypad, self.renderer)
