#!/usr/bin/env python3

"""
Interpreter State Dump

Produces a one-line summary of the machine when something goes wrong:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Address of the instruction being executed
    * OP - OpCode number

In verbose mode, the stack contents are added on a second line.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Debugger:
    def debug(self, interpreter, verbose=False):
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x}"
        ).format(
            *[interpreter.v[reg_num] for reg_num in range(15, -1, -1)] +
            [interpreter.i, interpreter.dt, interpreter.ds, interpreter.op_pc, interpreter.opcode]
        )

        if verbose:
            stack_items = interpreter.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

        return debug_str
