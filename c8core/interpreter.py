#!/usr/bin/env python3

"""
Interpreter (CHIP-8)

Owns the whole machine state: registers, address space, call stack, display
bitmap, keypad and timers.  The host calls step() as often as it likes, and
each call runs exactly one instruction followed by exactly one timer tick.
Nothing in here blocks or keeps time.  The host decides the clock rate simply
by how often it steps.

Two flags are left for the host to act on and then clear:
    * draw_flag - The bitmap changed (set by CLS and DRW).  Starts True, so the
                  host renders once before anything runs.
    * beep_flag - The sound timer has just run out.

Register Vf doubles as a flag output.  The instructions that write it are:
    * ADD Vx, Vy  - 1 if the sum carried past 0xFF, else 0
    * SUB Vx, Vy  - 0 if Vy > Vx (a borrow), else 1
    * SUBN Vx, Vy - 0 if Vx > Vy (a borrow), else 1
    * SHR Vx      - The bit shifted out (least-significant)
    * SHL Vx      - The bit shifted out (most-significant)
    * DRW         - 1 if any set pixel was cleared, else 0
    * ADD I, Vx   - 1 if I + Vx went past 0xFFF, else 0

When Vf is also an operand, the flag is written first and the result is then
worked out from the registers as they stand, new Vf included.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import randint
from .constants import (
    APP_INTRO, MEM_SIZE, PROGRAM_START, MAX_PROGRAM_SIZE, SYSFONT, SYSFONT_LOC, SYSFONT_GLYPH_SIZE, NUM_REGISTERS,
    STACK_DEPTH
)
from .debugger import Debugger
from .display import Display
from .keypad import Keypad
from .ram import RAM
from .stack import Stack

CPU_ENDIAN = "big"  # CHIP-8 is big-endian
PC_BITMASK = 0xFFFF  # The program counter is 16 bits wide, and fetching outside memory is fatal
I_BITMASK = 0xFFFF  # The index register is a full 16 bits wide, even though memory is not


class InterpreterError(Exception):
    pass


class ProgramTooLargeError(InterpreterError):
    pass


class DecodeError(InterpreterError):
    def __init__(self, message, opcode, family, address):
        super().__init__(message)
        self.opcode = opcode
        self.family = family
        self.address = address


class Interpreter:
    def __init__(self, ram=None, stack=None, display=None, keypad=None, debugger=None):
        self.ram = RAM(MEM_SIZE) if ram is None else ram
        self.stack = Stack(STACK_DEPTH) if stack is None else stack
        self.display = Display() if display is None else display
        self.keypad = Keypad() if keypad is None else keypad
        self.debugger = Debugger() if debugger is None else debugger

        # The glyphs live in the reserved area, and nothing ever writes over them
        self.ram.write_block(SYSFONT_LOC, SYSFONT)

        # Define instruction pointers.
        # n = Nibble
        # kk = Byte
        # nnn = address
        # x/y = register (0-15)
        self.instructions = {
            # Initial lookup for instructions' first nibble
            0x0: self._0nnn,  # Alias for bitmask 0x000F
            0x1: self._1nnn,
            0x2: self._2nnn,
            0x3: self._3xkk,
            0x4: self._4xkk,
            0x5: self._5xy0,
            0x6: self._6xkk,
            0x7: self._7xkk,
            0x8: self._8nnn,  # Alias for bitmask 0xF00F
            0x9: self._9xy0,
            0xA: self._Annn,
            0xB: self._Bnnn,
            0xC: self._Cxkk,
            0xD: self._Dxyn,
            0xE: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            0xF: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            # Instructions beginning with nibble 0x8, bitmask 0xF00F
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        # Instructions beginning with nibble 0x0 are told apart by their last nibble only, which would clash with the
        # first-nibble keys above
        self.instructions_0nnn = {
            0x0: self._00E0,
            0xE: self._00EE
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))
        self.i = 0  # Index register

        # Initialise timers
        self.dt = 0  # Delay timer
        self.ds = 0  # Sound timer

        # Initialise program counter and current opcode
        self.pc = PROGRAM_START
        self.op_pc = PROGRAM_START  # Address of the instruction being executed
        self.opcode = 0

        # Host signals
        self.draw_flag = True
        self.beep_flag = False

    @property
    def keys(self):
        # The host's input layer writes straight into this
        return self.keypad.state

    def load_program(self, program):
        program_size = len(program)

        if program_size > MAX_PROGRAM_SIZE:
            raise ProgramTooLargeError(
                "Program too large: {} bytes, but only {} are available.".format(program_size, MAX_PROGRAM_SIZE)
            )

        # Wipe anything left over from a previous load
        self.ram.zero_block(PROGRAM_START, MAX_PROGRAM_SIZE)
        self.ram.write_block(PROGRAM_START, program)

    def step(self):
        self.op_pc = self.pc
        self.opcode = self.fetch()
        self.inc_pc()  # Program counter updates after fetch (and technically before decode), but before execute
        self.decode_exec()
        self.tick_timers()

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def _call_masked_instruction(self, masked_opcode):
        instruction = self.instructions.get(masked_opcode)

        if instruction is None:
            self._opcode_unsupported()

        instruction()

    def decode_exec(self):
        self._call_masked_instruction((0xF000 & self.opcode) >> 12)

    def tick_timers(self):
        if self.dt > 0:
            self.dt -= 1

        if self.ds > 0:
            if self.ds == 1:
                # Last cycle of sound
                self.beep_flag = True

            self.ds -= 1

    def inc_pc(self):
        self.pc = (self.pc + 2) & PC_BITMASK

    # References to Vx, Vy, byte and addr are always in the same opcode position throughout all instructions, so avoid
    # excessive code duplication (ever so slight slowdown).  Don't reference these more than necessary as they are
    # recalculated each time.
    @property
    def vx(self):
        return (self.opcode & 0xF00) >> 8

    @property
    def vy(self):
        return (self.opcode & 0xF0) >> 4

    @property
    def addr(self):
        return self.opcode & 0xFFF

    @property
    def byte(self):
        return self.opcode & 0xFF

    @property
    def nibble(self):
        return self.opcode & 0xF

    def _opcode_unsupported(self):
        opcode = self.opcode
        family = opcode >> 12

        raise DecodeError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} (family 0x{:01x}) at address 0x{:03x} is not a supported instruction."
            ).format(
                APP_INTRO, self.debugger.debug(self, verbose=True), opcode, family, self.op_pc
            ),
            opcode, family, self.op_pc
        ) from None

    def _0nnn(self):
        # Only the last nibble is decoded, so 0x0000 (blank memory) behaves as CLS
        instruction = self.instructions_0nnn.get(self.nibble)

        if instruction is None:
            self._opcode_unsupported()

        instruction()

    def _8nnn(self):
        self._call_masked_instruction(self.opcode & 0xF00F)

    def _Ennn_Fnnn(self):
        self._call_masked_instruction(self.opcode & 0xF0FF)

    def _00E0(self):  # CLS
        self.display.clear()
        self.draw_flag = True

    def _00EE(self):  # RET
        # The stack holds the address of the CALL itself, so step over it
        self.pc = (self.stack.pop() + 2) & PC_BITMASK

    def _1nnn(self):  # JP addr
        self.pc = self.addr

    def _2nnn(self):  # CALL addr
        self.stack.push(self.op_pc)
        self.pc = self.addr

    def _3xkk(self):  # SE Vx, byte
        if self.v[self.vx] == self.byte:
            self.inc_pc()

    def _4xkk(self):  # SNE Vx, byte
        if self.v[self.vx] != self.byte:
            self.inc_pc()

    def _5xy0(self):  # SE Vx, Vy
        # The last nibble is not checked
        if self.v[self.vx] == self.v[self.vy]:
            self.inc_pc()

    def _6xkk(self):  # LD Vx, byte
        self.v[self.vx] = self.byte

    def _7xkk(self):  # ADD Vx, byte
        vx = self.vx
        self.v[vx] = (self.v[vx] + self.byte) & 0xFF  # No carry flag

    def _8xy0(self):  # LD Vx, Vy
        self.v[self.vx] = self.v[self.vy]

    def _8xy1(self):  # OR Vx, Vy
        self.v[self.vx] |= self.v[self.vy]

    def _8xy2(self):  # AND Vx, Vy
        self.v[self.vx] &= self.v[self.vy]

    def _8xy3(self):  # XOR Vx, Vy
        self.v[self.vx] ^= self.v[self.vy]

    # In the flag-writing instructions below, Vf is set BEFORE Vx, and the result is read from the registers after that.
    # So when Vf is also an operand, the new flag value is what gets used.
    def _8xy4(self):  # ADD Vx, Vy
        vx = self.vx
        vy = self.vy
        self.v[0xF] = int(self.v[vx] + self.v[vy] > 0xFF)  # Vf is set when carrying
        self.v[vx] = (self.v[vx] + self.v[vy]) & 0xFF

    def _8xy5(self):  # SUB Vx, Vy
        vx = self.vx
        vy = self.vy
        self.v[0xF] = int(self.v[vy] <= self.v[vx])  # Vf is set when NOT borrowing
        self.v[vx] = (self.v[vx] - self.v[vy]) & 0xFF

    def _8xy6(self):  # SHR Vx
        vx = self.vx
        self.v[0xF] = self.v[vx] & 1
        self.v[vx] = self.v[vx] >> 1

    def _8xy7(self):  # SUBN Vx, Vy
        vx = self.vx
        vy = self.vy
        self.v[0xF] = int(self.v[vx] <= self.v[vy])  # Vf is set when NOT borrowing
        self.v[vx] = (self.v[vy] - self.v[vx]) & 0xFF

    def _8xyE(self):  # SHL Vx
        vx = self.vx
        self.v[0xF] = self.v[vx] >> 7
        self.v[vx] = (self.v[vx] << 1) & 0xFF

    def _9xy0(self):  # SNE Vx, Vy
        # The last nibble is not checked
        if self.v[self.vx] != self.v[self.vy]:
            self.inc_pc()

    def _Annn(self):  # LD I, addr
        self.i = self.addr

    def _Bnnn(self):  # JP V0, addr
        self.pc = (self.v[0x0] + self.addr) & PC_BITMASK

    def _Cxkk(self):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[self.vx] = randint(0, 0xFF) & self.byte

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        # Sprites are always 8 pixels wide, one byte per row, and I is left alone
        height = self.nibble
        vx_pos = self.v[self.vx]
        vy_pos = self.v[self.vy]
        i = self.i
        collided = False

        for y in range(height):
            spr_data = self.ram.read(i + y)

            for x in range(8):
                if spr_data & (0x80 >> x) and self.display.xor_pixel(vx_pos + x, vy_pos + y):
                    # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                    collided = True

        self.v[0xF] = int(collided)
        self.draw_flag = True

    def _Ex9E(self):  # SKP Vx
        if self.keypad.is_key_down(self.v[self.vx]):
            self.inc_pc()

    def _ExA1(self):  # SKNP Vx
        if not self.keypad.is_key_down(self.v[self.vx]):
            self.inc_pc()

    def _Fx07(self):  # LD Vx, DT
        self.v[self.vx] = self.dt

    def _Fx0A(self):  # LD Vx, K
        # This opcode waits for a keypress, but since the timers still need to expire correctly, and the host still
        # needs to run, we'll return control and point the program counter back at this instruction.
        key = self.keypad.get_keypress()

        if key is None:
            self.pc = self.op_pc
        else:
            self.v[self.vx] = key

    def _Fx15(self):  # LD DT, Vx
        self.dt = self.v[self.vx]

    def _Fx18(self):  # LD ST, Vx
        self.ds = self.v[self.vx]

    def _Fx1E(self):  # ADD I, Vx
        val = self.i + self.v[self.vx]
        self.i = val & I_BITMASK
        self.v[0xF] = int(val > 0xFFF)  # Gone past the end of memory

    def _Fx29(self):  # LD F, Vx
        self.i = SYSFONT_LOC + SYSFONT_GLYPH_SIZE * self.v[self.vx]

    def _Fx33(self):  # LD B, Vx
        val = self.v[self.vx]
        i = self.i
        self.ram.write(i, val // 100)            # Most-significant digit
        self.ram.write(i + 1, (val // 10) % 10)  # Middle digit
        self.ram.write(i + 2, val % 10)          # Least-significant digit

    def _post_Fx55_Fx65(self):
        # I is left pointing just past the last register transferred
        self.i = (self.i + self.vx + 1) & I_BITMASK

    def _Fx55(self):  # LD [I], Vx
        i = self.i

        for reg in range(self.vx + 1):
            self.ram.write(i + reg, self.v[reg])

        self._post_Fx55_Fx65()

    def _Fx65(self):  # LD Vx, [I]
        i = self.i

        for reg in range(self.vx + 1):
            self.v[reg] = self.ram.read(i + reg)

        self._post_Fx55_Fx65()
