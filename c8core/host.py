#!/usr/bin/env python3

"""
Host Loop

Drives the interpreter in real time.  Each pass around the loop:
    * Polls the input plugin (at 60Hz, as checking the event queue is slow)
    * Runs one interpreter step
    * Renders the bitmap if the interpreter flagged a change
    * Plays a beep if the interpreter flagged one

The interpreter has no idea of time.  Its timers tick once per step, so the
clock speed chosen here sets both the instruction rate and the timer rate.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED

INPUT_FREQ = 60.0  # 60Hz host input polling
INPUT_INTERVAL = 1.0 / INPUT_FREQ


class Host:
    def __init__(self, interpreter, renderer, inputs, audio, clock_speed=None):
        self.interpreter = interpreter
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio

        if clock_speed is None:
            clock_speed = DEFAULT_CLOCK_SPEED

        # User can specify 0 for uncapped
        self.core_interval = None if clock_speed <= 0 else 1.0 / clock_speed

        # Performance-related vars
        self.next_input_time = 0
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0
        self.report_perf()

    def run(self):
        # Show the initial blank screen before anything executes
        self.present()

        while True:
            this_time = perf_counter()  # Do this first for maximum precision

            # Performance counters
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            if this_time >= self.next_input_time:
                if self.inputs.process_messages():
                    return

                self.next_input_time = this_time + INPUT_INTERVAL

            self.cycle()
            self.perf_counter_ops += 1

            if self.core_interval is not None:
                # Wait for next step.  Do this last for maximum precision (takes into account time spent on this step)
                next_time = this_time + self.core_interval

                while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                    pass

    def cycle(self):
        self.interpreter.step()
        self.present()

    def present(self):
        # Act on, then clear, any signals the interpreter has raised
        interpreter = self.interpreter

        if interpreter.draw_flag:
            vid_width, vid_height = interpreter.display.get_vid_size()
            self.renderer.draw(interpreter.display.get_bitmap(), vid_width, vid_height)
            interpreter.draw_flag = False
            self.perf_counter_fps += 1

        if interpreter.beep_flag:
            self.audio.beep()
            interpreter.beep_flag = False

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
