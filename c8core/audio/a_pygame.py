#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays a beep within PyGame / SDL whenever the interpreter asks for one.

By default the beep is a short square wave built in memory, so no sound files
are needed.  A WAV (or any other format PyGame understands) can be supplied
instead.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
BEEP_FREQUENCY = 440.0
BEEP_DURATION = 0.1  # Seconds
DEFAULT_VOLUME = 0.1


class Audio(AudioBase):
    def __init__(self, beep_file=None, **kwargs):
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, allowedchanges=0)
        pygame.mixer.init()

        if beep_file is None:
            self.sound = pygame.mixer.Sound(buffer=self._build_square_wave())
        else:
            self.sound = pygame.mixer.Sound(beep_file)

        self.sound.set_volume(DEFAULT_VOLUME)
        super().__init__(**kwargs)

    def _build_square_wave(self):
        # Unsigned 8-bit mono.  Each half-period is either fully off or fully on.
        num_samples = int(PLAYBACK_FREQUENCY * BEEP_DURATION)
        half_period = PLAYBACK_FREQUENCY / BEEP_FREQUENCY / 2.0
        buffer = memoryview(bytearray(num_samples))

        for sample in range(num_samples):
            buffer[sample] = 0xFF if int(sample / half_period) & 1 else 0x00

        return buffer.tobytes()

    def beep(self):
        # Restart the beep if it is still playing from last time
        self.sound.stop()
        self.sound.play()

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
