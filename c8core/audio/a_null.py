#!/usr/bin/env python3

"""
Null Audio Plugin

Serves as a base class for other Audio plugins.  Can be used on its own if no
sound is required.  Having no sound device is never an error.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Audio:
    def __init__(self, **kwargs):  # pylint: disable=unused-argument
        pass

    def beep(self):
        # Called once each time the sound timer runs out
        pass

    def shutdown(self):
        pass
