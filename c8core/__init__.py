#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.

Returns 0 if the user quit, or 1 if the program being run stopped on a fatal
error.  Problems found before anything runs raise a StartupError.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT
from .host import Host
from .hostio import Loader
from .interpreter import Interpreter, InterpreterError, DecodeError, ProgramTooLargeError
from .keypad import KeypadError
from .ram import RAMError
from .stack import StackError


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    opt_renderer = args["renderer"]
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then fall back to null.
    mute_audio = args["mute"]

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "null"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

    # Read the program binary and write it into RAM before anything is started up
    interpreter = Interpreter()

    try:
        interpreter.load_program(Loader().load_binary(args["filename"]))
    except ProgramTooLargeError as e:
        raise StartupError(str(e)) from None

    renderer = Renderer(scale=args["scale"], pygame_palette=args["pygame_palette"])

    # Set up host inputs, feeding straight into the interpreter's keypad
    inputs = Inputs(args["keymap"], interpreter.keypad, renderer)
    audio = Audio(beep_file=args["beep_file"])
    host = Host(interpreter, renderer, inputs, audio, clock_speed=args["clock_speed"])

    try:
        host.run()
    except (InterpreterError, RAMError, StackError, KeypadError) as e:
        if isinstance(e, DecodeError):
            # Already carries the debug info
            print(e)
        else:
            print(
                "Emulation halted.\n\n{}Debug info:\n{}\n\n{}".format(
                    APP_INTRO, interpreter.debugger.debug(interpreter, verbose=True), e
                )
            )

        return 1
    finally:
        # The host has stopped, so shut down the plugins.  __del__ cannot be relied upon when using PyPy
        audio.shutdown()
        inputs.shutdown()
        renderer.shutdown()

    return 0
