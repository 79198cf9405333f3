"""
Terminal output: every control sequence the animation emits lives here.
"""

import ctypes
import os
import sys

CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
BACKSPACE = "\b"


# --- Windows ANSI Support ---
def enable_windows_ansi():
    if os.name == "nt":
        kernel32 = ctypes.windll.kernel32
        hStdOut = kernel32.GetStdHandle(-11)
        mode = ctypes.c_ulong()
        kernel32.GetConsoleMode(hStdOut, ctypes.byref(mode))
        mode.value |= 4  # ENABLE_VIRTUAL_TERMINAL_PROCESSING
        kernel32.SetConsoleMode(hStdOut, mode)


class Terminal:
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text):
        self.stream.write(text)

    def flush(self):
        self.stream.flush()

    def clear_screen(self):
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def hide_cursor(self):
        self.write(HIDE_CURSOR)

    def show_cursor(self):
        self.write(SHOW_CURSOR)

    def backspace(self, count):
        self.write(BACKSPACE * count)

    def newline(self):
        self.write("\n")
