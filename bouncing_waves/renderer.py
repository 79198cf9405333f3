"""
Height field renderers.

``draw`` repaints a single line in place using the graded palette.
``draw_2d`` repaints the whole screen as a bar profile, one row per
palette level, with a uniform glyph.
"""

import numpy as np

from .config import BAR_GLYPH, PALETTE

BLANK = " "


def quantize(field, palette_size=len(PALETTE)):
    """Map heights to palette levels in [0, palette_size - 1]."""
    levels = np.floor(palette_size * np.asarray(field, dtype=np.float64))
    return np.clip(levels, 0, palette_size - 1).astype(int)


def render_line(field, palette=PALETTE):
    levels = quantize(field, len(palette))
    return "".join(palette[level] for level in levels)


def render_rows(field, palette_size=len(PALETTE), glyph=BAR_GLYPH):
    """Build the bar profile rows, top row first."""
    levels = quantize(field, palette_size)
    row_levels = np.arange(palette_size)[:, np.newaxis]

    # A cell is filled when the column reaches the row's level; level 0 is empty
    filled = (levels >= row_levels) & (levels != 0)

    rows = []
    for row in filled[::-1]:
        rows.append("".join(glyph if cell else BLANK for cell in row))
    return rows


def draw(field, terminal):
    line = render_line(field)
    terminal.backspace(len(line))
    terminal.write(line)
    terminal.flush()


def draw_2d(field, terminal):
    terminal.clear_screen()
    terminal.hide_cursor()
    for row in render_rows(field):
        terminal.write(row)
        terminal.newline()
    terminal.flush()
