# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "numpy",
# ]
# ///
"""
Bouncing Waves - two oscillators sweeping an ASCII terrain.
"""

import logging
import time

from .config import (
    FPS,
    FRAMES,
    RENDER_MODE,
    WAVELENGTH_X,
    MAX_HEIGHT_X,
    START_X,
    SPEED_X,
    WAVELENGTH_Y,
    MAX_HEIGHT_Y,
    START_Y,
    SPEED_Y,
)
from .oscillator import Oscillator
from .renderer import draw, draw_2d
from .terminal import Terminal, enable_windows_ansi
from .wave import accumulate, new_height_field

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

RENDERERS = {
    "2d": draw_2d,
    "line": draw,
}


def get_renderer(mode):
    try:
        return RENDERERS[mode]
    except KeyError:
        raise ValueError(
            f"Unknown render mode {mode!r}, expected one of {sorted(RENDERERS)}"
        ) from None


def run(terminal, frames=FRAMES, fps=FPS, render=draw_2d, sleep=time.sleep):
    """Animate for ``frames`` frames and return the last height field."""
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")

    dt = 1.0 / fps  # seconds per frame
    wave_x = Oscillator(START_X, SPEED_X)
    wave_y = Oscillator(START_Y, SPEED_Y)
    height_field = new_height_field()

    logger.debug("Running %d frames at %d fps", frames, fps)
    for _ in range(frames):
        wave_x.update(dt)
        wave_y.update(dt)

        # Fresh field every frame
        height_field[:] = 0.0
        accumulate(wave_x.position, WAVELENGTH_X, MAX_HEIGHT_X, height_field)
        accumulate(wave_y.position, WAVELENGTH_Y, MAX_HEIGHT_Y, height_field)

        render(height_field, terminal)
        sleep(dt)

    terminal.newline()
    terminal.flush()
    logger.debug("Finished at x=%.3f y=%.3f", wave_x.position, wave_y.position)
    return height_field


def main():
    enable_windows_ansi()
    terminal = Terminal()
    renderer = get_renderer(RENDER_MODE)

    try:
        run(terminal, render=renderer)
    except KeyboardInterrupt:
        logger.debug("Interrupted")
    finally:
        terminal.show_cursor()
        terminal.flush()


if __name__ == "__main__":
    main()
