"""
Wave kernel: splats raised-cosine bumps into a height field.

The field folds back on itself at both ends (mirror boundary). Indices that
would still land outside the field after one fold are clamped to the nearest
edge sample.
"""

import logging
import math

import numpy as np

from .config import BUFFER_SIZE

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def new_height_field(size=BUFFER_SIZE):
    return np.zeros(size, dtype=np.float64)


def reflect_indices(indices, size):
    """Map sample indices onto storage slots of a field of ``size``."""
    reflected = np.where(indices < 0, -indices + 1, indices)
    reflected = np.where(indices >= size, 2 * size - indices - 1, reflected)
    out_of_range = (reflected < 0) | (reflected >= size)
    if out_of_range.any():
        logger.debug(
            "Clamping %d reflected indices into [0, %d]",
            int(out_of_range.sum()),
            size - 1,
        )
    return np.clip(reflected, 0, size - 1)


def bump_heights(distance, quarter, max_height):
    # Peak of max_height at distance 0, zero from distance >= quarter
    phase = np.minimum(distance * math.pi / quarter, math.pi)
    return max_height * 0.5 * (np.cos(phase) + 1.0)


def accumulate(x, wavelength, max_height, field):
    """Add a wave centred at ``x`` (0..1) into ``field`` in place."""
    size = len(field)
    quarter = 0.25 * wavelength
    start = math.floor((x - quarter) * size)
    end = math.floor((x + quarter) * size)
    if end <= start:
        return field

    indices = np.arange(start, end)
    distance = np.abs((indices + 0.5) / size - x)
    heights = bump_heights(distance, quarter, max_height)

    # Several samples may fold onto the same slot, so add unbuffered
    np.add.at(field, reflect_indices(indices, size), heights)
    return field
