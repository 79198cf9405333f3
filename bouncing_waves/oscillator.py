"""
Point oscillator bouncing between 0 and 1.
"""

from dataclasses import dataclass


def advance(dt, position, speed):
    """Step a bouncing point by ``dt``. Returns ``(position, speed)``.

    Overshoot is corrected with a single reflection. When ``dt * |speed|``
    exceeds 1.0 the result can still fall outside [0, 1]; that is left as is.
    """
    position += dt * speed
    if position > 1.0:
        speed = -speed
        position = 1.0 + dt * speed
    elif position < 0.0:
        speed = -speed
        position = dt * speed
    return position, speed


@dataclass
class Oscillator:
    position: float
    speed: float

    def update(self, dt):
        self.position, self.speed = advance(dt, self.position, self.speed)
        return self.position
