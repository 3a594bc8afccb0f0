"""Short-lived glowing particles with fading trails."""

from __future__ import annotations

import math
import random
from typing import Iterator, NamedTuple, Optional, Tuple

Point = Tuple[float, float]
Rgb = Tuple[int, int, int]
Rgba = Tuple[int, int, int, int]

TRAIL_LENGTH = 10
SPEED_GROWTH = 1.02
LIFE_STEP = 0.01


class _TrailSegment(NamedTuple):
    start: Point
    end: Point
    width: float
    color: Rgba


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Rgb:
    """Convert a hue in degrees and saturation/value in 0..1 to 8-bit RGB."""
    h = hue / 60.0
    sector = math.floor(h)
    f = h - sector
    p = value * (1.0 - saturation)
    q = value * (1.0 - saturation * f)
    t = value * (1.0 - saturation * (1.0 - f))
    r, g, b = {
        0: (value, t, p),
        1: (q, value, p),
        2: (p, value, t),
        3: (p, q, value),
        4: (t, p, value),
    }.get(sector % 6, (value, p, q))
    return tuple(min(255, max(0, int(c * 255.0))) for c in (r, g, b))  # type: ignore[return-value]


def random_bright_color(rng: Optional[random.Random] = None) -> Rgba:
    """A random, strongly saturated and bright opaque colour."""
    rng = rng or random.Random()
    hue = rng.random() * 360.0
    saturation = 0.8 + rng.random() * 0.2
    value = 0.8 + rng.random() * 0.2
    return (*hsv_to_rgb(hue, saturation, value), 255)


def _linear_from_gamma(channel: int) -> float:
    if channel <= 10:
        return channel / 3294.6
    return ((channel + 14.025) / 269.025) ** 2.4


def _gamma_from_linear(level: float) -> int:
    if level <= 0.0:
        return 0
    if level <= 0.0031308:
        return int(math.floor(3294.6 * level + 0.5))
    if level <= 1.0:
        return int(math.floor(269.025 * level ** (1.0 / 2.4) - 14.025 + 0.5))
    return 255


def _fade(color: Rgba, factor: float) -> Rgba:
    """Scale a colour and its opacity in linear space (premultiplied result)."""
    r, g, b, a = color
    rgb = (_gamma_from_linear(_linear_from_gamma(c) * factor) for c in (r, g, b))
    alpha = min(255, max(0, int(a / 255.0 * factor * 255.0 + 0.5)))
    return (*rgb, alpha)  # type: ignore[return-value]


class Particle:
    """A particle flying outward from its start, speeding up as it fades."""

    def __init__(self, pos: Point, rng: Optional[random.Random] = None) -> None:
        rng = rng or random.Random()
        angle = rng.random() * math.tau
        speed = rng.random() * 10.0 + 5.0
        self.pos: Point = (float(pos[0]), float(pos[1]))
        self.velocity: Point = (math.cos(angle) * speed, math.sin(angle) * speed)
        self.life = 1.0
        self.color = random_bright_color(rng)
        self.size = rng.random() * 5.0 + 2.0
        self.trail: list[Point] = [self.pos]

    def update(self) -> None:
        """Advance one frame."""
        vx, vy = self.velocity
        self.velocity = (vx * SPEED_GROWTH, vy * SPEED_GROWTH)
        self.pos = (self.pos[0] + self.velocity[0], self.pos[1] + self.velocity[1])
        self.life -= LIFE_STEP
        self.trail.append(self.pos)
        if len(self.trail) > TRAIL_LENGTH:
            del self.trail[0]

    def is_alive(self) -> bool:
        return self.life > 0.0

    def trail_segments(self) -> Iterator[_TrailSegment]:
        """Line segments of the trail, oldest first, with width and colour."""
        count = len(self.trail)
        for index, (start, end) in enumerate(zip(self.trail, self.trail[1:]), start=1):
            alpha = index / count * self.life
            yield _TrailSegment(start, end, self.size * alpha, _fade(self.color, alpha * 0.5))