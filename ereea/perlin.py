"""Seeded two-dimensional gradient noise."""

from __future__ import annotations

import math
import random

_GRADIENTS = (
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)

_SCALE_FACTOR = 2.0 / math.sqrt(2.0)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


class Perlin:
    """Perlin noise whose values lie in [-1, 1] and are zero on integer points."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        permutation = list(range(256))
        random.Random(seed).shuffle(permutation)
        self._permutation = permutation * 2

    def _gradient(self, ix: int, iy: int) -> tuple[float, float]:
        index = self._permutation[self._permutation[ix & 255] + (iy & 255)]
        return _GRADIENTS[index % len(_GRADIENTS)]

    def get(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        dx = x - x0
        dy = y - y0

        def corner(ox: int, oy: int) -> float:
            gx, gy = self._gradient(x0 + ox, y0 + oy)
            return gx * (dx - ox) + gy * (dy - oy)

        u = _fade(dx)
        v = _fade(dy)
        bottom = _lerp(u, corner(0, 0), corner(1, 0))
        top = _lerp(u, corner(0, 1), corner(1, 1))
        value = _lerp(v, bottom, top) * _SCALE_FACTOR
        return max(-1.0, min(1.0, value))