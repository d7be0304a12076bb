"""Plane geometry used for positioning and rotating sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector:
    """A mutable point or displacement in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Affine:
    """A 2D affine transform.

    A point (x, y) maps to (a*x + b*y + tx, c*x + d*y + ty). Each operation
    is applied after the transform built so far.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def translate(self, dx: float, dy: float) -> Affine:
        """Append a translation and return self."""
        self.tx += dx
        self.ty += dy
        return self

    def rotate(self, theta: float) -> Affine:
        """Append a rotation by theta radians about the origin and return self."""
        cos, sin = math.cos(theta), math.sin(theta)
        self.a, self.b, self.c, self.d = (
            cos * self.a - sin * self.c,
            cos * self.b - sin * self.d,
            sin * self.a + cos * self.c,
            sin * self.b + cos * self.d,
        )
        self.tx, self.ty = (
            cos * self.tx - sin * self.ty,
            sin * self.tx + cos * self.ty,
        )
        return self

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map the point (x, y) through the transform."""
        return (
            self.a * x + self.b * y + self.tx,
            self.c * x + self.d * y + self.ty,
        )


def rotate_about_center(theta: float, width: int, height: int) -> Affine:
    """Return a transform rotating an image of the given size about its centre.

    The centre uses integer halves of the size, as pixel sizes are whole.
    """
    half_width = float(width // 2)
    half_height = float(height // 2)
    return (
        Affine()
        .translate(-half_width, -half_height)
        .rotate(theta)
        .translate(half_width, half_height)
    )