"""Plane geometry helpers: circumcircles, polygon approximations, lenient number parsing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

Point = tuple[float, float]

_COLLINEAR_TOLERANCE = 1e-6
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center_x: float
    center_y: float
    radius: float

    @property
    def center(self) -> Point:
        return (self.center_x, self.center_y)


def circle_from_points(p1: Point, p2: Point, p3: Point) -> Circle | None:
    """Return the circle through three points, or None if they are collinear."""
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    d = 2 * (x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2))
    if abs(d) < _COLLINEAR_TOLERANCE:
        return None

    s1 = x1 * x1 + y1 * y1
    s2 = x2 * x2 + y2 * y2
    s3 = x3 * x3 + y3 * y3

    cx = (s1 * (y2 - y3) + s2 * (y3 - y1) + s3 * (y1 - y2)) / d
    cy = (s1 * (x3 - x2) + s2 * (x1 - x3) + s3 * (x2 - x1)) / d
    return Circle(cx, cy, math.hypot(x1 - cx, y1 - cy))


def circle_vertices(center_x: float, center_y: float, radius: float, steps: int) -> list[Point]:
    """Return ``steps`` evenly spaced points on a circle, starting at angle zero."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    return [
        (
            center_x + radius * math.cos(2.0 * math.pi * i / steps),
            center_y + radius * math.sin(2.0 * math.pi * i / steps),
        )
        for i in range(steps)
    ]


def parse_int(text: str | None) -> int:
    """Read a leading integer from text; anything unreadable counts as 0."""
    match = _INT_PREFIX.match(text or "")
    return int(match.group(1)) if match else 0


def parse_float(text: str | None) -> float:
    """Read a leading decimal number from text; anything unreadable counts as 0.0."""
    match = _FLOAT_PREFIX.match(text or "")
    return float(match.group(1)) if match else 0.0