from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger("linemap.line")

# Two x-coordinates closer than this describe a vertical line.
EPSILON = 1e-6


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Point":
        x, y = pair
        return cls(x=float(x), y=float(y))


def clamp_output(value: float, low: float, high: float) -> float:
    """Clamp against ``low`` first, then ``high``.

    Bounds are not validated. When ``low > high`` anything below ``low`` maps
    to ``low`` and everything else maps to ``high``.
    """

    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass
class LinearMap:
    """Line through two points with a saturated output.

    A default-constructed map is all zeros and evaluates to 0.0 everywhere.
    For vertical lines ``intercept`` holds the line's x-coordinate, and that
    value (clamped) is what ``evaluate`` returns for every input.
    """

    slope: float = 0.0
    intercept: float = 0.0
    min_output: float = 0.0
    max_output: float = 0.0
    is_vertical: bool = False

    @classmethod
    def from_points(cls, p1: Point, p2: Point, min_output: float, max_output: float) -> "LinearMap":
        line = cls()
        line.configure(p1, p2, min_output, max_output)
        return line

    def configure(self, p1: Point, p2: Point, min_output: float, max_output: float) -> None:
        self.min_output = float(min_output)
        self.max_output = float(max_output)

        dx = p2.x - p1.x
        dy = p2.y - p1.y

        if abs(dx) < EPSILON:
            self.is_vertical = True
            self.slope = 0.0
            self.intercept = float(p1.x)
            logger.debug(
                "configured vertical line x=%s output=[%s, %s]",
                self.intercept,
                min_output,
                max_output,
            )
            return

        self.is_vertical = False
        self.slope = dy / dx
        self.intercept = p1.y - self.slope * p1.x
        logger.debug(
            "configured line slope=%s intercept=%s output=[%s, %s]",
            self.slope,
            self.intercept,
            min_output,
            max_output,
        )

    def evaluate(self, x: float) -> float:
        if self.is_vertical:
            raw = self.intercept
        else:
            raw = self.slope * x + self.intercept
        return clamp_output(raw, self.min_output, self.max_output)
