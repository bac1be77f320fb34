import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .commands import ArcCommand, PathCommand
from .constants import DEFAULT_DILATION, STROKE_WIDTH_DIVISOR
from .path import format_number


@dataclass(frozen=True)
class BoundingBox:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.left, self.top, self.right, self.bottom))


@dataclass(frozen=True)
class Viewport:
    left: float
    top: float
    width: float
    height: float

    @property
    def view_box(self) -> str:
        return " ".join(format_number(v) for v in (self.left, self.top, self.width, self.height))

    @property
    def stroke_width(self) -> float:
        return (self.width + self.height) / STROKE_WIDTH_DIVISOR

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.left, self.top, self.width, self.height))


def _command_extents(command: PathCommand) -> np.ndarray:
    """Points whose extrema bound a single command, as rows of (x, y)."""
    if isinstance(command, ArcCommand):
        return np.array(
            [
                [command.x - command.r, command.y - command.r],
                [command.x + command.r, command.y + command.r],
            ]
        )
    return np.array([[command.x0, command.y0], [command.x, command.y]])


def compute_bounding_box(commands: Iterable[PathCommand]) -> BoundingBox:
    """
    Smallest axis-aligned box around the given commands.

    Lines and endpoint-form arcs count with their start and end points,
    center-form arcs with center +/- radius. An endpoint-form arc does not
    count its bulge, so the box can cut through an arc: a lone circle,
    resolved into two half arcs, spans (cx - r, cy) to (cx + r, cy) and has
    zero height before dilation. An empty input gives a box with left/top
    at +inf and right/bottom at -inf.
    """
    extents = [_command_extents(command) for command in commands]
    if not extents:
        return BoundingBox(math.inf, math.inf, -math.inf, -math.inf)
    points = np.vstack(extents)
    left, top = points.min(axis=0)
    right, bottom = points.max(axis=0)
    return BoundingBox(float(left), float(top), float(right), float(bottom))


def dilate(box: BoundingBox, dilation: float = DEFAULT_DILATION) -> Viewport:
    """Grow the box on every side by dilation * (width + height) / 2."""
    margin = dilation * (box.width + box.height) / 2 if dilation else 0.0
    return Viewport(
        left=box.left - margin,
        top=box.top - margin,
        width=box.width + 2 * margin,
        height=box.height + 2 * margin,
    )


def compute_viewport(commands: Iterable[PathCommand], dilation: float = DEFAULT_DILATION) -> Viewport:
    return dilate(compute_bounding_box(commands), dilation)
