"""
Path commands and the translation of sketch curves into them.

Three command shapes exist:

- ``LineCommand``: a straight segment, carrying its start point so it can open a path.
- ``ArcCommand``: an arc in center form (center, radius, start/end angle). Only
  produced for the two halves of a circle.
- ``ArcEndpointCommand``: an arc in the endpoint form used by path data
  (end point, radii, x-axis rotation, large-arc and sweep flags).
"""

import math
from dataclasses import dataclass
from typing import List, Union

import numpy as np

from .constants import CIRCLE_SPLITS, SUPPORTED_CURVE_TYPES
from .primitives import Arc, Circle, Curve, Line


class UnsupportedCurveError(NotImplementedError):
    """Raised for a curve that is not a line, arc or circle."""

    def __init__(self, curve_type: str):
        super().__init__(
            f"Unsupported curve type {curve_type!r}, expected one of {SUPPORTED_CURVE_TYPES}"
        )
        self.curve_type = curve_type


@dataclass(frozen=True)
class LineCommand:
    x0: float
    y0: float
    x: float
    y: float


@dataclass(frozen=True)
class ArcCommand:
    x: float  # center
    y: float
    r: float
    s: float  # start angle
    e: float  # end angle


@dataclass(frozen=True)
class ArcEndpointCommand:
    x0: float
    y0: float
    rx: float
    ry: float
    large_arc: int
    sweep: int
    x: float
    y: float
    x_axis_rotation: float = 0.0


PathCommand = Union[LineCommand, ArcCommand, ArcEndpointCommand]
ResolvedCommand = Union[LineCommand, ArcEndpointCommand]


def arc_flags(start_angle: float, end_angle: float):
    """Return (large_arc, sweep) for an arc running from start_angle to end_angle."""
    delta_theta = end_angle - start_angle
    large_arc = 1 if abs(delta_theta) > math.pi else 0
    sweep = 1 if delta_theta > 0 else 0
    return large_arc, sweep


def curve_to_commands(curve: Curve) -> List[PathCommand]:
    """
    Translate one curve into path commands.

    Lines and arcs give one command each; a circle gives two center-form
    half arcs split at 0 and pi.

    Raises:
        UnsupportedCurveError: for any curve other than a line, arc or circle
    """
    if isinstance(curve, Line):
        return [
            LineCommand(
                x0=curve.start_point.x,
                y0=curve.start_point.y,
                x=curve.end_point.x,
                y=curve.end_point.y,
            )
        ]
    if isinstance(curve, Arc):
        # positions come from the stored points, the angles only decide the flags
        large_arc, sweep = arc_flags(curve.start_angle, curve.end_angle)
        return [
            ArcEndpointCommand(
                x0=curve.start_point.x,
                y0=curve.start_point.y,
                rx=curve.radius,
                ry=curve.radius,
                large_arc=large_arc,
                sweep=sweep,
                x=curve.end_point.x,
                y=curve.end_point.y,
            )
        ]
    if isinstance(curve, Circle):
        return [
            ArcCommand(
                x=curve.center.x,
                y=curve.center.y,
                r=curve.radius,
                s=start,
                e=end,
            )
            for start, end in CIRCLE_SPLITS
        ]
    raise UnsupportedCurveError(getattr(curve, "curve_type", type(curve).__name__))


def loop_to_commands(curves) -> List[PathCommand]:
    commands: List[PathCommand] = []
    for curve in curves:
        commands.extend(curve_to_commands(curve))
    return commands


def center_to_endpoint(arc: ArcCommand) -> ArcEndpointCommand:
    """
    Convert a center-form arc to endpoint form.

    Follows the center to endpoint conversion of the SVG implementation notes
    with a zero x-axis rotation:

        (x1, y1) = R(phi) @ (r cos(theta1), r sin(theta1)) + (cx, cy)
        (x2, y2) = R(phi) @ (r cos(theta2), r sin(theta2)) + (cx, cy)

    The angles are not normalized, the flags come from the raw difference.
    """
    phi = 0.0
    rotation = np.array(
        [
            [np.cos(phi), -np.sin(phi)],
            [np.sin(phi), np.cos(phi)],
        ]
    )
    center = np.array([arc.x, arc.y])
    start = rotation @ np.array([arc.r * np.cos(arc.s), arc.r * np.sin(arc.s)]) + center
    end = rotation @ np.array([arc.r * np.cos(arc.e), arc.r * np.sin(arc.e)]) + center
    large_arc, sweep = arc_flags(arc.s, arc.e)

    return ArcEndpointCommand(
        x0=float(start[0]),
        y0=float(start[1]),
        rx=arc.r,
        ry=arc.r,
        large_arc=large_arc,
        sweep=sweep,
        x=float(end[0]),
        y=float(end[1]),
        x_axis_rotation=phi,
    )


def ensure_endpoint_form(command: PathCommand) -> ResolvedCommand:
    if isinstance(command, ArcCommand):
        return center_to_endpoint(command)
    return command
