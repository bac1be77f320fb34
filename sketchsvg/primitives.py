"""
Curve model for sketch geometry.

Curves live in 3D (as read from a reconstruction file) but every sketch is
assumed to be planar in X/Y, so only the x and y coordinates are used when
converting to 2D paths.
"""

from typing import Any, Dict, Iterator, List, Optional, Union

from .cad_types import VectorLike, as_vector
from .constants import ARC_TYPE, CIRCLE_TYPE, LINE_TYPE


class Line:
    """A straight segment between two points."""

    curve_type = LINE_TYPE

    def __init__(
        self,
        start_point: VectorLike,
        end_point: VectorLike,
        name: str = "unnamed_line",
    ):
        self.start_point = as_vector(start_point)
        self.end_point = as_vector(end_point)
        self.name = name

    def reversed(self) -> "Line":
        return Line(self.end_point, self.start_point, name=self.name)

    def __repr__(self):
        return f"Line(start={self.start_point!r}, end={self.end_point!r})"


class Arc:
    """
    A circular arc in center representation.

    The start and end points are stored alongside the center, radius and
    angles. Angles are in radians and are not normalized: they may be
    negative or exceed 2*pi, and the sign of end_angle - start_angle gives
    the direction of travel.
    """

    curve_type = ARC_TYPE

    def __init__(
        self,
        start_point: VectorLike,
        end_point: VectorLike,
        center: VectorLike,
        radius: float,
        start_angle: float,
        end_angle: float,
        name: str = "unnamed_arc",
    ):
        if radius <= 0:
            raise ValueError(f"Arc radius must be positive, got {radius}")
        self.start_point = as_vector(start_point)
        self.end_point = as_vector(end_point)
        self.center = as_vector(center)
        self.radius = float(radius)
        self.start_angle = float(start_angle)
        self.end_angle = float(end_angle)
        self.name = name

    def reversed(self) -> "Arc":
        """Same arc traversed the other way: endpoints and angles swapped."""
        return Arc(
            start_point=self.end_point,
            end_point=self.start_point,
            center=self.center,
            radius=self.radius,
            start_angle=self.end_angle,
            end_angle=self.start_angle,
            name=self.name,
        )

    def __repr__(self):
        return (
            f"Arc(start={self.start_point!r}, end={self.end_point!r}, "
            f"center={self.center!r}, radius={self.radius}, "
            f"start_angle={self.start_angle}, end_angle={self.end_angle})"
        )


class Circle:
    """A full circle. It has no start or end point and no direction."""

    curve_type = CIRCLE_TYPE

    def __init__(self, center: VectorLike, radius: float, name: str = "unnamed_circle"):
        if radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {radius}")
        self.center = as_vector(center)
        self.radius = float(radius)
        self.name = name

    def __repr__(self):
        return f"Circle(center={self.center!r}, radius={self.radius})"


class UnsupportedCurve:
    """
    Placeholder for a curve type that cannot be drawn (NURBS, ellipses, ...).

    The raw record is kept so the sketch holding it can be reported and skipped.
    """

    def __init__(self, curve_type: str, data: Optional[Dict[str, Any]] = None, name: str = "unnamed_curve"):
        self.curve_type = curve_type
        self.data = data or {}
        self.name = name

    def __repr__(self):
        return f"UnsupportedCurve(type={self.curve_type!r})"


Curve = Union[Line, Arc, Circle, UnsupportedCurve]


def has_endpoints(curve: Curve) -> bool:
    return isinstance(curve, (Line, Arc))


class Loop:
    """An ordered sequence of curves forming one closed boundary."""

    def __init__(self, curves: List[Curve], is_outer: bool = True):
        self.curves = list(curves)
        self.is_outer = is_outer

    def __len__(self):
        return len(self.curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.curves)

    def __getitem__(self, index: int) -> Curve:
        return self.curves[index]

    def __repr__(self):
        return f"Loop(curves={len(self.curves)}, is_outer={self.is_outer})"


class Profile:
    """A region bounded by one or more loops."""

    def __init__(self, loops: List[Loop], name: str = "unnamed_profile"):
        self.loops = list(loops)
        self.name = name

    def __repr__(self):
        return f"Profile(name={self.name!r}, loops={len(self.loops)})"


class Sketch:
    """A named collection of profiles, converted into one drawing."""

    def __init__(self, profiles: List[Profile], name: str = "unnamed_sketch"):
        self.profiles = list(profiles)
        self.name = name

    @property
    def loops(self) -> List[Loop]:
        return [loop for profile in self.profiles for loop in profile.loops]

    def __repr__(self):
        return f"Sketch(name={self.name!r}, profiles={len(self.profiles)})"
