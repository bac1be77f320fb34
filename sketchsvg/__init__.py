"""
sketchsvg - Convert CAD reconstruction sketches into SVG drawings.

Sketch loops made of lines, arcs and circles are oriented into continuous
chains, translated into path commands and assembled into closed paths with
a viewport that fits the geometry.
"""

__version__ = "0.1.0"

from .cad_types import Vector
from .commands import (
    ArcCommand,
    ArcEndpointCommand,
    LineCommand,
    UnsupportedCurveError,
    center_to_endpoint,
    curve_to_commands,
)
from .drawing import DegenerateGeometryError, Drawing, convert_sketch, convert_sketches
from .orientation import fix_loop_orientation
from .path import commands_to_path
from .primitives import Arc, Circle, Line, Loop, Profile, Sketch, UnsupportedCurve
from .svg_writer import drawing_to_svg, write_svg
from .viewport import BoundingBox, Viewport, compute_bounding_box, compute_viewport, dilate

__all__ = [
    # Geometry types
    "Vector",
    "Line",
    "Arc",
    "Circle",
    "UnsupportedCurve",
    "Loop",
    "Profile",
    "Sketch",
    # Engine
    "fix_loop_orientation",
    "curve_to_commands",
    "center_to_endpoint",
    "commands_to_path",
    "compute_bounding_box",
    "compute_viewport",
    "dilate",
    "convert_sketch",
    "convert_sketches",
    # Commands and results
    "LineCommand",
    "ArcCommand",
    "ArcEndpointCommand",
    "BoundingBox",
    "Viewport",
    "Drawing",
    # Output
    "drawing_to_svg",
    "write_svg",
    # Errors
    "UnsupportedCurveError",
    "DegenerateGeometryError",
]
