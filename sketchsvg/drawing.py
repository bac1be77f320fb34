import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import numpy as np

from .commands import PathCommand, UnsupportedCurveError, ensure_endpoint_form, loop_to_commands
from .constants import DEFAULT_DILATION
from .orientation import fix_loop_orientation
from .path import commands_to_path
from .primitives import Arc, Line, Loop, Sketch
from .viewport import Viewport, compute_viewport

logger = logging.getLogger(__name__)


class DegenerateGeometryError(ValueError):
    """Raised when a sketch has nothing drawable or an unbounded viewport."""


@dataclass
class Drawing:
    """
    A converted sketch: a viewport plus one closed path per loop.

    The oriented loops the paths were built from are kept for previews.
    """

    viewport: Viewport
    paths: List[str]
    name: str = "unnamed_drawing"
    loops: List[Loop] = field(default_factory=list, repr=False)

    @property
    def stroke_width(self) -> float:
        return self.viewport.stroke_width

    def to_png(
        self,
        file_name: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        samples: int = 50,
    ) -> None:
        """
        Render the drawing to a PNG image.

        Args:
            file_name: Path to save the PNG file. If None, displays in a UI window instead.
            width: Image width in pixels (default: 800)
            height: Image height in pixels (default: 600)
            samples: Number of segments used to draw each arc or circle

        Raises:
            ImportError: If matplotlib is not installed
        """
        try:
            import matplotlib.pyplot as plt
        except ImportError:
            raise ImportError(
                "matplotlib is required for drawing previews. Install with: pip install matplotlib"
            )

        fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
        ax.set_aspect("equal")

        for loop in self.loops:
            for curve in loop:
                if isinstance(curve, Line):
                    xs = [curve.start_point.x, curve.end_point.x]
                    ys = [curve.start_point.y, curve.end_point.y]
                else:
                    if isinstance(curve, Arc):
                        angles = np.linspace(curve.start_angle, curve.end_angle, samples + 1)
                    else:
                        angles = np.linspace(0.0, 2 * np.pi, samples + 1)
                    xs = curve.center.x + curve.radius * np.cos(angles)
                    ys = curve.center.y + curve.radius * np.sin(angles)
                ax.plot(xs, ys, "k-", linewidth=2)

        viewport = self.viewport
        ax.set_xlim(viewport.left, viewport.left + viewport.width)
        # path coordinates grow downwards, match the SVG orientation
        ax.set_ylim(viewport.top + viewport.height, viewport.top)
        ax.set_title(self.name)

        plt.tight_layout()
        if file_name:
            plt.savefig(file_name, dpi=100, bbox_inches="tight", facecolor="white")
            plt.close(fig)
        else:
            plt.show()


def convert_sketch(sketch: Sketch, dilation: float = DEFAULT_DILATION) -> Drawing:
    """
    Convert one sketch into a drawing.

    Every loop is oriented, translated into commands and assembled into its
    own closed path. The viewport covers the commands of all loops.

    Raises:
        UnsupportedCurveError: if any curve is not a line, arc or circle
        DegenerateGeometryError: if no loop yields a command, or the box is not finite
    """
    loops: List[Loop] = []
    paths: List[str] = []
    all_commands: List[PathCommand] = []
    for loop in sketch.loops:
        oriented = fix_loop_orientation(loop)
        commands = loop_to_commands(oriented)
        if not commands:
            logger.debug(f"Skipping empty loop in sketch {sketch.name}")
            continue
        loops.append(oriented)
        paths.append(commands_to_path(commands))
        all_commands.extend(ensure_endpoint_form(command) for command in commands)

    if not paths:
        raise DegenerateGeometryError(f"Sketch {sketch.name} has no drawable loops")

    viewport = compute_viewport(all_commands, dilation)
    if not viewport.is_finite():
        raise DegenerateGeometryError(
            f"Sketch {sketch.name} has a non-finite viewport: {viewport}"
        )
    return Drawing(viewport=viewport, paths=paths, name=sketch.name, loops=loops)


def convert_sketches(
    sketches: Mapping[str, Sketch], dilation: float = DEFAULT_DILATION
) -> Dict[str, Drawing]:
    """
    Convert a mapping of sketches, dropping the ones that cannot be drawn.

    A sketch with an unsupported curve or degenerate geometry is logged and
    left out of the result; the other sketches are unaffected.
    """
    drawings: Dict[str, Drawing] = {}
    for name, sketch in sketches.items():
        try:
            drawings[name] = convert_sketch(sketch, dilation)
        except UnsupportedCurveError as e:
            logger.warning(f"Skipping sketch {name}: {e}")
        except DegenerateGeometryError as e:
            logger.warning(f"Skipping sketch {name}: {e}")
    return drawings
