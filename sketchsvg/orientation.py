from typing import List

from .constants import TOLERANCE
from .primitives import Curve, Loop, has_endpoints


def _needs_reversal(last: Curve, curve: Curve, loop_size: int, tolerance: float) -> bool:
    if last.end_point.isclose(curve.end_point, tolerance):
        return True
    # two-curve loops (e.g. a pair of half arcs) would get both curves flipped
    return loop_size > 2 and last.start_point.isclose(curve.end_point, tolerance)


def fix_loop_orientation(loop: Loop, tolerance: float = TOLERANCE) -> Loop:
    """
    Reverse the curves of a loop that run against the direction of travel.

    Makes a single forward pass: each curve is compared with its predecessor
    (the curve before it, or the last curve of the loop for index 0), using
    the predecessor as already fixed by this pass. A curve is reversed when
    its end point meets the predecessor's end point, or, for loops with more
    than two curves, the predecessor's start point. Circles are left alone
    and never act as a predecessor. Curves that fit neither case are kept as
    given, so a malformed loop comes out unchanged rather than raising.

    The input loop is not modified; a new Loop with fresh curves is returned.
    """
    curves = loop.curves
    fixed: List[Curve] = []
    for index, curve in enumerate(curves):
        last = fixed[index - 1] if index > 0 else curves[-1]
        if (
            has_endpoints(curve)
            and has_endpoints(last)
            and _needs_reversal(last, curve, len(curves), tolerance)
        ):
            curve = curve.reversed()
        fixed.append(curve)
    return Loop(fixed, is_outer=loop.is_outer)
