import math

import pytest

from sketchsvg.commands import (
    ArcCommand,
    ArcEndpointCommand,
    LineCommand,
    curve_to_commands,
    ensure_endpoint_form,
)
from sketchsvg.primitives import Circle
from sketchsvg.viewport import (
    BoundingBox,
    Viewport,
    compute_bounding_box,
    compute_viewport,
    dilate,
)


def test_single_line_with_dilation():
    viewport = compute_viewport([LineCommand(0, 0, 10, 0)], dilation=0.1)

    assert viewport.left == pytest.approx(-0.5)
    assert viewport.top == pytest.approx(-0.5)
    assert viewport.width == pytest.approx(11)
    assert viewport.height == pytest.approx(1)


def test_bounding_box_before_dilation():
    box = compute_bounding_box([LineCommand(0, 0, 10, 0)])
    assert box == BoundingBox(left=0, top=0, right=10, bottom=0)
    assert box.width == 10
    assert box.height == 0


def test_zero_dilation_keeps_box():
    box = BoundingBox(left=-1, top=2, right=3, bottom=5)
    assert dilate(box, 0) == Viewport(left=-1, top=2, width=4, height=3)


def test_box_covers_all_commands():
    commands = [
        LineCommand(0, 0, 4, -1),
        ArcEndpointCommand(x0=4, y0=-1, rx=2, ry=2, large_arc=0, sweep=1, x=2, y=3),
        LineCommand(2, 3, -2, 1),
    ]
    box = compute_bounding_box(commands)
    assert (box.left, box.top, box.right, box.bottom) == (-2, -1, 4, 3)


def test_center_form_arc_uses_radius():
    box = compute_bounding_box([ArcCommand(x=1, y=1, r=2, s=0, e=math.pi)])
    assert (box.left, box.top, box.right, box.bottom) == (-1, -1, 3, 3)


def test_empty_commands_give_infinite_box():
    box = compute_bounding_box([])

    assert box.left == math.inf
    assert box.top == math.inf
    assert box.right == -math.inf
    assert box.bottom == -math.inf
    assert not box.is_finite()
    assert not dilate(box, 0.1).is_finite()


def test_viewport_strings():
    viewport = Viewport(left=-0.5, top=-0.5, width=11, height=1)

    assert viewport.view_box == "-0.5 -0.5 11 1"
    assert viewport.stroke_width == pytest.approx(0.06)


def test_lone_circle_box_spans_half_arc_endpoints():
    commands = [ensure_endpoint_form(c) for c in curve_to_commands(Circle((2, 3), 1.5))]
    box = compute_bounding_box(commands)

    assert box.left == pytest.approx(0.5)
    assert box.right == pytest.approx(3.5)
    assert box.height == pytest.approx(0, abs=1e-9)
