import math

import pytest

from sketchsvg.cad_types import Vector
from sketchsvg.primitives import (
    Arc,
    Circle,
    Line,
    Loop,
    Profile,
    Sketch,
    UnsupportedCurve,
    has_endpoints,
)


def test_vector_ignores_z_for_distance():
    a = Vector(0, 0, 5)
    b = Vector(3, 4, -2)
    assert a.distance_2d(b) == pytest.approx(5.0)


def test_vector_isclose_uses_tolerance():
    assert Vector(1, 1).isclose(Vector(1 + 1e-8, 1))
    assert not Vector(1, 1).isclose(Vector(1 + 1e-4, 1))


def test_vector_from_json():
    vec = Vector.from_json({"x": 1.5, "y": -2.0, "z": 0.25})
    assert (vec.x, vec.y, vec.z) == (1.5, -2.0, 0.25)


def test_vector_equality():
    a = Vector(1, 2, 3)

    assert a == Vector(1, 2, 3)
    assert a == Vector(1 + 1e-12, 2, 3)
    assert a == (1, 2, 3)
    assert a != Vector(1, 2, 4)
    assert not (a == Vector(0, 2, 3))


def test_vector_from_json_without_z():
    assert Vector.from_json({"x": 1, "y": 2}).z == 0.0


def test_line_reversed_returns_new_line():
    line = Line((0, 0), (1, 2), name="edge")
    flipped = line.reversed()

    assert flipped is not line
    assert flipped.start_point == Vector(1, 2)
    assert flipped.end_point == Vector(0, 0)
    assert flipped.name == "edge"
    # input line untouched
    assert line.start_point == Vector(0, 0)


def test_arc_reversed_swaps_points_and_angles():
    arc = Arc(
        start_point=(1, 0),
        end_point=(0, 1),
        center=(0, 0),
        radius=1.0,
        start_angle=0.0,
        end_angle=math.pi / 2,
    )
    flipped = arc.reversed()

    assert flipped.start_point == Vector(0, 1)
    assert flipped.end_point == Vector(1, 0)
    assert flipped.start_angle == pytest.approx(math.pi / 2)
    assert flipped.end_angle == 0.0
    assert arc.start_angle == 0.0


@pytest.mark.parametrize("radius", [0, -1.0])
def test_non_positive_radius_is_rejected(radius):
    with pytest.raises(ValueError):
        Circle((0, 0), radius)
    with pytest.raises(ValueError):
        Arc((1, 0), (-1, 0), (0, 0), radius, 0, math.pi)


def test_has_endpoints():
    assert has_endpoints(Line((0, 0), (1, 0)))
    assert has_endpoints(Arc((1, 0), (-1, 0), (0, 0), 1, 0, math.pi))
    assert not has_endpoints(Circle((0, 0), 1))
    assert not has_endpoints(UnsupportedCurve("NurbsCurve3D"))


def test_sketch_flattens_loops_across_profiles():
    outer = Loop([Line((0, 0), (1, 0)), Line((1, 0), (0, 0))])
    hole = Loop([Circle((0.5, 0), 0.1)], is_outer=False)
    other = Loop([Circle((5, 5), 1)])
    sketch = Sketch([Profile([outer, hole]), Profile([other])], name="s")

    assert sketch.loops == [outer, hole, other]
