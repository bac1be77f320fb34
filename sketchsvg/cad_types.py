import math
from typing import Tuple, Union

import numpy as np

from .constants import TOLERANCE


class Vector(np.ndarray):
    """A 3D point or direction. Sketch geometry only ever reads x and y."""

    def __new__(cls, x: float, y: float, z: float = 0) -> "Vector":
        return np.asarray([x, y, z], dtype=float).view(cls)

    def __eq__(self, other: object) -> bool:
        # compare plain arrays, numpy's isclose would call back into this method
        return np.allclose(
            np.asarray(self).view(np.ndarray), np.asarray(other, dtype=float)
        )

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def get_2d(self):
        return np.array((self[0], self[1]))

    def distance_2d(self, other: "Vector") -> float:
        """Euclidean distance in the XY plane, z is discarded."""
        return float(math.hypot(self[0] - other[0], self[1] - other[1]))

    def isclose(self, other: "Vector", tolerance: float = TOLERANCE) -> bool:
        return self.distance_2d(other) < tolerance

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    @property
    def z(self) -> float:
        return float(self[2])

    def __repr__(self):
        return f"Vector(x={self.x}, y={self.y}, z={self.z})"

    @staticmethod
    def from_json(json_data):
        return Vector(json_data["x"], json_data["y"], json_data.get("z", 0.0))


VectorLike = Union[Tuple[float, float], Tuple[float, float, float], Vector]


def as_vector(point: VectorLike) -> Vector:
    if isinstance(point, Vector):
        return point
    return Vector(*point)
