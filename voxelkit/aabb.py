"""Axis-aligned bounding boxes with collision and culling tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]


def _vec3(value: VectorLike) -> np.ndarray:
    arr = np.array(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


# Unit directions in which another box may be pushed, in the order they are tried.
_PUSH_DIRECTIONS = (
    np.array([-1.0, 0.0, 0.0]),
    np.array([1.0, 0.0, 0.0]),
    np.array([0.0, -1.0, 0.0]),
    np.array([0.0, 1.0, 0.0]),
    np.array([0.0, 0.0, -1.0]),
    np.array([0.0, 0.0, 1.0]),
)


@dataclass(eq=False)
class AABB:
    """A box given by its minimum and maximum corners."""

    min_point: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max_point: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.min_point = _vec3(self.min_point)
        self.max_point = _vec3(self.max_point)

    def __repr__(self) -> str:
        return f"AABB({self.min_point.tolist()}, {self.max_point.tolist()})"

    def test_point(self, p: VectorLike) -> bool:
        """Return True if ``p`` lies inside the box, boundary included."""
        p = _vec3(p)
        return bool(np.all(self.min_point <= p) and np.all(p <= self.max_point))

    def is_colliding(self, other: AABB) -> bool:
        """Return True if the two boxes overlap with a positive volume."""
        max_invalid = bool(np.any(self.max_point <= other.min_point))
        min_invalid = bool(np.any(other.max_point <= self.min_point))
        return not (min_invalid or max_invalid)

    def translate(self, change: VectorLike) -> None:
        """Move the box in place by ``change``."""
        change = _vec3(change)
        self.min_point = self.min_point + change
        self.max_point = self.max_point + change

    def test_plane(self, point: VectorLike, normal: VectorLike) -> bool:
        """Return True if the plane through ``point`` with ``normal`` meets the box."""
        point = _vec3(point)
        normal = _vec3(normal)
        center = (self.max_point + self.min_point) * 0.5
        extents = self.max_point - center
        r = float(np.dot(extents, np.abs(point)))
        s = float(np.dot(normal, center - point))
        return abs(s) <= r

    def test_frustum(self, pv: np.ndarray) -> bool:
        """Conservative frustum test against a projection-view matrix.

        Never returns False for a box that meets the frustum, but may return
        True for a box that does not.
        """
        pv = np.asarray(pv, dtype=float)
        corners = np.array(
            [
                [
                    self.min_point[0] if i & 1 else self.max_point[0],
                    self.min_point[1] if (i >> 1) & 1 else self.max_point[1],
                    self.min_point[2] if (i >> 2) & 1 else self.max_point[2],
                    1.0,
                ]
                for i in range(8)
            ]
        )
        clip = corners @ pv.T
        w = clip[:, 3]
        for axis in range(3):
            coords = clip[:, axis]
            if np.all(coords > w):
                return False
            if np.all(coords < -w):
                return False
        return True

    def collide(self, other: AABB) -> Optional[np.ndarray]:
        """Return the shortest translation that pushes ``other`` out of this box.

        Returns None if the boxes do not collide or no valid push exists.
        """
        if not self.is_colliding(other):
            return None

        dimensions = self.max_point - self.min_point
        needed = (
            -min(self.min_point[0] - other.max_point[0], 0.0),
            max(self.max_point[0] - other.min_point[0], 0.0),
            -min(self.min_point[1] - other.max_point[1], 0.0),
            max(self.max_point[1] - other.min_point[1], 0.0),
            -min(self.min_point[2] - other.max_point[2], 0.0),
            max(self.max_point[2] - other.min_point[2], 0.0),
        )

        best: Optional[tuple[float, np.ndarray]] = None
        for distance, direction in zip(needed, _PUSH_DIRECTIONS):
            width = abs(float(np.dot(dimensions, direction)))
            if 0 < distance < width and (best is None or distance < best[0]):
                best = (distance, distance * direction)
        return None if best is None else best[1]