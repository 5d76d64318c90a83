"""A first-person camera and the matrices it produces."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]

_HALF_TURN_APPROX = 3.14
_PITCH_LIMIT = math.pi / 2 - 0.01
_NEAR_PLANE = 0.1
_FAR_PLANE = 230.0


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective matrix mapping depth to [-1, 1]."""
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def look_at(eye: VectorLike, center: VectorLike, up: VectorLike) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` toward ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


@dataclass
class Camera:
    """Position and yaw/pitch angles (radians) with a vertical field of view in degrees."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    horizontal_angle: float = _HALF_TURN_APPROX
    vertical_angle: float = 0.0
    fov: float = 75.0

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)

    def direction(self) -> np.ndarray:
        """Unit vector the camera looks along."""
        cv = math.cos(self.vertical_angle)
        return _normalize(
            np.array(
                [
                    cv * math.sin(self.horizontal_angle),
                    math.sin(self.vertical_angle),
                    cv * math.cos(self.horizontal_angle),
                ]
            )
        )

    def right(self) -> np.ndarray:
        """Horizontal unit vector pointing to the camera's right."""
        angle = self.horizontal_angle - _HALF_TURN_APPROX / 2.0
        return np.array([math.sin(angle), 0.0, math.cos(angle)])

    def up(self) -> np.ndarray:
        """Vector pointing up relative to the viewing plane."""
        return np.cross(self.right(), self.direction())

    def move_toward(self, change: VectorLike, clip_y: bool) -> None:
        """Move forward by change[0], vertically by change[1], right by change[2].

        With ``clip_y`` the camera's height does not change.
        """
        change = np.asarray(change, dtype=float)
        delta = (
            self.direction() * change[0]
            + np.array([0.0, 1.0, 0.0]) * change[1]
            + self.right() * change[2]
        )
        if clip_y:
            delta[1] = 0.0
        self.position = self.position + delta

    def rotate(self, delta: VectorLike) -> None:
        """Add yaw delta[0] and pitch delta[1]; pitch is clamped short of vertical."""
        self.horizontal_angle += float(delta[0])
        self.vertical_angle = min(
            max(self.vertical_angle + float(delta[1]), -_PITCH_LIMIT), _PITCH_LIMIT
        )

    def projection_matrix(self, aspect_ratio: float) -> np.ndarray:
        """Perspective projection for the given aspect ratio."""
        return perspective(math.radians(self.fov), aspect_ratio, _NEAR_PLANE, _FAR_PLANE)

    def view_matrix(self) -> np.ndarray:
        """Matrix taking world coordinates into camera space."""
        direction = self.direction()
        up = np.cross(self.right(), direction)
        return look_at(self.position, self.position + direction, up)