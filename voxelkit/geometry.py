"""Fixed vertex and UV tables for cubes, screen planes and skyboxes.

Cube faces are ordered -x, +x, -y, +y, -z, +z; each face is two triangles
(six vertices). Face-selection bitmasks use bit ``i`` for face ``i``, and
any bits above the sixth are ignored.
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np

FACE_COUNT = 6
VERTICES_PER_FACE = 6

_CUBE_VERTICES = np.array(
    [
        # -x
        (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 1.0, 1.0),
        (0.0, 0.0, 0.0), (0.0, 1.0, 1.0), (0.0, 1.0, 0.0),
        # +x
        (1.0, 0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 0.0, 1.0),
        (1.0, 1.0, 1.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0),
        # -y
        (1.0, 0.0, 1.0), (0.0, 0.0, 0.0), (1.0, 0.0, 0.0),
        (1.0, 0.0, 1.0), (0.0, 0.0, 1.0), (0.0, 0.0, 0.0),
        # +y
        (1.0, 1.0, 1.0), (0.0, 1.0, 0.0), (0.0, 1.0, 1.0),
        (1.0, 1.0, 1.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0),
        # -z
        (1.0, 1.0, 0.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0),
        (1.0, 1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 0.0),
        # +z
        (0.0, 1.0, 1.0), (0.0, 0.0, 1.0), (1.0, 0.0, 1.0),
        (1.0, 1.0, 1.0), (0.0, 1.0, 1.0), (1.0, 0.0, 1.0),
    ]
)

_CUBE_UVS = np.array(
    [
        # -x
        (0.0, 0.0), (1.0, 0.0), (1.0, 1.0),
        (0.0, 0.0), (1.0, 1.0), (0.0, 1.0),
        # +x
        (1.0, 0.0), (0.0, 1.0), (0.0, 0.0),
        (0.0, 1.0), (1.0, 0.0), (1.0, 1.0),
        # -y
        (1.0, 1.0), (0.0, 0.0), (1.0, 0.0),
        (1.0, 1.0), (0.0, 1.0), (0.0, 0.0),
        # +y
        (0.0, 1.0), (1.0, 0.0), (1.0, 1.0),
        (0.0, 1.0), (0.0, 0.0), (1.0, 0.0),
        # -z
        (0.0, 1.0), (1.0, 0.0), (1.0, 1.0),
        (0.0, 1.0), (0.0, 0.0), (1.0, 0.0),
        # +z
        (0.0, 1.0), (0.0, 0.0), (1.0, 0.0),
        (1.0, 1.0), (0.0, 1.0), (1.0, 0.0),
    ]
)

_PLANE_VERTICES = np.array(
    [
        (-1.0, -1.0, 0.0), (1.0, 1.0, 0.0), (-1.0, 1.0, 0.0),
        (-1.0, -1.0, 0.0), (1.0, -1.0, 0.0), (1.0, 1.0, 0.0),
    ]
)

_PLANE_UVS = np.array(
    [
        (0.0, 0.0), (1.0, 1.0), (0.0, 1.0),
        (0.0, 0.0), (1.0, 0.0), (1.0, 1.0),
    ]
)

_SKYBOX_VERTICES = np.array(
    [
        (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0),
        (1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0),

        (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0), (-1.0, 1.0, -1.0),
        (-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (-1.0, -1.0, 1.0),

        (1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0),
        (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (1.0, -1.0, -1.0),

        (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0),
        (1.0, 1.0, 1.0), (1.0, -1.0, 1.0), (-1.0, -1.0, 1.0),

        (-1.0, 1.0, -1.0), (1.0, 1.0, -1.0), (1.0, 1.0, 1.0),
        (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0),

        (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, -1.0),
        (1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0),
    ]
)


def _face_rows(bitmask: int) -> tuple[int, ...]:
    return tuple(
        row
        for face in range(FACE_COUNT)
        if (bitmask >> face) & 1
        for row in range(face * VERTICES_PER_FACE, (face + 1) * VERTICES_PER_FACE)
    )


@lru_cache(maxsize=None)
def _selected_rows(bitmask: int) -> tuple[int, ...]:
    return _face_rows(bitmask & ((1 << FACE_COUNT) - 1))


def cube_face_vertices(bitmask: int) -> np.ndarray:
    """Vertices of the unit cube's faces selected by ``bitmask``, shape (n, 3)."""
    return _CUBE_VERTICES[list(_selected_rows(bitmask))].reshape(-1, 3)


def cube_face_uvs(bitmask: int) -> np.ndarray:
    """UV coordinates of the faces selected by ``bitmask``, shape (n, 2)."""
    return _CUBE_UVS[list(_selected_rows(bitmask))].reshape(-1, 2)


def cube_vertices() -> np.ndarray:
    """All 36 vertices of the unit cube, shape (36, 3)."""
    return _CUBE_VERTICES.copy()


def cube_uvs() -> np.ndarray:
    """All 36 UV coordinates of the unit cube, shape (36, 2)."""
    return _CUBE_UVS.copy()


def plane_vertices() -> np.ndarray:
    """Two triangles covering the whole viewport in clip space, shape (6, 3)."""
    return _PLANE_VERTICES.copy()


def plane_uvs() -> np.ndarray:
    """UV coordinates for :func:`plane_vertices`, shape (6, 2)."""
    return _PLANE_UVS.copy()


def skybox_vertices() -> np.ndarray:
    """Vertices of a cube from -1 to 1 for drawing a skybox, shape (36, 3)."""
    return _SKYBOX_VERTICES.copy()