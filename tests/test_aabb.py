import numpy as np
import pytest

from voxelkit.aabb import AABB


def test_default_box_is_degenerate_at_origin():
    box = AABB()
    assert np.array_equal(box.min_point, np.zeros(3))
    assert np.array_equal(box.max_point, np.zeros(3))


def test_bad_vector_shape_raises():
    with pytest.raises(ValueError):
        AABB([0, 0], [1, 1, 1])


@pytest.mark.parametrize(
    "point, inside",
    [
        ((0.5, 0.5, 0.5), True),
        ((0, 0, 0), True),
        ((1, 1, 1), True),
        ((1.01, 0.5, 0.5), False),
        ((0.5, -0.1, 0.5), False),
    ],
)
def test_test_point(point, inside):
    box = AABB((0, 0, 0), (1, 1, 1))
    assert box.test_point(point) is inside


def test_overlapping_boxes_collide_symmetrically():
    a = AABB((0, 0, 0), (2, 2, 2))
    b = AABB((1, 1, 1), (3, 3, 3))
    assert a.is_colliding(b)
    assert b.is_colliding(a)


def test_touching_faces_do_not_collide():
    a = AABB((0, 0, 0), (1, 1, 1))
    b = AABB((1, 0, 0), (2, 1, 1))
    assert not a.is_colliding(b)
    assert not b.is_colliding(a)


def test_translate_moves_both_corners():
    box = AABB((0, 0, 0), (1, 2, 3))
    box.translate((1, -1, 2))
    assert np.allclose(box.min_point, (1, -1, 2))
    assert np.allclose(box.max_point, (2, 1, 5))


def test_plane_through_center():
    box = AABB((-1, -1, -1), (1, 1, 1))
    assert box.test_plane((0, 0, 0), (1, 0, 0))


def test_plane_away_from_box():
    box = AABB((2, 2, 2), (3, 3, 3))
    assert not box.test_plane((0, 0, 0), (1, 0, 0))


def test_frustum_identity_keeps_box_inside_clip_space():
    box = AABB((-0.5, -0.5, -0.5), (0.5, 0.5, 0.5))
    assert box.test_frustum(np.eye(4))


@pytest.mark.parametrize(
    "lo, hi",
    [
        ((5, 0, 0), (6, 1, 1)),
        ((-6, 0, 0), (-5, 1, 1)),
        ((0, 3, 0), (1, 4, 1)),
        ((0, 0, -9), (1, 1, -8)),
    ],
)
def test_frustum_rejects_box_outside(lo, hi):
    assert not AABB(lo, hi).test_frustum(np.eye(4))


def test_frustum_accepts_box_straddling_edge():
    assert AABB((0.5, 0, 0), (3, 0.5, 0.5)).test_frustum(np.eye(4))


def test_collide_returns_none_without_overlap():
    a = AABB((0, 0, 0), (1, 1, 1))
    b = AABB((5, 5, 5), (6, 6, 6))
    assert a.collide(b) is None


def test_collide_pushes_along_shortest_axis():
    a = AABB((0, 0, 0), (2, 2, 2))
    b = AABB((1.5, 0.5, 0.5), (3.5, 1.5, 1.5))
    move = a.collide(b)
    assert np.allclose(move, (0.5, 0, 0))


def test_collide_result_separates_boxes():
    a = AABB((0, 0, 0), (4, 1, 4))
    b = AABB((1, 0.8, 1), (2, 2.8, 2))
    move = a.collide(b)
    assert np.count_nonzero(move) == 1
    b.translate(move)
    assert not a.is_colliding(b)
    assert move[1] > 0