import math

import pytest

from airdefense.geometry import Affine, Vector, rotate_about_center


def test_vector_defaults_and_mutation():
    v = Vector()
    assert (v.x, v.y) == (0.0, 0.0)
    v.x += 3.5
    assert v == Vector(3.5, 0.0)


def test_identity_leaves_points_alone():
    assert Affine().apply(7.0, -2.5) == (7.0, -2.5)


def test_translate_adds_offsets_and_chains():
    t = Affine().translate(3.0, 4.0).translate(1.0, -1.0)
    assert t.apply(10.0, 20.0) == (14.0, 23.0)


def test_quarter_turn_maps_x_axis_onto_y_axis():
    x, y = Affine().rotate(math.pi / 2).apply(1.0, 0.0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_full_turn_is_identity():
    x, y = Affine().rotate(2 * math.pi).apply(5.0, -3.0)
    assert x == pytest.approx(5.0)
    assert y == pytest.approx(-3.0)


@pytest.mark.parametrize("theta", [0.3, 1.0, math.pi, 4.2])
def test_rotation_preserves_distance_from_origin(theta):
    x, y = Affine().rotate(theta).apply(6.0, 8.0)
    assert math.hypot(x, y) == pytest.approx(math.hypot(6.0, 8.0))


def test_rotation_after_translation_moves_translation():
    t = Affine().translate(2.0, 0.0).rotate(math.pi)
    x, y = t.apply(0.0, 0.0)
    assert x == pytest.approx(-2.0)
    assert y == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("theta", [0.5, math.pi / 3, 45.0 * math.pi])
def test_rotate_about_center_fixes_center(theta):
    t = rotate_about_center(theta, 40, 20)
    x, y = t.apply(20.0, 10.0)
    assert x == pytest.approx(20.0)
    assert y == pytest.approx(10.0)


def test_rotate_about_center_half_turn_swaps_corners():
    x, y = rotate_about_center(math.pi, 30, 16).apply(0.0, 0.0)
    assert x == pytest.approx(30.0)
    assert y == pytest.approx(16.0)


def test_rotate_about_center_uses_integer_halves():
    t = rotate_about_center(math.pi / 7, 11, 9)
    x, y = t.apply(5.0, 4.0)
    assert x == pytest.approx(5.0)
    assert y == pytest.approx(4.0)