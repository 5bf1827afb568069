import numpy as np
import pytest

from bloch_state import rotate_state_about_axis, normalize_state


def rotation_matrix(axis, deg):
    t = np.radians(deg)
    c, s = np.cos(t), np.sin(t)
    if axis == "x":
        return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])
    if axis == "y":
        return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


@pytest.mark.parametrize("axis", ["x", "y", "z"])
def test_zero_rotation_is_identity(state, axis):
    assert np.allclose(rotate_state_about_axis(state, axis, 0.0), state, atol=1e-15)


@pytest.mark.parametrize("axis", ["x", "y", "z"])
def test_inverse_rotation_recovers_state(state, axis):
    out = rotate_state_about_axis(rotate_state_about_axis(state, axis, 90.0), axis, -90.0)
    assert np.allclose(out, state, atol=1e-12)


@pytest.mark.parametrize("axis, start, expected", [
    ("z", (1, 0, 0), (0, 1, 0)),
    ("z", (0, 1, 0), (-1, 0, 0)),
    ("x", (0, 1, 0), (0, 0, 1)),
    ("x", (0, 0, 1), (0, -1, 0)),
    ("y", (0, 0, 1), (1, 0, 0)),
    ("y", (1, 0, 0), (0, 0, -1)),
])
def test_quarter_turns_are_right_handed(axis, start, expected):
    assert np.allclose(rotate_state_about_axis(start, axis, 90.0), expected, atol=1e-12)


@pytest.mark.parametrize("axis", ["x", "y", "z"])
@pytest.mark.parametrize("deg", [-725.0, -180.0, 33.3, 270.0])
def test_matches_rotation_matrix(state, axis, deg):
    expected = rotation_matrix(axis, deg) @ np.asarray(state)
    assert np.allclose(rotate_state_about_axis(state, axis, deg), expected, atol=1e-12)


@pytest.mark.parametrize("axis", ["x", "y", "z"])
def test_axis_component_is_fixed(state, axis):
    i = "xyz".index(axis)
    assert rotate_state_about_axis(state, axis, 47.0)[i] == state[i]


def test_rotations_do_not_commute():
    v = (0.0, 0.0, 1.0)
    xy = rotate_state_about_axis(rotate_state_about_axis(v, "x", 90.0), "y", 90.0)
    yx = rotate_state_about_axis(rotate_state_about_axis(v, "y", 90.0), "x", 90.0)
    assert not np.allclose(xy, yx)

    # applying x then y is R_y @ R_x
    expected = rotation_matrix("y", 90.0) @ rotation_matrix("x", 90.0) @ np.asarray(v)
    assert np.allclose(xy, expected, atol=1e-12)


def test_many_small_rotations_stay_normalized():
    v = normalize_state((0.3, -0.4, 0.5))
    for i in range(10000):
        v = normalize_state(rotate_state_about_axis(v, "xyz"[i % 3], 0.37))
    assert np.linalg.norm(v) == pytest.approx(1.0, abs=1e-12)


def test_unknown_axis_raises():
    with pytest.raises(ValueError):
        rotate_state_about_axis((0, 0, 1), "w", 10.0)


@pytest.mark.parametrize("axis", ["x", "y", "z"])
@pytest.mark.parametrize("deg", [np.nan, np.inf, -np.inf])
def test_non_finite_angle_rotates_by_zero(state, axis, deg):
    out = rotate_state_about_axis(state, axis, deg)
    assert np.all(np.isfinite(out))
    assert np.allclose(out, state, atol=1e-15)
