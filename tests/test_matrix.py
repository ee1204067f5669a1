import math

import pytest

from smbgame.gmath import Vector2, Vector3
from smbgame.matrix import (
    Matrix3,
    Matrix4,
    Quaternion,
    rotate_by_quaternion,
    transform_vector2,
    transform_vector3,
    transform_with_persp_div,
)


def _assert_rows_close(actual, expected):
    for row_a, row_e in zip(actual, expected):
        assert row_a == pytest.approx(row_e, abs=1e-9)


def _assert_vec_close(actual, expected):
    assert tuple(actual) == pytest.approx(tuple(expected), abs=1e-9)


def test_matrix3_default_is_unit_scale():
    assert Matrix3() == Matrix3.create_scale(1.0, 1.0)


def test_matrix3_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Matrix3([[1.0, 0.0], [0.0, 1.0]])


def test_matrix3_translation_moves_point():
    result = transform_vector2(Vector2(3.0, 4.0), Matrix3.create_translation(Vector2(10.0, -2.0)))
    _assert_vec_close(result, (13.0, 2.0))


def test_matrix3_translation_ignored_for_direction():
    result = transform_vector2(
        Vector2(3.0, 4.0), Matrix3.create_translation(Vector2(10.0, -2.0)), 0.0
    )
    _assert_vec_close(result, (3.0, 4.0))


def test_matrix3_scale_and_uniform_scale():
    _assert_vec_close(transform_vector2(Vector2(2.0, 5.0), Matrix3.create_scale(3.0, 4.0)), (6.0, 20.0))
    assert Matrix3.create_uniform_scale(2.5) == Matrix3.create_scale(2.5, 2.5)


def test_matrix3_rotation_composes_and_preserves_length():
    combined = Matrix3.create_rotation(0.3) @ Matrix3.create_rotation(0.5)
    _assert_rows_close(combined.mat, Matrix3.create_rotation(0.8).mat)
    v = Vector2(3.0, -7.0)
    assert transform_vector2(v, combined).length() == pytest.approx(v.length())


def test_matrix3_identity_is_neutral_for_multiplication():
    m = Matrix3.create_translation(Vector2(1.0, 2.0)) @ Matrix3.create_rotation(0.4)
    _assert_rows_close((m @ Matrix3()).mat, m.mat)
    m2 = Matrix3(m.mat)
    m2 @= Matrix3.create_scale(2.0, 3.0)
    _assert_rows_close(m2.mat, (m @ Matrix3.create_scale(2.0, 3.0)).mat)


def test_matrix4_invert_round_trip():
    m = (
        Matrix4.create_scale(2.0, 3.0, 4.0)
        @ Matrix4.create_rotation_x(0.7)
        @ Matrix4.create_rotation_y(-0.4)
        @ Matrix4.create_translation(Vector3(5.0, -1.0, 2.0))
    )
    inverse = m.inverted()
    _assert_rows_close((m @ inverse).mat, Matrix4().mat)
    _assert_rows_close((inverse @ m).mat, Matrix4().mat)


def test_matrix4_inverted_leaves_original_and_invert_mutates():
    m = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    original = Matrix4(m.mat)
    inverse = m.inverted()
    assert m == original
    m.invert()
    _assert_rows_close(m.mat, inverse.mat)
    _assert_vec_close(m.get_translation(), (-1.0, -2.0, -3.0))


def test_matrix4_singular_invert_raises():
    with pytest.raises(ValueError):
        Matrix4.create_scale(1.0, 0.0, 1.0).invert()


def test_matrix4_translation_and_scale_extraction():
    m = Matrix4.create_scale(2.0, 3.0, 4.0) @ Matrix4.create_translation(Vector3(7.0, 8.0, 9.0))
    _assert_vec_close(m.get_translation(), (7.0, 8.0, 9.0))
    _assert_vec_close(m.get_scale(), (2.0, 3.0, 4.0))
    assert Matrix4.create_uniform_scale(5.0) == Matrix4.create_scale(5.0, 5.0, 5.0)


def test_matrix4_axes_are_unit_length():
    m = Matrix4.create_scale(2.0, 3.0, 4.0) @ Matrix4.create_rotation_z(1.1)
    for axis in (m.get_x_axis(), m.get_y_axis(), m.get_z_axis()):
        assert axis.length() == pytest.approx(1.0)
    _assert_vec_close(Matrix4.create_scale(3.0, 1.0, 1.0).get_x_axis(), (1.0, 0.0, 0.0))


def test_rotations_preserve_length():
    v = Vector3(1.0, -2.0, 3.0)
    for m in (
        Matrix4.create_rotation_x(0.9),
        Matrix4.create_rotation_y(0.9),
        Matrix4.create_rotation_z(0.9),
    ):
        assert transform_vector3(v, m).length() == pytest.approx(v.length())


def test_quaternion_default_and_zero_angle_are_identity():
    assert Quaternion() == Quaternion(0.0, 0.0, 0.0, 1.0)
    q = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 0.0)
    assert (q.x, q.y, q.z, q.w) == pytest.approx((0.0, 0.0, 0.0, 1.0))
    _assert_rows_close(Matrix4.create_from_quaternion(Quaternion()).mat, Matrix4().mat)


@pytest.mark.parametrize(
    "axis, factory",
    [
        (Vector3(1.0, 0.0, 0.0), Matrix4.create_rotation_x),
        (Vector3(0.0, 1.0, 0.0), Matrix4.create_rotation_y),
        (Vector3(0.0, 0.0, 1.0), Matrix4.create_rotation_z),
    ],
)
def test_quaternion_matrix_matches_axis_rotation(axis, factory):
    q = Quaternion.from_axis_angle(axis, 0.6)
    _assert_rows_close(Matrix4.create_from_quaternion(q).mat, factory(0.6).mat)


def test_rotate_by_quaternion_matches_matrix():
    axis = Vector3(1.0, 2.0, 2.0).normalized()
    q = Quaternion.from_axis_angle(axis, 1.3)
    v = Vector3(4.0, -1.0, 0.5)
    _assert_vec_close(rotate_by_quaternion(v, q), transform_vector3(v, Matrix4.create_from_quaternion(q)))


def test_conjugate_undoes_rotation():
    q = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 0.8)
    inverse = Quaternion(q.x, q.y, q.z, q.w)
    inverse.conjugate()
    result = Quaternion.concatenate(q, inverse)
    assert (result.x, result.y, result.z, result.w) == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_concatenate_is_rotation_sequence():
    q = Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), 0.5)
    p = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 0.9)
    v = Vector3(1.0, 2.0, 3.0)
    _assert_vec_close(
        rotate_by_quaternion(v, Quaternion.concatenate(q, p)),
        rotate_by_quaternion(rotate_by_quaternion(v, q), p),
    )


def test_quaternion_normalize_and_set():
    q = Quaternion()
    q.set(1.0, 2.0, 2.0, 4.0)
    assert q.length_sq() == pytest.approx(25.0)
    n = q.normalized()
    assert n.length() == pytest.approx(1.0)
    assert q.length() == pytest.approx(5.0)
    q.normalize()
    assert q == n


def test_zero_quaternion_normalize_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion(0.0, 0.0, 0.0, 0.0).normalize()


def test_quaternion_dot_of_unit_with_itself():
    q = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 2.0)
    assert Quaternion.dot(q, q) == pytest.approx(1.0)


def test_slerp_and_lerp_endpoints():
    a = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 0.2)
    b = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 1.4)
    for interp in (Quaternion.slerp, Quaternion.lerp):
        start = interp(a, b, 0.0)
        end = interp(a, b, 1.0)
        assert (start.x, start.y, start.z, start.w) == pytest.approx((a.x, a.y, a.z, a.w))
        assert (end.x, end.y, end.z, end.w) == pytest.approx((b.x, b.y, b.z, b.w))
        assert interp(a, b, 0.37).length() == pytest.approx(1.0)


def test_slerp_midpoint_is_half_angle():
    a = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 0.2)
    b = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 1.4)
    mid = Quaternion.slerp(a, b, 0.5)
    expected = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 0.8)
    assert (mid.x, mid.y, mid.z, mid.w) == pytest.approx(
        (expected.x, expected.y, expected.z, expected.w)
    )


def test_look_at_maps_eye_to_origin_and_target_forward():
    eye = Vector3(1.0, 2.0, 3.0)
    target = Vector3(4.0, 6.0, 3.0)
    view = Matrix4.create_look_at(eye, target, Vector3(0.0, 0.0, 1.0))
    _assert_vec_close(transform_vector3(eye, view), (0.0, 0.0, 0.0))
    forward = transform_vector3(target, view)
    assert forward.x == pytest.approx(0.0, abs=1e-9)
    assert forward.y == pytest.approx(0.0, abs=1e-9)
    assert forward.z == pytest.approx((target - eye).length())


def test_ortho_maps_corners():
    ortho = Matrix4.create_ortho(800.0, 600.0, 10.0, 1000.0)
    _assert_vec_close(transform_vector3(Vector3(400.0, 300.0, 10.0), ortho), (1.0, 1.0, 0.0))
    _assert_vec_close(transform_vector3(Vector3(-400.0, -300.0, 1000.0), ortho), (-1.0, -1.0, 1.0))


def test_perspective_depth_range():
    proj = Matrix4.create_perspective_fov(math.pi / 3.0, 800.0, 600.0, 10.0, 1000.0)
    near = transform_with_persp_div(Vector3(0.0, 0.0, 10.0), proj)
    far = transform_with_persp_div(Vector3(0.0, 0.0, 1000.0), proj)
    assert near.z == pytest.approx(0.0, abs=1e-9)
    assert far.z == pytest.approx(1.0)


def test_persp_div_skipped_when_w_near_zero():
    proj = Matrix4.create_perspective_fov(math.pi / 3.0, 800.0, 600.0, 10.0, 1000.0)
    v = Vector3(1.0, 1.0, 0.0)
    _assert_vec_close(transform_with_persp_div(v, proj), transform_vector3(v, proj))


def test_simple_view_proj():
    m = Matrix4.create_simple_view_proj(1024.0, 768.0)
    _assert_vec_close(transform_vector3(Vector3(512.0, 384.0, 0.0), m), (1.0, 1.0, 1.0))


def test_matrix4_inplace_multiply():
    a = Matrix4.create_rotation_x(0.3)
    b = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    expected = a @ b
    a @= b
    _assert_rows_close(a.mat, expected.mat)