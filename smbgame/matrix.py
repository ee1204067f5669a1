"""Matrices, quaternions and the vector transforms that use them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from .gmath import Vector2, Vector3, lerp, near_zero

Rows = List[List[float]]


def _identity(size: int) -> Rows:
    return [[1.0 if row == col else 0.0 for col in range(size)] for row in range(size)]


def _checked_copy(rows, size: int) -> Rows:
    copied = [[float(value) for value in row] for row in rows]
    if len(copied) != size or any(len(row) != size for row in copied):
        raise ValueError(f"expected a {size}x{size} matrix")
    return copied


def _multiply(left: Rows, right: Rows) -> Rows:
    columns = list(zip(*right))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in left]


def _det3(m: Rows) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def _minor(m: Rows, skip_row: int, skip_col: int) -> Rows:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(m)
        if r != skip_row
    ]


def _cot(angle: float) -> float:
    return 1.0 / math.tan(angle)


@dataclass
class Matrix3:
    """A 3x3 row-major matrix for 2D transforms; defaults to identity."""

    mat: Rows = field(default_factory=lambda: _identity(3))

    def __post_init__(self) -> None:
        self.mat = _checked_copy(self.mat, 3)

    def __matmul__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3(_multiply(self.mat, other.mat))

    def __imatmul__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        self.mat = _multiply(self.mat, other.mat)
        return self

    @staticmethod
    def create_scale(x_scale: float, y_scale: float) -> Matrix3:
        """Scale matrix with separate x and y factors."""
        return Matrix3([[x_scale, 0.0, 0.0], [0.0, y_scale, 0.0], [0.0, 0.0, 1.0]])

    @staticmethod
    def create_uniform_scale(scale: float) -> Matrix3:
        """Scale matrix with the same factor on both axes."""
        return Matrix3.create_scale(scale, scale)

    @staticmethod
    def create_rotation(theta: float) -> Matrix3:
        """Rotation about the Z axis by ``theta`` radians."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix3([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])

    @staticmethod
    def create_translation(trans: Vector2) -> Matrix3:
        """Translation on the xy-plane."""
        return Matrix3([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [trans.x, trans.y, 1.0]])


@dataclass
class Matrix4:
    """A 4x4 row-major matrix for 3D transforms; defaults to identity."""

    mat: Rows = field(default_factory=lambda: _identity(4))

    def __post_init__(self) -> None:
        self.mat = _checked_copy(self.mat, 4)

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(_multiply(self.mat, other.mat))

    def __imatmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        self.mat = _multiply(self.mat, other.mat)
        return self

    def invert(self) -> None:
        """Invert this matrix in place.

        Raises ValueError if the matrix is singular.
        """
        m = self.mat
        cofactors = [
            [(-1.0) ** (r + c) * _det3(_minor(m, r, c)) for c in range(4)]
            for r in range(4)
        ]
        det = sum(m[0][c] * cofactors[0][c] for c in range(4))
        if det == 0.0:
            raise ValueError("matrix is singular")
        inv_det = 1.0 / det
        self.mat = [[cofactors[c][r] * inv_det for c in range(4)] for r in range(4)]

    def inverted(self) -> Matrix4:
        """Return the inverse, leaving this matrix unchanged."""
        result = Matrix4(self.mat)
        result.invert()
        return result

    def get_translation(self) -> Vector3:
        """Translation component of the matrix."""
        return Vector3(self.mat[3][0], self.mat[3][1], self.mat[3][2])

    def get_x_axis(self) -> Vector3:
        """Normalized X axis (forward)."""
        return Vector3(*self.mat[0][:3]).normalized()

    def get_y_axis(self) -> Vector3:
        """Normalized Y axis (left)."""
        return Vector3(*self.mat[1][:3]).normalized()

    def get_z_axis(self) -> Vector3:
        """Normalized Z axis (up)."""
        return Vector3(*self.mat[2][:3]).normalized()

    def get_scale(self) -> Vector3:
        """Scale component of the matrix."""
        return Vector3(
            Vector3(*self.mat[0][:3]).length(),
            Vector3(*self.mat[1][:3]).length(),
            Vector3(*self.mat[2][:3]).length(),
        )

    @staticmethod
    def create_scale(x_scale: float, y_scale: float, z_scale: float) -> Matrix4:
        """Scale matrix with separate factors per axis."""
        return Matrix4(
            [
                [x_scale, 0.0, 0.0, 0.0],
                [0.0, y_scale, 0.0, 0.0],
                [0.0, 0.0, z_scale, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_uniform_scale(scale: float) -> Matrix4:
        """Scale matrix with the same factor on every axis."""
        return Matrix4.create_scale(scale, scale, scale)

    @staticmethod
    def create_rotation_x(theta: float) -> Matrix4:
        """Rotation about the X axis."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, s, 0.0],
                [0.0, -s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_rotation_y(theta: float) -> Matrix4:
        """Rotation about the Y axis."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            [
                [c, 0.0, -s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_rotation_z(theta: float) -> Matrix4:
        """Rotation about the Z axis."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            [
                [c, s, 0.0, 0.0],
                [-s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_from_quaternion(q: Quaternion) -> Matrix4:
        """Rotation matrix equivalent to the quaternion ``q``."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return Matrix4(
            [
                [1.0 - 2.0 * y * y - 2.0 * z * z, 2.0 * x * y + 2.0 * w * z,
                 2.0 * x * z - 2.0 * w * y, 0.0],
                [2.0 * x * y - 2.0 * w * z, 1.0 - 2.0 * x * x - 2.0 * z * z,
                 2.0 * y * z + 2.0 * w * x, 0.0],
                [2.0 * x * z + 2.0 * w * y, 2.0 * y * z - 2.0 * w * x,
                 1.0 - 2.0 * x * x - 2.0 * y * y, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_translation(trans: Vector3) -> Matrix4:
        """Translation matrix."""
        return Matrix4(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [trans.x, trans.y, trans.z, 1.0],
            ]
        )

    @staticmethod
    def create_look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """View matrix looking from ``eye`` towards ``target``."""
        zaxis = (target - eye).normalized()
        xaxis = Vector3.cross(up, zaxis).normalized()
        yaxis = Vector3.cross(zaxis, xaxis).normalized()
        trans = Vector3(
            -Vector3.dot(xaxis, eye),
            -Vector3.dot(yaxis, eye),
            -Vector3.dot(zaxis, eye),
        )
        return Matrix4(
            [
                [xaxis.x, yaxis.x, zaxis.x, 0.0],
                [xaxis.y, yaxis.y, zaxis.y, 0.0],
                [xaxis.z, yaxis.z, zaxis.z, 0.0],
                [trans.x, trans.y, trans.z, 1.0],
            ]
        )

    @staticmethod
    def create_ortho(width: float, height: float, near: float, far: float) -> Matrix4:
        """Orthographic projection matrix."""
        return Matrix4(
            [
                [2.0 / width, 0.0, 0.0, 0.0],
                [0.0, 2.0 / height, 0.0, 0.0],
                [0.0, 0.0, 1.0 / (far - near), 0.0],
                [0.0, 0.0, near / (near - far), 1.0],
            ]
        )

    @staticmethod
    def create_perspective_fov(
        fov_y: float, width: float, height: float, near: float, far: float
    ) -> Matrix4:
        """Perspective projection matrix from a vertical field of view."""
        y_scale = _cot(fov_y / 2.0)
        x_scale = y_scale * height / width
        return Matrix4(
            [
                [x_scale, 0.0, 0.0, 0.0],
                [0.0, y_scale, 0.0, 0.0],
                [0.0, 0.0, far / (far - near), 1.0],
                [0.0, 0.0, -near * far / (far - near), 0.0],
            ]
        )

    @staticmethod
    def create_simple_view_proj(width: float, height: float) -> Matrix4:
        """Simple combined view-projection matrix."""
        return Matrix4(
            [
                [2.0 / width, 0.0, 0.0, 0.0],
                [0.0, 2.0 / height, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 1.0, 1.0],
            ]
        )


@dataclass
class Quaternion:
    """A rotation quaternion; defaults to identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Build from a normalized axis and an angle in radians."""
        scalar = math.sin(angle / 2.0)
        return cls(axis.x * scalar, axis.y * scalar, axis.z * scalar, math.cos(angle / 2.0))

    def set(self, x: float, y: float, z: float, w: float) -> None:
        """Set all components directly."""
        self.x, self.y, self.z, self.w = x, y, z, w

    def conjugate(self) -> None:
        """Negate the vector part in place."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def length_sq(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        """Length."""
        return math.sqrt(self.length_sq())

    def normalize(self) -> None:
        """Scale to unit length in place; raises ZeroDivisionError if zero."""
        size = self.length()
        self.x /= size
        self.y /= size
        self.z /= size
        self.w /= size

    def normalized(self) -> Quaternion:
        """Return a unit-length copy."""
        result = Quaternion(self.x, self.y, self.z, self.w)
        result.normalize()
        return result

    @staticmethod
    def lerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Component-wise interpolation, normalized."""
        result = Quaternion(
            lerp(a.x, b.x, f), lerp(a.y, b.y, f), lerp(a.z, b.z, f), lerp(a.w, b.w, f)
        )
        result.normalize()
        return result

    @staticmethod
    def dot(a: Quaternion, b: Quaternion) -> float:
        """Four-component dot product."""
        return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w

    @staticmethod
    def slerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Spherical linear interpolation from ``a`` to ``b``."""
        raw_cosm = Quaternion.dot(a, b)
        cosom = raw_cosm if raw_cosm >= 0.0 else -raw_cosm
        if cosom < 0.9999:
            omega = math.acos(cosom)
            inv_sin = 1.0 / math.sin(omega)
            scale0 = math.sin((1.0 - f) * omega) * inv_sin
            scale1 = math.sin(f * omega) * inv_sin
        else:
            scale0 = 1.0 - f
            scale1 = f
        if raw_cosm < 0.0:
            scale1 = -scale1
        result = Quaternion(
            scale0 * a.x + scale1 * b.x,
            scale0 * a.y + scale1 * b.y,
            scale0 * a.z + scale1 * b.z,
            scale0 * a.w + scale1 * b.w,
        )
        result.normalize()
        return result

    @staticmethod
    def concatenate(q: Quaternion, p: Quaternion) -> Quaternion:
        """Rotation by ``q`` followed by ``p``."""
        qv = Vector3(q.x, q.y, q.z)
        pv = Vector3(p.x, p.y, p.z)
        new_vec = p.w * qv + q.w * pv + Vector3.cross(pv, qv)
        return Quaternion(new_vec.x, new_vec.y, new_vec.z, p.w * q.w - Vector3.dot(pv, qv))


def transform_vector2(vec: Vector2, mat: Matrix3, w: float = 1.0) -> Vector2:
    """Transform a 2D vector by a 3x3 matrix, treating it as ``(x, y, w)``."""
    m = mat.mat
    return Vector2(
        vec.x * m[0][0] + vec.y * m[1][0] + w * m[2][0],
        vec.x * m[0][1] + vec.y * m[1][1] + w * m[2][1],
    )


def _transform_xyzw(vec: Vector3, mat: Matrix4, w: float) -> tuple:
    row = (vec.x, vec.y, vec.z, w)
    return tuple(sum(a * mat.mat[r][c] for r, a in enumerate(row)) for c in range(4))


def transform_vector3(vec: Vector3, mat: Matrix4, w: float = 1.0) -> Vector3:
    """Transform a 3D vector by a 4x4 matrix, dropping the resulting w."""
    x, y, z, _ = _transform_xyzw(vec, mat, w)
    return Vector3(x, y, z)


def transform_with_persp_div(vec: Vector3, mat: Matrix4, w: float = 1.0) -> Vector3:
    """Transform a 3D vector and divide by the resulting w unless it is near zero."""
    x, y, z, tw = _transform_xyzw(vec, mat, w)
    result = Vector3(x, y, z)
    if not near_zero(abs(tw)):
        result = result * (1.0 / tw)
    return result


def rotate_by_quaternion(v: Vector3, q: Quaternion) -> Vector3:
    """Rotate ``v`` by the quaternion ``q``."""
    qv = Vector3(q.x, q.y, q.z)
    return v + 2.0 * Vector3.cross(qv, Vector3.cross(qv, v) + q.w * v)