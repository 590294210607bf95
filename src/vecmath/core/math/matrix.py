"""Matrix utilities for 2x2, 3x3 and 4x4 matrices.

Conventions:
- Matrices are flat arrays shaped (..., N*N) in column-major order: element
  (row r, column c) lives at index c*N + r.
- Constructors take their arguments in row-major reading order.
- Rotation builders start from the identity.
- Inverting a singular matrix yields inf/NaN without warnings.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .scalar import FLOAT, ArrayF, as_float, stack
from .vector import vec3_cross, vec3_dot, vec3_normalize, vec3_subtract


def _square(m: ArrayF, n: int) -> ArrayF:
    """View flat column-major storage as (..., n, n) indexed [row, col]."""
    return np.swapaxes(m.reshape(m.shape[:-1] + (n, n)), -1, -2)


def _flat(a: ArrayF) -> ArrayF:
    n = a.shape[-1]
    return np.swapaxes(a, -1, -2).reshape(a.shape[:-2] + (n * n,))


def _from_rows(n: int, values: tuple[ArrayLike, ...]) -> ArrayF:
    rows = stack(*values, dtype=FLOAT)
    return _flat(rows.reshape(rows.shape[:-1] + (n, n)))


def _identity(n: int, shape: tuple[int, ...] = ()) -> ArrayF:
    eye = np.eye(n, dtype=FLOAT).reshape(n * n)
    return np.broadcast_to(eye, shape + (n * n,)).copy()


def _det(a: ArrayF) -> ArrayF:
    n = a.shape[-1]
    if n == 1:
        return a[..., 0, 0]
    if n == 2:
        return a[..., 0, 0] * a[..., 1, 1] - a[..., 0, 1] * a[..., 1, 0]
    # Laplace expansion along the first row
    total = np.zeros(a.shape[:-2], dtype=a.dtype)
    for c in range(n):
        minor = np.delete(a[..., 1:, :], c, axis=-1)
        sign = 1.0 if c % 2 == 0 else -1.0
        total = total + sign * a[..., 0, c] * _det(minor)
    return total


def _cofactor(a: ArrayF) -> ArrayF:
    n = a.shape[-1]
    rows = []
    for r in range(n):
        row = []
        for c in range(n):
            minor = np.delete(np.delete(a, r, axis=-2), c, axis=-1)
            sign = 1.0 if (r + c) % 2 == 0 else -1.0
            row.append(sign * _det(minor))
        rows.append(np.stack(row, axis=-1))
    return np.stack(rows, axis=-2)


def _determinant(m: ArrayLike, n: int) -> ArrayF:
    return _det(_square(as_float(m, n * n), n))


def _transpose(m: ArrayLike, n: int) -> ArrayF:
    return _flat(np.swapaxes(_square(as_float(m, n * n), n), -1, -2))


def _cofactor_flat(m: ArrayLike, n: int) -> ArrayF:
    return _flat(_cofactor(_square(as_float(m, n * n), n)))


def _multiply(m0: ArrayLike, m1: ArrayLike, n: int) -> ArrayF:
    a = _square(as_float(m0, n * n), n)
    b = _square(as_float(m1, n * n), n)
    return _flat(np.matmul(a, b))


def _inverse(m: ArrayLike, n: int) -> ArrayF:
    a = _square(as_float(m, n * n), n)
    adjugate = np.swapaxes(_cofactor(a), -1, -2)
    with np.errstate(divide="ignore", invalid="ignore"):
        inv = adjugate / _det(a)[..., np.newaxis, np.newaxis]
    return _flat(inv)


def _lerp(m0: ArrayLike, m1: ArrayLike, f: ArrayLike, n: int) -> ArrayF:
    a = as_float(m0, n * n)
    b = as_float(m1, n * n)
    w = np.asarray(f, dtype=FLOAT)[..., np.newaxis]
    return np.where(w == 1.0, b, a + (b - a) * w)


def _broadcast_into(m: ArrayF, v: ArrayF) -> ArrayF:
    shape = np.broadcast_shapes(m.shape[:-1], v.shape[:-1])
    return np.broadcast_to(m, shape + m.shape[-1:]).copy()


def _scale_diagonal(m: ArrayLike, v: ArrayLike, n: int) -> ArrayF:
    m = as_float(m, n * n)
    v = as_float(v, n)
    out = _broadcast_into(m, v)
    for i in range(n):
        out[..., i * n + i] *= v[..., i]
    return out


def _rotation(n: int, angle: ArrayLike, slots: tuple[int, int, int, int]) -> ArrayF:
    """Place cos/sin at the given (cos, sin, -sin, cos) storage slots."""
    angle = np.asarray(angle, dtype=FLOAT)
    c = np.cos(angle)
    s = np.sin(angle)
    out = _identity(n, angle.shape)
    out[..., slots[0]] = c
    out[..., slots[1]] = s
    out[..., slots[2]] = -s
    out[..., slots[3]] = c
    return out


def _axis_angle_block(axis: ArrayLike, angle: ArrayLike) -> list[ArrayF]:
    """The nine rotation entries in storage order; the axis need not be unit."""
    axis = as_float(axis, 3)
    angle = np.asarray(angle, dtype=FLOAT)
    c = np.cos(angle)
    s = np.sin(angle)
    one_c = 1.0 - c
    x = axis[..., 0]
    y = axis[..., 1]
    z = axis[..., 2]
    xx = x * x
    yy = y * y
    zz = z * z
    xy = x * y
    xz = x * z
    yz = y * z
    l = xx + yy + zz
    sl = np.sqrt(l) * s
    with np.errstate(divide="ignore", invalid="ignore"):
        return [
            (xx + (yy + zz) * c) / l,
            (xy * one_c + z * sl) / l,
            (xz * one_c - y * sl) / l,
            (xy * one_c - z * sl) / l,
            (yy + (xx + zz) * c) / l,
            (yz * one_c + x * sl) / l,
            (xz * one_c + y * sl) / l,
            (yz * one_c - x * sl) / l,
            (zz + (xx + yy) * c) / l,
        ]


def _quat_block(q: ArrayLike) -> list[ArrayF]:
    q = as_float(q, 4)
    x = q[..., 0]
    y = q[..., 1]
    z = q[..., 2]
    w = q[..., 3]
    xx = x * x
    yy = y * y
    zz = z * z
    xy = x * y
    xz = x * z
    yz = y * z
    xw = x * w
    yw = y * w
    zw = z * w
    return [
        1.0 - 2.0 * (yy + zz),
        2.0 * (xy + zw),
        2.0 * (xz - yw),
        2.0 * (xy - zw),
        1.0 - 2.0 * (xx + zz),
        2.0 * (yz + xw),
        2.0 * (xz + yw),
        2.0 * (yz - xw),
        1.0 - 2.0 * (xx + yy),
    ]


def _embed3(block: list[ArrayF]) -> ArrayF:
    """Embed nine 3x3 entries into the upper-left of a 4x4 identity."""
    b = stack(*block, dtype=FLOAT)
    out = _identity(4, b.shape[:-1])
    out[..., 0:3] = b[..., 0:3]
    out[..., 4:7] = b[..., 3:6]
    out[..., 8:11] = b[..., 6:9]
    return out


# ---------------------------------------------------------------------------
# mat2
# ---------------------------------------------------------------------------


def mat2(m11: ArrayLike, m12: ArrayLike, m21: ArrayLike, m22: ArrayLike) -> ArrayF:
    return _from_rows(2, (m11, m12, m21, m22))


def mat2_zero() -> ArrayF:
    return np.zeros(4, dtype=FLOAT)


def mat2_identity() -> ArrayF:
    return _identity(2)


def mat2_determinant(m0: ArrayLike) -> ArrayF:
    m = as_float(m0, 4)
    return m[..., 0] * m[..., 3] - m[..., 2] * m[..., 1]


def mat2_assign(m0: ArrayLike) -> ArrayF:
    return as_float(m0, 4).copy()


def mat2_negative(m0: ArrayLike) -> ArrayF:
    return -as_float(m0, 4)


def mat2_transpose(m0: ArrayLike) -> ArrayF:
    return _transpose(m0, 2)


def mat2_cofactor(m0: ArrayLike) -> ArrayF:
    m = as_float(m0, 4)
    return stack(m[..., 3], -m[..., 2], -m[..., 1], m[..., 0])


def mat2_adjugate(m0: ArrayLike) -> ArrayF:
    m = as_float(m0, 4)
    return stack(m[..., 3], -m[..., 1], -m[..., 2], m[..., 0])


def mat2_multiply(m0: ArrayLike, m1: ArrayLike) -> ArrayF:
    return _multiply(m0, m1, 2)


def mat2_multiply_f(m0: ArrayLike, f: ArrayLike) -> ArrayF:
    return as_float(m0, 4) * np.asarray(f, dtype=FLOAT)[..., np.newaxis]


def mat2_inverse(m0: ArrayLike) -> ArrayF:
    """Adjugate divided by the determinant."""
    m = as_float(m0, 4)
    with np.errstate(divide="ignore", invalid="ignore"):
        return mat2_adjugate(m) / np.asarray(mat2_determinant(m))[..., np.newaxis]


def mat2_scaling(v0: ArrayLike) -> ArrayF:
    v = as_float(v0, 2)
    out = _identity(2, v.shape[:-1])
    out[..., 0] = v[..., 0]
    out[..., 3] = v[..., 1]
    return out


def mat2_scale(m0: ArrayLike, v0: ArrayLike) -> ArrayF:
    return _scale_diagonal(m0, v0, 2)


def mat2_rotation_z(angle: ArrayLike) -> ArrayF:
    return _rotation(2, angle, (0, 1, 2, 3))


def mat2_lerp(m0: ArrayLike, m1: ArrayLike, f: ArrayLike) -> ArrayF:
    return _lerp(m0, m1, f, 2)


# ---------------------------------------------------------------------------
# mat3
# ---------------------------------------------------------------------------


def mat3(
    m11: ArrayLike, m12: ArrayLike, m13: ArrayLike,
    m21: ArrayLike, m22: ArrayLike, m23: ArrayLike,
    m31: ArrayLike, m32: ArrayLike, m33: ArrayLike,
) -> ArrayF:
    return _from_rows(3, (m11, m12, m13, m21, m22, m23, m31, m32, m33))


def mat3_zero() -> ArrayF:
    return np.zeros(9, dtype=FLOAT)


def mat3_identity() -> ArrayF:
    return _identity(3)


def mat3_determinant(m0: ArrayLike) -> ArrayF:
    return _determinant(m0, 3)


def mat3_assign(m0: ArrayLike) -> ArrayF:
    return as_float(m0, 9).copy()


def mat3_negative(m0: ArrayLike) -> ArrayF:
    return -as_float(m0, 9)


def mat3_transpose(m0: ArrayLike) -> ArrayF:
    return _transpose(m0, 3)


def mat3_cofactor(m0: ArrayLike) -> ArrayF:
    return _cofactor_flat(m0, 3)


def mat3_multiply(m0: ArrayLike, m1: ArrayLike) -> ArrayF:
    return _multiply(m0, m1, 3)


def mat3_multiply_f(m0: ArrayLike, f: ArrayLike) -> ArrayF:
    return as_float(m0, 9) * np.asarray(f, dtype=FLOAT)[..., np.newaxis]


def mat3_inverse(m0: ArrayLike) -> ArrayF:
    return _inverse(m0, 3)


def mat3_scaling(v0: ArrayLike) -> ArrayF:
    v = as_float(v0, 3)
    out = _identity(3, v.shape[:-1])
    out[..., 0] = v[..., 0]
    out[..., 4] = v[..., 1]
    out[..., 8] = v[..., 2]
    return out


def mat3_scale(m0: ArrayLike, v0: ArrayLike) -> ArrayF:
    return _scale_diagonal(m0, v0, 3)


def mat3_rotation_x(angle: ArrayLike) -> ArrayF:
    return _rotation(3, angle, (4, 5, 7, 8))


def mat3_rotation_y(angle: ArrayLike) -> ArrayF:
    return _rotation(3, angle, (0, 6, 2, 8))


def mat3_rotation_z(angle: ArrayLike) -> ArrayF:
    return _rotation(3, angle, (0, 1, 3, 4))


def mat3_rotation_axis(axis: ArrayLike, angle: ArrayLike) -> ArrayF:
    return stack(*_axis_angle_block(axis, angle), dtype=FLOAT)


def mat3_rotation_quat(q0: ArrayLike) -> ArrayF:
    return stack(*_quat_block(q0), dtype=FLOAT)


def mat3_lerp(m0: ArrayLike, m1: ArrayLike, f: ArrayLike) -> ArrayF:
    return _lerp(m0, m1, f, 3)


# ---------------------------------------------------------------------------
# mat4
# ---------------------------------------------------------------------------


def mat4(
    m11: ArrayLike, m12: ArrayLike, m13: ArrayLike, m14: ArrayLike,
    m21: ArrayLike, m22: ArrayLike, m23: ArrayLike, m24: ArrayLike,
    m31: ArrayLike, m32: ArrayLike, m33: ArrayLike, m34: ArrayLike,
    m41: ArrayLike, m42: ArrayLike, m43: ArrayLike, m44: ArrayLike,
) -> ArrayF:
    return _from_rows(
        4,
        (
            m11, m12, m13, m14,
            m21, m22, m23, m24,
            m31, m32, m33, m34,
            m41, m42, m43, m44,
        ),
    )


def mat4_zero() -> ArrayF:
    return np.zeros(16, dtype=FLOAT)


def mat4_identity() -> ArrayF:
    return _identity(4)


def mat4_determinant(m0: ArrayLike) -> ArrayF:
    return _determinant(m0, 4)


def mat4_assign(m0: ArrayLike) -> ArrayF:
    return as_float(m0, 16).copy()


def mat4_negative(m0: ArrayLike) -> ArrayF:
    return -as_float(m0, 16)


def mat4_transpose(m0: ArrayLike) -> ArrayF:
    return _transpose(m0, 4)


def mat4_cofactor(m0: ArrayLike) -> ArrayF:
    return _cofactor_flat(m0, 4)


def mat4_multiply(m0: ArrayLike, m1: ArrayLike) -> ArrayF:
    return _multiply(m0, m1, 4)


def mat4_multiply_f(m0: ArrayLike, f: ArrayLike) -> ArrayF:
    return as_float(m0, 16) * np.asarray(f, dtype=FLOAT)[..., np.newaxis]


def mat4_inverse(m0: ArrayLike) -> ArrayF:
    return _inverse(m0, 4)


def mat4_rotation_x(angle: ArrayLike) -> ArrayF:
    return _rotation(4, angle, (5, 6, 9, 10))


def mat4_rotation_y(angle: ArrayLike) -> ArrayF:
    return _rotation(4, angle, (0, 8, 2, 10))


def mat4_rotation_z(angle: ArrayLike) -> ArrayF:
    return _rotation(4, angle, (0, 1, 4, 5))


def mat4_rotation_axis(axis: ArrayLike, angle: ArrayLike) -> ArrayF:
    return _embed3(_axis_angle_block(axis, angle))


def mat4_rotation_quat(q0: ArrayLike) -> ArrayF:
    return _embed3(_quat_block(q0))


def mat4_translation(m0: ArrayLike, v0: ArrayLike) -> ArrayF:
    """Copy of m0 with its translation column replaced by v0."""
    m = as_float(m0, 16)
    v = as_float(v0, 3)
    out = _broadcast_into(m, v)
    out[..., 12:15] = v
    return out


def mat4_translate(m0: ArrayLike, v0: ArrayLike) -> ArrayF:
    m = as_float(m0, 16)
    v = as_float(v0, 3)
    out = _broadcast_into(m, v)
    out[..., 12:15] += v
    return out


def mat4_scaling(m0: ArrayLike, v0: ArrayLike) -> ArrayF:
    """Copy of m0 with its diagonal scale entries replaced by v0."""
    m = as_float(m0, 16)
    v = as_float(v0, 3)
    out = _broadcast_into(m, v)
    out[..., 0] = v[..., 0]
    out[..., 5] = v[..., 1]
    out[..., 10] = v[..., 2]
    return out


def mat4_scale(m0: ArrayLike, v0: ArrayLike) -> ArrayF:
    m = as_float(m0, 16)
    v = as_float(v0, 3)
    out = _broadcast_into(m, v)
    out[..., 0] *= v[..., 0]
    out[..., 5] *= v[..., 1]
    out[..., 10] *= v[..., 2]
    return out


def mat4_look_at(position: ArrayLike, target: ArrayLike, up: ArrayLike) -> ArrayF:
    """Right-handed view matrix looking from position toward target."""
    position = as_float(position, 3)
    f = vec3_normalize(vec3_subtract(target, position))
    s = vec3_normalize(vec3_cross(f, up))
    u = vec3_cross(s, f)
    shape = np.broadcast_shapes(f.shape[:-1], s.shape[:-1], position.shape[:-1])
    out = np.zeros(shape + (16,), dtype=FLOAT)
    out[..., 0] = s[..., 0]
    out[..., 1] = u[..., 0]
    out[..., 2] = -f[..., 0]
    out[..., 4] = s[..., 1]
    out[..., 5] = u[..., 1]
    out[..., 6] = -f[..., 1]
    out[..., 8] = s[..., 2]
    out[..., 9] = u[..., 2]
    out[..., 10] = -f[..., 2]
    out[..., 12] = -vec3_dot(s, position)
    out[..., 13] = -vec3_dot(u, position)
    out[..., 14] = vec3_dot(f, position)
    out[..., 15] = 1.0
    return out


def mat4_ortho(
    l: ArrayLike, r: ArrayLike, b: ArrayLike, t: ArrayLike, n: ArrayLike, f: ArrayLike
) -> ArrayF:
    l, r, b, t, n, f = np.broadcast_arrays(*(np.asarray(x, dtype=FLOAT) for x in (l, r, b, t, n, f)))
    out = np.zeros(l.shape + (16,), dtype=FLOAT)
    with np.errstate(divide="ignore", invalid="ignore"):
        out[..., 0] = 2.0 / (r - l)
        out[..., 5] = 2.0 / (t - b)
        out[..., 10] = -2.0 / (f - n)
        out[..., 12] = -((r + l) / (r - l))
        out[..., 13] = -((t + b) / (t - b))
        out[..., 14] = -((f + n) / (f - n))
    out[..., 15] = 1.0
    return out


def mat4_perspective(fov_y: ArrayLike, aspect: ArrayLike, n: ArrayLike, f: ArrayLike) -> ArrayF:
    fov_y, aspect, n, f = np.broadcast_arrays(
        *(np.asarray(x, dtype=FLOAT) for x in (fov_y, aspect, n, f))
    )
    out = np.zeros(fov_y.shape + (16,), dtype=FLOAT)
    with np.errstate(divide="ignore", invalid="ignore"):
        cot_half = 1.0 / np.tan(fov_y * 0.5)
        out[..., 0] = cot_half / aspect
        out[..., 5] = cot_half
        out[..., 10] = f / (n - f)
        out[..., 14] = -(f * n) / (f - n)
    out[..., 11] = -1.0
    return out


def mat4_perspective_fov(
    fov: ArrayLike, w: ArrayLike, h: ArrayLike, n: ArrayLike, f: ArrayLike
) -> ArrayF:
    fov, w, h, n, f = np.broadcast_arrays(*(np.asarray(x, dtype=FLOAT) for x in (fov, w, h, n, f)))
    out = np.zeros(fov.shape + (16,), dtype=FLOAT)
    with np.errstate(divide="ignore", invalid="ignore"):
        h2 = np.cos(fov * 0.5) / np.sin(fov * 0.5)
        w2 = h2 * h / w
        out[..., 0] = w2
        out[..., 5] = h2
        out[..., 10] = f / (n - f)
        out[..., 14] = -(f * n) / (f - n)
    out[..., 11] = -1.0
    return out


def mat4_perspective_infinite(fov_y: ArrayLike, aspect: ArrayLike, n: ArrayLike) -> ArrayF:
    fov_y, aspect, n = np.broadcast_arrays(*(np.asarray(x, dtype=FLOAT) for x in (fov_y, aspect, n)))
    out = np.zeros(fov_y.shape + (16,), dtype=FLOAT)
    extent = np.tan(fov_y * 0.5) * n
    with np.errstate(divide="ignore", invalid="ignore"):
        out[..., 0] = 2.0 * n / (2.0 * extent * aspect)
        out[..., 5] = 2.0 * n / (2.0 * extent)
    out[..., 10] = -1.0
    out[..., 11] = -1.0
    out[..., 14] = -2.0 * n
    return out


def mat4_lerp(m0: ArrayLike, m1: ArrayLike, f: ArrayLike) -> ArrayF:
    return _lerp(m0, m1, f, 4)
