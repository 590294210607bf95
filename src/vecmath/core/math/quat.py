"""Quaternion utilities.

Conventions:
- Storage order: [x, y, z, w]
- Unit length is only assumed by the rotation helpers; nothing normalizes
  implicitly.
- Composition: applying q0 then q1 is q = quat_multiply(q1, q0)
- Rotation matrices follow the column-major layout of ``matrix.py``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .scalar import EPSILON, FLOAT, ArrayF, as_float, stack


SLERP_LINEAR_THRESHOLD = 0.9995


def _weight(f: ArrayLike) -> ArrayF:
    return np.asarray(f, dtype=FLOAT)[..., np.newaxis]


def quat_is_zero(q0: ArrayLike) -> np.bool_:
    return np.all(np.abs(as_float(q0, 4)) < EPSILON, axis=-1)


def quat_is_equal(q0: ArrayLike, q1: ArrayLike) -> np.bool_:
    return np.all(np.abs(as_float(q0, 4) - as_float(q1, 4)) < EPSILON, axis=-1)


def quat(x: ArrayLike, y: ArrayLike, z: ArrayLike, w: ArrayLike) -> ArrayF:
    return stack(x, y, z, w, dtype=FLOAT)


def quat_assign(q0: ArrayLike) -> ArrayF:
    return as_float(q0, 4).copy()


def quat_zero() -> ArrayF:
    return np.zeros(4, dtype=FLOAT)


def quat_null() -> ArrayF:
    """Identity rotation (0, 0, 0, 1)."""
    return np.array([0.0, 0.0, 0.0, 1.0], dtype=FLOAT)


def quat_multiply(q0: ArrayLike, q1: ArrayLike) -> ArrayF:
    """Hamilton product of two quaternions (supports broadcasting)."""
    q0 = as_float(q0, 4)
    q1 = as_float(q1, 4)
    x0, y0, z0, w0 = np.split(q0, 4, axis=-1)
    x1, y1, z1, w1 = np.split(q1, 4, axis=-1)
    x = w0 * x1 + x0 * w1 + y0 * z1 - z0 * y1
    y = w0 * y1 + y0 * w1 + z0 * x1 - x0 * z1
    z = w0 * z1 + z0 * w1 + x0 * y1 - y0 * x1
    w = w0 * w1 - x0 * x1 - y0 * y1 - z0 * z1
    return np.concatenate([x, y, z, w], axis=-1)


def quat_multiply_f(q0: ArrayLike, f: ArrayLike) -> ArrayF:
    return as_float(q0, 4) * _weight(f)


def quat_divide(q0: ArrayLike, q1: ArrayLike) -> ArrayF:
    """Return q0 * inverse(q1)."""
    q0 = as_float(q0, 4)
    q1 = as_float(q1, 4)
    x, y, z, w = np.split(q0, 4, axis=-1)
    x1, y1, z1, w1 = np.split(q1, 4, axis=-1)
    ls = x1 * x1 + y1 * y1 + z1 * z1 + w1 * w1
    with np.errstate(divide="ignore", invalid="ignore"):
        nx = -x1 / ls
        ny = -y1 / ls
        nz = -z1 / ls
        nw = w1 / ls
    rx = x * nw + nx * w + (y * nz - z * ny)
    ry = y * nw + ny * w + (z * nx - x * nz)
    rz = z * nw + nz * w + (x * ny - y * nx)
    rw = w * nw - (x * nx + y * ny + z * nz)
    return np.concatenate([rx, ry, rz, rw], axis=-1)


def quat_divide_f(q0: ArrayLike, f: ArrayLike) -> ArrayF:
    with np.errstate(divide="ignore", invalid="ignore"):
        return as_float(q0, 4) / _weight(f)


def quat_negative(q0: ArrayLike) -> ArrayF:
    return -as_float(q0, 4)


def quat_conjugate(q0: ArrayLike) -> ArrayF:
    q0 = as_float(q0, 4)
    xyz = -q0[..., :3]
    w = q0[..., 3:]
    return np.concatenate([xyz, w], axis=-1)


def quat_inverse(q0: ArrayLike) -> ArrayF:
    """Conjugate divided by the squared length."""
    q0 = as_float(q0, 4)
    ls = quat_length_squared(q0)
    with np.errstate(divide="ignore", invalid="ignore"):
        return quat_conjugate(q0) / np.asarray(ls)[..., np.newaxis]


def quat_normalize(q0: ArrayLike) -> ArrayF:
    q0 = as_float(q0, 4)
    with np.errstate(divide="ignore", invalid="ignore"):
        inv = 1.0 / np.sqrt(quat_length_squared(q0))
    return q0 * np.asarray(inv, dtype=FLOAT)[..., np.newaxis]


def quat_dot(q0: ArrayLike, q1: ArrayLike) -> ArrayF:
    return np.sum(as_float(q0, 4) * as_float(q1, 4), axis=-1)


def quat_power(q0: ArrayLike, exponent: ArrayLike) -> ArrayF:
    """Raise a unit quaternion to a real power.

    Near-identity quaternions (|w| >= 1 - EPSILON) are returned unchanged.
    """
    q0 = as_float(q0, 4)
    t = np.asarray(exponent, dtype=FLOAT)
    w = q0[..., 3]
    rotating = np.abs(w) < 1.0 - EPSILON
    with np.errstate(divide="ignore", invalid="ignore"):
        alpha = np.arccos(w)
        new_alpha = alpha * t
        s = np.sin(new_alpha) / np.sin(alpha)
    xyz = q0[..., :3] * np.asarray(s)[..., np.newaxis]
    powered = np.concatenate([xyz, np.asarray(np.cos(new_alpha))[..., np.newaxis]], axis=-1)
    q0, powered = np.broadcast_arrays(q0, powered)
    return np.where(np.asarray(rotating)[..., np.newaxis], powered, q0).astype(
        FLOAT, copy=False
    )


def quat_from_axis_angle(axis: ArrayLike, angle: ArrayLike) -> ArrayF:
    """Create quaternion(s) from axis-angle. The axis is expected to be unit length."""
    axis = as_float(axis, 3)
    half = 0.5 * np.asarray(angle, dtype=FLOAT)
    sin_half = np.sin(half)[..., np.newaxis]
    w = np.cos(half)[..., np.newaxis]
    xyz = axis * sin_half
    xyz, w = np.broadcast_arrays(xyz, w)
    return np.concatenate([xyz, w[..., :1]], axis=-1)


def quat_from_vec3(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Shortest-arc rotation taking direction v0 onto direction v1."""
    a = as_float(v0, 3)
    b = as_float(v1, 3)
    cross = np.cross(a, b)
    d = np.sum(a * b, axis=-1)
    la = np.sum(a * a, axis=-1)
    lb = np.sum(b * b, axis=-1)
    w = np.asarray(d + np.sqrt(la * lb), dtype=FLOAT)[..., np.newaxis]
    cross, w = np.broadcast_arrays(cross, w)
    return quat_normalize(np.concatenate([cross, w[..., :1]], axis=-1))


def _from_rotation(m: ArrayF, n: int) -> ArrayF:
    def r(row: int, col: int) -> ArrayF:
        return m[..., col * n + row]

    r00, r11, r22 = r(0, 0), r(1, 1), r(2, 2)
    trace = r00 + r11 + r22

    with np.errstate(divide="ignore", invalid="ignore"):
        # w largest
        s0 = np.sqrt(trace + 1.0) * 2.0
        b0 = (
            (r(2, 1) - r(1, 2)) / s0,
            (r(0, 2) - r(2, 0)) / s0,
            (r(1, 0) - r(0, 1)) / s0,
            0.25 * s0,
        )
        # x largest
        s1 = np.sqrt(1.0 + r00 - r11 - r22) * 2.0
        b1 = (
            0.25 * s1,
            (r(0, 1) + r(1, 0)) / s1,
            (r(0, 2) + r(2, 0)) / s1,
            (r(2, 1) - r(1, 2)) / s1,
        )
        # y largest
        s2 = np.sqrt(1.0 + r11 - r00 - r22) * 2.0
        b2 = (
            (r(0, 1) + r(1, 0)) / s2,
            0.25 * s2,
            (r(1, 2) + r(2, 1)) / s2,
            (r(0, 2) - r(2, 0)) / s2,
        )
        # z largest
        s3 = np.sqrt(1.0 + r22 - r00 - r11) * 2.0
        b3 = (
            (r(0, 2) + r(2, 0)) / s3,
            (r(1, 2) + r(2, 1)) / s3,
            0.25 * s3,
            (r(1, 0) - r(0, 1)) / s3,
        )

    conditions = [
        trace > 0.0,
        (r00 >= r11) & (r00 >= r22),
        r11 > r22,
    ]
    components = [
        np.select(conditions, [b0[i], b1[i], b2[i]], default=b3[i]) for i in range(4)
    ]
    return stack(*components, dtype=FLOAT)


def quat_from_mat4(m0: ArrayLike) -> ArrayF:
    """Extract the rotation of a column-major 4x4 matrix."""
    return _from_rotation(as_float(m0, 16), 4)


def quat_from_mat3(m0: ArrayLike) -> ArrayF:
    """Extract the rotation of a column-major 3x3 matrix."""
    return _from_rotation(as_float(m0, 9), 3)


def quat_lerp(q0: ArrayLike, q1: ArrayLike, f: ArrayLike) -> ArrayF:
    q0 = as_float(q0, 4)
    q1 = as_float(q1, 4)
    w = _weight(f)
    return np.where(w == 1.0, q1, q0 + (q1 - q0) * w)


def quat_slerp(q0: ArrayLike, q1: ArrayLike, f: ArrayLike) -> ArrayF:
    """Spherical interpolation along the shorter arc.

    Nearly parallel inputs fall back to linear weights.
    """
    q0 = as_float(q0, 4)
    q1 = as_float(q1, 4)
    f = np.asarray(f, dtype=FLOAT)
    d = np.sum(q0 * q1, axis=-1)
    flip = d < 0.0
    q1 = np.where(flip[..., np.newaxis], -q1, q1)
    d = np.where(flip, -d, d)

    with np.errstate(divide="ignore", invalid="ignore"):
        theta = np.arccos(d)
        sin_theta = np.sin(theta)
        f0 = np.sin((1.0 - f) * theta) / sin_theta
        f1 = np.sin(f * theta) / sin_theta
    linear = d > SLERP_LINEAR_THRESHOLD
    f0 = np.where(linear, 1.0 - f, f0)
    f1 = np.where(linear, f, f1)
    return (q0 * f0[..., np.newaxis] + q1 * f1[..., np.newaxis]).astype(FLOAT, copy=False)


def quat_length(q0: ArrayLike) -> ArrayF:
    return np.sqrt(quat_length_squared(q0))


def quat_length_squared(q0: ArrayLike) -> ArrayF:
    q0 = as_float(q0, 4)
    return np.sum(q0 * q0, axis=-1)


def quat_angle(q0: ArrayLike, q1: ArrayLike) -> ArrayF:
    """Angle between two quaternions as 4D vectors."""
    q0 = as_float(q0, 4)
    q1 = as_float(q1, 4)
    s = np.sqrt(quat_length_squared(q0) * quat_length_squared(q1))
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.arccos(quat_dot(q0, q1) / s)
