"""Floating point vector utilities.

All vectors are arrays shaped (..., N) with N in {2, 3, 4}; leading axes
broadcast. Functions return new arrays and never write into their inputs,
with one exception: ``vec3_rotate`` normalizes its axis argument in place.

Degenerate input is not guarded: normalizing a zero vector or dividing by
zero yields inf/NaN without warnings.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from .scalar import EPSILON, FLOAT, ArrayF, as_float, stack


logger = logging.getLogger(__name__)


def _weight(f: ArrayLike) -> ArrayF:
    return np.asarray(f, dtype=FLOAT)[..., np.newaxis]


def _is_zero(v: ArrayF) -> np.bool_:
    return np.all(np.abs(v) < EPSILON, axis=-1)


def _is_equal(a: ArrayF, b: ArrayF) -> np.bool_:
    return np.all(np.abs(a - b) < EPSILON, axis=-1)


def _divide(a: ArrayF, b: ArrayLike) -> ArrayF:
    with np.errstate(divide="ignore", invalid="ignore"):
        return a / b


def _snap(a: ArrayF, b: ArrayLike) -> ArrayF:
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.floor(a / b) * b


def _round(v: ArrayF) -> ArrayF:
    # Half away from zero; v - trunc(v) is exact.
    t = np.trunc(v)
    return t + np.where(np.abs(v - t) >= 0.5, np.sign(v), 0.0).astype(v.dtype)


def _clamp(v: ArrayF, lower: ArrayF, upper: ArrayF) -> ArrayF:
    return np.fmin(np.fmax(v, lower), upper)


def _dot(a: ArrayF, b: ArrayF) -> ArrayF:
    return np.sum(a * b, axis=-1)


def _length(v: ArrayF) -> ArrayF:
    return np.sqrt(_dot(v, v))


def _normalize(v: ArrayF) -> ArrayF:
    with np.errstate(divide="ignore", invalid="ignore"):
        return v / _length(v)[..., np.newaxis]


def _distance_squared(a: ArrayF, b: ArrayF) -> ArrayF:
    d = a - b
    return _dot(d, d)


def _project(v: ArrayF, onto: ArrayF) -> ArrayF:
    with np.errstate(divide="ignore", invalid="ignore"):
        s = _dot(v, onto) / _dot(onto, onto)
    return onto * s[..., np.newaxis]


def _slide(v: ArrayF, normal: ArrayF) -> ArrayF:
    d = _dot(v, normal)[..., np.newaxis]
    return v - normal * d


def _reflect(v: ArrayF, normal: ArrayF) -> ArrayF:
    d = 2.0 * _dot(v, normal)[..., np.newaxis]
    return normal * d - v


def _lerp(a: ArrayF, b: ArrayF, f: ArrayLike) -> ArrayF:
    w = _weight(f)
    # b is returned exactly at w == 1
    return np.where(w == 1.0, b, a + (b - a) * w)


def _bilinear(
    v0: ArrayF, v1: ArrayF, v2: ArrayF, v3: ArrayF, u: ArrayLike, v: ArrayLike
) -> ArrayF:
    return _lerp(_lerp(v0, v1, u), _lerp(v2, v3, u), v)


def _bezier3(v0: ArrayF, v1: ArrayF, v2: ArrayF, f: ArrayLike) -> ArrayF:
    return _lerp(_lerp(v0, v1, f), _lerp(v1, v2, f), f)


def _bezier4(v0: ArrayF, v1: ArrayF, v2: ArrayF, v3: ArrayF, f: ArrayLike) -> ArrayF:
    t0 = _lerp(v0, v1, f)
    t1 = _lerp(v1, v2, f)
    t2 = _lerp(v2, v3, f)
    return _lerp(_lerp(t0, t1, f), _lerp(t1, t2, f), f)


# ---------------------------------------------------------------------------
# vec2
# ---------------------------------------------------------------------------


def vec2_is_zero(v0: ArrayLike) -> np.bool_:
    """True where every component is within EPSILON of zero."""
    return _is_zero(as_float(v0, 2))


def vec2_is_equal(v0: ArrayLike, v1: ArrayLike) -> np.bool_:
    """True where all components differ by less than EPSILON."""
    return _is_equal(as_float(v0, 2), as_float(v1, 2))


def vec2(x: ArrayLike, y: ArrayLike) -> ArrayF:
    """Build a 2D vector from its components."""
    return stack(x, y, dtype=FLOAT)


def vec2_assign(v0: ArrayLike) -> ArrayF:
    """Return a copy of v0."""
    return as_float(v0, 2).copy()


def vec2_assign_vec2i(v0: ArrayLike) -> ArrayF:
    """Widen an integer vector to the float dtype."""
    return as_float(v0, 2).copy()


def vec2_zero() -> ArrayF:
    """The zero vector."""
    return np.zeros(2, dtype=FLOAT)


def vec2_one() -> ArrayF:
    """A vector of ones."""
    return np.ones(2, dtype=FLOAT)


def vec2_sign(v0: ArrayLike) -> ArrayF:
    """Componentwise sign (-1, 0 or 1)."""
    return np.sign(as_float(v0, 2))


def vec2_add(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise sum."""
    return as_float(v0, 2) + as_float(v1, 2)


def vec2_add_f(v0: ArrayLike, f: float) -> ArrayF:
    """Add a scalar to every component."""
    return as_float(v0, 2) + _weight(f)


def vec2_subtract(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise difference."""
    return as_float(v0, 2) - as_float(v1, 2)


def vec2_subtract_f(v0: ArrayLike, f: float) -> ArrayF:
    """Subtract a scalar from every component."""
    return as_float(v0, 2) - _weight(f)


def vec2_multiply(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise product."""
    return as_float(v0, 2) * as_float(v1, 2)


def vec2_multiply_f(v0: ArrayLike, f: float) -> ArrayF:
    """Scale by a scalar."""
    return as_float(v0, 2) * _weight(f)


def vec2_multiply_mat2(v0: ArrayLike, m0: ArrayLike) -> ArrayF:
    """Return M * v for a column-major 2x2 matrix."""
    v = as_float(v0, 2)
    m = as_float(m0, 4)
    x = v[..., 0]
    y = v[..., 1]
    return stack(m[..., 0] * x + m[..., 2] * y, m[..., 1] * x + m[..., 3] * y)


def vec2_divide(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise quotient."""
    return _divide(as_float(v0, 2), as_float(v1, 2))


def vec2_divide_f(v0: ArrayLike, f: float) -> ArrayF:
    """Divide every component by a scalar."""
    return _divide(as_float(v0, 2), _weight(f))


def vec2_snap(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Snap each component down to a multiple of v1: floor(v0 / v1) * v1."""
    return _snap(as_float(v0, 2), as_float(v1, 2))


def vec2_snap_f(v0: ArrayLike, f: float) -> ArrayF:
    """Snap each component down to a multiple of f."""
    return _snap(as_float(v0, 2), _weight(f))


def vec2_negative(v0: ArrayLike) -> ArrayF:
    """Negate every component."""
    return -as_float(v0, 2)


def vec2_abs(v0: ArrayLike) -> ArrayF:
    """Componentwise absolute value."""
    return np.abs(as_float(v0, 2))


def vec2_floor(v0: ArrayLike) -> ArrayF:
    """Componentwise floor."""
    return np.floor(as_float(v0, 2))


def vec2_ceil(v0: ArrayLike) -> ArrayF:
    """Componentwise ceiling."""
    return np.ceil(as_float(v0, 2))


def vec2_round(v0: ArrayLike) -> ArrayF:
    """Round each component half away from zero."""
    return _round(as_float(v0, 2))


def vec2_max(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise maximum."""
    return np.fmax(as_float(v0, 2), as_float(v1, 2))


def vec2_min(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise minimum."""
    return np.fmin(as_float(v0, 2), as_float(v1, 2))


def vec2_clamp(v0: ArrayLike, lower: ArrayLike, upper: ArrayLike) -> ArrayF:
    """Clamp each component between lower and upper."""
    return _clamp(as_float(v0, 2), as_float(lower, 2), as_float(upper, 2))


def vec2_normalize(v0: ArrayLike) -> ArrayF:
    """Scale to unit length."""
    return _normalize(as_float(v0, 2))


def vec2_dot(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Dot product."""
    return _dot(as_float(v0, 2), as_float(v1, 2))


def vec2_project(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Project v0 onto v1."""
    return _project(as_float(v0, 2), as_float(v1, 2))


def vec2_slide(v0: ArrayLike, normal: ArrayLike) -> ArrayF:
    """Remove the component along normal: v0 - normal * dot(v0, normal)."""
    return _slide(as_float(v0, 2), as_float(normal, 2))


def vec2_reflect(v0: ArrayLike, normal: ArrayLike) -> ArrayF:
    """Mirror v0 about normal: normal * 2 dot(v0, normal) - v0."""
    return _reflect(as_float(v0, 2), as_float(normal, 2))


def vec2_tangent(v0: ArrayLike) -> ArrayF:
    """Perpendicular vector (y, -x)."""
    v = as_float(v0, 2)
    return stack(v[..., 1], -v[..., 0])


def vec2_rotate(v0: ArrayLike, f: ArrayLike) -> ArrayF:
    """Rotate counter-clockwise by ``f`` radians."""
    v = as_float(v0, 2)
    cs = np.cos(np.asarray(f, dtype=FLOAT))
    sn = np.sin(np.asarray(f, dtype=FLOAT))
    x = v[..., 0]
    y = v[..., 1]
    return stack(x * cs - y * sn, x * sn + y * cs, dtype=FLOAT)


def vec2_lerp(v0: ArrayLike, v1: ArrayLike, f: ArrayLike) -> ArrayF:
    """Linear interpolation a + (b - a) * f; exact at f == 1."""
    return _lerp(as_float(v0, 2), as_float(v1, 2), f)


def vec2_bilinear(
    v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, v3: ArrayLike, u: ArrayLike, v: ArrayLike
) -> ArrayF:
    """Lerp v0->v1 and v2->v3 by u, then lerp the results by v."""
    return _bilinear(
        as_float(v0, 2), as_float(v1, 2), as_float(v2, 2), as_float(v3, 2), u, v
    )


def vec2_bezier3(v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, f: ArrayLike) -> ArrayF:
    """Quadratic Bezier point at f (De Casteljau)."""
    return _bezier3(as_float(v0, 2), as_float(v1, 2), as_float(v2, 2), f)


def vec2_bezier4(
    v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, v3: ArrayLike, f: ArrayLike
) -> ArrayF:
    """Cubic Bezier point at f (De Casteljau)."""
    return _bezier4(
        as_float(v0, 2), as_float(v1, 2), as_float(v2, 2), as_float(v3, 2), f
    )


def vec2_angle(v0: ArrayLike) -> ArrayF:
    """Angle of v0 from the +x axis, atan2(y, x)."""
    v = as_float(v0, 2)
    return np.arctan2(v[..., 1], v[..., 0])


def vec2_length(v0: ArrayLike) -> ArrayF:
    """Euclidean length."""
    return _length(as_float(v0, 2))


def vec2_length_squared(v0: ArrayLike) -> ArrayF:
    """Squared Euclidean length."""
    v = as_float(v0, 2)
    return _dot(v, v)


def vec2_distance(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Euclidean distance between two points."""
    return np.sqrt(_distance_squared(as_float(v0, 2), as_float(v1, 2)))


def vec2_distance_squared(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Squared Euclidean distance between two points."""
    return _distance_squared(as_float(v0, 2), as_float(v1, 2))


def vec2_linear_independent(v0: ArrayLike, v1: ArrayLike) -> np.bool_:
    """True where the two vectors are not parallel."""
    a = as_float(v0, 2)
    b = as_float(v1, 2)
    return (a[..., 0] * b[..., 1] - b[..., 0] * a[..., 1]) != 0


def vec2_orthonormalization(basis: ArrayLike) -> ArrayF:
    """Gram-Schmidt on the rows of a (2, 2) basis.

    A linearly dependent basis is not processed: the returned (2, 2) array is
    left uninitialized. Check ``vec2_linear_independent`` first when a defined
    failure signal is needed.
    """
    b = as_float(basis, 2)
    if b.shape != (2, 2):
        raise ValueError(f"expected a (2, 2) basis, got {b.shape}")
    result = np.empty((2, 2), dtype=FLOAT)
    if not vec2_linear_independent(b[0], b[1]):
        logger.debug("skipping orthonormalization of dependent 2D basis")
        return result
    u0 = b[0]
    u1 = b[1] - _project(b[1], u0)
    result[0] = _normalize(u0)
    result[1] = _normalize(u1)
    return result


# ---------------------------------------------------------------------------
# vec3
# ---------------------------------------------------------------------------


def vec3_is_zero(v0: ArrayLike) -> np.bool_:
    """True where every component is within EPSILON of zero."""
    return _is_zero(as_float(v0, 3))


def vec3_is_equal(v0: ArrayLike, v1: ArrayLike) -> np.bool_:
    """True where all components differ by less than EPSILON."""
    return _is_equal(as_float(v0, 3), as_float(v1, 3))


def vec3(x: ArrayLike, y: ArrayLike, z: ArrayLike) -> ArrayF:
    """Build a 3D vector from its components."""
    return stack(x, y, z, dtype=FLOAT)


def vec3_assign(v0: ArrayLike) -> ArrayF:
    """Return a copy of v0."""
    return as_float(v0, 3).copy()


def vec3_assign_vec3i(v0: ArrayLike) -> ArrayF:
    """Widen an integer vector to the float dtype."""
    return as_float(v0, 3).copy()


def vec3_zero() -> ArrayF:
    """The zero vector."""
    return np.zeros(3, dtype=FLOAT)


def vec3_one() -> ArrayF:
    """A vector of ones."""
    return np.ones(3, dtype=FLOAT)


def vec3_sign(v0: ArrayLike) -> ArrayF:
    """Componentwise sign (-1, 0 or 1)."""
    return np.sign(as_float(v0, 3))


def vec3_add(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise sum."""
    return as_float(v0, 3) + as_float(v1, 3)


def vec3_add_f(v0: ArrayLike, f: float) -> ArrayF:
    """Add a scalar to every component."""
    return as_float(v0, 3) + _weight(f)


def vec3_subtract(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise difference."""
    return as_float(v0, 3) - as_float(v1, 3)


def vec3_subtract_f(v0: ArrayLike, f: float) -> ArrayF:
    """Subtract a scalar from every component."""
    return as_float(v0, 3) - _weight(f)


def vec3_multiply(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise product."""
    return as_float(v0, 3) * as_float(v1, 3)


def vec3_multiply_f(v0: ArrayLike, f: float) -> ArrayF:
    """Scale by a scalar."""
    return as_float(v0, 3) * _weight(f)


def vec3_multiply_mat3(v0: ArrayLike, m0: ArrayLike) -> ArrayF:
    """Return M * v for a column-major 3x3 matrix."""
    v = as_float(v0, 3)
    m = as_float(m0, 9)
    x = v[..., 0]
    y = v[..., 1]
    z = v[..., 2]
    return stack(
        m[..., 0] * x + m[..., 3] * y + m[..., 6] * z,
        m[..., 1] * x + m[..., 4] * y + m[..., 7] * z,
        m[..., 2] * x + m[..., 5] * y + m[..., 8] * z,
    )


def vec3_divide(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise quotient."""
    return _divide(as_float(v0, 3), as_float(v1, 3))


def vec3_divide_f(v0: ArrayLike, f: float) -> ArrayF:
    """Divide every component by a scalar."""
    return _divide(as_float(v0, 3), _weight(f))


def vec3_snap(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Snap each component down to a multiple of v1: floor(v0 / v1) * v1."""
    return _snap(as_float(v0, 3), as_float(v1, 3))


def vec3_snap_f(v0: ArrayLike, f: float) -> ArrayF:
    """Snap each component down to a multiple of f."""
    return _snap(as_float(v0, 3), _weight(f))


def vec3_negative(v0: ArrayLike) -> ArrayF:
    """Negate every component."""
    return -as_float(v0, 3)


def vec3_abs(v0: ArrayLike) -> ArrayF:
    """Componentwise absolute value."""
    return np.abs(as_float(v0, 3))


def vec3_floor(v0: ArrayLike) -> ArrayF:
    """Componentwise floor."""
    return np.floor(as_float(v0, 3))


def vec3_ceil(v0: ArrayLike) -> ArrayF:
    """Componentwise ceiling."""
    return np.ceil(as_float(v0, 3))


def vec3_round(v0: ArrayLike) -> ArrayF:
    """Round each component half away from zero."""
    return _round(as_float(v0, 3))


def vec3_max(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise maximum."""
    return np.fmax(as_float(v0, 3), as_float(v1, 3))


def vec3_min(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise minimum."""
    return np.fmin(as_float(v0, 3), as_float(v1, 3))


def vec3_clamp(v0: ArrayLike, lower: ArrayLike, upper: ArrayLike) -> ArrayF:
    """Clamp each component between lower and upper."""
    return _clamp(as_float(v0, 3), as_float(lower, 3), as_float(upper, 3))


def vec3_cross(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Right-handed cross product."""
    a = as_float(v0, 3)
    b = as_float(v1, 3)
    return stack(
        a[..., 1] * b[..., 2] - a[..., 2] * b[..., 1],
        a[..., 2] * b[..., 0] - a[..., 0] * b[..., 2],
        a[..., 0] * b[..., 1] - a[..., 1] * b[..., 0],
    )


def vec3_normalize(v0: ArrayLike) -> ArrayF:
    """Scale to unit length."""
    return _normalize(as_float(v0, 3))


def vec3_dot(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Dot product."""
    return _dot(as_float(v0, 3), as_float(v1, 3))


def vec3_project(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Project v0 onto v1."""
    return _project(as_float(v0, 3), as_float(v1, 3))


def vec3_slide(v0: ArrayLike, normal: ArrayLike) -> ArrayF:
    """Remove the component along normal: v0 - normal * dot(v0, normal)."""
    return _slide(as_float(v0, 3), as_float(normal, 3))


def vec3_reflect(v0: ArrayLike, normal: ArrayLike) -> ArrayF:
    """Mirror v0 about normal: normal * 2 dot(v0, normal) - v0."""
    return _reflect(as_float(v0, 3), as_float(normal, 3))


def vec3_rotate(v0: ArrayLike, ra: ArrayLike, f: ArrayLike) -> ArrayF:
    """Rotate v0 about axis ``ra`` by ``f`` radians (Rodrigues' formula).

    When ``ra`` is already an ndarray of the configured float dtype it is
    normalized in place.
    """
    # copy first: v0 may be the same array as ra
    v = as_float(v0, 3).copy()
    axis = as_float(ra, 3)
    with np.errstate(divide="ignore", invalid="ignore"):
        np.divide(axis, _length(axis)[..., np.newaxis], out=axis)
    cs = np.cos(np.asarray(f, dtype=FLOAT))
    sn = np.sin(np.asarray(f, dtype=FLOAT))
    one_c = 1.0 - cs
    x = v[..., 0]
    y = v[..., 1]
    z = v[..., 2]
    rx = axis[..., 0]
    ry = axis[..., 1]
    rz = axis[..., 2]
    return stack(
        x * (cs + rx * rx * one_c)
        + y * (rx * ry * one_c - rz * sn)
        + z * (rx * rz * one_c + ry * sn),
        x * (ry * rx * one_c + rz * sn)
        + y * (cs + ry * ry * one_c)
        + z * (ry * rz * one_c - rx * sn),
        x * (rz * rx * one_c - ry * sn)
        + y * (rz * ry * one_c + rx * sn)
        + z * (cs + rz * rz * one_c),
        dtype=FLOAT,
    )


def vec3_lerp(v0: ArrayLike, v1: ArrayLike, f: ArrayLike) -> ArrayF:
    """Linear interpolation a + (b - a) * f; exact at f == 1."""
    return _lerp(as_float(v0, 3), as_float(v1, 3), f)


def vec3_bilinear(
    v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, v3: ArrayLike, u: ArrayLike, v: ArrayLike
) -> ArrayF:
    """Lerp v0->v1 and v2->v3 by u, then lerp the results by v."""
    return _bilinear(
        as_float(v0, 3), as_float(v1, 3), as_float(v2, 3), as_float(v3, 3), u, v
    )


def vec3_bezier3(v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, f: ArrayLike) -> ArrayF:
    """Quadratic Bezier point at f (De Casteljau)."""
    return _bezier3(as_float(v0, 3), as_float(v1, 3), as_float(v2, 3), f)


def vec3_bezier4(
    v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, v3: ArrayLike, f: ArrayLike
) -> ArrayF:
    """Cubic Bezier point at f (De Casteljau)."""
    return _bezier4(
        as_float(v0, 3), as_float(v1, 3), as_float(v2, 3), as_float(v3, 3), f
    )


def vec3_length(v0: ArrayLike) -> ArrayF:
    """Euclidean length."""
    return _length(as_float(v0, 3))


def vec3_length_squared(v0: ArrayLike) -> ArrayF:
    """Squared Euclidean length."""
    v = as_float(v0, 3)
    return _dot(v, v)


def vec3_distance(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Euclidean distance between two points."""
    return np.sqrt(_distance_squared(as_float(v0, 3), as_float(v1, 3)))


def vec3_distance_squared(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Squared Euclidean distance between two points."""
    return _distance_squared(as_float(v0, 3), as_float(v1, 3))


def vec3_linear_independent(v0: ArrayLike, v1: ArrayLike, v2: ArrayLike) -> np.bool_:
    """True when the scalar triple product of the three vectors is non-zero."""
    a = as_float(v0, 3)
    b = as_float(v1, 3)
    c = as_float(v2, 3)
    det = (
        a[..., 0] * b[..., 1] * c[..., 2]
        + a[..., 1] * b[..., 2] * c[..., 0]
        + a[..., 2] * b[..., 0] * c[..., 1]
        - a[..., 2] * b[..., 1] * c[..., 0]
        - a[..., 1] * b[..., 0] * c[..., 2]
        - a[..., 0] * b[..., 2] * c[..., 1]
    )
    return det != 0


def vec3_orthonormalization(basis: ArrayLike) -> ArrayF:
    """Gram-Schmidt on the rows of a (3, 3) basis.

    A linearly dependent basis is not processed: the returned (3, 3) array is
    left uninitialized. Check ``vec3_linear_independent`` first when a defined
    failure signal is needed.
    """
    b = as_float(basis, 3)
    if b.shape != (3, 3):
        raise ValueError(f"expected a (3, 3) basis, got {b.shape}")
    result = np.empty((3, 3), dtype=FLOAT)
    if not vec3_linear_independent(b[0], b[1], b[2]):
        logger.debug("skipping orthonormalization of dependent 3D basis")
        return result
    u0 = b[0]
    u1 = b[1] - _project(b[1], u0)
    u2 = b[2] - _project(b[2], u0)
    u2 = u2 - _project(b[2], u1)
    result[0] = _normalize(u0)
    result[1] = _normalize(u1)
    result[2] = _normalize(u2)
    return result


# ---------------------------------------------------------------------------
# vec4
# ---------------------------------------------------------------------------


def vec4_is_zero(v0: ArrayLike) -> np.bool_:
    """True where every component is within EPSILON of zero."""
    return _is_zero(as_float(v0, 4))


def vec4_is_equal(v0: ArrayLike, v1: ArrayLike) -> np.bool_:
    """True where all components differ by less than EPSILON."""
    return _is_equal(as_float(v0, 4), as_float(v1, 4))


def vec4(x: ArrayLike, y: ArrayLike, z: ArrayLike, w: ArrayLike) -> ArrayF:
    """Build a 4D vector from its components."""
    return stack(x, y, z, w, dtype=FLOAT)


def vec4_assign(v0: ArrayLike) -> ArrayF:
    """Return a copy of v0."""
    return as_float(v0, 4).copy()


def vec4_assign_vec4i(v0: ArrayLike) -> ArrayF:
    """Widen an integer vector to the float dtype."""
    return as_float(v0, 4).copy()


def vec4_zero() -> ArrayF:
    """The zero vector."""
    return np.zeros(4, dtype=FLOAT)


def vec4_one() -> ArrayF:
    """A vector of ones."""
    return np.ones(4, dtype=FLOAT)


def vec4_sign(v0: ArrayLike) -> ArrayF:
    """Componentwise sign (-1, 0 or 1)."""
    return np.sign(as_float(v0, 4))


def vec4_add(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise sum."""
    return as_float(v0, 4) + as_float(v1, 4)


def vec4_add_f(v0: ArrayLike, f: float) -> ArrayF:
    """Add a scalar to every component."""
    return as_float(v0, 4) + _weight(f)


def vec4_subtract(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise difference."""
    return as_float(v0, 4) - as_float(v1, 4)


def vec4_subtract_f(v0: ArrayLike, f: float) -> ArrayF:
    """Subtract a scalar from every component."""
    return as_float(v0, 4) - _weight(f)


def vec4_multiply(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise product."""
    return as_float(v0, 4) * as_float(v1, 4)


def vec4_multiply_f(v0: ArrayLike, f: float) -> ArrayF:
    """Scale by a scalar."""
    return as_float(v0, 4) * _weight(f)


def vec4_multiply_mat4(v0: ArrayLike, m0: ArrayLike) -> ArrayF:
    """Return M * v for a column-major 4x4 matrix."""
    v = as_float(v0, 4)
    m = as_float(m0, 16)
    x = v[..., 0]
    y = v[..., 1]
    z = v[..., 2]
    w = v[..., 3]
    return stack(
        m[..., 0] * x + m[..., 4] * y + m[..., 8] * z + m[..., 12] * w,
        m[..., 1] * x + m[..., 5] * y + m[..., 9] * z + m[..., 13] * w,
        m[..., 2] * x + m[..., 6] * y + m[..., 10] * z + m[..., 14] * w,
        m[..., 3] * x + m[..., 7] * y + m[..., 11] * z + m[..., 15] * w,
    )


def vec4_divide(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise quotient."""
    return _divide(as_float(v0, 4), as_float(v1, 4))


def vec4_divide_f(v0: ArrayLike, f: float) -> ArrayF:
    """Divide every component by a scalar."""
    return _divide(as_float(v0, 4), _weight(f))


def vec4_snap(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Snap each component down to a multiple of v1: floor(v0 / v1) * v1."""
    return _snap(as_float(v0, 4), as_float(v1, 4))


def vec4_snap_f(v0: ArrayLike, f: float) -> ArrayF:
    """Snap each component down to a multiple of f."""
    return _snap(as_float(v0, 4), _weight(f))


def vec4_negative(v0: ArrayLike) -> ArrayF:
    """Negate every component."""
    return -as_float(v0, 4)


def vec4_abs(v0: ArrayLike) -> ArrayF:
    """Componentwise absolute value."""
    return np.abs(as_float(v0, 4))


def vec4_floor(v0: ArrayLike) -> ArrayF:
    """Componentwise floor."""
    return np.floor(as_float(v0, 4))


def vec4_ceil(v0: ArrayLike) -> ArrayF:
    """Componentwise ceiling."""
    return np.ceil(as_float(v0, 4))


def vec4_round(v0: ArrayLike) -> ArrayF:
    """Round each component half away from zero."""
    return _round(as_float(v0, 4))


def vec4_max(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise maximum."""
    return np.fmax(as_float(v0, 4), as_float(v1, 4))


def vec4_min(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Componentwise minimum."""
    return np.fmin(as_float(v0, 4), as_float(v1, 4))


def vec4_clamp(v0: ArrayLike, lower: ArrayLike, upper: ArrayLike) -> ArrayF:
    """Clamp each component between lower and upper."""
    return _clamp(as_float(v0, 4), as_float(lower, 4), as_float(upper, 4))


def vec4_normalize(v0: ArrayLike) -> ArrayF:
    """Scale to unit length."""
    return _normalize(as_float(v0, 4))


def vec4_dot(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Dot product."""
    return _dot(as_float(v0, 4), as_float(v1, 4))


def vec4_length(v0: ArrayLike) -> ArrayF:
    """Euclidean length."""
    return _length(as_float(v0, 4))


def vec4_length_squared(v0: ArrayLike) -> ArrayF:
    """Squared Euclidean length."""
    v = as_float(v0, 4)
    return _dot(v, v)


def vec4_distance(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Euclidean distance between two points."""
    return np.sqrt(_distance_squared(as_float(v0, 4), as_float(v1, 4)))


def vec4_distance_squared(v0: ArrayLike, v1: ArrayLike) -> ArrayF:
    """Squared Euclidean distance between two points."""
    return _distance_squared(as_float(v0, 4), as_float(v1, 4))


def vec4_lerp(v0: ArrayLike, v1: ArrayLike, f: ArrayLike) -> ArrayF:
    """Linear interpolation a + (b - a) * f; exact at f == 1."""
    return _lerp(as_float(v0, 4), as_float(v1, 4), f)


def vec4_bilinear(
    v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, v3: ArrayLike, u: ArrayLike, v: ArrayLike
) -> ArrayF:
    """Lerp v0->v1 and v2->v3 by u, then lerp the results by v."""
    return _bilinear(
        as_float(v0, 4), as_float(v1, 4), as_float(v2, 4), as_float(v3, 4), u, v
    )


def vec4_bezier3(v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, f: ArrayLike) -> ArrayF:
    """Quadratic Bezier point at f (De Casteljau)."""
    return _bezier3(as_float(v0, 4), as_float(v1, 4), as_float(v2, 4), f)


def vec4_bezier4(
    v0: ArrayLike, v1: ArrayLike, v2: ArrayLike, v3: ArrayLike, f: ArrayLike
) -> ArrayF:
    """Cubic Bezier point at f (De Casteljau)."""
    return _bezier4(
        as_float(v0, 4), as_float(v1, 4), as_float(v2, 4), as_float(v3, 4), f
    )
