"""Integer vector utilities.

Conventions:
- Vectors are arrays shaped (..., N) of the configured integer dtype.
- Leading axes broadcast like any NumPy operation.
- Division and snapping truncate toward zero; a zero divisor raises
  ZeroDivisionError (integers have no inf).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .scalar import INT, ArrayI, as_int, stack


def _scalar(i: ArrayLike) -> ArrayI:
    return np.asarray(i, dtype=INT)


def _trunc_divide(a: ArrayI, b: ArrayI) -> ArrayI:
    if np.any(b == 0):
        raise ZeroDivisionError("integer vector division by zero")
    q = np.floor_divide(a, b)
    r = np.remainder(a, b)
    q = q + ((r != 0) & ((a < 0) != (b < 0)))
    return q.astype(INT, copy=False)


def _snap(a: ArrayI, b: ArrayI) -> ArrayI:
    return (_trunc_divide(a, b) * b).astype(INT, copy=False)


def _clamp(v: ArrayI, lower: ArrayI, upper: ArrayI) -> ArrayI:
    return np.minimum(np.maximum(v, lower), upper)


# ---------------------------------------------------------------------------
# vec2i
# ---------------------------------------------------------------------------


def vec2i_is_zero(v0: ArrayLike) -> np.bool_:
    """True where every component is exactly zero."""
    return np.all(as_int(v0, 2) == 0, axis=-1)


def vec2i_is_equal(v0: ArrayLike, v1: ArrayLike) -> np.bool_:
    """True where all components are exactly equal."""
    return np.all(as_int(v0, 2) == as_int(v1, 2), axis=-1)


def vec2i(x: ArrayLike, y: ArrayLike) -> ArrayI:
    """Build a 2D integer vector from its components."""
    return stack(x, y, dtype=INT)


def vec2i_assign(v0: ArrayLike) -> ArrayI:
    """Return a copy of v0."""
    return as_int(v0, 2).copy()


def vec2i_assign_vec2(v0: ArrayLike) -> ArrayI:
    """Convert a float vector, truncating toward zero."""
    return as_int(np.asarray(v0, dtype=np.float64), 2)


def vec2i_zero() -> ArrayI:
    """The zero vector."""
    return np.zeros(2, dtype=INT)


def vec2i_one() -> ArrayI:
    """A vector of ones."""
    return np.ones(2, dtype=INT)


def vec2i_sign(v0: ArrayLike) -> ArrayI:
    """Componentwise sign (-1, 0 or 1)."""
    return np.sign(as_int(v0, 2))


def vec2i_add(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise sum."""
    return as_int(v0, 2) + as_int(v1, 2)


def vec2i_add_i(v0: ArrayLike, i: int) -> ArrayI:
    """Add an integer to every component."""
    return as_int(v0, 2) + _scalar(i)


def vec2i_subtract(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise difference."""
    return as_int(v0, 2) - as_int(v1, 2)


def vec2i_subtract_i(v0: ArrayLike, i: int) -> ArrayI:
    """Subtract an integer from every component."""
    return as_int(v0, 2) - _scalar(i)


def vec2i_multiply(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise product."""
    return as_int(v0, 2) * as_int(v1, 2)


def vec2i_multiply_i(v0: ArrayLike, i: int) -> ArrayI:
    """Scale by an integer."""
    return as_int(v0, 2) * _scalar(i)


def vec2i_divide(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise quotient, truncated toward zero."""
    return _trunc_divide(as_int(v0, 2), as_int(v1, 2))


def vec2i_divide_i(v0: ArrayLike, i: int) -> ArrayI:
    """Divide every component by an integer, truncating toward zero."""
    return _trunc_divide(as_int(v0, 2), _scalar(i))


def vec2i_snap(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Snap each component toward zero to a multiple of v1."""
    return _snap(as_int(v0, 2), as_int(v1, 2))


def vec2i_snap_i(v0: ArrayLike, i: int) -> ArrayI:
    """Snap each component toward zero to a multiple of i."""
    return _snap(as_int(v0, 2), _scalar(i))


def vec2i_negative(v0: ArrayLike) -> ArrayI:
    """Negate every component."""
    return -as_int(v0, 2)


def vec2i_abs(v0: ArrayLike) -> ArrayI:
    """Componentwise absolute value."""
    return np.abs(as_int(v0, 2))


def vec2i_max(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise maximum."""
    return np.maximum(as_int(v0, 2), as_int(v1, 2))


def vec2i_min(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise minimum."""
    return np.minimum(as_int(v0, 2), as_int(v1, 2))


def vec2i_clamp(v0: ArrayLike, lower: ArrayLike, upper: ArrayLike) -> ArrayI:
    """Clamp each component between lower and upper."""
    return _clamp(as_int(v0, 2), as_int(lower, 2), as_int(upper, 2))


def vec2i_tangent(v0: ArrayLike) -> ArrayI:
    """Rotate by -90 degrees: (y, -x)."""
    v0 = as_int(v0, 2)
    return stack(v0[..., 1], -v0[..., 0], dtype=INT)


# ---------------------------------------------------------------------------
# vec3i
# ---------------------------------------------------------------------------


def vec3i_is_zero(v0: ArrayLike) -> np.bool_:
    """True where every component is exactly zero."""
    return np.all(as_int(v0, 3) == 0, axis=-1)


def vec3i_is_equal(v0: ArrayLike, v1: ArrayLike) -> np.bool_:
    """True where all components are exactly equal."""
    return np.all(as_int(v0, 3) == as_int(v1, 3), axis=-1)


def vec3i(x: ArrayLike, y: ArrayLike, z: ArrayLike) -> ArrayI:
    """Build a 3D integer vector from its components."""
    return stack(x, y, z, dtype=INT)


def vec3i_assign(v0: ArrayLike) -> ArrayI:
    """Return a copy of v0."""
    return as_int(v0, 3).copy()


def vec3i_assign_vec3(v0: ArrayLike) -> ArrayI:
    """Convert a float vector, truncating toward zero."""
    return as_int(np.asarray(v0, dtype=np.float64), 3)


def vec3i_zero() -> ArrayI:
    """The zero vector."""
    return np.zeros(3, dtype=INT)


def vec3i_one() -> ArrayI:
    """A vector of ones."""
    return np.ones(3, dtype=INT)


def vec3i_sign(v0: ArrayLike) -> ArrayI:
    """Componentwise sign (-1, 0 or 1)."""
    return np.sign(as_int(v0, 3))


def vec3i_add(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise sum."""
    return as_int(v0, 3) + as_int(v1, 3)


def vec3i_add_i(v0: ArrayLike, i: int) -> ArrayI:
    """Add an integer to every component."""
    return as_int(v0, 3) + _scalar(i)


def vec3i_subtract(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise difference."""
    return as_int(v0, 3) - as_int(v1, 3)


def vec3i_subtract_i(v0: ArrayLike, i: int) -> ArrayI:
    """Subtract an integer from every component."""
    return as_int(v0, 3) - _scalar(i)


def vec3i_multiply(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise product."""
    return as_int(v0, 3) * as_int(v1, 3)


def vec3i_multiply_i(v0: ArrayLike, i: int) -> ArrayI:
    """Scale by an integer."""
    return as_int(v0, 3) * _scalar(i)


def vec3i_divide(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise quotient, truncated toward zero."""
    return _trunc_divide(as_int(v0, 3), as_int(v1, 3))


def vec3i_divide_i(v0: ArrayLike, i: int) -> ArrayI:
    """Divide every component by an integer, truncating toward zero."""
    return _trunc_divide(as_int(v0, 3), _scalar(i))


def vec3i_snap(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Snap each component toward zero to a multiple of v1."""
    return _snap(as_int(v0, 3), as_int(v1, 3))


def vec3i_snap_i(v0: ArrayLike, i: int) -> ArrayI:
    """Snap each component toward zero to a multiple of i."""
    return _snap(as_int(v0, 3), _scalar(i))


def vec3i_cross(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Right-handed cross product."""
    a = as_int(v0, 3)
    b = as_int(v1, 3)
    return stack(
        a[..., 1] * b[..., 2] - a[..., 2] * b[..., 1],
        a[..., 2] * b[..., 0] - a[..., 0] * b[..., 2],
        a[..., 0] * b[..., 1] - a[..., 1] * b[..., 0],
        dtype=INT,
    )


def vec3i_negative(v0: ArrayLike) -> ArrayI:
    """Negate every component."""
    return -as_int(v0, 3)


def vec3i_abs(v0: ArrayLike) -> ArrayI:
    """Componentwise absolute value."""
    return np.abs(as_int(v0, 3))


def vec3i_max(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise maximum."""
    return np.maximum(as_int(v0, 3), as_int(v1, 3))


def vec3i_min(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise minimum."""
    return np.minimum(as_int(v0, 3), as_int(v1, 3))


def vec3i_clamp(v0: ArrayLike, lower: ArrayLike, upper: ArrayLike) -> ArrayI:
    """Clamp each component between lower and upper."""
    return _clamp(as_int(v0, 3), as_int(lower, 3), as_int(upper, 3))


# ---------------------------------------------------------------------------
# vec4i
# ---------------------------------------------------------------------------


def vec4i_is_zero(v0: ArrayLike) -> np.bool_:
    """True where every component is exactly zero."""
    return np.all(as_int(v0, 4) == 0, axis=-1)


def vec4i_is_equal(v0: ArrayLike, v1: ArrayLike) -> np.bool_:
    """True where all components are exactly equal."""
    return np.all(as_int(v0, 4) == as_int(v1, 4), axis=-1)


def vec4i(x: ArrayLike, y: ArrayLike, z: ArrayLike, w: ArrayLike) -> ArrayI:
    """Build a 4D integer vector from its components."""
    return stack(x, y, z, w, dtype=INT)


def vec4i_assign(v0: ArrayLike) -> ArrayI:
    """Return a copy of v0."""
    return as_int(v0, 4).copy()


def vec4i_assign_vec4(v0: ArrayLike) -> ArrayI:
    """Convert a float vector, truncating toward zero."""
    return as_int(np.asarray(v0, dtype=np.float64), 4)


def vec4i_zero() -> ArrayI:
    """The zero vector."""
    return np.zeros(4, dtype=INT)


def vec4i_one() -> ArrayI:
    """A vector of ones."""
    return np.ones(4, dtype=INT)


def vec4i_sign(v0: ArrayLike) -> ArrayI:
    """Componentwise sign (-1, 0 or 1)."""
    return np.sign(as_int(v0, 4))


def vec4i_add(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise sum."""
    return as_int(v0, 4) + as_int(v1, 4)


def vec4i_add_i(v0: ArrayLike, i: int) -> ArrayI:
    """Add an integer to every component."""
    return as_int(v0, 4) + _scalar(i)


def vec4i_subtract(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise difference."""
    return as_int(v0, 4) - as_int(v1, 4)


def vec4i_subtract_i(v0: ArrayLike, i: int) -> ArrayI:
    """Subtract an integer from every component."""
    return as_int(v0, 4) - _scalar(i)


def vec4i_multiply(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise product."""
    return as_int(v0, 4) * as_int(v1, 4)


def vec4i_multiply_i(v0: ArrayLike, i: int) -> ArrayI:
    """Scale by an integer."""
    return as_int(v0, 4) * _scalar(i)


def vec4i_divide(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise quotient, truncated toward zero."""
    return _trunc_divide(as_int(v0, 4), as_int(v1, 4))


def vec4i_divide_i(v0: ArrayLike, i: int) -> ArrayI:
    """Divide every component by an integer, truncating toward zero."""
    return _trunc_divide(as_int(v0, 4), _scalar(i))


def vec4i_snap(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Snap each component toward zero to a multiple of v1."""
    return _snap(as_int(v0, 4), as_int(v1, 4))


def vec4i_snap_i(v0: ArrayLike, i: int) -> ArrayI:
    """Snap each component toward zero to a multiple of i."""
    return _snap(as_int(v0, 4), _scalar(i))


def vec4i_negative(v0: ArrayLike) -> ArrayI:
    """Negate every component."""
    return -as_int(v0, 4)


def vec4i_abs(v0: ArrayLike) -> ArrayI:
    """Componentwise absolute value."""
    return np.abs(as_int(v0, 4))


def vec4i_max(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise maximum."""
    return np.maximum(as_int(v0, 4), as_int(v1, 4))


def vec4i_min(v0: ArrayLike, v1: ArrayLike) -> ArrayI:
    """Componentwise minimum."""
    return np.minimum(as_int(v0, 4), as_int(v1, 4))


def vec4i_clamp(v0: ArrayLike, lower: ArrayLike, upper: ArrayLike) -> ArrayI:
    """Clamp each component between lower and upper."""
    return _clamp(as_int(v0, 4), as_int(lower, 4), as_int(upper, 4))
