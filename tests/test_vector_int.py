from __future__ import annotations

import numpy as np
import pytest

from vecmath.core.math.scalar import INT
from vecmath.core.math.vector_int import (
    vec2i,
    vec2i_assign_vec2,
    vec2i_clamp,
    vec2i_divide,
    vec2i_divide_i,
    vec2i_is_equal,
    vec2i_is_zero,
    vec2i_tangent,
    vec3i_abs,
    vec3i_add,
    vec3i_add_i,
    vec3i_cross,
    vec3i_max,
    vec3i_min,
    vec3i_negative,
    vec3i_snap,
    vec3i_snap_i,
    vec4i_multiply_i,
    vec4i_one,
    vec4i_sign,
    vec4i_subtract,
    vec4i_zero,
)


def test_construct_and_dtype() -> None:
    v = vec2i(3, -4)
    assert v.dtype == INT
    assert np.array_equal(v, [3, -4])
    assert np.array_equal(vec4i_zero(), [0, 0, 0, 0])
    assert np.array_equal(vec4i_one(), [1, 1, 1, 1])


def test_predicates_are_exact_and_batched() -> None:
    assert vec2i_is_zero([0, 0])
    assert not vec2i_is_zero([0, 1])
    assert np.array_equal(vec2i_is_zero([[0, 0], [1, 0]]), [True, False])
    assert vec2i_is_equal([1, 2], [1, 2])
    assert not vec2i_is_equal([1, 2], [2, 1])


def test_assign_from_float_truncates() -> None:
    assert np.array_equal(vec2i_assign_vec2([1.9, -1.9]), [1, -1])


def test_arithmetic() -> None:
    assert np.array_equal(vec3i_add([1, 2, 3], [4, 5, 6]), [5, 7, 9])
    assert np.array_equal(vec3i_add_i([1, 2, 3], 10), [11, 12, 13])
    assert np.array_equal(vec4i_subtract([4, 4, 4, 4], [1, 2, 3, 4]), [3, 2, 1, 0])
    assert np.array_equal(vec4i_multiply_i([1, -2, 3, 0], 3), [3, -6, 9, 0])
    assert np.array_equal(vec3i_negative([1, -2, 0]), [-1, 2, 0])
    assert np.array_equal(vec3i_abs([-1, 2, -3]), [1, 2, 3])
    assert np.array_equal(vec4i_sign([-3, 0, 4, -1]), [-1, 0, 1, -1])


def test_division_truncates_toward_zero() -> None:
    assert np.array_equal(vec2i_divide([7, -7], [2, 2]), [3, -3])
    assert np.array_equal(vec2i_divide([7, -7], [-2, -2]), [-3, 3])
    assert np.array_equal(vec2i_divide_i([9, -9], 4), [2, -2])


def test_division_by_zero_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        vec2i_divide_i([5, 5], 0)
    with pytest.raises(ZeroDivisionError):
        vec3i_snap([1, 2, 3], [1, 0, 1])


def test_snap() -> None:
    assert np.array_equal(vec3i_snap_i([7, -7, 9], 4), [4, -4, 8])
    assert np.array_equal(vec3i_snap([7, 7, 7], [2, 3, 5]), [6, 6, 5])


def test_min_max_clamp() -> None:
    assert np.array_equal(vec3i_max([1, 5, 3], [4, 2, 3]), [4, 5, 3])
    assert np.array_equal(vec3i_min([1, 5, 3], [4, 2, 3]), [1, 2, 3])
    assert np.array_equal(vec2i_clamp([5, -5], [0, 0], [3, 3]), [3, 0])
    assert np.array_equal(vec2i_clamp([2, 1], [0, 0], [3, 3]), [2, 1])


def test_tangent_and_cross() -> None:
    assert np.array_equal(vec2i_tangent([1, 2]), [2, -1])
    assert np.array_equal(vec3i_cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])
    assert np.array_equal(vec3i_cross([0, 1, 0], [1, 0, 0]), [0, 0, -1])


def test_shape_mismatch_raises() -> None:
    with pytest.raises(ValueError, match="expected shape"):
        vec3i_add([1, 2], [1, 2, 3])
