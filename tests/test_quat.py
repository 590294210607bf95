from __future__ import annotations

import numpy as np

from vecmath.core.math.matrix import mat3_rotation_quat, mat4_rotation_quat
from vecmath.core.math.quat import (
    quat,
    quat_angle,
    quat_conjugate,
    quat_divide,
    quat_from_axis_angle,
    quat_from_mat3,
    quat_from_mat4,
    quat_from_vec3,
    quat_inverse,
    quat_is_zero,
    quat_length,
    quat_lerp,
    quat_multiply,
    quat_normalize,
    quat_null,
    quat_power,
    quat_slerp,
    quat_zero,
)
from vecmath.core.math.scalar import EPSILON, FLOAT, MPI_2


TOL = 1e4 * EPSILON


def _random_unit(rng: np.random.Generator, n: int) -> np.ndarray:
    q = rng.normal(size=(n, 4))
    return q / np.linalg.norm(q, axis=-1, keepdims=True)


def _same_rotation(a: np.ndarray, b: np.ndarray) -> bool:
    err = np.minimum(np.abs(a - b).max(axis=-1), np.abs(a + b).max(axis=-1))
    return bool(np.all(err < TOL))


def test_identity_and_zero() -> None:
    assert np.array_equal(quat_null(), [0.0, 0.0, 0.0, 1.0])
    assert quat_is_zero(quat_zero())
    q = quat(0.1, 0.2, 0.3, 0.4)
    assert np.allclose(quat_multiply(q, quat_null()), q)
    assert np.allclose(quat_multiply(quat_null(), q), q)


def test_hamilton_product_basis() -> None:
    i = quat(1.0, 0.0, 0.0, 0.0)
    j = quat(0.0, 1.0, 0.0, 0.0)
    k = quat(0.0, 0.0, 1.0, 0.0)
    assert np.array_equal(quat_multiply(i, j), k)
    assert np.array_equal(quat_multiply(j, i), -k)
    assert np.array_equal(quat_multiply(i, i), [0.0, 0.0, 0.0, -1.0])


def test_multiply_by_inverse_is_identity() -> None:
    rng = np.random.default_rng(123)
    q = rng.normal(size=(100, 4))
    out = quat_multiply(q, quat_inverse(q))
    assert np.allclose(out, quat_null(), atol=TOL)


def test_divide_matches_multiply_by_inverse() -> None:
    rng = np.random.default_rng(456)
    q0 = rng.normal(size=(20, 4))
    q1 = rng.normal(size=(20, 4))
    assert np.allclose(
        quat_divide(q0, q1), quat_multiply(q0, quat_inverse(q1)), rtol=TOL, atol=TOL
    )
    assert np.allclose(quat_divide(q1, q1), quat_null(), atol=TOL)


def test_conjugate_and_normalize() -> None:
    q = quat(1.0, 2.0, 3.0, 4.0)
    assert np.array_equal(quat_conjugate(q), [-1.0, -2.0, -3.0, 4.0])
    assert np.isclose(quat_length(quat_normalize(q)), 1.0)


def test_composition_order() -> None:
    rng = np.random.default_rng(789)
    q0 = quat_from_axis_angle([0.0, 0.0, 1.0], rng.uniform(-np.pi, np.pi, size=10))
    q1 = quat_from_axis_angle([0.0, 0.0, 1.0], rng.uniform(-np.pi, np.pi, size=10))
    m_seq = mat3_rotation_quat(quat_multiply(q1, q0))
    angle = 2.0 * np.arctan2(q0[:, 2], q0[:, 3]) + 2.0 * np.arctan2(q1[:, 2], q1[:, 3])
    m_ref = mat3_rotation_quat(quat_from_axis_angle([0.0, 0.0, 1.0], angle))
    assert np.allclose(m_seq, m_ref, atol=TOL)


def test_lerp_endpoints_exact() -> None:
    a = np.array([0.0, 0.5, -1.0, 2.0])
    b = np.array([1.0, -0.5, 1.0, 4.0])
    assert np.array_equal(quat_lerp(a, b, 0.0), a)
    assert np.array_equal(quat_lerp(a, b, 1.0), b)
    c = [0.1, 1e-17, -0.3, 0.9]
    d = [0.7, 0.2, 1e-16, 0.6]
    assert np.array_equal(quat_lerp(c, d, 1.0), np.asarray(d, dtype=FLOAT))


def test_slerp_endpoints_and_midpoint() -> None:
    axis = np.array([0.0, 0.0, 1.0])
    q0 = quat_from_axis_angle(axis, 0.3)
    q1 = quat_from_axis_angle(axis, 1.2)
    assert np.allclose(quat_slerp(q0, q1, 0.0), q0, atol=TOL)
    assert np.allclose(quat_slerp(q0, q1, 1.0), q1, atol=TOL)
    assert np.allclose(quat_slerp(q0, q1, 0.5), quat_from_axis_angle(axis, 0.75), atol=TOL)


def test_slerp_takes_shorter_arc() -> None:
    axis = np.array([0.0, 1.0, 0.0])
    q0 = quat_from_axis_angle(axis, 0.2)
    q1 = quat_from_axis_angle(axis, 0.6)
    assert np.allclose(quat_slerp(q0, -q1, 1.0), q1, atol=TOL)


def test_slerp_nearly_parallel_uses_linear_weights() -> None:
    q0 = quat_null()
    q1 = quat_from_axis_angle([1.0, 0.0, 0.0], 1e-4)
    assert np.allclose(quat_slerp(q0, q1, 0.5), quat_lerp(q0, q1, 0.5), atol=TOL)


def test_power() -> None:
    axis = np.array([0.0, 0.0, 1.0])
    q = quat_from_axis_angle(axis, 0.8)
    assert np.allclose(quat_power(q, 0.5), quat_from_axis_angle(axis, 0.4), atol=TOL)
    assert np.allclose(quat_power(q, 2.0), quat_from_axis_angle(axis, 1.6), atol=TOL)
    assert np.array_equal(quat_power(quat_null(), 3.0), quat_null())


def test_from_vec3_shortest_arc() -> None:
    q = quat_from_vec3([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    assert np.allclose(q, quat_from_axis_angle([0.0, 0.0, 1.0], MPI_2), atol=TOL)
    q = quat_from_vec3([2.0, 0.0, 0.0], [0.0, 0.0, 3.0])
    assert np.isclose(quat_length(q), 1.0)


def test_from_mat4_round_trip() -> None:
    rng = np.random.default_rng(2024)
    q = _random_unit(rng, 200)
    assert _same_rotation(quat_from_mat4(mat4_rotation_quat(q)), q)
    assert _same_rotation(quat_from_mat3(mat3_rotation_quat(q)), q)


def test_from_mat4_half_turns() -> None:
    for q in ([1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0]):
        q = np.asarray(q)
        assert _same_rotation(quat_from_mat4(mat4_rotation_quat(q)), q)


def test_angle() -> None:
    assert np.isclose(quat_angle(quat_null(), quat_null()), 0.0)
    q = quat(1.0, 0.0, 0.0, 0.0)
    assert np.isclose(quat_angle(quat_null(), q), np.pi / 2.0)
