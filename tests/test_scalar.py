from __future__ import annotations

import numpy as np
import pytest

from vecmath.core.math.scalar import (
    EPSILON,
    FLOAT,
    INT,
    MPI,
    MPI_2,
    MPI_4,
    as_float,
    as_int,
    clampf,
    clampi,
    nearly_equal,
    stack,
    to_degrees,
    to_radians,
    unwrap,
)


def test_constants() -> None:
    assert np.isclose(MPI, np.pi)
    assert np.isclose(MPI_2, np.pi / 2.0)
    assert np.isclose(MPI_4, np.pi / 4.0)
    assert 0.0 < EPSILON < 1e-6


def test_clamp_scalars() -> None:
    assert clampi(5, 0, 3) == 3
    assert clampi(-5, 0, 3) == 0
    assert clampi(2, 0, 3) == 2
    assert clampf(1.5, 0.0, 1.0) == 1.0
    assert clampf(-0.5, 0.0, 1.0) == 0.0
    assert clampf(0.25, 0.0, 1.0) == 0.25


def test_nearly_equal() -> None:
    assert nearly_equal(1.0, 1.0)
    assert nearly_equal(1.0, 1.0 + EPSILON / 2.0)
    assert not nearly_equal(1.0, 1.001)
    assert nearly_equal(1.0, 1.001, epsilon=0.01)


def test_angle_conversion() -> None:
    assert np.isclose(to_radians(180.0), np.pi)
    assert np.isclose(to_degrees(np.pi / 2.0), 90.0)
    assert np.isclose(to_degrees(to_radians(37.5)), 37.5)


def test_as_float_checks_trailing_axis() -> None:
    arr = as_float([[1, 2, 3], [4, 5, 6]], 3)
    assert arr.dtype == FLOAT
    assert arr.shape == (2, 3)
    with pytest.raises(ValueError, match=r"expected shape \(\.\.\., 3\), got \(2,\)"):
        as_float([1.0, 2.0], 3)
    with pytest.raises(ValueError, match="expected shape"):
        as_float(1.0, 2)


def test_as_int_truncates_toward_zero() -> None:
    arr = as_int([1.9, -1.9, 2.5], 3)
    assert arr.dtype == INT
    assert np.array_equal(arr, [1, -1, 2])


def test_stack_broadcasts_components() -> None:
    out = stack(np.array([1.0, 2.0]), 0.0, 5.0)
    assert out.shape == (2, 3)
    assert np.array_equal(out, [[1.0, 0.0, 5.0], [2.0, 0.0, 5.0]])


def test_unwrap_zero_dim() -> None:
    assert isinstance(unwrap(np.asarray(2.0)), np.floating)
    arr = np.array([1.0, 2.0])
    assert unwrap(arr) is arr
