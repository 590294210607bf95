"""Scalar helpers and array coercion shared by the vector/matrix modules."""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ...config import ACTIVE


ArrayF = NDArray[np.floating]
ArrayI = NDArray[np.signedinteger]

FLOAT = ACTIVE.float_dtype
INT = ACTIVE.int_dtype

EPSILON: float = ACTIVE.epsilon
MPI: float = ACTIVE.pi
MPI_2: float = MPI / 2.0
MPI_4: float = MPI / 4.0


def as_float(v: ArrayLike, size: int | None = None) -> ArrayF:
    """Coerce to the configured float dtype, checking the trailing axis."""
    arr = np.asarray(v, dtype=FLOAT)
    if size is not None and (arr.ndim == 0 or arr.shape[-1] != size):
        raise ValueError(f"expected shape (..., {size}), got {arr.shape}")
    return arr


def as_int(v: ArrayLike, size: int | None = None) -> ArrayI:
    """Coerce to the configured integer dtype, checking the trailing axis."""
    arr = np.asarray(v)
    if arr.dtype.kind == "f":
        arr = np.trunc(arr)
    arr = arr.astype(INT, copy=False)
    if size is not None and (arr.ndim == 0 or arr.shape[-1] != size):
        raise ValueError(f"expected shape (..., {size}), got {arr.shape}")
    return arr


def stack(*components: Any, dtype: Any = None) -> NDArray[Any]:
    """Stack per-component arrays along a new last axis."""
    out = np.stack(np.broadcast_arrays(*components), axis=-1)
    if dtype is not None:
        out = out.astype(dtype, copy=False)
    return out


def unwrap(a: NDArray[Any]) -> Any:
    """Return 0-d results as numpy scalars, arrays unchanged."""
    return a[()] if isinstance(a, np.ndarray) and a.ndim == 0 else a


def clampi(value: int, min: int, max: int) -> int:
    """Clamp an integer to [min, max]."""
    if value < min:
        value = min
    elif value > max:
        value = max
    return value


def clampf(value: float, min: float, max: float) -> float:
    """Clamp a float to [min, max]."""
    if value < min:
        value = min
    elif value > max:
        value = max
    return value


def nearly_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """True when a and b are equal or within epsilon of each other."""
    if a == b:
        return True
    return math.fabs(a - b) <= epsilon


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * MPI / 180.0


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / MPI
