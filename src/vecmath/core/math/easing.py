"""Easing curves mapping progress in [0, 1] to eased progress.

Every curve accepts a scalar or an array. Scalars come back as numpy scalars,
arrays keep their shape. All curves map 0 to 0 and 1 to 1.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from .scalar import EPSILON, FLOAT, MPI, MPI_2, ArrayF, unwrap


EasingFn = Callable[[ArrayLike], Any]


def _curve(fn: Callable[[ArrayF], ArrayF]) -> EasingFn:
    @wraps(fn)
    def wrapper(f: ArrayLike) -> Any:
        f = np.asarray(f, dtype=FLOAT)
        with np.errstate(invalid="ignore", over="ignore"):
            return unwrap(np.asarray(fn(f), dtype=FLOAT))

    return wrapper


# Polynomial


@_curve
def quadratic_ease_in(f: ArrayF) -> ArrayF:
    return f * f


@_curve
def quadratic_ease_out(f: ArrayF) -> ArrayF:
    return -f * (f - 2.0)


@_curve
def quadratic_ease_in_out(f: ArrayF) -> ArrayF:
    return np.where(f < 0.5, 2.0 * f * f, -2.0 * f * f + 4.0 * f - 1.0)


@_curve
def cubic_ease_in(f: ArrayF) -> ArrayF:
    return f * f * f


@_curve
def cubic_ease_out(f: ArrayF) -> ArrayF:
    a = f - 1.0
    return a * a * a + 1.0


@_curve
def cubic_ease_in_out(f: ArrayF) -> ArrayF:
    a = 2.0 * f - 2.0
    return np.where(f < 0.5, 4.0 * f * f * f, 0.5 * a * a * a + 1.0)


@_curve
def quartic_ease_in(f: ArrayF) -> ArrayF:
    return f * f * f * f


@_curve
def quartic_ease_out(f: ArrayF) -> ArrayF:
    a = f - 1.0
    return a * a * a * (1.0 - f) + 1.0


@_curve
def quartic_ease_in_out(f: ArrayF) -> ArrayF:
    a = f - 1.0
    return np.where(f < 0.5, 8.0 * f * f * f * f, -8.0 * a * a * a * a + 1.0)


@_curve
def quintic_ease_in(f: ArrayF) -> ArrayF:
    return f * f * f * f * f


@_curve
def quintic_ease_out(f: ArrayF) -> ArrayF:
    a = f - 1.0
    return a * a * a * a * a + 1.0


@_curve
def quintic_ease_in_out(f: ArrayF) -> ArrayF:
    a = 2.0 * f - 2.0
    return np.where(f < 0.5, 16.0 * f * f * f * f * f, 0.5 * a * a * a * a * a + 1.0)


# Trigonometric / circular


@_curve
def sine_ease_in(f: ArrayF) -> ArrayF:
    return np.sin((f - 1.0) * MPI_2) + 1.0


@_curve
def sine_ease_out(f: ArrayF) -> ArrayF:
    return np.sin(f * MPI_2)


@_curve
def sine_ease_in_out(f: ArrayF) -> ArrayF:
    return 0.5 * (1.0 - np.cos(f * MPI))


@_curve
def circular_ease_in(f: ArrayF) -> ArrayF:
    return 1.0 - np.sqrt(1.0 - f * f)


@_curve
def circular_ease_out(f: ArrayF) -> ArrayF:
    return np.sqrt((2.0 - f) * f)


@_curve
def circular_ease_in_out(f: ArrayF) -> ArrayF:
    lower = 0.5 * (1.0 - np.sqrt(1.0 - 4.0 * f * f))
    upper = 0.5 * (np.sqrt(-(2.0 * f - 3.0) * (2.0 * f - 1.0)) + 1.0)
    return np.where(f < 0.5, lower, upper)


# Exponential: the endpoints are returned as-is so 0 and 1 map exactly.


@_curve
def exponential_ease_in(f: ArrayF) -> ArrayF:
    keep = (np.abs(f) <= EPSILON) | (f == 1.0)
    return np.where(keep, f, np.power(2.0, 10.0 * (f - 1.0)))


@_curve
def exponential_ease_out(f: ArrayF) -> ArrayF:
    keep = (np.abs(f) <= EPSILON) | (f == 1.0)
    return np.where(keep, f, 1.0 - np.power(2.0, -10.0 * f))


@_curve
def exponential_ease_in_out(f: ArrayF) -> ArrayF:
    lower = 0.5 * np.power(2.0, 20.0 * f - 10.0)
    upper = -0.5 * np.power(2.0, -20.0 * f + 10.0) + 1.0
    eased = np.where(f < 0.5, lower, upper)
    return np.where((f == 0.0) | (f == 1.0), f, eased)


# Overshooting


@_curve
def elastic_ease_in(f: ArrayF) -> ArrayF:
    return np.sin(13.0 * MPI_2 * f) * np.power(2.0, 10.0 * (f - 1.0))


@_curve
def elastic_ease_out(f: ArrayF) -> ArrayF:
    return np.sin(-13.0 * MPI_2 * (f + 1.0)) * np.power(2.0, -10.0 * f) + 1.0


@_curve
def elastic_ease_in_out(f: ArrayF) -> ArrayF:
    t = 2.0 * f
    lower = 0.5 * np.sin(13.0 * MPI_2 * t) * np.power(2.0, 10.0 * (t - 1.0))
    upper = 0.5 * (
        np.sin(-13.0 * MPI_2 * ((t - 1.0) + 1.0)) * np.power(2.0, -10.0 * (t - 1.0))
        + 2.0
    )
    return np.where(f < 0.5, lower, upper)


@_curve
def back_ease_in(f: ArrayF) -> ArrayF:
    return f * f * f - f * np.sin(f * MPI)


@_curve
def back_ease_out(f: ArrayF) -> ArrayF:
    a = 1.0 - f
    return 1.0 - (a * a * a - a * np.sin(a * MPI))


@_curve
def back_ease_in_out(f: ArrayF) -> ArrayF:
    a = 2.0 * f
    lower = 0.5 * (a * a * a - a * np.sin(a * MPI))
    b = 1.0 - (2.0 * f - 1.0)
    # the upper half samples sin at f * pi, not b * pi
    upper = 0.5 * (1.0 - (b * b * b - b * np.sin(f * MPI))) + 0.5
    return np.where(f < 0.5, lower, upper)


# Bounce


def _bounce_out(f: ArrayF) -> ArrayF:
    return np.select(
        [f < 4.0 / 11.0, f < 8.0 / 11.0, f < 9.0 / 10.0],
        [
            (121.0 * f * f) / 16.0,
            (363.0 / 40.0 * f * f) - (99.0 / 10.0 * f) + 17.0 / 5.0,
            (4356.0 / 361.0 * f * f) - (35442.0 / 1805.0 * f) + 16061.0 / 1805.0,
        ],
        default=(54.0 / 5.0 * f * f) - (513.0 / 25.0 * f) + 268.0 / 25.0,
    )


def _bounce_in(f: ArrayF) -> ArrayF:
    return 1.0 - _bounce_out(1.0 - f)


@_curve
def bounce_ease_in(f: ArrayF) -> ArrayF:
    return _bounce_in(f)


@_curve
def bounce_ease_out(f: ArrayF) -> ArrayF:
    return _bounce_out(f)


@_curve
def bounce_ease_in_out(f: ArrayF) -> ArrayF:
    return np.where(
        f < 0.5,
        0.5 * _bounce_in(f * 2.0),
        0.5 * _bounce_out(f * 2.0 - 1.0) + 0.5,
    )


EASING_FUNCTIONS: dict[str, EasingFn] = {
    fn.__name__: fn
    for fn in (
        quadratic_ease_in,
        quadratic_ease_out,
        quadratic_ease_in_out,
        cubic_ease_in,
        cubic_ease_out,
        cubic_ease_in_out,
        quartic_ease_in,
        quartic_ease_out,
        quartic_ease_in_out,
        quintic_ease_in,
        quintic_ease_out,
        quintic_ease_in_out,
        sine_ease_in,
        sine_ease_out,
        sine_ease_in_out,
        circular_ease_in,
        circular_ease_out,
        circular_ease_in_out,
        exponential_ease_in,
        exponential_ease_out,
        exponential_ease_in_out,
        elastic_ease_in,
        elastic_ease_out,
        elastic_ease_in_out,
        back_ease_in,
        back_ease_out,
        back_ease_in_out,
        bounce_ease_in,
        bounce_ease_out,
        bounce_ease_in_out,
    )
}


def easing_names() -> list[str]:
    return list(EASING_FUNCTIONS.keys())


def get_easing(name: str) -> EasingFn:
    if name not in EASING_FUNCTIONS:
        raise ValueError(f"unknown easing curve: {name}")
    return EASING_FUNCTIONS[name]
