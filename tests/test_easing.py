from __future__ import annotations

import numpy as np
import pytest

from vecmath.core.math.easing import (
    EASING_FUNCTIONS,
    bounce_ease_out,
    cubic_ease_in,
    easing_names,
    exponential_ease_in,
    exponential_ease_in_out,
    exponential_ease_out,
    get_easing,
    quadratic_ease_in,
    quadratic_ease_in_out,
    sine_ease_in_out,
)
from vecmath.core.math.scalar import EPSILON


TOL = 1e4 * EPSILON


def test_registry_has_thirty_curves() -> None:
    names = easing_names()
    assert len(names) == 30
    assert len(set(names)) == 30
    for family in (
        "quadratic",
        "cubic",
        "quartic",
        "quintic",
        "sine",
        "circular",
        "exponential",
        "elastic",
        "back",
        "bounce",
    ):
        for kind in ("ease_in", "ease_out", "ease_in_out"):
            assert f"{family}_{kind}" in EASING_FUNCTIONS


def test_get_easing_unknown_name() -> None:
    assert get_easing("cubic_ease_in") is cubic_ease_in
    with pytest.raises(ValueError, match="unknown easing curve"):
        get_easing("linear")


@pytest.mark.parametrize("name", easing_names())
def test_endpoints(name: str) -> None:
    fn = get_easing(name)
    assert np.isclose(fn(0.0), 0.0, atol=TOL)
    assert np.isclose(fn(1.0), 1.0, atol=TOL)


def test_exponential_endpoints_exact() -> None:
    for fn in (exponential_ease_in, exponential_ease_out, exponential_ease_in_out):
        assert fn(0.0) == 0.0
        assert fn(1.0) == 1.0


def test_known_values() -> None:
    assert quadratic_ease_in(0.5) == 0.25
    assert cubic_ease_in(0.5) == 0.125
    assert np.isclose(sine_ease_in_out(0.5), 0.5)
    assert np.isclose(quadratic_ease_in_out(0.25), 0.125)
    assert np.isclose(quadratic_ease_in_out(0.75), 0.875)


def test_scalar_in_scalar_out() -> None:
    out = quadratic_ease_in(0.3)
    assert isinstance(out, np.floating)


def test_array_input_keeps_shape() -> None:
    f = np.linspace(0.0, 1.0, 12).reshape(3, 4)
    for fn in EASING_FUNCTIONS.values():
        out = fn(f)
        assert out.shape == (3, 4)
        assert np.all(np.isfinite(out))


def test_bounce_is_continuous_at_breakpoints() -> None:
    for edge in (4.0 / 11.0, 8.0 / 11.0, 9.0 / 10.0):
        below = bounce_ease_out(np.nextafter(edge, 0.0))
        above = bounce_ease_out(edge)
        assert np.isclose(below, above, atol=TOL)
