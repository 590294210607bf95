"""Print every easing curve sampled at a few progress values."""

from __future__ import annotations

import numpy as np

from vecmath.core.math.easing import EASING_FUNCTIONS


if __name__ == "__main__":
    f = np.linspace(0.0, 1.0, 5)
    print(f"{'curve':<26}" + "".join(f"{x:>8.2f}" for x in f))
    for name, fn in EASING_FUNCTIONS.items():
        values = fn(f)
        print(f"{name:<26}" + "".join(f"{v:>8.3f}" for v in values))
