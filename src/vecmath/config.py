"""Numeric configuration: scalar presets chosen once at import time.

The integer width and the floating point precision are fixed for the whole
process. Select them through the environment before importing ``vecmath``::

    VECMATH_INT=int16 VECMATH_FLOAT=single python app.py

Recognised variables:

- ``VECMATH_INT``: ``int8``, ``int16``, ``int32`` (default) or ``int64``
- ``VECMATH_FLOAT``: ``single`` or ``double`` (default)
- ``VECMATH_NO_INT``: disable the integer vector family
- ``VECMATH_NO_EASING``: disable the easing curves
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

import numpy as np


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IntPreset:
    name: str
    dtype: type[np.signedinteger]
    min: int
    max: int


@dataclass(frozen=True, slots=True)
class FloatPreset:
    name: str
    dtype: type[np.floating]
    epsilon: float
    pi: float


INT_PRESETS: dict[str, IntPreset] = {
    name: IntPreset(name, dtype, int(np.iinfo(dtype).min), int(np.iinfo(dtype).max))
    for name, dtype in (
        ("int8", np.int8),
        ("int16", np.int16),
        ("int32", np.int32),
        ("int64", np.int64),
    )
}

FLOAT_PRESETS: dict[str, FloatPreset] = {
    "single": FloatPreset(
        "single", np.float32, float(np.finfo(np.float32).eps), float(np.float32(np.pi))
    ),
    "double": FloatPreset("double", np.float64, float(np.finfo(np.float64).eps), np.pi),
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class NumericConfig:
    int_preset: str = "int32"
    float_preset: str = "double"
    use_int: bool = True
    use_easing: bool = True

    @property
    def int_dtype(self) -> type[np.signedinteger]:
        return get_int_preset(self.int_preset).dtype

    @property
    def float_dtype(self) -> type[np.floating]:
        return get_float_preset(self.float_preset).dtype

    @property
    def epsilon(self) -> float:
        return get_float_preset(self.float_preset).epsilon

    @property
    def pi(self) -> float:
        return get_float_preset(self.float_preset).pi


def int_preset_names() -> list[str]:
    return list(INT_PRESETS.keys())


def float_preset_names() -> list[str]:
    return list(FLOAT_PRESETS.keys())


def get_int_preset(name: str) -> IntPreset:
    if name not in INT_PRESETS:
        raise ValueError(f"unknown integer preset: {name}")
    return INT_PRESETS[name]


def get_float_preset(name: str) -> FloatPreset:
    if name not in FLOAT_PRESETS:
        raise ValueError(f"unknown floating point preset: {name}")
    return FLOAT_PRESETS[name]


def default_config() -> NumericConfig:
    return NumericConfig()


def config_from_env(environ: Mapping[str, str] | None = None) -> NumericConfig:
    """Resolve a configuration from environment variables.

    Unknown preset names fall back to the defaults with a warning.
    """
    env = os.environ if environ is None else environ
    defaults = default_config()

    int_name = str(env.get("VECMATH_INT", defaults.int_preset)).strip().lower()
    if int_name not in INT_PRESETS:
        logger.warning(
            "ignoring VECMATH_INT=%r, using %s", int_name, defaults.int_preset
        )
        int_name = defaults.int_preset

    float_name = str(env.get("VECMATH_FLOAT", defaults.float_preset)).strip().lower()
    if float_name not in FLOAT_PRESETS:
        logger.warning(
            "ignoring VECMATH_FLOAT=%r, using %s", float_name, defaults.float_preset
        )
        float_name = defaults.float_preset

    use_int = str(env.get("VECMATH_NO_INT", "")).strip().lower() not in _TRUTHY
    use_easing = str(env.get("VECMATH_NO_EASING", "")).strip().lower() not in _TRUTHY
    return NumericConfig(
        int_preset=int_name,
        float_preset=float_name,
        use_int=use_int,
        use_easing=use_easing,
    )


def describe(cfg: NumericConfig) -> dict[str, object]:
    ip = get_int_preset(cfg.int_preset)
    fp = get_float_preset(cfg.float_preset)
    return {
        "int": ip.name if cfg.use_int else "disabled",
        "int_range": (ip.min, ip.max),
        "float": fp.name,
        "epsilon": fp.epsilon,
        "easing": cfg.use_easing,
    }


ACTIVE: NumericConfig = config_from_env()
logger.debug("numeric configuration: %s", describe(ACTIVE))


def active_config() -> NumericConfig:
    return ACTIVE
