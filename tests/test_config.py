from __future__ import annotations

import logging
import os
import subprocess
import sys

import numpy as np
import pytest

from vecmath.config import (
    FLOAT_PRESETS,
    INT_PRESETS,
    NumericConfig,
    config_from_env,
    default_config,
    describe,
    float_preset_names,
    get_float_preset,
    get_int_preset,
    int_preset_names,
)


def test_default_config() -> None:
    cfg = default_config()
    assert cfg == NumericConfig()
    assert cfg.int_dtype is np.int32
    assert cfg.float_dtype is np.float64
    assert cfg.epsilon == float(np.finfo(np.float64).eps)
    assert np.isclose(cfg.pi, np.pi)


def test_preset_tables() -> None:
    assert int_preset_names() == ["int8", "int16", "int32", "int64"]
    assert float_preset_names() == ["single", "double"]
    assert INT_PRESETS["int8"].min == -128
    assert INT_PRESETS["int8"].max == 127
    assert FLOAT_PRESETS["single"].dtype is np.float32


def test_unknown_preset_names_raise() -> None:
    with pytest.raises(ValueError, match="unknown integer preset"):
        get_int_preset("int128")
    with pytest.raises(ValueError, match="unknown floating point preset"):
        get_float_preset("quad")


def test_config_from_env_empty_is_default() -> None:
    assert config_from_env({}) == default_config()


def test_config_from_env_selects_presets() -> None:
    cfg = config_from_env({"VECMATH_INT": "int16", "VECMATH_FLOAT": " Single "})
    assert cfg.int_dtype is np.int16
    assert cfg.float_dtype is np.float32
    assert cfg.epsilon == float(np.finfo(np.float32).eps)


def test_config_from_env_feature_switches() -> None:
    cfg = config_from_env({"VECMATH_NO_INT": "1", "VECMATH_NO_EASING": "yes"})
    assert cfg.use_int is False
    assert cfg.use_easing is False
    cfg = config_from_env({"VECMATH_NO_INT": "0"})
    assert cfg.use_int is True


def test_config_from_env_bad_value_falls_back(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="vecmath.config")
    cfg = config_from_env({"VECMATH_INT": "int7", "VECMATH_FLOAT": "half"})
    assert cfg.int_preset == "int32"
    assert cfg.float_preset == "double"
    assert "VECMATH_INT" in caplog.text
    assert "VECMATH_FLOAT" in caplog.text


def test_describe_reports_disabled_int() -> None:
    info = describe(NumericConfig(int_preset="int8", use_int=False))
    assert info["int"] == "disabled"
    assert info["int_range"] == (-128, 127)
    assert info["float"] == "double"
    assert info["easing"] is True


def test_single_precision_build_runs() -> None:
    code = (
        "import numpy as np\n"
        "import vecmath as vm\n"
        "from vecmath.core.math.scalar import FLOAT\n"
        "assert FLOAT is np.float32\n"
        "tol = 1e4 * vm.EPSILON\n"
        "assert vm.vec3_normalize([3.0, 0.0, 4.0]).dtype == np.float32\n"
        "assert np.allclose(vm.vec2_rotate([1.0, 0.0], vm.MPI_2), [0.0, 1.0], atol=tol)\n"
        "m = vm.mat4_rotation_axis([1.0, 2.0, 2.0], 0.4)\n"
        "assert np.allclose(vm.mat4_multiply(m, vm.mat4_inverse(m)), vm.mat4_identity(), atol=tol)\n"
    )
    env = dict(os.environ, VECMATH_FLOAT="single")
    result = subprocess.run(
        [sys.executable, "-c", code], env=env, capture_output=True, text=True
    )
    assert result.returncode == 0, result.stderr
