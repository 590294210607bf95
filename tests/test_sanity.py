from __future__ import annotations


def test_sanity_import() -> None:
    import numpy as np
    import vecmath as vm

    assert isinstance(vm.__version__, str)
    assert np.add(1.0, 2.0) == 3.0


def test_flat_api_reexports() -> None:
    import vecmath as vm

    assert callable(vm.vec3_cross)
    assert callable(vm.quat_slerp)
    assert callable(vm.mat4_look_at)
    if vm.ACTIVE.use_int:
        assert callable(vm.vec2i_add)
    if vm.ACTIVE.use_easing:
        assert callable(vm.bounce_ease_in_out)


def test_main_prints_configuration(capsys) -> None:
    from vecmath import __version__
    from vecmath.__main__ import main

    assert main() == 0
    out = capsys.readouterr().out
    assert f"vecmath v{__version__}" in out
    assert "float:" in out
    assert "epsilon:" in out
