"""Project a few world-space points through a look-at camera."""

from __future__ import annotations

import numpy as np

import vecmath as vm


if __name__ == "__main__":
    view = vm.mat4_look_at([4.0, 3.0, 6.0], [0.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    proj = vm.mat4_perspective(vm.to_radians(60.0), 16.0 / 9.0, 0.1, 100.0)
    view_proj = vm.mat4_multiply(proj, view)

    corners = np.array(
        [
            [-1.0, -1.0, -1.0, 1.0],
            [1.0, -1.0, -1.0, 1.0],
            [1.0, 1.0, -1.0, 1.0],
            [-1.0, 1.0, 1.0, 1.0],
        ],
        dtype=np.float64,
    )
    clip = vm.vec4_multiply_mat4(corners, view_proj)
    ndc = clip[:, :3] / clip[:, 3:]
    for world, p in zip(corners, ndc):
        print("world:", world[:3], "ndc:", np.round(p, 4))
