"""Interpolate between two orientations and report the rotated forward axis."""

from __future__ import annotations

import numpy as np

import vecmath as vm


if __name__ == "__main__":
    start = vm.quat_from_axis_angle([0.0, 1.0, 0.0], 0.0)
    end = vm.quat_from_axis_angle(vm.vec3_normalize([1.0, 1.0, 0.0]), vm.MPI_2)
    forward = np.array([0.0, 0.0, -1.0])

    steps = np.linspace(0.0, 1.0, 6)
    path = vm.quat_slerp(start, end, steps)
    rotations = vm.mat3_rotation_quat(path)
    for t, q, m in zip(steps, path, rotations):
        v = vm.vec3_multiply_mat3(forward, m)
        print(f"t={t:.1f} quat={np.round(q, 4)} forward={np.round(v, 4)}")
