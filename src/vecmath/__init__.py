"""Vector, quaternion and matrix math for graphics and games.

The whole public API is flat::

    import vecmath as vm

    m = vm.mat4_perspective(vm.to_radians(60.0), 16 / 9, 0.1, 100.0)
    q = vm.quat_from_axis_angle([0.0, 1.0, 0.0], vm.MPI_4)

Integer vectors and easing curves are only exported when enabled in
``vecmath.config``.
"""

from __future__ import annotations

import logging

from .config import ACTIVE, active_config  # noqa: F401
from .core.math.scalar import (  # noqa: F401
    EPSILON,
    MPI,
    MPI_2,
    MPI_4,
    clampf,
    clampi,
    nearly_equal,
    to_degrees,
    to_radians,
)
from .core.math.vector import (  # noqa: F401
    vec2,
    vec2_abs,
    vec2_add,
    vec2_add_f,
    vec2_angle,
    vec2_assign,
    vec2_assign_vec2i,
    vec2_bezier3,
    vec2_bezier4,
    vec2_bilinear,
    vec2_ceil,
    vec2_clamp,
    vec2_distance,
    vec2_distance_squared,
    vec2_divide,
    vec2_divide_f,
    vec2_dot,
    vec2_floor,
    vec2_is_equal,
    vec2_is_zero,
    vec2_length,
    vec2_length_squared,
    vec2_lerp,
    vec2_linear_independent,
    vec2_max,
    vec2_min,
    vec2_multiply,
    vec2_multiply_f,
    vec2_multiply_mat2,
    vec2_negative,
    vec2_normalize,
    vec2_one,
    vec2_orthonormalization,
    vec2_project,
    vec2_reflect,
    vec2_rotate,
    vec2_round,
    vec2_sign,
    vec2_slide,
    vec2_snap,
    vec2_snap_f,
    vec2_subtract,
    vec2_subtract_f,
    vec2_tangent,
    vec2_zero,
    vec3,
    vec3_abs,
    vec3_add,
    vec3_add_f,
    vec3_assign,
    vec3_assign_vec3i,
    vec3_bezier3,
    vec3_bezier4,
    vec3_bilinear,
    vec3_ceil,
    vec3_clamp,
    vec3_cross,
    vec3_distance,
    vec3_distance_squared,
    vec3_divide,
    vec3_divide_f,
    vec3_dot,
    vec3_floor,
    vec3_is_equal,
    vec3_is_zero,
    vec3_length,
    vec3_length_squared,
    vec3_lerp,
    vec3_linear_independent,
    vec3_max,
    vec3_min,
    vec3_multiply,
    vec3_multiply_f,
    vec3_multiply_mat3,
    vec3_negative,
    vec3_normalize,
    vec3_one,
    vec3_orthonormalization,
    vec3_project,
    vec3_reflect,
    vec3_rotate,
    vec3_round,
    vec3_sign,
    vec3_slide,
    vec3_snap,
    vec3_snap_f,
    vec3_subtract,
    vec3_subtract_f,
    vec3_zero,
    vec4,
    vec4_abs,
    vec4_add,
    vec4_add_f,
    vec4_assign,
    vec4_assign_vec4i,
    vec4_bezier3,
    vec4_bezier4,
    vec4_bilinear,
    vec4_ceil,
    vec4_clamp,
    vec4_distance,
    vec4_distance_squared,
    vec4_divide,
    vec4_divide_f,
    vec4_dot,
    vec4_floor,
    vec4_is_equal,
    vec4_is_zero,
    vec4_length,
    vec4_length_squared,
    vec4_lerp,
    vec4_max,
    vec4_min,
    vec4_multiply,
    vec4_multiply_f,
    vec4_multiply_mat4,
    vec4_negative,
    vec4_normalize,
    vec4_one,
    vec4_round,
    vec4_sign,
    vec4_snap,
    vec4_snap_f,
    vec4_subtract,
    vec4_subtract_f,
    vec4_zero,
)
from .core.math.quat import (  # noqa: F401
    quat,
    quat_angle,
    quat_assign,
    quat_conjugate,
    quat_divide,
    quat_divide_f,
    quat_dot,
    quat_from_axis_angle,
    quat_from_mat3,
    quat_from_mat4,
    quat_from_vec3,
    quat_inverse,
    quat_is_equal,
    quat_is_zero,
    quat_length,
    quat_length_squared,
    quat_lerp,
    quat_multiply,
    quat_multiply_f,
    quat_negative,
    quat_normalize,
    quat_null,
    quat_power,
    quat_slerp,
    quat_zero,
)
from .core.math.matrix import (  # noqa: F401
    mat2,
    mat2_adjugate,
    mat2_assign,
    mat2_cofactor,
    mat2_determinant,
    mat2_identity,
    mat2_inverse,
    mat2_lerp,
    mat2_multiply,
    mat2_multiply_f,
    mat2_negative,
    mat2_rotation_z,
    mat2_scale,
    mat2_scaling,
    mat2_transpose,
    mat2_zero,
    mat3,
    mat3_assign,
    mat3_cofactor,
    mat3_determinant,
    mat3_identity,
    mat3_inverse,
    mat3_lerp,
    mat3_multiply,
    mat3_multiply_f,
    mat3_negative,
    mat3_rotation_axis,
    mat3_rotation_quat,
    mat3_rotation_x,
    mat3_rotation_y,
    mat3_rotation_z,
    mat3_scale,
    mat3_scaling,
    mat3_transpose,
    mat3_zero,
    mat4,
    mat4_assign,
    mat4_cofactor,
    mat4_determinant,
    mat4_identity,
    mat4_inverse,
    mat4_lerp,
    mat4_look_at,
    mat4_multiply,
    mat4_multiply_f,
    mat4_negative,
    mat4_ortho,
    mat4_perspective,
    mat4_perspective_fov,
    mat4_perspective_infinite,
    mat4_rotation_axis,
    mat4_rotation_quat,
    mat4_rotation_x,
    mat4_rotation_y,
    mat4_rotation_z,
    mat4_scale,
    mat4_scaling,
    mat4_translate,
    mat4_translation,
    mat4_transpose,
    mat4_zero,
)

if ACTIVE.use_int:
    from .core.math.vector_int import (  # noqa: F401
        vec2i,
        vec2i_abs,
        vec2i_add,
        vec2i_add_i,
        vec2i_assign,
        vec2i_assign_vec2,
        vec2i_clamp,
        vec2i_divide,
        vec2i_divide_i,
        vec2i_is_equal,
        vec2i_is_zero,
        vec2i_max,
        vec2i_min,
        vec2i_multiply,
        vec2i_multiply_i,
        vec2i_negative,
        vec2i_one,
        vec2i_sign,
        vec2i_snap,
        vec2i_snap_i,
        vec2i_subtract,
        vec2i_subtract_i,
        vec2i_tangent,
        vec2i_zero,
        vec3i,
        vec3i_abs,
        vec3i_add,
        vec3i_add_i,
        vec3i_assign,
        vec3i_assign_vec3,
        vec3i_clamp,
        vec3i_cross,
        vec3i_divide,
        vec3i_divide_i,
        vec3i_is_equal,
        vec3i_is_zero,
        vec3i_max,
        vec3i_min,
        vec3i_multiply,
        vec3i_multiply_i,
        vec3i_negative,
        vec3i_one,
        vec3i_sign,
        vec3i_snap,
        vec3i_snap_i,
        vec3i_subtract,
        vec3i_subtract_i,
        vec3i_zero,
        vec4i,
        vec4i_abs,
        vec4i_add,
        vec4i_add_i,
        vec4i_assign,
        vec4i_assign_vec4,
        vec4i_clamp,
        vec4i_divide,
        vec4i_divide_i,
        vec4i_is_equal,
        vec4i_is_zero,
        vec4i_max,
        vec4i_min,
        vec4i_multiply,
        vec4i_multiply_i,
        vec4i_negative,
        vec4i_one,
        vec4i_sign,
        vec4i_snap,
        vec4i_snap_i,
        vec4i_subtract,
        vec4i_subtract_i,
        vec4i_zero,
    )

if ACTIVE.use_easing:
    from .core.math.easing import (  # noqa: F401
        EASING_FUNCTIONS,
        back_ease_in,
        back_ease_in_out,
        back_ease_out,
        bounce_ease_in,
        bounce_ease_in_out,
        bounce_ease_out,
        circular_ease_in,
        circular_ease_in_out,
        circular_ease_out,
        cubic_ease_in,
        cubic_ease_in_out,
        cubic_ease_out,
        easing_names,
        elastic_ease_in,
        elastic_ease_in_out,
        elastic_ease_out,
        exponential_ease_in,
        exponential_ease_in_out,
        exponential_ease_out,
        get_easing,
        quadratic_ease_in,
        quadratic_ease_in_out,
        quadratic_ease_out,
        quartic_ease_in,
        quartic_ease_in_out,
        quartic_ease_out,
        quintic_ease_in,
        quintic_ease_in_out,
        quintic_ease_out,
        sine_ease_in,
        sine_ease_in_out,
        sine_ease_out,
    )


__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
