"""Math utilities namespace."""

from . import easing, matrix, quat, scalar, vector, vector_int  # noqa: F401
