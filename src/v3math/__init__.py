"""Single-precision 3-component vector math on caller-owned float32 buffers."""
from .errors import DomainResult, Status, VectorShapeError
from .kernels import EPSILON
from .ops import (
    add,
    angle,
    angle_quick,
    as_output,
    as_vector,
    cross,
    dot,
    equals,
    from_points,
    length,
    normalize,
    reflect,
    scale,
    subtract,
    vec3,
    zeros,
)
from .vector import Vector3

__all__ = [
    "DomainResult",
    "EPSILON",
    "Status",
    "Vector3",
    "VectorShapeError",
    "add",
    "angle",
    "angle_quick",
    "as_output",
    "as_vector",
    "cross",
    "dot",
    "equals",
    "from_points",
    "length",
    "normalize",
    "reflect",
    "scale",
    "subtract",
    "vec3",
    "zeros",
]
