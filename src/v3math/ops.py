# v3math/ops.py
"""
Python-facing vector operations.

Arguments are checked here and then handed to the jitted kernels in
`v3math.kernels`. Sources may be any 3-sequence; destinations must be
writable float32 buffers of shape (3,) (or a Vector3), and may be the same
buffer as a source.
"""
import logging
from typing import Any

import numpy as np

from . import kernels
from .errors import DomainResult, Status, VectorShapeError

log = logging.getLogger(__name__)


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """New float32 buffer holding (x, y, z)."""
    return np.array((x, y, z), dtype=np.float32)


def zeros() -> np.ndarray:
    return np.zeros(3, dtype=np.float32)


def as_vector(v: Any, name: str = "v") -> np.ndarray:
    """
    View v as a float32[3] buffer, converting only when it is not one already.
    float32 arrays and Vector3 instances come back without a copy.
    """
    if v is None:
        raise TypeError(f"{name} must be a 3-vector, got None")
    buf = np.asarray(v, dtype=np.float32)
    if buf.shape != (3,):
        raise VectorShapeError(f"{name} must have shape (3,), got {buf.shape}")
    return buf


def as_output(dst: Any, name: str = "dst") -> np.ndarray:
    """Check that dst is a writable float32[3] buffer and return it."""
    if dst is None:
        raise TypeError(f"{name} must be a 3-vector, got None")
    if not hasattr(dst, "__array__"):
        raise TypeError(f"{name} must be a float32 array or Vector3, got {type(dst).__name__}")
    buf = np.asarray(dst)
    if buf.dtype != np.float32:
        raise TypeError(f"{name} must have dtype float32, got {buf.dtype}")
    if buf.shape != (3,):
        raise VectorShapeError(f"{name} must have shape (3,), got {buf.shape}")
    if not buf.flags.writeable:
        raise ValueError(f"{name} is read-only")
    return buf


def from_points(dst, a, b) -> None:
    """dst = b - a"""
    kernels.from_points(as_output(dst), as_vector(a, "a"), as_vector(b, "b"))


def add(dst, a, b) -> None:
    """dst = a + b"""
    kernels.add(as_output(dst), as_vector(a, "a"), as_vector(b, "b"))


def subtract(dst, a, b) -> None:
    """dst = a - b"""
    kernels.subtract(as_output(dst), as_vector(a, "a"), as_vector(b, "b"))


def dot(a, b) -> float:
    return float(kernels.dot(as_vector(a, "a"), as_vector(b, "b")))


def cross(dst, a, b) -> None:
    """dst = a x b (right-handed). Parallel inputs give the zero vector."""
    kernels.cross(as_output(dst), as_vector(a, "a"), as_vector(b, "b"))


def scale(v, s: float) -> None:
    """Multiply v by s in place."""
    kernels.scale_inplace(as_output(v, "v"), s)


def length(v) -> float:
    return float(kernels.length(as_vector(v)))


def normalize(dst, a) -> Status:
    """
    dst = a / |a|.

    A zero length a writes the zero vector into dst, logs an error and
    returns Status.EINVAL instead of raising.
    """
    src = as_vector(a, "a")
    status = Status(kernels.normalize(as_output(dst), src))
    if status is not Status.OK:
        log.error("normalize: cannot normalize zero length vector")
    return status


def angle(a, b) -> DomainResult:
    """
    Angle between a and b in radians, in [0, pi].

    If either vector has zero length the result is (0.0, Status.EINVAL) and
    an error is logged.
    """
    va, vb = as_vector(a, "a"), as_vector(b, "b")
    value, status = kernels.angle(va, vb)
    return _domain_result("angle", float(value), Status(status), va, vb)


def angle_quick(a, b) -> DomainResult:
    """
    Cosine of the angle between a and b, in [-1, 1].

    Cheaper than angle() and ordered the opposite way: a larger cosine
    means a smaller angle. Zero length input gives (1.0, Status.EINVAL).
    """
    va, vb = as_vector(a, "a"), as_vector(b, "b")
    value, status = kernels.angle_quick(va, vb)
    return _domain_result("angle_quick", float(value), Status(status), va, vb)


def _domain_result(op: str, value: float, status: Status, a: np.ndarray, b: np.ndarray) -> DomainResult:
    if status is not Status.OK:
        log.error(
            "%s: cannot compute angle with zero length vector (|a|=%g, |b|=%g)",
            op, kernels.length(a), kernels.length(b),
        )
    return DomainResult(value, status)


def reflect(dst, v, n) -> None:
    """dst = v - 2(v.n)n. The caller must pass a unit length n."""
    kernels.reflect(as_output(dst), as_vector(v, "v"), as_vector(n, "n"))


def equals(a, b, tolerance: float) -> bool:
    """True if every component of a and b is identical or differs by at most tolerance."""
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    return bool(kernels.equals(as_vector(a, "a"), as_vector(b, "b"), tolerance))
