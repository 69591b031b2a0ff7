# v3math/kernels.py

import errno
import math

import numpy as np
from numba import njit

# Vectors shorter than this are treated as zero length.
EPSILON = np.float32(1e-6)

# Status codes returned by the kernels that can hit a domain error.
STATUS_OK = 0
STATUS_EINVAL = errno.EINVAL

# -------------------------------------------------------------------------
# Every kernel takes float32[3] buffers, output first. Results are staged in
# locals before any output element is written, so `out` may be the same
# buffer as any of the inputs.

@njit
def from_points(out, a, b):
    """Vector pointing from point a to point b (out = b - a)."""
    t0 = b[0] - a[0]
    t1 = b[1] - a[1]
    t2 = b[2] - a[2]
    out[0] = t0
    out[1] = t1
    out[2] = t2

@njit
def add(out, a, b):
    t0 = a[0] + b[0]
    t1 = a[1] + b[1]
    t2 = a[2] + b[2]
    out[0] = t0
    out[1] = t1
    out[2] = t2

@njit
def subtract(out, a, b):
    t0 = a[0] - b[0]
    t1 = a[1] - b[1]
    t2 = a[2] - b[2]
    out[0] = t0
    out[1] = t1
    out[2] = t2

@njit
def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

@njit
def cross(out, a, b):
    """Right-handed cross product, storing result in out."""
    t0 = a[1] * b[2] - a[2] * b[1]
    t1 = a[2] * b[0] - a[0] * b[2]
    t2 = a[0] * b[1] - a[1] * b[0]
    out[0] = t0
    out[1] = t1
    out[2] = t2

@njit
def scale_inplace(v, s):
    """Multiply v by the scalar s in-place."""
    s32 = np.float32(s)
    v[0] *= s32
    v[1] *= s32
    v[2] *= s32

@njit
def length(v):
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])

@njit
def normalize(out, a):
    """
    Write the unit vector along a into out.
    A zero length input writes the zero vector and returns STATUS_EINVAL.
    """
    ln = length(a)
    if ln < EPSILON:
        out[0] = 0.0
        out[1] = 0.0
        out[2] = 0.0
        return STATUS_EINVAL

    inv_len = np.float32(1.0) / ln
    t0 = a[0] * inv_len
    t1 = a[1] * inv_len
    t2 = a[2] * inv_len
    out[0] = t0
    out[1] = t1
    out[2] = t2
    return STATUS_OK

@njit
def _clamped_cosine(a, b):
    len_a = length(a)
    len_b = length(b)
    if len_a < EPSILON or len_b < EPSILON:
        return np.float32(1.0), STATUS_EINVAL

    c = dot(a, b) / (len_a * len_b)
    # Rounding can push the cosine just outside acos' domain.
    if c > 1.0:
        c = np.float32(1.0)
    elif c < -1.0:
        c = np.float32(-1.0)
    return c, STATUS_OK

@njit
def angle(a, b):
    """
    Angle between a and b in radians, in [0, pi].
    Returns (angle, status); a zero length operand gives (0.0, STATUS_EINVAL).
    """
    c, status = _clamped_cosine(a, b)
    if status != STATUS_OK:
        return np.float32(0.0), status
    return np.float32(math.acos(c)), STATUS_OK

@njit
def angle_quick(a, b):
    """
    Cosine of the angle between a and b, skipping acos.
    Orders pairs the same way as angle() but reversed: larger means closer.
    Returns (cosine, status); a zero length operand gives (1.0, STATUS_EINVAL).
    """
    return _clamped_cosine(a, b)

@njit
def reflect(out, v, n):
    """Reflect v about the unit normal n (out = v - 2(v.n)n). n is not normalized here."""
    d = dot(v, n)
    d2 = d + d
    t0 = v[0] - d2 * n[0]
    t1 = v[1] - d2 * n[1]
    t2 = v[2] - d2 * n[2]
    out[0] = t0
    out[1] = t1
    out[2] = t2

@njit
def equals(a, b, tolerance):
    """True when every component pair is identical or within tolerance."""
    for i in range(3):
        if a[i] == b[i]:
            continue
        # NaN differences fail this test as well.
        if not abs(a[i] - b[i]) <= tolerance:
            return False
    return True
