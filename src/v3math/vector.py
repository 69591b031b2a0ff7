# v3math/vector.py
from typing import Iterator, Union

import numpy as np

from . import ops
from .errors import DomainResult

Scalar = Union[int, float, np.floating]


class Vector3:
    """
    A 3D single-precision vector backed by a float32[3] buffer.

    Instances can be passed anywhere `v3math.ops` expects a buffer; the ops
    then read and write this vector's own storage. Operators return new
    vectors, except scale() which works in place.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = ops.vec3(x, y, z)

    @classmethod
    def wrap(cls, buffer: np.ndarray) -> "Vector3":
        """Wrap an existing float32[3] buffer without copying it."""
        v = cls.__new__(cls)
        v._data = ops.as_output(buffer, "buffer")
        return v

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_points(cls, a, b) -> "Vector3":
        """Vector from point a to point b."""
        out = cls()
        ops.from_points(out, a, b)
        return out

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float):
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float):
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float):
        self._data[2] = value

    def __array__(self, dtype=None, copy=None):
        if dtype is not None and np.dtype(dtype) != np.float32:
            return self._data.astype(dtype)
        if copy:
            return self._data.copy()
        return self._data

    def __len__(self) -> int:
        return 3

    def __getitem__(self, i: int) -> float:
        return float(self._data[i])

    def __setitem__(self, i: int, value: float):
        self._data[i] = value

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._data)

    def __add__(self, other) -> "Vector3":
        out = Vector3()
        ops.add(out, self, other)
        return out

    def __sub__(self, other) -> "Vector3":
        out = Vector3()
        ops.subtract(out, self, other)
        return out

    def __neg__(self) -> "Vector3":
        return self * -1.0

    def __mul__(self, s: Scalar) -> "Vector3":
        if not isinstance(s, (int, float, np.floating)):
            return NotImplemented
        out = self.copy()
        ops.scale(out, s)
        return out

    def __rmul__(self, s: Scalar) -> "Vector3":
        return self.__mul__(s)

    def __truediv__(self, t: Scalar) -> "Vector3":
        if not isinstance(t, (int, float, np.floating)):
            return NotImplemented
        return self.__mul__(1.0 / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def copy(self) -> "Vector3":
        return Vector3(*self._data)

    def isclose(self, other, tolerance: float) -> bool:
        return ops.equals(self, other, tolerance)

    def dot(self, other) -> float:
        return ops.dot(self, other)

    def cross(self, other) -> "Vector3":
        out = Vector3()
        ops.cross(out, self, other)
        return out

    def length(self) -> float:
        return ops.length(self)

    def normalize(self) -> "Vector3":
        """Unit vector along self; the zero vector if self has zero length."""
        out = Vector3()
        ops.normalize(out, self)
        return out

    def scale(self, s: Scalar) -> "Vector3":
        """Scale in place and return self."""
        ops.scale(self, s)
        return self

    def angle(self, other) -> DomainResult:
        return ops.angle(self, other)

    def angle_quick(self, other) -> DomainResult:
        return ops.angle_quick(self, other)

    def reflect(self, n) -> "Vector3":
        out = Vector3()
        ops.reflect(out, self, n)
        return out

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
