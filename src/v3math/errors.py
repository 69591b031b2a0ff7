# v3math/errors.py
from enum import IntEnum
from typing import NamedTuple

from .kernels import STATUS_EINVAL, STATUS_OK


class Status(IntEnum):
    """Outcome of an operation that can hit a numeric domain error."""
    OK = STATUS_OK
    EINVAL = STATUS_EINVAL


class DomainResult(NamedTuple):
    """
    A scalar result paired with its status.
    When status is EINVAL, value holds the operation's documented sentinel.
    """
    value: float
    status: Status

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


class VectorShapeError(ValueError):
    """Raised when a buffer is not a 3-component vector."""
