import numpy as np
import pytest

from v3math import VectorShapeError, ops


@pytest.mark.parametrize(
    "bad",
    [(1, 2), (1, 2, 3, 4), [[1, 2, 3]], np.zeros((3, 1), dtype=np.float32), 5.0],
)
def test_sources_must_have_three_components(bad):
    with pytest.raises(VectorShapeError):
        ops.dot(bad, (1, 2, 3))
    with pytest.raises(VectorShapeError):
        ops.length(bad)


def test_missing_buffers_fail_fast():
    with pytest.raises(TypeError):
        ops.add(None, (1, 2, 3), (1, 2, 3))
    with pytest.raises(TypeError):
        ops.angle(None, (1, 2, 3))
    with pytest.raises(TypeError):
        ops.scale(None, 2.0)


def test_destination_must_be_a_float32_array():
    with pytest.raises(TypeError):
        ops.add([0, 0, 0], (1, 2, 3), (1, 2, 3))
    with pytest.raises(TypeError):
        ops.cross(np.zeros(3), (1, 0, 0), (0, 1, 0))
    with pytest.raises(VectorShapeError):
        ops.normalize(np.zeros(2, dtype=np.float32), (1, 0, 0))


def test_destination_must_be_writable():
    out = ops.zeros()
    out.flags.writeable = False
    with pytest.raises(ValueError):
        ops.reflect(out, (1, 1, 0), (1, 0, 0))


def test_failed_precondition_leaves_destination_untouched():
    out = ops.vec3(1, 2, 3)
    with pytest.raises(VectorShapeError):
        ops.subtract(out, (1, 2), (1, 2, 3))
    assert out.tolist() == [1.0, 2.0, 3.0]


def test_shape_error_is_a_value_error():
    assert issubclass(VectorShapeError, ValueError)


def test_as_vector_does_not_copy_float32_buffers():
    buf = ops.vec3(1, 2, 3)
    assert ops.as_vector(buf) is buf
    assert ops.as_vector((1, 2, 3)).dtype == np.float32
