from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

# Ensure src/ is importable when running pytest from any CWD.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

# Comparison tolerance for results, looser than the library's EPSILON.
TOLERANCE = 1e-5


def v3(x: float, y: float, z: float) -> np.ndarray:
    return np.array((x, y, z), dtype=np.float32)


def assert_vec_close(actual, expected, tol: float = TOLERANCE) -> None:
    from v3math import equals

    assert equals(actual, expected, tol), f"expected {tuple(expected)}, got {tuple(actual)}"
