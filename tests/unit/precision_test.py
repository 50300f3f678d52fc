import os
import subprocess
import sys
from pathlib import Path

import numpy as np
from pytest import raises

import vec2d
from vec2d import precision


def test_resolve_precision():
    assert precision.resolve_precision("single") is np.float32
    assert precision.resolve_precision("double") is np.float64
    assert precision.resolve_precision(" Double ") is np.float64


def test_unknown_precision_is_rejected():
    with raises(ValueError):
        precision.resolve_precision("quad")


def test_configured_scalar_matches_name():
    assert precision.PRECISION in ("single", "double")
    assert precision.Real is precision.resolve_precision(precision.PRECISION)


def _import_vec2d(precision_name, code):
    src = Path(vec2d.__file__).resolve().parent.parent
    env = dict(os.environ, VEC2D_PRECISION=precision_name)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(src), env.get("PYTHONPATH", "")) if p)
    return subprocess.run([sys.executable, "-c", code], env=env, capture_output=True, text=True)


def test_double_precision_selected_from_environment():
    code = "\n".join([
        "import numpy as np",
        "from vec2d import PRECISION, Real, Vec2, Vec2i, linalg",
        "assert PRECISION == 'double', PRECISION",
        "assert Real is np.float64",
        "assert type(Vec2().x) is np.float64",
        "assert type(Vec2(1, 2).y) is np.float64",
        "assert type(linalg.norm(Vec2(3, 4))) is np.float64",
        "assert type(linalg.dot_product(Vec2i(1, 2), Vec2i(3, 4))) is np.float64",
        "assert linalg.norm(Vec2(3, 4)) == 5",
    ])
    result = _import_vec2d("double", code)
    assert result.returncode == 0, result.stderr


def test_invalid_precision_fails_at_import():
    result = _import_vec2d("quad", "import vec2d")
    assert result.returncode != 0
    assert "ValueError" in result.stderr
