from __future__ import annotations

import logging
import os

import numpy as np

logger = logging.getLogger(__name__)

ENV_VAR = "VEC2D_PRECISION"
DEFAULT_PRECISION = "single"

_SCALARS: dict[str, type] = {
    "single": np.float32,
    "double": np.float64,
}


def resolve_precision(name: str) -> type:
    """Scalar type for a precision name ("single" or "double")."""
    key = name.strip().lower()
    if key not in _SCALARS:
        raise ValueError(f'precision must be one of: {", ".join(sorted(_SCALARS))}, got {name!r}')
    return _SCALARS[key]


# read once per process; not meant to be changed afterwards
PRECISION: str = os.environ.get(ENV_VAR, DEFAULT_PRECISION).strip().lower()
Real: type = resolve_precision(PRECISION)

logger.debug("vec2d scalar precision: %s (%s)", PRECISION, Real.__name__)
