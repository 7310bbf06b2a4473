# -----------------------------
# FILE: hypernav/utils.py
# -----------------------------

import json
import logging
import os
from typing import Any, Dict

import numpy as np

from .errors import ConfigError, StepError

LOGGER = logging.getLogger("hypernav")
if not LOGGER.handlers:
    _h = logging.StreamHandler()
    _fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    _h.setFormatter(_fmt)
    LOGGER.addHandler(_h)
LOGGER.setLevel(logging.INFO)


def read_json(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}", hint="Check path or working directory.")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}", hint="Validate JSON with a linter.")


def require(condition: bool, msg: str, hint: str = ""):
    if not condition:
        raise ConfigError(msg, hint=hint)


def ensure_vector(values, size: int, name: str) -> np.ndarray:
    """Return `values` as a float vector of length `size`, rejecting NaN/inf.

    Non-finite entries mean the upstream controller is broken, so this raises
    StepError instead of letting NaN leak into the state.
    """
    try:
        v = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise StepError(f"{name} is not numeric: {e}")
    if v.shape != (size,):
        raise StepError(f"{name} has shape {v.shape}, expected ({size},)")
    if not np.all(np.isfinite(v)):
        raise StepError(f"{name} contains non-finite values: {v.tolist()}",
                        hint="Check the agent controller output for NaN/inf.")
    return v
