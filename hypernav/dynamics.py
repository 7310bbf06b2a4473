# -----------------------------
# FILE: hypernav/dynamics.py
# -----------------------------
import numpy as np


def clip_motion(m: np.ndarray) -> np.ndarray:
    """Copy of `m` with its L2 norm capped at 1 (direction kept)."""
    m = np.asarray(m, dtype=float).copy()
    n = np.linalg.norm(m)
    if n > 1:
        m /= n
    return m


def step_state(s: np.ndarray, m: np.ndarray, max_step_size: float) -> np.ndarray:
    return np.clip(s + m * max_step_size, 0.0, 1.0)
