# -----------------------------
# FILE: hypernav/render.py
# -----------------------------

from typing import Optional, Sequence

import numpy as np

from .errors import ConfigError
from .obstacles import Obstacle

OBSTACLE_COLOR = (128, 128, 128)


def render_obstacles(obstacles: Sequence[Optional[Obstacle]], image_size: int,
                     canvas: Optional[np.ndarray] = None) -> np.ndarray:
    """Paint 2D obstacles as filled rectangles onto an image_size x image_size RGB canvas.

    Unit-square coordinates map to pixels by scaling with (image_size - 1);
    x is the column and y the row.
    """
    if canvas is None:
        canvas = np.zeros((image_size, image_size, 3), dtype=np.uint8)
    elif canvas.shape[:2] != (image_size, image_size):
        raise ConfigError(f"Canvas shape {canvas.shape} does not match image size {image_size}")
    scale = image_size - 1
    for o in obstacles:
        if o is None:
            continue
        if o.dim != 2:
            raise ConfigError(f"Only 2D environments can be rendered, got {o.dim}D obstacle")
        x = int(round(o.corner1[0] * scale))
        y = int(round(o.corner1[1] * scale))
        w = int(round(o.size[0] * scale))
        h = int(round(o.size[1] * scale))
        x0, x1 = max(0, x), min(image_size, x + w)
        y0, y1 = max(0, y), min(image_size, y + h)
        if x1 > x0 and y1 > y0:
            canvas[y0:y1, x0:x1] = OBSTACLE_COLOR
    return canvas


def save_obstacle_image(obstacles: Sequence[Optional[Obstacle]], base_path: str, image_size: int) -> Optional[str]:
    """Write the rendered obstacles to `<base_path>.png`; None when there is nothing to draw."""
    if not any(o is not None for o in obstacles):
        return None
    import matplotlib.pyplot as plt

    path = base_path + ".png"
    plt.imsave(path, render_obstacles(obstacles, image_size))
    return path
