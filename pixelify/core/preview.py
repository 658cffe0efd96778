"""Render a Grid back into an image (the on-screen preview, as a PNG)."""

import numpy as np
from PIL import Image

from pixelify.core.colour import hex_to_rgb
from pixelify.core.types import Grid


def render_preview(grid: Grid, cell_px: int = 8) -> Image.Image:
    """Return an (N * cell_px)² RGB image, each cell one solid colour."""
    if cell_px < 1:
        raise ValueError(f'cell_px must be >= 1, got {cell_px}')
    n = grid.dimension
    cells = np.array([hex_to_rgb(c) for c in grid.colours], dtype=np.uint8).reshape(n, n, 3)
    # Blow each cell up to a cell_px square block
    arr = np.repeat(np.repeat(cells, cell_px, axis=0), cell_px, axis=1)
    return Image.fromarray(arr)
