"""Point-sample one colour per grid cell from a composited buffer.

For each cell (row-major: y outer, x inner) the sample point is the cell
centre, (x * cell + cell / 2, y * cell + cell / 2) with cell = canvas / N.
The point is truncated toward zero to an integer pixel index and that
single pixel's colour is taken. No averaging.
"""

from typing import Protocol

import numpy as np

from pixelify.core.colour import rgb_to_hex
from pixelify.core.types import InvalidDimensionError, MAX_DIMENSION, MIN_DIMENSION


class PixelBuffer(Protocol):
    """Anything that supports point sampling by integer coordinate.

    PIL images satisfy this directly.
    """

    @property
    def size(self) -> tuple[int, int]: ...

    def getpixel(self, xy: tuple[int, int]): ...


class ArrayBuffer:
    """PixelBuffer over an H×W×3 (or ×4) numpy array."""

    def __init__(self, array: np.ndarray):
        if array.ndim != 3 or array.shape[2] < 3:
            raise ValueError(f'expected an HxWx3 or HxWx4 array, got shape {array.shape}')
        self.array = array

    @property
    def size(self) -> tuple[int, int]:
        return (int(self.array.shape[1]), int(self.array.shape[0]))

    def getpixel(self, xy: tuple[int, int]) -> tuple[int, ...]:
        x, y = xy
        return tuple(int(c) for c in self.array[y, x])


def validate_dimension(dimension) -> int:
    """Return dimension if it is an int in [MIN_DIMENSION, MAX_DIMENSION]."""
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise InvalidDimensionError(f'dimension must be an integer, got {dimension!r}')
    if not MIN_DIMENSION <= dimension <= MAX_DIMENSION:
        raise InvalidDimensionError(
            f'dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {dimension}'
        )
    return dimension


def sample_points(dimension: int, canvas_size: float) -> list[tuple[int, int]]:
    """Integer pixel coordinates sampled for each cell, row-major."""
    cell = canvas_size / dimension
    points = []
    for y in range(dimension):
        for x in range(dimension):
            sx = x * cell + cell / 2
            sy = y * cell + cell / 2
            points.append((int(sx), int(sy)))
    return points


def sample(buffer: PixelBuffer, dimension: int, canvas_size: float | None = None) -> tuple[str, ...]:
    """Return dimension² hex colours, one per cell, row-major."""
    validate_dimension(dimension)
    if canvas_size is None:
        canvas_size = buffer.size[0]

    colours = []
    for point in sample_points(dimension, canvas_size):
        px = buffer.getpixel(point)
        if isinstance(px, int):
            # Single-band images ('L', '1') return a scalar
            px = (px, px, px)
        colours.append(rgb_to_hex(px[0], px[1], px[2]))
    return tuple(colours)
