"""Image → grid → document pipeline and the request-coalescing Session.

`pixelate` is the pure pipeline: composite, then sample. `Session` sits at
the caller boundary where parameters change in bursts (a slider being
dragged, a new file picked while the last one is still processing). Every
change issues a new Request; only the most recently issued Request may
commit its Grid, so results of superseded requests are discarded no matter
what order they finish in.
"""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from pixelify.core.compositor import composite
from pixelify.core.document import generate
from pixelify.core.sampler import sample, validate_dimension
from pixelify.core.types import BACKGROUND, CANVAS_SIZE, DEFAULT_DIMENSION, Grid

__all__ = ['Request', 'Session', 'pixelate', 'validate_dimension']


def pixelate(
    image: Image.Image,
    dimension: int,
    canvas_size: int = CANVAS_SIZE,
    background: str = BACKGROUND,
) -> Grid:
    """Composite image onto the canvas and sample an N×N Grid from it."""
    validate_dimension(dimension)
    canvas = composite(image, canvas_size=canvas_size, background=background)
    colours = sample(canvas, dimension, canvas_size=canvas_size)
    return Grid(colours=colours, dimension=dimension)


@dataclass(frozen=True)
class Request:
    """One (image, dimension) pair issued to a Session."""

    serial: int
    image: Image.Image | None
    dimension: int


class Session:
    """Holds the last committed Grid; latest issued request wins."""

    def __init__(
        self,
        dimension: int = DEFAULT_DIMENSION,
        canvas_size: int = CANVAS_SIZE,
        background: str = BACKGROUND,
    ):
        self.canvas_size = canvas_size
        self.background = background
        self._image: Image.Image | None = None
        self._dimension = validate_dimension(dimension)
        self._serial = 0
        self.grid: Grid | None = None

    @property
    def dimension(self) -> int:
        return self._dimension

    def begin(self, image: Image.Image | None = None, dimension: int | None = None) -> Request:
        """Issue a new request; every earlier request becomes stale."""
        if dimension is not None:
            self._dimension = validate_dimension(dimension)
        if image is not None:
            self._image = image
        self._serial += 1
        return Request(serial=self._serial, image=self._image, dimension=self._dimension)

    def is_current(self, request: Request) -> bool:
        return request.serial == self._serial

    def complete(self, request: Request) -> Grid | None:
        """Run the pipeline for request; commit only if it is still current."""
        if request.image is None:
            return None
        if not self.is_current(request):
            return None
        grid = pixelate(
            request.image,
            request.dimension,
            canvas_size=self.canvas_size,
            background=self.background,
        )
        # A newer request may have been issued while this one ran
        if not self.is_current(request):
            return None
        self.grid = grid
        return grid

    def update(self, image: Image.Image | None = None, dimension: int | None = None) -> Grid | None:
        return self.complete(self.begin(image=image, dimension=dimension))

    def document(self, legacy: bool = False) -> str | None:
        """Re-serialize the last committed grid without recomputing it."""
        if self.grid is None:
            return None
        return generate(self.grid.colours, self.grid.dimension, legacy=legacy)
