"""Shared types for pixelify: Command, Grid, Placement, Settings and errors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

MIN_DIMENSION = 2
MAX_DIMENSION = 128
DEFAULT_DIMENSION = 16
CANVAS_SIZE = 100
BACKGROUND = '#ffffff'


class PixelifyError(Exception):
    """Base class for every error pixelify reports to the user."""


class DecodeError(PixelifyError):
    """The input image could not be opened or decoded."""


class InvalidDimensionError(PixelifyError, ValueError):
    """Grid dimension outside [MIN_DIMENSION, MAX_DIMENSION]."""


class SinkError(PixelifyError):
    """A text sink (clipboard, file) refused the generated document."""

    def __init__(self, sink: str, message: str):
        super().__init__(f'{sink}: {message}')
        self.sink = sink


@dataclass(frozen=True)
class Placement:
    """Where a scaled image lands on the square canvas (real-valued)."""

    scale: float
    draw_width: float
    draw_height: float
    offset_x: float
    offset_y: float


@dataclass(frozen=True)
class Grid:
    """N×N colour sequence, row-major (index = y * N + x)."""

    colours: tuple[str, ...]
    dimension: int

    def __post_init__(self) -> None:
        if len(self.colours) != self.dimension * self.dimension:
            raise ValueError(
                f'Grid of dimension {self.dimension} needs {self.dimension**2} colours, got {len(self.colours)}'
            )

    @property
    def cells(self) -> int:
        return len(self.colours)

    def cell(self, x: int, y: int) -> str:
        return self.colours[y * self.dimension + x]

    def rows(self) -> list[tuple[str, ...]]:
        n = self.dimension
        return [self.colours[y * n : (y + 1) * n] for y in range(n)]


@dataclass(frozen=True)
class Settings:
    """Defaults resolved from the environment / .env (CLI flags override)."""

    dimension: int = DEFAULT_DIMENSION
    canvas_size: int = CANVAS_SIZE
    background: str = BACKGROUND
    legacy_html: bool = False


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='html', help='Write the generated HTML page')

        @command.run
        def run(grid, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, grid: Grid, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(grid, args)
