"""Save a PNG preview of the pixel grid.

Each cell is drawn as a solid --cell-px square (default 8), so a 16×16
grid gives a 128×128 image. Default output is pixel-art.png.

Example:
    pixelify preview photo.jpg -n 32 -o preview.png --cell-px 4
"""

import os
import sys

from pixelify.core.preview import render_preview
from pixelify.core.types import Command, Grid, SinkError

command = Command(
    name='preview',
    help='Save a PNG rendering of the grid (each cell --cell-px square).',
)

DEFAULT_OUT = 'pixel-art.png'


def save_preview(grid: Grid, path: str, cell_px: int) -> str:
    image = render_preview(grid, cell_px=cell_px)
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        image.save(path, format='PNG')
    except OSError as e:
        raise SinkError('file', f'cannot write {path}: {e}') from e
    return path


@command.run
def run(grid: Grid, args) -> None:
    out = getattr(args, 'out', None) or DEFAULT_OUT
    path = save_preview(grid, out, args.cell_px)
    print(f'pixelify: wrote {path}', file=sys.stderr)
