"""Write the grid as a standalone HTML page.

The page holds one CSS rule and one <div> per cell inside an N-column
CSS grid, so it renders the pixel art with no reference to the source
image. Default output file is pixel-art.html; pass `-o -` for stdout.

Use --legacy for byte-compatible output with pages produced by older
versions (one extra `undefined` cell, duplicated column declaration).

Example:
    pixelify html photo.jpg -n 32 -o art.html
    pixelify html photo.jpg -n 8 -o - > art.html
"""

import sys

from pixelify.core.document import generate
from pixelify.core.sinks import write_file
from pixelify.core.types import Command, Grid

command = Command(
    name='html',
    help='Write the generated HTML page to a file (or stdout with -o -).',
)

DEFAULT_OUT = 'pixel-art.html'


@command.run
def run(grid: Grid, args) -> None:
    text = generate(grid.colours, grid.dimension, legacy=args.legacy)
    out = getattr(args, 'out', None) or DEFAULT_OUT
    if out == '-':
        sys.stdout.write(text)
        return
    path = write_file(text, out)
    print(f'pixelify: wrote {path}', file=sys.stderr)
