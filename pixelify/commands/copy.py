"""Copy the generated HTML page to the system clipboard.

Uses the first clipboard helper found on PATH: pbcopy, clip, wl-copy,
xclip or xsel. If none is available, or the helper refuses, the command
fails with a clear message; use `pixelify html` to save a file instead.

Example:
    pixelify copy photo.jpg -n 24
"""

import sys

from pixelify.core.document import generate
from pixelify.core.sinks import copy_to_clipboard
from pixelify.core.types import Command, Grid

command = Command(
    name='copy',
    help='Copy the generated HTML page to the system clipboard.',
)


@command.run
def run(grid: Grid, args) -> None:
    text = generate(grid.colours, grid.dimension, legacy=args.legacy)
    helper = copy_to_clipboard(text)
    print(f'pixelify: the HTML code has been copied ({helper})', file=sys.stderr)
