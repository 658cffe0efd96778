"""Write every artefact into one directory.

Produces <out_dir>/pixel-art.html, <out_dir>/pixel-art.png and
<out_dir>/colours.json (or colours.txt without --json). The output
directory defaults to the current directory; -o names it.
Skips: copy (touches the clipboard — run explicitly if needed).

Example:
    pixelify all photo.jpg -n 32 -o ./out
"""

import os
import sys

from pixelify.commands.preview import save_preview
from pixelify.core.document import generate
from pixelify.core.report import format_json, format_text
from pixelify.core.sinks import write_file
from pixelify.core.types import Command, Grid

command = Command(
    name='all',
    help='Write HTML page, PNG preview and colour listing into a directory.',
)


@command.run
def run(grid: Grid, args) -> None:
    out_dir = getattr(args, 'out', None) or '.'

    written = [
        write_file(
            generate(grid.colours, grid.dimension, legacy=args.legacy),
            os.path.join(out_dir, 'pixel-art.html'),
        ),
        save_preview(grid, os.path.join(out_dir, 'pixel-art.png'), args.cell_px),
    ]
    if args.json:
        written.append(write_file(format_json(grid, image_path=args.image), os.path.join(out_dir, 'colours.json')))
    else:
        written.append(write_file(format_text(grid, image_path=args.image), os.path.join(out_dir, 'colours.txt')))

    for path in written:
        print(f'pixelify: wrote {path}', file=sys.stderr)
