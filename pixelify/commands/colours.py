"""Print the sampled colour sequence.

Text output shows the grid as N rows of #rrggbb values followed by the
most used colours. With --json, prints dimension, cell count, the flat
row-major sequence, the rows, and per-colour usage counts.

Example:
    pixelify colours photo.jpg -n 4
    pixelify colours photo.jpg -n 16 --json
"""

from pixelify.core.report import format_json, format_text
from pixelify.core.types import Command, Grid

command = Command(
    name='colours',
    help='Print the N×N colour grid (text or --json).',
)


@command.run
def run(grid: Grid, args) -> None:
    if args.json:
        print(format_json(grid, image_path=args.image))
    else:
        print(format_text(grid, image_path=args.image))
