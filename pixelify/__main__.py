"""pixelify — Convert a picture into pixel art and get the result as an HTML page.

Usage: pixelify <command> <image> [options]

The image is scaled to fit a square canvas (centred, white letterbox),
one colour is sampled at the centre of each cell of an N×N grid, and the
grid is written out as a standalone HTML page, a PNG preview, or a
colour listing.

Commands are auto-discovered from pixelify/commands/.
Each command module's docstring is its documentation.
Run `pixelify help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, pixelify looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from pixelify.core.colour import normalize_hex
from pixelify.core.compositor import load_image
from pixelify.core.env import load_env, load_settings
from pixelify.core.pipeline import pixelate, validate_dimension
from pixelify.core.types import MAX_DIMENSION, MIN_DIMENSION, PixelifyError, SinkError
from pixelify.registry import commands


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  pixelify html photo.jpg -n 32 -o art.html\n'
        '  pixelify html photo.jpg -n 8 -o -\n'
        '  pixelify copy photo.jpg -n 24\n'
        '  pixelify colours photo.jpg -n 4 --json\n'
        '  pixelify preview photo.jpg -n 16 --cell-px 10\n'
        '  pixelify all photo.jpg -n 32 -o ./out\n'
        '  pixelify help html\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  PIXELIFY_DIMENSION=16       default grid size\n'
        '  PIXELIFY_CANVAS_SIZE=100    compositing canvas edge in pixels\n'
        '  PIXELIFY_BACKGROUND=#ffffff letterbox colour\n'
        '  PIXELIFY_LEGACY_HTML=0      byte-compatible legacy HTML\n'
    )
    parser = argparse.ArgumentParser(
        prog='pixelify',
        description='Convert a picture into pixel art and get the result as an HTML page.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name in commands:
        p = sub.add_parser(name, help=commands.summary(name))
        p.add_argument('image', help='Path to the source image (any format Pillow reads)')
        p.add_argument(
            '-n',
            '--dimension',
            type=int,
            default=None,
            metavar='N',
            help=f'Grid size N, {MIN_DIMENSION}..{MAX_DIMENSION} (default: PIXELIFY_DIMENSION or 16)',
        )
        p.add_argument('-o', '--out', default=None, help='Output file (or directory for `all`)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '--legacy',
            action=argparse.BooleanOptionalAction,
            default=None,
            help='Byte-compatible legacy HTML (default: PIXELIFY_LEGACY_HTML or off)',
        )
        p.add_argument('--canvas-size', type=int, default=None, metavar='PX', help='Canvas edge (default: 100)')
        p.add_argument('--background', default=None, metavar='HEX', help='Letterbox colour (default: #ffffff)')
        p.add_argument('--cell-px', type=int, default=8, metavar='PX', help='Preview cell size (default: 8)')

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    if topic is None:
        print('Available commands:\n')
        for name in commands:
            print(f'  {name:<10} {commands.summary(name)}')
        print('\nRun: pixelify help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(commands.names())}', file=sys.stderr)
        sys.exit(1)

    doc = commands.doc(topic)
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _resolve_options(args: argparse.Namespace) -> None:
    """Fill unset flags from Settings and validate them before any image work."""
    settings = load_settings()
    if args.dimension is None:
        args.dimension = settings.dimension
    args.dimension = validate_dimension(args.dimension)

    if args.canvas_size is None:
        args.canvas_size = settings.canvas_size
    if args.canvas_size < 1:
        raise PixelifyError(f'--canvas-size must be positive, got {args.canvas_size}')

    if args.background is None:
        args.background = settings.background
    try:
        args.background = normalize_hex(args.background)
    except ValueError:
        raise PixelifyError(f'--background must be a hex colour, got {args.background!r}') from None

    if args.legacy is None:
        args.legacy = settings.legacy_html
    if args.cell_px < 1:
        raise PixelifyError(f'--cell-px must be positive, got {args.cell_px}')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'pixelify: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    try:
        _resolve_options(args)
        image = load_image(args.image)
        grid = pixelate(
            image,
            args.dimension,
            canvas_size=args.canvas_size,
            background=args.background,
        )
        commands.get(args.command).execute(grid, args)
    except SinkError as e:
        print(f'Error: {e}', file=sys.stderr)
        if e.sink == 'clipboard':
            print('Failed to copy the HTML code, save it to a file instead: pixelify html ...', file=sys.stderr)
        sys.exit(1)
    except PixelifyError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
