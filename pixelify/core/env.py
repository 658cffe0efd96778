"""Environment and .env configuration for pixelify.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read from the environment (CLI flags override them):
  PIXELIFY_DIMENSION     grid size N, 2..128 (default 16)
  PIXELIFY_CANVAS_SIZE   compositing canvas edge in pixels (default 100)
  PIXELIFY_BACKGROUND    letterbox fill colour (default #ffffff)
  PIXELIFY_LEGACY_HTML   1/true/yes/on for byte-compatible legacy HTML
"""

import os
from pathlib import Path

from pixelify.core.colour import normalize_hex
from pixelify.core.sampler import validate_dimension
from pixelify.core.types import BACKGROUND, CANVAS_SIZE, DEFAULT_DIMENSION, PixelifyError, Settings

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', ''}


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes stripped, comments and junk ignored."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _int_var(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise PixelifyError(f'{name} must be an integer, got {raw!r}') from None


def _bool_var(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise PixelifyError(f'{name} must be one of 1/0/true/false/yes/no/on/off, got {raw!r}')


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    dimension = _int_var('PIXELIFY_DIMENSION', DEFAULT_DIMENSION)
    try:
        validate_dimension(dimension)
    except ValueError as e:
        raise PixelifyError(f'PIXELIFY_DIMENSION: {e}') from None

    canvas_size = _int_var('PIXELIFY_CANVAS_SIZE', CANVAS_SIZE)
    if canvas_size < 1:
        raise PixelifyError(f'PIXELIFY_CANVAS_SIZE must be positive, got {canvas_size}')

    raw_bg = os.environ.get('PIXELIFY_BACKGROUND') or BACKGROUND
    try:
        background = normalize_hex(raw_bg)
    except ValueError:
        raise PixelifyError(f'PIXELIFY_BACKGROUND must be a hex colour, got {raw_bg!r}') from None

    return Settings(
        dimension=dimension,
        canvas_size=canvas_size,
        background=background,
        legacy_html=_bool_var('PIXELIFY_LEGACY_HTML', False),
    )
