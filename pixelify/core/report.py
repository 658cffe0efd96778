"""Report builder — text and JSON output for a sampled grid."""

import json
import os
from typing import Any

from pixelify.core.types import Grid


def colour_usage(grid: Grid) -> list[tuple[str, int]]:
    """(colour, count) pairs, most frequent first; ties keep first appearance."""
    counts: dict[str, int] = {}
    for c in grid.colours:
        counts[c] = counts.get(c, 0) + 1
    return sorted(counts.items(), key=lambda x: -x[1])


def format_text(grid: Grid, image_path: str = '', top: int = 5) -> str:
    """Format the grid as rows of hex colours plus a usage summary."""
    n = grid.dimension
    name = os.path.basename(image_path) if image_path else '<image>'
    lines = [f'pixelify: {name} ({n}×{n}, {grid.cells} cells)', '']

    for row in grid.rows():
        lines.append(' '.join(row))
    lines.append('')

    usage = colour_usage(grid)
    parts = [f'{c}:{count / grid.cells * 100:.1f}%' for c, count in usage[:top]]
    lines.append(f'colours: {len(usage)} unique  top: {", ".join(parts)}')
    return '\n'.join(lines)


def format_json(grid: Grid, image_path: str = '') -> str:
    """Format the grid as JSON."""
    obj: dict[str, Any] = {
        'image': image_path,
        'dimension': grid.dimension,
        'cells': grid.cells,
        'colours': list(grid.colours),
        'rows': [list(r) for r in grid.rows()],
        'usage': [{'hex': c, 'count': count} for c, count in colour_usage(grid)],
    }
    return json.dumps(obj, indent=2)
