"""Serialize a colour grid as a standalone HTML page.

The page is one line of markup with an inline <style>: a CSS grid wrapper
with N equal columns, one `.pxK` rule per cell setting its background,
and one `<div class="px pxK">` per cell in the same order. Class indices
are 1-based. No scripts and no external resources.

`legacy=True` reproduces the historical output byte-for-byte: it iterates
one index past the end (an extra rule whose colour is `undefined` and an
extra cell) and declares grid-template-columns twice. Existing consumers
that diff against old pages can opt into it; everything else should use
the default, which emits exactly N² rules and N² cells.
"""

import re
from collections.abc import Sequence

_HEAD = (
    '<!DOCTYPE html><html lang="en"><head><meta charset="UTF-8" />'
    '<meta name="viewport" content="width=device-width, initial-scale=1.0" />'
    '<title>Pixel Art</title>'
)

_RULE_RE = re.compile(r'\.px(\d+)\{background-color: ([^}]*)\}')
_CELL_RE = re.compile(r'<div class="px px(\d+)"></div>')


def _columns(dimension: int, legacy: bool) -> str:
    decl = f'grid-template-columns:repeat({dimension},1fr);'
    return decl * 2 if legacy else decl


def generate(colours: Sequence[str], dimension: int, legacy: bool = False) -> str:
    """Return the HTML document for a row-major colour sequence."""
    count = len(colours) + 1 if legacy else len(colours)

    rules = []
    cells = []
    for i in range(count):
        colour = colours[i] if i < len(colours) else 'undefined'
        rules.append(f'.px{i + 1}{{background-color: {colour}}} ')
        cells.append(f'<div class="px px{i + 1}"></div> ')

    return (
        f'{_HEAD}<style>* {{padding: 0;margin: 0;}} '
        f'.wrapper{{display:grid;{_columns(dimension, legacy)}}}'
        f'.px{{ aspect-ratio: 1 / 1;}}{"".join(rules)}</style>\n'
        f'  </head><body><div class="wrapper">{"".join(cells)}</div></body></html>'
    )


def style_rules(document: str) -> list[tuple[int, str]]:
    """(index, colour) for every per-cell rule in a generated document."""
    return [(int(m.group(1)), m.group(2)) for m in _RULE_RE.finditer(document)]


def cell_indices(document: str) -> list[int]:
    """Class index of every cell element, in document order."""
    return [int(m.group(1)) for m in _CELL_RE.finditer(document)]
