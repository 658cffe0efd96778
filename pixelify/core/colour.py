"""Colour encoding between 8-bit RGB channels and #rrggbb strings."""

import re

_HEX6 = re.compile(r'^#?([0-9a-fA-F]{6})$')
_HEX3 = re.compile(r'^#?([0-9a-fA-F]{3})$')


def _clamp(value) -> int:
    return max(0, min(255, int(value)))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode three channels as '#rrggbb' (lowercase, zero-padded).

    Out-of-range channels are clamped to [0, 255] first.
    """
    return f'#{_clamp(r):02x}{_clamp(g):02x}{_clamp(b):02x}'


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Decode '#rrggbb', 'rrggbb' or '#rgb' into an (r, g, b) tuple."""
    value = text.strip()
    m = _HEX6.match(value)
    if m:
        digits = m.group(1)
    else:
        m = _HEX3.match(value)
        if not m:
            raise ValueError(f'Not a hex colour: {text!r}')
        digits = ''.join(c * 2 for c in m.group(1))
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def normalize_hex(text: str) -> str:
    """Canonical '#rrggbb' form of any accepted hex colour."""
    return rgb_to_hex(*hex_to_rgb(text))
